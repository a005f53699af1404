import random

import pytest

from cutetools.lorem import (
    LOREM_PREFIX,
    WORDS,
    LoremMode,
    generate,
    generate_sentence,
)


def _words_of(sentence):
    return sentence[:-1].split(" ")


@pytest.mark.parametrize("seed", range(10))
def test_sentence_shape(seed):
    rng = random.Random(seed)
    sentence = generate_sentence(5, 20, True, rng)
    assert sentence[-1] in ".?!"
    words = _words_of(sentence)
    assert 5 <= len(words) <= 20
    assert words[0][0].isupper()
    assert all(word.lower() in WORDS for word in words)


def test_sentence_without_capital():
    sentence = generate_sentence(3, 3, False, random.Random(1))
    assert sentence[0].islower()
    assert len(_words_of(sentence)) == 3


def test_sentence_varies_with_seed():
    sentences = {generate_sentence(4, 9, True, random.Random(seed)) for seed in range(20)}
    assert len(sentences) > 1


def test_sentence_rejects_bad_range():
    with pytest.raises(ValueError):
        generate_sentence(5, 2)


def test_word_mode_exact_count():
    text = generate(6, LoremMode.WORDS, False, random.Random(3))
    assert len(_words_of(text)) == 6
    assert text[0].isupper()


def test_word_mode_with_lorem_prefix():
    text = generate(4, LoremMode.WORDS, True, random.Random(3))
    assert text.startswith(LOREM_PREFIX)
    rest = text[len(LOREM_PREFIX):]
    assert len(_words_of(rest)) == 4
    assert rest[0].islower()


def test_sentence_mode_line_count():
    text = generate(5, LoremMode.SENTENCES, False, random.Random(2))
    lines = text.split("\n")
    assert len(lines) == 5
    assert all(line[-1] in ".?!" for line in lines)


def test_sentence_mode_with_lorem_first_line():
    text = generate(3, 1, True, random.Random(2))
    lines = text.split("\n")
    assert len(lines) == 3
    assert lines[0].startswith(LOREM_PREFIX)
    assert not lines[1].startswith(LOREM_PREFIX)


def test_paragraph_mode_separates_paragraphs():
    text = generate(3, LoremMode.PARAGRAPHS, False, random.Random(5))
    paragraphs = [p for p in text.split("\n\n\n") if p.strip()]
    assert len(paragraphs) == 3
    for paragraph in paragraphs:
        sentences = [s for s in paragraph.split("\n") if s]
        assert 5 <= len(sentences) <= 30


def test_paragraph_mode_each_begins_with_lorem():
    text = generate(2, LoremMode.PARAGRAPHS, True, random.Random(9))
    paragraphs = [p.strip("\n") for p in text.split("\n\n\n") if p.strip()]
    assert len(paragraphs) == 2
    assert all(p.startswith(LOREM_PREFIX) for p in paragraphs)


def test_invalid_mode():
    with pytest.raises(ValueError):
        generate(1, 7)