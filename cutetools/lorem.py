"""Random lorem ipsum words, sentences and paragraphs."""

from __future__ import annotations

import random
from enum import IntEnum

LOREM_PREFIX = "Lorem ipsum dolor sit amet, "

WORDS = (
    "lorem", "ipsum", "dolor", "sit", "amet", "consectetur",
    "adipiscing", "elit", "sed", "do", "eiusmod", "tempor",
    "incididunt", "ut", "labore", "et", "dolore", "magna", "aliqua",
    "ut", "enim", "ad", "minim", "veniam", "quis", "nostrud",
    "exercitation", "ullamco", "laboris", "nisi", "ut", "aliquip",
    "ex", "ea", "commodo", "consequat", "duis", "aute", "irure",
    "dolor", "in", "reprehenderit", "in", "voluptate", "velit",
    "esse", "cillum", "dolore", "eu", "fugiat", "nulla", "pariatur",
    "excepteur", "sint", "occaecat", "cupidatat", "non", "proident",
    "sunt", "in", "culpa", "qui", "officia", "deserunt", "mollit",
    "anim", "id", "est", "laborum",
)


class LoremMode(IntEnum):
    WORDS = 0
    SENTENCES = 1
    PARAGRAPHS = 2


def generate_sentence(
    min_words: int,
    max_words: int,
    capitalize: bool = True,
    rng: random.Random | None = None,
) -> str:
    """A sentence of random words ending in '.', '?' or '!'."""
    if min_words < 0 or min_words > max_words:
        raise ValueError("need 0 <= min_words <= max_words")
    rng = rng or random.Random()
    quantity = rng.randint(min_words, max_words)
    chosen = [rng.choice(WORDS) for _ in range(quantity)]
    if capitalize and chosen:
        chosen[0] = chosen[0][0].upper() + chosen[0][1:]
    end = rng.randint(0, 9)
    if end < 7:
        mark = "."
    elif end < 9:
        mark = "?"
    else:
        mark = "!"
    return " ".join(chosen) + mark


def generate(
    count: int,
    mode: LoremMode | int = LoremMode.WORDS,
    begin_with_lorem: bool = False,
    rng: random.Random | None = None,
) -> str:
    """Generate ``count`` words, sentences or paragraphs of placeholder text."""
    mode = LoremMode(mode)
    rng = rng or random.Random()

    if mode is LoremMode.WORDS:
        prefix = LOREM_PREFIX if begin_with_lorem else ""
        return prefix + generate_sentence(count, count, not begin_with_lorem, rng)

    lines: list[str] = []
    if mode is LoremMode.SENTENCES:
        start = 0
        if begin_with_lorem:
            lines.append(LOREM_PREFIX + generate_sentence(5, 30, False, rng))
            start = 1
        lines.extend(generate_sentence(5, 20, True, rng) for _ in range(start, count))
        return "\n".join(lines)

    for _ in range(count):
        start = 0
        if begin_with_lorem:
            lines.append(LOREM_PREFIX + generate_sentence(5, 30, False, rng))
            start = 1
        sentences = rng.randint(5, 30)
        lines.extend(generate_sentence(5, 20, True, rng) for _ in range(start, sentences))
        lines.append("\n")
    return "\n".join(lines)