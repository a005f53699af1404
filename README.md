# cutetools

A collection of everyday developer utilities, usable as a library or from
the command line.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Modules

- `cutetools.hashing` – digests of text taken as Latin-1 bytes. `HashType`
  lists MD5, SHA1, SHA256, SHA512, SHA3-256, SHA3-512, KECCAK256, KECCAK512,
  BLAKE2b256, BLAKE2b512 and BLAKE2s256. `compute_hash(text, hash_type)`
  returns the lower-case hex digest; `matches(text, hash_type, expected)`
  returns whether the digest equals `expected`, or `None` when `expected`
  is empty.
- `cutetools.number_bases` – one value shown as binary, decimal, octal,
  hexadecimal, ASCII and UTF-8 (`NumberBases`). Use `from_binary`,
  `from_decimal`, `from_octal`, `from_hexadecimal`, `from_ascii`,
  `from_utf8` or `from_value`. `parse_int` reads a signed 32-bit integer and
  gives 0 for anything invalid or out of range.
- `cutetools.gzip_codec` – `compress(text)` gzips UTF-8 text and returns
  base64; `decompress(encoded)` reverses it. `compress_bytes` and
  `decompress_bytes` work on raw bytes; `read_file_base64` and
  `write_base64_file` move base64 data to and from files.
- `cutetools.html_codec` – `encode` replaces `& > < " '` with entities,
  `decode` turns them back.
- `cutetools.json_format` – `format_json(text)` reformats a JSON object or
  array with sorted keys and four-space indentation; invalid input raises
  `JsonFormatError`, which carries a `message` and an `offset`.
- `cutetools.markup_format` – `format_markup(text, indent)` reindents
  well-formed HTML/XML; unparsable markup raises `MarkupError`.
- `cutetools.json_yaml` – `json_to_yaml(text, indent)` converts a JSON object
  to block-style YAML (indent 2 to 9, keys sorted); `yaml_to_json(text)`
  converts the first YAML mapping to indented JSON. A top-level value that is
  not an object/mapping gives an empty one. Errors raise `ConversionError`.
- `cutetools.lorem` – `generate(count, mode, begin_with_lorem, rng)` makes
  placeholder words, sentences or paragraphs (`LoremMode`);
  `generate_sentence` makes a single sentence.
- `cutetools.desktop_entry` – `DesktopEntry` holds the fields of a
  `[Desktop Entry]` group and `render()` writes it out;
  `parse_desktop_entry` and `load_desktop_entry` read one;
  `search_icons` lists the icon names found in the desktop files of
  `default_application_dirs()` or of given directories.
- `cutetools.image_convert` – `convert_image(source, target, fmt)` rewrites
  an image in another format; `supported_formats()` lists the writable ones.
- `cutetools.recent` – `RecentFiles`, a list of at most ten recent paths by
  default, and `TextDocument`, text bound to at most one file with `open`,
  `save`, `save_as`, `close` and `open_from_recent`. Saving with no file
  attached raises `NoFileError`.
- `cutetools.panes` – `PairedSession`, two `TextDocument`s side by side,
  addressed by `Pane.FIRST` and `Pane.SECOND`, each with its own recent list.
- `cutetools.navigation` – `PreviewHistory`, back and forward history of
  shown files (`visit`, `previous`, `next`, `current`).

## Library use

```python
from cutetools.hashing import HashType, compute_hash
from cutetools.html_codec import encode

compute_hash("hello", HashType.SHA256)
encode("<a href='x'>")   # "&lt;a href=&#x27;x&#x27;&gt;"
```

## Command line

The package installs a `cutetools` command:

```
cutetools --help
```

Subcommands that read input take a file name, or `-` (the default) for
standard input:

| Subcommand | Does |
| --- | --- |
| `hash [--type LABEL] [--check DIGEST]` | print the digest; exit 1 when `--check` differs |
| `json-format` | reformat a JSON document |
| `markup-format [--indent N]` | reindent HTML/XML markup |
| `json2yaml [--indent N]` | convert a JSON object to YAML |
| `yaml2json` | convert a YAML mapping to JSON |
| `html-encode`, `html-decode` | escape or unescape HTML special characters |
| `gzip`, `gunzip` | gzip text to base64, or inflate base64 gzip data |
| `lorem [--count N] [--mode words\|sentences\|paragraphs] [--lorem] [--seed N]` | generate placeholder text |
| `bases VALUE [--from bin\|dec\|oct\|hex\|ascii\|utf8]` | show a number in every base |
| `image-convert SOURCE TARGET [--format FMT]` | convert an image; the format defaults to the target's extension |
| `image-formats` | list writable image formats |
| `desktop-entry PATH` | print a `.desktop` file in normalised form |
| `desktop-icons [DIR ...]` | list icon names named by desktop files |

Errors are printed to standard error and the exit status is 1.

## What it does not do

- There is no graphical interface; every tool is a function or a subcommand.
- There is no formatting of program source code (C#, Java, JavaScript and
  the like) and no Markdown rendering; `PreviewHistory` only keeps track of
  which files were shown.
- Recent-file lists live in memory only; nothing is stored between runs.