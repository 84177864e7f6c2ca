# wireframe

Loads height-map files. The package also has the small text, number,
buffer and list helpers that the map loader is built on.

A map file is plain text. Each line is a row of space-separated integer
heights:

```
0 0 0 0
0 5 5 0
0 5 5 0
0 0 0 0
```

## Installing

```
pip install .
```

The package needs only the standard library.

## Loading a map

```python
from wireframe.mapfile import read_map

heights = read_map("map.fdf")
print(heights.cols, heights.rows)
print(heights.at(1, 2))   # column 1 of row 2
```

`wireframe.mapfile` provides:

- `read_map(path)` reads a file. Lines break on `\n` only. It raises
  `MapError` when the file cannot be opened or holds no rows.
- `parse_map(lines)` builds a `HeightMap` from an iterable of lines.
  The first line sets the number of columns. Shorter rows are padded
  with zeros and longer rows are cut to that width.
- `parse_row(line)` returns the leading integer of each field, and
  `count_columns(line)` returns the number of fields.
- `HeightMap` is a frozen grid, indexed as `grid[y][x]`. It has `cols`,
  `rows` and `at(x, y)`. `at` raises `IndexError` outside the grid.

Each field is read as a leading decimal integer. Anything after the
digits, such as a `,0xFF` colour suffix, is ignored.

## Helpers

- `wireframe.numbers`:
  - `atoi(text)` parses a leading decimal integer. It skips leading
    whitespace and honours a sign. The result wraps like a 32-bit int.
  - `itoa(n)` renders a 32-bit int in decimal.
- `wireframe.chars`: ASCII tests and case conversion. The functions are
  `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`,
  `is_sign`, `is_whitespace`, `to_lower` and `to_upper`. They take an
  int code or a one-character string.
- `wireframe.strings`: string functions with bounded copies and
  searches. The functions are `split`, `strchr`, `strrchr`, `strjoin`,
  `strlcpy`, `strlcat`, `strncmp`, `strnstr`, `strtrim`, `substr`,
  `strmapi` and `striteri`.
- `wireframe.memory`: byte operations on `bytearray`s. The functions
  are `memset`, `bzero`, `calloc`, `memchr`, `memcmp`, `memcpy` and
  `memmove`. `memmove` copies safely between overlapping regions of one
  buffer.
- `wireframe.linkedlist`: `LinkedList`, a singly linked list. It has
  `push_front`, `push_back`, `last`, `pop_front`, `clear`, `for_each`
  and `map`. It also supports `len()` and iteration.
- `wireframe.linereader`:
  - `LineReader(stream, buffer_size=1)` returns successive lines of a
    text or binary stream, newline included. Call `next_line()` to get
    the next line, or iterate over the reader.
  - `read_lines(stream, buffer_size)` is the generator form.
- `wireframe.printf`: a formatter for `%c %s %p %d %i %u %x %X %%`.
  - `format_string(fmt, *args)` returns the text.
  - `printf(fmt, *args, stream=None)` writes the text and returns its
    length.
  - `format_hex` and `format_pointer` render single values.
  - An unknown conversion or an unsuitable argument raises
    `FormatError`.

```python
from wireframe.printf import format_string

format_string("%s has %d rows (%x)", "map", 11, 255)
# 'map has 11 rows (ff)'
```

## What it does not do

The package has no viewer. There is no projection of a map, no
drawing, no window, no key or mouse handling, and no command to run.
It loads a map into a `HeightMap` and stops there.

## Tests

```
pip install ".[test]"
pytest
```