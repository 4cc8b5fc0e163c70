# asha

This package has two parts. The first is a front end for a small dependently
typed language: a lexer, a parser and diagnostics. The second is a model of a
text console that draws onto a framebuffer held in memory.

## Language front end

- `asha.source` provides `SourceFile`, `Span`, `LexerCursor` and
  `spanning(a, b)`. `SourceFile.line_col(offset)` turns a byte offset into a
  line and column, both counted from 1. `spanning` returns the smallest span
  that covers both of its arguments. It raises `ValueError` when they lie in
  different files.
- `asha.tokens` provides `TokenKind` and `Token`. `str(kind)` is the name
  shown in diagnostics, for example `` `->` `` or `lowercase identifier`.
  `Token.text` is the lexeme decoded from UTF-8.
- `asha.lexer` provides `Lexer`, an iterator over the tokens of a
  `SourceFile`:
  - An unrecognised character raises `LexError`. Iteration can resume after
    the error.
  - `read_all(limit=None)` collects tokens until the input ends, an error
    occurs or the limit is reached.
  - `eoi_span()` is the empty span at the lexer's current position.
- `asha.parser` provides `parse(tokens, eoi_span)`:
  - On success it returns `(root, [])`, where `root` is a `Root` built from
    the node classes in `asha.tree`.
  - Otherwise it returns `(None, [error])`. The error is a `ParseError` placed
    at the furthest point the grammar reached.
- `asha.errors` provides `LexError` and `ParseError`. Both are exceptions with
  `code()`, `severity()`, `help()` and `labels()`. `format_expected` lists the
  expected token kinds in prose.

```python
from asha.source import SourceFile
from asha.lexer import Lexer
from asha.parser import parse

src = SourceFile(id=0, name="main", source=b"def id (x : Nat) : Nat = x")
lexer = Lexer(src)
tokens = list(lexer)
tree, errors = parse(tokens, lexer.eoi_span())
```

A file is a sequence of `def`, `eval`, `record`, `extern`, `inductive`,
`class` and `instance` declarations.

Expressions include:

- lambdas (`\` or `λ`)
- `let ... in`
- binders: explicit `( )`, implicit `{ }` and instance `[ ]`
- pi and sigma types (`->`/`→` and `><`/`×`)
- arithmetic and comparison operators
- application and field projection
- qualified names (`a::b`)
- tuples, arrays, holes (`_`), and number and string literals

## Console model

- `asha.color` provides `Color` (the 16-colour palette) and `ColorCode`, which
  packs a foreground and a background colour into one byte.
- `asha.keyboard` covers PC scancode set 1 with `Key`, `UnknownKey`,
  `key_from_scancode`, `KeyEvent` and `KeyboardState`.
- `asha.font` provides `glyph(code)`, the eight rows of the 8×8 bitmap for an
  ASCII character.
- `asha.writer` provides `TextWriter`, which draws characters into a
  `bytearray` laid out as a `FramebufferInfo` describes. Three pixel formats
  are supported: RGB, BGR and grey. `color_to_rgb` gives the colour values
  used for drawing.
- `asha.tty` provides `Tty`, which turns scancodes into an editable input line
  after an optional shell prompt. It supports:
  - typing, with Shift and Caps Lock
  - Backspace
  - the left and right arrow keys
  - Enter, where `handle_input` returns the entered line as `bytes`.
- `asha.scancodes` provides `ScancodeQueue`, a 256-slot ring buffer of
  scancodes.
- `asha.boot` reads a memory map:
  - `parse_memory_map` decodes the `MemoryDescriptor` entries.
  - `find_free_region` picks the largest block of conventional memory.

## What this package does not do

- It has no command-line program.
- It does not type-check, elaborate or evaluate parsed programs. `parse` stops
  at the syntax tree.
- The console model draws only into a byte buffer in memory and takes
  scancodes only from its callers. It does not talk to a real display or
  keyboard.

## Tests

```
pip install -e .[test]
pytest
```