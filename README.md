# exatheme

Colour themes for terminal file listings. `exatheme` holds one style for
each part of a listing (file kinds, permissions, sizes, users, links, git
status, dates and so on) and lets users adjust them through the familiar
`LS_COLORS` variable and the richer `EXA_COLORS` variable.

It has no dependencies beyond the standard library.

## Installation

```
pip install exatheme
```

## Styles (`exatheme.style`)

A `Style` is an immutable value holding an optional foreground and
background colour and a set of attributes (bold, dimmed, italic, underline,
blink, reverse, hidden, strikethrough). Every modifier returns a new style.
Colours are `Colour` members (`BLACK`, `RED`, `GREEN`, `YELLOW`, `BLUE`,
`PURPLE`, `CYAN`, `WHITE`), 256-colour `Fixed` values, or 24-bit `RGB`
values. `Fixed` and `RGB` reject components outside 0 to 255 with
`ValueError`.

```python
from exatheme.style import Colour, Fixed, RGB, Style

Colour.RED.on(Colour.YELLOW)
Fixed(244).normal()
Style().fg(RGB(255, 100, 0)).italic()
```

## Parsing colour variables (`exatheme.lsc`)

`LSColors` splits a colon-separated string into key/value pairs, skipping
malformed entries, and each `Pair` turns its semicolon-separated ANSI codes
into a `Style`:

```python
from exatheme.lsc import LSColors

for pair in LSColors("di=34:*.txt=38;5;135").pairs():
    print(pair.key, pair.to_style())
```

Codes 1 to 9 (except 6) set attributes, 30–37 and 40–47 set basic
foreground and background colours, and `38;5;N` / `48;5;N` or
`38;2;R;G;B` / `48;2;R;G;B` set extended colours. Unknown or malformed
codes are ignored rather than reported.

## Interface styles (`exatheme.ui_styles`, `exatheme.default_theme`)

`UiStyles` groups the styles into `FileKinds`, `Permissions`, `Size`,
`Users`, `Links` and `Git`, plus single styles such as `punctuation`,
`date`, `inode`, `blocks`, `header` and `broken_path_overlay`.
`UiStyles.plain()` paints nothing; `default_theme(scale)` returns the
built-in colourful theme, where `ColourScale.FIXED` colours every size the
same and `ColourScale.GRADIENT` colours sizes by magnitude
(`colourful_size(scale)` gives just the size styles).

`UiStyles.set_ls(pair)` and `UiStyles.set_exa(pair)` apply a pair when its
key is known and return whether it was.

## Building a theme (`exatheme.theme`)

```python
import os
from exatheme.theme import Definitions, Options, UseColours
from exatheme.ui_styles import ColourScale

options = Options(
    use_colours=UseColours.AUTOMATIC,
    colour_scale=ColourScale.GRADIENT,
    definitions=Definitions(
        ls=os.environ.get("LS_COLORS"),
        exa=os.environ.get("EXA_COLORS"),
    ),
)
theme = options.to_theme(isatty=True, default_colours=None)

theme.colour_file("notes.txt")
```

With `UseColours.NEVER`, or `UseColours.AUTOMATIC` when output is not a
terminal, the theme is plain. Otherwise the default theme is used, amended
by the two variables: `LS_COLORS` may set the file-kind keys (`di`, `ex`,
`fi`, `pi`, `so`, `bd`, `cd`, `ln`, `or`), and `EXA_COLORS` may also set
the keys for permissions, sizes, users, links, git status, punctuation,
dates, inodes, blocks, headers, link paths, control characters and the
broken-path overlay (`bO`). `EXA_COLORS` is applied after `LS_COLORS`, so
it overrides it. Any other key is taken as a file-name glob, with later
globs taking precedence over earlier ones; a glob that cannot be parsed is
skipped with a warning through the `logging` module.

If `EXA_COLORS` is `reset` or starts with `reset:`, the file-type
colouriser passed as `default_colours` is not used. Otherwise user globs
are tried first and `default_colours` is the fallback.

A `Theme` also answers:

- `theme.size(prefix)` and `theme.unit(prefix)` for a `SizePrefix` or
  `None` (plain bytes);
- `theme.broken_filename()` and `theme.broken_control_char()`, which lay
  the broken-path overlay over the broken-symlink and control-character
  styles.

## File-name colourisers (`exatheme.filecolours`)

`ExtensionMappings` holds glob patterns with their styles (`add(pattern,
style)` raises `ValueError` for a malformed glob); `NoFileColours` never
picks a style; `ChainedFileColours(first, second)` falls back from one to
the other. `apply_overlay(base, overlay)` copies the overlay's colours and
switched-on attributes onto a base style.

## What it does not do

- It does not write escape sequences: a `Style` describes how text should
  look, and turning it into terminal output is left to the caller.
- It has no built-in table of file-type colours; pass your own colouriser
  as `default_colours` if you want one.
- It does not read the environment or the file system itself, and it has
  no command-line program.