# vardump

Building blocks for turning values into compact, readable text for debug
output. Each formatter keeps to a maximum line width and a maximum nesting
depth. A value that does not fit on one line is laid out over several
indented lines. The output can carry ANSI escape sequences, and each one is
chosen by the syntactic role of a piece of text: numbers, brackets, operators,
members and so on.

## Installing

    pip install .

To install with the test dependencies:

    pip install .[test]

## Options

`vardump.options.Options` is a dataclass that controls the output:

- `max_line_width`: the widest line the layout aims for. Default 160.
- `max_depth`: the deepest nesting level that is rendered in full. Deeper containers are shown as `...`. Default 4.
- `max_iteration_count`: default 16. The formatters here do not read it.
- `enable_asterisk`: default `False`. The formatters here do not read it.
- `print_expr`: default `True`. The formatters here do not read it.
- `es_style`: an `EsStyle` value. `EsStyle.BY_SYNTAX` (the default) adds escape sequences. `EsStyle.NO_ES` leaves the text plain.
- `es_value`: an `EsValue` that holds the escape sequence for each role:
  - `log`
  - `expression`
  - `reserved`
  - `number`
  - `character`
  - `op`
  - `identifier`
  - `member`
  - `unsupported`
  - `bracket_by_depth`, a list of sequences that the brackets cycle through by depth.

`Options.use_es()` returns `True` when escape sequences are written.

## Colouring

`vardump.escape.Painter(options)` wraps a piece of text for one role. It has
these methods:

- `log`
- `expression`
- `reserved`
- `number`
- `character`
- `op`
- `identifier`
- `member`
- `unsupported`
- `bracket(s, depth)`
- `apply(es, s)`

When colour is on, the text is placed between two resets (`\x1b[0m`), with the
role's sequence after the first reset. When colour is off, the text is
returned unchanged.

## Measuring text

`vardump.text` measures text without counting escape sequences:

- `has_newline(s)`
- `visible_length(s, use_es)`
- `first_line_length(s, use_es)`
- `last_line_length(s, use_es, additional_first_line_length=0)`

## Skipping elements

`vardump.skip.skip_items(items, skip_size)` walks an iterable and yields
`SkipItem(skip, value, index)` tuples. `skip_size(index, size)` receives the
current index and a function that returns the number of items. It returns:

- `0` to move on to the next item.
- A positive number to jump that many items ahead. The current item is then reported with `skip=True`.
- `STOP` (`-1`) to end the walk.

## Formatters

| Module | Function | What it formats |
| --- | --- | --- |
| `vardump.arithmetic` | `export_bool` | `true` / `false` |
| `vardump.arithmetic` | `export_char` | A character in single quotes |
| `vardump.arithmetic` | `export_int` | An integer, with an optional `IntStyle` |
| `vardump.arithmetic` | `export_float` | A float with six decimal places |
| `vardump.strings` | `export_string` | A string in `"`, or in backticks when it holds `"` or a line feed |
| `vardump.enums` | `export_enum` | An enum member, looked up in a table of names (`ES_STYLE_NAMES` for `EsStyle`) |
| `vardump.tuples` | `export_tuple` | A sequence as `( a, b )`, or one element per line |
| `vardump.mapping` | `export_map` | A mapping as `{ k: v }`, or one entry per line |
| `vardump.mapping` | `export_multimap` | Key/value pairs, grouped by key, with each key's count shown |
| `vardump.es_value` | `export_es_value_string` | One escape sequence, with ESC written as `\e` |
| `vardump.es_value` | `export_es_value_vector` | A list of escape sequences |

`IntStyle(base=16, digits=0, chunk=0, space_fill=False, support_negative=False)`
accepts bases from 2 to 36. It raises `ValueError` for any other base, or for a
negative `digits` or `chunk`.

A formatter that is given `fail_on_newline=True` returns `"\n"` when its output
would need more than one line. The caller can then lay the value out again.

The formatters for nested values do not format the elements themselves. The
caller passes callbacks of the form
`(value, indent, last_line_length, current_depth, fail_on_newline) -> str`:

- `export_tuple` takes `export_item`.
- `export_map` and `export_multimap` take `export_key` and `export_value`.

`export_map`, `export_multimap` and `export_es_value_vector` take a
`skip_size` function, as described under "Skipping elements". The default,
`vardump.mapping.show_all`, shows every element.

## Example

```python
from vardump.options import Options, EsStyle
from vardump.arithmetic import IntStyle, export_int

opts = Options(es_style=EsStyle.NO_ES)
print(export_int(255, opts, IntStyle(base=16, digits=4)))  # 00ff _16
```

## What it does not do

The package has no single entry point that takes an arbitrary value and works
out how to print it. It provides no command-line tool, and no log labels or
expression printing. It has no formatters for lists, sets, objects, pointers
or queues. You choose a formatter for each value yourself, and you join them
together through the callbacks.