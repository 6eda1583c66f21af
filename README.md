# texted

`texted` is the core of a headless text editor. It keeps text in a `Buffer`
with a *point* (the cursor) and a *mark*, both 1-based, and provides
Emacs-style functions that move through the buffer, edit it, search it and
work with the region between point and mark.

Every editing function has the same shape: it takes a sequence of arguments
and the buffer it works on, and returns a value. Functions that only change
the buffer return an empty string; functions that report positions return an
`int`; `looking_at` and `looking_back` return `Symbol("t")` or
`Symbol("nil")`. A wrong number or type of arguments, a failed search or an
invalid regular expression raises `texted.core.BuiltinError`.

## Installation

```
pip install .
```

Tests run with pytest (`pip install .[test]`, then `pytest`).

## Example

```python
from texted.core import Buffer
from texted.editing import insert
from texted.movement import goto_char
from texted.position import buffer_substring, point

buffer = Buffer("hello world")
goto_char([6], buffer)
insert([" beautiful"], buffer)

print(buffer_substring([1, -1], buffer))  # hello beautiful world
print(point([], buffer))                  # 16
```

A search records its match, so it can be replaced afterwards:

```python
from texted.core import Buffer
from texted.search import replace_match, search_forward

buffer = Buffer("Hello old world")
search_forward(["old"], buffer)
replace_match(["new"], buffer)
print(buffer.content)  # Hello new world
```

## Modules

- `texted.core` – `Buffer` (with `content`, `point`, `mark`, `insert()` and
  `record_match()`), `Symbol`, `BuiltinError`, and the argument helpers
  `optional_count`, `expect_no_args`, `expect_string`, `expect_number`.
- `texted.position` – `point`, `mark`, `point_min`, `point_max`,
  `buffer_size`, `buffer_substring` (an end of `-1` means the end of the buffer).
- `texted.movement` – `forward_char`, `backward_char`, `forward_word`,
  `backward_word`, `beginning_of_buffer`, `end_of_buffer`,
  `beginning_of_line`, `end_of_line`, `goto_char`, `goto_line`.
  Positions are clamped to the buffer.
- `texted.editing` – `insert`, `delete_char`, `delete_backward_char`,
  `delete_line`, `delete_region`, `kill_line`, `kill_word`,
  `backward_kill_word`, `replace_region`.
- `texted.region` – `set_mark`, `exchange_point_and_mark`,
  `region_beginning`, `region_end`, `mark_line`, `mark_word`,
  `mark_whole_buffer`.
- `texted.search` – `search_forward`, `search_backward`,
  `re_search_forward`, `re_search_backward` (Python `re` syntax),
  `replace_match`, `looking_at`, `looking_back`. The last two fall back to
  literal matching when the pattern is not a valid regular expression.
- `texted.lines` – `current_column`, `line_number_at_pos`.
- `texted.textfuncs` – string functions `capitalize`, `concat`, `downcase`,
  `length`.
- `texted.docs` – the documentation registry.

Words, for the word functions, are runs of ASCII letters.

## Documentation lookup

Each function module registers documentation for its functions when it is
imported: a summary, a description, parameters, examples and related
functions. Lookups only find functions whose module has been imported.

```python
import texted.search  # registers the search documentation
from texted.docs import format_function_doc, get_documentation, get_documentation_by_category

print(format_function_doc(get_documentation("search-forward")))

for entry in get_documentation_by_category("search"):
    print(entry.name, "-", entry.summary)
```

`format_function_list(docs, category, verbose)` renders a list, grouped by
category when `verbose` is true. `show_function_doc(name)` and
`list_functions(category, verbose)` print the same Markdown, and raise
`LookupError` for an unknown function or an empty category.

## What this package does not do

`texted` has no script language: it does not parse or evaluate scripts in
any text format, and there is no interpreter that runs a sequence of
commands on a buffer. It has no command-line program, does not edit files
in place, and offers no server interface. The functions are called directly
from Python on a `Buffer` you create.