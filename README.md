# linekit

The text-handling core of a terminal line editor, with no terminal attached. It contains:

- Unicode segmentation helpers for grapheme clusters and word boundaries (`linekit.text`).
- Read-only cursor queries over multi-line text (`linekit.navigation`).
- An editable text buffer with a cursor. It supports grapheme, word and line motions, vi- and emacs-style edits, case changes, swaps and character-search deletions (`linekit.line_buffer`).
- A linear undo/redo stack (`linekit.edit_stack`).
- A clipboard that remembers how its content should be pasted (`linekit.clipboard`).

Cursor positions are indices into the Python `str`, so they count code points. Grapheme and word motions never stop inside a cluster such as an emoji with modifiers or a `\r\n` pair.

## Installation

```
pip install linekit
```

The only runtime dependency is `regex`.

## Text segmentation

```python
from linekit.text import grapheme_indices, word_bound_indices, is_whitespace_str

list(word_bound_indices("abc def"))   # [(0, 'abc'), (3, ' '), (4, 'def')]
list(grapheme_indices("a\r\nb"))      # [(0, 'a'), (1, '\r\n'), (3, 'b')]
is_whitespace_str("  \t")             # True
```

- `word_bound_indices` splits text at Unicode word boundaries. Words, runs of spaces, line breaks and single punctuation marks each form their own segment.

## The line buffer

`LineBuffer` holds `text` and an `insertion_point`. It inherits every query of `LineNavigation`, for example:

- `word_left_index()`
- `current_line_range()`
- `find_char_right(c, current_line)`
- `is_cursor_at_first_line()`

It adds the methods that change the text or move the cursor.

```python
from linekit.line_buffer import LineBuffer

buf = LineBuffer.from_str("This is a test")
buf.move_word_left()
buf.uppercase_word()
print(buf.text)                 # "This is a TEST"

buf.set_buffer("line 1\nline 2")
buf.move_line_up()
print(buf.insertion_point)      # 6: same column, first line

buf.set_buffer("abc def ghi")
buf.move_to_start()
buf.delete_right_until_char("d", True)
print(buf.text)                 # "ef ghi"
```

Word motions come in two kinds:

- **word** motions (`move_word_left`, `move_word_right_start`, `move_word_right_end`, …) follow Unicode word boundaries.
- **big word** motions (`move_big_word_left`, `move_big_word_right_start`, `move_big_word_right_end`) treat any run of non-whitespace as one word, like vi's `B`, `W` and `E`.

`insert_newline()` inserts `\r\n` on Windows and `\n` elsewhere.

`clear_range` and `replace_range` do not move the cursor. They raise `IndexError` for a range outside the text.

`copy()` returns an independent buffer, which is useful for keeping snapshots in an undo stack.

## Undo and redo

`EditStack` keeps a list of values and a pointer to the current one:

- `undo()` and `redo()` move the pointer and return the value it lands on. They stay put at either end.
- `insert(value)` drops any entries beyond the pointer before appending.
- `reset()` returns to a history holding only the initial value.

```python
from linekit.edit_stack import EditStack

stack = EditStack("")
stack.insert("a")
stack.insert("ab")
stack.undo()      # "a"
stack.redo()      # "ab"
```

## Clipboards

`Clipboard` is the interface. `LocalClipboard` keeps its content in process memory, and `get_default_clipboard()` returns one.

Content is stored with a `ClipboardMode`:

- `NORMAL` means the content is inserted inline.
- `LINES` means it is inserted as whole lines.

```python
from linekit.clipboard import ClipboardMode, get_default_clipboard

cb = get_default_clipboard()
cb.set("test", ClipboardMode.NORMAL)
len(cb)           # 4
cb.get()          # ("test", ClipboardMode.NORMAL)
cb.clear()
```

## What this package does not do

linekit provides building blocks only. It does not include:

- An editor object that ties the buffer, the undo stack and the clipboard together. You decide when to push snapshots onto an `EditStack` and what to put into a `Clipboard`.
- Cut and paste commands. The buffer deletes text, but it does not copy the deleted text anywhere.
- Tab completion.
- Key bindings, terminal input or rendering.
- Access to the system clipboard.

## Running the tests

```
pip install -e ".[test]"
pytest
```