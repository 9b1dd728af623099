"""An editable multi-line text buffer with a cursor."""

from __future__ import annotations

import sys
from dataclasses import dataclass

from .navigation import LineNavigation
from .text import grapheme_indices


def _switch_ascii_case(ch: str) -> str:
    if "A" <= ch <= "Z":
        return ch.lower()
    if "a" <= ch <= "z":
        return ch.upper()
    return ch


@dataclass
class LineBuffer(LineNavigation):
    """Text plus a cursor, with the edits a line editor performs on them.

    Positions are indices into the ``str``. Methods that take a raw position
    or range do not check that it lies on a grapheme boundary.
    """

    @classmethod
    def from_str(cls, text: str) -> LineBuffer:
        """Create a buffer holding ``text`` with the cursor at its end."""
        buffer = cls()
        buffer.insert_str(text)
        return buffer

    def copy(self) -> LineBuffer:
        """Return an independent copy of this buffer."""
        return LineBuffer(self.text, self.insertion_point)

    def set_buffer(self, text: str) -> None:
        """Replace the whole text and put the cursor at its end."""
        self.text = text
        self.insertion_point = len(text)

    def move_to_start(self) -> None:
        """Put the cursor at the start of the buffer."""
        self.insertion_point = 0

    def move_to_line_start(self) -> None:
        """Put the cursor before the first character of the current line."""
        self.insertion_point = self.text.rfind("\n", 0, self.insertion_point) + 1

    def move_to_line_end(self) -> None:
        """Put the cursor at the end of the current line, before any line break."""
        self.insertion_point = self.find_current_line_end()

    def move_to_end(self) -> None:
        """Put the cursor behind the last character."""
        self.insertion_point = len(self.text)

    def move_right(self) -> None:
        """Move the cursor behind the grapheme to its right."""
        self.insertion_point = self.grapheme_right_index()

    def move_left(self) -> None:
        """Move the cursor in front of the grapheme to its left."""
        self.insertion_point = self.grapheme_left_index()

    def move_word_left(self) -> None:
        """Move the cursor in front of the word to its left."""
        self.insertion_point = self.word_left_index()

    def move_big_word_left(self) -> None:
        """Move the cursor in front of the WORD to its left."""
        self.insertion_point = self.big_word_left_index()

    def move_word_right(self) -> None:
        """Move the cursor behind the word to its right."""
        self.insertion_point = self.word_right_index()

    def move_word_right_start(self) -> None:
        """Move the cursor to the start of the next word."""
        self.insertion_point = self.word_right_start_index()

    def move_big_word_right_start(self) -> None:
        """Move the cursor to the start of the next WORD."""
        self.insertion_point = self.big_word_right_start_index()

    def move_word_right_end(self) -> None:
        """Move the cursor onto the last grapheme of the next word."""
        self.insertion_point = self.word_right_end_index()

    def move_big_word_right_end(self) -> None:
        """Move the cursor onto the last grapheme of the next WORD."""
        self.insertion_point = self.big_word_right_end_index()

    def insert_char(self, c: str) -> None:
        """Insert a character at the cursor and move right past it."""
        ip = self.insertion_point
        self.text = self.text[:ip] + c + self.text[ip:]
        self.move_right()

    def insert_str(self, text: str) -> None:
        """Insert ``text`` at the cursor and put the cursor at its end."""
        ip = self.insertion_point
        self.text = self.text[:ip] + text + self.text[ip:]
        self.insertion_point = ip + len(text)

    def insert_newline(self) -> None:
        """Insert the platform's line break: CRLF on Windows, LF elsewhere."""
        if sys.platform == "win32":
            self.insert_str("\r\n")
        else:
            self.insert_char("\n")

    def clear(self) -> None:
        """Empty the buffer and reset the cursor."""
        self.text = ""
        self.insertion_point = 0

    def clear_to_end(self) -> None:
        """Remove everything from the cursor to the end of the buffer."""
        self.text = self.text[: self.insertion_point]

    def clear_to_line_end(self) -> None:
        """Remove from the cursor to the end of the line, keeping the line break."""
        self.clear_range(self.insertion_point, self.find_current_line_end())

    def clear_to_insertion_point(self) -> None:
        """Remove everything before the cursor and put the cursor at the start."""
        self.clear_range(0, self.insertion_point)
        self.insertion_point = 0

    def clear_range(self, start: int, end: int | None = None) -> None:
        """Remove ``text[start:end]`` without moving the cursor."""
        self.replace_range(start, end, "")

    def replace_range(self, start: int, end: int | None, replacement: str) -> None:
        """Replace ``text[start:end]`` with ``replacement`` without moving the cursor."""
        if end is None:
            end = len(self.text)
        if not 0 <= start <= end <= len(self.text):
            raise IndexError(f"range {start}..{end} out of bounds for length {len(self.text)}")
        self.text = self.text[:start] + replacement + self.text[end:]

    def _map_word(self, transform) -> None:
        start, end = self.current_word_range()
        self.replace_range(start, end, transform(self.text[start:end]))
        self.move_word_right()

    def uppercase_word(self) -> None:
        """Uppercase the current word and move behind it."""
        self._map_word(str.upper)

    def lowercase_word(self) -> None:
        """Lowercase the current word and move behind it."""
        self._map_word(str.lower)

    def switchcase_char(self) -> None:
        """Switch the ASCII case of the grapheme under the cursor and move right."""
        ip = self.insertion_point
        right = self.grapheme_right_index()
        if right > ip:
            swapped = "".join(_switch_ascii_case(ch) for ch in self.text[ip:right])
            self.replace_range(ip, right, swapped)
            self.move_right()

    def capitalize_char(self) -> None:
        """Uppercase the grapheme under the cursor, skipping whitespace first, and move right."""
        if self.on_whitespace():
            self.move_word_right()
            self.move_word_left()
        ip = self.insertion_point
        right = self.grapheme_right_index()
        if right > ip:
            self.replace_range(ip, right, self.text[ip:right].upper())
            self.move_right()

    def delete_left_grapheme(self) -> None:
        """Delete the grapheme left of the cursor."""
        left = self.grapheme_left_index()
        ip = self.insertion_point
        if left < ip:
            self.clear_range(left, ip)
            self.insertion_point = left

    def delete_right_grapheme(self) -> None:
        """Delete the grapheme right of the cursor."""
        right = self.grapheme_right_index()
        ip = self.insertion_point
        if right > ip:
            self.clear_range(ip, right)

    def delete_word_left(self) -> None:
        """Delete back to the start of the word left of the cursor."""
        left = self.word_left_index()
        self.clear_range(left, self.insertion_point)
        self.insertion_point = left

    def delete_word_right(self) -> None:
        """Delete up to the end of the word right of the cursor."""
        self.clear_range(self.insertion_point, self.word_right_index())

    def swap_words(self) -> None:
        """Swap the current word with the word to its right."""
        first = self.current_word_range()
        self.move_word_right()
        second = self.current_word_range()
        if first != second:
            self.move_word_left()
            word_1 = self.text[first[0] : first[1]]
            word_2 = self.text[second[0] : second[1]]
            self.replace_range(second[0], second[1], word_1)
            self.replace_range(first[0], first[1], word_2)

    def swap_graphemes(self) -> None:
        """Swap the graphemes around the cursor and move behind them."""
        initial = self.insertion_point
        if initial == 0:
            self.move_right()
        elif initial == len(self.text):
            self.move_left()

        updated = self.insertion_point
        first_start = self.grapheme_left_index()
        second_end = self.grapheme_right_index()

        if first_start < updated < second_end:
            grapheme_1 = self.text[first_start:updated]
            grapheme_2 = self.text[updated:second_end]
            self.replace_range(updated, second_end, grapheme_1)
            self.replace_range(first_start, updated, grapheme_2)
            self.insertion_point = second_end
        else:
            self.insertion_point = updated

    def _grapheme_column(self, line_start: int) -> int:
        return sum(1 for _ in grapheme_indices(self.text[line_start : self.insertion_point]))

    def move_line_up(self) -> None:
        """Move the cursor to the same grapheme column on the previous line."""
        if self.is_cursor_at_first_line():
            return
        old_start, _ = self.current_line_range()
        column = self._grapheme_column(old_start)

        self.insertion_point = old_start
        self.move_left()

        new_start, new_end = self.current_line_range()
        target = new_start
        for count, (index, _) in enumerate(grapheme_indices(self.text[new_start:new_end])):
            if count > column:
                break
            target = new_start + index
        self.insertion_point = target

    def move_line_down(self) -> None:
        """Move the cursor to the same grapheme column on the next line."""
        if self.is_cursor_at_last_line():
            return
        old_start, old_end = self.current_line_range()
        column = self._grapheme_column(old_start)

        self.insertion_point = old_end

        new_start, new_end = self.current_line_range()
        for count, (index, _) in enumerate(grapheme_indices(self.text[new_start:new_end])):
            if count == column:
                self.insertion_point = new_start + index
                return
        self.insertion_point = self.find_current_line_end()

    def move_right_until(self, c: str, current_line: bool) -> int:
        """Move onto the next ``c`` to the right; return the cursor position."""
        index = self.find_char_right(c, current_line)
        if index is not None:
            self.insertion_point = index
        return self.insertion_point

    def move_right_before(self, c: str, current_line: bool) -> int:
        """Move just before the next ``c`` to the right; return the cursor position."""
        index = self.find_char_right(c, current_line)
        if index is not None:
            self.insertion_point = index
            self.insertion_point = self.grapheme_left_index()
        return self.insertion_point

    def move_left_until(self, c: str, current_line: bool) -> int:
        """Move onto the previous ``c`` to the left; return the cursor position."""
        index = self.find_char_left(c, current_line)
        if index is not None:
            self.insertion_point = index
        return self.insertion_point

    def move_left_before(self, c: str, current_line: bool) -> int:
        """Move just after the previous ``c`` to the left; return the cursor position."""
        index = self.find_char_left(c, current_line)
        if index is not None:
            self.insertion_point = index + len(c)
        return self.insertion_point

    def delete_right_until_char(self, c: str, current_line: bool) -> None:
        """Delete from the cursor through the next ``c`` to the right."""
        index = self.find_char_right(c, current_line)
        if index is not None:
            self.clear_range(self.insertion_point, index + len(c))

    def delete_right_before_char(self, c: str, current_line: bool) -> None:
        """Delete from the cursor up to the next ``c`` to the right."""
        index = self.find_char_right(c, current_line)
        if index is not None:
            self.clear_range(self.insertion_point, index)

    def delete_left_until_char(self, c: str, current_line: bool) -> None:
        """Delete from the previous ``c`` to the left up to the cursor."""
        index = self.find_char_left(c, current_line)
        if index is not None:
            self.clear_range(index, self.insertion_point)
            self.insertion_point = index

    def delete_left_before_char(self, c: str, current_line: bool) -> None:
        """Delete from just after the previous ``c`` to the left up to the cursor."""
        index = self.find_char_left(c, current_line)
        if index is not None:
            after = index + len(c)
            self.clear_range(after, self.insertion_point)
            self.insertion_point = after