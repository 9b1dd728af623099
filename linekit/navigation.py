"""Read-only cursor and text queries over a multi-line buffer.

Positions are indices into the ``str`` and are counted in code points.
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import pairwise

from .text import grapheme_indices, is_whitespace_str, word_bound_indices


def _last_grapheme_index(text: str) -> int | None:
    last = None
    for index, _ in grapheme_indices(text):
        last = index
    return last


@dataclass
class LineNavigation:
    """Text plus a cursor, with queries that locate graphemes, words and lines."""

    text: str = ""
    insertion_point: int = 0

    def __len__(self) -> int:
        return len(self.text)

    def is_empty(self) -> bool:
        """Return True when the buffer holds no text."""
        return not self.text

    def is_valid(self) -> bool:
        """Return True if the text is encodable and the cursor is on a grapheme boundary."""
        ip = self.insertion_point
        if not 0 <= ip <= len(self.text):
            return False
        if ip != len(self.text) and not any(
            index == ip for index, _ in grapheme_indices(self.text)
        ):
            return False
        try:
            self.text.encode("utf-8")
        except UnicodeEncodeError:
            return False
        return True

    def line(self) -> int:
        """Zero-based number of the line the cursor is on."""
        return self.text.count("\n", 0, self.insertion_point)

    def num_lines(self) -> int:
        """Number of lines in the buffer."""
        return self.text.count("\n") + 1

    def ends_with(self, c: str) -> bool:
        """Return True if the buffer ends with ``c``."""
        return self.text.endswith(c)

    def find_current_line_end(self) -> int:
        """Position where the current line ends: before ``\\n``/``\\r\\n`` or at the end."""
        index = self.text.find("\n", self.insertion_point)
        if index == -1:
            return len(self.text)
        if index > 0 and self.text[index - 1] == "\r":
            return index - 1
        return index

    def grapheme_right_index(self) -> int:
        """Position behind the grapheme to the right of the cursor."""
        ip = self.insertion_point
        graphemes = grapheme_indices(self.text[ip:])
        next(graphemes, None)
        following = next(graphemes, None)
        return len(self.text) if following is None else ip + following[0]

    def grapheme_left_index(self) -> int:
        """Position in front of the grapheme to the left of the cursor."""
        last = _last_grapheme_index(self.text[: self.insertion_point])
        return 0 if last is None else last

    def word_right_index(self) -> int:
        """Position behind the next word to the right."""
        ip = self.insertion_point
        for index, word in word_bound_indices(self.text[ip:]):
            if not is_whitespace_str(word):
                return ip + index + len(word)
        return len(self.text)

    def big_word_right_index(self) -> int:
        """Position behind the next WORD to the right."""
        ip = self.insertion_point
        found_ws = False
        for index, word in word_bound_indices(self.text[ip:]):
            whitespace = is_whitespace_str(word)
            found_ws = found_ws or whitespace
            if found_ws and not whitespace:
                return ip + index + len(word)
        return len(self.text)

    def _last_grapheme_of_text(self) -> int:
        last = _last_grapheme_index(self.text)
        return 0 if last is None else last

    def word_right_end_index(self) -> int:
        """Position on the last grapheme of the next word to the right."""
        ip = self.insertion_point
        for index, word in word_bound_indices(self.text[ip:]):
            last = _last_grapheme_index(word)
            if last is None or is_whitespace_str(word):
                continue
            position = ip + index + last
            if position != ip:
                return position
        return self._last_grapheme_of_text()

    def big_word_right_end_index(self) -> int:
        """Position on the last grapheme of the next WORD to the right."""
        ip = self.insertion_point
        for (prev_index, prev_word), (_, word) in pairwise(
            word_bound_indices(self.text[ip:])
        ):
            if not is_whitespace_str(word):
                continue
            last = _last_grapheme_index(prev_word)
            if last is None:
                continue
            position = ip + prev_index + last
            if position != ip:
                return position
        return self._last_grapheme_of_text()

    def word_right_start_index(self) -> int:
        """Position in front of the next word to the right."""
        ip = self.insertion_point
        for index, word in word_bound_indices(self.text[ip:]):
            if index != 0 and not is_whitespace_str(word):
                return ip + index
        return len(self.text)

    def big_word_right_start_index(self) -> int:
        """Position in front of the next WORD to the right."""
        ip = self.insertion_point
        found_ws = False
        for index, word in word_bound_indices(self.text[ip:]):
            whitespace = is_whitespace_str(word)
            found_ws = found_ws or (index != 0 and whitespace)
            if found_ws and index != 0 and not whitespace:
                return ip + index
        return len(self.text)

    def word_left_index(self) -> int:
        """Position in front of the next word to the left."""
        return self._word_start_before(self.insertion_point)

    def _word_start_before(self, end: int) -> int:
        result = 0
        for index, word in word_bound_indices(self.text[:end]):
            if not is_whitespace_str(word):
                result = index
        return result

    def big_word_left_index(self) -> int:
        """Position in front of the next WORD to the left."""
        start: int | None = None
        for index, word in word_bound_indices(self.text[: self.insertion_point]):
            if is_whitespace_str(word):
                start = None
            elif start is None:
                start = index
        return 0 if start is None else start

    def next_whitespace(self) -> int:
        """Position of the next whitespace after the cursor's segment."""
        ip = self.insertion_point
        for index, word in word_bound_indices(self.text[ip:]):
            if index != 0 and is_whitespace_str(word):
                return ip + index
        return len(self.text)

    def on_whitespace(self) -> bool:
        """Return True if the character under the cursor is whitespace."""
        ch = self.text[self.insertion_point : self.insertion_point + 1]
        return bool(ch) and is_whitespace_str(ch)

    def grapheme_right(self) -> str:
        """The grapheme right of the cursor, or an empty string."""
        return self.text[self.insertion_point : self.grapheme_right_index()]

    def grapheme_left(self) -> str:
        """The grapheme left of the cursor, or an empty string."""
        return self.text[self.grapheme_left_index() : self.insertion_point]

    def current_word_range(self) -> tuple[int, int]:
        """``(start, end)`` of the word the cursor is on."""
        right = self.word_right_index()
        return self._word_start_before(right), right

    def current_line_range(self) -> tuple[int, int]:
        """``(start, end)`` of the current line, the end past its line break."""
        ip = self.insertion_point
        left = self.text.rfind("\n", 0, ip) + 1
        index = self.text.find("\n", ip)
        right = len(self.text) if index == -1 else index + 1
        return left, right

    def is_cursor_at_first_line(self) -> bool:
        """Return True if no line break precedes the cursor."""
        return "\n" not in self.text[: self.insertion_point]

    def is_cursor_at_last_line(self) -> bool:
        """Return True if no line break follows the cursor."""
        return "\n" not in self.text[self.insertion_point :]

    def find_char_right(self, c: str, current_line: bool) -> int | None:
        """Index of the first ``c`` after the grapheme under the cursor, or None."""
        start = self.grapheme_right_index()
        end = self.current_line_range()[1] if current_line else len(self.text)
        index = self.text.find(c, start, end)
        return None if index == -1 else index

    def find_char_left(self, c: str, current_line: bool) -> int | None:
        """Index of the last ``c`` before the cursor, or None."""
        start = self.current_line_range()[0] if current_line else 0
        index = self.text.rfind(c, start, self.insertion_point)
        return None if index == -1 else index