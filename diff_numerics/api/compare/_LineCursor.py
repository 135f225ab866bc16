"""Comment-skipping line cursor over an open text file."""

from typing import TextIO

from ..text.line_is_comment import line_is_comment


class _LineCursor:
    """Yield non-comment lines one at a time, tracking the 1-based line number."""

    def __init__(self, stream: TextIO, comment_prefix: str):
        self._stream = stream
        self._comment_prefix = comment_prefix
        self.line_number = 0
        self.exhausted = False

    def next_line(self) -> str | None:
        """Advance to the next non-comment line.

        Returns:
            The line without its line terminator, or None at end of file
        """
        while not self.exhausted:
            raw = self._stream.readline()
            if not raw:
                self.exhausted = True
                break
            self.line_number += 1
            line = raw.rstrip("\r\n")
            if not line_is_comment(line, self._comment_prefix):
                return line
        return None
