"""Line tokenizer which retains original line breaks."""

import re
from typing import Union

from conventionalcommit import config
from conventionalcommit.models import Line

# "\r\n" must come first so it is never split into two breaks.
LINE_BREAK_PATTERN = re.compile(rb"\r\n|\r|\n")


def ensure_bytes(content: Union[bytes, str, None]) -> bytes:
    """Return content as bytes, encoding str input with the configured encoding."""
    if content is None:
        return b""
    if isinstance(content, str):
        return content.encode(config.ENCODING)
    return bytes(content)


def decode(content: bytes) -> str:
    """Decode bytes to str without ever raising on invalid input."""
    return content.decode(config.ENCODING, errors=config.DECODE_ERRORS)


class Lines(tuple):
    """An ordered, immutable sequence of Line objects.

    Slicing returns another Lines, so section views taken from a message
    keep the helper methods below.
    """

    def __getitem__(self, index):
        item = super().__getitem__(index)
        if isinstance(index, slice):
            return Lines(item)
        return item

    def __repr__(self) -> str:
        return f"Lines({list(self)!r})"

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    @classmethod
    def from_bytes(cls, content: Union[bytes, str, None]) -> "Lines":
        """Split content into lines.

        Each of "\\n", "\\r\\n" and "\\r" ends a line, and may be freely mixed
        within one message. The final line always has an empty break, even
        when its content is empty. Empty content gives an empty Lines.

        Args:
            content: The raw commit message

        Returns:
            Lines which rebuild content exactly via to_bytes()
        """
        content = ensure_bytes(content)
        if not content:
            return cls()

        lines = []
        offset = 0
        for number, match in enumerate(LINE_BREAK_PATTERN.finditer(content), start=1):
            lines.append(
                Line(
                    number=number,
                    content=content[offset : match.start()],
                    linebreak=match.group(),
                )
            )
            offset = match.end()

        lines.append(Line(number=len(lines) + 1, content=content[offset:]))

        return cls(lines)

    def first_text_index(self) -> int:
        """Index of the first non-blank line, or -1 if there is none."""
        for i, line in enumerate(self):
            if not line.is_blank:
                return i
        return -1

    def last_text_index(self) -> int:
        """Index of the last non-blank line, or -1 if there is none."""
        for i in range(len(self) - 1, -1, -1):
            if not self[i].is_blank:
                return i
        return -1

    def trim(self) -> "Lines":
        """Return lines without leading and trailing blank lines."""
        first = self.first_text_index()
        if first == -1:
            return Lines()

        return self[first : self.last_text_index() + 1]

    def without_comments(self) -> "Lines":
        """Return lines minus any comment lines, keeping original numbers."""
        return Lines(line for line in self if not line.is_comment)

    def join(self, separator: bytes = b"\n") -> bytes:
        """Join line content with separator, ignoring original line breaks."""
        return separator.join(line.content for line in self)

    def to_bytes(self) -> bytes:
        """Combine all lines, retaining the original line breaks."""
        return b"".join(line.content + line.linebreak for line in self)

    def decode(self) -> str:
        """Combine all lines into a str, retaining the original line breaks."""
        return decode(self.to_bytes())
