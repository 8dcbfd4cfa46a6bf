"""Head, body and foot sections of a commit message."""

from typing import Union

from conventionalcommit.message.footer import is_footer_start
from conventionalcommit.text.lines import Lines


class Buffer:
    """A commit message split into its three sections.

    - Head is the first paragraph, holding the subject line. By git
      convention it is a single line, but multi-line heads are kept as-is.
    - Foot is the last paragraph, but only if its first line starts with a
      footer token. Otherwise the last paragraph belongs to the body.
    - Body is everything between head and foot, without surrounding blank
      lines.

    Section views are slices of the original lines; nothing is copied or
    modified.
    """

    def __init__(self, message: Union[bytes, str, None]):
        """Initialize the buffer.

        Args:
            message: The raw commit message
        """
        self._lines = Lines.from_bytes(message)

        # Offsets of the first and last lines with any non-whitespace text.
        self.first_line = 0
        self.last_line = 0
        # Number of lines in the first and last paragraphs.
        self.head_length = 0
        self.foot_length = 0

        if not self._lines:
            return

        first = self._lines.first_text_index()
        if first == -1:
            return

        self.first_line = first
        self.last_line = self._lines.last_text_index()

        for i in range(self.first_line, self.last_line + 1):
            if self._lines[i].is_blank:
                break
            self.head_length += 1

        # Stop short of the head so a single paragraph is never counted twice.
        last_length = 0
        i = self.last_line
        while i > self.first_line + self.head_length:
            if self._lines[i].is_blank:
                break
            last_length += 1
            i -= 1

        if last_length > 0:
            line = self._lines[self.last_line - last_length + 1]
            if is_footer_start(line.content):
                self.foot_length = last_length

    @property
    def all_lines(self) -> Lines:
        """Every line of the original message."""
        return self._lines

    def head(self) -> Lines:
        """Lines of the first paragraph."""
        return self._lines[self.first_line : self.first_line + self.head_length]

    def body(self) -> Lines:
        """Lines between head and foot, without leading or trailing blank lines."""
        if self.first_line == self.last_line:
            return Lines()

        first = self.first_line + self.head_length + 1
        last = self.last_line + 1 - self.foot_length

        return self._lines[first:last].trim()

    def foot(self) -> Lines:
        """Lines of the last paragraph if it is a footer block, else empty."""
        if self.foot_length == 0:
            return Lines()

        return self._lines[self.last_line - self.foot_length + 1 : self.last_line + 1]

    def lines(self) -> Lines:
        """All lines from the first to the last line with any text."""
        if self.head_length == 0:
            return Lines()

        return self._lines[self.first_line : self.last_line + 1]

    def line_count(self) -> int:
        """Number of lines from the first to the last line with any text."""
        if self.head_length == 0:
            return 0

        return self.last_line + 1 - self.first_line

    def to_bytes(self) -> bytes:
        """Render without leading and trailing whitespace-only lines.

        Indentation on the first text line is kept; only whole blank lines
        are dropped.
        """
        return self.lines().to_bytes()

    def decode(self) -> str:
        """Render as str without leading and trailing whitespace-only lines."""
        return self.lines().decode()

    def raw_bytes(self) -> bytes:
        """Render back into the exact bytes originally given."""
        return self._lines.to_bytes()

    def raw_string(self) -> str:
        """Render back into a str identical to the original message."""
        return self._lines.decode()
