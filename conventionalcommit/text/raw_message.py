"""Raw commit message view: lines and paragraphs, without section semantics."""

from dataclasses import dataclass, field
from typing import Union

from conventionalcommit.text.lines import Lines
from conventionalcommit.text.paragraph import Paragraph, new_paragraphs


@dataclass(frozen=True)
class RawMessage:
    """A commit message broken into lines and paragraphs."""

    lines: Lines = field(default_factory=Lines)
    paragraphs: list[Paragraph] = field(default_factory=list)

    @classmethod
    def from_bytes(cls, message: Union[bytes, str, None]) -> "RawMessage":
        """Break message down into lines, grouping sequential text lines into paragraphs."""
        lines = Lines.from_bytes(message)
        if not lines:
            return cls()

        return cls(lines=lines, paragraphs=new_paragraphs(lines))

    def to_bytes(self) -> bytes:
        """Render back into the exact bytes originally given."""
        return self.lines.to_bytes()

    def decode(self) -> str:
        """Render back into a str identical to the original message."""
        return self.lines.decode()
