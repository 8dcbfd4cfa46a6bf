"""Paragraph grouping of commit message lines."""

from dataclasses import dataclass, field

from conventionalcommit.text.lines import Lines


@dataclass(frozen=True)
class Paragraph:
    """A continuous run of lines which are neither empty nor whitespace only."""

    lines: Lines = field(default_factory=Lines)

    @property
    def first_number(self) -> int:
        """Line number of the first line, or 0 for an empty paragraph."""
        return self.lines[0].number if self.lines else 0

    @property
    def last_number(self) -> int:
        """Line number of the last line, or 0 for an empty paragraph."""
        return self.lines[-1].number if self.lines else 0


def new_paragraphs(lines: Lines) -> list[Paragraph]:
    """Group lines into paragraphs, using blank lines as separators.

    Blank lines never appear inside a paragraph, and runs of blank lines
    (including trailing ones) never produce an empty paragraph.
    """
    paragraphs = []

    current = []
    for line in lines:
        if not line.is_blank:
            current.append(line)
        elif current:
            paragraphs.append(Paragraph(lines=Lines(current)))
            current = []

    if current:
        paragraphs.append(Paragraph(lines=Lines(current)))

    return paragraphs
