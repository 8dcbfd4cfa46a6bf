"""Footer grammar for the foot section of a commit message."""

import re
from dataclasses import dataclass

from conventionalcommit.text.lines import Lines

# Matches the first line of any Conventional Commit footer.
#
# Valid footer tokens:
#
#   Approved-by: John Carter
#   ReviewedBy: Noctis
#   Fixes #49
#   Reverts #SOL-42
#   BREAKING CHANGE: Flux capacitor no longer exists.
#   BREAKING-CHANGE: Time will flow backwards
#
# Invalid footer tokens:
#
#   Approved-by:
#   Approved-by:John Carter
#   Approved by: John Carter
#     ReviewedBy: Noctis
#   Fixes#49
#   Fixes #
#   Fixes 49
#   BREAKING CHANGE:Flux capacitor no longer exists.
#   Breaking Change: Flux capacitor no longer exists.
FOOTER_TOKEN = re.compile(
    rb"^(?P<token>[\w-]+|BREAKING[\s-]CHANGE)"  # token
    rb"(?::\s+|\s+(?P<reference>#))"  # ": " or " #"
    rb"(?P<value>.+)$"  # value
)


@dataclass
class RawFooter:
    """A footer before it is sorted into footers, references or breaking changes."""

    name: bytes
    value: bytes
    is_reference: bool = False


def is_footer_start(content: bytes) -> bool:
    """Check whether a single line of content starts a footer."""
    return FOOTER_TOKEN.match(content) is not None


def parse_footers(lines: Lines) -> list[RawFooter]:
    """Parse the lines of a foot section into raw footers.

    Each line matching FOOTER_TOKEN starts a new footer. Any other line is
    a continuation of the open footer, appended to its value after a "\\n".
    Lines which do not match before any footer is open are dropped.

    Args:
        lines: Lines of the foot section

    Returns:
        RawFooter entries in the order they appear
    """
    footers = []
    current = None

    for line in lines:
        match = FOOTER_TOKEN.match(line.content)
        if match:
            if current is not None:
                footers.append(current)

            is_reference = match.group("reference") is not None
            value = match.group("value")
            if is_reference:
                value = b"#" + value

            current = RawFooter(
                name=match.group("token"),
                value=value,
                is_reference=is_reference,
            )
        elif current is not None:
            current.value += b"\n" + line.content

    if current is not None:
        footers.append(current)

    return footers
