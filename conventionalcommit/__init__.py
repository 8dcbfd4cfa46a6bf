"""Conventional Commits message parsing.

Usage::

    from conventionalcommit import parse

    msg = parse(b"feat(api)!: drop v1\n\nBREAKING CHANGE: v1 is gone\n")
    assert msg.type == "feat"
    assert msg.is_breaking_change
"""

from conventionalcommit.message import (
    Buffer,
    ConventionalCommitError,
    EmptyMessageError,
    MessageParser,
    new_message,
    parse,
)
from conventionalcommit.models import Footer, Line, Message, Reference
from conventionalcommit.text import Lines, Paragraph, RawMessage, new_paragraphs

__version__ = "0.1.0"

__all__ = [
    "Buffer",
    "ConventionalCommitError",
    "EmptyMessageError",
    "Footer",
    "Line",
    "Lines",
    "Message",
    "MessageParser",
    "Paragraph",
    "RawMessage",
    "Reference",
    "new_message",
    "new_paragraphs",
    "parse",
]
