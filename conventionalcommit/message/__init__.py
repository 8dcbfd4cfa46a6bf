"""Commit message sectioning and extraction module."""

from conventionalcommit.message.buffer import Buffer
from conventionalcommit.message.footer import FOOTER_TOKEN, RawFooter, parse_footers
from conventionalcommit.message.parser import (
    ConventionalCommitError,
    EmptyMessageError,
    MessageParser,
    new_message,
    parse,
)

__all__ = [
    "Buffer",
    "ConventionalCommitError",
    "EmptyMessageError",
    "FOOTER_TOKEN",
    "MessageParser",
    "RawFooter",
    "new_message",
    "parse",
    "parse_footers",
]
