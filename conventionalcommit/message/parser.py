"""Conventional Commits message extraction."""

import re
from typing import Union

from conventionalcommit.message.buffer import Buffer
from conventionalcommit.message.footer import parse_footers
from conventionalcommit.models import Footer, Message, Reference
from conventionalcommit.text.lines import decode


class ConventionalCommitError(Exception):
    """Base exception for commit message parsing errors."""

    def __init__(self, reason: str):
        super().__init__(f"conventionalcommit: {reason}")
        self.reason = reason


class EmptyMessageError(ConventionalCommitError):
    """Exception raised when a message has no non-whitespace text."""

    def __init__(self):
        super().__init__("empty message")


class MessageParser:
    """Parser for Conventional Commits messages.

    The subject pattern is deliberately forgiving, so type, scope and
    description can still be pulled out of a subject that is not quite
    right. Anything it cannot make sense of is kept as plain text rather
    than rejected.

    Examples:
        feat(auth)!: drop password login
        fix: resolve memory leak
        docs (readme) : update installation steps
    """

    # Pattern for the subject: type(scope)!: description
    HEADER_TOKEN = re.compile(
        r"(?P<type>[^()\r\n]*?)"  # type, anything but parens
        r"(?:\((?P<scope>.*?)\)\s*)?"  # optional scope in parentheses
        r"(?P<breaking>!)?"  # optional breaking change marker
        r"\s*:\s"  # colon and a single whitespace
        r"(?P<description>.*)",  # description
        re.ASCII,
    )

    def parse(self, message: Union[bytes, str, None]) -> Message:
        """Parse a raw commit message.

        Args:
            message: The full commit message, in any line break style

        Returns:
            Message with every field populated on a best-effort basis

        Raises:
            EmptyMessageError: If the message contains no text at all
        """
        return self.parse_buffer(Buffer(message))

    def parse_buffer(self, buffer: Buffer) -> Message:
        """Build a Message from an already sectioned Buffer.

        Raises:
            EmptyMessageError: If the buffer has no head section
        """
        if buffer.line_count() == 0:
            raise EmptyMessageError()

        msg = Message()

        head = decode(buffer.head().join(b"\n"))
        match = self.HEADER_TOKEN.fullmatch(head)
        if match:
            msg.type = match.group("type").strip()
            msg.scope = (match.group("scope") or "").strip()
            msg.breaking = match.group("breaking") == "!"
            msg.description = match.group("description")
        else:
            msg.description = head

        msg.body = decode(buffer.body().join(b"\n"))

        for raw in parse_footers(buffer.foot()):
            name = decode(raw.name)
            value = decode(raw.value)

            if raw.is_reference:
                msg.references.append(Reference(name=name, value=value))
            elif Message.is_breaking_token(name):
                msg.breaking_changes.append(value)
            else:
                msg.footers.append(Footer(name=name, value=value))

        return msg


# Compiled patterns are read-only, so one parser can be shared freely.
_DEFAULT_PARSER = MessageParser()


def new_message(buffer: Buffer) -> Message:
    """Build a Message from a Buffer using the default parser."""
    return _DEFAULT_PARSER.parse_buffer(buffer)


def parse(message: Union[bytes, str, None]) -> Message:
    """Parse a Conventional Commits message.

    Raises:
        EmptyMessageError: If the message contains no text at all
    """
    return _DEFAULT_PARSER.parse(message)
