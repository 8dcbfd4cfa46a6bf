"""Data models for conventional commit messages."""

from dataclasses import asdict, dataclass, field

from conventionalcommit.config import BREAKING_CHANGE_TOKENS


@dataclass(frozen=True)
class Line:
    """A single line of a commit message.

    Content never includes line break bytes. The break that ended the line
    is kept separately so the original message can be rebuilt byte for byte.
    """

    # 1-based, as shown by a text editor.
    number: int
    content: bytes = b""
    # One of b"\n", b"\r\n", b"\r", or b"" for the very last line.
    linebreak: bytes = b""

    @property
    def is_empty(self) -> bool:
        """True if the line has no content at all."""
        return len(self.content) == 0

    @property
    def is_blank(self) -> bool:
        """True if the line is empty or only whitespace, including Unicode spaces."""
        return len(self.content.decode("utf-8", errors="replace").strip()) == 0

    @property
    def is_comment(self) -> bool:
        """True if the first non-whitespace character is a "#"."""
        return self.content.lstrip().startswith(b"#")


@dataclass(frozen=True)
class Footer:
    """A "token: value" footer."""

    name: str
    value: str


@dataclass(frozen=True)
class Reference:
    """A "token #value" footer, such as "Fixes #42"."""

    name: str
    value: str


@dataclass
class Message:
    """A commit message in Conventional Commits form."""

    type: str = ""
    scope: str = ""
    description: str = ""
    body: str = ""
    footers: list[Footer] = field(default_factory=list)
    references: list[Reference] = field(default_factory=list)
    # Set by a "!" in the subject line only.
    breaking: bool = False
    breaking_changes: list[str] = field(default_factory=list)

    @property
    def is_breaking_change(self) -> bool:
        """True if the subject has "!" or any BREAKING CHANGE footer exists."""
        return self.breaking or len(self.breaking_changes) > 0

    def to_dict(self) -> dict:
        """Convert to a JSON-serializable dict."""
        data = asdict(self)
        data["is_breaking_change"] = self.is_breaking_change
        return data

    @staticmethod
    def is_breaking_token(name: str) -> bool:
        """Check whether a footer token marks a breaking change."""
        return name in BREAKING_CHANGE_TOKENS
