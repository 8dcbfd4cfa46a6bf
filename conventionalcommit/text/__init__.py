"""Line and paragraph tokenizing module."""

from conventionalcommit.text.lines import Lines, decode, ensure_bytes
from conventionalcommit.text.paragraph import Paragraph, new_paragraphs
from conventionalcommit.text.raw_message import RawMessage

__all__ = ["Lines", "Paragraph", "RawMessage", "decode", "ensure_bytes", "new_paragraphs"]
