"""Configuration constants for conventionalcommit."""

import os

from dotenv import load_dotenv

# Load .env file from project root
load_dotenv()

# Text encoding used to decode message fields and encode str input
ENCODING = os.getenv("CONVENTIONALCOMMIT_ENCODING", "utf-8")

# Decode error handlers which never raise, so parsing only fails on empty messages
DECODE_ERROR_HANDLERS = ("replace", "surrogateescape", "ignore", "backslashreplace")


def decode_errors(value: str) -> str:
    """Validate a decode error handler name.

    Raises:
        ValueError: If the handler could raise while decoding
    """
    if value not in DECODE_ERROR_HANDLERS:
        raise ValueError(
            f"Invalid CONVENTIONALCOMMIT_DECODE_ERRORS: {value}. "
            f"Use one of: {', '.join(DECODE_ERROR_HANDLERS)}"
        )
    return value


DECODE_ERRORS = decode_errors(os.getenv("CONVENTIONALCOMMIT_DECODE_ERRORS", "replace"))

# Footer tokens which describe a breaking change
BREAKING_CHANGE_TOKENS = ("BREAKING CHANGE", "BREAKING-CHANGE")

# CLI settings
OUTPUT_FORMATS = ["text", "json"]
DEFAULT_OUTPUT_FORMAT = os.getenv("CONVENTIONALCOMMIT_FORMAT", "text")
LOG_MAX_COUNT = int(os.getenv("CONVENTIONALCOMMIT_LOG_MAX_COUNT", "50"))
