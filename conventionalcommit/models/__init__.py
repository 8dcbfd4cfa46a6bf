"""Data models for conventionalcommit."""

from conventionalcommit.models.dataclasses import (
    Footer,
    Line,
    Message,
    Reference,
)

__all__ = ["Footer", "Line", "Message", "Reference"]
