"""Shared exception types."""

from .exceptions import (
    CrcPrefixerException,
    MalformedMessageException,
    PrefixNotFoundException,
)

__all__ = [
    "CrcPrefixerException",
    "MalformedMessageException",
    "PrefixNotFoundException",
]
