from .hex_message import (
    CHECKSUM_SIZE,
    PrefixResult,
    analyze_hex_message,
    analyze_message,
    append_checksum,
    format_prefix,
    hex_string_to_bytes,
    split_checksum,
)

__all__ = [
    "CHECKSUM_SIZE",
    "PrefixResult",
    "analyze_hex_message",
    "analyze_message",
    "append_checksum",
    "format_prefix",
    "hex_string_to_bytes",
    "split_checksum",
]
