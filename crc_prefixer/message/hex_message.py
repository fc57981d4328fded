"""Helpers for messages that carry a trailing big-endian CRC-16.

A message is the body followed by two checksum bytes. analyze_message()
computes the target difference between the embedded checksum and the
zero-seeded CRC of the body, and recovers the register prefix for it.
"""
import logging
import re
from dataclasses import dataclass
from typing import Optional, Tuple

from crc_prefixer.algorithm.crc16_algorithm import Crc16Algorithm
from crc_prefixer.algorithm.prefix_solver import PrefixSolver
from crc_prefixer.common.exceptions import MalformedMessageException, PrefixNotFoundException

logger = logging.getLogger(__name__)

CHECKSUM_SIZE = 2

_SPACE = re.compile(r'\s+')
_HEX = re.compile(r'^[0-9a-fA-F]*$')


def hex_string_to_bytes(text: str) -> bytes:
    """Converts a string of hex digit pairs into bytes. Whitespace is ignored."""
    digits = _SPACE.sub('', text)
    if not _HEX.match(digits):
        raise MalformedMessageException(f"Invalid character in hex message: {text!r}")
    if len(digits) & 1:
        raise MalformedMessageException(
            f"Hex message must have an even number of digits, got {len(digits)}")
    return bytes.fromhex(digits)


def split_checksum(message: bytes) -> Tuple[bytes, int]:
    """Separates the body from the trailing big-endian CRC."""
    if len(message) < CHECKSUM_SIZE:
        raise MalformedMessageException(
            f"Message must contain at least {CHECKSUM_SIZE} checksum bytes, got {len(message)}")
    return bytes(message[:-CHECKSUM_SIZE]), int.from_bytes(message[-CHECKSUM_SIZE:], 'big')


def append_checksum(body: bytes, seed: int = 0, algorithm: Optional[Crc16Algorithm] = None) -> bytes:
    """Returns body followed by its CRC-16, calculated from seed."""
    if algorithm is None:
        algorithm = Crc16Algorithm()
    return bytes(body) + algorithm.calculate(body, seed).to_bytes(CHECKSUM_SIZE, 'big')


def format_prefix(value: int) -> str:
    return f"0x{value:04x}"


@dataclass(frozen=True)
class PrefixResult:
    body_length: int
    embedded_crc: int
    zero_seed_crc: int
    target: int
    prefix: int

    def formatted(self) -> str:
        return format_prefix(self.prefix)


def analyze_message(message: bytes, solver: Optional[PrefixSolver] = None) -> PrefixResult:
    """
    Finds the register prefix that makes the body of message produce its
    embedded checksum.

    Raises:
        MalformedMessageException: The message is shorter than its checksum.
        PrefixNotFoundException: No 16-bit prefix reproduces the checksum.
    """
    if solver is None:
        solver = PrefixSolver()
    body, embedded_crc = split_checksum(message)
    zero_seed_crc = solver.algorithm.calculate(body)
    target = zero_seed_crc ^ embedded_crc
    prefix = solver.find_prefix(len(body), target)
    if prefix is None:
        raise PrefixNotFoundException(len(body), target)
    logger.debug("Body of %d bytes, embedded crc 0x%04x, zero-seed crc 0x%04x, prefix 0x%04x",
                 len(body), embedded_crc, zero_seed_crc, prefix)
    return PrefixResult(len(body), embedded_crc, zero_seed_crc, target, prefix)


def analyze_hex_message(text: str, solver: Optional[PrefixSolver] = None) -> PrefixResult:
    return analyze_message(hex_string_to_bytes(text), solver)
