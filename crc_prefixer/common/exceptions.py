class CrcPrefixerException(Exception):
    """Base class for errors raised by crc_prefixer outside the CRC arithmetic."""


class MalformedMessageException(CrcPrefixerException, ValueError):
    """Raised when a hex message cannot be turned into a body and checksum."""


class PrefixNotFoundException(CrcPrefixerException):
    """Raised when no 16-bit prefix reproduces the requested CRC difference."""

    def __init__(self, length: int, target: int):
        super().__init__(f"No prefix found for message length {length} and target 0x{target:04x}")
        self.length = length
        self.target = target
