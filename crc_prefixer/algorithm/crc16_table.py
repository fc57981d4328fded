from typing import Tuple


class Crc16Table:
    """
    Lookup table for the MSB-first CRC-16 with polynomial 0x1021 (X^16 + X^12 + X^5 + 1).

    Entry k holds the register contribution of byte k fed into the top of the
    register and clocked through 8 shift/XOR rounds. The table is built once
    when the instance is created and never changes afterwards, so a single
    instance can be shared by any number of engines.
    """
    CRC16_CCITT_POLY = 0x1021
    WIDTH = 16
    MASK = 0xFFFF
    TOP_BIT = 0x8000
    SHIFT = WIDTH - 8

    def __init__(self):
        self._entries: Tuple[int, ...] = tuple(
            Crc16Table.generate(i << Crc16Table.SHIFT) for i in range(256))

    @staticmethod
    def generate(value: int, rounds: int = 8) -> int:
        """
        Clocks the register value through the given number of single-bit rounds.

        Args:
            value: The 16-bit register contents.
            rounds: Number of bits to shift out.

        Returns:
            The register after the rounds, masked to 16 bits.
        """
        for _ in range(rounds):
            if value & Crc16Table.TOP_BIT:
                value = ((value << 1) & Crc16Table.MASK) ^ Crc16Table.CRC16_CCITT_POLY
            else:
                value = (value << 1) & Crc16Table.MASK
        return value

    @property
    def entries(self) -> Tuple[int, ...]:
        return self._entries

    def __getitem__(self, index: int) -> int:
        return self._entries[index]

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Crc16Table):
            return NotImplemented
        return self._entries == other._entries

    def __hash__(self) -> int:
        return hash(self._entries)

    def __repr__(self) -> str:
        return f"Crc16Table(poly=0x{Crc16Table.CRC16_CCITT_POLY:04X})"
