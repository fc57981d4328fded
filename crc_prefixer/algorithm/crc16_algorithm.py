from typing import Optional

from .crc16_table import Crc16Table


class Crc16Algorithm:
    """
    Implements CRC-16 calculation (polynomial 0x1021, MSB first, no final XOR).

    The engine holds a reference to a Crc16Table. Callers that create several
    engines can build the table once and pass it to each of them.
    """
    CRC16_CCITT_POLY = Crc16Table.CRC16_CCITT_POLY
    CRC16_INITIAL_VALUE = 0x0000

    def __init__(self, table: Optional[Crc16Table] = None):
        self._table: Crc16Table = table if table is not None else Crc16Table()

    @property
    def table(self) -> Crc16Table:
        return self._table

    def step(self, crc: int, byte_val: int) -> int:
        """Applies a single data byte to the register."""
        return self._table[((crc >> 8) ^ byte_val) & 0xFF] ^ ((crc << 8) & Crc16Table.MASK)

    def calculate(self, data: bytes, initial_value: int = CRC16_INITIAL_VALUE) -> int:
        """
        Calculates the CRC-16 of data using the lookup table.

        Args:
            data: The bytes over which to calculate the CRC.
            initial_value: The starting value of the CRC register (a prefix value).

        Returns:
            The calculated CRC-16 value.
        """
        _check_register(initial_value)
        crc = initial_value
        for byte_val in data:
            crc = self.step(crc, byte_val)
        return crc

    @staticmethod
    def calculate_bitwise(data: bytes, initial_value: int = CRC16_INITIAL_VALUE) -> int:
        """
        Calculates the same CRC-16 one bit at a time, without a table.
        """
        _check_register(initial_value)
        crc = initial_value
        for byte_val in data:
            # XOR the byte into the top 8 bits of the register
            crc ^= (byte_val << 8) & 0xFFFF
            for _ in range(8):
                if (crc & 0x8000) != 0:
                    crc = ((crc << 1) & 0xFFFF) ^ Crc16Algorithm.CRC16_CCITT_POLY
                else:
                    crc = (crc << 1) & 0xFFFF
        return crc

    def prefix(self, initial_value: int, length: int) -> int:
        """
        Calculates the CRC-16 of an all-zero message of the given length.

        Equivalent to calculate(bytes(length), initial_value) without building
        the zero buffer. The result is linear in initial_value over GF(2).
        """
        _check_register(initial_value)
        if length < 0:
            raise ValueError("Message length cannot be negative.")
        crc = initial_value
        for _ in range(length):
            crc = self.step(crc, 0)
        return crc


def _check_register(value: int) -> None:
    if not 0 <= value <= 0xFFFF:
        raise ValueError(f"CRC register value must be a 16-bit value, got {value!r}")
