"""CRC-16 engine and prefix recovery."""

from .crc16_table import Crc16Table
from .crc16_algorithm import Crc16Algorithm
from .gray_code_solver import gray_code, solve_subset_xor, toggled_bits, MAX_BASIS_SIZE
from .prefix_solver import PrefixSolver

__all__ = [
    "Crc16Table",
    "Crc16Algorithm",
    "PrefixSolver",
    "gray_code",
    "solve_subset_xor",
    "toggled_bits",
    "MAX_BASIS_SIZE",
]
