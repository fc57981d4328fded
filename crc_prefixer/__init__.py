# This file marks crc_prefixer as a Python package.
from crc_prefixer.algorithm import Crc16Algorithm, Crc16Table, PrefixSolver, solve_subset_xor

__all__ = [
    "Crc16Algorithm",
    "Crc16Table",
    "PrefixSolver",
    "solve_subset_xor",
]
