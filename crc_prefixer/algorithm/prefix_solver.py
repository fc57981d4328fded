import logging
from typing import List, Optional

from .crc16_algorithm import Crc16Algorithm
from .crc16_table import Crc16Table
from .gray_code_solver import solve_subset_xor

logger = logging.getLogger(__name__)


class PrefixSolver:
    """
    Recovers the CRC register prefix that makes an all-zero message of a given
    length produce a target CRC.

    Because the register update is linear over GF(2), prefix(a ^ b, L) equals
    prefix(a, L) ^ prefix(b, L). The 16 single-bit seeds therefore form a basis
    and any target is the XOR of a subset of their outputs.
    """
    BASIS_DIRECT = "direct"
    BASIS_SHIFT = "shift"
    BASIS_METHODS = (BASIS_DIRECT, BASIS_SHIFT)

    def __init__(self, algorithm: Optional[Crc16Algorithm] = None, basis_method: str = BASIS_DIRECT):
        if basis_method not in PrefixSolver.BASIS_METHODS:
            raise ValueError(f"Unknown basis method {basis_method!r}, expected one of {PrefixSolver.BASIS_METHODS}")
        self._algorithm: Crc16Algorithm = algorithm if algorithm is not None else Crc16Algorithm()
        self._basis_method: str = basis_method
        self._selectors: List[int] = [1 << i for i in range(Crc16Table.WIDTH)]

    @property
    def algorithm(self) -> Crc16Algorithm:
        return self._algorithm

    @property
    def basis_method(self) -> str:
        return self._basis_method

    def build_basis(self, length: int) -> List[int]:
        if self._basis_method == PrefixSolver.BASIS_SHIFT:
            return self.build_basis_by_shift(length)
        return self.build_basis_direct(length)

    def build_basis_direct(self, length: int) -> List[int]:
        """Runs the prefix function once per single-bit seed: O(16 * length)."""
        return [self._algorithm.prefix(selector, length) for selector in self._selectors]

    def build_basis_by_shift(self, length: int) -> List[int]:
        """
        Runs the prefix function for seed 1 only and derives the other entries.

        Seed 1 << i is seed 1 << (i - 1) clocked one bit further, and clocking
        commutes with the zero-byte rounds, so each entry is the previous one
        put through a single shift/XOR round: O(length + 16).
        """
        value = self._algorithm.prefix(1, length)
        basis = [value]
        for _ in range(1, Crc16Table.WIDTH):
            value = Crc16Table.generate(value, rounds=1)
            basis.append(value)
        return basis

    def find_prefix(self, length: int, target: int) -> Optional[int]:
        """
        Finds the prefix P such that prefix(P, length) == target.

        Args:
            length: The message length in bytes.
            target: The 16-bit CRC difference to reproduce.

        Returns:
            The 16-bit prefix, or None when no combination of basis vectors
            matches (only possible for a rank-deficient basis).
        """
        if length < 0:
            raise ValueError("Message length cannot be negative.")
        if not 0 <= target <= Crc16Table.MASK:
            raise ValueError(f"Target must be a 16-bit value, got {target!r}")
        basis = self.build_basis(length)
        logger.debug("Basis for length %d: %s", length, " ".join(f"{v:04x}" for v in basis))
        result = solve_subset_xor(basis, target, self._selectors)
        if result is None:
            logger.debug("No prefix for length %d and target 0x%04x", length, target)
        else:
            logger.debug("Prefix for length %d and target 0x%04x is 0x%04x", length, target, result)
        return result

    def find_prefix_or_zero(self, length: int, target: int) -> int:
        """Same as find_prefix but returns 0 when nothing matches."""
        result = self.find_prefix(length, target)
        return 0 if result is None else result
