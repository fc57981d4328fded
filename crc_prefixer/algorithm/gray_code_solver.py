"""Subset-XOR search over a small basis using Gray-code ordering.

Given N basis vectors, finds a subset whose XOR equals a target value by
walking all 2**N subsets so that consecutive subsets differ in exactly one
member. Each step costs a single XOR instead of recomputing the subset.
"""
import logging
from typing import Iterator, Optional, Sequence

logger = logging.getLogger(__name__)

MAX_BASIS_SIZE = 24


def gray_code(index: int) -> int:
    """Returns the index-th value of the reflected binary Gray code."""
    return index ^ (index >> 1)


def toggled_bits(size: int) -> Iterator[int]:
    """
    Yields, for each step 1 .. 2**size - 1, the bit that flips between
    gray_code(step - 1) and gray_code(step). This is the position of the
    lowest set bit of the step counter.
    """
    for step in range(1, 1 << size):
        yield (step & -step).bit_length() - 1


def solve_subset_xor(basis: Sequence[int], target: int,
                     selectors: Optional[Sequence[int]] = None) -> Optional[int]:
    """
    Finds the subset of basis whose XOR equals target.

    Args:
        basis: Up to MAX_BASIS_SIZE vectors.
        target: The value the subset XOR must reach.
        selectors: Value accumulated alongside each basis vector. Defaults to
            1 << i, so the result is the bit mask of the chosen subset.

    Returns:
        The XOR of the selectors of the matching subset, or None if no subset
        matches. The empty subset is tried first, so target 0 yields 0.
    """
    size = len(basis)
    if not 1 <= size <= MAX_BASIS_SIZE:
        raise ValueError(f"Basis size must be between 1 and {MAX_BASIS_SIZE}, got {size}")
    if selectors is None:
        selectors = [1 << i for i in range(size)]
    elif len(selectors) != size:
        raise ValueError("Selectors and basis must have the same length.")

    test_value = 0
    candidate = 0
    if test_value == target:
        return candidate
    for bit in toggled_bits(size):
        test_value ^= basis[bit]
        candidate ^= selectors[bit]
        if test_value == target:
            return candidate

    logger.debug("No subset of %d basis vectors XORs to 0x%X", size, target)
    return None
