"""
Capacity of a storage word

How many occurrences of each element kind a word of a given width can
hold, and how many bits each occurrence costs.
"""

from dataclasses import dataclass
from typing import List

import numpy as np

from ..bag.width import StorageWidth
from ..core.primes import DEFAULT_NUM_PRIMES, prime_table


@dataclass(frozen=True)
class CapacityRow:
    """
    Capacity of one prime index

    Attributes:
        index: Dense element index
        prime: Prime assigned to the index
        bits: Bits of the storage word used per occurrence (log2 of prime)
        max_occurrences: Most occurrences a lone element of this kind can have
    """
    index: int
    prime: int
    bits: float
    max_occurrences: int


def bits_per_occurrence(num_primes: int = DEFAULT_NUM_PRIMES) -> np.ndarray:
    """log2 of every prime in the table"""
    return np.log2(prime_table(num_primes).primes.astype(np.float64))


def max_occurrences(width_bits: int, index: int,
                    num_primes: int = DEFAULT_NUM_PRIMES) -> int:
    """
    Largest n such that prime_at(index) ** n fits in the storage word
    """
    width = StorageWidth(width_bits)
    prime = prime_table(num_primes).prime_at(index)
    n = 0
    power = prime
    while power <= width.max_value:
        n += 1
        power *= prime
    return n


def capacity_table(width_bits: int, num_primes: int = DEFAULT_NUM_PRIMES) -> List[CapacityRow]:
    """
    Capacity of every prime index for a storage width

    Args:
        width_bits: Storage width in bits
        num_primes: Size of the prime table

    Returns:
        One CapacityRow per prime index, in index order
    """
    table = prime_table(num_primes)
    bits = bits_per_occurrence(num_primes)
    return [
        CapacityRow(
            index=i,
            prime=table[i],
            bits=float(bits[i]),
            max_occurrences=max_occurrences(width_bits, i, num_primes)
        )
        for i in range(len(table))
    ]
