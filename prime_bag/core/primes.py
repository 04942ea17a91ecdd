"""
Prime Table

The first K primes, generated once per table size with sympy's sieve and
kept as a read-only numpy array. Index i holds the (i+1)-th prime.
"""

import logging
from bisect import bisect_left
from functools import lru_cache
from typing import Iterator, List, Optional

import numpy as np
import sympy

from ..exceptions import UnsupportedElementError

logger = logging.getLogger(__name__)

DEFAULT_NUM_PRIMES = 32
MAX_NUM_PRIMES = 256


def generate_primes(count: int) -> List[int]:
    """
    Generate the first `count` primes in increasing order

    Args:
        count: Number of primes to generate

    Returns:
        List of the first `count` primes
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    if count == 0:
        return []
    sympy.sieve.extend_to_no(count)
    return [int(p) for p in sympy.sieve[1:count + 1]]


class PrimeTable:
    """
    Immutable, ordered table of the first `num_primes` primes
    """

    __slots__ = ('_primes', '_values')

    def __init__(self, num_primes: int = DEFAULT_NUM_PRIMES):
        if not 1 <= num_primes <= MAX_NUM_PRIMES:
            raise ValueError(
                f"num_primes must be in [1, {MAX_NUM_PRIMES}], got {num_primes}"
            )
        values = generate_primes(num_primes)
        primes = np.array(values, dtype=np.int64)
        primes.setflags(write=False)

        self._primes = primes
        # Python ints for arithmetic beyond 64 bits
        self._values = tuple(values)

    @property
    def primes(self) -> np.ndarray:
        """Read-only array of the table's primes"""
        return self._primes

    @property
    def num_primes(self) -> int:
        return len(self._values)

    @property
    def largest(self) -> int:
        return self._values[-1]

    def prime_at(self, index: int) -> int:
        """
        Return the (index+1)-th prime

        Raises:
            UnsupportedElementError: if index is outside [0, num_primes)
        """
        prime = self.get_prime(index)
        if prime is None:
            raise UnsupportedElementError(index, index, self.num_primes)
        return prime

    def get_prime(self, index: int) -> Optional[int]:
        """Return the (index+1)-th prime, or None outside the table"""
        if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
            return None
        if 0 <= index < len(self._values):
            return self._values[index]
        return None

    def index_of(self, prime: int) -> Optional[int]:
        """Index of `prime` in the table, or None if it is not a table prime"""
        i = bisect_left(self._values, prime)
        if i < len(self._values) and self._values[i] == prime:
            return i
        return None

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[int]:
        return iter(self._values)

    def __getitem__(self, index):
        return self._values[index]

    def __repr__(self):
        return f"PrimeTable(num_primes={self.num_primes}, largest={self.largest})"


@lru_cache(maxsize=None)
def prime_table(num_primes: int = DEFAULT_NUM_PRIMES) -> PrimeTable:
    """
    Get the shared prime table for a given size

    Tables are built on first access and reused for the rest of the process.
    """
    table = PrimeTable(num_primes)
    logger.debug("Built prime table: %d primes, largest %d",
                 table.num_primes, table.largest)
    return table
