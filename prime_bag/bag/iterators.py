"""
Lazy iterators over a bag's contents

Both iterators decode the storage word incrementally through
`iter_factor_groups`. They are single-pass: iterate the bag again for a
fresh one.
"""

from typing import Any, Optional, Tuple

from ..core.factorization import iter_factor_groups
from ..core.primes import PrimeTable
from ..elements.codecs import PrimeBagElement


class PrimeBagGroupIter:
    """
    Iterator of (element, multiplicity) pairs in ascending index order
    """

    def __init__(self, value: int, table: PrimeTable, codec: PrimeBagElement):
        self._groups = iter_factor_groups(value, table)
        self._codec = codec

    def __iter__(self):
        return self

    def __next__(self) -> Tuple[Any, int]:
        index, count = next(self._groups)
        return self._codec.from_prime_index(index), count


class PrimeBagIter:
    """
    Iterator of individual elements in ascending index order

    Each element is repeated according to its multiplicity.
    """

    def __init__(self, value: int, table: PrimeTable, codec: PrimeBagElement):
        self._groups = iter_factor_groups(value, table)
        self._codec = codec
        self._current: Optional[Any] = None
        self._pending = 0

    def __iter__(self):
        return self

    def __next__(self) -> Any:
        if self._pending == 0:
            index, count = next(self._groups)
            self._current = self._codec.from_prime_index(index)
            self._pending = count
        self._pending -= 1
        return self._current

    def __length_hint__(self) -> int:
        # Copies of the current element still to come; a lower bound
        return self._pending
