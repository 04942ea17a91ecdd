"""
Prime Bag: a multiset encoded as a product of primes

Each element kind is assigned a prime through its dense index. The bag is
a single unsigned integer, the product of the primes of every element it
holds. Insertion multiplies, removal divides, membership is a modulus test
and intersection is a GCD.

Bags are immutable values. Every operation that looks like a mutation
returns a new bag and leaves the receiver untouched, including when it
fails.
"""

import logging
from functools import lru_cache, total_ordering
from typing import Any, Iterable, Iterator, Optional, Type, TypeVar

import numpy as np

from ..core.factorization import (
    count_factors,
    iter_factor_groups,
    iter_factor_indices_reversed,
    multiplicity,
    residual
)
from ..core.primes import DEFAULT_NUM_PRIMES, PrimeTable, prime_table
from ..elements.codecs import IndexCodec, PrimeBagElement
from ..exceptions import (
    BagOverflowError,
    ElementNotPresentError,
    InvalidBagValueError,
    NotSupersetError,
    UnsupportedElementError
)
from .iterators import PrimeBagGroupIter, PrimeBagIter
from .width import StorageWidth

logger = logging.getLogger(__name__)

B = TypeVar('B', bound='PrimeBag')

_DEFAULT_CODEC = IndexCodec()


@total_ordering
class PrimeBag:
    """
    Multiset of elements stored as a product of primes

    Subclasses fix the storage width and prime table size. Use one of
    PrimeBag8 ... PrimeBag256, or build a class with `bag_class`.

    Args:
        elements: Initial contents
        codec: Element to prime index mapping (defaults to IndexCodec)
    """

    width: Optional[StorageWidth] = None
    num_primes: int = DEFAULT_NUM_PRIMES

    __slots__ = ('_value', '_codec')

    def __init__(self, elements: Iterable[Any] = (), codec: Optional[PrimeBagElement] = None):
        type(self)._require_width()
        self._codec = codec if codec is not None else _DEFAULT_CODEC
        self._value = 1
        self._value = self.try_extend(elements)._value

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def _new(cls: Type[B], value: int, codec: PrimeBagElement) -> B:
        bag = object.__new__(cls)
        bag._value = value
        bag._codec = codec
        return bag

    @classmethod
    def _require_width(cls):
        if cls.width is None:
            raise TypeError(
                f"{cls.__name__} has no storage width; use PrimeBag8 ... PrimeBag256 or bag_class()"
            )

    @classmethod
    def table(cls) -> PrimeTable:
        """The prime table shared by every bag of this class"""
        return prime_table(cls.num_primes)

    @classmethod
    def empty(cls: Type[B], codec: Optional[PrimeBagElement] = None) -> B:
        """The empty bag (storage word 1)"""
        return cls(codec=codec)

    @classmethod
    def try_from_iter(cls: Type[B], elements: Iterable[Any],
                      codec: Optional[PrimeBagElement] = None) -> B:
        """
        Build a bag from elements

        Raises:
            UnsupportedElementError: an element has no prime in the table
            BagOverflowError: the elements do not fit in the storage word
        """
        return cls(elements, codec=codec)

    @classmethod
    def from_inner(cls: Type[B], value: int, codec: Optional[PrimeBagElement] = None) -> B:
        """
        Rebuild a bag from its storage word

        Raises:
            InvalidBagValueError: the word is out of range for the width,
                has a factor outside the prime table, or holds an index the
                codec cannot decode
        """
        cls._require_width()
        if isinstance(value, np.integer):
            value = int(value)
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidBagValueError(value, "storage word must be an integer")
        if not cls.width.fits(value):
            raise InvalidBagValueError(value, f"outside [1, {cls.width.max_value}]")
        if residual(value, cls.table()) != 1:
            raise InvalidBagValueError(value, f"has a factor beyond the first {cls.num_primes} primes")
        codec = codec if codec is not None else _DEFAULT_CODEC
        for index, _ in iter_factor_groups(value, cls.table()):
            try:
                codec.from_prime_index(index)
            except (IndexError, KeyError, ValueError):
                raise InvalidBagValueError(
                    value, f"index {index} cannot be decoded by {codec!r}"
                ) from None
        return cls._new(value, codec)

    def into_inner(self) -> int:
        """The storage word"""
        return self._value

    def to_numpy(self) -> np.generic:
        """The storage word as a numpy unsigned scalar of the bag's width"""
        return self.width.to_numpy(self._value)

    def convert(self, target: Type[B]) -> B:
        """
        Re-home this bag's contents in another bag class

        Raises:
            BagOverflowError: the word does not fit the target width
            InvalidBagValueError: the target's prime table is too small
        """
        target._require_width()
        if self._value > target.width.max_value:
            logger.debug("Cannot convert %r to %s: word too wide", self, target.__name__)
            raise BagOverflowError(self._value, 1, target.width.max_value)
        if target.num_primes < self.num_primes and residual(self._value, target.table()) != 1:
            raise InvalidBagValueError(
                self._value, f"has a factor beyond the first {target.num_primes} primes"
            )
        return target._new(self._value, self._codec)

    @property
    def codec(self) -> PrimeBagElement:
        return self._codec

    # ------------------------------------------------------------------
    # Element lookup
    # ------------------------------------------------------------------

    def _prime_for(self, element: Any) -> int:
        index = self._codec.to_prime_index(element)
        prime = self.table().get_prime(index)
        if prime is None:
            logger.debug("Unsupported element %r (index %r)", element, index)
            raise UnsupportedElementError(element, index, self.num_primes)
        return prime

    def _lookup_prime(self, element: Any) -> Optional[int]:
        """Prime for `element`, or None when it can never be in a bag"""
        try:
            return self._prime_for(element)
        except UnsupportedElementError:
            return None

    def _check_compatible(self, other: 'PrimeBag'):
        if type(other) is not type(self):
            raise TypeError(
                f"Cannot combine {type(self).__name__} with {type(other).__name__}"
            )
        if other._codec != self._codec:
            raise TypeError(f"Codec mismatch: {self._codec!r} and {other._codec!r}")

    # ------------------------------------------------------------------
    # Insertion
    # ------------------------------------------------------------------

    def try_insert(self: B, element: Any) -> B:
        """
        Return a new bag with `element` added

        Raises:
            UnsupportedElementError: the element has no prime in the table
            BagOverflowError: the bag is too full for this element
        """
        prime = self._prime_for(element)
        try:
            value = self.width.checked_mul(self._value, prime)
        except BagOverflowError:
            logger.debug("Overflow inserting %r into %r", element, self)
            raise
        return self._new(value, self._codec)

    def try_insert_many(self: B, element: Any, count: int) -> B:
        """Return a new bag with `count` copies of `element` added"""
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        prime = self._prime_for(element)
        try:
            factor = self.width.checked_pow(prime, count)
            value = self.width.checked_mul(self._value, factor)
        except BagOverflowError:
            logger.debug("Overflow inserting %d x %r into %r", count, element, self)
            raise
        return self._new(value, self._codec)

    def try_extend(self: B, elements: Iterable[Any]) -> B:
        """
        Return a new bag with every element of `elements` added

        Either all elements are absorbed or the call raises and nothing
        is produced.
        """
        value = self._value
        for element in elements:
            prime = self._prime_for(element)
            try:
                value = self.width.checked_mul(value, prime)
            except BagOverflowError:
                logger.debug("Overflow extending %r with %r", self, element)
                raise
        return self._new(value, self._codec)

    def combine(self: B, other: B) -> B:
        """
        Multiset sum: every element's multiplicities are added

        Raises:
            BagOverflowError: the sum does not fit in the storage word
        """
        self._check_compatible(other)
        try:
            value = self.width.checked_mul(self._value, other._value)
        except BagOverflowError:
            logger.debug("Overflow combining %r with %r", self, other)
            raise
        return self._new(value, self._codec)

    try_sum = combine

    # ------------------------------------------------------------------
    # Removal
    # ------------------------------------------------------------------

    def try_remove(self: B, element: Any) -> B:
        """
        Return a new bag with one occurrence of `element` removed

        Raises:
            ElementNotPresentError: the element is not in the bag
        """
        prime = self._lookup_prime(element)
        value = None if prime is None else self.width.div_exact(self._value, prime)
        if value is None:
            logger.debug("Cannot remove %r from %r: not present", element, self)
            raise ElementNotPresentError(element)
        return self._new(value, self._codec)

    def try_remove_bag(self: B, other: B) -> B:
        """
        Return a new bag with all of `other` removed

        Raises:
            NotSupersetError: `other` is not contained in this bag
        """
        self._check_compatible(other)
        value = self.width.div_exact(self._value, other._value)
        if value is None:
            logger.debug("Cannot remove %r from %r: not a superset", other, self)
            raise NotSupersetError(self._value, other._value)
        return self._new(value, self._codec)

    try_difference = try_remove_bag

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def contains(self, element: Any) -> bool:
        prime = self._lookup_prime(element)
        return prime is not None and self.width.is_multiple(self._value, prime)

    def contains_at_least(self, element: Any, n: int) -> bool:
        """Whether `element` occurs at least `n` times"""
        prime = self._lookup_prime(element)
        if prime is None:
            return False
        try:
            power = self.width.checked_pow(prime, n)
        except BagOverflowError:
            return False
        return self.width.is_multiple(self._value, power)

    def count_instances(self, element: Any) -> int:
        """Multiplicity of `element` in the bag"""
        prime = self._lookup_prime(element)
        if prime is None:
            return 0
        return multiplicity(self._value, prime)

    def is_superset(self, other: 'PrimeBag') -> bool:
        """Every element of `other` occurs here at least as many times"""
        self._check_compatible(other)
        return self.width.is_multiple(self._value, other._value)

    def is_subset(self, other: 'PrimeBag') -> bool:
        return other.is_superset(self)

    def is_empty(self) -> bool:
        return self._value == 1

    def intersection(self: B, other: B) -> B:
        """Each element with the smaller of its two multiplicities"""
        self._check_compatible(other)
        return self._new(self.width.gcd(self._value, other._value), self._codec)

    # ------------------------------------------------------------------
    # Iteration
    # ------------------------------------------------------------------

    def iter_groups(self) -> PrimeBagGroupIter:
        """Iterate (element, multiplicity) pairs in ascending index order"""
        return PrimeBagGroupIter(self._value, self.table(), self._codec)

    def __iter__(self) -> PrimeBagIter:
        return PrimeBagIter(self._value, self.table(), self._codec)

    def __reversed__(self) -> Iterator[Any]:
        for index in iter_factor_indices_reversed(self._value, self.table()):
            yield self._codec.from_prime_index(index)

    def __len__(self) -> int:
        return count_factors(self._value, self.table())

    def __bool__(self) -> bool:
        return self._value != 1

    def __contains__(self, element: Any) -> bool:
        return self.contains(element)

    # ------------------------------------------------------------------
    # Operators and value semantics
    # ------------------------------------------------------------------

    def __add__(self, other):
        if not isinstance(other, PrimeBag):
            return NotImplemented
        return self.combine(other)

    def __sub__(self, other):
        if not isinstance(other, PrimeBag):
            return NotImplemented
        return self.try_remove_bag(other)

    def __and__(self, other):
        if not isinstance(other, PrimeBag):
            return NotImplemented
        return self.intersection(other)

    def __eq__(self, other):
        if not isinstance(other, PrimeBag):
            return NotImplemented
        return (type(self) is type(other)
                and self._value == other._value
                and self._codec == other._codec)

    def __lt__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._value < other._value

    def __hash__(self):
        return hash((type(self), self._value))

    def __repr__(self):
        return f"{type(self).__name__}({list(self)!r})"

    def __reduce__(self):
        # Classes from bag_class() are not module attributes; rebuild by parameters
        return _rebuild_bag, (self.width.bits, self.num_primes, self._value, self._codec)


class PrimeBag8(PrimeBag):
    """Bag stored in an 8-bit word"""
    __slots__ = ()
    width = StorageWidth(8)


class PrimeBag16(PrimeBag):
    """Bag stored in a 16-bit word"""
    __slots__ = ()
    width = StorageWidth(16)


class PrimeBag32(PrimeBag):
    """Bag stored in a 32-bit word"""
    __slots__ = ()
    width = StorageWidth(32)


class PrimeBag64(PrimeBag):
    """Bag stored in a 64-bit word"""
    __slots__ = ()
    width = StorageWidth(64)


class PrimeBag128(PrimeBag):
    """Bag stored in a 128-bit word"""
    __slots__ = ()
    width = StorageWidth(128)


class PrimeBag256(PrimeBag):
    """Bag stored in a 256-bit word"""
    __slots__ = ()
    width = StorageWidth(256)


_BUILTIN_CLASSES = {
    cls.width.bits: cls
    for cls in (PrimeBag8, PrimeBag16, PrimeBag32, PrimeBag64, PrimeBag128, PrimeBag256)
}


@lru_cache(maxsize=None)
def bag_class(width_bits: int, num_primes: int = DEFAULT_NUM_PRIMES) -> Type[PrimeBag]:
    """
    Bag class for a storage width and prime table size

    The built-in classes are returned for the default table size; other
    combinations get a new subclass, created once and cached.
    """
    width = StorageWidth(width_bits)
    if num_primes == DEFAULT_NUM_PRIMES:
        return _BUILTIN_CLASSES[width_bits]

    # Validates num_primes
    prime_table(num_primes)
    name = f"PrimeBag{width_bits}x{num_primes}"
    cls = type(name, (PrimeBag,), {
        '__slots__': (),
        '__module__': __name__,
        'width': width,
        'num_primes': num_primes,
    })
    logger.debug("Created bag class %s", name)
    return cls


def _rebuild_bag(width_bits: int, num_primes: int, value: int,
                 codec: PrimeBagElement) -> PrimeBag:
    """Unpickle a bag of any class `bag_class` can produce"""
    return bag_class(width_bits, num_primes)._new(value, codec)
