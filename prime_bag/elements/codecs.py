"""
Element codecs

A codec maps caller elements to dense prime indices and back. Give the
lowest indices to the most common elements: small primes use fewer bits
of the storage word per occurrence.
"""

from enum import Enum
from typing import (
    Any, Callable, Dict, Hashable, Iterable, Protocol, Tuple, Type, runtime_checkable
)

import numpy as np

from ..exceptions import UnsupportedElementError


@runtime_checkable
class PrimeBagElement(Protocol):
    """
    Mapping between elements and prime indices

    `from_prime_index(to_prime_index(e)) == e` must hold for every
    element the codec accepts.
    """

    def to_prime_index(self, element: Any) -> int:
        ...

    def from_prime_index(self, index: int) -> Any:
        ...


class IndexCodec:
    """Elements are their own prime indices (Python or numpy integers)"""

    def to_prime_index(self, element: int) -> int:
        if isinstance(element, bool) or not isinstance(element, (int, np.integer)):
            raise UnsupportedElementError(element)
        return int(element)

    def from_prime_index(self, index: int) -> int:
        return int(index)

    def __eq__(self, other):
        return type(other) is IndexCodec

    def __hash__(self):
        return hash(IndexCodec)

    def __repr__(self):
        return "IndexCodec()"


class EnumCodec:
    """Enum members indexed by definition order"""

    def __init__(self, enum_cls: Type[Enum]):
        self.enum_cls = enum_cls
        self._members: Tuple[Enum, ...] = tuple(enum_cls)
        self._indices: Dict[Enum, int] = {m: i for i, m in enumerate(self._members)}

    def to_prime_index(self, element: Enum) -> int:
        try:
            return self._indices[element]
        except (KeyError, TypeError):
            raise UnsupportedElementError(element) from None

    def from_prime_index(self, index: int) -> Enum:
        return self._members[index]

    def __eq__(self, other):
        if not isinstance(other, EnumCodec):
            return NotImplemented
        return self.enum_cls is other.enum_cls

    def __hash__(self):
        return hash(self.enum_cls)

    def __repr__(self):
        return f"EnumCodec({self.enum_cls.__name__})"


class SequenceCodec:
    """
    Elements indexed by position in a fixed sequence

    Args:
        values: Distinct hashable elements, most frequent first
    """

    def __init__(self, values: Iterable[Hashable]):
        self.values: Tuple[Hashable, ...] = tuple(values)
        self._indices: Dict[Hashable, int] = {}
        for i, value in enumerate(self.values):
            if value in self._indices:
                raise ValueError(f"Duplicate element {value!r} in codec sequence")
            self._indices[value] = i

    def to_prime_index(self, element: Hashable) -> int:
        try:
            return self._indices[element]
        except (KeyError, TypeError):
            raise UnsupportedElementError(element) from None

    def from_prime_index(self, index: int) -> Hashable:
        return self.values[index]

    def __eq__(self, other):
        if not isinstance(other, SequenceCodec):
            return NotImplemented
        return self.values == other.values

    def __hash__(self):
        return hash(self.values)

    def __repr__(self):
        return f"SequenceCodec({list(self.values)!r})"


class FunctionCodec:
    """Codec built from a pair of functions"""

    def __init__(self, to_index: Callable[[Any], int], from_index: Callable[[int], Any]):
        self.to_index = to_index
        self.from_index = from_index

    def to_prime_index(self, element: Any) -> int:
        return self.to_index(element)

    def from_prime_index(self, index: int) -> Any:
        return self.from_index(index)

    def __eq__(self, other):
        if not isinstance(other, FunctionCodec):
            return NotImplemented
        return self.to_index == other.to_index and self.from_index == other.from_index

    def __hash__(self):
        return hash((self.to_index, self.from_index))

    def __repr__(self):
        return f"FunctionCodec({self.to_index!r}, {self.from_index!r})"
