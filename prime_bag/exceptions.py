"""
Error taxonomy for prime bags

Every failure is local and recoverable. Each class also derives from the
closest builtin exception so generic handlers keep working.
"""

from typing import Any, Optional


class PrimeBagError(Exception):
    """Base class for all prime bag errors"""


class UnsupportedElementError(PrimeBagError, ValueError):
    """
    An element maps to an index outside the prime table

    Attributes:
        element: The element that could not be encoded
        index: The index it mapped to (None if the codec could not map it)
        num_primes: Size of the prime table in use
    """

    def __init__(self, element: Any, index: Optional[int] = None,
                 num_primes: Optional[int] = None):
        self.element = element
        self.index = index
        self.num_primes = num_primes
        if index is None:
            message = f"Element {element!r} has no prime index"
        else:
            message = (f"Element {element!r} maps to index {index}, "
                       f"outside the prime table of size {num_primes}")
        super().__init__(message)


class BagOverflowError(PrimeBagError, OverflowError):
    """A multiplication would exceed the storage word's maximum value"""

    def __init__(self, value: int, factor: int, max_value: int):
        self.value = value
        self.factor = factor
        self.max_value = max_value
        super().__init__(
            f"{value} * {factor} exceeds the maximum storage value {max_value}"
        )


class ElementNotPresentError(PrimeBagError, LookupError):
    """Removal of an element with zero multiplicity"""

    def __init__(self, element: Any):
        self.element = element
        super().__init__(f"Element {element!r} is not in the bag")


class NotSupersetError(PrimeBagError, ValueError):
    """Removal of a sub-bag that is not contained in the bag"""

    def __init__(self, value: int, other: int):
        self.value = value
        self.other = other
        super().__init__(f"Bag {other} is not contained in bag {value}")


class InvalidBagValueError(PrimeBagError, ValueError):
    """A raw storage word that no bag of this class can hold"""

    def __init__(self, value: Any, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid storage value {value!r}: {reason}")
