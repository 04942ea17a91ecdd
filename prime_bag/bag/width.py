"""
Fixed-width storage words

Python integers never wrap, so the width is enforced by comparing every
product against the width's maximum before it is accepted.
"""

from typing import Optional

import numpy as np

from ..exceptions import BagOverflowError

SUPPORTED_WIDTHS = (8, 16, 32, 64, 128, 256)


class StorageWidth:
    """
    An unsigned integer width with checked multiply, exact divide,
    modulus and GCD
    """

    __slots__ = ('bits', 'max_value', 'dtype')

    def __init__(self, bits: int):
        if bits not in SUPPORTED_WIDTHS:
            raise ValueError(f"Unsupported width {bits}, expected one of {SUPPORTED_WIDTHS}")
        self.bits = bits
        self.dtype: Optional[np.dtype] = None
        if bits <= 64:
            self.dtype = np.dtype(f"uint{bits}")
            self.max_value = int(np.iinfo(self.dtype).max)
        else:
            self.max_value = (1 << bits) - 1

    def fits(self, value: int) -> bool:
        """Whether `value` is a representable (non-zero) storage word"""
        return 1 <= value <= self.max_value

    def checked_mul(self, a: int, b: int) -> int:
        product = a * b
        if product > self.max_value:
            raise BagOverflowError(a, b, self.max_value)
        return product

    def checked_pow(self, base: int, exp: int) -> int:
        """base ** exp, refusing results wider than the storage word"""
        if exp < 0:
            raise ValueError(f"exponent must be non-negative, got {exp}")
        # base ** (bits + 1) already exceeds the word for any base >= 2
        if base > 1:
            exp = min(exp, self.bits + 1)
        result = base ** exp
        if result > self.max_value:
            raise BagOverflowError(1, result, self.max_value)
        return result

    @staticmethod
    def div_exact(a: int, b: int) -> Optional[int]:
        """a / b if b divides a, otherwise None"""
        q, r = divmod(a, b)
        if r:
            return None
        return q

    @staticmethod
    def is_multiple(a: int, b: int) -> bool:
        return a % b == 0

    @staticmethod
    def gcd(a: int, b: int) -> int:
        """Greatest common divisor by the Euclidean algorithm"""
        while b:
            a, b = b, a % b
        return a

    def to_numpy(self, value: int) -> np.generic:
        """Storage word as a numpy scalar of this width"""
        if self.dtype is None:
            raise TypeError(f"numpy has no {self.bits}-bit unsigned integer type")
        return self.dtype.type(value)

    def __eq__(self, other):
        if not isinstance(other, StorageWidth):
            return NotImplemented
        return self.bits == other.bits

    def __hash__(self):
        return hash(self.bits)

    def __repr__(self):
        return f"StorageWidth({self.bits})"
