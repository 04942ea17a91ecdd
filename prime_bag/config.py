"""
Configuration of bag width and prime table size
"""

import os
from dataclasses import dataclass
from typing import Type

from .bag.prime_bag import PrimeBag, bag_class
from .bag.width import SUPPORTED_WIDTHS
from .core.primes import DEFAULT_NUM_PRIMES, MAX_NUM_PRIMES

DEFAULT_WIDTH_BITS = 64


@dataclass(frozen=True)
class PrimeBagConfig:
    """
    Storage width and prime table size for a family of bags

    Attributes:
        width_bits: Bits in the storage word
        num_primes: Number of distinct element kinds supported
    """
    width_bits: int = DEFAULT_WIDTH_BITS
    num_primes: int = DEFAULT_NUM_PRIMES

    def __post_init__(self):
        if self.width_bits not in SUPPORTED_WIDTHS:
            raise ValueError(
                f"width_bits must be one of {SUPPORTED_WIDTHS}, got {self.width_bits}"
            )
        if not 1 <= self.num_primes <= MAX_NUM_PRIMES:
            raise ValueError(
                f"num_primes must be in [1, {MAX_NUM_PRIMES}], got {self.num_primes}"
            )

    @classmethod
    def from_env(cls, prefix: str = "PRIME_BAG_") -> "PrimeBagConfig":
        """Read WIDTH_BITS and NUM_PRIMES from the environment"""
        width = os.getenv(f"{prefix}WIDTH_BITS", "").strip()
        num_primes = os.getenv(f"{prefix}NUM_PRIMES", "").strip()
        return cls(
            width_bits=int(width) if width else DEFAULT_WIDTH_BITS,
            num_primes=int(num_primes) if num_primes else DEFAULT_NUM_PRIMES
        )


def bag_class_from_config(config: PrimeBagConfig) -> Type[PrimeBag]:
    """Bag class matching a configuration"""
    return bag_class(config.width_bits, config.num_primes)
