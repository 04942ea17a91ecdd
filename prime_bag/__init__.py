"""
Prime Bag

A multiset stored as a single unsigned integer: the product of the primes
assigned to its elements. Insertion is multiplication, removal is
division, membership is a modulus test and intersection is a GCD.
"""

from .bag import (
    PrimeBag,
    PrimeBag8,
    PrimeBag16,
    PrimeBag32,
    PrimeBag64,
    PrimeBag128,
    PrimeBag256,
    StorageWidth,
    bag_class
)
from .config import PrimeBagConfig, bag_class_from_config
from .core import DEFAULT_NUM_PRIMES, MAX_NUM_PRIMES, PrimeTable, prime_table
from .elements import EnumCodec, FunctionCodec, IndexCodec, PrimeBagElement, SequenceCodec
from .exceptions import (
    BagOverflowError,
    ElementNotPresentError,
    InvalidBagValueError,
    NotSupersetError,
    PrimeBagError,
    UnsupportedElementError
)

__version__ = "0.4.0"

__all__ = [
    'PrimeBag',
    'PrimeBag8',
    'PrimeBag16',
    'PrimeBag32',
    'PrimeBag64',
    'PrimeBag128',
    'PrimeBag256',
    'StorageWidth',
    'bag_class',
    'PrimeBagConfig',
    'bag_class_from_config',
    'DEFAULT_NUM_PRIMES',
    'MAX_NUM_PRIMES',
    'PrimeTable',
    'prime_table',
    'PrimeBagElement',
    'IndexCodec',
    'EnumCodec',
    'SequenceCodec',
    'FunctionCodec',
    'PrimeBagError',
    'UnsupportedElementError',
    'BagOverflowError',
    'ElementNotPresentError',
    'NotSupersetError',
    'InvalidBagValueError'
]
