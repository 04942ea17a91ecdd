"""Prime bag encoding engine"""

from .width import StorageWidth, SUPPORTED_WIDTHS
from .iterators import PrimeBagIter, PrimeBagGroupIter
from .prime_bag import (
    PrimeBag,
    PrimeBag8,
    PrimeBag16,
    PrimeBag32,
    PrimeBag64,
    PrimeBag128,
    PrimeBag256,
    bag_class
)

__all__ = [
    'StorageWidth',
    'SUPPORTED_WIDTHS',
    'PrimeBagIter',
    'PrimeBagGroupIter',
    'PrimeBag',
    'PrimeBag8',
    'PrimeBag16',
    'PrimeBag32',
    'PrimeBag64',
    'PrimeBag128',
    'PrimeBag256',
    'bag_class'
]
