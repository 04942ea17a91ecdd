"""Element to prime index mappings"""

from .codecs import (
    PrimeBagElement,
    IndexCodec,
    EnumCodec,
    SequenceCodec,
    FunctionCodec
)

__all__ = [
    'PrimeBagElement',
    'IndexCodec',
    'EnumCodec',
    'SequenceCodec',
    'FunctionCodec'
]
