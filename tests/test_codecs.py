"""
Tests for element codecs
"""

from enum import Enum

import numpy as np
import pytest

from prime_bag.elements import (
    EnumCodec,
    FunctionCodec,
    IndexCodec,
    PrimeBagElement,
    SequenceCodec
)
from prime_bag.exceptions import UnsupportedElementError


class Colour(Enum):
    RED = "red"
    GREEN = "green"
    BLUE = "blue"


class TestCodecs:
    def test_protocol(self):
        assert isinstance(IndexCodec(), PrimeBagElement)
        assert isinstance(EnumCodec(Colour), PrimeBagElement)
        assert isinstance(SequenceCodec("ab"), PrimeBagElement)

    def test_index_round_trip(self):
        codec = IndexCodec()
        for e in range(32):
            assert codec.from_prime_index(codec.to_prime_index(e)) == e

    def test_index_accepts_numpy(self):
        codec = IndexCodec()
        for e in np.arange(4):
            index = codec.to_prime_index(e)
            assert index == e
            assert type(index) is int

    def test_index_rejects_non_int(self):
        codec = IndexCodec()
        with pytest.raises(UnsupportedElementError):
            codec.to_prime_index("1")
        with pytest.raises(UnsupportedElementError):
            codec.to_prime_index(True)

    def test_enum_round_trip(self):
        codec = EnumCodec(Colour)
        assert codec.to_prime_index(Colour.RED) == 0
        assert codec.to_prime_index(Colour.BLUE) == 2
        for colour in Colour:
            assert codec.from_prime_index(codec.to_prime_index(colour)) is colour

    def test_enum_rejects_other(self):
        with pytest.raises(UnsupportedElementError):
            EnumCodec(Colour).to_prime_index("red")

    def test_sequence_round_trip(self):
        codec = SequenceCodec("etaoin")
        assert codec.to_prime_index("e") == 0
        assert codec.to_prime_index("n") == 5
        for letter in "etaoin":
            assert codec.from_prime_index(codec.to_prime_index(letter)) == letter

    def test_sequence_unknown(self):
        with pytest.raises(UnsupportedElementError):
            SequenceCodec("etaoin").to_prime_index("z")
        with pytest.raises(UnsupportedElementError):
            SequenceCodec("etaoin").to_prime_index(["unhashable"])

    def test_sequence_duplicates(self):
        with pytest.raises(ValueError):
            SequenceCodec("abca")

    def test_function_codec(self):
        codec = FunctionCodec(lambda s: ord(s) - ord("a"), lambda i: chr(i + ord("a")))
        assert codec.to_prime_index("c") == 2
        assert codec.from_prime_index(2) == "c"

    def test_equality(self):
        assert IndexCodec() == IndexCodec()
        assert EnumCodec(Colour) == EnumCodec(Colour)
        assert SequenceCodec("ab") == SequenceCodec(["a", "b"])
        assert SequenceCodec("ab") != SequenceCodec("ba")
