"""
Tests for configuration and capacity
"""

import math

import pytest

from prime_bag import PrimeBag16, PrimeBag64, PrimeBagConfig, bag_class_from_config
from prime_bag.utils import bits_per_occurrence, capacity_table, max_occurrences


class TestPrimeBagConfig:
    def test_defaults(self):
        config = PrimeBagConfig()
        assert config.width_bits == 64
        assert config.num_primes == 32
        assert bag_class_from_config(config) is PrimeBag64

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("PRIME_BAG_WIDTH_BITS", "16")
        monkeypatch.setenv("PRIME_BAG_NUM_PRIMES", "64")
        config = PrimeBagConfig.from_env()
        assert config == PrimeBagConfig(width_bits=16, num_primes=64)
        cls = bag_class_from_config(config)
        assert cls.width.bits == 16
        assert cls.num_primes == 64

    def test_from_env_unset(self, monkeypatch):
        monkeypatch.delenv("PRIME_BAG_WIDTH_BITS", raising=False)
        monkeypatch.delenv("PRIME_BAG_NUM_PRIMES", raising=False)
        assert PrimeBagConfig.from_env() == PrimeBagConfig()

    def test_default_table_class(self):
        assert bag_class_from_config(PrimeBagConfig(width_bits=16)) is PrimeBag16

    @pytest.mark.parametrize("kwargs", [
        {"width_bits": 24},
        {"num_primes": 0},
        {"num_primes": 257},
    ])
    def test_invalid(self, kwargs):
        with pytest.raises(ValueError):
            PrimeBagConfig(**kwargs)


class TestCapacity:
    def test_bits_per_occurrence(self):
        bits = bits_per_occurrence()
        assert len(bits) == 32
        assert bits[0] == 1.0
        assert math.isclose(bits[1], math.log2(3))

    @pytest.mark.parametrize("width_bits, index, expected", [
        (8, 0, 7),
        (16, 0, 15),
        (16, 1, 10),
        (8, 31, 1),
        (64, 0, 63),
    ])
    def test_max_occurrences(self, width_bits, index, expected):
        assert max_occurrences(width_bits, index) == expected

    def test_capacity_table(self):
        rows = capacity_table(16)
        assert len(rows) == 32
        assert rows[1].prime == 3
        assert rows[1].max_occurrences == 10
        assert [row.index for row in rows] == list(range(32))
        assert all(a.max_occurrences >= b.max_occurrences for a, b in zip(rows, rows[1:]))
