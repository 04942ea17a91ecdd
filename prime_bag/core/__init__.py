"""Core prime table and factorization"""

from .primes import (
    DEFAULT_NUM_PRIMES,
    MAX_NUM_PRIMES,
    PrimeTable,
    generate_primes,
    prime_table
)
from .factorization import (
    count_factors,
    iter_factor_groups,
    iter_factor_indices_reversed,
    multiplicity,
    residual
)

__all__ = [
    'DEFAULT_NUM_PRIMES',
    'MAX_NUM_PRIMES',
    'PrimeTable',
    'generate_primes',
    'prime_table',
    'count_factors',
    'iter_factor_groups',
    'iter_factor_indices_reversed',
    'multiplicity',
    'residual'
]
