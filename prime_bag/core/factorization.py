"""
Factorization over a known prime table

Bag values are built only from table primes, so trial division by the
table is a complete factorization. General-purpose factoring is never
needed.
"""

from typing import Iterator, Tuple

from .primes import PrimeTable


def multiplicity(value: int, prime: int) -> int:
    """
    Exponent of `prime` in `value`

    Args:
        value: Positive integer
        prime: Prime to divide out

    Returns:
        Largest n such that prime**n divides value
    """
    if prime == 2:
        # Trailing zero bits
        return (value & -value).bit_length() - 1

    count = 0
    q, r = divmod(value, prime)
    while r == 0:
        count += 1
        value = q
        q, r = divmod(value, prime)
    return count


def iter_factor_groups(value: int, table: PrimeTable) -> Iterator[Tuple[int, int]]:
    """
    Yield (index, multiplicity) for every table prime dividing `value`

    Indices come out in ascending order. Scanning stops as soon as the
    remaining value is 1.
    """
    remaining = value
    for index, prime in enumerate(table):
        if remaining == 1:
            return
        count = multiplicity(remaining, prime)
        if count:
            remaining //= prime ** count
            yield index, count


def iter_factor_indices_reversed(value: int, table: PrimeTable) -> Iterator[int]:
    """Yield each prime index repeated by its multiplicity, descending"""
    remaining = value
    for index in range(len(table) - 1, -1, -1):
        if remaining == 1:
            return
        prime = table[index]
        count = multiplicity(remaining, prime)
        if count:
            remaining //= prime ** count
            for _ in range(count):
                yield index


def count_factors(value: int, table: PrimeTable) -> int:
    """Total number of prime factors of `value`, counted with multiplicity"""
    return sum(count for _, count in iter_factor_groups(value, table))


def residual(value: int, table: PrimeTable) -> int:
    """
    Divide every table prime out of `value` and return what is left

    A well-formed bag value leaves 1.
    """
    remaining = value
    for prime in table:
        if remaining == 1:
            break
        count = multiplicity(remaining, prime)
        if count:
            remaining //= prime ** count
    return remaining
