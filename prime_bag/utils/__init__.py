"""Utility functions for prime bags"""

from .capacity import (
    CapacityRow,
    bits_per_occurrence,
    capacity_table,
    max_occurrences
)

__all__ = [
    'CapacityRow',
    'bits_per_occurrence',
    'capacity_table',
    'max_occurrences'
]
