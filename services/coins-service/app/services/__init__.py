"""
Service layer - power-set enumeration, valuation and sampling.
"""

from .combinations import (
    combination_count,
    decode_index,
    encode_combination,
    generate_all_combinations,
    generate_random_combination,
    total_value,
)

__all__ = [
    "combination_count",
    "decode_index",
    "encode_combination",
    "generate_all_combinations",
    "generate_random_combination",
    "total_value",
]
