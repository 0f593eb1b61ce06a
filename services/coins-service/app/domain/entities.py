"""
Domain entities for coin combinations.

The coin universe is a fixed, ordered set of four US denominations.
Its order defines bit-position semantics for combination indices:
bit 0 is Penny, bit 1 Nickel, bit 2 Dime, bit 3 Quarter.
"""

from enum import Enum
from typing import Any, Dict, List, Tuple, Union

from .exceptions import UnknownCoinException


class Coin(str, Enum):
    """US coin denominations, serialized by variant name."""

    PENNY = "Penny"
    NICKEL = "Nickel"
    DIME = "Dime"
    QUARTER = "Quarter"

    @property
    def value_in_cents(self) -> int:
        """Face value of the coin in cents."""
        return COIN_VALUES_IN_CENTS[self]

    @classmethod
    def parse(cls, raw: Union["Coin", str, Any]) -> "Coin":
        """
        Resolve a coin from a member or its variant name.

        Matching on names is case-insensitive, so "dime", "Dime" and
        "DIME" all resolve to Coin.DIME.

        Args:
            raw: Coin member or variant name

        Returns:
            The matching Coin member

        Raises:
            UnknownCoinException: If raw does not name a coin
        """
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, str):
            lookup = raw.strip().lower()
            for coin in cls:
                if coin.value.lower() == lookup:
                    return coin
        raise UnknownCoinException(raw)

    def __str__(self) -> str:
        return self.value


COIN_VALUES_IN_CENTS: Dict[Coin, int] = {
    Coin.PENNY: 1,
    Coin.NICKEL: 5,
    Coin.DIME: 10,
    Coin.QUARTER: 25,
}

# Canonical order; position j corresponds to bit j of a combination index.
COIN_UNIVERSE: Tuple[Coin, ...] = (Coin.PENNY, Coin.NICKEL, Coin.DIME, Coin.QUARTER)

Combination = List[Coin]
