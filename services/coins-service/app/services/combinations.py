"""
Coin combination logic.

Enumerates the power set of the coin universe using bitmask encoding,
values combinations in cents, and samples a single random combination.
All functions are pure apart from the sampler consuming entropy from the
process-wide random source.
"""

import random
from typing import Iterable, List, Sequence

from ..domain.entities import COIN_UNIVERSE, Coin, Combination
from ..domain.exceptions import InvalidCombinationIndexException, UnknownCoinException


def combination_count(universe: Sequence[Coin] = COIN_UNIVERSE) -> int:
    """Number of subsets of the universe (2^n)."""
    return 1 << len(universe)


def decode_index(index: int, universe: Sequence[Coin] = COIN_UNIVERSE) -> Combination:
    """
    Decode a bitmask index into its combination.

    Bit positions are scanned in ascending order, so the resulting coins
    always follow the canonical universe order.

    Args:
        index: Bitmask in [0, 2^n - 1]
        universe: Ordered coin universe defining bit positions

    Returns:
        Coins whose bit is set in index

    Raises:
        InvalidCombinationIndexException: If index is not an int in range
    """
    max_index = combination_count(universe) - 1
    if isinstance(index, bool) or not isinstance(index, int):
        raise InvalidCombinationIndexException(index, max_index)
    if index < 0 or index > max_index:
        raise InvalidCombinationIndexException(index, max_index)

    combination: Combination = []
    for position, coin in enumerate(universe):
        if (index >> position) & 1:
            combination.append(coin)
    return combination


def encode_combination(
    coins: Iterable[Coin], universe: Sequence[Coin] = COIN_UNIVERSE
) -> int:
    """
    Encode a combination back into its bitmask index.

    Duplicate coins set the same bit once, and coin order is irrelevant.

    Args:
        coins: Coins (members or variant names) to encode
        universe: Ordered coin universe defining bit positions

    Returns:
        Bitmask index of the combination

    Raises:
        UnknownCoinException: If a coin is not part of the universe
    """
    positions = {coin: position for position, coin in enumerate(universe)}
    index = 0
    for raw in coins:
        coin = Coin.parse(raw)
        if coin not in positions:
            raise UnknownCoinException(raw)
        index |= 1 << positions[coin]
    return index


def generate_all_combinations(
    universe: Sequence[Coin] = COIN_UNIVERSE,
) -> List[Combination]:
    """
    Generate the full power set of the coin universe.

    Position i of the returned list is the combination decoded from
    index i, so the list index doubles as the bitmask.

    Args:
        universe: Ordered coin universe defining bit positions

    Returns:
        All 2^n combinations in ascending index order
    """
    return [decode_index(index, universe) for index in range(combination_count(universe))]


def total_value(coins: Iterable[Coin]) -> int:
    """
    Total value of a combination in cents.

    Duplicates are counted each time they appear; callers may pass
    combinations that the enumerator would never produce.

    Raises:
        UnknownCoinException: If an entry does not name a coin
    """
    return sum(Coin.parse(coin).value_in_cents for coin in coins)


def generate_random_combination(universe: Sequence[Coin] = COIN_UNIVERSE) -> Combination:
    """
    Draw one combination uniformly at random.

    Every index in [0, 2^n - 1] is equally likely, including the empty
    and the full combination.
    """
    index = random.randrange(combination_count(universe))
    return decode_index(index, universe)
