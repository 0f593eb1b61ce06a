"""
Coin combination router.

Exposes the power-set enumeration, single-index lookup, random sampling
and valuation of caller-supplied coins.
"""

from fastapi import APIRouter, Path

from ..domain.entities import Coin
from ..logging_config import get_logger
from ..metrics import track_combination_value, track_combinations
from ..models import (
    AllCombinationsResponse,
    CombinationDetail,
    ErrorResponse,
    RandomResponse,
    ValueRequest,
    ValueResponse,
)
from ..services.combinations import (
    decode_index,
    generate_all_combinations,
    generate_random_combination,
    total_value,
)

logger = get_logger(__name__)

router = APIRouter(tags=["combinations"])


@router.get(
    "/random",
    response_model=RandomResponse,
    summary="Random combination",
    description="Draw one of the 16 combinations uniformly at random",
)
async def get_random_combination() -> RandomResponse:
    """Returns a random coin combination and its value."""
    combination = generate_random_combination()
    value = total_value(combination)

    track_combinations("random")
    track_combination_value(value)
    logger.debug("random_combination", coins=[str(c) for c in combination], value=value)

    return RandomResponse(coins=combination, value=value)


@router.get(
    "/all",
    response_model=AllCombinationsResponse,
    summary="All combinations",
    description="Every subset of the coin set, ordered by bitmask index",
)
async def get_all_combinations() -> AllCombinationsResponse:
    """
    Returns all possible coin combinations.

    Each item's index equals both its position in the list and the
    bitmask it was decoded from.
    """
    combinations = [
        CombinationDetail(index=index, coins=coins, value=total_value(coins))
        for index, coins in enumerate(generate_all_combinations())
    ]

    track_combinations("all", len(combinations))

    return AllCombinationsResponse(
        total_combinations=len(combinations),
        combinations=combinations,
    )


@router.get(
    "/all/{index}",
    response_model=CombinationDetail,
    responses={404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
    summary="Combination by index",
    description="Decode a single bitmask index into its combination",
)
async def get_combination(
    index: int = Path(..., description="Bitmask index of the combination"),
) -> CombinationDetail:
    """Returns the combination for one bitmask index."""
    coins = decode_index(index)
    track_combinations("index")
    return CombinationDetail(index=index, coins=coins, value=total_value(coins))


@router.post(
    "/value",
    response_model=ValueResponse,
    responses={422: {"model": ErrorResponse}},
    summary="Value coins",
    description="Total value in cents of any list of coins, duplicates included",
)
async def value_coins(request: ValueRequest) -> ValueResponse:
    """Values a caller-supplied list of coins."""
    coins = [Coin.parse(raw) for raw in request.coins]
    value = total_value(coins)

    track_combination_value(value)

    return ValueResponse(coins=coins, value=value)
