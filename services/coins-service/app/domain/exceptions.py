"""
Custom exceptions for the coins service domain.

These exceptions represent errors in caller-supplied data and are
independent of infrastructure concerns (HTTP, logging, etc.).
"""

from typing import Any, Optional


class CoinsServiceException(Exception):
    """Base exception for all coins service errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class UnknownCoinException(CoinsServiceException):
    """Raised when a value does not name one of the known coin variants."""

    def __init__(self, coin: Any):
        self.coin = coin
        super().__init__(
            message=f"Unknown coin: {coin!r}",
            details={"coin": str(coin)},
        )


class InvalidCombinationIndexException(CoinsServiceException):
    """Raised when a combination index falls outside the power-set range."""

    def __init__(self, index: Any, max_index: int):
        self.index = index
        self.max_index = max_index
        super().__init__(
            message=f"Combination index {index!r} out of range [0, {max_index}]",
            details={"index": str(index), "min_index": 0, "max_index": max_index},
        )
