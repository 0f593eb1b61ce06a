"""
API request and response models.

Defines Pydantic models for the JSON envelopes returned by the coins API.
Coins serialize as their variant names ("Penny", "Nickel", "Dime", "Quarter").
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from .domain.entities import Coin


class CombinationDetail(BaseModel):
    """
    Single combination from the enumeration.

    Attributes:
        index: Bitmask index, equal to the position in the enumeration
        coins: Coins present, in canonical order
        value: Total value in cents
    """

    index: int = Field(..., ge=0, description="Bitmask index", examples=[5])
    coins: List[Coin] = Field(
        ..., description="Coins in the combination", examples=[["Penny", "Dime"]]
    )
    value: int = Field(..., ge=0, description="Total value in cents", examples=[11])


class AllCombinationsResponse(BaseModel):
    """
    Full power-set response.

    Response format:
    {
        "total_combinations": 16,
        "combinations": [{"index": 0, "coins": [], "value": 0}, ...]
    }
    """

    total_combinations: int = Field(..., description="Number of combinations")
    combinations: List[CombinationDetail] = Field(
        ..., description="Combinations in ascending index order"
    )


class RandomResponse(BaseModel):
    """Randomly drawn combination and its value."""

    coins: List[Coin] = Field(..., description="Coins in the combination")
    value: int = Field(..., ge=0, description="Total value in cents")


class ValueRequest(BaseModel):
    """Caller-supplied coins to value; duplicates and any order are allowed."""

    coins: List[str] = Field(
        default_factory=list,
        max_length=1000,
        description="Coin variant names",
        examples=[["Nickel", "Nickel"]],
    )


class ValueResponse(BaseModel):
    """Valued caller-supplied coins."""

    coins: List[Coin] = Field(..., description="Coins as supplied, normalized")
    value: int = Field(..., ge=0, description="Total value in cents")


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    service: str
    version: str


class ServiceInfoResponse(BaseModel):
    """Root endpoint response with API information."""

    service: str
    version: str
    endpoints: Dict[str, str]


class ErrorResponse(BaseModel):
    """Standard error response."""

    success: bool = False
    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Human-readable error message")
    details: dict = Field(default_factory=dict, description="Additional error details")
    request_id: Optional[str] = Field(default=None, description="Request ID")
