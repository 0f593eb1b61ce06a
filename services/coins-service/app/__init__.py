"""
Coins Service Package.

Enumerates, values and samples combinations of the four US coin
denominations and serves them over a FastAPI application.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
