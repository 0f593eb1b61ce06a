"""
Domain layer - Coin entities and domain errors.

This layer contains the coin universe and its value table,
independent of any HTTP or framework concerns.
"""
