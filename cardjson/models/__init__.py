"""
CardJSON pydantic record models.
"""

from .base import CardJsonModel, CardReleaseDateField, ReleaseDateField
from .cards import Card
from .sets import CardSet

__all__ = [
    "Card",
    "CardJsonModel",
    "CardReleaseDateField",
    "CardSet",
    "ReleaseDateField",
]
