"""
CardJSON set model.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import Field, ValidationInfo, field_validator

from ..release_date import ReleaseDate, ReleaseDatePrecision
from .base import CardJsonModel, ReleaseDateField
from .cards import Card


class CardSet(CardJsonModel):
    """Set with its cards, as found in AllSetsArray.json."""

    skip_if_falsey: ClassVar[frozenset[str]] = frozenset({"is_online_only", "booster"})

    name: str
    code: str
    type: str
    border: str
    release_date: ReleaseDateField

    # Alternate codes
    gatherer_code: str | None = None
    old_code: str | None = None
    magic_cards_info_code: str | None = None

    block: str | None = None
    is_online_only: bool = Field(default=False, alias="onlineOnly")
    booster: list[Any] = Field(default_factory=list)
    cards: list[Card]

    @field_validator("release_date")
    @classmethod
    def release_date_is_known(cls, value: ReleaseDate) -> ReleaseDate:
        """A set always has a release date of some precision."""
        if value.precision is ReleaseDatePrecision.NONE:
            raise ValueError("Set release date is missing")
        return value

    @field_validator("is_online_only", "booster", mode="before")
    @classmethod
    def null_as_default(cls, value: Any, info: ValidationInfo) -> Any:
        """Records may carry null where the field has a default."""
        if value is None and info.field_name:
            return cls.model_fields[info.field_name].get_default(
                call_default_factory=True
            )
        return value
