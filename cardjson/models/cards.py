"""
CardJSON card model.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import Field, ValidationInfo, field_validator

from ..release_date import UnknownReleaseDate
from .base import CardJsonModel, CardReleaseDateField


class Card(CardJsonModel):
    """Card within a set, as found in AllSetsArray.json."""

    skip_if_falsey: ClassVar[frozenset[str]] = frozenset(
        {
            "mana_cost",
            "cmc",
            "types",
            "is_timeshifted",
            "is_reserved",
            "release_date",
            "is_starter",
        }
    )

    # Identity
    layout: str
    name: str
    number: str | None = None
    multiverse_id: int | None = Field(default=None, alias="multiverseid")
    variations: list[int] | None = None

    # Mana
    mana_cost: str = ""
    cmc: int | float = 0
    colors: list[str] | None = None

    # Type line
    type: str
    supertypes: list[str] | None = None
    types: list[str] = Field(default_factory=list)
    subtypes: list[str] | None = None

    # Printing
    rarity: str
    text: str | None = None
    flavor: str | None = None
    artist: str
    watermark: str | None = None
    border: str | None = None
    release_date: CardReleaseDateField = Field(default_factory=UnknownReleaseDate)

    # Stats
    power: str | None = None
    toughness: str | None = None
    loyalty: int | None = None
    hand: int | None = None
    life: int | None = None

    # Flags
    is_timeshifted: bool = Field(default=False, alias="timeshifted")
    is_reserved: bool = Field(default=False, alias="reserved")
    is_starter: bool = Field(default=False, alias="starter")

    @field_validator(
        "mana_cost",
        "cmc",
        "types",
        "is_timeshifted",
        "is_reserved",
        "is_starter",
        mode="before",
    )
    @classmethod
    def null_as_default(cls, value: Any, info: ValidationInfo) -> Any:
        """Records may carry null where the field has a default."""
        if value is None and info.field_name:
            return cls.model_fields[info.field_name].get_default(
                call_default_factory=True
            )
        return value
