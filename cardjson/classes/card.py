"""
CardJSON Singular Card Object
"""
import logging
from typing import Any, List, Mapping, Optional, Set

from ..cardjson_config import CardJsonConfig
from ..release_date import (
    InvalidReleaseDateFormat,
    ReleaseDate,
    ReleaseDatePrecision,
    UnknownReleaseDate,
    parse_release_date,
)
from .json_object import (
    FieldDecodeError,
    JsonObject,
    get_flag,
    get_required,
    skip_falsey,
)

LOGGER = logging.getLogger(__name__)


class CardObject(JsonObject):
    """
    CardJSON Singular Card Object
    """

    layout: str
    name: str
    mana_cost: str
    cmc: float
    colors: Optional[List[str]]
    type: str
    supertypes: Optional[List[str]]
    types: List[str]
    subtypes: Optional[List[str]]
    rarity: str
    text: Optional[str]
    flavor: Optional[str]
    artist: str
    number: Optional[str]
    power: Optional[str]
    toughness: Optional[str]
    loyalty: Optional[int]
    multiverse_id: Optional[int]
    variations: Optional[List[int]]
    watermark: Optional[str]
    border: Optional[str]
    is_timeshifted: bool
    hand: Optional[int]
    life: Optional[int]
    is_reserved: bool
    release_date: ReleaseDate
    is_starter: bool

    record_key_overrides = {
        "multiverse_id": "multiverseid",
        "is_timeshifted": "timeshifted",
        "is_reserved": "reserved",
        "is_starter": "starter",
    }

    def __init__(self) -> None:
        """
        Initializer to ensure defaults are pre-loaded
        """
        self.layout = ""
        self.name = ""
        self.mana_cost = ""
        self.cmc = 0
        self.colors = None
        self.type = ""
        self.supertypes = None
        self.types = []
        self.subtypes = None
        self.rarity = ""
        self.text = None
        self.flavor = None
        self.artist = ""
        self.number = None
        self.power = None
        self.toughness = None
        self.loyalty = None
        self.multiverse_id = None
        self.variations = None
        self.watermark = None
        self.border = None
        self.is_timeshifted = False
        self.hand = None
        self.life = None
        self.is_reserved = False
        self.release_date = UnknownReleaseDate()
        self.is_starter = False

    @classmethod
    def from_dict(
        cls,
        record: Mapping[str, Any],
        strict_release_dates: Optional[bool] = None,
    ) -> "CardObject":
        """
        Build a card from its decoded JSON record
        :param record: Card record
        :param strict_release_dates: Fail on an unparsable release date instead of
        dropping it. Defaults to the configured behavior.
        :return: Card object
        """
        card = cls()

        card.layout = get_required(record, "layout")
        card.name = get_required(record, "name")
        card.mana_cost = record.get("manaCost") or ""
        card.cmc = record.get("cmc") or 0
        card.colors = record.get("colors")
        card.type = get_required(record, "type")
        card.supertypes = record.get("supertypes")
        card.types = record.get("types") or []
        card.subtypes = record.get("subtypes")
        card.rarity = get_required(record, "rarity")
        card.text = record.get("text")
        card.flavor = record.get("flavor")
        card.artist = get_required(record, "artist")
        card.number = record.get("number")
        card.power = record.get("power")
        card.toughness = record.get("toughness")
        card.loyalty = record.get("loyalty")
        card.multiverse_id = record.get("multiverseid")
        card.variations = record.get("variations")
        card.watermark = record.get("watermark")
        card.border = record.get("border")
        card.is_timeshifted = get_flag(record, "timeshifted")
        card.hand = record.get("hand")
        card.life = record.get("life")
        card.is_reserved = get_flag(record, "reserved")
        card.release_date = cls._release_date_from_record(
            record, strict_release_dates
        )
        card.is_starter = get_flag(record, "starter")

        return card

    @staticmethod
    def _release_date_from_record(
        record: Mapping[str, Any], strict: Optional[bool]
    ) -> ReleaseDate:
        raw = record.get("releaseDate")
        if raw is not None and not isinstance(raw, str):
            raise FieldDecodeError("releaseDate", f"Expected a string, got {raw!r}")

        try:
            return parse_release_date(raw)
        except InvalidReleaseDateFormat as error:
            if strict is None:
                strict = CardJsonConfig().strict_release_dates
            if strict:
                raise FieldDecodeError("releaseDate", str(error)) from error

            LOGGER.warning(
                f"{record.get('name')}: {error}, treating release date as unknown"
            )
            return UnknownReleaseDate()

    def build_keys_to_skip(self) -> Set[str]:
        """
        Build this object's instance of what keys to skip under certain circumstances
        :return What keys to skip over
        """
        excluded_keys = set(super().build_keys_to_skip())
        excluded_keys |= skip_falsey(
            self,
            {"mana_cost", "cmc", "types", "is_timeshifted", "is_reserved", "is_starter"},
        )

        if self.release_date.precision is ReleaseDatePrecision.NONE:
            excluded_keys.add("release_date")

        return excluded_keys
