"""
CardJSON Singular Set Object
"""
from typing import Any, Iterable, List, Mapping, Optional, Set

from ..release_date import (
    InvalidReleaseDateFormat,
    ReleaseDate,
    ReleaseDatePrecision,
    UnknownReleaseDate,
    parse_release_date,
)
from .card import CardObject
from .json_object import (
    FieldDecodeError,
    JsonObject,
    MissingFieldError,
    get_flag,
    get_required,
    skip_falsey,
)


class CardSetObject(JsonObject):
    """
    CardJSON Singular Set Object
    """

    name: str
    code: str
    gatherer_code: Optional[str]
    old_code: Optional[str]
    magic_cards_info_code: Optional[str]
    release_date: ReleaseDate
    border: str
    type: str
    block: Optional[str]
    is_online_only: bool
    booster: List[Any]
    cards: List[CardObject]

    record_key_overrides = {
        "is_online_only": "onlineOnly",
    }

    def __init__(self) -> None:
        """
        Initializer to ensure arrays are pre-loaded
        """
        self.name = ""
        self.code = ""
        self.gatherer_code = None
        self.old_code = None
        self.magic_cards_info_code = None
        self.release_date = UnknownReleaseDate()
        self.border = ""
        self.type = ""
        self.block = None
        self.is_online_only = False
        self.booster = []
        self.cards = []

    @classmethod
    def from_dict(
        cls,
        record: Mapping[str, Any],
        strict_release_dates: Optional[bool] = None,
    ) -> "CardSetObject":
        """
        Build a set, and all of its cards, from its decoded JSON record
        :param record: Set record
        :param strict_release_dates: Passed through to each card
        :return: Set object
        """
        card_set = cls()

        card_set.name = get_required(record, "name")
        card_set.code = get_required(record, "code")
        card_set.gatherer_code = record.get("gathererCode")
        card_set.old_code = record.get("oldCode")
        card_set.magic_cards_info_code = record.get("magicCardsInfoCode")
        card_set.release_date = cls._release_date_from_record(record)
        card_set.border = get_required(record, "border")
        card_set.type = get_required(record, "type")
        card_set.block = record.get("block")
        card_set.is_online_only = get_flag(record, "onlineOnly")
        card_set.booster = record.get("booster") or []

        card_records = get_required(record, "cards")
        if not isinstance(card_records, list):
            raise FieldDecodeError("cards", f"Expected an array, got {card_records!r}")

        for index, card_record in enumerate(card_records):
            if not isinstance(card_record, Mapping):
                raise FieldDecodeError(f"cards[{index}]", "Expected a card object")
            try:
                card = CardObject.from_dict(card_record, strict_release_dates)
            except FieldDecodeError as error:
                raise error.nested_under(f"cards[{index}]") from error
            card_set.cards.append(card)

        return card_set

    @staticmethod
    def _release_date_from_record(record: Mapping[str, Any]) -> ReleaseDate:
        raw = get_required(record, "releaseDate")
        if not isinstance(raw, str):
            raise FieldDecodeError("releaseDate", f"Expected a string, got {raw!r}")

        try:
            release_date = parse_release_date(raw)
        except InvalidReleaseDateFormat as error:
            raise FieldDecodeError("releaseDate", str(error)) from error

        if release_date.precision is ReleaseDatePrecision.NONE:
            raise MissingFieldError("releaseDate")

        return release_date

    def build_keys_to_skip(self) -> Set[str]:
        """
        Build this object's instance of what keys to skip under certain circumstances
        :return What keys to skip over
        """
        excluded_keys = set(super().build_keys_to_skip())
        excluded_keys |= skip_falsey(self, {"is_online_only", "booster"})
        return excluded_keys


def card_sets_from_dicts(
    records: Iterable[Mapping[str, Any]],
    strict_release_dates: Optional[bool] = None,
) -> List[CardSetObject]:
    """
    Convert an array of set records into set objects
    :param records: Set records, as found in AllSetsArray.json
    :param strict_release_dates: Passed through to each card
    :return: Set objects, in input order
    :raises FieldDecodeError: First record that could not be converted
    """
    card_sets = []
    for index, record in enumerate(records):
        if not isinstance(record, Mapping):
            raise FieldDecodeError(f"[{index}]", "Expected a set object")
        try:
            card_sets.append(CardSetObject.from_dict(record, strict_release_dates))
        except FieldDecodeError as error:
            raise error.nested_under(f"[{index}]") from error
    return card_sets
