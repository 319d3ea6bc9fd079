"""
CardJSON model base and the release date field type.
"""

from __future__ import annotations

import logging
from typing import Annotated, Any, ClassVar, TypeVar

from pydantic import (
    BaseModel,
    PlainSerializer,
    PlainValidator,
    SerializerFunctionWrapHandler,
    ValidationInfo,
    model_serializer,
)

from ..cardjson_config import CardJsonConfig
from ..release_date import (
    RELEASE_DATE_TYPES,
    InvalidReleaseDateFormat,
    ReleaseDate,
    UnknownReleaseDate,
    format_release_date,
    parse_release_date,
)
from ..utils import to_camel_case

LOGGER = logging.getLogger(__name__)

STRICT_RELEASE_DATES_CONTEXT_KEY = "strict_release_dates"

ModelType = TypeVar("ModelType", bound="CardJsonModel")


def _validate_release_date(value: Any) -> ReleaseDate:
    """
    Accept a release date value, a date string, or None
    """
    if isinstance(value, RELEASE_DATE_TYPES):
        return value  # type: ignore[return-value]
    if value is None or isinstance(value, str):
        return parse_release_date(value)
    raise ValueError(f"Expected a release date string, got {value!r}")


def _validate_card_release_date(value: Any, info: ValidationInfo) -> ReleaseDate:
    """
    Card release dates may be dropped instead of failing the card,
    depending on the "strict_release_dates" validation context or configuration
    """
    try:
        return _validate_release_date(value)
    except InvalidReleaseDateFormat as error:
        strict = (info.context or {}).get(STRICT_RELEASE_DATES_CONTEXT_KEY)
        if strict is None:
            strict = CardJsonConfig().strict_release_dates
        if strict:
            raise

        LOGGER.warning(f"{error}, treating release date as unknown")
        return UnknownReleaseDate()


_serialize_release_date = PlainSerializer(format_release_date, return_type=str)

ReleaseDateField = Annotated[
    ReleaseDate, PlainValidator(_validate_release_date), _serialize_release_date
]
CardReleaseDateField = Annotated[
    ReleaseDate, PlainValidator(_validate_card_release_date), _serialize_release_date
]


class CardJsonModel(BaseModel):
    """Common configuration for record models."""

    model_config = {
        "populate_by_name": True,
        "frozen": True,
        "alias_generator": to_camel_case,
    }

    # Field names left out of records when falsey, in addition to None values
    skip_if_falsey: ClassVar[frozenset[str]] = frozenset()

    @model_serializer(mode="wrap")
    def drop_empty_fields(
        self, handler: SerializerFunctionWrapHandler
    ) -> dict[str, Any]:
        data: dict[str, Any] = handler(self)

        falsey_keys = set()
        for name in self.skip_if_falsey:
            falsey_keys.add(name)
            falsey_keys.add(type(self).model_fields[name].alias or name)

        return {
            key: value
            for key, value in data.items()
            if value is not None and not (key in falsey_keys and not value)
        }

    @classmethod
    def from_record(
        cls: type[ModelType],
        record: dict[str, Any],
        strict_release_dates: bool | None = None,
    ) -> ModelType:
        """
        Validate a decoded JSON record
        :param record: Key-value record
        :param strict_release_dates: Fail on an unparsable card release date
        instead of dropping it. Defaults to the configured behavior.
        :return: Model instance
        """
        context: dict[str, Any] = {}
        if strict_release_dates is not None:
            context[STRICT_RELEASE_DATES_CONTEXT_KEY] = strict_release_dates
        return cls.model_validate(record, context=context)

    def to_record(self) -> dict[str, Any]:
        """
        Serialize back to a JSON record, using record keys
        :return: Key-value record
        """
        return self.model_dump(by_alias=True)
