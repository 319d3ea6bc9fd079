"""
CardJSON Top Level Object
"""
import abc
from typing import Any, Dict, Iterable, Mapping, Set, Type, TypeVar

from ..release_date import RELEASE_DATE_TYPES, format_release_date
from ..utils import to_camel_case

JsonObjectType = TypeVar("JsonObjectType", bound="JsonObject")


class FieldDecodeError(ValueError):
    """Raised when a record field cannot be converted to its model value."""

    def __init__(self, key: str, reason: str) -> None:
        self.key = key
        self.reason = reason
        super().__init__(f"[{key}] {reason}")

    def nested_under(self, prefix: str) -> "FieldDecodeError":
        """
        Build the same error, located inside a parent record
        :param prefix: Location of the child record in its parent
        :return: Error with a prefixed key
        """
        return type(self)(f"{prefix}.{self.key}", self.reason)


class MissingFieldError(FieldDecodeError):
    """Raised when a required record key is absent."""

    def __init__(self, key: str, reason: str = "Required key is missing") -> None:
        super().__init__(key, reason)


class JsonObject(abc.ABC):
    """
    Top level Json Dump object class
    """

    # Attribute names whose record key is not the camelCase attribute name
    record_key_overrides: Dict[str, str] = {}

    @classmethod
    @abc.abstractmethod
    def from_dict(
        cls: Type[JsonObjectType], record: Mapping[str, Any]
    ) -> JsonObjectType:
        """
        Build the object from a decoded JSON record
        :param record: Key-value record
        :return: Populated object
        """

    @classmethod
    def record_key(cls, attribute: str) -> str:
        """
        Determine the record key an attribute is stored under
        :param attribute: Attribute name
        :return: Record key
        """
        return cls.record_key_overrides.get(attribute, to_camel_case(attribute))

    def build_keys_to_skip(self) -> Iterable[str]:
        """
        Determine what keys should be avoided in the JSON dump
        :return Keys to avoid
        """
        return {key for key, value in self.__dict__.items() if value is None}

    def to_json(self) -> Dict[str, Any]:
        """
        Support json.dump()
        :return: JSON serialized object
        """
        skip_keys = self.build_keys_to_skip()

        return {
            self.record_key(key): _to_json_value(value)
            for key, value in self.__dict__.items()
            if "__" not in key and not callable(value) and key not in skip_keys
        }

    def __eq__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return bool(self.__dict__ == other.__dict__)

    def __str__(self) -> str:
        """
        Object as a string for debugging purposes
        :return Object as a string
        """
        return str(vars(self))


def _to_json_value(value: Any) -> Any:
    if isinstance(value, JsonObject):
        return value.to_json()
    if isinstance(value, RELEASE_DATE_TYPES):
        return format_release_date(value)
    if isinstance(value, list):
        return [_to_json_value(entry) for entry in value]
    return value


def get_required(record: Mapping[str, Any], key: str) -> Any:
    """
    Get a value that must be present in the record
    :param record: Key-value record
    :param key: Record key
    :return: Value at key
    :raises MissingFieldError: Key is absent or null
    """
    value = record.get(key)
    if value is None:
        raise MissingFieldError(key)
    return value


def get_flag(record: Mapping[str, Any], key: str) -> bool:
    """
    Get a boolean flag that is only written when true
    :param record: Key-value record
    :param key: Record key
    :return: True if the record carries a truthy value at key
    """
    return bool(record.get(key))


def skip_falsey(obj: JsonObject, keys: Set[str]) -> Set[str]:
    """
    Find which of the given attributes hold a falsey value
    :param obj: Object to inspect
    :param keys: Attribute names to consider
    :return: Attribute names with falsey values
    """
    return {key for key in keys if not getattr(obj, key)}
