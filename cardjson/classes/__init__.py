"""
CardJSON Class Dispatcher
"""

from .card import CardObject
from .card_set import CardSetObject, card_sets_from_dicts
from .json_object import FieldDecodeError, JsonObject, MissingFieldError
