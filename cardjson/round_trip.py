"""
CardJSON Round Trip Verifier

Decode a set dataset with both decoders, re-encode every set, and make sure
the re-encoded records decode back to the same values.
"""

import collections
import logging
import pathlib
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Counter, Dict, List, Optional, Tuple

import orjson
import pydantic

from . import constants
from .classes import CardSetObject, FieldDecodeError
from .models import CardSet
from .release_date import parse_release_date

LOGGER = logging.getLogger(__name__)


class RoundTripMismatchError(ValueError):
    """Raised when a re-encoded record decodes to a different value."""


@dataclass
class RoundTripFailure:
    """A single set that did not survive decoding or re-encoding"""

    index: int
    code: str
    decoder: str
    message: str


@dataclass
class RoundTripReport:
    """Summary of a round trip run over a dataset"""

    set_count: int = 0
    card_count: int = 0
    release_date_precisions: Counter[str] = field(default_factory=collections.Counter)
    failures: List[RoundTripFailure] = field(default_factory=list)
    elapsed_seconds: Dict[str, float] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        """
        Did every set round trip with both decoders
        :return: True if no failures were recorded
        """
        return not self.failures

    def add_failure(self, index: int, record: Any, decoder: str, message: str) -> None:
        """
        Record a failing set and log it
        :param index: Position of the set in the dataset
        :param record: Offending set record
        :param decoder: Which decoder failed
        :param message: What went wrong
        """
        code = record.get("code", "???") if isinstance(record, dict) else "???"
        LOGGER.error(f"[{code}] {decoder}: {message}")
        self.failures.append(RoundTripFailure(index, code, decoder, message))


def load_dataset(path: pathlib.Path) -> List[Dict[str, Any]]:
    """
    Load set records from a JSON dump. Supports AllSetsArray.json (a list),
    AllSets.json (code => set), and either wrapped in a "data" key.
    :param path: JSON file to read
    :return: Set records
    """
    path = path.expanduser()
    LOGGER.info(f"Loading set records from {path}")

    with path.open("rb") as file:
        content = orjson.loads(file.read())

    if isinstance(content, dict) and constants.DATASET_WRAPPER_KEY in content:
        content = content[constants.DATASET_WRAPPER_KEY]

    if isinstance(content, dict):
        content = list(content.values())

    if not isinstance(content, list):
        raise ValueError(f"{path} does not contain an array of set records")

    return content


def write_records(
    path: pathlib.Path, records: List[Dict[str, Any]], pretty_print: bool = False
) -> None:
    """
    Dump records to a JSON file
    :param path: File to write
    :param records: Records to dump
    :param pretty_print: Indent the output instead of minifying it
    """
    path = path.expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)

    options = orjson.OPT_INDENT_2 | orjson.OPT_SORT_KEYS if pretty_print else 0
    with path.open("wb") as file:
        file.write(orjson.dumps(records, option=options))

    LOGGER.info(f"Wrote {len(records)} records to {path}")


def _record_round_trip(
    record: Dict[str, Any], strict_release_dates: Optional[bool]
) -> Dict[str, Any]:
    card_set = CardSetObject.from_dict(record, strict_release_dates)
    encoded = card_set.to_json()
    if CardSetObject.from_dict(encoded, strict_release_dates) != card_set:
        raise RoundTripMismatchError("Re-encoded record decodes to a different set")
    return encoded


def _model_round_trip(
    record: Dict[str, Any], strict_release_dates: Optional[bool]
) -> Dict[str, Any]:
    card_set = CardSet.from_record(record, strict_release_dates)
    encoded = card_set.to_record()
    if CardSet.from_record(encoded, strict_release_dates) != card_set:
        raise RoundTripMismatchError("Re-encoded record decodes to a different set")
    return encoded


DECODERS: Dict[str, Callable[[Dict[str, Any], Optional[bool]], Dict[str, Any]]] = {
    "record": _record_round_trip,
    "model": _model_round_trip,
}


def verify_round_trip(
    records: List[Dict[str, Any]],
    strict_release_dates: Optional[bool] = None,
) -> Tuple[RoundTripReport, List[Dict[str, Any]]]:
    """
    Decode and re-encode every set record with both decoders
    :param records: Set records
    :param strict_release_dates: Card release date policy, defaults to configuration
    :return: Report, and the re-encoded records that both decoders agreed on
    """
    report = RoundTripReport(set_count=len(records))
    encoded_by_decoder: Dict[str, Dict[int, Dict[str, Any]]] = {}

    for decoder_name, round_trip in DECODERS.items():
        encoded_records: Dict[int, Dict[str, Any]] = {}
        start_time = time.perf_counter()

        for index, record in enumerate(records):
            if not isinstance(record, dict):
                report.add_failure(index, record, decoder_name, "Not a set object")
                continue

            try:
                encoded_records[index] = round_trip(record, strict_release_dates)
            except (
                FieldDecodeError,
                pydantic.ValidationError,
                RoundTripMismatchError,
            ) as error:
                report.add_failure(index, record, decoder_name, str(error))

        report.elapsed_seconds[decoder_name] = time.perf_counter() - start_time
        encoded_by_decoder[decoder_name] = encoded_records
        LOGGER.info(
            f"{decoder_name} decoder converted {len(encoded_records)}/{len(records)} "
            f"sets in {report.elapsed_seconds[decoder_name]:.3f}s"
        )

    agreed_records = []
    record_encoded = encoded_by_decoder["record"]
    model_encoded = encoded_by_decoder["model"]
    for index in sorted(record_encoded.keys() & model_encoded.keys()):
        if record_encoded[index] != model_encoded[index]:
            report.add_failure(
                index, records[index], "cross-check", "Decoders disagree on record"
            )
            continue

        encoded = record_encoded[index]
        agreed_records.append(encoded)
        report.card_count += len(encoded["cards"])
        report.release_date_precisions[_precision_name(encoded)] += 1
        for card in encoded["cards"]:
            report.release_date_precisions[_precision_name(card)] += 1

    LOGGER.info(
        f"Round trip complete: {len(agreed_records)}/{report.set_count} sets, "
        f"{report.card_count} cards, {len(report.failures)} failures"
    )
    LOGGER.debug(f"Release date precisions: {dict(report.release_date_precisions)}")

    return report, agreed_records


def _precision_name(encoded: Dict[str, Any]) -> str:
    return parse_release_date(encoded.get("releaseDate")).precision.value
