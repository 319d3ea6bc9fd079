"""Pytest configuration and fixtures for CardJSON tests."""

import copy
import json
from pathlib import Path
from typing import Any, Dict, Generator, List

import pytest

from cardjson.cardjson_config import CardJsonConfig

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "card_sets"


def load_fixture(name: str) -> Any:
    """Load a JSON fixture file and return parsed data."""
    return json.loads((FIXTURES_DIR / f"{name}.json").read_text(encoding="utf-8"))


@pytest.fixture(autouse=True)
def reset_config_singleton() -> Generator[None, None, None]:
    """Reset the CardJsonConfig singleton between tests."""
    CardJsonConfig._instance = None
    yield
    CardJsonConfig._instance = None


@pytest.fixture
def sample_set_records() -> List[Dict[str, Any]]:
    """Set records from the sample AllSetsArray dump."""
    return load_fixture("AllSetsArray_sample")


@pytest.fixture
def media_inserts_record(sample_set_records: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Set whose cards carry release dates of every precision."""
    return copy.deepcopy(
        next(record for record in sample_set_records if record["code"] == "pMEI")
    )


@pytest.fixture
def wall_of_swords_record(sample_set_records: List[Dict[str, Any]]) -> Dict[str, Any]:
    """A card record with most optional fields populated."""
    return copy.deepcopy(sample_set_records[0]["cards"][1])
