"""
Tests for cardjson/cardjson_config.py
"""

from cardjson import constants
from cardjson.cardjson_config import CardJsonConfig


def test_loads_bundled_properties():
    config = CardJsonConfig()

    assert config.cardjson_version == constants.CONFIG.get("CardJSON", "version")
    assert config.strict_release_dates is True


def test_is_a_singleton():
    assert CardJsonConfig() is CardJsonConfig()


def test_custom_properties_file(tmp_path):
    config_path = tmp_path / "cardjson.properties"
    config_path.write_text(
        "[CardJSON]\nversion=9.9.9\nstrict_release_dates=false\nempty=\n",
        encoding="utf-8",
    )

    config = CardJsonConfig(config_path)

    assert config.cardjson_version == "9.9.9"
    assert config.strict_release_dates is False
    assert not config.has_option("CardJSON", "empty")
    assert config.get("CardJSON", "empty", "fallback") == "fallback"


def test_missing_properties_file(tmp_path):
    config = CardJsonConfig(tmp_path / "missing.properties")

    assert config.cardjson_version.startswith("1.X.X+")
    assert config.strict_release_dates is True
    assert config.get_boolean("CardJSON", "strict_release_dates", False) is False
