"""
CardJSON Configuration Service
"""

import configparser
import logging
import pathlib
from typing import Optional

from singleton_decorator import singleton

from . import constants


@singleton
class CardJsonConfig:
    """
    Configuration Class that loads in the appropriate configuration file
    and provides the contents for the running program
    """

    logger: logging.Logger
    config_parser: configparser.ConfigParser
    cardjson_version: str
    strict_release_dates: bool

    def __init__(self, config_path: Optional[pathlib.Path] = None):
        self.logger = logging.getLogger(__name__)
        self.config_parser = configparser.ConfigParser()

        config_path = config_path or constants.CONFIG_PATH
        if config_path.is_file():
            self.logger.debug(f"Loading configuration from {config_path}")
            self.config_parser.read(str(config_path))
        else:
            self.logger.warning(
                f"{config_path.name} was not found ({config_path}), using defaults"
            )

        if self.has_option("CardJSON", "version"):
            self.cardjson_version = self.get("CardJSON", "version")
        else:
            self.logger.warning(
                "Key 'version' is missing from Section 'CardJSON' in config file"
            )
            self.cardjson_version = (
                f"1.X.X+{constants.CARDJSON_BUILD_DATE.replace('-', '')}"
            )

        self.strict_release_dates = self.get_boolean(
            "CardJSON", "strict_release_dates", True
        )

    def get(self, section: str, option: str, fallback: str = "") -> str:
        """
        Get a specific value from configuration
        :param section: Section header
        :param option: Key in section
        :param fallback: Default value to use if key not found in section
        :returns Configuration value to use
        """
        if self.has_option(section, option):
            return self.config_parser.get(section, option, fallback=fallback)
        return fallback

    def get_boolean(self, section: str, option: str, fallback: bool = False) -> bool:
        """
        Get a specific value from configuration
        :param section: Section header
        :param option: Key in section
        :param fallback: Default value to use if key not found in section
        :returns Configuration value to use (as a Boolean)
        """
        if self.has_option(section, option):
            return self.config_parser.getboolean(section, option, fallback=fallback)
        return fallback

    def has_option(self, section: str, option: str) -> bool:
        """
        Check if Configuration has a specific option in a specific section
        and has a defined value (ala not VAR=)
        :param section: Section header to find
        :param option: Option to find in section
        :return Does option exist in section
        """
        return (
            self.config_parser.has_option(section, option)
            and len(str(self.config_parser.get(section, option))) > 0
        )
