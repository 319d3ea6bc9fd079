"""
CardJSON Constants
"""
import configparser
import datetime
import os
import pathlib

# Useful CardJSON Paths - Part 1
TOP_LEVEL_DIR: pathlib.Path = pathlib.Path(__file__).resolve().parent.parent
RESOURCE_PATH: pathlib.Path = TOP_LEVEL_DIR.joinpath("cardjson").joinpath("resources")
CONFIG_PATH: pathlib.Path = RESOURCE_PATH.joinpath("cardjson.properties")
ENV_OUT_PATH: pathlib.Path = (
    pathlib.Path(os.environ.get("CARDJSON_OUTPUT_PATH", TOP_LEVEL_DIR))
    .expanduser()
    .resolve()
)

# Load in CardJSON config values
CONFIG = configparser.ConfigParser()
CONFIG.read(str(CONFIG_PATH))

CARDJSON_BUILD_DATE: str = CONFIG.get(
    "CardJSON", "date", fallback=""
) or datetime.datetime.today().strftime("%Y-%m-%d")

# Useful CardJSON Paths - Part 2
LOG_PATH: pathlib.Path = ENV_OUT_PATH.joinpath("cardjson_logs")

# Top level keys the dataset may be wrapped in
DATASET_WRAPPER_KEY: str = "data"
