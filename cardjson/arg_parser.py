"""
CardJSON Arg Parser to determine what actions to take
"""

import argparse
import pathlib
from typing import List, Optional


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command line arguments from user to determine which dataset
    to verify and where to write the results.
    :param argv: Arguments to parse, defaults to sys.argv
    :return: Namespace of requests
    """
    parser = argparse.ArgumentParser("cardjson")

    parser.add_argument(
        "input",
        type=pathlib.Path,
        metavar="FILE",
        help="Set dataset to verify, such as AllSetsArray.json or AllSets.json.",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=pathlib.Path,
        metavar="FILE",
        help="Write the re-encoded set records to this file.",
    )
    parser.add_argument(
        "--pretty",
        "-p",
        action="store_true",
        help="When dumping JSON files, prettify the contents instead of minifying them.",
    )
    parser.add_argument(
        "--lenient-dates",
        action="store_true",
        help="Treat unparsable card release dates as unknown instead of rejecting the set.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log at DEBUG level.",
    )

    return parser.parse_args(argv)
