"""
CardJSON Main Executor
"""

import logging
import sys
from typing import List, Optional

from cardjson.arg_parser import parse_args
from cardjson.cardjson_config import CardJsonConfig
from cardjson.round_trip import load_dataset, verify_round_trip, write_records
from cardjson.utils import init_logger

LOGGER: logging.Logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Verify a set dataset survives decoding and re-encoding
    :param argv: Command line arguments, defaults to sys.argv
    :return: Process exit code
    """
    args = parse_args(argv)
    init_logger(debug=args.debug)

    config = CardJsonConfig()
    LOGGER.info(f"Starting CardJSON {config.cardjson_version}")

    if not args.input.expanduser().is_file():
        LOGGER.error(f"Input file {args.input} was not found")
        raise FileNotFoundError(args.input)

    records = load_dataset(args.input)
    report, encoded_records = verify_round_trip(
        records, False if args.lenient_dates else None
    )

    if args.output:
        write_records(args.output, encoded_records, args.pretty)

    if not report.ok:
        LOGGER.error(f"{len(report.failures)} sets failed to round trip")
        return 1

    LOGGER.info(f"All {report.set_count} sets round tripped")
    return 0


if __name__ == "__main__":
    sys.exit(main())
