"""
zotero-tropy - Main Entry Point

Converts a Zotero JSON export into a CSV file for Tropy import:

    python -m zotero_tropy export.json tropy.csv --nested
"""

import argparse
import sys
from pathlib import Path

from aws_lambda_powertools import Logger
from aws_lambda_powertools.logging.utils import copy_config_to_registered_loggers

from zotero_tropy.converter import ItemConverter
from zotero_tropy.core.config import LAYOUT_FLAT, LAYOUT_NESTED, resolve_config
from zotero_tropy.core.errors import ZoteroTropyError
from zotero_tropy.core.version import __version__
from zotero_tropy.loader import load_export
from zotero_tropy.writer import write_csv

logger = Logger(service="zotero-tropy")


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog="zotero-tropy",
        description="Convert a Zotero JSON export into a Tropy import CSV",
    )
    parser.add_argument("input", type=Path, help="Zotero JSON export")
    parser.add_argument("output", type=Path, help="CSV file to write (overwritten)")

    layout = parser.add_mutually_exclusive_group()
    layout.add_argument(
        "--flat",
        dest="layout",
        action="store_const",
        const=LAYOUT_FLAT,
        help="Reference attachments as files/<id>-<name> (default)",
    )
    layout.add_argument(
        "--nested",
        dest="layout",
        action="store_const",
        const=LAYOUT_NESTED,
        help="Reference attachments by their storage path",
    )

    parser.add_argument("--config", type=Path, help="JSON configuration file")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (default: INFO)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the conversion and return the process exit code."""
    args = build_parser().parse_args(argv)

    logger.setLevel(args.log_level)
    copy_config_to_registered_loggers(source_logger=logger, log_level=args.log_level)

    try:
        overrides = {"layout": args.layout} if args.layout else None
        config = resolve_config(args.config, overrides)

        items = load_export(args.input)
        converted = ItemConverter(config).convert_all(items)
        rows = write_csv(args.output, converted)
    except ZoteroTropyError as e:
        logger.error(f"Conversion failed: {e}")
        return 1

    logger.info(
        "Export finished",
        extra={"output": str(args.output), "rows": rows, "layout": config.layout},
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
