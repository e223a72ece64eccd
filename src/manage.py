"""Stockroom database management CLI.

Creates or drops the tables backing the stockroom domain. Only SQL
providers are touched; the in-memory default needs no schema.

Usage:
    PROTEAN_ENV=production python src/manage.py setup-db   # Create all tables
    PROTEAN_ENV=production python src/manage.py drop-db    # Drop all tables
"""

import argparse
import sys

import structlog

logger = structlog.get_logger("manage")


def _stockroom():
    from stockroom.domain import stockroom

    logger.info("Initializing stockroom domain")
    stockroom.init()
    return stockroom


def setup_databases():
    from stockroom.utils.db import setup_db

    setup_db(_stockroom())
    logger.info("Stockroom schema ready")


def drop_databases():
    from stockroom.utils.db import drop_db

    drop_db(_stockroom())
    logger.info("Stockroom schema dropped")


def main():
    from stockroom.utils.logging import configure_logging

    configure_logging(log_file_prefix="stockroom-manage")

    parser = argparse.ArgumentParser(description="Stockroom database management")
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_databases()
    elif args.command == "drop-db":
        drop_databases()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
