"""Checkout database management CLI.

Creates or drops the ordering domain's SQL schema. With the default
in-memory provider there is nothing to create and both commands report so.

Usage:
    PROTEAN_ENV=production python src/manage.py setup-db   # Create all tables
    PROTEAN_ENV=production python src/manage.py drop-db    # Drop all tables
"""

import argparse
import sys


def setup_databases():
    """Create database schemas for the ordering domain."""
    from ordering.domain import ordering
    from ordering.utils.db import setup_db

    print("Initializing ordering domain...")
    ordering.init()
    print("Creating ordering database schema...")
    providers = setup_db(ordering)
    if providers:
        print(f"  schema ready on: {', '.join(providers)}")
    else:
        print("  no SQL provider configured, nothing to create.")

    print("Done.")


def drop_databases():
    """Drop database schemas for the ordering domain."""
    from ordering.domain import ordering
    from ordering.utils.db import drop_db

    print("Initializing ordering domain...")
    ordering.init()
    print("Dropping ordering database schema...")
    providers = drop_db(ordering)
    if providers:
        print(f"  schema dropped on: {', '.join(providers)}")
    else:
        print("  no SQL provider configured, nothing to drop.")

    print("Done.")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Checkout database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    args = parser.parse_args(argv)

    if args.command == "setup-db":
        setup_databases()
    elif args.command == "drop-db":
        drop_databases()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
