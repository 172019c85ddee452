"""Marketplace database management CLI.

Creates or drops the relational schema for the marketplace domain. Only
providers backed by SQLAlchemy are touched; the in-memory provider used in
development has nothing to create.

Usage:
    PROTEAN_ENV=production python src/manage.py setup-db   # Create all tables
    PROTEAN_ENV=production python src/manage.py drop-db    # Drop all tables
"""

import argparse
import sys


def setup_databases():
    from marketplace.domain import marketplace
    from marketplace.utils.db import setup_db

    print("Initializing marketplace domain...")
    marketplace.init()
    touched = setup_db(marketplace)
    if touched:
        print(f"  Schema ready for providers: {', '.join(touched)}")
    else:
        print("  No relational providers configured, nothing to create.")
    print("Done.")


def drop_databases():
    from marketplace.domain import marketplace
    from marketplace.utils.db import drop_db

    print("Initializing marketplace domain...")
    marketplace.init()
    touched = drop_db(marketplace)
    if touched:
        print(f"  Schema dropped for providers: {', '.join(touched)}")
    else:
        print("  No relational providers configured, nothing to drop.")
    print("Done.")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Marketplace database management")
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
