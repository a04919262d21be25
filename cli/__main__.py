#!/usr/bin/env python3
"""
Roster CLI - Command-line interface for the accounts store.

Usage:
    python -m cli <command> [subcommand] [options]

Commands:
    accounts     List or replace accounts
    db           Database setup
    serve        Run the HTTP endpoint

Examples:
    python -m cli db init
    python -m cli accounts list
    python -m cli accounts replace accounts.json
    python -m cli serve --port 8000
"""

import sys
import argparse
from cli import accounts, database, serve
from config import load_config
from services.base import Services
from logger import setup_logging


def main():
    """Main CLI entry point with subcommands."""
    parser = argparse.ArgumentParser(
        prog="cli",
        description="Roster - Full-list account persistence",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
        required=True,
    )

    accounts.setup_parser(subparsers)
    database.setup_parser(subparsers)
    serve.setup_parser(subparsers)

    args = parser.parse_args()

    if hasattr(args, "func"):
        try:
            config = load_config()
            setup_logging(config)

            # Every command works through the services container
            services = Services(config)
            args.func(args, services)
        except Exception as e:
            print(f"Error: {e}")
            sys.exit(1)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
