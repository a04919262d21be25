#!/usr/bin/env python3

from logger import get_logger

logger = get_logger()


def cmd_init(args, services):
    """Create the accounts table if it is missing."""
    db_manager = services.db_manager
    db_manager.initialize()
    logger.info(f"Accounts table ready ({db_manager.get_schema_path().name} applied).")


def setup_parser(subparsers):
    """Setup db subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "db",
        help="Database setup",
        description="Prepare the accounts database",
    )

    db_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available database commands",
        dest="subcommand",
        required=True,
    )

    # db init
    init_parser = db_subparsers.add_parser(
        "init", help="Create the accounts table"
    )
    init_parser.set_defaults(func=cmd_init)
