#!/usr/bin/env python3

import json
import sys
from logger import get_logger

logger = get_logger()


def cmd_list(args, services):
    """List all accounts in the database, ordered by name."""
    with services.db_manager.connect() as conn:
        accounts = services.accounts.find_all(conn)

    if not accounts:
        logger.info("No accounts found.")
        return

    logger.info("\nAccounts:")
    logger.info("=" * 80)
    for account in accounts:
        logger.info(f"ID: {account.id}")
        logger.info(f"Name: {account.name}")
        logger.info(f"Type: {account.type}")
        logger.info(f"Label: {account.label_text or '-'}")
        logger.info("-" * 80)

    logger.info(f"\nTotal accounts: {len(accounts)}")


def cmd_replace(args, services):
    """Replace every account with the contents of a JSON array file."""
    try:
        with open(args.file, "r") as f:
            payload = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Could not read {args.file}: {e}")
        sys.exit(1)

    if not isinstance(payload, list):
        logger.error(f"{args.file} must contain a JSON array of accounts.")
        sys.exit(1)

    with services.db_manager.connect() as conn:
        result = services.accounts.replace_all(conn, payload)

    logger.info(f"\n✓ Saved {result.accepted} account(s)")
    for skipped in result.skipped:
        logger.info(
            f"  Skipped entry {skipped.position}: missing {', '.join(skipped.missing)}"
        )


def setup_parser(subparsers):
    """Setup accounts subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "accounts",
        help="List or replace accounts",
        description="List stored accounts or replace them from a JSON file",
    )

    accounts_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available account commands",
        dest="subcommand",
        required=True,
    )

    # accounts list
    list_parser = accounts_subparsers.add_parser("list", help="List all accounts")
    list_parser.set_defaults(func=cmd_list)

    # accounts replace
    replace_parser = accounts_subparsers.add_parser(
        "replace", help="Replace all accounts from a JSON array file"
    )
    replace_parser.add_argument("file", help="Path to a JSON file holding an array of accounts")
    replace_parser.set_defaults(func=cmd_replace)
