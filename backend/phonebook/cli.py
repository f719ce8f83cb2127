"""Command line entry for the phonebook.

    phonebook serve               run the HTTP API with uvicorn
    phonebook list                print every entry
    phonebook add NAME NUMBER     add an entry (same rules as POST /api/persons)
"""

import argparse
import asyncio
import logging
import sys

import uvicorn

from phonebook.config import Settings, get_settings
from phonebook.core.errors import PhonebookError
from phonebook.infrastructure.database import open_mongo
from phonebook.infrastructure.observability import setup_logging
from phonebook.infrastructure.person_repository import MongoPersonRepository
from phonebook.services.phonebook import PhonebookService

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="phonebook", description="Phonebook service")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("serve", help="Run the HTTP API")
    subparsers.add_parser("list", help="List all entries")

    add = subparsers.add_parser("add", help="Add an entry")
    add.add_argument("name")
    add.add_argument("number")
    return parser


async def run_command(args: argparse.Namespace, phonebook: PhonebookService) -> int:
    """Run a store command against an already-built service."""
    try:
        if args.command == "add":
            person = await phonebook.create(args.name, args.number)
            print(f"Added {person.name} number {person.number} to phonebook")
        else:
            print("Phonebook:")
            for person in await phonebook.list_all():
                print(f"{person.name} {person.number}")
    except PhonebookError as e:
        print(e.public_message, file=sys.stderr)
        return 1
    return 0


async def _run_with_mongo(args: argparse.Namespace, settings: Settings) -> int:
    try:
        mongo = await open_mongo(settings)
    except PhonebookError as e:
        print(e.message, file=sys.stderr)
        return 1
    try:
        return await run_command(
            args, PhonebookService(MongoPersonRepository(mongo.collection)),
        )
    finally:
        mongo.close()


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()

    if args.command == "serve":
        uvicorn.run("phonebook.main:app", host=settings.host, port=settings.port)
        return 0

    setup_logging(settings.log_level, "text")
    return asyncio.run(_run_with_mongo(args, settings))


if __name__ == "__main__":
    sys.exit(main())
