"""User provisioning — create accounts for the HTTP Basic authorization gate.

Examples:
  planet-api-create-user alice --password s3cret
  planet-api-create-user bob            # prompts for the password
"""

import argparse
import asyncio
import getpass
import logging

from planet_api.config import get_settings
from planet_api.core.errors import DatabaseError
from planet_api.infrastructure.auth import (
    SqlAlchemyUserDirectory, build_password_context,
)
from planet_api.infrastructure.database import DatabaseSessionManager
from planet_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


async def create_user(
    db_manager: DatabaseSessionManager,
    username: str,
    password: str,
    password_schemes: list[str],
) -> bool:
    """Insert a user. Returns False if the username is already taken."""
    users = SqlAlchemyUserDirectory(
        db_manager, build_password_context(password_schemes),
    )
    try:
        await users.add_user(username, password)
    except DatabaseError as e:
        logger.error(f"Could not create user: {e.message}", extra={"username": username})
        return False
    return True


async def _run(username: str, password: str, create_tables: bool) -> bool:
    settings = get_settings()
    db_manager = DatabaseSessionManager(settings.database_url)
    try:
        if create_tables:
            await db_manager.create_tables()
        return await create_user(
            db_manager, username, password, settings.password_schemes,
        )
    finally:
        await db_manager.dispose()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a Planets API user")
    parser.add_argument("username")
    parser.add_argument("--password", default=None, help="Prompted for when omitted")
    parser.add_argument(
        "--create-tables", action="store_true",
        help="Create missing tables first (development databases)",
    )
    args = parser.parse_args(argv)

    settings = get_settings()
    setup_logging(settings.log_level, "text")

    password = args.password or getpass.getpass("Password: ")
    if not password:
        parser.error("password must not be empty")

    ok = asyncio.run(_run(args.username, password, args.create_tables))
    if ok:
        print(f"Created user {args.username}")
        return 0
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
