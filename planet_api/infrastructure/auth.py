"""Authorization Gate — HTTP Basic credentials checked against the users table.

Invariants:
    - Passwords are stored only as passlib hashes
    - authenticate() returns a Principal or None; it never raises for bad credentials
    - Unknown usernames still run a hash verification to keep timing uniform

Design Decisions:
    - passlib CryptContext: hash scheme list comes from settings, so old hashes keep
      verifying after a scheme change (deprecated="auto")
"""

import logging

from passlib.context import CryptContext
from sqlalchemy import select

from planet_api.core.domain_types import Principal
from planet_api.infrastructure.database import DatabaseSessionManager
from planet_api.models.user import User

logger = logging.getLogger(__name__)


def build_password_context(schemes: list[str]) -> CryptContext:
    return CryptContext(schemes=schemes, deprecated="auto")


class SqlAlchemyUserDirectory:
    """Looks up users and verifies their passwords."""

    def __init__(
        self, db_manager: DatabaseSessionManager, password_context: CryptContext,
    ):
        self._db = db_manager
        self._pwd = password_context

    async def authenticate(self, username: str, password: str) -> Principal | None:
        async with self._db.session() as db:
            result = await db.execute(
                select(User).where(User.username == username),
            )
            user = result.scalar_one_or_none()
        if user is None:
            self._pwd.dummy_verify()
            logger.warning("Unknown user", extra={"username": username})
            return None
        if not self._pwd.verify(password, user.password_hash):
            logger.warning("Bad password", extra={"username": username})
            return None
        return Principal(username=user.username)

    async def add_user(self, username: str, password: str) -> Principal:
        """Insert a user with a freshly hashed password."""
        async with self._db.session() as db:
            db.add(User(username=username, password_hash=self._pwd.hash(password)))
            await db.commit()
        logger.info("User created", extra={"username": username})
        return Principal(username=username)
