"""User Directory — password hashing and credential checks."""

import pytest

from planet_api.core.domain_types import Principal
from planet_api.core.errors import DatabaseError
from planet_api.infrastructure.auth import (
    SqlAlchemyUserDirectory, build_password_context,
)
from planet_api.models.user import User


@pytest.fixture
def users(db_manager):
    return SqlAlchemyUserDirectory(
        db_manager, build_password_context(["pbkdf2_sha256"]),
    )


async def test_authenticate_valid_credentials(users):
    await users.add_user("alice", "wonderland")
    assert await users.authenticate("alice", "wonderland") == Principal("alice")


async def test_authenticate_wrong_password(users):
    await users.add_user("alice", "wonderland")
    assert await users.authenticate("alice", "looking-glass") is None


async def test_authenticate_unknown_user(users):
    assert await users.authenticate("nobody", "x") is None


async def test_password_is_stored_hashed(users, db_manager):
    await users.add_user("alice", "wonderland")
    async with db_manager.session() as db:
        user = (await db.execute(User.__table__.select())).one()
    assert user.password_hash != "wonderland"
    assert user.password_hash.startswith("$pbkdf2-sha256$")


async def test_duplicate_username_raises_database_error(users):
    await users.add_user("alice", "one")
    with pytest.raises(DatabaseError):
        await users.add_user("alice", "two")
