"""Planet Gateway — SQLAlchemy implementation of the PlanetGateway protocol.

Invariants:
    - One session per call; nothing cached between calls
    - update() and delete() raise PlanetNotFoundError when the id has no row
    - Ids above PLANET_ID_MAX are treated as missing and never sent to the store
    - update() always refreshes updated_at
    - Other store failures surface as DatabaseError via DatabaseSessionManager
"""

import logging
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import select

from planet_api.core.domain_types import PlanetId
from planet_api.core.errors import PlanetNotFoundError
from planet_api.infrastructure.database import DatabaseSessionManager
from planet_api.models.planet import PLANET_ID_MAX, Planet

logger = logging.getLogger(__name__)


def _storable(planet_id: PlanetId) -> bool:
    return planet_id <= PLANET_ID_MAX


class SqlAlchemyPlanetGateway:
    """Planet persistence backed by an async SQLAlchemy session manager."""

    def __init__(self, db_manager: DatabaseSessionManager):
        self._db = db_manager

    async def find_all(self) -> list[Planet]:
        async with self._db.session() as db:
            result = await db.execute(select(Planet).order_by(Planet.id))
            return list(result.scalars().all())

    async def find_by_id(self, planet_id: PlanetId) -> Planet | None:
        if not _storable(planet_id):
            return None
        async with self._db.session() as db:
            return await db.get(Planet, planet_id)

    async def create(self, data: dict[str, Any]) -> Planet:
        async with self._db.session() as db:
            planet = Planet(**data)
            db.add(planet)
            await db.commit()
            await db.refresh(planet)
            return planet

    async def update(self, planet_id: PlanetId, data: dict[str, Any]) -> Planet:
        """Overwrite the given columns on an existing planet."""
        if not _storable(planet_id):
            raise PlanetNotFoundError(planet_id)
        async with self._db.session() as db:
            planet = await db.get(Planet, planet_id)
            if planet is None:
                raise PlanetNotFoundError(planet_id)
            for column, value in data.items():
                setattr(planet, column, value)
            planet.updated_at = datetime.now(timezone.utc)
            await db.commit()
            await db.refresh(planet)
            return planet

    async def delete(self, planet_id: PlanetId) -> None:
        if not _storable(planet_id):
            raise PlanetNotFoundError(planet_id)
        async with self._db.session() as db:
            planet = await db.get(Planet, planet_id)
            if planet is None:
                raise PlanetNotFoundError(planet_id)
            await db.delete(planet)
            await db.commit()
