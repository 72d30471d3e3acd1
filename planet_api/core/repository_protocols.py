"""Boundary Protocols — contracts between the route layer and its collaborators.

Invariants:
    - Routes NEVER import concrete gateways; they receive Protocol-typed instances
      from app.state via dependency injection
    - update() and delete() raise PlanetNotFoundError for a missing id;
      find_by_id() returns None

Design Decisions:
    - Protocol over ABC: structural subtyping, tests can pass plain fakes
    - Async in Protocol: every implementation does IO
"""

from datetime import datetime
from typing import Any, Protocol

from fastapi import UploadFile

from planet_api.core.domain_types import PlanetId, Principal


class PlanetLike(Protocol):
    """Structural contract for planet records returned by the gateway."""
    id: int
    name: str
    description: str | None
    diameter: int | None
    moons: int | None
    photo_filename: str | None
    created_at: datetime
    created_by: str
    updated_at: datetime
    updated_by: str


class PlanetGateway(Protocol):
    """Contract for planet persistence."""
    async def find_all(self) -> list[PlanetLike]: ...
    async def find_by_id(self, planet_id: PlanetId) -> PlanetLike | None: ...
    async def create(self, data: dict[str, Any]) -> PlanetLike: ...
    async def update(self, planet_id: PlanetId, data: dict[str, Any]) -> PlanetLike: ...
    async def delete(self, planet_id: PlanetId) -> None: ...


class UserDirectory(Protocol):
    """Contract for credential checks behind the authorization gate."""
    async def authenticate(self, username: str, password: str) -> Principal | None: ...


class PhotoStore(Protocol):
    """Contract for the content store holding uploaded photos."""
    async def save(self, upload: UploadFile) -> str: ...
    async def remove(self, filename: str) -> None: ...
    def is_writable(self) -> bool: ...
