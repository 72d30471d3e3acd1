"""Route Dependencies — the gates every planet route is assembled from.

Invariants:
    - Collaborators come from request.app.state (set once by create_app)
    - planet_id_path runs before require_principal, so a malformed id is a route miss
      even without credentials
    - receive_photo only persists after every earlier dependency has passed
    - receive_photo reads the multipart form itself, so nothing is parsed for a
      request that fails the id or authorization gates

Design Decisions:
    - Principal passed explicitly to handlers instead of hanging off the request
    - HTTPBasic(auto_error=False): missing credentials raise our own 401 so the body
      matches every other error
"""

import logging

from fastapi import Depends, Request
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from starlette.datastructures import UploadFile

from planet_api.core.domain_types import PlanetId, Principal, parse_planet_id
from planet_api.core.errors import (
    AuthenticationRequiredError, InvalidPlanetIdError, RouteNotFoundError,
    TooManyPhotosError,
)
from planet_api.core.repository_protocols import (
    PhotoStore, PlanetGateway, UserDirectory,
)

logger = logging.getLogger(__name__)

_basic = HTTPBasic(auto_error=False)


def get_planet_gateway(request: Request) -> PlanetGateway:
    return request.app.state.planet_gateway


def get_user_directory(request: Request) -> UserDirectory:
    return request.app.state.user_directory


def get_photo_store(request: Request) -> PhotoStore:
    return request.app.state.photo_store


def planet_id_path(planet_id: str, request: Request) -> PlanetId:
    """Parse the {planet_id} segment; non-digit ids fall through to a route miss."""
    try:
        return parse_planet_id(planet_id)
    except InvalidPlanetIdError as e:
        raise RouteNotFoundError(request.method, request.url.path) from e


async def require_principal(
    credentials: HTTPBasicCredentials | None = Depends(_basic),
    users: UserDirectory = Depends(get_user_directory),
) -> Principal:
    """Authorization gate for mutating routes."""
    if credentials is None:
        raise AuthenticationRequiredError()
    principal = await users.authenticate(
        credentials.username, credentials.password,
    )
    if principal is None:
        raise AuthenticationRequiredError()
    return principal


async def receive_photo(
    request: Request,
    store: PhotoStore = Depends(get_photo_store),
) -> str | None:
    """Upload gate: persist at most one file from the photo field.

    Text parts named photo are not files and are ignored. Returns the
    generated filename, or None when no file was sent.
    """
    form = await request.form()
    try:
        uploads = [
            part for part in form.getlist("photo")
            if isinstance(part, UploadFile)
        ]
        if not uploads:
            return None
        if len(uploads) > 1:
            raise TooManyPhotosError()
        return await store.save(uploads[0])
    finally:
        await form.close()
