"""Planets Resource — list, fetch, create, replace, delete, and attach a photo.

Invariants:
    - Reads need no credentials; every mutating route requires a Principal
    - Each handler makes exactly one gateway call, no retries
    - Create and Replace stamp both created_by and updated_by with the current actor
    - Replace writes the whole payload (no merge) and never touches photo_filename
    - Upload photo writes only photo_filename
    - A missing planet maps to 404 "Cannot {METHOD} /planets/{id}[/photo]"

Design Decisions:
    - Photo link failure removes the stored file before the error propagates,
      so a failed upload never leaves an orphan in the content store
    - A cleanup failure is logged; the link error still decides the response
    - Store errors other than a missing row propagate as DatabaseError (500)
"""

import logging

from fastapi import APIRouter, Depends, Response, status

from planet_api.api.dependencies import (
    get_photo_store, get_planet_gateway, planet_id_path, receive_photo,
    require_principal,
)
from planet_api.core.domain_types import PlanetId, Principal
from planet_api.core.errors import (
    PhotoMissingError, PhotoStorageError, PlanetNotFoundError,
    ResourceNotFoundError,
)
from planet_api.core.repository_protocols import PhotoStore, PlanetGateway
from planet_api.schemas.planet import (
    PhotoUploadResponse, PlanetData, PlanetResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/planets", tags=["planets"])


def _provenance(principal: Principal) -> dict[str, str]:
    return {
        "created_by": principal.username,
        "updated_by": principal.username,
    }


@router.get("", response_model=list[PlanetResponse])
@router.get("/", response_model=list[PlanetResponse], include_in_schema=False)
async def list_planets(
    gateway: PlanetGateway = Depends(get_planet_gateway),
):
    """Retrieve all planets."""
    planets = await gateway.find_all()
    return [PlanetResponse.model_validate(p) for p in planets]


@router.get("/{planet_id}", response_model=PlanetResponse)
async def get_planet(
    planet_id: PlanetId = Depends(planet_id_path),
    gateway: PlanetGateway = Depends(get_planet_gateway),
):
    """Retrieve a specific planet."""
    planet = await gateway.find_by_id(planet_id)
    if planet is None:
        raise ResourceNotFoundError("GET", f"/planets/{planet_id}")
    return PlanetResponse.model_validate(planet)


@router.post(
    "", response_model=PlanetResponse, status_code=status.HTTP_201_CREATED,
)
@router.post(
    "/", response_model=PlanetResponse, status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
async def create_planet(
    body: PlanetData,
    principal: Principal = Depends(require_principal),
    gateway: PlanetGateway = Depends(get_planet_gateway),
):
    """Create a new planet."""
    planet = await gateway.create({
        **body.model_dump(),
        **_provenance(principal),
    })
    logger.info(
        "Planet created",
        extra={"planet_id": planet.id, "username": principal.username},
    )
    return PlanetResponse.model_validate(planet)


@router.put("/{planet_id}", response_model=PlanetResponse)
async def replace_planet(
    body: PlanetData,
    planet_id: PlanetId = Depends(planet_id_path),
    principal: Principal = Depends(require_principal),
    gateway: PlanetGateway = Depends(get_planet_gateway),
):
    """Replace an existing planet."""
    try:
        planet = await gateway.update(planet_id, {
            **body.model_dump(),
            **_provenance(principal),
        })
    except PlanetNotFoundError as e:
        raise ResourceNotFoundError("PUT", f"/planets/{planet_id}") from e
    logger.info(
        "Planet replaced",
        extra={"planet_id": planet_id, "username": principal.username},
    )
    return PlanetResponse.model_validate(planet)


@router.delete("/{planet_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_planet(
    planet_id: PlanetId = Depends(planet_id_path),
    principal: Principal = Depends(require_principal),
    gateway: PlanetGateway = Depends(get_planet_gateway),
):
    """Delete a planet."""
    try:
        await gateway.delete(planet_id)
    except PlanetNotFoundError as e:
        raise ResourceNotFoundError("DELETE", f"/planets/{planet_id}") from e
    logger.info(
        "Planet deleted",
        extra={"planet_id": planet_id, "username": principal.username},
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


_PHOTO_FORM = {
    "requestBody": {
        "content": {
            "multipart/form-data": {
                "schema": {
                    "type": "object",
                    "properties": {
                        "photo": {"type": "string", "format": "binary"},
                    },
                },
            },
        },
    },
}


async def _discard_photo(photos: PhotoStore, filename: str) -> None:
    """Best-effort removal of a photo that never got linked."""
    try:
        await photos.remove(filename)
    except PhotoStorageError:
        logger.error(
            "Unlinked photo left on disk",
            extra={"photo_filename": filename},
        )


@router.post(
    "/{planet_id}/photo", response_model=PhotoUploadResponse,
    status_code=status.HTTP_201_CREATED, openapi_extra=_PHOTO_FORM,
)
async def upload_planet_photo(
    planet_id: PlanetId = Depends(planet_id_path),
    principal: Principal = Depends(require_principal),
    photo_filename: str | None = Depends(receive_photo),
    gateway: PlanetGateway = Depends(get_planet_gateway),
    photos: PhotoStore = Depends(get_photo_store),
):
    """Upload a photo and link it to a planet."""
    if photo_filename is None:
        raise PhotoMissingError()

    try:
        await gateway.update(planet_id, {"photo_filename": photo_filename})
    except PlanetNotFoundError as e:
        await _discard_photo(photos, photo_filename)
        raise ResourceNotFoundError(
            "POST", f"/planets/{planet_id}/photo",
        ) from e
    except Exception:
        await _discard_photo(photos, photo_filename)
        raise

    logger.info(
        "Planet photo linked",
        extra={
            "planet_id": planet_id,
            "username": principal.username,
            "photo_filename": photo_filename,
        },
    )
    return PhotoUploadResponse(photo_filename=photo_filename)
