"""Photo Store — validation, generated names, size limit and removal on local disk."""

import io
import os
import re
from pathlib import Path

import pytest
from fastapi import UploadFile
from starlette.datastructures import Headers

from planet_api.core.errors import PhotoTooLargeError, UnsupportedPhotoTypeError
from planet_api.infrastructure.photo_store import (
    LocalPhotoStore, generate_photo_filename,
)

PNG = b"\x89PNG\r\n\x1a\n" + b"\x01" * 32


def _upload(data=PNG, content_type="image/png", filename="earth.png"):
    return UploadFile(
        file=io.BytesIO(data),
        filename=filename,
        headers=Headers({"content-type": content_type}),
    )


@pytest.fixture
def store(tmp_path):
    return LocalPhotoStore(
        str(tmp_path / "photos"),
        allowed_types=["image/png", "image/jpeg"],
        max_bytes=256,
    )


def test_generated_filename_shape():
    name = generate_photo_filename("image/png")
    assert re.fullmatch(r"[0-9a-f-]{36}-\d{13}\.png", name)


def test_generated_filenames_are_unique():
    assert generate_photo_filename("image/jpeg") != generate_photo_filename("image/jpeg")


async def test_save_writes_bytes_and_creates_directory(store):
    filename = await store.save(_upload())

    with open(store.path_for(filename), "rb") as f:
        assert f.read() == PNG


async def test_save_accepts_content_type_parameters(store):
    filename = await store.save(_upload(content_type="image/jpeg; charset=binary"))
    assert filename.endswith(".jpg")


async def test_save_rejects_unsupported_type(store, tmp_path):
    with pytest.raises(UnsupportedPhotoTypeError):
        await store.save(_upload(content_type="image/gif"))
    assert not (tmp_path / "photos").exists()


async def test_save_rejects_oversized_and_cleans_up(store):
    with pytest.raises(PhotoTooLargeError):
        await store.save(_upload(data=b"\x00" * 257))
    assert list(Path(store.directory).iterdir()) == []


async def test_save_accepts_exact_limit(store):
    filename = await store.save(_upload(data=b"\x00" * 256))
    assert filename


async def test_remove_deletes_file(store):
    filename = await store.save(_upload())
    await store.remove(filename)
    with pytest.raises(FileNotFoundError):
        open(store.path_for(filename), "rb")


async def test_remove_missing_is_noop(store):
    store.ensure_directory()
    await store.remove("does-not-exist.png")


def test_path_for_strips_directories(store):
    assert store.path_for("../../etc/passwd") == os.path.join(store.directory, "passwd")


def test_is_writable_tracks_directory(store):
    assert not store.is_writable()
    store.ensure_directory()
    assert store.is_writable()
