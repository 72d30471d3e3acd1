"""Shared constants for API tests."""

ALICE = ("alice", "alice-password")
BOB = ("bob", "bob-password")

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64
JPEG_BYTES = b"\xff\xd8\xff\xe0" + b"\x00" * 64
