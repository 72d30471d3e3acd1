"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - PlanetId wraps a positive-or-zero int parsed from digits only
    - Principal is immutable once the authorization gate produces it

Design Decisions:
    - NewType for ids: zero runtime cost, full type-checker support
    - parse_planet_id raises a typed parse error instead of returning None, so callers
      can't confuse "malformed id" with "no such planet"
"""

from dataclasses import dataclass
from typing import NewType

from planet_api.core.errors import InvalidPlanetIdError


# ─── Identity Types ──────────────────────────────────────────────

PlanetId = NewType("PlanetId", int)


@dataclass(frozen=True)
class Principal:
    """Authenticated identity attached to a mutating request."""
    username: str


# ─── Parsing ─────────────────────────────────────────────────────

def parse_planet_id(raw: str) -> PlanetId:
    """Parse a route id segment. Only ASCII decimal digits are accepted."""
    # str.isdigit() also accepts superscripts and other unicode digits
    if not raw or not raw.isascii() or not raw.isdigit():
        raise InvalidPlanetIdError(raw)
    return PlanetId(int(raw))
