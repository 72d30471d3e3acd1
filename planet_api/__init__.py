"""Planets API Package — REST resource for planets with photo uploads.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

__version__ = "1.0.0"
