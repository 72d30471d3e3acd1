"""Core Layer — domain types, error hierarchy, boundary protocols.

Invariants:
    - No module in core/ imports from api/, infrastructure/, db/ or models/
"""
