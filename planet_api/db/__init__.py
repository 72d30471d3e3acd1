"""Database Infrastructure — SQLAlchemy Base and standalone session factory."""
