"""ORM Models — SQLAlchemy declarative models.

Invariants:
    - All models inherit from Base (db/base.py)
    - All models imported here so Base.metadata is complete before create_all
"""

from planet_api.models.planet import Planet  # noqa: F401
from planet_api.models.user import User  # noqa: F401
