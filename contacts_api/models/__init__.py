"""ORM Models - SQLAlchemy declarative models.

Invariants:
    - All models inherit from Base (db/base.py)

Design Decisions:
    - One file per entity; imported here so Base.metadata is complete
      before create_all or alembic autogenerate runs
"""

from contacts_api.models.contact import Contact  # noqa: F401
