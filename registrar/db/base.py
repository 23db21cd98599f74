# registrar/db/base.py
from registrar.db.base_class import Base

# register every table on Base.metadata (alembic autogenerate, create_all in tests)
import registrar.models  # noqa: F401

__all__ = ["Base"]
