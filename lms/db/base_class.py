# /lms/db/base_class.py

from datetime import datetime, timezone

from sqlalchemy.orm import declarative_base, declared_attr


class CustomBase:
    """
    Shared declarative base. Table names are generated from the class name by
    lower-casing and pluralizing (`Course` -> `courses`); a model can override
    this by setting `__tablename__` explicitly.
    """

    @declared_attr
    def __tablename__(cls) -> str:
        return cls.__name__.lower() + "s"


Base = declarative_base(cls=CustomBase)


def utcnow() -> datetime:
    """Python-side timestamp default; keeps sub-second ordering on every backend."""
    return datetime.now(timezone.utc)
