"""SQLAlchemy ORM base shared by all blog models."""

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

# Deterministic constraint names so MySQL/PostgreSQL/SQLite schemas line up.
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """Declarative base; ``Base.metadata.create_all`` builds the schema."""

    metadata = MetaData(naming_convention=NAMING_CONVENTION)
