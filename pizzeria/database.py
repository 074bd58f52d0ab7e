"""
SQLAlchemy engine, declarative base and session helpers
"""
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import MetaData, create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from pizzeria.config import settings

# Key in Session.info marking an open cascade transaction
ATOMIC_KEY = "pizzeria.atomic"

_NAMING_CONVENTION = {
    "ix": "ix_%(table_name)s_%(column_0_name)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """Declarative base for ORM models."""

    metadata = MetaData(naming_convention=_NAMING_CONVENTION)


# Views are queried through Table objects on this metadata; create_all never sees them
view_metadata = MetaData()


def _enable_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys = ON")
    cursor.close()


def create_db_engine(url: Optional[str] = None, echo: Optional[bool] = None) -> Engine:
    """
    Create an engine with foreign key enforcement turned on

    Args:
        url: SQLAlchemy database URL, defaults to settings.DATABASE_URL
        echo: Log emitted SQL, defaults to settings.SQL_ECHO

    Returns:
        Engine bound to the database
    """
    engine = create_engine(
        url or settings.DATABASE_URL,
        echo=settings.SQL_ECHO if echo is None else echo,
        future=True
    )
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_foreign_keys)
    return engine


def create_session_factory(engine: Engine) -> sessionmaker:
    """Session factory that keeps loaded attributes after commit"""
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)


def init_db(engine: Engine) -> None:
    """Create tables, views and triggers that do not exist yet"""
    # Register every model on Base.metadata before creating
    import pizzeria.models  # noqa: F401

    Base.metadata.create_all(bind=engine)


def in_atomic_block(db: Session) -> bool:
    """True while a cascade transaction is open on the session"""
    return bool(db.info.get(ATOMIC_KEY))


def commit(db: Session) -> None:
    """Commit, or only flush when an enclosing atomic block owns the transaction"""
    if in_atomic_block(db):
        db.flush()
    else:
        db.commit()


@contextmanager
def atomic(db: Session) -> Iterator[Session]:
    """
    Run a block of store calls as one transaction

    Store methods called inside the block flush instead of committing.
    The block commits on success and rolls back on any exception.
    Nested blocks join the outermost one.
    """
    if in_atomic_block(db):
        yield db
        return

    db.info[ATOMIC_KEY] = True
    try:
        yield db
        db.info.pop(ATOMIC_KEY, None)
        db.commit()
    except BaseException:
        db.info.pop(ATOMIC_KEY, None)
        db.rollback()
        raise
