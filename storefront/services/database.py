"""
Database connection and session management for the catalog store.

This module provides:
- Store URL resolution (connection string + database name)
- Database engine creation and configuration
- Session factory for database operations
- Database initialization (create tables) and connectivity checks

Engines and session factories are created explicitly and handed to the
callers that need them; there is no process-wide engine.
"""

from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import ArgumentError, SQLAlchemyError
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from storefront.models.base import Base
from storefront.services.exceptions import DatabaseError
from storefront.services.logging_utils import get_service_logger

logger = get_service_logger(__name__)


def _set_sqlite_pragma(dbapi_connection, connection_record):
    """
    Set SQLite pragmas on connection.

    Enables foreign key constraints and sets WAL mode.
    """
    cursor = dbapi_connection.cursor()

    # Enable foreign key constraints (critical for referential integrity)
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.execute("PRAGMA synchronous=NORMAL")

    cursor.close()


def build_database_url(connection: str, database_name: Optional[str] = None) -> str:
    """
    Combine a connection string and a database name into one store URL.

    The database name replaces the database component of the connection
    URL. For SQLite the connection holds a directory and the name a file:
    ``sqlite:////var/data`` + ``catalog.db`` -> ``sqlite:////var/data/catalog.db``.

    Args:
        connection: SQLAlchemy URL of the store
        database_name: Database to use on that store (optional)

    Returns:
        SQLAlchemy URL string

    Raises:
        DatabaseError: If the connection string is not a valid URL
    """
    try:
        url = make_url(connection)
    except ArgumentError as e:
        raise DatabaseError("parse store connection string", e) from e

    if not database_name:
        return url.render_as_string(hide_password=False)

    if url.get_backend_name() == "sqlite":
        if database_name == ":memory:":
            database = database_name
        elif url.database and url.database != ":memory:":
            database = f"{url.database.rstrip('/')}/{database_name}"
        else:
            database = database_name
        url = url.set(database=database)
    else:
        url = url.set(database=database_name)

    return url.render_as_string(hide_password=False)


def create_database_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Create and configure the database engine.

    Args:
        database_url: SQLAlchemy database URL
        echo: If True, log all SQL statements (useful for debugging)

    Returns:
        Configured SQLAlchemy Engine
    """
    logger.info(f"Creating database engine: {make_url(database_url).render_as_string()}")

    if database_url.startswith("sqlite"):
        if ":memory:" in database_url or "mode=memory" in database_url or database_url == "sqlite://":
            # For in-memory databases (testing), use StaticPool
            engine = create_engine(
                database_url,
                echo=echo,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        else:
            engine = create_engine(
                database_url,
                echo=echo,
                connect_args={"check_same_thread": False, "timeout": 30},
            )
        event.listen(engine, "connect", _set_sqlite_pragma)
    else:
        engine = create_engine(database_url, echo=echo, pool_pre_ping=True)

    return engine


def init_database(engine: Engine) -> None:
    """
    Initialize the database by creating all tables.

    Safe to call multiple times - existing tables won't be recreated.

    Args:
        engine: Engine to create tables on
    """
    # Import all models to ensure they're registered with Base
    from storefront import models  # noqa: F401

    logger.info("Initializing database tables")
    try:
        Base.metadata.create_all(engine)
    except SQLAlchemyError as e:
        raise DatabaseError("create tables", e) from e


def verify_database(engine: Engine) -> None:
    """
    Verify that the store is reachable.

    Args:
        engine: Engine to ping

    Raises:
        DatabaseError: If the store does not answer
    """
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        raise DatabaseError("Ping, on verify store connection", e) from e


def create_session_factory(engine: Engine) -> sessionmaker:
    """
    Create a session factory bound to an engine.

    Args:
        engine: Engine the sessions use

    Returns:
        Session factory (sessionmaker)
    """
    return sessionmaker(bind=engine, expire_on_commit=False)


def open_store(database_url: str, echo: bool = False) -> sessionmaker:
    """
    Connect to the store, create missing tables and verify connectivity.

    Args:
        database_url: SQLAlchemy database URL
        echo: If True, log all SQL statements

    Returns:
        Session factory bound to the new engine
    """
    engine = create_database_engine(database_url, echo=echo)
    init_database(engine)
    verify_database(engine)
    return create_session_factory(engine)


@contextmanager
def session_scope(session_factory: sessionmaker) -> Iterator[Session]:
    """
    Provide a transactional scope for database operations.

    This context manager handles session lifecycle automatically:
    - Creates a new session
    - Commits on success
    - Rolls back on exception
    - Always closes the session

    Args:
        session_factory: Factory producing sessions for the target store

    Yields:
        Database session

    Example:
        with session_scope(factory) as session:
            session.add(Brand(name="Dropezy"))
            # Commit happens automatically if no exception
    """
    session = session_factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
