"""
Database connection and session management.
Provides SQLAlchemy engine, session, and base class for models.
"""
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base
from .config import settings

# Create SQLAlchemy engine for database connection
engine = create_engine(settings.database_url, echo=settings.sql_echo)

# Create session factory for database sessions
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)

# Create base class for declarative models
Base = declarative_base()


@event.listens_for(Engine, "connect")
def enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    """
    Turn on foreign key enforcement for SQLite connections.

    SQLite ignores REFERENCES clauses unless the pragma is set per connection.
    Other backends are left untouched.
    """
    if type(dbapi_connection).__module__.startswith("sqlite3"):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def init_db(bind=None) -> None:
    """
    Create all clinic tables that do not exist yet.

    Args:
        bind: Engine to create the tables on (defaults to the configured engine)
    """
    Base.metadata.create_all(bind=bind or engine)

