from fastapi import Request
from sqlalchemy import create_engine, event
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool

Base = declarative_base()


def _unicode_lower(value):
    # SQLite's built-in lower() only folds ASCII
    return value.lower() if isinstance(value, str) else value


def create_memory_engine():
    """Engine for a private in-memory SQLite database.

    StaticPool keeps the single connection alive for the lifetime of the
    engine; dropping the engine drops the data.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False  # Set to True for debugging SQL queries
    )

    @event.listens_for(engine, "connect")
    def register_sql_functions(dbapi_connection, connection_record):
        dbapi_connection.create_function("lower", 1, _unicode_lower, deterministic=True)

    return engine


def get_db(request: Request):
    return request.app.state.storage
