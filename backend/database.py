import sqlite3
from threading import Lock

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from backend.core import config


engine = create_engine(
    config.DATABASE_URL,
    connect_args={"check_same_thread": False} if config.DATABASE_URL.startswith("sqlite") else {},
)

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)

Base = declarative_base()

_schema_lock = Lock()
_schema_created = False


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record) -> None:
    # SQLite ships with foreign key enforcement off.
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def init_database() -> None:
    global _schema_created

    if _schema_created:
        return

    with _schema_lock:
        if _schema_created:
            return

        import backend.models.event  # noqa: F401
        import backend.models.registration  # noqa: F401
        import backend.models.session  # noqa: F401
        import backend.models.speaker  # noqa: F401
        import backend.models.user  # noqa: F401

        Base.metadata.create_all(bind=engine)
        _schema_created = True


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
