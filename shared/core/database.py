import logging
from contextlib import contextmanager
from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session, sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool
from shared.core.config import AUTH_DATABASE_URL, PANTRY_DATABASE_URL, settings

logger = logging.getLogger(__name__)

# Separate bases
AuthBase = declarative_base()
Base = declarative_base()


def build_engine(url: str):
    if url.startswith("sqlite"):
        # in-memory sqlite must share one connection across threads
        kwargs = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in url or url.rstrip("/") == "sqlite:":
            kwargs["poolclass"] = StaticPool
        engine = create_engine(url, **kwargs)

        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        return engine

    return create_engine(
        url,
        pool_pre_ping=True,
        pool_recycle=300,
        pool_size=settings.DB_POOL_SIZE,          # max idle connections
        max_overflow=settings.DB_MAX_OVERFLOW,    # max temporary extra connections
        pool_timeout=30       # wait time before failing
    )


# Auth DB
auth_engine = build_engine(AUTH_DATABASE_URL)
AuthSessionLocal = sessionmaker(
    autocommit=False, autoflush=False, bind=auth_engine)

# Pantry DB
pantry_engine = build_engine(PANTRY_DATABASE_URL)
PantrySessionLocal = sessionmaker(
    autocommit=False, autoflush=False, bind=pantry_engine)


# Dependency


def get_auth_db():
    db = AuthSessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_pantry_db():
    db = PantrySessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def transaction(db: Session):
    """Commit everything done inside the block, or roll all of it back."""
    try:
        yield db
        db.commit()
    except Exception:
        logger.debug("Rolling back transaction")
        db.rollback()
        raise
