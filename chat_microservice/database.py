from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session as OrmSession, declarative_base, sessionmaker
from sqlalchemy.pool import NullPool, StaticPool

from .config import get_settings


settings = get_settings()


def is_memory_sqlite(database_url: str) -> bool:
    return database_url in ("sqlite://", "sqlite:///:memory:") or ":memory:" in database_url


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    if database_url.startswith("sqlite"):
        connect_args = {"check_same_thread": False}
        if is_memory_sqlite(database_url):
            # One shared connection, otherwise every checkout sees an empty database
            return create_engine(
                database_url,
                echo=echo,
                future=True,
                connect_args=connect_args,
                poolclass=StaticPool,
            )
        # Avoid connection pool contention/timeouts with SQLite by disabling pooling
        return create_engine(
            database_url,
            echo=echo,
            future=True,
            connect_args=connect_args,
            poolclass=NullPool,
        )

    # Bigger pool for Postgres
    return create_engine(
        database_url,
        echo=echo,
        future=True,
        pool_size=10,
        max_overflow=20,
        pool_pre_ping=True,
        pool_recycle=1800,
    )


engine = create_db_engine(settings.database_url, echo=settings.sql_echo)

SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False, future=True)

Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def transaction(db: OrmSession, read_only: bool = False) -> Iterator[OrmSession]:
    """Run the enclosed block as one unit of work on ``db``.

    Writes are committed on success. A read-only block is always rolled back,
    so nothing it touched can be persisted; on PostgreSQL the transaction is
    also declared READ ONLY. Any exception rolls back and propagates.
    """
    if read_only and db.get_bind().dialect.name == "postgresql":
        db.execute(text("SET TRANSACTION READ ONLY"))
    try:
        yield db
        if read_only:
            db.rollback()
        else:
            db.commit()
    except Exception:
        db.rollback()
        raise
