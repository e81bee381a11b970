"""
Database session management.

Provides the :class:`Database` service object owning the SQLModel
engine, and the FastAPI dependency handing out sessions.
"""

from contextlib import contextmanager
from typing import Generator, Iterator

from fastapi import Request
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine


class Database:
    """
    Engine holder with explicit init and teardown.

    Created by the application lifespan and stored on ``app.state.db``;
    scripts construct their own instance.
    """

    def __init__(self, url: str, echo: bool = False):
        """
        Create the engine.

        Args:
            url: SQLAlchemy database URL
            echo: Log SQL queries
        """
        self.url = url
        if url.startswith("sqlite"):
            kwargs: dict = {"connect_args": {"check_same_thread": False}}
            if url in ("sqlite://", "sqlite:///:memory:"):
                # One shared connection, otherwise every session sees an empty database
                kwargs["poolclass"] = StaticPool
        else:
            kwargs = {
                "pool_pre_ping": True,  # Verify connections before using
                "pool_size": 5,         # Connection pool size
                "max_overflow": 10,     # Max connections beyond pool_size
            }
        self.engine = create_engine(url, echo=echo, **kwargs)

    def create_all(self) -> None:
        """Create every table registered on ``SQLModel.metadata``."""
        import app.db.base  # noqa: F401

        SQLModel.metadata.create_all(self.engine)

    @contextmanager
    def session(self) -> Iterator[Session]:
        with Session(self.engine) as session:
            yield session

    def dispose(self) -> None:
        self.engine.dispose()


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Dependency for FastAPI endpoints to get database session.

    Yields:
        SQLModel Session instance bound to the application's Database

    Example:
        @router.get("/items")
        def get_items(db: Session = Depends(get_db)):
            return db.exec(select(Item)).all()
    """
    database: Database = request.app.state.db
    with database.session() as session:
        yield session
