import logging

from fastapi import Request
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

logger = logging.getLogger(__name__)


class Database:
    """Process-wide store handle.

    Built once by the application lifespan before the server accepts
    requests, and disposed when it shuts down. Handlers reach it through
    ``request.app.state.database``.
    """

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        if url.startswith("sqlite"):
            kwargs = {"connect_args": {"check_same_thread": False}}
            if url in ("sqlite://", "sqlite:///:memory:"):
                kwargs["poolclass"] = StaticPool
        else:
            kwargs = {
                "pool_pre_ping": True,   # checks dead connections
                "pool_recycle": 1800,    # refresh every 30 min
            }
        self.engine = create_engine(url, echo=echo, **kwargs)

    def create_db_and_tables(self):
        from app.models import cart, product, user  # noqa: F401

        SQLModel.metadata.create_all(self.engine)
        logger.info("Database tables ensured")

    def session(self) -> Session:
        return Session(self.engine)

    def dispose(self):
        self.engine.dispose()
        logger.info("Database connections closed")


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_session(request: Request):
    with get_database(request).session() as session:
        yield session
