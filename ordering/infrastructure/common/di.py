from collections.abc import Iterator
from contextlib import contextmanager
from typing import TypeVar

from dependency_injector.providers import Provider
from sqlalchemy.orm import Session, sessionmaker

from ordering.application.ordering.protocols import OrderRepositoryProtocol
from ordering.core import Container
from ordering.database import get_session_factory

T = TypeVar("T")


class RequestScope:
    """
    Resolves use cases for one operation.

    With the SQLAlchemy backend every resolved use case gets a repository
    bound to this scope's session. The session is passed to the provider
    call instead of overriding ``container.db``, so scopes running on
    other threads against the same container never see it.
    """

    def __init__(self, container: Container, db: Session | None = None) -> None:
        self.container = container
        self.db = db

    def order_repository(self) -> OrderRepositoryProtocol:
        if self.db is None:
            return self.container.order_repository()
        return self.container.sqlalchemy_order_repository(db=self.db)

    def resolve(self, provider: Provider[T]) -> T:
        """Build a use case from one of the container's providers."""
        if self.db is None:
            return provider()
        return provider(order_repository=self.order_repository())


@contextmanager
def request_scope(
    container: Container, session_factory: sessionmaker[Session] | None = None
) -> Iterator[RequestScope]:
    """
    Open a database session for one operation and close it afterwards.

    The in-memory backend needs no session, so none is opened for it and
    every scope shares the container's repository.
    """
    if container.config.persistence_backend() == "memory":
        yield RequestScope(container)
        return

    db = (session_factory or get_session_factory())()
    try:
        yield RequestScope(container, db)
    finally:
        db.close()
