"""Pytest configuration and fixtures."""

from collections.abc import Callable, Generator
from decimal import Decimal

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from ordering.database import Base, create_schema
from ordering.domain.common.value_objects import CustomerId, Money, ProductId
from ordering.domain.ordering.entities import Order, OrderItem
from ordering.infrastructure.ordering.events import InMemoryEventPublisher
from ordering.infrastructure.ordering.repositories import (
    InMemoryOrderRepository,
    SqlAlchemyOrderRepository,
)

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"

# One shared connection so every session sees the same in-memory database
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture
def session_factory() -> Generator[sessionmaker[Session], None, None]:
    """Create the tables and hand out the test session factory."""
    create_schema(test_engine)
    try:
        yield TestSessionLocal
    finally:
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def db_session(session_factory: sessionmaker[Session]) -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def sql_repository(db_session: Session) -> SqlAlchemyOrderRepository:
    return SqlAlchemyOrderRepository(db_session)


@pytest.fixture
def memory_repository() -> InMemoryOrderRepository:
    return InMemoryOrderRepository()


@pytest.fixture
def publisher() -> InMemoryEventPublisher:
    return InMemoryEventPublisher()


@pytest.fixture
def customer_id() -> CustomerId:
    return CustomerId.generate()


@pytest.fixture
def make_item() -> Callable[..., OrderItem]:
    """Factory for order items: make_item(quantity=2, price="10.00", currency="USD")."""

    def _make(
        quantity: int = 2, price: str | Decimal = "10.00", currency: str = "USD"
    ) -> OrderItem:
        return OrderItem(
            product_id=ProductId.generate(),
            quantity=quantity,
            unit_price=Money(price, currency),
        )

    return _make


@pytest.fixture
def new_order(customer_id: CustomerId, make_item: Callable[..., OrderItem]) -> Order:
    """A freshly created order with one line (2 x 10.00 USD) and its creation event."""
    return Order.create(customer_id=customer_id, items=[make_item()])
