from .in_memory_order_repository import InMemoryOrderRepository
from .sqlalchemy_order_repository import SqlAlchemyOrderRepository

__all__ = ["InMemoryOrderRepository", "SqlAlchemyOrderRepository"]
