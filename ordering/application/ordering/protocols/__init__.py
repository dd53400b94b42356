from .event_publisher import EventPublisherProtocol
from .order_repository import OrderRepositoryProtocol

__all__ = ["EventPublisherProtocol", "OrderRepositoryProtocol"]
