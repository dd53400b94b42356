from .in_memory_event_publisher import EventHandler, InMemoryEventPublisher

__all__ = ["EventHandler", "InMemoryEventPublisher"]
