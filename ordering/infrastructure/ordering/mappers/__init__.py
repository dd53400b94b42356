from .order_mapper import OrderMapper

__all__ = ["OrderMapper"]
