from .order_response_mapper import OrderResponseMapper

__all__ = ["OrderResponseMapper"]
