"""
Ordering bounded context - Application layer.

Contains use cases for the purchase order lifecycle:
- Commands: Create order, add item, confirm, ship, cancel
- Queries: Get order
"""
