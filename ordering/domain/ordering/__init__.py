"""
Ordering bounded context - Domain layer.

Contains the Order aggregate (with its OrderItem lines and status
machine) and the domain events it raises.
"""
