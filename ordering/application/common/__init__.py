"""
Application common module.

Contains base classes for application layer:
- Command: Base class for write operations
- Query: Base class for read operations
- CommandHandler: Handles command execution
- QueryHandler: Handles query execution
- CancellationSignal: Caller-owned cancellation flag
"""

from .cancellation import CancellationSignal, raise_if_cancelled
from .command import Command, CommandHandler
from .query import Query, QueryHandler

__all__ = [
    "CancellationSignal",
    "Command",
    "CommandHandler",
    "Query",
    "QueryHandler",
    "raise_if_cancelled",
]
