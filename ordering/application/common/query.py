"""Queries and their handlers: read-only requests, one handler per query type."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, TypeVar

from .cancellation import CancellationSignal

TQuery = TypeVar("TQuery", bound="Query")
TResult = TypeVar("TResult")


@dataclass(frozen=True)
class Query:
    """Base for queries. Handling one never modifies state or publishes events."""


class QueryHandler(ABC, Generic[TQuery, TResult]):
    @abstractmethod
    def handle(self, query: TQuery, cancel: CancellationSignal | None = None) -> TResult:
        """Return the requested data as a response DTO, never a domain entity."""
        raise NotImplementedError
