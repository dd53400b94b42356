"""
Commands and their handlers.

A command is an immutable request to change state, named in the
imperative (ConfirmOrder). Each command type has exactly one handler.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, TypeVar

from .cancellation import CancellationSignal

TCommand = TypeVar("TCommand", bound="Command")
TResult = TypeVar("TResult")


@dataclass(frozen=True)
class Command:
    """
    Base for commands.

    Commands carry plain values; handlers check their coarse shape and
    leave business rules to the aggregate.
    """


class CommandHandler(ABC, Generic[TCommand, TResult]):
    @abstractmethod
    def handle(self, command: TCommand, cancel: CancellationSignal | None = None) -> TResult:
        """
        Execute the command.

        Handlers validate the input shape, load or construct the
        aggregate, call exactly one aggregate method, save it, publish
        the drained events and map the result. Domain errors propagate
        unchanged and nothing is saved.
        """
        raise NotImplementedError
