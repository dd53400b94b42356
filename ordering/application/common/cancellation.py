"""
Cancellation signal for in-flight operations.

Each operation runs on its own thread; the caller holds a
``threading.Event`` and sets it to request cancellation. Handlers check
it before the first durable write, so a cancelled operation either
commits nothing or completes.
"""

import threading

from ordering.exceptions import OperationCancelledError

CancellationSignal = threading.Event


def raise_if_cancelled(cancel: CancellationSignal | None, operation: str) -> None:
    """Raise OperationCancelledError if cancellation was requested."""
    if cancel is not None and cancel.is_set():
        raise OperationCancelledError(f"{operation} cancelled before commit")
