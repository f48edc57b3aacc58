"""AfterCommit protocol (port).

Defers work until the surrounding unit of work has committed. Handlers use
it for side effects outside the database (cache warm-up) that must only
observe durable state. Callbacks are dropped when the transaction rolls
back.

Infrastructure provides register_after_commit, bound to one session.
"""

from collections.abc import Awaitable, Callable
from typing import Protocol


class AfterCommitProtocol(Protocol):
    """Port for scheduling work after a successful commit."""

    def __call__(self, callback: Callable[[], Awaitable[object]]) -> None:
        """Schedule a coroutine function to run once the commit succeeded.

        Args:
            callback: Zero-argument coroutine function. Callbacks run in
                registration order.
        """
        ...
