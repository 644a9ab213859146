"""Exception types raised by sinkjoin itself.

Sink write failures are *not* represented here: whatever a sink raises
is handed back to the caller untouched in ``JoinResult.error``.
"""

from __future__ import annotations


class SinkJoinError(Exception):
    """Base class for errors originating in sinkjoin."""


class UnsupportedSinkError(SinkJoinError, TypeError):
    """Raised when a sink does not expose the write capability a join needs."""

    def __init__(self, sink: object, required: str) -> None:
        self.sink = sink
        self.required = required
        super().__init__(
            f"{type(sink).__name__} does not support {required}(); "
            "cannot use it as a join sink"
        )


class ShortWriteError(SinkJoinError, OSError):
    """Raised by the stream adapters when a stream accepts fewer bytes than given.

    Follows the ``BlockingIOError`` convention: ``characters_written``
    holds the number of bytes the stream did accept before stopping.
    """

    def __init__(self, characters_written: int, expected: int) -> None:
        self.characters_written = characters_written
        self.expected = expected
        super().__init__(
            f"short write: stream accepted {characters_written} of {expected} bytes"
        )
