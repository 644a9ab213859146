"""Outcome of a single join call."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class JoinResult(BaseModel):
    """Bytes accepted by the sink and the first write failure, if any.

    ``error`` is the exact exception object the sink raised; it is never
    wrapped or copied.  On failure ``written`` counts every byte the sink
    reported up to and including the failing call, which may be less
    than the size of the intended output but never more.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    written: int = 0
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        """Whether every write succeeded."""
        return self.error is None

    def raise_for_error(self) -> int:
        """Re-raise the sink's error, or return ``written`` on success."""
        if self.error is not None:
            raise self.error
        return self.written
