"""Shared test fixtures for sinkjoin."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest


# ---------------------------------------------------------------------------
# Recording sinks, one per combination of optional capabilities
# ---------------------------------------------------------------------------


class JustWriter:
    """Only the required ``write`` capability; records every call."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, Any]] = []
        self.chunks: list[bytes] = []

    def write(self, data: bytes) -> int:
        self.calls.append(("write", data))
        self.chunks.append(bytes(data))
        return len(data)

    def getvalue(self) -> bytes:
        return b"".join(self.chunks)

    @property
    def write_calls(self) -> list[tuple[str, Any]]:
        return [call for call in self.calls if call[0] != "reserve"]

    @property
    def hints(self) -> list[int]:
        return [size for name, size in self.calls if name == "reserve"]


class ReservingWriter(JustWriter):
    """``write`` + ``reserve``."""

    def reserve(self, size: int) -> None:
        self.calls.append(("reserve", size))


class StringWriter(JustWriter):
    """``write`` + ``write_string``."""

    encoding = "utf-8"

    def write_string(self, text: str) -> int:
        self.calls.append(("write_string", text))
        data = text.encode(self.encoding)
        self.chunks.append(data)
        return len(data)


class FullWriter(StringWriter):
    """``write`` + ``write_string`` + ``reserve``."""

    def reserve(self, size: int) -> None:
        self.calls.append(("reserve", size))


SINK_KINDS: dict[str, type[JustWriter]] = {
    "justWriter": JustWriter,
    "reserving": ReservingWriter,
    "stringWriter": StringWriter,
    "full": FullWriter,
}


@pytest.fixture(params=list(SINK_KINDS), ids=list(SINK_KINDS))
def any_sink(request: pytest.FixtureRequest) -> JustWriter:
    """A fresh recording sink, once for each capability combination."""
    return SINK_KINDS[request.param]()


@pytest.fixture
def sink_kinds() -> dict[str, type[JustWriter]]:
    """The recording sink classes keyed by capability combination."""
    return dict(SINK_KINDS)


# ---------------------------------------------------------------------------
# Failing sinks
# ---------------------------------------------------------------------------


class WriteFailure(Exception):
    """Raised by FailingWriter; carries the partial count it accepted."""

    def __init__(self, call: int, characters_written: int = 0) -> None:
        super().__init__(f"write #{call} failed")
        self.call = call
        self.characters_written = characters_written


class FailingWriter(JustWriter):
    """Accepts writes until call number *fail_on* (1-based), which raises.

    The failing call reports *partial* bytes accepted through
    ``characters_written``.
    """

    def __init__(self, fail_on: int, partial: int = 0) -> None:
        super().__init__()
        self.fail_on = fail_on
        self.partial = partial
        self.raised: Exception | None = None

    def _count(self, data: bytes) -> int:
        if len(self.write_calls) == self.fail_on:
            self.chunks.append(bytes(data[: self.partial]))
            self.raised = WriteFailure(self.fail_on, self.partial)
            raise self.raised
        self.chunks.append(bytes(data))
        return len(data)

    def write(self, data: bytes) -> int:
        self.calls.append(("write", data))
        return self._count(data)


class FailingStringWriter(FailingWriter):
    """FailingWriter that also takes text directly."""

    def write_string(self, text: str) -> int:
        self.calls.append(("write_string", text))
        return self._count(text.encode("utf-8"))


@pytest.fixture
def make_failing_sink() -> Callable[..., FailingWriter]:
    """Factory fixture: a sink whose *fail_on*-th write raises."""

    def _factory(fail_on: int, partial: int = 0, text: bool = False) -> FailingWriter:
        cls = FailingStringWriter if text else FailingWriter
        return cls(fail_on, partial)

    return _factory
