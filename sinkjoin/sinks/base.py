"""Sink capability protocols and capability resolution.

The required capability is ``ByteSink`` (a ``write(data) -> int`` method);
``ReservableSink`` and ``TextSink`` are optional and, when present, are
used to pre-size the sink and to skip the text -> bytes conversion.
"""

from __future__ import annotations

from enum import Flag, auto
from typing import Protocol, runtime_checkable


@runtime_checkable
class ByteSink(Protocol):
    """Required capability: accepts bytes.

    ``write`` returns the number of bytes accepted and raises on
    failure.  A failing call may report the bytes it did accept through
    the exception's ``characters_written`` attribute, the convention
    ``BlockingIOError`` uses.
    """

    def write(self, data: bytes, /) -> int:
        ...


@runtime_checkable
class ReservableSink(Protocol):
    """Optional capability: accepts a pre-allocation hint in bytes.

    Purely advisory.  The hint has no return value and no error channel;
    the sink may ignore it.
    """

    def reserve(self, size: int, /) -> None:
        ...


@runtime_checkable
class TextSink(Protocol):
    """Optional capability: accepts text without an intermediate encode.

    ``write_string(text)`` must behave exactly like encoding ``text`` and
    passing it to ``write``, and returns the number of *bytes* accepted.
    """

    def write_string(self, text: str, /) -> int:
        ...


class Capability(Flag):
    """Capabilities a sink was found to expose."""

    NONE = 0
    WRITE = auto()
    RESERVE = auto()
    WRITE_STRING = auto()


def probe_sink(sink: object, *, text: bool = False) -> Capability:
    """Return the capability set of *sink*.

    ``WRITE_STRING`` is only probed when *text* is true; the binary join
    has no use for it.
    """
    found = Capability.NONE
    if isinstance(sink, ByteSink):
        found |= Capability.WRITE
    if isinstance(sink, ReservableSink):
        found |= Capability.RESERVE
    if text and isinstance(sink, TextSink):
        found |= Capability.WRITE_STRING
    return found


