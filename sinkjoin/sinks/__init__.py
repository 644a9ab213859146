"""Sinks for sinkjoin: capability protocols and bundled implementations.

A sink is any caller-owned object the join functions write into.  Custom
sinks only need a ``write(data) -> int`` method; ``reserve(size)`` and
``write_string(text)`` are picked up automatically when present.

``probe_sink`` resolves which capabilities a sink has.  The join
functions call it once per call and reuse the answer for every write.
"""

from sinkjoin.sinks.base import (
    ByteSink,
    Capability,
    ReservableSink,
    TextSink,
    probe_sink,
)
from sinkjoin.sinks.buffer import ByteBuffer
from sinkjoin.sinks.stream import BinaryStreamSink, TextStreamSink, as_sink

__all__ = [
    "BinaryStreamSink",
    "ByteBuffer",
    "ByteSink",
    "Capability",
    "ReservableSink",
    "TextSink",
    "TextStreamSink",
    "as_sink",
    "probe_sink",
]
