"""sinkjoin: join strings and byte strings straight into a writer.

``join_strings`` and ``join_bytes`` write ``elem[0] + sep + elem[1] + ...``
to a caller-owned sink one piece at a time, without building the joined
value.  Sinks are probed once per call for two optional capabilities:

  - ``reserve(size)``: pre-size the sink with the exact output size
  - ``write_string(text)``: accept text without an intermediate encode

Both entry points return a ``JoinResult`` with the bytes accepted and
the first write failure, if any.
"""

__version__ = "0.1.0"
__description__ = "Join strings and byte strings straight into a writer"

from sinkjoin.core.joiner import join_bytes, join_strings
from sinkjoin.core.sizing import joined_size
from sinkjoin.errors import ShortWriteError, SinkJoinError, UnsupportedSinkError
from sinkjoin.models.result import JoinResult
from sinkjoin.sinks import (
    BinaryStreamSink,
    ByteBuffer,
    ByteSink,
    Capability,
    ReservableSink,
    TextSink,
    TextStreamSink,
    as_sink,
    probe_sink,
)

__all__ = [
    "BinaryStreamSink",
    "ByteBuffer",
    "ByteSink",
    "Capability",
    "JoinResult",
    "ReservableSink",
    "ShortWriteError",
    "SinkJoinError",
    "TextSink",
    "TextStreamSink",
    "UnsupportedSinkError",
    "__version__",
    "as_sink",
    "join_bytes",
    "join_strings",
    "joined_size",
    "probe_sink",
]
