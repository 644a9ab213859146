"""Adapters from standard file objects to join sinks.

Standard streams report failure by raising and may report short writes
by returning a smaller count.  The adapters turn a short write into a
``ShortWriteError`` carrying ``characters_written`` so a join accounts
for the partial bytes and stops.
"""

from __future__ import annotations

import io
import logging
from typing import BinaryIO, TextIO

from sinkjoin.config import settings
from sinkjoin.core.sizing import text_size
from sinkjoin.errors import ShortWriteError, UnsupportedSinkError
from sinkjoin.sinks.base import ByteSink

logger = logging.getLogger(__name__)


class BinaryStreamSink:
    """Exposes a binary file object as a ``ByteSink``.

    Parameters
    ----------
    stream:
        Any object with a bytes-accepting ``write`` (``io.BytesIO``,
        ``sys.stdout.buffer``, an ``io.RawIOBase``, ...).  The adapter
        never flushes or closes it.
    """

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream

    @property
    def stream(self) -> BinaryIO:
        return self._stream

    def write(self, data: bytes, /) -> int:
        expected = memoryview(data).nbytes
        # Raw streams return None when nothing could be written.
        accepted = self._stream.write(data) or 0
        if accepted < expected:
            raise ShortWriteError(accepted, expected)
        return accepted


class TextStreamSink:
    """Exposes a text file object as a ``TextSink`` and ``ByteSink``.

    Text goes to the stream untouched; bytes are decoded first.  Counts
    are always reported in bytes under *encoding*, which defaults to the
    stream's own ``encoding`` attribute and then to the configured one.
    """

    def __init__(
        self,
        stream: TextIO,
        encoding: str | None = None,
        errors: str | None = None,
    ) -> None:
        self._stream = stream
        self._encoding = encoding or getattr(stream, "encoding", None)
        self._errors = errors

    @property
    def stream(self) -> TextIO:
        return self._stream

    @property
    def encoding(self) -> str:
        return self._encoding or settings.encoding

    @property
    def errors(self) -> str:
        return self._errors or settings.errors

    def write_string(self, text: str, /) -> int:
        accepted = self._stream.write(text)
        if accepted is not None and accepted < len(text):
            raise ShortWriteError(
                text_size(text[:accepted], self.encoding, self.errors),
                text_size(text, self.encoding, self.errors),
            )
        return text_size(text, self.encoding, self.errors)

    def write(self, data: bytes, /) -> int:
        return self.write_string(bytes(data).decode(self.encoding, self.errors))


def as_sink(obj: object) -> ByteSink:
    """Return *obj* as something the join functions can write into.

    Text streams are wrapped in ``TextStreamSink`` and raw binary
    streams in ``BinaryStreamSink``; any other object with a ``write``
    method is assumed to follow the sink contract and returned as is.
    Buffered binary streams such as ``io.BytesIO`` fall in that last
    group: their ``write`` takes everything or raises.

    Raises
    ------
    UnsupportedSinkError
        If *obj* has no ``write`` method.
    """
    if isinstance(obj, (BinaryStreamSink, TextStreamSink)):
        return obj
    if isinstance(obj, io.TextIOBase):
        logger.debug("as_sink: wrapping text stream %r", obj)
        return TextStreamSink(obj)
    if isinstance(obj, io.RawIOBase):
        logger.debug("as_sink: wrapping raw stream %r", obj)
        return BinaryStreamSink(obj)
    if isinstance(obj, ByteSink):
        return obj
    raise UnsupportedSinkError(obj, "write")
