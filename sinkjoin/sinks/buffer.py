"""In-memory sink exposing every capability.

``ByteBuffer`` is the library's counterpart of a growable byte buffer:
``reserve`` really pre-extends the backing ``bytearray`` and later
writes are spliced into the reserved region instead of appended, so a
join into a reserved buffer never reallocates.
"""

from __future__ import annotations

import logging

from sinkjoin.config import settings

logger = logging.getLogger(__name__)


class ByteBuffer:
    """Growable in-memory byte sink.

    Parameters
    ----------
    initial:
        Bytes the buffer starts with.
    encoding, errors:
        Codec used by ``write_string`` and ``getvalue_text``.  Default
        to the configured ``settings.encoding`` / ``settings.errors``.
    """

    def __init__(
        self,
        initial: bytes = b"",
        *,
        encoding: str | None = None,
        errors: str | None = None,
    ) -> None:
        self._buf = bytearray(initial)
        self._len = len(self._buf)
        self._encoding = encoding
        self._errors = errors

    @property
    def encoding(self) -> str:
        return self._encoding or settings.encoding

    @property
    def errors(self) -> str:
        return self._errors or settings.errors

    # ------------------------------------------------------------------
    # Sink capabilities
    # ------------------------------------------------------------------

    def write(self, data: bytes, /) -> int:
        """Append *data*, filling reserved space first."""
        size = memoryview(data).nbytes
        end = self._len + size
        # Replaces reserved bytes in place, or extends past the end.
        self._buf[self._len:end] = data
        self._len = end
        return size

    def write_string(self, text: str, /) -> int:
        """Append *text* encoded with this buffer's codec."""
        return self.write(text.encode(self.encoding, self.errors))

    def reserve(self, size: int, /) -> None:
        """Make sure at least *size* more bytes fit without reallocating."""
        spare = len(self._buf) - self._len
        if size > spare:
            self._buf.extend(bytes(size - spare))
            logger.debug("ByteBuffer: reserved %d bytes (capacity %d)", size, len(self._buf))

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return self._len

    @property
    def capacity(self) -> int:
        """Bytes the buffer can hold before it has to grow."""
        return len(self._buf)

    def getvalue(self) -> bytes:
        """Return the bytes written so far."""
        return bytes(self._buf[: self._len])

    def getvalue_text(self) -> str:
        """Return the bytes written so far, decoded."""
        return self.getvalue().decode(self.encoding, self.errors)

    def reset(self) -> None:
        """Discard the contents but keep the allocated capacity."""
        self._len = 0

    def __repr__(self) -> str:
        return f"ByteBuffer(len={self._len}, capacity={len(self._buf)})"
