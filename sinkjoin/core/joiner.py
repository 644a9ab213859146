"""Join a sequence of strings or byte strings straight into a sink.

``join_strings(sink, elements, sep)`` writes the same bytes as
``sink.write(sep.join(elements).encode())`` but never builds the joined
value: each element and separator goes to the sink in its own write.

The sink's capabilities are resolved once per call:

- ``reserve(size)`` is called first with the exact byte size of the
  output, when the sink has it and more than one element is joined;
- ``write_string(text)`` is used for every write of the text join when
  the sink has it, otherwise each value is encoded right before its
  ``write``.

The first write that raises stops the join.  The exception is returned,
not raised, together with every byte the sink reported accepting.
Text that cannot be encoded is not a sink failure: the
``UnicodeEncodeError`` propagates.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Sequence
from functools import partial
from itertools import islice
from typing import Any

from sinkjoin.config import settings
from sinkjoin.core.sizing import joined_size
from sinkjoin.errors import UnsupportedSinkError
from sinkjoin.models.result import JoinResult
from sinkjoin.sinks.base import Capability, probe_sink

logger = logging.getLogger(__name__)


def _chunks(
    elements: Sequence[Any],
    separator: Any,
    convert: Callable[[Any], Any] | None,
) -> Iterator[Any]:
    """Yield ``elements[0]``, then ``separator`` and the next element, in turn.

    Elements go through *convert*, when given, only as they are reached.
    """
    yield convert(elements[0]) if convert else elements[0]
    for element in islice(elements, 1, None):
        yield separator
        yield convert(element) if convert else element


def _write_all(
    write: Callable[[Any], int | None],
    elements: Sequence[Any],
    separator: Any,
    convert: Callable[[Any], Any] | None = None,
) -> JoinResult:
    written = 0
    for chunk in _chunks(elements, separator, convert):
        try:
            # Non-blocking raw streams return None when nothing was written.
            written += write(chunk) or 0
        except Exception as exc:  # noqa: BLE001 - returned to the caller unmodified
            # BlockingIOError convention for bytes accepted before failing
            written += getattr(exc, "characters_written", 0) or 0
            logger.debug("join stopped after %d bytes: %r", written, exc)
            return JoinResult(written=written, error=exc)
    return JoinResult(written=written)


def _codec_attr(sink: Any, name: str) -> str | None:
    value = getattr(sink, name, None)
    return value if isinstance(value, str) and value else None


def _reserve(sink: Any, found: Capability, size: Callable[[], int]) -> None:
    if Capability.RESERVE not in found or not settings.reserve:
        return
    hint = size()
    logger.debug("reserving %d bytes in %s", hint, type(sink).__name__)
    sink.reserve(hint)


def join_strings(
    sink: Any,
    elements: Sequence[str],
    separator: str = "",
    *,
    encoding: str | None = None,
    errors: str | None = None,
) -> JoinResult:
    """Write *elements* joined by *separator* to *sink*.

    Equivalent to writing ``separator.join(elements)`` encoded with
    *encoding* (the configured encoding by default).

    When the sink takes text through ``write_string`` and has an
    ``encoding`` attribute, the ``reserve`` hint is measured in that
    codec instead.

    Parameters
    ----------
    sink:
        Caller-owned destination.  Must have ``write(bytes) -> int`` or
        ``write_string(str) -> int``; ``reserve(int)`` is optional.
    elements:
        Strings to join.  An empty sequence writes nothing.
    separator:
        Inserted between consecutive elements only.

    Returns
    -------
    JoinResult
        Bytes the sink accepted and the exception of the first failing
        write, if any.

    Raises
    ------
    UnsupportedSinkError
        If at least one write is due and *sink* can take neither bytes
        nor text.
    """
    if not elements:
        return JoinResult()

    encoding = encoding or settings.encoding
    errors = errors or settings.errors

    found = probe_sink(sink, text=True)
    if not found & (Capability.WRITE | Capability.WRITE_STRING):
        raise UnsupportedSinkError(sink, "write")
    logger.debug(
        "join_strings: %d elements into %s (%s)",
        len(elements), type(sink).__name__, found,
    )

    if len(elements) > 1:
        # write_string sinks encode with their own codec when they declare one
        hint_encoding, hint_errors = encoding, errors
        if Capability.WRITE_STRING in found:
            hint_encoding = _codec_attr(sink, "encoding") or encoding
            hint_errors = _codec_attr(sink, "errors") or errors
        _reserve(
            sink,
            found,
            lambda: joined_size(
                elements, separator, encoding=hint_encoding, errors=hint_errors
            ),
        )

    if Capability.WRITE_STRING in found:
        return _write_all(sink.write_string, elements, separator)

    encode = partial(str.encode, encoding=encoding, errors=errors)
    sep = encode(separator) if len(elements) > 1 else None
    return _write_all(sink.write, elements, sep, encode)


def join_bytes(
    sink: Any,
    elements: Sequence[bytes],
    separator: bytes = b"",
) -> JoinResult:
    """Write *elements* joined by *separator* to *sink*.

    Equivalent to ``sink.write(separator.join(elements))`` without the
    joined copy.  Elements and separator are handed to ``sink.write``
    exactly as given.

    Raises
    ------
    UnsupportedSinkError
        If at least one write is due and *sink* has no ``write``.
    """
    if not elements:
        return JoinResult()

    found = probe_sink(sink)
    if Capability.WRITE not in found:
        raise UnsupportedSinkError(sink, "write")
    logger.debug(
        "join_bytes: %d elements into %s (%s)",
        len(elements), type(sink).__name__, found,
    )

    if len(elements) > 1:
        _reserve(sink, found, lambda: joined_size(elements, separator))

    return _write_all(sink.write, elements, separator)
