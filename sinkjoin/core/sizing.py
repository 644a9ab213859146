"""Byte-size accounting for joined output.

The same computation feeds the ``reserve`` hint and the byte counts the
text stream adapter reports, so both agree with what ``write`` would
have received.
"""

from __future__ import annotations

import codecs
from collections.abc import Sequence
from functools import lru_cache

from sinkjoin.config import settings


@lru_cache(maxsize=32)
def _ascii_compatible(encoding: str) -> bool:
    """Whether every ASCII string encodes to one byte per character."""
    name = codecs.lookup(encoding).name
    try:
        return "abcXYZ019 ~\x00\x7f".encode(name) == b"abcXYZ019 ~\x00\x7f"
    except UnicodeError:
        return False


def text_size(text: str, encoding: str | None = None, errors: str | None = None) -> int:
    """Return the number of bytes *text* occupies once encoded.

    Pure-ASCII text under an ASCII-compatible encoding is measured
    without encoding it.
    """
    encoding = encoding or settings.encoding
    if text.isascii() and _ascii_compatible(encoding):
        return len(text)
    return len(text.encode(encoding, errors or settings.errors))


def joined_size(
    elements: Sequence[str] | Sequence[bytes],
    separator: str | bytes,
    *,
    encoding: str | None = None,
    errors: str | None = None,
) -> int:
    """Return the byte size of *elements* joined by *separator*.

    ``size(separator) * (len(elements) - 1) + sum(size(element))``, or 0
    for an empty sequence.  Text is measured in bytes under *encoding*
    (the configured encoding by default), never in code points, so the
    figure matches what a byte-oriented sink stores.
    """
    if not elements:
        return 0

    if isinstance(separator, str):
        total = text_size(separator, encoding, errors) * (len(elements) - 1)
        for element in elements:
            total += text_size(element, encoding, errors)
        return total

    total = memoryview(separator).nbytes * (len(elements) - 1)
    for element in elements:
        total += memoryview(element).nbytes
    return total
