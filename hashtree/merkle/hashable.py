"""
Hashable Items
Conversion of leaf items into the canonical bytes fed to the hasher.

Encoding Rules (in dispatch order):
1. BytesHashable: item.as_bytes()
2. bytes / bytearray / memoryview: the raw bytes, unchanged
3. str: UTF-8 encoding
4. Anything else: dumps_canonical(item).encode("utf-8")

The encoding directly determines the leaf digest, so it must be stable:
the same logical value always yields the same bytes.
"""
from __future__ import annotations

from typing import Any, Callable, Protocol, runtime_checkable

from hashtree.schemas.canonical import dumps_canonical
from hashtree.schemas.errors import CanonicalizationException


# Per-type canonical encoding, supplied when a tree is built
Encoder = Callable[[Any], bytes]


@runtime_checkable
class BytesHashable(Protocol):
    """An item type that knows its own canonical byte encoding."""

    def as_bytes(self) -> bytes:
        ...


def utf8_bytes(text: str) -> bytes:
    """Encode a textual item as UTF-8."""
    return text.encode("utf-8")


def canonical_bytes(item: Any) -> bytes:
    """
    Default Encoder for Merkle leaf items.

    Args:
        item: A BytesHashable, bytes-like object, string, or any value
              dumps_canonical() accepts (pydantic models, dicts, lists,
              numbers, datetimes, enums).

    Returns:
        The canonical byte encoding of ``item``.

    Raises:
        CanonicalizationException: If ``as_bytes()`` returns something other
            than bytes, or the item has no canonical JSON form.
        UnicodeEncodeError: If a string, directly or inside a structured
            item, holds a lone surrogate. Raised by the UTF-8 codec and
            propagated unchanged.
    """
    if isinstance(item, BytesHashable):
        encoded = item.as_bytes()
        if not isinstance(encoded, bytes):
            raise CanonicalizationException(
                message=f"{type(item).__name__}.as_bytes() must return bytes",
                details={
                    "type": type(item).__name__,
                    "returned": type(encoded).__name__,
                },
            )
        return encoded

    if isinstance(item, (bytes, bytearray, memoryview)):
        return bytes(item)

    if isinstance(item, str):
        return utf8_bytes(item)

    return dumps_canonical(item).encode("utf-8")


__all__ = [
    "Encoder",
    "BytesHashable",
    "utf8_bytes",
    "canonical_bytes",
]
