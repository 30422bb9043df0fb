"""
Common test helpers: structure-revealing and call-counting hashers,
and sample item types.
"""

import hashlib
import threading
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from pydantic import BaseModel


def tag_hasher(data: bytes) -> bytes:
    """Not a real digest: H(x) = b"H(" + x + b")"."""
    return b"H(" + data + b")"


class CountingHasher:
    """SHA-512 that records every input it is called with."""

    def __init__(self) -> None:
        self.calls: list[bytes] = []
        self._lock = threading.Lock()

    def __call__(self, data: bytes) -> bytes:
        with self._lock:
            self.calls.append(data)
        return hashlib.sha512(data).digest()

    @property
    def count(self) -> int:
        return len(self.calls)


@dataclass(frozen=True)
class Block:
    """Item type implementing BytesHashable."""
    payload: bytes

    def as_bytes(self) -> bytes:
        return b"block:" + self.payload


class Color(str, Enum):
    RED = "red"
    BLUE = "blue"


class Record(BaseModel):
    """Pydantic item type hashed through canonical JSON."""
    name: str
    value: int
    color: Color = Color.RED
    note: str | None = None
    created_at: datetime | None = None
