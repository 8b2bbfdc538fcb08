"""
payforblob utilities - Byte and hex helpers

  • Hex helpers with strict "0x" lowercase prefix
  • Coercion of bytes-like values to immutable `bytes`

All functions are deterministic and side-effect free.
"""
from __future__ import annotations

from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]

HEX_PREFIX = "0x"


def add_0x(h: str) -> str:
    """Ensure a lowercase '0x' prefix is present."""
    return h if h.startswith(HEX_PREFIX) else HEX_PREFIX + h


def strip_0x(h: str) -> str:
    """Remove a leading '0x' or '0X' (if present)."""
    return h[2:] if h[:2] in ("0x", "0X") else h


def bytes_to_hex(b: BytesLike) -> str:
    """Return '0x' + lowercase hex for the given bytes."""
    return HEX_PREFIX + to_bytes(b).hex()


def hex_to_bytes(s: str) -> bytes:
    """
    Parse a hex string with or without '0x' prefix.
    Raises ValueError on malformed input or odd-length hex.
    """
    hexpart = strip_0x(s.strip())
    if len(hexpart) % 2 != 0:
        raise ValueError("hex payload length must be even")
    return bytes.fromhex(hexpart)


def to_bytes(x: BytesLike) -> bytes:
    """Coerce common byte-likes (bytes/bytearray/memoryview) to `bytes`."""
    if isinstance(x, bytes):
        return x
    if isinstance(x, bytearray):
        return bytes(x)
    if isinstance(x, memoryview):
        return x.tobytes()
    raise TypeError(f"expected bytes-like, got {type(x).__name__}")


__all__ = [
    "BytesLike",
    "HEX_PREFIX",
    "add_0x",
    "strip_0x",
    "bytes_to_hex",
    "hex_to_bytes",
    "to_bytes",
]
