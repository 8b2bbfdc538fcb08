"""
payforblob utilities - Hashing helpers (SHA-256 + domain tags)

This module provides:

  • Thin wrappers around SHA-256
  • The single-byte domain tags shared by every Merkle tree in the package
  • RFC 6962 leaf / inner hashes

Rationale
---------
Leaf and inner nodes are hashed under different one-byte prefixes so that an
inner node can never be replayed as a leaf (second-preimage resistance):

  leaf_preimage  = 0x00 | data
  inner_preimage = 0x01 | left | right

The namespaced variants used inside subtrees are in `payforblob.nmt.hasher`;
they use the same tags.
"""

from __future__ import annotations

from hashlib import sha256 as _sha256

from .bytes import BytesLike, to_bytes

#: Digest size of SHA-256.
DIGEST_SIZE = 32

LEAF_PREFIX = b"\x00"
NODE_PREFIX = b"\x01"


def sha256(data: BytesLike) -> bytes:
    """Return SHA-256(bytes(data))."""
    return _sha256(to_bytes(data)).digest()


def sha256_hex(data: BytesLike) -> str:
    """Return '0x' + lowercase hex of SHA-256(bytes(data))."""
    return "0x" + _sha256(to_bytes(data)).hexdigest()


def empty_hash() -> bytes:
    """SHA-256 of the empty string."""
    return _sha256(b"").digest()


def leaf_hash(leaf: BytesLike) -> bytes:
    """RFC 6962 leaf hash: SHA-256(0x00 || leaf)."""
    h = _sha256(LEAF_PREFIX)
    h.update(to_bytes(leaf))
    return h.digest()


def inner_hash(left: BytesLike, right: BytesLike) -> bytes:
    """RFC 6962 inner hash: SHA-256(0x01 || left || right)."""
    h = _sha256(NODE_PREFIX)
    h.update(to_bytes(left))
    h.update(to_bytes(right))
    return h.digest()


__all__ = [
    "DIGEST_SIZE",
    "LEAF_PREFIX",
    "NODE_PREFIX",
    "sha256",
    "sha256_hex",
    "empty_hash",
    "leaf_hash",
    "inner_hash",
]
