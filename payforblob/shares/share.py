"""
payforblob • Shares - Share type and the version-0 sparse layout

Every share is exactly SHARE_SIZE (512) bytes:

    namespace (29) | info (1) | [sequence length, uint32 BE] | data | 0x00 padding
                                 ^ first share of a sequence only

The info byte packs the share version and the sequence-start flag:

    info = (share_version << 1) | sequence_start

A blob of L bytes therefore occupies one share if L <= 478 and
1 + ceil((L - 478) / 482) shares otherwise.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from ..constants import (
    CONTINUATION_SPARSE_SHARE_CONTENT_SIZE,
    FIRST_SPARSE_SHARE_CONTENT_SIZE,
    MAX_SHARE_VERSION,
    NAMESPACE_SIZE,
    SEQUENCE_LEN_BYTES,
    SHARE_INFO_BYTES,
    SHARE_SIZE,
)
from ..utils.bytes import BytesLike, bytes_to_hex, to_bytes

_INFO_OFFSET = NAMESPACE_SIZE
_SEQ_OFFSET = NAMESPACE_SIZE + SHARE_INFO_BYTES


def info_byte(share_version: int, sequence_start: bool) -> int:
    if not 0 <= int(share_version) <= MAX_SHARE_VERSION:
        raise ValueError(f"share version {share_version} out of range [0, {MAX_SHARE_VERSION}]")
    return (int(share_version) << 1) | (1 if sequence_start else 0)


@dataclass(frozen=True)
class Share:
    """A raw 512-byte share with read-only views over its header fields."""

    raw: bytes

    def __post_init__(self) -> None:  # type: ignore[override]
        if not isinstance(self.raw, bytes):
            object.__setattr__(self, "raw", to_bytes(self.raw))
        if len(self.raw) != SHARE_SIZE:
            raise ValueError(f"share must be {SHARE_SIZE} bytes, got {len(self.raw)}")

    @property
    def namespace(self) -> bytes:
        return self.raw[:NAMESPACE_SIZE]

    @property
    def info(self) -> int:
        return self.raw[_INFO_OFFSET]

    @property
    def version(self) -> int:
        return self.info >> 1

    @property
    def is_sequence_start(self) -> bool:
        return bool(self.info & 1)

    @property
    def sequence_len(self) -> int:
        """Declared byte length of the whole sequence (first share only)."""
        if not self.is_sequence_start:
            raise ValueError("sequence length is only present on the first share")
        return int.from_bytes(self.raw[_SEQ_OFFSET : _SEQ_OFFSET + SEQUENCE_LEN_BYTES], "big")

    @property
    def content(self) -> bytes:
        """Data region, including any trailing zero padding."""
        start = _SEQ_OFFSET + (SEQUENCE_LEN_BYTES if self.is_sequence_start else 0)
        return self.raw[start:]

    def to_bytes(self) -> bytes:
        return self.raw

    def __len__(self) -> int:
        return len(self.raw)

    def __repr__(self) -> str:
        return (
            f"Share(ns={bytes_to_hex(self.namespace)[:14]}…, version={self.version}, "
            f"start={self.is_sequence_start})"
        )


def sparse_shares_needed(data_length: int) -> int:
    """Number of shares a sequence of `data_length` bytes occupies."""
    if data_length < 0:
        raise ValueError("data_length must be non-negative")
    if data_length == 0:
        return 0
    if data_length <= FIRST_SPARSE_SHARE_CONTENT_SIZE:
        return 1
    rest = data_length - FIRST_SPARSE_SHARE_CONTENT_SIZE
    return 1 + -(-rest // CONTINUATION_SPARSE_SHARE_CONTENT_SIZE)


def build_sparse_shares(namespace: BytesLike, share_version: int, data: BytesLike) -> List[Share]:
    """
    Lay `data` out as one sparse share sequence under `namespace`.

    Empty data yields no shares.
    """
    ns = to_bytes(namespace)
    if len(ns) != NAMESPACE_SIZE:
        raise ValueError(f"namespace must be {NAMESPACE_SIZE} bytes, got {len(ns)}")
    payload = to_bytes(data)
    if not payload:
        return []
    if len(payload) >= 1 << (8 * SEQUENCE_LEN_BYTES):
        raise ValueError("data too large for a uint32 sequence length")

    shares: List[Share] = []
    first = info_byte(share_version, True)
    cont = info_byte(share_version, False)

    head = payload[:FIRST_SPARSE_SHARE_CONTENT_SIZE]
    seq_len = len(payload).to_bytes(SEQUENCE_LEN_BYTES, "big")
    shares.append(Share(_pad(ns + bytes([first]) + seq_len + head)))

    off = FIRST_SPARSE_SHARE_CONTENT_SIZE
    while off < len(payload):
        chunk = payload[off : off + CONTINUATION_SPARSE_SHARE_CONTENT_SIZE]
        shares.append(Share(_pad(ns + bytes([cont]) + chunk)))
        off += CONTINUATION_SPARSE_SHARE_CONTENT_SIZE
    return shares


def _pad(b: bytes) -> bytes:
    return b + b"\x00" * (SHARE_SIZE - len(b))


__all__ = ["Share", "info_byte", "sparse_shares_needed", "build_sparse_shares"]
