"""
payforblob • NMT - Namespace type, encoding and the reserved table.

A *namespace* is a 29-byte identifier that partitions shares in the data
square: one version byte followed by a 28-byte ID. Namespaces are ordered by
their encoded bytes, which is the order shares appear in a square.

  • `Namespace`: validated (version, id) pair
  • `encode_namespace` / `decode_namespace`: wire helpers
  • `RESERVED_NAMESPACES`: read-only table of protocol namespaces
  • `is_reserved(version, id)`: reserved-range check

Reserved ranges
---------------
  • primary:   every version-0 namespace <= MAX_PRIMARY_RESERVED_NAMESPACE
               (tx, intermediate state roots, pay-for-blob, padding)
  • secondary: every namespace >= MIN_SECONDARY_RESERVED_NAMESPACE
               (tail padding, parity shares)
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

from ..constants import (
    NAMESPACE_ID_SIZE,
    NAMESPACE_SIZE,
    NAMESPACE_VERSION_MAX,
    NAMESPACE_VERSION_ZERO,
    NAMESPACE_VERSION_ZERO_ID_SIZE,
    NAMESPACE_VERSION_ZERO_PREFIX,
    SUPPORTED_BLOB_NAMESPACE_VERSIONS,
)
from ..errors import InvalidNamespace, InvalidNamespaceVersion
from ..utils.bytes import BytesLike, bytes_to_hex, to_bytes

#: Versions with a defined ID layout.
KNOWN_NAMESPACE_VERSIONS: Tuple[int, ...] = (NAMESPACE_VERSION_ZERO, NAMESPACE_VERSION_MAX)


# ------------------------------ Internal utils --------------------------------

def _validate_version(version: int) -> None:
    if not isinstance(version, int) or isinstance(version, bool):
        raise InvalidNamespaceVersion("namespace version must be an integer")
    if version not in KNOWN_NAMESPACE_VERSIONS:
        raise InvalidNamespaceVersion(f"unsupported namespace version {version}")


def _validate_id(version: int, id: bytes) -> None:
    if not isinstance(id, bytes):
        raise InvalidNamespace("namespace id must be bytes")
    if len(id) != NAMESPACE_ID_SIZE:
        raise InvalidNamespace(f"namespace id must be {NAMESPACE_ID_SIZE} bytes, got {len(id)}")
    if version == NAMESPACE_VERSION_ZERO and not id.startswith(NAMESPACE_VERSION_ZERO_PREFIX):
        raise InvalidNamespace(
            f"version 0 namespace id must start with {len(NAMESPACE_VERSION_ZERO_PREFIX)} zero bytes"
        )


# ------------------------------- Core type ------------------------------------

@dataclass(frozen=True, order=False)
class Namespace:
    """
    Validated namespace.

    Construction:
        ns = Namespace.new(0, b"\\x00" * 18 + b"\\x01" * 10)
        ns = Namespace.new_v0(b"\\x01" * 10)
        ns = Namespace.from_bytes(raw29)
    """
    version: int
    id: bytes

    def __post_init__(self) -> None:  # type: ignore[override]
        _validate_version(self.version)
        _validate_id(self.version, self.id)

    # --- constructors ---

    @classmethod
    def new(cls, version: int, id: BytesLike) -> "Namespace":
        return cls(int(version), to_bytes(id))

    @classmethod
    def new_v0(cls, sub_id: BytesLike) -> "Namespace":
        """Version-0 namespace from the trailing (up to 10-byte) user ID."""
        sid = to_bytes(sub_id)
        if len(sid) > NAMESPACE_VERSION_ZERO_ID_SIZE:
            raise InvalidNamespace(
                f"version 0 sub-ID must be at most {NAMESPACE_VERSION_ZERO_ID_SIZE} bytes, got {len(sid)}"
            )
        pad = b"\x00" * (NAMESPACE_VERSION_ZERO_ID_SIZE - len(sid))
        return cls(NAMESPACE_VERSION_ZERO, NAMESPACE_VERSION_ZERO_PREFIX + pad + sid)

    @classmethod
    def from_bytes(cls, raw: BytesLike) -> "Namespace":
        b = to_bytes(raw)
        if len(b) != NAMESPACE_SIZE:
            raise InvalidNamespace(f"namespace must be {NAMESPACE_SIZE} bytes, got {len(b)}")
        return cls(b[0], b[1:])

    # --- accessors ---

    def to_bytes(self) -> bytes:
        return bytes([self.version]) + self.id

    @property
    def hex(self) -> str:
        return bytes_to_hex(self.to_bytes())

    @property
    def is_reserved(self) -> bool:
        return self.is_primary_reserved or self.is_secondary_reserved

    @property
    def is_primary_reserved(self) -> bool:
        return self.to_bytes() <= _MAX_PRIMARY_RESERVED_RAW

    @property
    def is_secondary_reserved(self) -> bool:
        return self.to_bytes() >= _MIN_SECONDARY_RESERVED_RAW

    @property
    def is_parity_shares(self) -> bool:
        return self == PARITY_SHARES_NAMESPACE

    @property
    def is_tail_padding(self) -> bool:
        return self == TAIL_PADDING_NAMESPACE

    @property
    def is_supported_blob_version(self) -> bool:
        return self.version in SUPPORTED_BLOB_NAMESPACE_VERSIONS

    def __lt__(self, other: "Namespace") -> bool:
        return self.to_bytes() < other.to_bytes()

    def __le__(self, other: "Namespace") -> bool:
        return self.to_bytes() <= other.to_bytes()

    def __repr__(self) -> str:
        return f"Namespace(version={self.version}, id={bytes_to_hex(self.id)})"


# ------------------------------- Encoding -------------------------------------

def encode_namespace(version: int, id: BytesLike) -> bytes:
    """Encode (version, id) as the 29-byte wire form."""
    return Namespace.new(version, id).to_bytes()


def decode_namespace(raw: BytesLike) -> Tuple[int, bytes]:
    """Decode the 29-byte wire form into (version, id)."""
    ns = Namespace.from_bytes(raw)
    return ns.version, ns.id


# ------------------------------- Reserved table -------------------------------

def _primary_reserved(last_byte: int) -> Namespace:
    return Namespace.new_v0(b"\x00" * (NAMESPACE_VERSION_ZERO_ID_SIZE - 1) + bytes([last_byte]))


TX_NAMESPACE = _primary_reserved(0x01)
INTERMEDIATE_STATE_ROOTS_NAMESPACE = _primary_reserved(0x02)
PAY_FOR_BLOB_NAMESPACE = _primary_reserved(0x04)
PRIMARY_RESERVED_PADDING_NAMESPACE = _primary_reserved(0xFF)
MAX_PRIMARY_RESERVED_NAMESPACE = _primary_reserved(0xFF)
MIN_SECONDARY_RESERVED_NAMESPACE = Namespace(
    NAMESPACE_VERSION_MAX, b"\xff" * (NAMESPACE_ID_SIZE - 1) + b"\x00"
)
TAIL_PADDING_NAMESPACE = Namespace(NAMESPACE_VERSION_MAX, b"\xff" * (NAMESPACE_ID_SIZE - 1) + b"\xfe")
PARITY_SHARES_NAMESPACE = Namespace(NAMESPACE_VERSION_MAX, b"\xff" * NAMESPACE_ID_SIZE)

_MAX_PRIMARY_RESERVED_RAW = MAX_PRIMARY_RESERVED_NAMESPACE.to_bytes()
_MIN_SECONDARY_RESERVED_RAW = MIN_SECONDARY_RESERVED_NAMESPACE.to_bytes()

RESERVED_NAMESPACES: Mapping[str, Namespace] = MappingProxyType(
    {
        "tx": TX_NAMESPACE,
        "intermediate_state_roots": INTERMEDIATE_STATE_ROOTS_NAMESPACE,
        "pay_for_blob": PAY_FOR_BLOB_NAMESPACE,
        "primary_reserved_padding": PRIMARY_RESERVED_PADDING_NAMESPACE,
        "max_primary_reserved": MAX_PRIMARY_RESERVED_NAMESPACE,
        "min_secondary_reserved": MIN_SECONDARY_RESERVED_NAMESPACE,
        "tail_padding": TAIL_PADDING_NAMESPACE,
        "parity_shares": PARITY_SHARES_NAMESPACE,
    }
)


def is_reserved(version: int, id: BytesLike) -> bool:
    """Return True if (version, id) falls in a reserved range."""
    v = int(version)
    if not 0 <= v <= 0xFF:
        raise InvalidNamespaceVersion(f"namespace version {v} does not fit in a byte")
    raw = bytes([v]) + to_bytes(id)
    return raw <= _MAX_PRIMARY_RESERVED_RAW or raw >= _MIN_SECONDARY_RESERVED_RAW


__all__ = [
    "Namespace",
    "KNOWN_NAMESPACE_VERSIONS",
    "encode_namespace",
    "decode_namespace",
    "TX_NAMESPACE",
    "INTERMEDIATE_STATE_ROOTS_NAMESPACE",
    "PAY_FOR_BLOB_NAMESPACE",
    "PRIMARY_RESERVED_PADDING_NAMESPACE",
    "MAX_PRIMARY_RESERVED_NAMESPACE",
    "MIN_SECONDARY_RESERVED_NAMESPACE",
    "TAIL_PADDING_NAMESPACE",
    "PARITY_SHARES_NAMESPACE",
    "RESERVED_NAMESPACES",
    "is_reserved",
]
