"""
payforblob • Blob Types

The `Blob` is the unit a user pays to include: opaque bytes plus the
namespace they are filed under and the share encoding to lay them out with.

Notes
-----
• The constructor does not validate. Invalid blobs must be representable so
  `payforblob.blob.validate.validate_blob` can report the precise error kind.
• Byte fields are carried as `bytes`; `to_dict()` renders them as "0x" hex.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from ..constants import DEFAULT_SHARE_VERSION, NAMESPACE_VERSION_ZERO
from ..nmt.namespace import Namespace
from ..utils.bytes import BytesLike, bytes_to_hex, hex_to_bytes, to_bytes


@dataclass(frozen=True)
class Blob:
    """
    A blob:

      • namespace_id      - 28-byte namespace ID
      • data              - payload bytes (must be non-empty to be valid)
      • share_version     - share encoding tag
      • namespace_version - namespace ID scheme
    """

    namespace_id: bytes
    data: bytes
    share_version: int = DEFAULT_SHARE_VERSION
    namespace_version: int = NAMESPACE_VERSION_ZERO

    def __post_init__(self) -> None:  # type: ignore[override]
        for name in ("namespace_id", "data"):
            v = getattr(self, name)
            if isinstance(v, (bytearray, memoryview)):
                object.__setattr__(self, name, to_bytes(v))

    @classmethod
    def new(cls, namespace: Namespace, data: BytesLike, share_version: int = DEFAULT_SHARE_VERSION) -> "Blob":
        return cls(
            namespace_id=namespace.id,
            data=to_bytes(data),
            share_version=share_version,
            namespace_version=namespace.version,
        )

    def namespace(self) -> Namespace:
        """
        The blob's validated namespace.

        Raises InvalidNamespace / InvalidNamespaceVersion if malformed.
        """
        return Namespace.new(self.namespace_version, self.namespace_id)

    def __len__(self) -> int:
        return len(self.data)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "namespaceVersion": int(self.namespace_version),
            "namespaceId": bytes_to_hex(self.namespace_id),
            "data": bytes_to_hex(self.data),
            "shareVersion": int(self.share_version),
        }

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "Blob":
        return Blob(
            namespace_id=hex_to_bytes(d["namespaceId"]),
            data=hex_to_bytes(d["data"]),
            share_version=int(d.get("shareVersion", DEFAULT_SHARE_VERSION)),
            namespace_version=int(d.get("namespaceVersion", NAMESPACE_VERSION_ZERO)),
        )

    def __repr__(self) -> str:
        return (
            f"Blob(ns_version={self.namespace_version}, ns_id={bytes_to_hex(self.namespace_id)}, "
            f"size={len(self.data)}, share_version={self.share_version})"
        )


__all__ = ["Blob"]
