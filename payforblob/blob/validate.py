"""
payforblob • Blob Validation

Stateless checks a blob must pass before it is committed to and wrapped in
a MsgPayForBlobs. Checks run in a fixed order and the first failure wins:

  1. data non-empty                          → EmptyBlob
  2. share version supported                 → UnsupportedShareVersion
  3. namespace well formed                   → UnsupportedNamespaceVersion / InvalidNamespace
  4. namespace not reserved                  → ReservedNamespace
  5. namespace version usable for blobs      → UnsupportedNamespaceVersion

Raise `BlobError` subclasses on failure; never return a status.
"""

from __future__ import annotations

from ..constants import SUPPORTED_BLOB_NAMESPACE_VERSIONS, SUPPORTED_SHARE_VERSIONS
from ..errors import (
    EmptyBlob,
    NoBlobs,
    ReservedNamespace,
    UnsupportedNamespaceVersion,
    UnsupportedShareVersion,
)
from ..nmt.namespace import Namespace
from .types import Blob


def validate_blob_namespace(ns: Namespace) -> None:
    """
    Reject namespaces a user may not pay for: anything reserved, and any
    version other than those supported for blobs.
    """
    if ns.is_reserved:
        raise ReservedNamespace(
            f"namespace {ns.hex} is reserved",
            data={"namespace": ns.hex},
        )
    if ns.version not in SUPPORTED_BLOB_NAMESPACE_VERSIONS:
        raise UnsupportedNamespaceVersion(
            f"namespace version {ns.version} is not supported for blobs",
            data={"namespaceVersion": ns.version},
        )


def validate_blob(blob: Blob) -> None:
    if len(blob.data) == 0:
        raise EmptyBlob("blob data must not be empty")

    if blob.share_version not in SUPPORTED_SHARE_VERSIONS:
        raise UnsupportedShareVersion(
            f"share version {blob.share_version} is not supported",
            data={"shareVersion": blob.share_version, "supported": list(SUPPORTED_SHARE_VERSIONS)},
        )

    if not isinstance(blob.namespace_version, int) or not 0 <= blob.namespace_version <= 0xFF:
        raise UnsupportedNamespaceVersion(
            f"namespace version {blob.namespace_version!r} does not fit in a byte"
        )
    ns = blob.namespace()

    validate_blob_namespace(ns)


def validate_blobs(*blobs: Blob) -> None:
    """Validate every blob in order; at least one is required."""
    if not blobs:
        raise NoBlobs("at least one blob is required")
    for b in blobs:
        validate_blob(b)


__all__ = ["validate_blob", "validate_blobs", "validate_blob_namespace"]
