"""
payforblob • MsgPayForBlobs

The message a signer submits to pay for the inclusion of one or more blobs.
It carries no blob data, only what is needed to bind the fee to the blobs:
per blob, its namespace, share version, byte size and share commitment.

    msg = new_msg_pay_for_blobs(signer, blob_a, blob_b)
    msg.validate_basic()         # stateless; raises BlobError subclasses

Construction validates every blob, computes the commitments, assembles the
four parallel arrays and runs `validate_basic` before returning, so a
message returned by `new_msg_pay_for_blobs` is always well formed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Sequence, Tuple, Type

from ..constants import HASH_LENGTH, SUPPORTED_BLOB_NAMESPACE_VERSIONS
from ..errors import (
    BlobError,
    InvalidNamespace,
    InvalidNamespaceVersion,
    InvalidShareCommitment,
    MismatchedArrayLengths,
    NoBlobSizes,
    NoNamespaces,
    NoShareCommitments,
    NoShareVersions,
    ReservedNamespace,
)
from ..blob.commitment import create_commitments
from ..blob.types import Blob
from ..blob.validate import validate_blobs
from ..logging import get_logger
from ..nmt.namespace import Namespace, encode_namespace
from ..utils.bytes import bytes_to_hex, hex_to_bytes
from .address import validate_address

log = get_logger(__name__)

TYPE_URL = "/celestia.blob.v1.MsgPayForBlobs"


@dataclass(frozen=True)
class MsgPayForBlobs:
    signer: str
    namespaces: Tuple[bytes, ...]
    blob_sizes: Tuple[int, ...]
    share_commitments: Tuple[bytes, ...]
    share_versions: Tuple[int, ...]

    TYPE_URL = TYPE_URL

    def __post_init__(self) -> None:  # type: ignore[override]
        for name in ("namespaces", "blob_sizes", "share_commitments", "share_versions"):
            v = getattr(self, name)
            if isinstance(v, list):
                object.__setattr__(self, name, tuple(v))

    # ------------------------------------------------------------------ #
    # Validation
    # ------------------------------------------------------------------ #

    def validate_basic(self) -> None:
        """
        Stateless validation. Checks run in a fixed order and the first
        failure is raised:

          1. non-empty namespaces, share_versions, blob_sizes, share_commitments
          2. equal array lengths
          3. every namespace decodes, is not reserved, has a blob version
          4. every commitment is 32 bytes
          5. signer is a bech32 account address with the configured prefix
        """
        _guarded(NoNamespaces, self._check_non_empty, "namespaces", NoNamespaces)
        _guarded(NoShareVersions, self._check_non_empty, "share_versions", NoShareVersions)
        _guarded(NoBlobSizes, self._check_non_empty, "blob_sizes", NoBlobSizes)
        _guarded(NoShareCommitments, self._check_non_empty, "share_commitments", NoShareCommitments)
        _guarded(MismatchedArrayLengths, self._check_lengths)

        for i, raw in enumerate(self.namespaces):
            _guarded(InvalidNamespace, _check_namespace, i, raw)

        for i, c in enumerate(self.share_commitments):
            _guarded(InvalidShareCommitment, _check_commitment, i, c)

        validate_address(self.signer)

    def _check_non_empty(self, name: str, err: Type[BlobError]) -> None:
        if not getattr(self, name):
            raise err(f"{name} must not be empty")

    def _check_lengths(self) -> None:
        lens = {
            "namespaces": len(self.namespaces),
            "share_versions": len(self.share_versions),
            "blob_sizes": len(self.blob_sizes),
            "share_commitments": len(self.share_commitments),
        }
        if len(set(lens.values())) != 1:
            raise MismatchedArrayLengths(
                "namespaces, share_versions, blob_sizes and share_commitments must have equal lengths",
                data=lens,
            )

    # ------------------------------------------------------------------ #
    # Accessors / (de)serialization
    # ------------------------------------------------------------------ #

    def signers(self) -> List[bytes]:
        """Decoded account bytes of the signer."""
        return [validate_address(self.signer)]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "@type": TYPE_URL,
            "signer": self.signer,
            "namespaces": [bytes_to_hex(n) for n in self.namespaces],
            "blobSizes": [int(s) for s in self.blob_sizes],
            "shareCommitments": [bytes_to_hex(c) for c in self.share_commitments],
            "shareVersions": [int(v) for v in self.share_versions],
        }

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "MsgPayForBlobs":
        return MsgPayForBlobs(
            signer=str(d["signer"]),
            namespaces=tuple(hex_to_bytes(n) for n in d.get("namespaces", ())),
            blob_sizes=tuple(int(s) for s in d.get("blobSizes", ())),
            share_commitments=tuple(hex_to_bytes(c) for c in d.get("shareCommitments", ())),
            share_versions=tuple(int(v) for v in d.get("shareVersions", ())),
        )


def _guarded(err: Type[BlobError], fn: Callable[..., None], *args: Any) -> None:
    """Run a check, reporting malformed-input crashes as `err`."""
    try:
        fn(*args)
    except BlobError:
        raise
    except (TypeError, ValueError, AttributeError) as e:
        raise err(f"malformed message field: {e}") from e


def _check_namespace(i: int, raw: bytes) -> None:
    ns = Namespace.from_bytes(raw)
    if ns.is_reserved:
        raise ReservedNamespace(
            f"namespaces[{i}] {ns.hex} is reserved",
            data={"index": i, "namespace": ns.hex},
        )
    if ns.version not in SUPPORTED_BLOB_NAMESPACE_VERSIONS:
        raise InvalidNamespaceVersion(
            f"namespaces[{i}] version {ns.version} is not supported for blobs",
            data={"index": i, "namespaceVersion": ns.version},
        )


def _check_commitment(i: int, c: bytes) -> None:
    if len(c) != HASH_LENGTH:
        raise InvalidShareCommitment(
            f"share_commitments[{i}] must be {HASH_LENGTH} bytes, got {len(c)}",
            data={"index": i, "length": len(c)},
        )


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


def extract_blob_components(
    blobs: Sequence[Blob],
) -> Tuple[List[int], List[bytes], List[int], List[int]]:
    """
    Split blobs into (namespace_versions, namespace_ids, sizes, share_versions).
    """
    namespace_versions = [b.namespace_version for b in blobs]
    namespace_ids = [b.namespace_id for b in blobs]
    sizes = [len(b.data) for b in blobs]
    share_versions = [b.share_version for b in blobs]
    return namespace_versions, namespace_ids, sizes, share_versions


def new_msg_pay_for_blobs(signer: str, *blobs: Blob) -> MsgPayForBlobs:
    """
    Build and validate a MsgPayForBlobs for `blobs` signed by `signer`.

    Raises the first error encountered; nothing is returned on failure.
    """
    validate_blobs(*blobs)
    commitments = create_commitments(blobs)
    namespace_versions, namespace_ids, sizes, share_versions = extract_blob_components(blobs)

    msg = MsgPayForBlobs(
        signer=signer,
        namespaces=tuple(encode_namespace(v, i) for v, i in zip(namespace_versions, namespace_ids)),
        blob_sizes=tuple(sizes),
        share_commitments=tuple(commitments),
        share_versions=tuple(share_versions),
    )
    msg.validate_basic()

    log.debug("pay-for-blobs message built", extra={"signer": signer, "blobs": len(blobs)})
    return msg


__all__ = [
    "TYPE_URL",
    "MsgPayForBlobs",
    "extract_blob_components",
    "new_msg_pay_for_blobs",
]
