"""
payforblob constants.

Consensus-level sizes for shares, namespaces and commitments. Changing any
of these changes every commitment, so they are not configurable; runtime
knobs (square size bound, subtree root threshold, worker count) live in
`payforblob.config`.

- Share layout
- Namespace layout
- Supported versions
- Square / subtree defaults
"""

from __future__ import annotations

from typing import Tuple

# ------------------------------ shares --------------------------------------

#: Size of every share in bytes.
SHARE_SIZE: int = 512
#: One byte holding (share_version << 1) | sequence_start.
SHARE_INFO_BYTES: int = 1
#: Big-endian uint32 sequence length carried by the first share of a blob.
SEQUENCE_LEN_BYTES: int = 4
#: Highest share version representable in the info byte.
MAX_SHARE_VERSION: int = 127

#: Share version 0: sparse shares, zero padded.
SHARE_VERSION_ZERO: int = 0
SUPPORTED_SHARE_VERSIONS: Tuple[int, ...] = (SHARE_VERSION_ZERO,)
DEFAULT_SHARE_VERSION: int = SHARE_VERSION_ZERO


# ------------------------------ namespaces ----------------------------------

NAMESPACE_VERSION_SIZE: int = 1
NAMESPACE_ID_SIZE: int = 28
NAMESPACE_SIZE: int = NAMESPACE_VERSION_SIZE + NAMESPACE_ID_SIZE

NAMESPACE_VERSION_ZERO: int = 0
NAMESPACE_VERSION_MAX: int = 255
#: Version-0 IDs start with this many zero bytes; the rest is user-chosen.
NAMESPACE_VERSION_ZERO_PREFIX_SIZE: int = 18
NAMESPACE_VERSION_ZERO_ID_SIZE: int = NAMESPACE_ID_SIZE - NAMESPACE_VERSION_ZERO_PREFIX_SIZE
NAMESPACE_VERSION_ZERO_PREFIX: bytes = b"\x00" * NAMESPACE_VERSION_ZERO_PREFIX_SIZE

#: Namespace versions that may carry blob data.
SUPPORTED_BLOB_NAMESPACE_VERSIONS: Tuple[int, ...] = (NAMESPACE_VERSION_ZERO,)


# ------------------------------ derived share sizes -------------------------

#: Payload bytes in the first share of a sequence.
FIRST_SPARSE_SHARE_CONTENT_SIZE: int = (
    SHARE_SIZE - NAMESPACE_SIZE - SHARE_INFO_BYTES - SEQUENCE_LEN_BYTES
)
#: Payload bytes in every following share.
CONTINUATION_SPARSE_SHARE_CONTENT_SIZE: int = SHARE_SIZE - NAMESPACE_SIZE - SHARE_INFO_BYTES


# ------------------------------ hashing & squares ---------------------------

#: Length of a share commitment (SHA-256 digest).
HASH_LENGTH: int = 32

#: Upper bound on the data square side enforced by the protocol.
SQUARE_SIZE_UPPER_BOUND: int = 128
#: Default square side bound used when computing subtree widths.
DEFAULT_MAX_SQUARE_SIZE: int = 128
#: Number of subtree roots a commitment may have before subtrees widen.
DEFAULT_SUBTREE_ROOT_THRESHOLD: int = 64


__all__ = [
    "SHARE_SIZE",
    "SHARE_INFO_BYTES",
    "SEQUENCE_LEN_BYTES",
    "MAX_SHARE_VERSION",
    "SHARE_VERSION_ZERO",
    "SUPPORTED_SHARE_VERSIONS",
    "DEFAULT_SHARE_VERSION",
    "NAMESPACE_VERSION_SIZE",
    "NAMESPACE_ID_SIZE",
    "NAMESPACE_SIZE",
    "NAMESPACE_VERSION_ZERO",
    "NAMESPACE_VERSION_MAX",
    "NAMESPACE_VERSION_ZERO_PREFIX_SIZE",
    "NAMESPACE_VERSION_ZERO_ID_SIZE",
    "NAMESPACE_VERSION_ZERO_PREFIX",
    "SUPPORTED_BLOB_NAMESPACE_VERSIONS",
    "FIRST_SPARSE_SHARE_CONTENT_SIZE",
    "CONTINUATION_SPARSE_SHARE_CONTENT_SIZE",
    "HASH_LENGTH",
    "SQUARE_SIZE_UPPER_BOUND",
    "DEFAULT_MAX_SQUARE_SIZE",
    "DEFAULT_SUBTREE_ROOT_THRESHOLD",
]
