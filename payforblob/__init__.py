"""
payforblob - blob share commitments and pay-for-blobs messages.

Public responsibilities:
- Split blobs into namespaced shares and compute their share commitments.
- Validate blobs and build / validate MsgPayForBlobs.
- Encode messages as canonical CBOR and derive their sign bytes.

The subpackages (`nmt`, `shares`, `blob`, `msg`) hold the implementation; the
most common entry points are re-exported here.
"""

from __future__ import annotations

from .version import __version__, get_version
from .blob.commitment import create_commitment, create_commitments
from .blob.types import Blob
from .blob.validate import validate_blob, validate_blobs
from .errors import BlobError
from .msg.pay_for_blobs import MsgPayForBlobs, new_msg_pay_for_blobs
from .nmt.namespace import Namespace

__all__ = [
    "__version__",
    "get_version",
    "Blob",
    "BlobError",
    "MsgPayForBlobs",
    "Namespace",
    "create_commitment",
    "create_commitments",
    "new_msg_pay_for_blobs",
    "validate_blob",
    "validate_blobs",
]
