"""
payforblob • Blob Commitment

Compute the share commitment of a blob: the RFC 6962 Merkle root over the
namespaced subtree roots of its shares.

Pipeline
--------
    blob ──split──▶ shares ──MMR sizes──▶ groups ──NMT──▶ subtree roots ──RFC6962──▶ commitment

1. Split the blob into sparse shares (`payforblob.shares`).
2. Derive the maximum subtree width (`payforblob.blob.subtree.subtree_width`,
   capped by the configured maximum square size) unless the caller passes one.
3. Partition the shares into `merkle_mountain_range_sizes(n, width)` groups.
4. Root each group with a Namespaced Merkle Tree (leaves are `ns || share`).
5. Merkle-root the list of subtree roots.

The result depends only on (namespace, share version, data, width). Any
change to the share layout or hasher domains changes every commitment.

API
---
- create_commitment(blob, *, subtree_width=None, subtree_root_threshold=None) -> bytes
- create_commitments(blobs, *, workers=None, ...) -> list[bytes]
- subtree_roots(blob, *, subtree_width=None, ...) -> list[bytes]
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence

from ..config import get_config
from ..errors import EmptyBlob
from ..logging import get_logger
from ..nmt.tree import nmt_root
from ..shares.versions import ShareVersion
from ..utils.merkle import merkle_root
from . import subtree as _st
from .types import Blob

log = get_logger(__name__)


def _max_width(share_count: int, subtree_root_threshold: Optional[int]) -> int:
    cfg = get_config().square
    threshold = cfg.subtree_root_threshold if subtree_root_threshold is None else subtree_root_threshold
    return min(_st.subtree_width(share_count, threshold), cfg.max_square_size)


def subtree_roots(
    blob: Blob,
    *,
    subtree_width: Optional[int] = None,
    subtree_root_threshold: Optional[int] = None,
) -> List[bytes]:
    """
    Namespaced roots of each power-of-two share group of `blob`, in order.

    Raises
    ------
    UnsupportedShareVersion, InvalidNamespace, InvalidNamespaceVersion
        For a blob that cannot be split.
    EmptyBlob
        If the blob has no data.
    InvalidWidth
        If an explicit `subtree_width` is not a positive power of two.
    """
    version = ShareVersion.parse(blob.share_version)
    ns = blob.namespace().to_bytes()
    shares = version.split(ns, blob.data)
    if not shares:
        raise EmptyBlob("cannot commit to a blob with no data")

    n = len(shares)
    width = subtree_width if subtree_width is not None else _max_width(n, subtree_root_threshold)
    sizes = _st.merkle_mountain_range_sizes(n, width)

    roots: List[bytes] = []
    cursor = 0
    for size in sizes:
        group = shares[cursor : cursor + size]
        roots.append(nmt_root(ns, [s.raw for s in group]))
        cursor += size

    log.debug(
        "blob subtree roots computed",
        extra={"namespace": ns.hex(), "shares": n, "width": width, "subtrees": len(sizes)},
    )
    return roots


def create_commitment(
    blob: Blob,
    *,
    subtree_width: Optional[int] = None,
    subtree_root_threshold: Optional[int] = None,
) -> bytes:
    """
    Return the 32-byte share commitment of `blob`.
    """
    roots = subtree_roots(
        blob,
        subtree_width=subtree_width,
        subtree_root_threshold=subtree_root_threshold,
    )
    return merkle_root(roots)


def create_commitments(
    blobs: Sequence[Blob],
    *,
    workers: Optional[int] = None,
    subtree_width: Optional[int] = None,
    subtree_root_threshold: Optional[int] = None,
) -> List[bytes]:
    """
    Commit to each blob, returning commitments in input order.

    With more than one worker the blobs are committed on a thread pool. If
    any blob fails, the error of the first failing blob (in input order) is
    raised and no commitments are returned.
    """
    items = list(blobs)
    n_workers = get_config().batch.workers if workers is None else int(workers)
    if n_workers < 1:
        raise ValueError("workers must be >= 1")

    def one(b: Blob) -> bytes:
        return create_commitment(
            b,
            subtree_width=subtree_width,
            subtree_root_threshold=subtree_root_threshold,
        )

    if n_workers == 1 or len(items) <= 1:
        return [one(b) for b in items]

    with ThreadPoolExecutor(max_workers=min(n_workers, len(items))) as tp:
        futs = [tp.submit(one, b) for b in items]
        out = [f.result() for f in futs]

    log.debug("batch commitments computed", extra={"blobs": len(items), "workers": n_workers})
    return out


__all__ = ["create_commitment", "create_commitments", "subtree_roots"]
