"""
payforblob • Shares - blob splitting

    split_shares(namespace_version, namespace_id, share_version, data) -> [Share]
    sparse_shares_needed(data_length) -> int
"""

from __future__ import annotations

from typing import List

from ..nmt.namespace import Namespace
from ..utils.bytes import BytesLike
from .share import Share, sparse_shares_needed
from .versions import ShareVersion


def split_shares(
    namespace_version: int,
    namespace_id: BytesLike,
    share_version: int,
    data: BytesLike,
) -> List[Share]:
    """
    Split one blob into its sparse share sequence.

    Raises:
        UnsupportedShareVersion  for unknown share versions
        InvalidNamespace / InvalidNamespaceVersion for a malformed namespace
    """
    version = ShareVersion.parse(share_version)
    ns = Namespace.new(namespace_version, namespace_id)
    return version.split(ns.to_bytes(), data)


def share_count_for_length(data_length: int) -> int:
    return sparse_shares_needed(data_length)


__all__ = ["split_shares", "sparse_shares_needed", "share_count_for_length"]
