"""
payforblob • NMT - Incremental tree builder

A small Namespaced Merkle Tree with a *push → root* workflow:

    t = NamespacedMerkleTree()
    for share in shares:
        t.push(ns_bytes + share)
    root = t.root()               # 90-byte node: min ns || max ns || digest

Leaves are pushed as `namespace || payload` and must arrive in
non-decreasing namespace order. The tree shape is the RFC 6962 split
(largest power of two below n) used by `payforblob.utils.merkle`, so a
subtree of a power-of-two number of shares is a perfect tree.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..utils.bytes import BytesLike, to_bytes
from ..utils.merkle import Proof, build_proof, merkle_root, verify_proof
from .hasher import DEFAULT_HASHER, NMTNodeError, NmtHasher


@dataclass(frozen=True)
class TreeStats:
    leaves: int
    min_namespace: bytes
    max_namespace: bytes


class NamespacedMerkleTree:
    """
    Append-only NMT builder. `root()` may be called any number of times; the
    result is cached until the next push.
    """

    def __init__(self, hasher: Optional[NmtHasher] = None) -> None:
        self._hasher = hasher or DEFAULT_HASHER
        self._leaves: List[bytes] = []
        self._root: Optional[bytes] = None

    @property
    def namespace_size(self) -> int:
        return self._hasher.namespace_size

    def push(self, namespaced_data: BytesLike) -> int:
        """
        Append a leaf of the form `namespace || data`. Returns its index.

        Raises:
            NMTNodeError if the leaf is shorter than a namespace or its
            namespace sorts below the previous leaf's.
        """
        b = to_bytes(namespaced_data)
        n = self.namespace_size
        if len(b) < n:
            raise NMTNodeError(f"leaf must start with a {n}-byte namespace")
        if self._leaves and b[:n] < self._leaves[-1][:n]:
            raise NMTNodeError("leaves must be pushed in non-decreasing namespace order")
        self._leaves.append(b)
        self._root = None
        return len(self._leaves) - 1

    def extend(self, leaves: Sequence[BytesLike]) -> None:
        for leaf in leaves:
            self.push(leaf)

    def __len__(self) -> int:
        return len(self._leaves)

    def root(self) -> bytes:
        """
        Namespaced root over all pushed leaves.

        Raises:
            EmptyInput if nothing was pushed.
        """
        if self._root is None:
            self._root = merkle_root(self._leaves, hasher=self._hasher)
        return self._root

    def prove(self, index: int) -> Proof:
        """Inclusion proof for leaf `index`."""
        return build_proof(self._leaves, index, hasher=self._hasher)

    def verify(self, proof: Proof, leaf: BytesLike) -> bool:
        return verify_proof(proof, self.root(), leaf, hasher=self._hasher)

    def stats(self) -> TreeStats:
        r = self.root()
        n = self.namespace_size
        return TreeStats(leaves=len(self._leaves), min_namespace=r[:n], max_namespace=r[n : 2 * n])


def nmt_root(namespace: BytesLike, payloads: Sequence[BytesLike], hasher: Optional[NmtHasher] = None) -> bytes:
    """
    Root of a tree whose leaves are `payloads`, all under one `namespace`.
    """
    ns = to_bytes(namespace)
    t = NamespacedMerkleTree(hasher)
    for p in payloads:
        t.push(ns + to_bytes(p))
    return t.root()


__all__ = ["TreeStats", "NamespacedMerkleTree", "nmt_root"]
