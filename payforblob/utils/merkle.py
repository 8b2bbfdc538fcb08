"""
payforblob utilities - Generic Merkle helpers

Binary Merkle trees over an ordered list of byte strings with a pluggable
hasher. Nothing here knows about blobs or namespaces; the same code roots
the shares of one subtree (with `payforblob.nmt.hasher.NmtHasher`) and the
list of subtree roots of a commitment (with `Rfc6962Hasher`).

Tree shape
----------
A range of n > 1 leaves is split at k, the largest power of two strictly
less than n; the left child covers the first k leaves and the right child
the remaining n - k. There is no odd-node duplication, so the root over a
power-of-two number of leaves is a perfect tree and other sizes are
unbalanced on the right (RFC 6962 §2.1).

Key functions
-------------
- merkle_root(leaves, *, hasher)
- build_proof(leaves, index, *, hasher) -> Proof
- verify_proof(proof, root, leaf, *, hasher)

A *proof* carries the sibling hashes ("aunts") ordered from the leaf level
up to the level just below the root.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from ..errors import EmptyInput
from . import hash as _h
from .bytes import BytesLike, to_bytes

Hash = bytes


# --------------------------------------------------------------------------- #
# Hashers
# --------------------------------------------------------------------------- #

class Rfc6962Hasher:
    """
    Plain domain-separated SHA-256 hasher:

        leaf  = SHA-256(0x00 || data)
        inner = SHA-256(0x01 || left || right)
    """

    size = _h.DIGEST_SIZE

    def hash_leaf(self, data: BytesLike) -> Hash:
        return _h.leaf_hash(data)

    def hash_node(self, left: Hash, right: Hash) -> Hash:
        return _h.inner_hash(left, right)


#: Shared stateless instance.
RFC6962 = Rfc6962Hasher()


# --------------------------------------------------------------------------- #
# Root
# --------------------------------------------------------------------------- #

def get_split_point(length: int) -> int:
    """Largest power of two strictly less than `length` (length >= 2)."""
    if length < 1:
        raise ValueError("trying to split a tree with size < 1")
    k = 1 << (length.bit_length() - 1)
    if k == length:
        k >>= 1
    return k


def merkle_root(leaves: Sequence[BytesLike], *, hasher=RFC6962) -> Hash:
    """
    Compute the Merkle root over `leaves` (raw, un-hashed leaf data).

    Raises:
        EmptyInput if `leaves` is empty.
    """
    if len(leaves) == 0:
        raise EmptyInput("cannot compute a Merkle root over zero leaves")
    hashes = [hasher.hash_leaf(to_bytes(x)) for x in leaves]
    return _root_of(hashes, 0, len(hashes), hasher)


def _root_of(hashes: List[Hash], lo: int, hi: int, hasher) -> Hash:
    n = hi - lo
    if n == 1:
        return hashes[lo]
    k = get_split_point(n)
    left = _root_of(hashes, lo, lo + k, hasher)
    right = _root_of(hashes, lo + k, hi, hasher)
    return hasher.hash_node(left, right)


# --------------------------------------------------------------------------- #
# Inclusion proofs
# --------------------------------------------------------------------------- #

@dataclass(frozen=True)
class Proof:
    """
    Inclusion proof for leaf `index` of a tree with `total` leaves.

    leaf_hash: hash of the proven leaf.
    aunts:     sibling hashes, leaf level first.
    """
    index: int
    total: int
    leaf_hash: Hash
    aunts: Tuple[Hash, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.total <= 0:
            raise ValueError("Proof.total must be positive")
        if not (0 <= self.index < self.total):
            raise ValueError("Proof.index out of range")

    def compute_root(self, *, hasher=RFC6962) -> Hash:
        return _root_from_aunts(self.index, self.total, self.leaf_hash, list(self.aunts), hasher)


def build_proof(leaves: Sequence[BytesLike], index: int, *, hasher=RFC6962) -> Proof:
    """
    Build an inclusion proof for `leaves[index]`.
    """
    n = len(leaves)
    if n == 0:
        raise EmptyInput("cannot build a proof over zero leaves")
    if not (0 <= index < n):
        raise IndexError("index out of range")
    hashes = [hasher.hash_leaf(to_bytes(x)) for x in leaves]
    _, aunts = _path_of(hashes, 0, n, index, hasher)
    return Proof(index=index, total=n, leaf_hash=hashes[index], aunts=tuple(aunts))


def _path_of(
    hashes: List[Hash], lo: int, hi: int, index: int, hasher
) -> Tuple[Hash, List[Hash]]:
    n = hi - lo
    if n == 1:
        return hashes[lo], []
    k = get_split_point(n)
    if index < k:
        left, aunts = _path_of(hashes, lo, lo + k, index, hasher)
        right = _root_of(hashes, lo + k, hi, hasher)
        aunts.append(right)
    else:
        left = _root_of(hashes, lo, lo + k, hasher)
        right, aunts = _path_of(hashes, lo + k, hi, index - k, hasher)
        aunts.append(left)
    return hasher.hash_node(left, right), aunts


def _root_from_aunts(
    index: int, total: int, leaf_hash: Hash, aunts: List[Hash], hasher
) -> Hash:
    if total == 1:
        if aunts:
            raise ValueError("unexpected aunts for a single-leaf tree")
        return leaf_hash
    if not aunts:
        raise ValueError("proof is missing aunts")
    k = get_split_point(total)
    if index < k:
        left = _root_from_aunts(index, k, leaf_hash, aunts[:-1], hasher)
        return hasher.hash_node(left, aunts[-1])
    right = _root_from_aunts(index - k, total - k, leaf_hash, aunts[:-1], hasher)
    return hasher.hash_node(aunts[-1], right)


def verify_proof(proof: Proof, root: Hash, leaf: BytesLike, *, hasher=RFC6962) -> bool:
    """
    Return True if `leaf` is committed at `proof.index` under `root`.
    """
    if hasher.hash_leaf(to_bytes(leaf)) != proof.leaf_hash:
        return False
    try:
        return proof.compute_root(hasher=hasher) == root
    except ValueError:
        return False


__all__ = [
    "Hash",
    "Rfc6962Hasher",
    "RFC6962",
    "get_split_point",
    "merkle_root",
    "Proof",
    "build_proof",
    "verify_proof",
]
