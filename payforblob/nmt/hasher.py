"""
payforblob • NMT - Namespaced hasher

Canonical hashing rules for leaves and inner nodes of a Namespaced Merkle
Tree. Every node is the concatenation of the namespace range it covers and
a SHA-256 digest:

    node = ns_min (29) || ns_max (29) || digest (32)        # 90 bytes

Hashing domains
---------------
  • Leaf (input is `ns || share`, i.e. the share's namespace prepended):
        ns || ns || SHA-256(0x00 || ns || share)

  • Inner node:
        ns_min || ns_max || SHA-256(0x01 || left || right)
    where
        ns_min = min(left.min, right.min)
        ns_max = max(left.max, right.max), except that the parity-share
                 namespace (0xFF * 29) is ignored when computing the max:
                   - left.min  == MAX_NAMESPACE → ns_max = MAX_NAMESPACE
                   - right.min == MAX_NAMESPACE → ns_max = left.max

The hasher plugs into `payforblob.utils.merkle.merkle_root`.
"""

from __future__ import annotations

from typing import Tuple

from ..constants import NAMESPACE_SIZE
from ..utils.bytes import BytesLike, bytes_to_hex, to_bytes
from ..utils.hash import DIGEST_SIZE, LEAF_PREFIX, NODE_PREFIX, sha256

#: Largest possible namespace (parity shares).
MAX_NAMESPACE = b"\xff" * NAMESPACE_SIZE

#: Byte length of every node produced by the hasher.
NODE_SIZE = 2 * NAMESPACE_SIZE + DIGEST_SIZE


class NMTNodeError(ValueError):
    """Raised for malformed leaf or node inputs."""


class NmtHasher:
    """
    SHA-256 namespaced hasher with the "ignore max namespace" rule.
    """

    def __init__(self, namespace_size: int = NAMESPACE_SIZE, ignore_max_namespace: bool = True) -> None:
        self.namespace_size = int(namespace_size)
        self.ignore_max_namespace = bool(ignore_max_namespace)
        self._max_ns = b"\xff" * self.namespace_size
        self.size = 2 * self.namespace_size + DIGEST_SIZE

    def hash_leaf(self, ndata: BytesLike) -> bytes:
        """Hash `ns || data` into `ns || ns || SHA-256(0x00 || ns || data)`."""
        b = to_bytes(ndata)
        if len(b) < self.namespace_size:
            raise NMTNodeError(
                f"leaf must carry a {self.namespace_size}-byte namespace prefix, got {len(b)} bytes"
            )
        ns = b[: self.namespace_size]
        return ns + ns + sha256(LEAF_PREFIX + b)

    def hash_node(self, left: bytes, right: bytes) -> bytes:
        l_min, l_max = self._range_of(left, where="left")
        r_min, r_max = self._range_of(right, where="right")
        if r_min < l_max:
            raise NMTNodeError("children are not ordered by namespace")

        ns_min = min(l_min, r_min)
        if self.ignore_max_namespace and l_min == self._max_ns:
            ns_max = self._max_ns
        elif self.ignore_max_namespace and r_min == self._max_ns:
            ns_max = l_max
        else:
            ns_max = max(l_max, r_max)

        return ns_min + ns_max + sha256(NODE_PREFIX + left + right)

    def _range_of(self, node: bytes, *, where: str) -> Tuple[bytes, bytes]:
        if len(node) != self.size:
            raise NMTNodeError(f"{where} node must be {self.size} bytes, got {len(node)}")
        n = self.namespace_size
        return node[:n], node[n : 2 * n]


def node_range(node: bytes, namespace_size: int = NAMESPACE_SIZE) -> Tuple[bytes, bytes]:
    """Return (ns_min, ns_max) of a serialized node."""
    return node[:namespace_size], node[namespace_size : 2 * namespace_size]


def node_digest(node: bytes, namespace_size: int = NAMESPACE_SIZE) -> bytes:
    return node[2 * namespace_size :]


def describe_node(node: bytes) -> str:
    lo, hi = node_range(node)
    return f"Node(min={bytes_to_hex(lo)}, max={bytes_to_hex(hi)}, digest={bytes_to_hex(node_digest(node))[:10]}…)"


#: Default hasher used by subtree roots.
DEFAULT_HASHER = NmtHasher()


__all__ = [
    "MAX_NAMESPACE",
    "NODE_SIZE",
    "NMTNodeError",
    "NmtHasher",
    "DEFAULT_HASHER",
    "node_range",
    "node_digest",
    "describe_node",
]
