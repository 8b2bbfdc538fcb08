"""
payforblob - Namespaced Merkle Tree (NMT)

This subpackage holds everything namespace-aware:

  • namespace.py : Namespace type, wire encoding and the reserved table
  • hasher.py    : Namespaced SHA-256 hasher (leaf/inner rules, ignore-max-ns)
  • tree.py      : Incremental tree builder producing 90-byte namespaced roots

Typical usage
-------------
    from payforblob.nmt import namespace, tree

    ns = namespace.Namespace.new_v0(b"\\x01" * 10)
    t = tree.NamespacedMerkleTree()
    t.push(ns.to_bytes() + share)
    root = t.root()

This package lazily loads its submodules to keep imports lightweight.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any

_SUBMODULES = (
    "namespace",
    "hasher",
    "tree",
)


def __getattr__(name: str) -> Any:
    """
    Lazily resolve well-known submodules, e.g. `payforblob.nmt.tree`.
    """
    if name in _SUBMODULES:
        return import_module(f"{__name__}.{name}")
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(_SUBMODULES))


__all__ = list(_SUBMODULES)
