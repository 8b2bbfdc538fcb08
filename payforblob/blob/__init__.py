"""
payforblob • Blob package

  • types.py      - Blob dataclass
  • subtree.py    - Merkle Mountain Range sizing and the subtree width rule
  • commitment.py - share commitments (single and batched)
  • validate.py   - stateless blob checks

Only light re-exports live here; import concrete modules for the rest.
"""

from __future__ import annotations

from .commitment import create_commitment, create_commitments
from .subtree import merkle_mountain_range_sizes, subtree_width
from .types import Blob
from .validate import validate_blob, validate_blobs

__all__ = [
    "Blob",
    "create_commitment",
    "create_commitments",
    "merkle_mountain_range_sizes",
    "subtree_width",
    "validate_blob",
    "validate_blobs",
]
