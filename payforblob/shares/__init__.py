"""
payforblob - Shares

  • share.py    : Share type and the version-0 sparse layout
  • versions.py : ShareVersion enum with per-version splitters
  • split.py    : split_shares / sparse_shares_needed
"""

from __future__ import annotations

from .share import Share, sparse_shares_needed
from .split import split_shares
from .versions import ShareVersion

__all__ = ["Share", "ShareVersion", "split_shares", "sparse_shares_needed"]
