"""
payforblob utilities.

Small, dependency-free helpers shared by the rest of the package:

  • bytes.py  : hex and bytes-like coercion helpers
  • hash.py   : SHA-256 wrappers and RFC 6962 leaf/inner hashes
  • merkle.py : generic Merkle root and inclusion proofs with a pluggable hasher
"""

from __future__ import annotations

from .bytes import bytes_to_hex, hex_to_bytes, to_bytes
from .hash import sha256
from .merkle import RFC6962, Proof, build_proof, merkle_root, verify_proof

__all__ = [
    "bytes_to_hex",
    "hex_to_bytes",
    "to_bytes",
    "sha256",
    "RFC6962",
    "Proof",
    "build_proof",
    "merkle_root",
    "verify_proof",
]
