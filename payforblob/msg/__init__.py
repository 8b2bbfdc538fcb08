"""
payforblob • Messages

  • address.py       - bech32 account addresses
  • pay_for_blobs.py - MsgPayForBlobs, validate_basic, construction
  • encoding.py      - canonical CBOR codec and sign bytes
"""

from __future__ import annotations

from .address import decode_address, encode_address, validate_address
from .encoding import decode_msg, encode_msg, sign_bytes
from .pay_for_blobs import TYPE_URL, MsgPayForBlobs, extract_blob_components, new_msg_pay_for_blobs

__all__ = [
    "TYPE_URL",
    "MsgPayForBlobs",
    "new_msg_pay_for_blobs",
    "extract_blob_components",
    "encode_address",
    "decode_address",
    "validate_address",
    "encode_msg",
    "decode_msg",
    "sign_bytes",
]
