from __future__ import annotations

"""
payforblob • Message Encoding
=============================

Canonical CBOR codec for MsgPayForBlobs (via `cbor2`).

Frame shape
-----------
A single top-level map:

  { "v": <int codec version>,
    "t": <str type URL>,
    "p": { "signer": str,
           "namespaces": [bytes],
           "blobSizes": [int],
           "shareCommitments": [bytes],
           "shareVersions": [int] } }

Sign bytes
----------
The bytes a wallet signs bind the payload to a chain:

  canonical_cbor({1: "payforblob/msg/sign/v1", 2: chain_id, 3: encode_msg(msg)})

Determinism
-----------
Canonical CBOR (sorted map keys, shortest integer forms) guarantees stable
bytes for the same message across processes and platforms.
"""

from typing import Any, Dict

import cbor2

from ..errors import DecodeError
from .pay_for_blobs import TYPE_URL, MsgPayForBlobs

CODEC_VERSION = 1
SIGN_DOMAIN = "payforblob/msg/sign/v1"


def _dumps(obj: Any) -> bytes:
    return cbor2.dumps(obj, canonical=True)


def _to_payload(msg: MsgPayForBlobs) -> Dict[str, Any]:
    return {
        "signer": msg.signer,
        "namespaces": [bytes(n) for n in msg.namespaces],
        "blobSizes": [int(s) for s in msg.blob_sizes],
        "shareCommitments": [bytes(c) for c in msg.share_commitments],
        "shareVersions": [int(v) for v in msg.share_versions],
    }


def _from_payload(p: Dict[str, Any]) -> MsgPayForBlobs:
    signer = p["signer"]
    if not isinstance(signer, str):
        raise TypeError("signer must be a text string")
    for key in ("namespaces", "shareCommitments"):
        if not all(isinstance(x, bytes) for x in p[key]):
            raise TypeError(f"{key} must be a list of byte strings")
    for key in ("blobSizes", "shareVersions"):
        if not all(isinstance(x, int) and not isinstance(x, bool) for x in p[key]):
            raise TypeError(f"{key} must be a list of integers")
    return MsgPayForBlobs(
        signer=signer,
        namespaces=tuple(p["namespaces"]),
        blob_sizes=tuple(p["blobSizes"]),
        share_commitments=tuple(p["shareCommitments"]),
        share_versions=tuple(p["shareVersions"]),
    )


def encode_msg(msg: MsgPayForBlobs) -> bytes:
    """Canonical CBOR bytes of `msg`."""
    return _dumps({"v": CODEC_VERSION, "t": TYPE_URL, "p": _to_payload(msg)})


def decode_msg(buf: bytes) -> MsgPayForBlobs:
    """
    Inverse of `encode_msg`. Does not run `validate_basic`.

    Raises DecodeError on malformed bytes, an unknown codec version or type,
    or fields of the wrong shape.
    """
    try:
        frame = cbor2.loads(bytes(buf))
    except (cbor2.CBORDecodeError, TypeError, ValueError) as e:
        raise DecodeError(f"malformed CBOR: {e}") from e

    if not isinstance(frame, dict):
        raise DecodeError("message frame must be a map")
    if frame.get("v") != CODEC_VERSION:
        raise DecodeError(f"unsupported codec version {frame.get('v')!r}")
    if frame.get("t") != TYPE_URL:
        raise DecodeError(f"unexpected message type {frame.get('t')!r}")
    payload = frame.get("p")
    if not isinstance(payload, dict):
        raise DecodeError("message payload must be a map")

    try:
        return _from_payload(payload)
    except (KeyError, TypeError) as e:
        raise DecodeError(f"malformed message payload: {e}") from e


def sign_bytes(msg: MsgPayForBlobs, chain_id: str) -> bytes:
    """Domain-separated bytes to sign for `msg` on `chain_id`."""
    if not isinstance(chain_id, str) or not chain_id:
        raise ValueError("chain_id must be a non-empty string")
    return _dumps({1: SIGN_DOMAIN, 2: chain_id, 3: encode_msg(msg)})


__all__ = ["CODEC_VERSION", "SIGN_DOMAIN", "encode_msg", "decode_msg", "sign_bytes"]
