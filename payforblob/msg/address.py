"""
Bech32 account addresses (celestia1…)
=====================================

Classic BIP-0173 Bech32 plus the account-address wrapper used for the
`signer` of a MsgPayForBlobs:

- HRP: configured, "celestia" by default
- Checksum: Bech32 (constant 1); Bech32m strings fail the checksum
- Payload: 20-byte account or 32-byte module account, regrouped 8→5 bits
- Length: 8..90 characters in total

Usage
-----
    addr = encode_address(account_bytes)         # "celestia1..."
    account = decode_address(addr)               # original bytes
    hrp, words = bech32_decode(addr)             # low-level

`validate_address` is what message validation calls; it raises
`InvalidAddress` rather than `Bech32Error`.

References
----------
BIP-0173: https://github.com/bitcoin/bips/blob/master/bip-0173.mediawiki
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

from ..config import get_config
from ..errors import InvalidAddress

CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"
_CHARSET_INDEX = {c: i for i, c in enumerate(CHARSET)}

_GENERATORS = (0x3B6A57B2, 0x26508E6D, 0x1EA119FA, 0x3D4233DD, 0x2A1462B3)
_CHECKSUM_LEN = 6

MIN_LENGTH = 8
MAX_LENGTH = 90

#: Accepted account payload lengths (secp256k1 accounts, module accounts).
ADDRESS_LENGTHS: Tuple[int, ...] = (20, 32)


class Bech32Error(ValueError):
    pass


# ---------------------------------------------------------------------------
# Checksum
# ---------------------------------------------------------------------------


def _polymod(words: Iterable[int]) -> int:
    chk = 1
    for w in words:
        top = chk >> 25
        chk = ((chk & 0x1FFFFFF) << 5) ^ w
        for i, g in enumerate(_GENERATORS):
            if (top >> i) & 1:
                chk ^= g
    return chk


def _checksum_input(hrp: str, words: Sequence[int]) -> List[int]:
    high = [ord(c) >> 5 for c in hrp]
    low = [ord(c) & 31 for c in hrp]
    return high + [0] + low + list(words)


def _checksum(hrp: str, words: Sequence[int]) -> List[int]:
    pm = _polymod(_checksum_input(hrp, words) + [0] * _CHECKSUM_LEN) ^ 1
    return [(pm >> (5 * (_CHECKSUM_LEN - 1 - i))) & 31 for i in range(_CHECKSUM_LEN)]


def _check_hrp(hrp: str) -> None:
    if not hrp or any(not 33 <= ord(c) <= 126 for c in hrp):
        raise Bech32Error("invalid HRP characters")


# ---------------------------------------------------------------------------
# Encode / decode
# ---------------------------------------------------------------------------


def bech32_encode(hrp: str, words: Sequence[int]) -> str:
    """Encode HRP + 5-bit words as a lowercase Bech32 string."""
    _check_hrp(hrp)
    if any(not 0 <= w <= 31 for w in words):
        raise Bech32Error("data values must be 5-bit (0..31)")
    hrp = hrp.lower()
    return f"{hrp}1" + "".join(CHARSET[w] for w in list(words) + _checksum(hrp, words))


def bech32_decode(bech: str) -> Tuple[str, List[int]]:
    """
    Decode a Bech32 string into (hrp, words), checksum stripped.

    Raises Bech32Error on any malformed input: wrong type, length outside
    8..90, mixed case, missing separator, bad characters or a checksum
    that is not Bech32.
    """
    if not isinstance(bech, str):
        raise Bech32Error("bech32 input must be a string")
    if not MIN_LENGTH <= len(bech) <= MAX_LENGTH:
        raise Bech32Error(f"bech32 string length must be {MIN_LENGTH}..{MAX_LENGTH}, got {len(bech)}")
    if bech != bech.lower() and bech != bech.upper():
        raise Bech32Error("mixed-case bech32 is invalid")
    bech = bech.lower()

    sep = bech.rfind("1")
    if sep < 1 or sep + 1 + _CHECKSUM_LEN > len(bech):
        raise Bech32Error("invalid position of separator '1'")
    hrp, tail = bech[:sep], bech[sep + 1 :]
    _check_hrp(hrp)

    words = [_CHARSET_INDEX.get(c, -1) for c in tail]
    if -1 in words:
        raise Bech32Error("invalid data character in bech32 string")
    if _polymod(_checksum_input(hrp, words)) != 1:
        raise Bech32Error("checksum mismatch")
    return hrp, words[:-_CHECKSUM_LEN]


def convertbits(data: Iterable[int], from_bits: int, to_bits: int, pad: bool = True) -> List[int]:
    """
    Regroup a stream of `from_bits`-wide values into `to_bits`-wide values.

    With pad=False any leftover bits must be zero and shorter than
    `from_bits` (strict decode).
    """
    acc = bits = 0
    out: List[int] = []
    mask = (1 << to_bits) - 1
    for value in data:
        if value < 0 or value >> from_bits:
            raise Bech32Error("invalid value for convertbits")
        acc = (acc << from_bits) | value
        bits += from_bits
        while bits >= to_bits:
            bits -= to_bits
            out.append((acc >> bits) & mask)
        acc &= (1 << bits) - 1

    if pad:
        if bits:
            out.append((acc << (to_bits - bits)) & mask)
    elif bits >= from_bits or acc:
        raise Bech32Error("invalid padding")
    return out


# ---------------------------------------------------------------------------
# Account addresses
# ---------------------------------------------------------------------------


def encode_address(account: bytes, hrp: Optional[str] = None) -> str:
    """Encode raw account bytes as a bech32 address."""
    if not isinstance(account, (bytes, bytearray, memoryview)):
        raise Bech32Error("account must be bytes-like")
    return bech32_encode(hrp or get_config().address.hrp, convertbits(bytes(account), 8, 5))


def decode_address(addr: str, expected_hrp: Optional[str] = None) -> bytes:
    """
    Decode a bech32 account address back to its bytes, enforcing the
    expected HRP (configured by default) and a 20- or 32-byte payload.
    """
    hrp, words = bech32_decode(addr)
    want = expected_hrp or get_config().address.hrp
    if hrp != want:
        raise Bech32Error(f"unexpected HRP: {hrp} (expected {want})")
    account = bytes(convertbits(words, 5, 8, pad=False))
    if len(account) not in ADDRESS_LENGTHS:
        raise Bech32Error(f"account must be one of {ADDRESS_LENGTHS} bytes, got {len(account)}")
    return account


def validate_address(addr: str, expected_hrp: Optional[str] = None) -> bytes:
    """`decode_address`, reporting failures as InvalidAddress."""
    try:
        return decode_address(addr, expected_hrp)
    except Bech32Error as e:
        raise InvalidAddress(f"invalid signer address: {e}", data={"signer": str(addr)}) from e


__all__ = [
    "CHARSET",
    "MIN_LENGTH",
    "MAX_LENGTH",
    "ADDRESS_LENGTHS",
    "Bech32Error",
    "bech32_encode",
    "bech32_decode",
    "convertbits",
    "encode_address",
    "decode_address",
    "validate_address",
]
