import pytest

from payforblob.errors import InvalidNamespace, InvalidNamespaceVersion
from payforblob.nmt.namespace import (
    INTERMEDIATE_STATE_ROOTS_NAMESPACE,
    MAX_PRIMARY_RESERVED_NAMESPACE,
    MIN_SECONDARY_RESERVED_NAMESPACE,
    PARITY_SHARES_NAMESPACE,
    PAY_FOR_BLOB_NAMESPACE,
    RESERVED_NAMESPACES,
    TAIL_PADDING_NAMESPACE,
    TX_NAMESPACE,
    Namespace,
    decode_namespace,
    encode_namespace,
    is_reserved,
)

from .helpers import v0_id

# ---------------------------
# Encoding
# ---------------------------


def test_encode_decode_round_trip():
    nid = v0_id(b"\x01" * 10)
    raw = encode_namespace(0, nid)
    assert len(raw) == 29
    assert raw[0] == 0 and raw[1:] == nid
    assert decode_namespace(raw) == (0, nid)


def test_new_v0_pads_short_sub_ids():
    ns = Namespace.new_v0(b"\xab")
    assert ns.version == 0
    assert ns.id == b"\x00" * 27 + b"\xab"


def test_new_v0_rejects_long_sub_ids():
    with pytest.raises(InvalidNamespace):
        Namespace.new_v0(b"\x01" * 11)


@pytest.mark.parametrize("length", [0, 28, 30])
def test_decode_wrong_length(length):
    with pytest.raises(InvalidNamespace):
        decode_namespace(b"\x00" * length)


def test_decode_unknown_version():
    with pytest.raises(InvalidNamespaceVersion):
        decode_namespace(b"\x01" + v0_id(b"\x01"))


def test_v0_requires_zero_prefix():
    with pytest.raises(InvalidNamespace):
        Namespace.new(0, b"\x01" * 28)


def test_version_255_accepts_any_id():
    ns = Namespace.new(255, b"\x42" * 28)
    assert ns.to_bytes() == b"\xff" + b"\x42" * 28


def test_ordering_follows_encoded_bytes():
    a = Namespace.new_v0(b"\x01")
    b = Namespace.new_v0(b"\x02")
    c = Namespace.new(255, b"\x00" * 28)
    assert sorted([c, b, a]) == [a, b, c]
    assert a <= a and a < b


# ---------------------------
# Reserved table
# ---------------------------


def test_reserved_constants():
    assert TX_NAMESPACE.to_bytes() == b"\x00" * 28 + b"\x01"
    assert INTERMEDIATE_STATE_ROOTS_NAMESPACE.to_bytes() == b"\x00" * 28 + b"\x02"
    assert PAY_FOR_BLOB_NAMESPACE.to_bytes() == b"\x00" * 28 + b"\x04"
    assert MAX_PRIMARY_RESERVED_NAMESPACE.to_bytes() == b"\x00" * 28 + b"\xff"
    assert MIN_SECONDARY_RESERVED_NAMESPACE.to_bytes() == b"\xff" * 28 + b"\x00"
    assert TAIL_PADDING_NAMESPACE.to_bytes() == b"\xff" * 28 + b"\xfe"
    assert PARITY_SHARES_NAMESPACE.to_bytes() == b"\xff" * 29


def test_every_table_entry_is_reserved():
    for name, ns in RESERVED_NAMESPACES.items():
        assert ns.is_reserved, name
        assert is_reserved(ns.version, ns.id), name


def test_reserved_table_is_read_only():
    with pytest.raises(TypeError):
        RESERVED_NAMESPACES["tx"] = Namespace.new_v0(b"\x09")  # type: ignore[index]


@pytest.mark.parametrize(
    "version, nid, reserved",
    [
        (0, v0_id(b"\x00"), True),
        (0, v0_id(b"\x03"), True),
        (0, v0_id(b"\xff"), True),
        (0, v0_id(b"\x01\x00"), False),
        (0, v0_id(b"\x01" * 10), False),
        (255, b"\xff" * 27 + b"\x00", True),
        (255, b"\xff" * 26 + b"\xfe\xff", False),
    ],
)
def test_is_reserved_ranges(version, nid, reserved):
    assert is_reserved(version, nid) is reserved
    assert Namespace.new(version, nid).is_reserved is reserved


def test_flags():
    assert PARITY_SHARES_NAMESPACE.is_parity_shares
    assert TAIL_PADDING_NAMESPACE.is_tail_padding
    assert Namespace.new_v0(b"\x01" * 10).is_supported_blob_version
    assert not TAIL_PADDING_NAMESPACE.is_supported_blob_version
