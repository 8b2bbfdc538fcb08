import pytest

from payforblob.constants import (
    CONTINUATION_SPARSE_SHARE_CONTENT_SIZE,
    FIRST_SPARSE_SHARE_CONTENT_SIZE,
    SHARE_SIZE,
)
from payforblob.errors import InvalidNamespace, UnsupportedShareVersion
from payforblob.shares import Share, ShareVersion, sparse_shares_needed, split_shares
from payforblob.shares.share import info_byte

from .helpers import v0_id

NID = v0_id(b"\x01" * 10)
NS = b"\x00" + NID


def test_content_sizes():
    assert FIRST_SPARSE_SHARE_CONTENT_SIZE == 478
    assert CONTINUATION_SPARSE_SHARE_CONTENT_SIZE == 482


@pytest.mark.parametrize(
    "length, expected",
    [(0, 0), (1, 1), (478, 1), (479, 2), (960, 2), (961, 3), (1536, 4), (512 * 128, 136)],
)
def test_sparse_shares_needed(length, expected):
    assert sparse_shares_needed(length) == expected


@pytest.mark.parametrize("length", [1, 100, 478, 479, 960, 961, 1536, 5000])
def test_split_layout(length):
    data = bytes(i % 251 for i in range(length))
    shares = split_shares(0, NID, 0, data)

    assert len(shares) == sparse_shares_needed(length)
    assert all(len(s) == SHARE_SIZE for s in shares)
    assert all(s.namespace == NS for s in shares)
    assert all(s.version == 0 for s in shares)

    first, rest = shares[0], shares[1:]
    assert first.is_sequence_start and first.sequence_len == length
    assert not any(s.is_sequence_start for s in rest)

    # concatenated content, minus padding, is the original data
    joined = b"".join(s.content for s in shares)
    assert joined[:length] == data
    assert set(joined[length:]) <= {0}


def test_first_share_bytes():
    s = split_shares(0, NID, 0, b"\xaa\xbb")[0]
    raw = s.to_bytes()
    assert raw[:29] == NS
    assert raw[29] == 0b0000_0001
    assert raw[30:34] == (2).to_bytes(4, "big")
    assert raw[34:36] == b"\xaa\xbb"
    assert raw[36:] == b"\x00" * (SHARE_SIZE - 36)


def test_continuation_share_bytes():
    shares = split_shares(0, NID, 0, b"\x11" * 479)
    raw = shares[1].to_bytes()
    assert raw[29] == 0
    assert raw[30] == 0x11 and raw[31] == 0
    with pytest.raises(ValueError):
        shares[1].sequence_len


def test_info_byte():
    assert info_byte(0, True) == 1
    assert info_byte(1, False) == 2
    assert info_byte(127, True) == 255
    with pytest.raises(ValueError):
        info_byte(128, False)


def test_empty_data_has_no_shares():
    assert split_shares(0, NID, 0, b"") == []


def test_unsupported_share_version():
    with pytest.raises(UnsupportedShareVersion):
        split_shares(0, NID, 1, b"x")


def test_bad_namespace():
    with pytest.raises(InvalidNamespace):
        split_shares(0, b"\x01" * 28, 0, b"x")


def test_share_version_parse():
    assert ShareVersion.parse(0) is ShareVersion.V0
    with pytest.raises(UnsupportedShareVersion) as ei:
        ShareVersion.parse(7)
    assert ei.value.data["supported"] == [0]


def test_share_requires_exact_size():
    with pytest.raises(ValueError):
        Share(b"\x00" * 511)
