from dataclasses import replace

import pytest
from hypothesis import given, settings, strategies as st

from payforblob.blob.commitment import create_commitment
from payforblob.errors import (
    BlobError,
    EmptyBlob,
    InvalidAddress,
    InvalidNamespace,
    InvalidNamespaceVersion,
    InvalidShareCommitment,
    MismatchedArrayLengths,
    NoBlobs,
    NoBlobSizes,
    NoNamespaces,
    NoShareCommitments,
    NoShareVersions,
    ReservedNamespace,
    UnsupportedShareVersion,
)
from payforblob.msg.pay_for_blobs import (
    TYPE_URL,
    MsgPayForBlobs,
    extract_blob_components,
    new_msg_pay_for_blobs,
)
from payforblob.nmt.namespace import (
    PARITY_SHARES_NAMESPACE,
    PAY_FOR_BLOB_NAMESPACE,
    TAIL_PADDING_NAMESPACE,
    TX_NAMESPACE,
    Namespace,
)

from .helpers import make_blob

# ---------------------------
# Fixtures / helpers
# ---------------------------


@pytest.fixture
def msg(signer):
    return new_msg_pay_for_blobs(signer, make_blob(data=b"\x01" * 1000))


def _with(msg: MsgPayForBlobs, **kw) -> MsgPayForBlobs:
    return replace(msg, **kw)


# ---------------------------
# Construction
# ---------------------------


@pytest.mark.parametrize("count", [1, 2])
def test_new_msg_fields(signer, count):
    blobs = [make_blob(data=bytes([i + 1]) * (600 * (i + 1)), sub_id=bytes([i + 1]) * 10) for i in range(count)]
    m = new_msg_pay_for_blobs(signer, *blobs)

    assert m.signer == signer
    assert len(m.namespaces) == len(m.blob_sizes) == len(m.share_commitments) == len(m.share_versions) == count
    for b, ns, size, c, v in zip(blobs, m.namespaces, m.blob_sizes, m.share_commitments, m.share_versions):
        assert ns == b"\x00" + b.namespace_id
        assert size == len(b.data)
        assert c == create_commitment(b)
        assert v == 0
    m.validate_basic()


def test_new_msg_requires_blobs(signer):
    with pytest.raises(NoBlobs):
        new_msg_pay_for_blobs(signer)


def test_new_msg_validates_blobs_first(signer):
    with pytest.raises(EmptyBlob):
        new_msg_pay_for_blobs(signer, make_blob(), make_blob(data=b""))
    with pytest.raises(UnsupportedShareVersion):
        new_msg_pay_for_blobs(signer, make_blob(share_version=1))


def test_new_msg_rejects_bad_signer(signer):
    with pytest.raises(InvalidAddress):
        new_msg_pay_for_blobs(signer[:10], make_blob())
    with pytest.raises(InvalidAddress):
        new_msg_pay_for_blobs("", make_blob())


def test_extract_blob_components():
    blobs = [make_blob(data=b"ab"), make_blob(data=b"cde", sub_id=b"\x02" * 10)]
    versions, ids, sizes, share_versions = extract_blob_components(blobs)
    assert versions == [0, 0]
    assert ids == [b.namespace_id for b in blobs]
    assert sizes == [2, 3]
    assert share_versions == [0, 0]


def test_type_url_and_signers(msg):
    assert MsgPayForBlobs.TYPE_URL == TYPE_URL == "/celestia.blob.v1.MsgPayForBlobs"
    assert msg.signers() == [bytes(range(20))]


def test_dict_round_trip(msg):
    d = msg.to_dict()
    assert d["@type"] == TYPE_URL
    assert MsgPayForBlobs.from_dict(d) == msg


# ---------------------------
# validate_basic
# ---------------------------


@pytest.mark.parametrize(
    "field, err",
    [
        ("namespaces", NoNamespaces),
        ("share_versions", NoShareVersions),
        ("blob_sizes", NoBlobSizes),
        ("share_commitments", NoShareCommitments),
    ],
)
def test_empty_arrays(msg, field, err):
    with pytest.raises(err):
        _with(msg, **{field: ()}).validate_basic()


def test_empty_checks_run_in_order(msg):
    with pytest.raises(NoNamespaces):
        _with(msg, namespaces=(), share_commitments=()).validate_basic()
    with pytest.raises(NoShareVersions):
        _with(msg, share_versions=(), blob_sizes=()).validate_basic()


@pytest.mark.parametrize("field", ["namespaces", "share_versions", "blob_sizes", "share_commitments"])
def test_mismatched_lengths(msg, field):
    doubled = getattr(msg, field) * 2
    with pytest.raises(MismatchedArrayLengths):
        _with(msg, **{field: doubled}).validate_basic()


@pytest.mark.parametrize(
    "ns",
    [TX_NAMESPACE, PAY_FOR_BLOB_NAMESPACE, TAIL_PADDING_NAMESPACE, PARITY_SHARES_NAMESPACE],
)
def test_reserved_namespaces(msg, ns):
    with pytest.raises(ReservedNamespace):
        _with(msg, namespaces=(ns.to_bytes(),)).validate_basic()


def test_unsupported_namespace_version(msg):
    ns = Namespace.new(255, b"\x01" * 28)
    with pytest.raises(InvalidNamespaceVersion):
        _with(msg, namespaces=(ns.to_bytes(),)).validate_basic()


@pytest.mark.parametrize(
    "raw, err",
    [
        (b"\x00" * 28, InvalidNamespace),
        (b"\x00" + b"\x01" * 28, InvalidNamespace),
        (b"\x07" + b"\x00" * 28, InvalidNamespaceVersion),
        ("not-bytes", InvalidNamespace),
    ],
)
def test_malformed_namespaces(msg, raw, err):
    with pytest.raises(err):
        _with(msg, namespaces=(raw,)).validate_basic()


@pytest.mark.parametrize("commitment", [b"", b"\x00" * 31, b"\x00" * 33, None])
def test_invalid_commitments(msg, commitment):
    with pytest.raises(InvalidShareCommitment):
        _with(msg, share_commitments=(commitment,)).validate_basic()


def test_namespace_checked_before_commitment(msg):
    with pytest.raises(ReservedNamespace):
        _with(msg, namespaces=(TX_NAMESPACE.to_bytes(),), share_commitments=(b"",)).validate_basic()


def test_commitment_checked_before_signer(msg):
    with pytest.raises(InvalidShareCommitment):
        _with(msg, signer="bogus", share_commitments=(b"",)).validate_basic()


def test_invalid_signer(msg):
    with pytest.raises(InvalidAddress):
        _with(msg, signer=msg.signer[:10]).validate_basic()


# ---------------------------
# Totality
# ---------------------------

_field = st.one_of(
    st.none(),
    st.integers(),
    st.lists(st.one_of(st.binary(max_size=40), st.integers(), st.none(), st.text(max_size=5)), max_size=3),
)


@settings(max_examples=200, deadline=None)
@given(
    signer=st.one_of(st.none(), st.text(max_size=50)),
    namespaces=_field,
    blob_sizes=_field,
    share_commitments=_field,
    share_versions=_field,
)
def test_validate_basic_only_raises_documented_errors(signer, namespaces, blob_sizes, share_commitments, share_versions):
    m = MsgPayForBlobs(
        signer=signer,
        namespaces=namespaces,
        blob_sizes=blob_sizes,
        share_commitments=share_commitments,
        share_versions=share_versions,
    )
    try:
        m.validate_basic()
    except BlobError:
        pass
