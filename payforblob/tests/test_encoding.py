import cbor2
import pytest

from payforblob.errors import DecodeError
from payforblob.msg.encoding import CODEC_VERSION, SIGN_DOMAIN, decode_msg, encode_msg, sign_bytes
from payforblob.msg.pay_for_blobs import TYPE_URL, new_msg_pay_for_blobs

from .helpers import make_blob


@pytest.fixture
def msg(signer):
    return new_msg_pay_for_blobs(signer, make_blob(), make_blob(data=b"\x02" * 700, sub_id=b"\x02" * 10))


def test_round_trip(msg):
    buf = encode_msg(msg)
    back = decode_msg(buf)
    assert back == msg
    back.validate_basic()


def test_encoding_is_canonical(msg):
    buf = encode_msg(msg)
    assert encode_msg(decode_msg(buf)) == buf
    frame = cbor2.loads(buf)
    assert frame["v"] == CODEC_VERSION and frame["t"] == TYPE_URL
    assert cbor2.dumps(frame, canonical=True) == buf


def test_sign_bytes_deterministic_and_chain_bound(msg):
    a = sign_bytes(msg, "celestia")
    assert a == sign_bytes(msg, "celestia")
    assert a != sign_bytes(msg, "mocha-4")
    doc = cbor2.loads(a)
    assert doc == {1: SIGN_DOMAIN, 2: "celestia", 3: encode_msg(msg)}


def test_sign_bytes_requires_chain_id(msg):
    with pytest.raises(ValueError):
        sign_bytes(msg, "")


@pytest.mark.parametrize(
    "buf",
    [
        b"",
        b"\xff\xff\xff",
        cbor2.dumps([1, 2, 3]),
        cbor2.dumps({"v": 2, "t": TYPE_URL, "p": {}}),
        cbor2.dumps({"v": CODEC_VERSION, "t": "/other.Msg", "p": {}}),
        cbor2.dumps({"v": CODEC_VERSION, "t": TYPE_URL, "p": []}),
        cbor2.dumps({"v": CODEC_VERSION, "t": TYPE_URL, "p": {"signer": "x"}}),
        cbor2.dumps(
            {
                "v": CODEC_VERSION,
                "t": TYPE_URL,
                "p": {
                    "signer": "x",
                    "namespaces": ["not-bytes"],
                    "blobSizes": [1],
                    "shareCommitments": [b"\x00" * 32],
                    "shareVersions": [0],
                },
            }
        ),
    ],
)
def test_decode_rejects_malformed(buf):
    with pytest.raises(DecodeError):
        decode_msg(buf)
