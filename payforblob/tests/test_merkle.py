import hashlib

import pytest

from payforblob.errors import EmptyInput
from payforblob.utils.merkle import (
    RFC6962,
    Proof,
    build_proof,
    get_split_point,
    merkle_root,
    verify_proof,
)

# ---------------------------
# Reference (independent) implementation
# ---------------------------


def _leaf(b: bytes) -> bytes:
    return hashlib.sha256(b"\x00" + b).digest()


def _node(l: bytes, r: bytes) -> bytes:
    return hashlib.sha256(b"\x01" + l + r).digest()


def _leaves(n: int):
    return [bytes([i]) * (i + 1) for i in range(n)]


# ---------------------------
# Root
# ---------------------------


def test_empty_input_rejected():
    with pytest.raises(EmptyInput):
        merkle_root([])


def test_single_leaf_root_is_leaf_hash():
    assert merkle_root([b"abc"]) == _leaf(b"abc")


def test_two_and_three_leaves():
    a, b, c = b"a", b"b", b"c"
    assert merkle_root([a, b]) == _node(_leaf(a), _leaf(b))
    # split at 2: ((a, b), c)
    assert merkle_root([a, b, c]) == _node(_node(_leaf(a), _leaf(b)), _leaf(c))


def test_five_leaves_split_shape():
    ls = _leaves(5)
    h = [_leaf(x) for x in ls]
    left = _node(_node(h[0], h[1]), _node(h[2], h[3]))
    assert merkle_root(ls) == _node(left, h[4])


@pytest.mark.parametrize("n, k", [(2, 1), (3, 2), (4, 2), (5, 4), (8, 4), (9, 8), (100, 64)])
def test_split_point(n, k):
    assert get_split_point(n) == k


def test_root_is_order_sensitive():
    ls = _leaves(4)
    assert merkle_root(ls) != merkle_root(list(reversed(ls)))


def test_leaf_and_inner_domains_are_separated():
    # a single leaf equal to the concatenation of two leaf hashes must not
    # collide with the two-leaf root
    a, b = b"x", b"y"
    forged = _leaf(a) + _leaf(b)
    assert merkle_root([forged]) != merkle_root([a, b])


# ---------------------------
# Proofs
# ---------------------------


@pytest.mark.parametrize("n", [1, 2, 3, 5, 7, 8, 13])
def test_every_proof_verifies(n):
    ls = _leaves(n)
    root = merkle_root(ls)
    for i in range(n):
        p = build_proof(ls, i)
        assert p.total == n and p.index == i
        assert p.compute_root() == root
        assert verify_proof(p, root, ls[i])


def test_tampered_proofs_fail():
    ls = _leaves(6)
    root = merkle_root(ls)
    p = build_proof(ls, 4)

    assert not verify_proof(p, root, b"not-a-leaf")

    bad_aunts = (bytes(32),) + p.aunts[1:]
    assert not verify_proof(Proof(p.index, p.total, p.leaf_hash, bad_aunts), root, ls[4])

    moved = Proof(3, p.total, p.leaf_hash, p.aunts)
    assert not verify_proof(moved, root, ls[4])

    short = Proof(p.index, p.total, p.leaf_hash, ())
    assert not verify_proof(short, root, ls[4])


def test_build_proof_bounds():
    with pytest.raises(EmptyInput):
        build_proof([], 0)
    with pytest.raises(IndexError):
        build_proof([b"a"], 1)


def test_rfc6962_hasher_matches_reference():
    assert RFC6962.hash_leaf(b"q") == _leaf(b"q")
    assert RFC6962.hash_node(b"l" * 32, b"r" * 32) == _node(b"l" * 32, b"r" * 32)
