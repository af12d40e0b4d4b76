import hashlib

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from hashkit.sha512 import Sha384, Sha512, sha384_hex, sha512_hex


def test_sha512_abc_known_vector():
    assert sha512_hex(b"abc") == (
        "ddaf35a193617abacc417349ae20413112e6fa4e89a97ea20a9eeee64b55d39a"
        "2192992a274fc1a836ba3c23a3feebbd454d4423643ce80e2a9ac94fa54ca49f"
    )


def test_sha384_abc_known_vector():
    assert sha384_hex(b"abc") == (
        "cb00753f45a35e8bb5a03d699ac65007272c32ab0eded163"
        "1a8b605a43ff5bed8086072ba1e7cc2358baeca134c825a7"
    )


@pytest.mark.parametrize("size", [0, 1, 55, 111, 112, 113, 127, 128, 129, 239, 240, 255, 256, 1000])
def test_sha512_matches_hashlib_around_block_boundaries(size):
    data = bytes((i * 7 + 3) & 0xFF for i in range(size))
    assert sha512_hex(data) == hashlib.sha512(data).hexdigest()


@pytest.mark.parametrize("size", [0, 1, 111, 112, 127, 128, 129, 300])
def test_sha384_matches_hashlib_around_block_boundaries(size):
    data = bytes((i * 13 + 5) & 0xFF for i in range(size))
    assert sha384_hex(data) == hashlib.sha384(data).hexdigest()


def test_digest_lengths():
    assert len(Sha512(b"x").digest()) == 64
    assert len(Sha384(b"x").digest()) == 48
    assert len(sha512_hex(b"")) == 128
    assert len(sha384_hex(b"")) == 96


def test_digest_does_not_consume_state():
    h = Sha512(b"hello")
    first = h.digest()
    assert h.digest() == first
    h.update(b" world")
    assert h.digest() == hashlib.sha512(b"hello world").digest()


def test_copy_is_independent():
    h = Sha384(b"prefix-")
    clone = h.copy()
    clone.update(b"suffix")
    assert isinstance(clone, Sha384)
    assert h.hexdigest() == hashlib.sha384(b"prefix-").hexdigest()
    assert clone.hexdigest() == hashlib.sha384(b"prefix-suffix").hexdigest()


def test_accepts_bytearray_and_memoryview():
    data = b"some buffer contents" * 10
    h = Sha512()
    h.update(bytearray(data[:50]))
    h.update(memoryview(data[50:]))
    assert h.digest() == hashlib.sha512(data).digest()


def test_empty_update_is_noop():
    h = Sha512(b"abc")
    h.update(b"")
    assert h.hexdigest() == sha512_hex(b"abc")


def test_update_rejects_text():
    with pytest.raises(TypeError):
        Sha512().update("text")


def test_sha384_differs_from_truncated_sha512():
    assert Sha384(b"abc").digest() != Sha512(b"abc").digest()[:48]


@settings(max_examples=50, deadline=None)
@given(st.binary(max_size=600), st.lists(st.integers(min_value=0, max_value=600), max_size=5))
def test_chunked_updates_equal_one_shot(data, cuts):
    points = sorted({min(c, len(data)) for c in cuts})
    h = Sha512()
    start = 0
    for point in points + [len(data)]:
        h.update(data[start:point])
        start = point
    assert h.digest() == Sha512(data).digest()
    assert h.hexdigest() == hashlib.sha512(data).hexdigest()


@settings(max_examples=30, deadline=None)
@given(st.binary(max_size=400))
def test_sha384_agrees_with_hashlib(data):
    assert Sha384(data).digest() == hashlib.sha384(data).digest()