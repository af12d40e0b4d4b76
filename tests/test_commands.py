import hashlib

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from hashkit import commands


def test_md5_empty_rfc_vector():
    assert commands.md5(b"").hex() == "d41d8cd98f00b204e9800998ecf8427e"


def test_md5_abc_rfc_vector():
    assert commands.md5(b"abc").hex() == "900150983cd24fb0d6963f7d28e17f72"


def test_sha256_abc_vector():
    assert commands.sha256(b"abc") == (
        "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    )


@pytest.mark.parametrize(
    "data",
    [b"", b"abc", b"a" * 55, b"a" * 56, b"a" * 64, b"x" * 111, b"y" * 112, bytes(range(256)) * 3],
)
def test_one_shot_functions_match_hashlib(data):
    assert commands.md5(data) == hashlib.md5(data).digest()
    assert commands.sha256(data) == hashlib.sha256(data).hexdigest()
    assert commands.sha384(data) == hashlib.sha384(data).hexdigest()
    assert commands.sha512(data) == hashlib.sha512(data).hexdigest()


@pytest.mark.parametrize("variant", [256, 384, 512])
def test_sha2_dispatches_to_variant(variant):
    data = b"The quick brown fox"
    expected = {256: commands.sha256, 384: commands.sha384, 512: commands.sha512}[variant](data)
    assert commands.sha2(variant, data) == expected


def test_sha2_accepts_integer_string():
    assert commands.sha2("512", b"abc") == hashlib.sha512(b"abc").hexdigest()


@pytest.mark.parametrize("variant", [1, 224, 1024, "128"])
def test_sha2_rejects_unsupported_variant(variant):
    with pytest.raises(ValueError, match="Unsupported SHA-2 variant"):
        commands.sha2(variant, b"abc")


def test_sha2_rejects_non_integer():
    with pytest.raises(ValueError):
        commands.sha2("abc", b"data")


def test_sha2_rejects_wrong_type():
    with pytest.raises(TypeError):
        commands.sha2(2.5, b"data")


def test_hex_lengths():
    assert len(commands.sha256(b"z")) == 64
    assert len(commands.sha384(b"z")) == 96
    assert len(commands.sha512(b"z")) == 128
    assert len(commands.md5(b"z")) == 16


def test_incremental_md5_matches_one_shot():
    handle = commands.md5_init()
    commands.md5_append(handle, b"hello ")
    commands.md5_append(handle, b"")
    commands.md5_append(handle, b"world")
    assert commands.md5_finish(handle) == commands.md5(b"hello world")


def test_empty_handle_finishes_to_empty_digest():
    handle = commands.md5_init()
    assert commands.md5_finish(handle) == commands.md5(b"")


def test_handles_are_independent():
    first = commands.md5_init()
    second = commands.md5_init()
    commands.md5_append(first, b"one")
    commands.md5_append(second, b"two")
    assert commands.md5_finish(first) == commands.md5(b"one")
    assert commands.md5_finish(second) == commands.md5(b"two")


def test_accepts_bytearray_and_memoryview():
    data = b"buffer input"
    assert commands.md5(bytearray(data)) == commands.md5(data)
    assert commands.sha256(memoryview(data)) == commands.sha256(data)


@settings(max_examples=50)
@given(st.lists(st.binary(max_size=150), max_size=6))
def test_incremental_md5_any_split(chunks):
    handle = commands.md5_init()
    for chunk in chunks:
        commands.md5_append(handle, chunk)
    assert commands.md5_finish(handle) == commands.md5(b"".join(chunks))


@settings(max_examples=30)
@given(st.binary(max_size=300))
def test_sha2_agrees_with_hashlib(data):
    assert commands.sha2(256, data) == hashlib.sha256(data).hexdigest()
    assert commands.sha2(384, data) == hashlib.sha384(data).hexdigest()
    assert commands.sha2(512, data) == hashlib.sha512(data).hexdigest()