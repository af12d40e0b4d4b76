"""Command-level hashing API: one-shot digests and incremental MD5 handles.

MD5 results come back as raw 16-byte digests. SHA-2 results come back as
lower-case hexadecimal strings.
"""

from __future__ import annotations

import hashlib
from typing import Union

from .sha256 import sha256_hex
from .sha512 import sha384_hex, sha512_hex

__all__ = [
    "md5",
    "md5_init",
    "md5_append",
    "md5_finish",
    "sha2",
    "sha256",
    "sha384",
    "sha512",
]

_SHA2_VARIANTS = {
    256: sha256_hex,
    384: sha384_hex,
    512: sha512_hex,
}


def _as_bytes(data: bytes) -> bytes:
    return memoryview(data).tobytes()


def md5(data: bytes) -> bytes:
    """Return the 16-byte MD5 digest of ``data``."""
    return hashlib.md5(_as_bytes(data)).digest()


def md5_init():
    """Return a fresh incremental MD5 handle."""
    return hashlib.md5()


def md5_append(handle, data: bytes) -> None:
    """Feed ``data`` into the MD5 ``handle``."""
    handle.update(_as_bytes(data))


def md5_finish(handle) -> bytes:
    """Return the 16-byte MD5 digest of everything fed to ``handle``."""
    return handle.digest()


def _parse_variant(variant: Union[int, str]) -> int:
    if isinstance(variant, bool):
        raise TypeError(f"expected integer but got {variant!r}")
    if isinstance(variant, int):
        return variant
    if isinstance(variant, str):
        try:
            return int(variant.strip(), 0)
        except ValueError:
            raise ValueError(f'expected integer but got "{variant}"') from None
    raise TypeError(f"expected integer but got {variant!r}")


def sha2(variant: Union[int, str], data: bytes) -> str:
    """Return the hex SHA-2 digest of ``data`` for variant 256, 384 or 512."""
    bits = _parse_variant(variant)
    try:
        hex_digest = _SHA2_VARIANTS[bits]
    except KeyError:
        raise ValueError(f"Unsupported SHA-2 variant: {variant}") from None
    return hex_digest(_as_bytes(data))


def sha256(data: bytes) -> str:
    """Return the SHA-256 of ``data`` as a hex string."""
    return sha256_hex(_as_bytes(data))


def sha384(data: bytes) -> str:
    """Return the SHA-384 of ``data`` as a hex string."""
    return sha384_hex(_as_bytes(data))


def sha512(data: bytes) -> str:
    """Return the SHA-512 of ``data`` as a hex string."""
    return sha512_hex(_as_bytes(data))