"""Areion-based hash constructions.

This module provides the Areion-256 and Areion-512 permutations on whole
blocks, their Davies-Meyer compression functions, and a Merkle-Damgård hash
("VIL") built on the Areion-512 Davies-Meyer compression.
"""

from __future__ import annotations

from .areion_perm import perm256, permute_areion_512

__all__ = [
    "VilHash",
    "initial_state",
    "areion_perm256",
    "areion_perm512",
    "areion256_dm",
    "areion512_dm",
    "areion512_md",
]

_BLOCK = 32
_LENGTH_OFFSET = 24
_MASK64 = 0xFFFFFFFFFFFFFFFF

_INITIAL_STATE = bytes((
    0x6A, 0x09, 0xE6, 0x67, 0xBB, 0x67, 0xAE, 0x85,
    0x3C, 0x6E, 0xF3, 0x72, 0xA5, 0x4F, 0xF5, 0x3A,
    0x51, 0x0E, 0x52, 0x7F, 0x9B, 0x05, 0x68, 0x8C,
    0x1F, 0x83, 0xD9, 0xAB, 0x5B, 0xE0, 0xCD, 0x19,
))


def _checked(block: bytes, size: int) -> bytes:
    data = memoryview(block).tobytes()
    if len(data) != size:
        raise ValueError(f"block must be {size} bytes long")
    return data


def _xor(a: bytes, b: bytes) -> bytes:
    return bytes(x ^ y for x, y in zip(a, b))


def _truncate(block: bytes) -> bytes:
    """Keep 64-bit words 1, 3, 4 and 6 of a 64-byte block."""
    return block[8:16] + block[24:40] + block[48:56]


def _compress(state: bytes, block: bytes) -> bytes:
    """Compress one 32-byte block into the 32-byte chaining state."""
    return areion512_dm(block + state)


def initial_state() -> bytes:
    """Return the 32-byte initial chaining value of the VIL hash."""
    return _INITIAL_STATE


def areion_perm256(block: bytes) -> bytes:
    """Apply the Areion-256 permutation to a 32-byte block."""
    data = _checked(block, 32)
    x0, x1 = perm256(data[:16], data[16:])
    return x0 + x1


def areion_perm512(block: bytes) -> bytes:
    """Apply the Areion-512 permutation to a 64-byte block."""
    return permute_areion_512(_checked(block, 64))


def areion256_dm(block: bytes) -> bytes:
    """Davies-Meyer compression with Areion-256: permutation XOR input."""
    data = _checked(block, 32)
    return _xor(areion_perm256(data), data)


def areion512_dm(block: bytes) -> bytes:
    """Davies-Meyer compression with Areion-512, truncated to 32 bytes."""
    data = _checked(block, 64)
    return _truncate(_xor(permute_areion_512(data), data))


class VilHash:
    """Incremental Merkle-Damgård hash over Areion-512 Davies-Meyer."""

    name = "areion512_md"
    digest_size = 32
    block_size = _BLOCK

    def __init__(self, data: bytes = b"") -> None:
        self._state = _INITIAL_STATE
        self._buffer = b""
        self._length = 0
        if data:
            self.update(data)

    def update(self, data: bytes) -> None:
        """Feed more bytes into the hash."""
        chunk = memoryview(data).tobytes()
        self._length = (self._length + len(chunk)) & _MASK64
        pending = self._buffer + chunk
        full = len(pending) - len(pending) % _BLOCK
        state = self._state
        for offset in range(0, full, _BLOCK):
            state = _compress(state, pending[offset:offset + _BLOCK])
        self._state = state
        self._buffer = pending[full:]

    def digest(self) -> bytes:
        """Return the 32-byte digest of everything fed so far."""
        state = self._state
        padded = self._buffer + b"\x80"
        if len(self._buffer) < _LENGTH_OFFSET:
            final = padded.ljust(_LENGTH_OFFSET, b"\x00")
        else:
            state = _compress(state, padded.ljust(_BLOCK, b"\x00"))
            final = bytes(_LENGTH_OFFSET)
        bit_len = (self._length * 8) & _MASK64
        final += bit_len.to_bytes(8, "big")
        return _compress(state, final)

    def copy(self) -> VilHash:
        """Return an independent hasher with the same state."""
        clone = VilHash()
        clone._state = self._state
        clone._buffer = self._buffer
        clone._length = self._length
        return clone


def areion512_md(data: bytes) -> bytes:
    """Hash ``data`` with the Areion-512 Merkle-Damgård construction."""
    return VilHash(data).digest()