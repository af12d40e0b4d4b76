"""Areion-256 and Areion-512 permutations built from AES round primitives.

The AES operations follow the semantics of the x86 AES-NI instructions on
16-byte blocks in column-major byte order:

* ``aesenc``: SubBytes, ShiftRows, MixColumns, then XOR with the key.
* ``aesenclast``: SubBytes, ShiftRows, then XOR with the key.
* ``aesdeclast``: InvShiftRows, InvSubBytes, then XOR with the key.
* ``aesimc``: InvMixColumns.
"""

from __future__ import annotations

import struct

__all__ = [
    "aesenc",
    "aesenclast",
    "aesdeclast",
    "aesimc",
    "perm256",
    "inverse_perm256",
    "perm512",
    "inverse_perm512",
    "permute_areion_512",
    "inverse_areion_512",
]

_BLOCK = 16
_ZERO = bytes(_BLOCK)


def _xtime(a: int) -> int:
    a <<= 1
    return (a ^ 0x1B) & 0xFF if a & 0x100 else a


def _gmul(a: int, b: int) -> int:
    """Multiply two elements of GF(2^8) modulo the AES polynomial."""
    result = 0
    while b:
        if b & 1:
            result ^= a
        a = _xtime(a)
        b >>= 1
    return result


def _build_sbox() -> tuple[bytes, bytes]:
    exp = [0] * 255
    log = [0] * 256
    p = 1
    for i in range(255):
        exp[i] = p
        log[p] = i
        p ^= _xtime(p)  # multiply by the generator 3
    sbox = bytearray(256)
    for x in range(256):
        inv = exp[(255 - log[x]) % 255] if x else 0
        s = inv
        for shift in range(1, 5):
            s ^= ((inv << shift) | (inv >> (8 - shift))) & 0xFF
        sbox[x] = s ^ 0x63
    inv_sbox = bytearray(256)
    for x, s in enumerate(sbox):
        inv_sbox[s] = x
    return bytes(sbox), bytes(inv_sbox)


_SBOX, _INV_SBOX = _build_sbox()

_MUL = {n: bytes(_gmul(x, n) for x in range(256)) for n in (2, 3, 9, 11, 13, 14)}

_SHIFT = tuple((i + 4 * (i % 4)) % 16 for i in range(16))
_INV_SHIFT = tuple((i - 4 * (i % 4)) % 16 for i in range(16))

_RC_WORDS = (
    0x243F6A88, 0x85A308D3, 0x13198A2E, 0x03707344,
    0xA4093822, 0x299F31D0, 0x082EFA98, 0xEC4E6C89,
    0x452821E6, 0x38D01377, 0xBE5466CF, 0x34E90C6C,
    0xC0AC29B7, 0xC97C50DD, 0x3F84D5B5, 0xB5470917,
    0x9216D5D9, 0x8979FB1B, 0xD1310BA6, 0x98DFB5AC,
    0x2FFD72DB, 0xD01ADFB7, 0xB8E1AFED, 0x6A267E96,
    0xBA7C9045, 0xF12C7F99, 0x24A19947, 0xB3916CF7,
    0x801F2E28, 0x58EFC166, 0x36920D87, 0x1574E690,
    0xA458FEA3, 0xF4933D7E, 0x0D95748F, 0x728EB658,
    0x718BCD58, 0x82154AEE, 0x7B54A41D, 0xC25A59B5,
    0x9C30D539, 0x2AF26013, 0xC5D1B023, 0x286085F0,
    0xCA417918, 0xB8DB38EF, 0x8E79DCB0, 0x603A180E,
    0x6C9E0E8B, 0xB01E8A3E, 0xD71577C1, 0xBD314B27,
    0x78AF2FDA, 0x55605C60, 0xE65525F3, 0xAA55AB94,
    0x57489862, 0x63E81440, 0x55CA396A, 0x2AAB10B6,
)

# Each round's constant holds its four words in reverse order, little-endian.
_RC = tuple(
    struct.pack("<4I", *reversed(_RC_WORDS[4 * i:4 * i + 4])) for i in range(15)
)


def _as_block(value: bytes, size: int = _BLOCK, what: str = "block") -> bytes:
    data = bytes(value)
    if len(data) != size:
        raise ValueError(f"{what} must be {size} bytes long, got {len(data)}")
    return data


def _xor(a: bytes, b: bytes) -> bytes:
    return bytes(x ^ y for x, y in zip(a, b))


def _sub_shift(state: bytes) -> bytes:
    return bytes(_SBOX[state[j]] for j in _SHIFT)


def _inv_shift_sub(state: bytes) -> bytes:
    return bytes(_INV_SBOX[state[j]] for j in _INV_SHIFT)


def _mix_columns(state: bytes) -> bytes:
    m2, m3 = _MUL[2], _MUL[3]
    out = bytearray()
    for col in range(0, 16, 4):
        s0, s1, s2, s3 = state[col:col + 4]
        out += bytes((
            m2[s0] ^ m3[s1] ^ s2 ^ s3,
            s0 ^ m2[s1] ^ m3[s2] ^ s3,
            s0 ^ s1 ^ m2[s2] ^ m3[s3],
            m3[s0] ^ s1 ^ s2 ^ m2[s3],
        ))
    return bytes(out)


def _inv_mix_columns(state: bytes) -> bytes:
    m9, m11, m13, m14 = _MUL[9], _MUL[11], _MUL[13], _MUL[14]
    out = bytearray()
    for col in range(0, 16, 4):
        s0, s1, s2, s3 = state[col:col + 4]
        out += bytes((
            m14[s0] ^ m11[s1] ^ m13[s2] ^ m9[s3],
            m9[s0] ^ m14[s1] ^ m11[s2] ^ m13[s3],
            m13[s0] ^ m9[s1] ^ m14[s2] ^ m11[s3],
            m11[s0] ^ m13[s1] ^ m9[s2] ^ m14[s3],
        ))
    return bytes(out)


def aesenc(state: bytes, key: bytes) -> bytes:
    """One full AES encryption round: SubBytes, ShiftRows, MixColumns, AddRoundKey."""
    s = _sub_shift(_as_block(state, what="state"))
    return _xor(_mix_columns(s), _as_block(key, what="key"))


def aesenclast(state: bytes, key: bytes) -> bytes:
    """Last AES encryption round: SubBytes, ShiftRows, AddRoundKey."""
    s = _sub_shift(_as_block(state, what="state"))
    return _xor(s, _as_block(key, what="key"))


def aesdeclast(state: bytes, key: bytes) -> bytes:
    """Last AES decryption round: InvShiftRows, InvSubBytes, AddRoundKey."""
    s = _inv_shift_sub(_as_block(state, what="state"))
    return _xor(s, _as_block(key, what="key"))


def aesimc(state: bytes) -> bytes:
    """AES InvMixColumns."""
    return _inv_mix_columns(_as_block(state, what="state"))


def _f256(x: bytes, i: int) -> bytes:
    return aesenc(aesenc(x, _RC[i]), _ZERO)


def perm256(x0: bytes, x1: bytes) -> tuple[bytes, bytes]:
    """Apply the ten-round Areion-256 permutation to two 16-byte halves."""
    x = [_as_block(x0, what="x0"), _as_block(x1, what="x1")]
    for i in range(10):
        r = i % 2
        a, b = x[r], x[1 - r]
        x[1 - r] = aesenc(aesenc(a, _RC[i]), b)
        x[r] = aesenclast(a, _ZERO)
    return x[0], x[1]


def inverse_perm256(x0: bytes, x1: bytes) -> tuple[bytes, bytes]:
    """Undo :func:`perm256`."""
    x = [_as_block(x0, what="x0"), _as_block(x1, what="x1")]
    for i in reversed(range(10)):
        r = i % 2
        a = aesdeclast(x[r], _ZERO)
        x[r] = a
        x[1 - r] = aesenc(aesenc(a, _RC[i]), x[1 - r])
    return x[0], x[1]


def _check4(x0: bytes, x1: bytes, x2: bytes, x3: bytes) -> list[bytes]:
    return [_as_block(v, what=f"x{n}") for n, v in enumerate((x0, x1, x2, x3))]


def perm512(
    x0: bytes, x1: bytes, x2: bytes, x3: bytes
) -> tuple[bytes, bytes, bytes, bytes]:
    """Apply the fifteen-round Areion-512 permutation to four 16-byte words.

    The words are returned in the order they are named, without the
    final reordering that :func:`permute_areion_512` applies.
    """
    x = _check4(x0, x1, x2, x3)
    for i in range(15):
        r = i % 4
        a, b, c, d = (x[(r + k) % 4] for k in range(4))
        b = aesenc(a, b)
        d = aesenc(c, d)
        a = aesenclast(a, _ZERO)
        c = aesenc(aesenclast(c, _RC[i]), _ZERO)
        for k, v in enumerate((a, b, c, d)):
            x[(r + k) % 4] = v
    return x[0], x[1], x[2], x[3]


def inverse_perm512(
    x0: bytes, x1: bytes, x2: bytes, x3: bytes
) -> tuple[bytes, bytes, bytes, bytes]:
    """Undo :func:`perm512`."""
    x = _check4(x0, x1, x2, x3)
    for i in reversed(range(15)):
        r = i % 4
        a, b, c, d = (x[(r + k) % 4] for k in range(4))
        a = aesdeclast(a, _ZERO)
        c = aesdeclast(aesdeclast(aesimc(c), _RC[i]), _ZERO)
        b = aesenc(a, b)
        d = aesenc(c, d)
        for k, v in enumerate((a, b, c, d)):
            x[(r + k) % 4] = v
    return x[0], x[1], x[2], x[3]


def _split64(block: bytes) -> list[bytes]:
    data = _as_block(block, 64)
    return [data[k:k + 16] for k in range(0, 64, 16)]


def permute_areion_512(block: bytes) -> bytes:
    """Areion-512 on a 64-byte block, output words ordered x3, x0, x1, x2."""
    x0, x1, x2, x3 = perm512(*_split64(block))
    return x3 + x0 + x1 + x2


def inverse_areion_512(block: bytes) -> bytes:
    """Undo :func:`permute_areion_512`."""
    y3, y0, y1, y2 = _split64(block)
    return b"".join(inverse_perm512(y0, y1, y2, y3))