# hashkit

Message digests written in plain Python, with no dependencies beyond the
standard library:

- **SHA-256**, **SHA-384** and **SHA-512**, from FIPS 180-2
- **Areion**, the AES-round-based permutations Areion-256 and Areion-512,
  and the hashes built on them: Davies–Meyer compression
  (`areion256_dm`, `areion512_dm`) and a Merkle–Damgård hash for data of
  any length (`areion512_md`)
- **MD5** helpers in `hashkit.commands`

The SHA-2 and Areion code is plain Python, so it is easy to read and check
against a specification. It is not fast.

## Installation

```
pip install hashkit
```

To run the tests:

```
pip install "hashkit[test]"
pytest
```

## SHA-2 hashers

The hasher classes work like the objects in `hashlib`. Each has `update`,
`digest`, `hexdigest` and `copy`, and can take initial data in its
constructor.

```python
from hashkit.sha256 import Sha256, sha256_hex
from hashkit.sha512 import Sha512, Sha384, sha512_hex, sha384_hex

h = Sha256(b"hello ")
h.update(b"world")
print(h.hexdigest())

print(sha256_hex(b"abc"))   # ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad
print(Sha384(b"abc").hexdigest())
print(Sha512(b"abc").digest())
```

`sha256_hex`, `sha384_hex` and `sha512_hex` return lower-case hex strings.

## Areion

```python
from hashkit.areion import (
    VilHash, initial_state,
    areion_perm256, areion_perm512,
    areion256_dm, areion512_dm, areion512_md,
)

areion_perm256(bytes(32))   # 32-byte permutation output
areion_perm512(bytes(64))   # 64-byte permutation output
areion256_dm(bytes(32))     # 32-byte Davies–Meyer digest
areion512_dm(bytes(64))     # 32-byte truncated Davies–Meyer digest
areion512_md(b"any data")   # 32-byte Merkle–Damgård digest

h = VilHash(b"part one, ")
h.update(b"part two")
assert h.digest() == areion512_md(b"part one, part two")
```

`VilHash` has `update`, `digest` and `copy`; `initial_state()` returns its
32-byte starting chaining value. If a block passed to a fixed-size function
has the wrong length, `ValueError` is raised.

The building blocks are in `hashkit.areion_perm`:

- the AES round primitives `aesenc`, `aesenclast`, `aesdeclast` and `aesimc`
- the permutations `perm256`, `perm512` and `permute_areion_512`
- their inverses `inverse_perm256`, `inverse_perm512` and `inverse_areion_512`

## Command-style helpers

`hashkit.commands` has one function per operation:

- `md5(data)` returns the raw 16-byte digest.
- `md5_init()` returns a handle; `md5_append(handle, data)` feeds it and
  `md5_finish(handle)` returns the 16-byte digest.
- `sha2(variant, data)` takes `variant` 256, 384 or 512, as an integer or a
  string holding one. Any other number raises `ValueError`; a value that is
  not an integer raises `ValueError` (strings) or `TypeError` (other types).
- `sha256(data)`, `sha384(data)` and `sha512(data)` return lower-case hex
  strings.

## What it does not do

MD5 has no plain-Python hasher class in this package. The MD5 helpers in
`hashkit.commands` use `hashlib.md5` from the standard library, and the
handle from `md5_init()` is a `hashlib` object. The package has no
command-line program.