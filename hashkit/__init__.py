"""SHA-2 and Areion hash functions in plain Python, with MD5 helpers."""

__version__ = "0.4.0"

__all__ = ["sha256", "sha512", "areion_perm", "areion", "commands"]