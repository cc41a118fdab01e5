"""
Hash utilities for ledger key derivation.

Provides the streaming SHA-512 accumulator used by scalar derivation and
message pre-hashing, plus the SHA-256/RIPEMD-160 account ID hash.
"""

import hashlib
import struct

from Crypto.Hash import RIPEMD160

U32_MAX = 0xFFFFFFFF


class Sha512:
    """
    Streaming SHA-512 accumulator.

    ``add`` and ``add_u32`` return the accumulator so calls chain::

        Sha512().add(seed).add_u32(0).first256_int()
    """

    def __init__(self):
        self._hash = hashlib.sha512()

    def add(self, data: bytes) -> "Sha512":
        """Append raw bytes."""
        self._hash.update(bytes(data))
        return self

    def add_u32(self, value: int) -> "Sha512":
        """
        Append a big-endian unsigned 32-bit integer.

        Raises:
            ValueError: If value does not fit in 32 bits
        """
        if not 0 <= value <= U32_MAX:
            raise ValueError(f"u32 out of range: {value}")
        self._hash.update(struct.pack(">I", value))
        return self

    def finish(self) -> bytes:
        """Full 64-byte digest."""
        return self._hash.digest()

    def first256(self) -> bytes:
        """First 32 bytes of the digest."""
        return self.finish()[:32]

    def first256_int(self) -> int:
        """First 32 bytes of the digest as a big-endian unsigned integer."""
        return int.from_bytes(self.first256(), "big")


def sha512_half(data: bytes) -> bytes:
    """First 32 bytes of SHA-512(data)."""
    return Sha512().add(data).first256()


def sha256(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


def ripemd160(data: bytes) -> bytes:
    h = RIPEMD160.new()
    h.update(data)
    return h.digest()


def derive_account_id(public_key_bytes: bytes) -> bytes:
    """
    Compute the 20-byte account ID of a public key.

    RIPEMD-160(SHA-256(public key)), over the canonical type-prefixed
    public key encoding.

    Args:
        public_key_bytes: 33-byte canonical public key

    Returns:
        20-byte account ID
    """
    if not isinstance(public_key_bytes, (bytes, bytearray)):
        raise ValueError("public_key_bytes must be bytes")
    return ripemd160(sha256(bytes(public_key_bytes)))


def seed_from_phrase(phrase) -> bytes:
    """
    Hash a human phrase to a 16-byte seed.

    First 16 bytes of SHA-512 of the phrase's UTF-8 bytes.
    """
    if isinstance(phrase, str):
        phrase = phrase.encode("utf-8")
    return hashlib.sha512(phrase).digest()[:16]


__all__ = [
    "U32_MAX",
    "Sha512",
    "sha512_half",
    "sha256",
    "ripemd160",
    "derive_account_id",
    "seed_from_phrase",
]
