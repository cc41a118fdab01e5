"""
Enumerations shared across the key pair library.
"""

from __future__ import annotations
from enum import Enum
from typing import Union

from .runtime.errors import ErrorCode, KeypairsError


class KeyType(str, Enum):
    """Signature algorithm of a seed or key pair."""

    SECP256K1 = "secp256k1"
    ED25519 = "ed25519"

    @classmethod
    def parse(cls, value: Union[str, "KeyType", None]) -> "KeyType":
        """
        Resolve a key type from its name; ``None`` means secp256k1.

        Raises:
            KeypairsError: If the name is not a supported algorithm
        """
        if value is None:
            return cls.SECP256K1
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise KeypairsError(f"Unsupported key type: {value!r}", ErrorCode.INVALID_KEY_TYPE)

    def __str__(self) -> str:
        return self.value


# Leading byte of ed25519 public and private key encodings
ED25519_PREFIX = 0xED
# Leading byte of the 33-byte secp256k1 private key encoding
SECP256K1_PRIVATE_PREFIX = 0x00


__all__ = ["KeyType", "ED25519_PREFIX", "SECP256K1_PRIVATE_PREFIX"]
