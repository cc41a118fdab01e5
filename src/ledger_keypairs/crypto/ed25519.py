r"""
Ed25519 key derivation and signing for the ledger.

The signing secret is the first 256 bits of SHA-512(seed). Public and
private keys are encoded with a leading ``0xED`` byte so they can be told
apart from secp256k1 keys. Messages are signed directly (no pre-hash).
"""

from __future__ import annotations
from typing import Any, Dict, Optional, Union

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey as CryptoEd25519PrivateKey,
    Ed25519PublicKey as CryptoEd25519PublicKey,
)

from ..enums import ED25519_PREFIX, KeyType
from ..options import DerivationOptions
from ..runtime.encoding import BytesLike, parse_bytes
from ..runtime.errors import ErrorCode, KeypairsError, KeyEncodingError
from .hash_utils import sha512_half
from .keypair import KeyPair, cached

SIGNATURE_LENGTH = 64


def derive_private_seed(seed: bytes) -> bytes:
    """32-byte ed25519 secret for a seed: first half of SHA-512(seed)."""
    return sha512_half(seed)


def _strip_prefix(key_bytes: bytes, what: str) -> bytes:
    if len(key_bytes) == 33 and key_bytes[0] == ED25519_PREFIX:
        return key_bytes[1:]
    if len(key_bytes) == 32 and what == "private":
        return key_bytes
    raise KeyEncodingError(
        f"ed25519 {what} key must be 33 bytes starting with ED, got {len(key_bytes)} bytes",
        ErrorCode.INVALID_LENGTH,
    )


class Ed25519KeyPair(KeyPair):
    """
    Ed25519 key pair.

    There is one key per seed: account indices and node keys only exist
    for secp256k1.
    """

    key_type = KeyType.ED25519

    def __init__(self, seed_bytes: Optional[bytes] = None,
                 public_bytes: Optional[bytes] = None,
                 private_bytes: Optional[bytes] = None,
                 options: Union[None, DerivationOptions, Dict[str, Any]] = None):
        """
        Initialize key pair.

        Args:
            seed_bytes: 16 bytes of seed entropy
            public_bytes: ``ED`` + 32-byte public key
            private_bytes: ``ED`` + 32-byte secret (or the bare 32 bytes)
            options: Derivation options; only defaults are meaningful

        Raises:
            KeyEncodingError: If key material is malformed
            KeypairsError: If node or account index options are given
        """
        options = DerivationOptions.coerce(options)
        if options.node or options.account_index:
            raise KeypairsError("ed25519 key pairs support neither node keys nor account indices",
                                ErrorCode.INVALID_OPTIONS)
        super().__init__(seed_bytes=seed_bytes, public_bytes=public_bytes,
                         private_bytes=private_bytes)

        if self._private_bytes is not None:
            self._secret = _strip_prefix(self._private_bytes, "private")
        if self._public_bytes is not None:
            raw = _strip_prefix(self._public_bytes, "public")
            try:
                self._verify_key = CryptoEd25519PublicKey.from_public_bytes(raw)
            except Exception as e:
                raise KeyEncodingError(f"Invalid Ed25519 public key: {e}", cause=e)

    @classmethod
    def from_seed(cls, seed_bytes: bytes,
                  options: Union[None, DerivationOptions, Dict[str, Any]] = None) -> Ed25519KeyPair:
        """Derive a key pair from 16 bytes of seed entropy."""
        return cls(seed_bytes=seed_bytes, options=options)

    @classmethod
    def from_private(cls, private_key: BytesLike) -> Ed25519KeyPair:
        """Create a key pair from private key bytes or hex."""
        return cls(private_bytes=parse_bytes(private_key))

    @classmethod
    def from_public(cls, public_key: BytesLike) -> Ed25519KeyPair:
        """Create a verify-only key pair from ``ED``-prefixed public key bytes or hex."""
        return cls(public_bytes=parse_bytes(public_key))

    @cached
    def _signing_secret(self) -> bytes:
        self._require_private_key("sign")
        if self._private_bytes is not None:
            return self._secret
        return derive_private_seed(self._seed_bytes)

    @cached
    def _signing_key(self) -> CryptoEd25519PrivateKey:
        return CryptoEd25519PrivateKey.from_private_bytes(self._signing_secret())

    @cached
    def _public_key(self) -> CryptoEd25519PublicKey:
        if self._public_bytes is not None:
            return self._verify_key
        return self._signing_key().public_key()

    def _derive_public_bytes(self) -> bytes:
        raw = self._signing_key().public_key().public_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PublicFormat.Raw,
        )
        return bytes([ED25519_PREFIX]) + raw

    def _derive_private_bytes(self) -> bytes:
        return bytes([ED25519_PREFIX]) + self._signing_secret()

    def sign(self, message: Union[bytes, str]) -> bytes:
        """
        Sign a message.

        Returns:
            64-byte Ed25519 signature
        """
        self._require_private_key("sign")
        return self._signing_key().sign(self._message_bytes(message))

    def verify(self, signature: BytesLike, message: Union[bytes, str]) -> bool:
        try:
            signature = parse_bytes(signature)
            if len(signature) != SIGNATURE_LENGTH:
                return False
            self._public_key().verify(signature, self._message_bytes(message))
            return True
        except Exception:
            return False


__all__ = ["Ed25519KeyPair", "derive_private_seed", "SIGNATURE_LENGTH"]
