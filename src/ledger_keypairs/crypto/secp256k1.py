"""
SECP256K1 key derivation and signing for the ledger.

Keys are derived from a 16-byte seed in two stages: the seed yields a
root "private generator", and each account key is that generator plus an
offset derived from the generator's public point and the account index.
Node keys stop at the first stage.

Signatures are canonical (low-S) deterministic ECDSA over the first 256
bits of SHA-512(message), DER encoded.
"""

from __future__ import annotations
import hashlib
import logging
from typing import Any, Dict, Optional, Union

from ecdsa import SECP256k1, SigningKey, VerifyingKey
from ecdsa.util import sigdecode_der, sigencode_der, sigencode_der_canonize

from ..codec import parse_public_key
from ..enums import KeyType, SECP256K1_PRIVATE_PREFIX
from ..options import DerivationOptions, Secp256k1Backend
from ..runtime.encoding import BytesLike, parse_bytes
from ..runtime.errors import (
    BackendUnavailableError,
    DerivationExhaustedError,
    ErrorCode,
    KeyEncodingError,
)
from .hash_utils import Sha512, U32_MAX
from .keypair import KeyPair, cached

logger = logging.getLogger(__name__)

CURVE_ORDER = SECP256k1.order
GENERATOR = SECP256k1.generator


def derive_scalar(data: bytes, discriminator: Optional[int] = None) -> int:
    """
    Derive a scalar in ``(0, n)`` from arbitrary bytes.

    Hashes ``data [+ discriminator] + counter`` with SHA-512 for counter
    values 0, 1, 2, ... and returns the first 256-bit prefix that is a
    valid private key.

    Args:
        data: Input bytes
        discriminator: Optional u32 mixed in before the counter

    Returns:
        Scalar with ``0 < scalar < CURVE_ORDER``

    Raises:
        DerivationExhaustedError: If all 2**32 counter values are rejected
    """
    data = bytes(data)
    for i in range(U32_MAX + 1):
        hasher = Sha512().add(data)
        if discriminator is not None:
            hasher.add_u32(discriminator)
        hasher.add_u32(i)
        candidate = hasher.first256_int()
        if 0 < candidate < CURVE_ORDER:
            return candidate
        logger.debug(f"Rejected scalar candidate at counter {i}")
    raise DerivationExhaustedError()


def compress_point(point) -> bytes:
    """SEC1 compressed encoding of a curve point."""
    x = point.x()
    y = point.y()
    return bytes([2 + (y & 1)]) + x.to_bytes(32, "big")


def decode_point(public_key_bytes: bytes):
    """
    Decode a SEC1 encoded public key to a curve point.

    Raises:
        KeyEncodingError: If the bytes are not a point on the curve
    """
    try:
        return VerifyingKey.from_string(bytes(public_key_bytes), curve=SECP256k1).pubkey.point
    except Exception as e:
        raise KeyEncodingError(f"Invalid secp256k1 public key: {e}", cause=e)


def derive_private_key(seed: bytes, account_index: int = 0, node: bool = False) -> int:
    """
    Derive the private scalar for a seed.

    Args:
        seed: 16 bytes of seed entropy
        account_index: Account number (ignored for node keys)
        node: Return the root private generator used by network nodes

    Returns:
        Private scalar
    """
    private_gen = derive_scalar(seed)
    if node:
        logger.debug("Derived node (root) private key")
        return private_gen

    public_gen = compress_point(GENERATOR * private_gen)
    offset = derive_scalar(public_gen, account_index)
    return (offset + private_gen) % CURVE_ORDER


def account_public_from_public_generator(public_gen_bytes: bytes) -> bytes:
    """
    Derive the account 0 public key from a public generator.

    Lets the account of a node be computed from its published node public
    key without any private material.

    Args:
        public_gen_bytes: 33-byte compressed public generator

    Returns:
        33-byte compressed account public key
    """
    root_point = decode_point(public_gen_bytes)
    scalar = derive_scalar(public_gen_bytes, 0)
    return compress_point(root_point + GENERATOR * scalar)


def hash_message(message: bytes) -> bytes:
    """256-bit signing digest: first half of SHA-512(message)."""
    return Sha512().add(message).first256()


class _EcdsaBackend:
    """Pure-Python signing via the ``ecdsa`` package."""

    name = Secp256k1Backend.ECDSA

    def sign(self, secret: int, digest: bytes) -> bytes:
        signing_key = SigningKey.from_secret_exponent(secret, curve=SECP256k1)
        return signing_key.sign_digest_deterministic(
            digest, hashfunc=hashlib.sha256, sigencode=sigencode_der_canonize
        )

    def verify(self, public_key_bytes: bytes, signature: bytes, digest: bytes) -> bool:
        verifying_key = VerifyingKey.from_string(public_key_bytes, curve=SECP256k1)
        return verifying_key.verify_digest(signature, digest, sigdecode=sigdecode_der)


class _CoincurveBackend:
    """libsecp256k1 signing via ``coincurve``."""

    name = Secp256k1Backend.COINCURVE

    def __init__(self):
        try:
            import coincurve
        except ImportError as e:
            raise BackendUnavailableError(
                "coincurve backend requested but coincurve is not installed "
                "(pip install ledger-keypairs[speedup])",
                cause=e,
            )
        self._coincurve = coincurve

    def sign(self, secret: int, digest: bytes) -> bytes:
        private_key = self._coincurve.PrivateKey(secret.to_bytes(32, "big"))
        return private_key.sign(digest, hasher=None)

    def verify(self, public_key_bytes: bytes, signature: bytes, digest: bytes) -> bool:
        # libsecp256k1 rejects high-S signatures; accept them like the ecdsa backend does
        r, s = sigdecode_der(signature, CURVE_ORDER)
        if s > CURVE_ORDER // 2:
            s = CURVE_ORDER - s
        normalized = sigencode_der(r, s, CURVE_ORDER)
        public_key = self._coincurve.PublicKey(public_key_bytes)
        return public_key.verify(normalized, digest, hasher=None)


def load_backend(backend: Union[str, Secp256k1Backend]):
    """
    Instantiate a signing backend.

    Raises:
        BackendUnavailableError: If the backend's library is missing
    """
    backend = Secp256k1Backend(backend)
    if backend is Secp256k1Backend.COINCURVE:
        return _CoincurveBackend()
    return _EcdsaBackend()


def _parse_private_scalar(private_key_bytes: bytes) -> int:
    if len(private_key_bytes) == 33 and private_key_bytes[0] == SECP256K1_PRIVATE_PREFIX:
        private_key_bytes = private_key_bytes[1:]
    if len(private_key_bytes) != 32:
        raise KeyEncodingError(
            f"secp256k1 private key must be 32 bytes (or 33 with a 00 prefix), got {len(private_key_bytes)}",
            ErrorCode.INVALID_LENGTH,
        )
    scalar = int.from_bytes(private_key_bytes, "big")
    if not 0 < scalar < CURVE_ORDER:
        raise KeyEncodingError("secp256k1 private key is out of range")
    return scalar


class Secp256k1KeyPair(KeyPair):
    """
    SECP256K1 key pair.

    Public keys are 33-byte compressed points; private keys are encoded as
    ``00`` followed by the 32-byte big-endian scalar.
    """

    key_type = KeyType.SECP256K1

    def __init__(self, seed_bytes: Optional[bytes] = None,
                 public_bytes: Optional[bytes] = None,
                 private_bytes: Optional[bytes] = None,
                 options: Union[None, DerivationOptions, Dict[str, Any]] = None):
        """
        Initialize key pair.

        Args:
            seed_bytes: 16 bytes of seed entropy
            public_bytes: 33-byte compressed public key
            private_bytes: 32-byte scalar, optionally ``00`` prefixed
            options: Derivation options (account index, node flag, backend)

        Raises:
            KeyEncodingError: If key material is malformed
            BackendUnavailableError: If the requested backend is missing
        """
        self.options = DerivationOptions.coerce(options)
        super().__init__(seed_bytes=seed_bytes, public_bytes=public_bytes,
                         private_bytes=private_bytes, node=self.options.node)
        self.account_index = self.options.account_index
        self._backend = load_backend(self.options.backend)

        if self._private_bytes is not None:
            self._scalar = _parse_private_scalar(self._private_bytes)
        if self._public_bytes is not None:
            if len(self._public_bytes) != 33:
                raise KeyEncodingError(
                    f"secp256k1 public key must be 33 bytes, got {len(self._public_bytes)}",
                    ErrorCode.INVALID_LENGTH,
                )
            decode_point(self._public_bytes)

        logger.debug(f"secp256k1 key pair using {self._backend.name.value} backend")

    @classmethod
    def from_seed(cls, seed_bytes: bytes,
                  options: Union[None, DerivationOptions, Dict[str, Any]] = None,
                  **kwargs: Any) -> Secp256k1KeyPair:
        """Derive a key pair from 16 bytes of seed entropy."""
        return cls(seed_bytes=seed_bytes, options=DerivationOptions.coerce(options, **kwargs))

    @classmethod
    def from_private(cls, private_key: BytesLike,
                     options: Union[None, DerivationOptions, Dict[str, Any]] = None) -> Secp256k1KeyPair:
        """Create a key pair from raw private key bytes or hex."""
        return cls(private_bytes=parse_bytes(private_key), options=options)

    @classmethod
    def from_public(cls, public_key: BytesLike,
                    options: Union[None, DerivationOptions, Dict[str, Any]] = None) -> Secp256k1KeyPair:
        """
        Create a verify-only key pair.

        Accepts compressed public key bytes, hex, or a base58 node public
        key (which starts with ``n``).
        """
        return cls(public_bytes=parse_public_key(public_key), options=options)

    @cached
    def private_scalar(self) -> int:
        self._require_private_key("private_scalar")
        if self._private_bytes is not None:
            return self._scalar
        return derive_private_key(self._seed_bytes, self.account_index, self.node)

    def _derive_private_bytes(self) -> bytes:
        return bytes([SECP256K1_PRIVATE_PREFIX]) + self.private_scalar().to_bytes(32, "big")

    def _derive_public_bytes(self) -> bytes:
        return compress_point(GENERATOR * self.private_scalar())

    def sign(self, message: Union[bytes, str]) -> bytes:
        """
        Sign a message.

        Returns:
            DER-encoded canonical signature
        """
        self._require_private_key("sign")
        digest = hash_message(self._message_bytes(message))
        return self._backend.sign(self.private_scalar(), digest)

    def verify(self, signature: BytesLike, message: Union[bytes, str]) -> bool:
        try:
            digest = hash_message(self._message_bytes(message))
            return bool(self._backend.verify(self.public_bytes(), parse_bytes(signature), digest))
        except Exception:
            return False


__all__ = [
    "CURVE_ORDER",
    "GENERATOR",
    "derive_scalar",
    "derive_private_key",
    "account_public_from_public_generator",
    "compress_point",
    "decode_point",
    "hash_message",
    "load_backend",
    "Secp256k1KeyPair",
]
