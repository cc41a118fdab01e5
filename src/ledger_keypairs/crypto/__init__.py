"""
Cryptographic primitives for ledger key pairs.

Provides the SHA-512 hash chain, scalar derivation, and the secp256k1 and
ed25519 key pair implementations.
"""

from .hash_utils import Sha512, sha512_half, derive_account_id, seed_from_phrase
from .keypair import KeyPair
from .secp256k1 import (
    Secp256k1KeyPair,
    derive_scalar,
    derive_private_key,
    account_public_from_public_generator,
    CURVE_ORDER,
)
from .ed25519 import Ed25519KeyPair

__all__ = [
    "Sha512",
    "sha512_half",
    "derive_account_id",
    "seed_from_phrase",
    "KeyPair",
    "Secp256k1KeyPair",
    "Ed25519KeyPair",
    "derive_scalar",
    "derive_private_key",
    "account_public_from_public_generator",
    "CURVE_ORDER",
]
