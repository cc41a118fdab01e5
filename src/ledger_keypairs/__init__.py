"""
Ledger Keypairs

Deterministic secp256k1 and ed25519 key derivation, signing and account
addresses, compatible byte-for-byte with the reference ledger.
"""

from .enums import KeyType
from .options import DerivationOptions, Secp256k1Backend
from .runtime.errors import *
from .crypto import *
from .codec import (
    DecodedSeed,
    encode_seed,
    decode_seed,
    encode_account_id,
    decode_account_id,
    encode_node_public,
    decode_node_public,
)
from .keys import (
    key_pair_from_seed,
    key_pair_from_public,
    key_pair_from_private,
    generate_account_keys,
    account_keys_from_seed,
    account_keys_from_phrase,
    generate_node_keys,
    node_keys_from_seed,
    node_keys_from_phrase,
    node_public_account_id,
)
from .api import (
    generate_seed,
    derive_keypair,
    derive_keypair_from_phrase,
    derive_node_keys,
    derive_node_keys_from_phrase,
    sign,
    verify,
    derive_address,
    is_valid_address,
    node_public_to_account_id,
)

__version__ = "1.0.0"
__all__ = [
    # Types and options
    "KeyType",
    "DerivationOptions",
    "Secp256k1Backend",
    "KeyPair",
    "Secp256k1KeyPair",
    "Ed25519KeyPair",

    # Codec
    "DecodedSeed",
    "encode_seed",
    "decode_seed",
    "encode_account_id",
    "decode_account_id",
    "encode_node_public",
    "decode_node_public",

    # Key helpers
    "key_pair_from_seed",
    "key_pair_from_public",
    "key_pair_from_private",
    "generate_account_keys",
    "account_keys_from_seed",
    "account_keys_from_phrase",
    "generate_node_keys",
    "node_keys_from_seed",
    "node_keys_from_phrase",
    "node_public_account_id",

    # API
    "generate_seed",
    "derive_keypair",
    "derive_keypair_from_phrase",
    "derive_node_keys",
    "derive_node_keys_from_phrase",
    "sign",
    "verify",
    "derive_address",
    "is_valid_address",
    "node_public_to_account_id",

    # Errors
    "ErrorCode",
    "KeypairsError",
    "EntropyError",
    "CodecError",
    "KeyEncodingError",
    "MissingPrivateKeyError",
    "DerivationExhaustedError",
    "BackendUnavailableError",
]
