r"""
Algorithm-agnostic key pair API.

Entry points take and return the string forms used on the ledger: base58
seeds and addresses, upper-case hex keys and signatures. The algorithm is
taken from the seed's prefix or sniffed from the key encoding.
"""

from __future__ import annotations
from typing import Optional, Union

from . import codec
from .crypto.hash_utils import derive_account_id, seed_from_phrase
from .crypto.keypair import KeyPair
from .crypto.secp256k1 import Secp256k1KeyPair
from .enums import KeyType
from .keys import (
    OptionsLike,
    key_pair_from_private,
    key_pair_from_public,
    key_pair_from_seed,
    node_key_pair,
    node_public_account_id,
    parse_seed,
    seed_bytes_from_entropy,
)
from .options import DerivationOptions
from .runtime.encoding import BytesLike, parse_bytes
from .runtime.errors import CodecError, ErrorCode, KeypairsError, KeyEncodingError

Message = Union[bytes, str]


def generate_seed(entropy: Optional[bytes] = None,
                  algorithm: Union[str, KeyType] = KeyType.SECP256K1) -> str:
    """
    Generate a base58 seed.

    Args:
        entropy: At least 16 bytes; only the first 16 are used. Random
            when omitted.
        algorithm: ``secp256k1`` or ``ed25519``

    Returns:
        Base58 seed string

    Raises:
        EntropyError: If fewer than 16 bytes of entropy are supplied
    """
    return codec.encode_seed(seed_bytes_from_entropy(entropy), KeyType.parse(algorithm))


def derive_keypair(seed: str, options: OptionsLike = None) -> KeyPair:
    """
    Derive the key pair for a base58 seed.

    Raises:
        CodecError: If the seed does not decode
    """
    return key_pair_from_seed(seed, options=options)


def derive_keypair_from_phrase(phrase: Union[str, bytes],
                               algorithm: Union[str, KeyType] = KeyType.SECP256K1,
                               options: OptionsLike = None) -> KeyPair:
    """Derive the key pair for a passphrase."""
    return key_pair_from_seed(seed_from_phrase(phrase), algorithm, options)


def derive_node_keys(seed: Union[str, bytes], options: OptionsLike = None) -> Secp256k1KeyPair:
    """
    Derive the root key pair of a network node.

    Raises:
        KeypairsError: If the seed is not a secp256k1 seed
    """
    decoded = parse_seed(seed)
    if decoded.type is not KeyType.SECP256K1:
        raise KeypairsError("Node keys require a secp256k1 seed", ErrorCode.INVALID_KEY_TYPE)
    return node_key_pair(decoded.bytes, options)


def derive_node_keys_from_phrase(phrase: Union[str, bytes], options: OptionsLike = None) -> Secp256k1KeyPair:
    return node_key_pair(seed_from_phrase(phrase), options)


def sign(message: Message, private_key: BytesLike, options: OptionsLike = None) -> str:
    """
    Sign a message with a hex private key.

    ``ED``-prefixed 33-byte keys sign with ed25519, anything else with
    secp256k1.

    Returns:
        Upper-case hex signature

    Raises:
        KeyEncodingError: If the private key is malformed
    """
    return key_pair_from_private(private_key, options).sign_hex(message)


def verify(signature: BytesLike, message: Message, public_key: BytesLike,
           options: OptionsLike = None) -> bool:
    """
    Verify a hex signature against a hex public key.

    Returns ``False`` for any malformed signature or key.

    Raises:
        KeypairsError: If the options are invalid
        BackendUnavailableError: If the requested backend is not installed
    """
    options = DerivationOptions.coerce(options)
    try:
        pair = key_pair_from_public(public_key, options)
    except (KeyEncodingError, CodecError):
        return False
    return pair.verify(signature, message)


def derive_address(public_key: BytesLike) -> str:
    """
    Account address of a public key.

    Raises:
        KeyEncodingError: If the key is not 33 bytes
    """
    public_bytes = parse_bytes(public_key)
    if len(public_bytes) != 33:
        raise KeyEncodingError(f"Public key must be 33 bytes, got {len(public_bytes)}",
                               ErrorCode.INVALID_LENGTH)
    return codec.encode_account_id(derive_account_id(public_bytes))


def is_valid_address(address: str) -> bool:
    """True if the address decodes to a 20-byte account ID."""
    try:
        return len(codec.decode_account_id(address)) == 20
    except (CodecError, ValueError, TypeError):
        return False


def node_public_to_account_id(node_public: BytesLike) -> str:
    """Account address of a node, from its node public key alone."""
    return node_public_account_id(node_public)


__all__ = [
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
]
