r"""
Key pair construction helpers.

Builds the right key pair type from seeds, private keys and public keys,
and produces the JSON key sets used for accounts and network nodes.
"""

from __future__ import annotations
from typing import Any, Dict, Optional, Tuple, Type, Union

from . import codec
from .codec import DecodedSeed, parse_public_key
from .crypto.ed25519 import Ed25519KeyPair
from .crypto.hash_utils import derive_account_id, seed_from_phrase
from .crypto.keypair import KeyPair, SEED_LENGTH
from .crypto.secp256k1 import Secp256k1KeyPair, account_public_from_public_generator
from .enums import ED25519_PREFIX, KeyType
from .options import DerivationOptions
from .runtime.encoding import BytesLike, parse_bytes, random_bytes
from .runtime.errors import EntropyError, ErrorCode, KeypairsError

OptionsLike = Union[None, DerivationOptions, Dict[str, Any]]

_PAIR_TYPES: Dict[KeyType, Type[KeyPair]] = {
    KeyType.SECP256K1: Secp256k1KeyPair,
    KeyType.ED25519: Ed25519KeyPair,
}


def pair_type(key_type: Union[str, KeyType, None]) -> Type[KeyPair]:
    """Key pair class for an algorithm name."""
    return _PAIR_TYPES[KeyType.parse(key_type)]


def seed_bytes_from_entropy(entropy: Optional[bytes] = None) -> bytes:
    """
    Take 16 bytes of seed entropy, generating them when not supplied.

    Raises:
        EntropyError: If fewer than 16 bytes are supplied
    """
    if entropy is None:
        return random_bytes(SEED_LENGTH)
    entropy = bytes(entropy)
    if len(entropy) < SEED_LENGTH:
        raise EntropyError(details={"length": len(entropy)})
    return entropy[:SEED_LENGTH]


def parse_seed(seed: Union[str, bytes], seed_type: Union[str, KeyType, None] = None) -> DecodedSeed:
    """
    Seed entropy and algorithm from a base58 seed or raw bytes.

    Raw bytes carry no algorithm, so ``seed_type`` (default secp256k1)
    applies. A base58 seed names its own algorithm; a conflicting
    ``seed_type`` is an error.
    """
    if isinstance(seed, str):
        decoded = codec.decode_seed(seed)
        if seed_type is not None and KeyType.parse(seed_type) is not decoded.type:
            raise KeypairsError(
                f"Seed is {decoded.type.value}, not {KeyType.parse(seed_type).value}",
                ErrorCode.INVALID_KEY_TYPE,
            )
        return decoded
    return DecodedSeed(bytes(seed), KeyType.parse(seed_type))


def key_type_of(key_bytes: bytes) -> KeyType:
    """
    Algorithm of an encoded public or private key.

    33 bytes with a leading ``0xED`` is ed25519; anything else is secp256k1.
    """
    if len(key_bytes) == 33 and key_bytes[0] == ED25519_PREFIX:
        return KeyType.ED25519
    return KeyType.SECP256K1


def parse_key(key: BytesLike) -> Tuple[KeyType, bytes]:
    key_bytes = parse_public_key(key)
    return key_type_of(key_bytes), key_bytes


def key_pair_from_seed(seed: Union[str, bytes], key_type: Union[str, KeyType, None] = None,
                       options: OptionsLike = None) -> KeyPair:
    """Derive a key pair from a base58 seed or 16 raw seed bytes."""
    decoded = parse_seed(seed, key_type)
    return pair_type(decoded.type).from_seed(decoded.bytes, options)


def key_pair_from_public(public_key: BytesLike, options: OptionsLike = None) -> KeyPair:
    """Verify-only key pair, algorithm inferred from the key."""
    key_type, key_bytes = parse_key(public_key)
    if key_type is KeyType.ED25519:
        return Ed25519KeyPair(public_bytes=key_bytes, options=options)
    return Secp256k1KeyPair(public_bytes=key_bytes, options=options)


def key_pair_from_private(private_key: BytesLike, options: OptionsLike = None) -> KeyPair:
    """Signing key pair, algorithm inferred from the key."""
    key_bytes = parse_bytes(private_key)
    key_type = key_type_of(key_bytes)
    if key_type is KeyType.ED25519:
        return Ed25519KeyPair(private_bytes=key_bytes, options=options)
    return Secp256k1KeyPair(private_bytes=key_bytes, options=options)


def account_key_set(seed_bytes: bytes, key_type: Union[str, KeyType, None] = None) -> Dict[str, str]:
    """JSON key set of the account key pair for a seed."""
    return pair_type(key_type).from_seed(seed_bytes).to_json()


def node_key_set(seed_bytes: bytes, options: OptionsLike = None) -> Dict[str, str]:
    """JSON key set of the node key pair for a seed."""
    return node_key_pair(seed_bytes, options).to_json()


def node_key_pair(seed_bytes: bytes, options: OptionsLike = None) -> Secp256k1KeyPair:
    """Root secp256k1 key pair used by network nodes."""
    return Secp256k1KeyPair.from_seed(seed_bytes, options, node=True)


def generate_account_keys(entropy: Optional[bytes] = None,
                          key_type: Union[str, KeyType, None] = None) -> Dict[str, str]:
    """Key set for a new account, from fresh or supplied entropy."""
    return account_key_set(seed_bytes_from_entropy(entropy), key_type)


def account_keys_from_seed(seed: Union[str, bytes],
                           seed_type: Union[str, KeyType, None] = None) -> Dict[str, str]:
    decoded = parse_seed(seed, seed_type)
    return account_key_set(decoded.bytes, decoded.type)


def account_keys_from_phrase(phrase: Union[str, bytes],
                             seed_type: Union[str, KeyType, None] = None) -> Dict[str, str]:
    return account_key_set(seed_from_phrase(phrase), seed_type)


def generate_node_keys(entropy: Optional[bytes] = None) -> Dict[str, str]:
    """Key set for a new network node."""
    return node_key_set(seed_bytes_from_entropy(entropy))


def node_keys_from_seed(seed: Union[str, bytes],
                        seed_type: Union[str, KeyType, None] = None) -> Dict[str, str]:
    """
    Node key set for a seed.

    Raises:
        KeypairsError: If the seed is not a secp256k1 seed
    """
    decoded = parse_seed(seed, seed_type)
    if decoded.type is not KeyType.SECP256K1:
        raise KeypairsError("Node keys require a secp256k1 seed", ErrorCode.INVALID_KEY_TYPE)
    return node_key_set(decoded.bytes)


def node_keys_from_phrase(phrase: Union[str, bytes]) -> Dict[str, str]:
    return node_key_set(seed_from_phrase(phrase))


def node_public_account_id(node_public: BytesLike) -> str:
    """
    Account address controlled by a node's key.

    Uses only the node's public key: the account public key is the node
    public generator offset by the account 0 scalar.
    """
    generator_bytes = parse_public_key(node_public)
    account_public = account_public_from_public_generator(generator_bytes)
    return codec.encode_account_id(derive_account_id(account_public))


__all__ = [
    "pair_type",
    "seed_bytes_from_entropy",
    "parse_public_key",
    "parse_seed",
    "parse_key",
    "key_type_of",
    "seed_from_phrase",
    "key_pair_from_seed",
    "key_pair_from_public",
    "key_pair_from_private",
    "account_key_set",
    "node_key_set",
    "node_key_pair",
    "generate_account_keys",
    "account_keys_from_seed",
    "account_keys_from_phrase",
    "generate_node_keys",
    "node_keys_from_seed",
    "node_keys_from_phrase",
    "node_public_account_id",
]
