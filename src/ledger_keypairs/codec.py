"""
Base58Check codec for ledger seeds, account addresses and node public keys.

Every encoded value is ``version prefix + payload`` with a 4-byte
double-SHA-256 checksum, rendered in the ledger's base58 alphabet.
"""

from __future__ import annotations
from typing import NamedTuple, Union

import base58

from .enums import KeyType
from .runtime.encoding import BytesLike, parse_bytes
from .runtime.errors import CodecError, ErrorCode

ALPHABET = base58.XRP_ALPHABET

ACCOUNT_ID_PREFIX = b"\x00"
NODE_PUBLIC_PREFIX = b"\x1c"
SECP256K1_SEED_PREFIX = b"\x21"
ED25519_SEED_PREFIX = b"\x01\xe1\x4b"

SEED_LENGTH = 16
ACCOUNT_ID_LENGTH = 20
NODE_PUBLIC_LENGTH = 33


class DecodedSeed(NamedTuple):
    bytes: bytes
    type: KeyType


def _encode(prefix: bytes, payload: bytes, expected_length: int) -> str:
    payload = bytes(payload)
    if len(payload) != expected_length:
        raise CodecError(f"Expected {expected_length} bytes, got {len(payload)}",
                         ErrorCode.INVALID_LENGTH)
    return base58.b58encode_check(prefix + payload, alphabet=ALPHABET).decode("ascii")


def _decode_raw(encoded: Union[str, bytes]) -> bytes:
    if not isinstance(encoded, (str, bytes)):
        raise CodecError(f"Expected a base58 string, got {type(encoded).__name__}")
    try:
        return base58.b58decode_check(encoded, alphabet=ALPHABET)
    except (ValueError, TypeError) as e:
        code = ErrorCode.CHECKSUM_MISMATCH if "checksum" in str(e).lower() else ErrorCode.ENCODING_ERROR
        raise CodecError(f"Invalid base58 value: {e}", code, cause=e)


def _decode(encoded: Union[str, bytes], prefix: bytes, expected_length: int) -> bytes:
    raw = _decode_raw(encoded)
    if not raw.startswith(prefix):
        raise CodecError("Unexpected version prefix", ErrorCode.INVALID_PREFIX)
    payload = raw[len(prefix):]
    if len(payload) != expected_length:
        raise CodecError(f"Expected {expected_length} bytes, got {len(payload)}",
                         ErrorCode.INVALID_LENGTH)
    return payload


def encode_seed(seed: bytes, algorithm: Union[str, KeyType] = KeyType.SECP256K1) -> str:
    """
    Encode 16 bytes of seed entropy.

    secp256k1 seeds start with ``s``, ed25519 seeds with ``sEd``.
    """
    key_type = KeyType.parse(algorithm)
    prefix = ED25519_SEED_PREFIX if key_type is KeyType.ED25519 else SECP256K1_SEED_PREFIX
    return _encode(prefix, seed, SEED_LENGTH)


def decode_seed(seed: Union[str, bytes]) -> DecodedSeed:
    """
    Decode a base58 seed into its entropy and algorithm.

    Raises:
        CodecError: On checksum mismatch or an unknown prefix
    """
    raw = _decode_raw(seed)
    if len(raw) == len(ED25519_SEED_PREFIX) + SEED_LENGTH and raw.startswith(ED25519_SEED_PREFIX):
        return DecodedSeed(raw[len(ED25519_SEED_PREFIX):], KeyType.ED25519)
    if len(raw) == len(SECP256K1_SEED_PREFIX) + SEED_LENGTH and raw.startswith(SECP256K1_SEED_PREFIX):
        return DecodedSeed(raw[len(SECP256K1_SEED_PREFIX):], KeyType.SECP256K1)
    raise CodecError("Not a seed: unknown version prefix or length", ErrorCode.INVALID_PREFIX)


def encode_account_id(account_id: bytes) -> str:
    return _encode(ACCOUNT_ID_PREFIX, account_id, ACCOUNT_ID_LENGTH)


def decode_account_id(address: Union[str, bytes]) -> bytes:
    return _decode(address, ACCOUNT_ID_PREFIX, ACCOUNT_ID_LENGTH)


def encode_node_public(public_key: bytes) -> str:
    return _encode(NODE_PUBLIC_PREFIX, public_key, NODE_PUBLIC_LENGTH)


def decode_node_public(node_public: Union[str, bytes]) -> bytes:
    return _decode(node_public, NODE_PUBLIC_PREFIX, NODE_PUBLIC_LENGTH)


def parse_public_key(public_key: BytesLike) -> bytes:
    """
    Public key bytes from bytes, hex, or a base58 node public key.

    Strings starting with ``n`` are node public keys.
    """
    if isinstance(public_key, str) and public_key.startswith("n"):
        return decode_node_public(public_key)
    return parse_bytes(public_key)


__all__ = [
    "DecodedSeed",
    "encode_seed",
    "decode_seed",
    "encode_account_id",
    "decode_account_id",
    "encode_node_public",
    "decode_node_public",
    "parse_public_key",
]
