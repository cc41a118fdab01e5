"""
Byte and hex helpers shared by the key pair implementations.

Keys and signatures travel as upper-case hex strings, the form the ledger
tooling emits; input hex is accepted in either case.
"""

from __future__ import annotations
import secrets
from typing import Union

from .errors import KeyEncodingError, ErrorCode

BytesLike = Union[bytes, bytearray, memoryview, str]


def parse_bytes(value: BytesLike) -> bytes:
    """
    Normalize bytes-like input or a hex string to ``bytes``.

    Args:
        value: Raw bytes or a hex string

    Returns:
        The decoded bytes

    Raises:
        KeyEncodingError: If a string is not valid hex
    """
    if isinstance(value, str):
        try:
            return bytes.fromhex(value)
        except ValueError as e:
            raise KeyEncodingError(f"Invalid hex string: {e}", ErrorCode.INVALID_HEX, cause=e)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise KeyEncodingError(f"Expected bytes or hex string, got {type(value).__name__}")


def bytes_to_hex(data: bytes) -> str:
    """Upper-case hex encoding."""
    return data.hex().upper()


def to_message_bytes(message: Union[bytes, bytearray, str]) -> bytes:
    """Messages are signed as raw bytes; text is UTF-8 encoded first."""
    if isinstance(message, str):
        return message.encode("utf-8")
    return bytes(message)


def random_bytes(n: int) -> bytes:
    """Cryptographically secure entropy."""
    return secrets.token_bytes(n)


__all__ = [
    "BytesLike",
    "parse_bytes",
    "bytes_to_hex",
    "to_message_bytes",
    "random_bytes",
]
