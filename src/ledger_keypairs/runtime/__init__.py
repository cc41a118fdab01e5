"""Runtime helpers for the ledger key pair library"""

from .errors import (
    ErrorCode,
    KeypairsError,
    EntropyError,
    CodecError,
    KeyEncodingError,
    MissingPrivateKeyError,
    DerivationExhaustedError,
    BackendUnavailableError,
)
from .encoding import parse_bytes, bytes_to_hex, to_message_bytes, random_bytes

__all__ = [
    "ErrorCode",
    "KeypairsError",
    "EntropyError",
    "CodecError",
    "KeyEncodingError",
    "MissingPrivateKeyError",
    "DerivationExhaustedError",
    "BackendUnavailableError",
    "parse_bytes",
    "bytes_to_hex",
    "to_message_bytes",
    "random_bytes",
]
