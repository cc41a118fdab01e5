"""
Ledger Keypairs Error Model

This module provides the error handling framework for the key pair library.
Input problems are raised immediately; signature verification never raises
and reports failures as ``False`` instead.
"""

from __future__ import annotations
from typing import Optional, Dict, Any
from enum import IntEnum


class ErrorCode(IntEnum):
    """Error codes for key derivation, encoding and signing failures."""

    # Success
    OK = 0

    # General errors (1-99)
    UNKNOWN = 1
    INTERNAL = 2
    NOT_IMPLEMENTED = 3

    # Encoding errors (100-199)
    ENCODING_ERROR = 100
    INVALID_HEX = 101
    CHECKSUM_MISMATCH = 102
    INVALID_PREFIX = 103
    INVALID_LENGTH = 104

    # Input validation errors (200-299)
    ENTROPY_TOO_SHORT = 200
    INVALID_OPTIONS = 201
    INVALID_KEY_TYPE = 202

    # Key errors (300-399)
    INVALID_KEY = 300
    MISSING_PRIVATE_KEY = 301
    BACKEND_UNAVAILABLE = 302

    # Derivation errors (400-499)
    DERIVATION_EXHAUSTED = 400


class KeypairsError(Exception):
    """
    Base class for all key pair errors.

    Carries a structured error code, optional details and the underlying
    exception, mirroring how errors are reported across the library.
    """

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        """
        Initialize a key pair error.

        Args:
            message: Error message
            code: Error code
            details: Additional error details
            cause: Underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        """String representation of the error."""
        parts = [f"[{self.code.name}] {self.message}"]
        if self.details:
            parts.append(f"Details: {self.details}")
        if self.cause:
            parts.append(f"Caused by: {self.cause}")
        return " | ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result = {
            "code": self.code.value,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.cause:
            result["cause"] = str(self.cause)
        return result


class EntropyError(KeypairsError, ValueError):
    """Entropy supplied for seed generation is unusable."""

    def __init__(self, message: str = "entropy too short",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.ENTROPY_TOO_SHORT, details, cause)


class CodecError(KeypairsError, ValueError):
    """Base58 seed, address or node public key could not be decoded."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.ENCODING_ERROR,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class KeyEncodingError(KeypairsError, ValueError):
    """Malformed key material (bad hex, wrong length, invalid point)."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INVALID_KEY,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class MissingPrivateKeyError(KeypairsError):
    """Operation requires private material the key pair does not hold."""

    def __init__(self, message: str = "key pair has no private key",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.MISSING_PRIVATE_KEY, details, cause)


class DerivationExhaustedError(KeypairsError):
    """Scalar derivation ran out of counter values."""

    def __init__(self, message: str = "scalar derivation exhausted the counter space",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.DERIVATION_EXHAUSTED, details, cause)


class BackendUnavailableError(KeypairsError):
    """Requested signing backend is not installed."""

    def __init__(self, message: str,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.BACKEND_UNAVAILABLE, details, cause)


__all__ = [
    "ErrorCode",
    "KeypairsError",
    "EntropyError",
    "CodecError",
    "KeyEncodingError",
    "MissingPrivateKeyError",
    "DerivationExhaustedError",
    "BackendUnavailableError",
]
