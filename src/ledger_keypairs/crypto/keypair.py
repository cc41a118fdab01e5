r"""
Key pair base class shared by the secp256k1 and ed25519 implementations.

A key pair is built from exactly one of: 16 bytes of seed entropy, raw
private key bytes, or raw public key bytes. Everything else (public and
private encodings, account ID) is derived on first use and memoized on
the instance.
"""

from __future__ import annotations
import functools
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Optional, TypeVar, Union

from .. import codec
from ..enums import KeyType
from ..runtime.encoding import bytes_to_hex, to_message_bytes
from ..runtime.errors import ErrorCode, KeypairsError, KeyEncodingError, MissingPrivateKeyError
from .hash_utils import derive_account_id

T = TypeVar("T")

SEED_LENGTH = 16


def cached(method: Callable[[Any], T]) -> Callable[[Any], T]:
    """
    Memoize a zero-argument method on its instance.

    The wrapped computations are pure, so two threads racing on first
    access compute the same value and either result may be stored.
    """
    attr = f"_cached_{method.__name__}"

    @functools.wraps(method)
    def wrapper(self):
        try:
            return self.__dict__[attr]
        except KeyError:
            value = method(self)
            self.__dict__[attr] = value
            return value

    return wrapper


class KeyPair(ABC):
    """
    Common interface of ledger key pairs.

    Subclasses set ``key_type`` and implement signing, verification and the
    derivation of the canonical public/private encodings.
    """

    key_type: KeyType

    def __init__(self, seed_bytes: Optional[bytes] = None,
                 public_bytes: Optional[bytes] = None,
                 private_bytes: Optional[bytes] = None,
                 node: bool = False):
        """
        Initialize from exactly one source of key material.

        Args:
            seed_bytes: 16 bytes of seed entropy
            public_bytes: Canonical public key bytes (verify only)
            private_bytes: Canonical private key bytes
            node: Whether this is a node (root) key pair

        Raises:
            KeypairsError: If zero or several sources are given
            KeyEncodingError: If the seed is not 16 bytes
        """
        given = [v for v in (seed_bytes, public_bytes, private_bytes) if v is not None]
        if len(given) != 1:
            raise KeypairsError(
                "Provide exactly one of seed_bytes, private_bytes or public_bytes",
                ErrorCode.INVALID_OPTIONS,
            )
        if seed_bytes is not None:
            seed_bytes = bytes(seed_bytes)
            if len(seed_bytes) != SEED_LENGTH:
                raise KeyEncodingError(f"Seed must be {SEED_LENGTH} bytes, got {len(seed_bytes)}",
                                       ErrorCode.INVALID_LENGTH)

        self._seed_bytes = seed_bytes
        self._public_bytes = bytes(public_bytes) if public_bytes is not None else None
        self._private_bytes = bytes(private_bytes) if private_bytes is not None else None
        self.node = bool(node)

    @property
    def type(self) -> KeyType:
        return self.key_type

    @abstractmethod
    def sign(self, message: Union[bytes, str]) -> bytes:
        """
        Sign a message.

        Raises:
            MissingPrivateKeyError: If the pair holds no private material
        """
        pass

    @abstractmethod
    def verify(self, signature: bytes, message: Union[bytes, str]) -> bool:
        """
        Verify a signature over a message.

        Never raises; malformed signatures or keys yield ``False``.
        """
        pass

    @abstractmethod
    def _derive_public_bytes(self) -> bytes:
        pass

    @abstractmethod
    def _derive_private_bytes(self) -> bytes:
        pass

    def has_private_key(self) -> bool:
        return self._seed_bytes is not None or self._private_bytes is not None

    def _require_private_key(self, operation: str) -> None:
        if not self.has_private_key():
            raise MissingPrivateKeyError(
                f"{operation} requires a private key; this {self.key_type.value} key pair is public only",
                details={"operation": operation},
            )

    @cached
    def public_bytes(self) -> bytes:
        """Canonical 33-byte public key."""
        if self._public_bytes is not None:
            return self._public_bytes
        return self._derive_public_bytes()

    @cached
    def private_bytes(self) -> bytes:
        """Canonical 33-byte, type-prefixed private key."""
        self._require_private_key("private_bytes")
        return self._derive_private_bytes()

    def public_hex(self) -> str:
        return bytes_to_hex(self.public_bytes())

    def private_hex(self) -> str:
        return bytes_to_hex(self.private_bytes())

    def sign_hex(self, message: Union[bytes, str]) -> str:
        """Sign and return the signature as upper-case hex."""
        return bytes_to_hex(self.sign(message))

    @cached
    def id_bytes(self) -> bytes:
        """20-byte account ID of the public key."""
        return derive_account_id(self.public_bytes())

    # Alias matching the abstract interface name
    identifier = id_bytes

    def id(self) -> str:
        """Base58 account address."""
        return codec.encode_account_id(self.id_bytes())

    def seed(self) -> Optional[str]:
        """Base58 seed this pair was derived from, if any."""
        if self._seed_bytes is None:
            return None
        return codec.encode_seed(self._seed_bytes, self.key_type)

    def to_json(self) -> Dict[str, str]:
        """
        Export the key pair.

        Node key pairs publish their key in node-public form and carry no
        account ``id``; private fields only appear when private material
        exists.
        """
        if self.node:
            public_key = codec.encode_node_public(self.public_bytes())
        else:
            public_key = self.public_hex()
        result = {"publicKey": public_key}

        if self._seed_bytes is not None:
            result["seed"] = self.seed()
        if self.has_private_key():
            result["privateKey"] = self.private_hex()
        if not self.node:
            result["id"] = self.id()
        return result

    export_json = to_json

    @staticmethod
    def _message_bytes(message: Union[bytes, str]) -> bytes:
        return to_message_bytes(message)

    def __eq__(self, other) -> bool:
        if not isinstance(other, KeyPair):
            return False
        return self.key_type == other.key_type and self.public_bytes() == other.public_bytes()

    def __hash__(self) -> int:
        return hash((self.key_type, self.public_bytes()))

    def __str__(self) -> str:
        return f"{type(self).__name__}(public={self.public_hex()[:16]}...)"


__all__ = ["KeyPair", "cached", "SEED_LENGTH"]
