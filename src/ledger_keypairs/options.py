"""
Derivation and signing options.

Options are passed explicitly per key pair; nothing is read from the
process environment.
"""

from __future__ import annotations
from enum import Enum
from typing import Any, Dict, Union

from pydantic import AliasChoices, BaseModel, Field, ValidationError, model_validator

from .runtime.errors import ErrorCode, KeypairsError

U32_MAX = 0xFFFFFFFF


class Secp256k1Backend(str, Enum):
    """ECDSA implementation used for secp256k1 signing and verification."""

    ECDSA = "ecdsa"
    COINCURVE = "coincurve"


class DerivationOptions(BaseModel):
    """
    Options controlling secp256k1 key derivation.

    ``node`` selects the root (node/validator) derivation path; it is also
    accepted under its older name ``validator``.
    """
    account_index: int = Field(default=0, ge=0, le=U32_MAX, alias="accountIndex",
                               description="Account number derived from the seed")
    node: bool = Field(default=False, validation_alias=AliasChoices("node", "validator"),
                       description="Derive the root key used by network nodes")
    backend: Secp256k1Backend = Field(default=Secp256k1Backend.ECDSA,
                                      description="secp256k1 signing backend")

    model_config = {"populate_by_name": True, "frozen": True}

    @model_validator(mode="after")
    def _node_keys_have_no_account_index(self) -> "DerivationOptions":
        if self.node and self.account_index != 0:
            raise ValueError("node key pairs have no account index")
        return self

    @classmethod
    def coerce(cls, options: Union[None, "DerivationOptions", Dict[str, Any]] = None,
               **overrides: Any) -> "DerivationOptions":
        """
        Build options from ``None``, a mapping or an existing instance.

        Raises:
            KeypairsError: If the options fail validation
        """
        if isinstance(options, cls) and not overrides:
            return options
        data: Dict[str, Any] = {}
        if isinstance(options, cls):
            data.update(options.model_dump())
        elif options is not None:
            data.update(options)
        data.update(overrides)
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise KeypairsError(f"Invalid derivation options: {e}", ErrorCode.INVALID_OPTIONS, cause=e)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a camelCase dictionary."""
        return {
            "accountIndex": self.account_index,
            "node": self.node,
            "backend": self.backend.value,
        }


__all__ = ["Secp256k1Backend", "DerivationOptions"]
