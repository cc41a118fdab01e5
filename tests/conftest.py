"""
Test bootstrap:
- Make src/ importable when the package is not installed
- Shared fixtures: reference seeds, phrases and messages
"""
import sys
import pathlib

import pytest

SRC = pathlib.Path(__file__).resolve().parent.parent / "src"

if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


# Reference ledger fixtures
NIQ_PHRASE = "niq"
ZERO_ENTROPY = bytes(16)
COUNTING_ENTROPY = bytes(range(1, 17))
MESSAGE = bytes([0x0B, 0x0E, 0x0E, 0x0F])


@pytest.fixture
def message():
    """Short message signed throughout the reference test suite."""
    return MESSAGE


@pytest.fixture
def niq_seed():
    """16-byte seed hashed from the phrase "niq"."""
    from ledger_keypairs.crypto.hash_utils import seed_from_phrase
    return seed_from_phrase(NIQ_PHRASE)


@pytest.fixture
def secp256k1_pair(niq_seed):
    """secp256k1 account key pair for the "niq" seed."""
    from ledger_keypairs.crypto.secp256k1 import Secp256k1KeyPair
    return Secp256k1KeyPair.from_seed(niq_seed)


@pytest.fixture
def ed25519_pair(niq_seed):
    """ed25519 key pair for the "niq" seed."""
    from ledger_keypairs.crypto.ed25519 import Ed25519KeyPair
    return Ed25519KeyPair.from_seed(niq_seed)
