"""
Hash chain and account ID tests.
"""

import hashlib

import pytest

from ledger_keypairs.crypto.hash_utils import (
    Sha512,
    derive_account_id,
    ripemd160,
    seed_from_phrase,
    sha512_half,
)


@pytest.mark.crypto
class TestSha512:
    """Test the streaming SHA-512 accumulator."""

    def test_matches_hashlib_over_concatenation(self):
        chained = Sha512().add(b"abc").add(b"def").finish()
        assert chained == hashlib.sha512(b"abcdef").digest()
        assert len(chained) == 64

    def test_add_u32_is_big_endian(self):
        chained = Sha512().add(b"x").add_u32(0x01020304).finish()
        assert chained == hashlib.sha512(b"x\x01\x02\x03\x04").digest()

    def test_first256_and_int(self):
        digest = hashlib.sha512(b"seed").digest()
        hasher = Sha512().add(b"seed")
        assert hasher.first256() == digest[:32]
        assert hasher.first256_int() == int.from_bytes(digest[:32], "big")

    @pytest.mark.parametrize("value", [-1, 0x100000000])
    def test_add_u32_rejects_out_of_range(self, value):
        with pytest.raises(ValueError):
            Sha512().add_u32(value)

    def test_fresh_instances_do_not_share_state(self):
        first = Sha512().add(b"one")
        second = Sha512()
        assert second.finish() == hashlib.sha512(b"").digest()
        assert first.finish() == hashlib.sha512(b"one").digest()

    def test_sha512_half(self):
        assert sha512_half(b"data") == hashlib.sha512(b"data").digest()[:32]


@pytest.mark.crypto
class TestAccountId:
    """Test account ID hashing."""

    def test_ripemd160_known_vector(self):
        # RIPEMD-160 test vector for "abc"
        assert ripemd160(b"abc").hex() == "8eb208f7e05d987a9b044a8e98c6b087f15a0bfc"

    def test_account_id_is_ripemd_of_sha256(self):
        public_key = bytes.fromhex("ED" + "11" * 32)
        expected = ripemd160(hashlib.sha256(public_key).digest())
        assert derive_account_id(public_key) == expected
        assert len(derive_account_id(public_key)) == 20

    def test_account_id_rejects_non_bytes(self):
        with pytest.raises(ValueError):
            derive_account_id("ED" + "11" * 32)


@pytest.mark.crypto
def test_seed_from_phrase():
    assert seed_from_phrase("niq") == hashlib.sha512(b"niq").digest()[:16]
    assert seed_from_phrase(b"niq") == seed_from_phrase("niq")
    assert len(seed_from_phrase("any phrase at all")) == 16
