"""
Key set helper tests against reference ledger fixtures.
"""

import pytest

from ledger_keypairs import keys
from ledger_keypairs.crypto.ed25519 import Ed25519KeyPair
from ledger_keypairs.crypto.secp256k1 import Secp256k1KeyPair
from ledger_keypairs.enums import KeyType
from ledger_keypairs.runtime.errors import EntropyError, ErrorCode, KeypairsError

NIQ_PHRASE = "niq"
ZERO_ENTROPY = bytes(16)

NIQ_ED25519 = {
    "seed": "sEd7rBGm5kxzauRTAV2hbsNz7N45X91",
    "id": "rJZdUusLDtY9NEsGea7ijqhVrXv98rYBYN",
    "privateKey": "EDC99B2B037295A6A0F8DBFEA341ED1FC5A7BE6882D7E8DC287C2F4498B87A933A",
    "publicKey": "EDD3993CDC6647896C455F136648B7750723B011475547AF60691AA3D7438E021D",
}

NIQ_SECP256K1 = {
    "seed": "shQUG1pmPYrcnSUGeuJFJTA1b3JSL",
    "id": "rNvfq2SVbCiio1zkN5WwLQW8CHgy2dUoQi",
    "privateKey": "00152E883D92D57814CC0B4E00C1449F153BF59965C78F5ADE7E0B15B3EDE3915C",
    "publicKey": "021E788CDEB9104C9179C3869250A89999C1AFF92D2C3FF7925A1696835EA3D840",
}

NIQ_NODE = {
    "seed": "shQUG1pmPYrcnSUGeuJFJTA1b3JSL",
    "privateKey": "0090959EDC6D5C97941CA33F37E60C1AE9CD5098137D7029443E56377D9E37CE3C",
    "publicKey": "n9KNees3ippJvi7ZT1GqHMCmEmmkCVPxQRPfU5tPzmg9MtWevpjP",
}

ZERO_ED25519 = {
    "seed": "sEdSJHS4oiAdz7w2X2ni1gFiqtbJHqE",
    "id": "r9zRhGr7b6xPekLvT6wP4qNdWMryaumZS7",
    "privateKey": "ED0B6CBAC838DFE7F47EA1BD0DF00EC282FDF45510C92161072CCFB84035390C4D",
    "publicKey": "ED1A7C082846CFF58FF9A892BA4BA2593151CCF1DBA59F37714CC9ED39824AF85F",
}

ZERO_SECP256K1 = {
    "seed": "sp6JS7f14BuwFY8Mw6bTtLKWauoUs",
    "id": "rGCkuB7PBr5tNy68tPEABEtcdno4hE6Y7f",
    "privateKey": "002512BBDFDBB77510883B7DCCBEF270B86DEAC8B64AC762873D75A1BEE6298665",
    "publicKey": "0390A196799EE412284A5D80BF78C3E84CBB80E1437A0AECD9ADF94D7FEAAFA284",
}

ZERO_NODE = {
    "seed": "sp6JS7f14BuwFY8Mw6bTtLKWauoUs",
    "privateKey": "00D296B892B3A7964BD0CC882FC7C0BE948B6BBD8EB1EFF8C13942FCAABF1F3877",
    "publicKey": "n9LPxYzbDpWBZ1bC3J3Fdkgqoa3FEhVKCnS8yKp7RFQFwuvd8Q2c",
}


@pytest.mark.unit
class TestAccountKeys:
    """Test account key sets."""

    def test_from_phrase_ed25519(self):
        assert keys.account_keys_from_phrase(NIQ_PHRASE, "ed25519") == NIQ_ED25519

    def test_from_phrase_secp256k1(self):
        assert keys.account_keys_from_phrase(NIQ_PHRASE) == NIQ_SECP256K1
        assert keys.account_keys_from_phrase(NIQ_PHRASE, KeyType.SECP256K1) == NIQ_SECP256K1

    def test_generate_from_zero_entropy(self):
        assert keys.generate_account_keys(ZERO_ENTROPY, "ed25519") == ZERO_ED25519
        assert keys.generate_account_keys(ZERO_ENTROPY) == ZERO_SECP256K1

    def test_only_first_16_entropy_bytes_used(self):
        assert keys.generate_account_keys(ZERO_ENTROPY + b"\xff" * 16) == ZERO_SECP256K1

    def test_short_entropy_rejected(self):
        with pytest.raises(EntropyError) as exc_info:
            keys.generate_account_keys(bytes(15))
        assert exc_info.value.code == ErrorCode.ENTROPY_TOO_SHORT

    def test_random_keys_have_every_field(self):
        generated = keys.generate_account_keys(key_type="ed25519")
        assert set(generated) == {"seed", "id", "privateKey", "publicKey"}
        assert generated["seed"].startswith("sEd")
        assert generated["id"].startswith("r")

    @pytest.mark.parametrize("fixture", [NIQ_ED25519, NIQ_SECP256K1, ZERO_ED25519, ZERO_SECP256K1])
    def test_from_seed_round_trip(self, fixture):
        assert keys.account_keys_from_seed(fixture["seed"]) == fixture

    def test_seed_type_conflict(self):
        with pytest.raises(KeypairsError) as exc_info:
            keys.account_keys_from_seed(NIQ_ED25519["seed"], "secp256k1")
        assert exc_info.value.code == ErrorCode.INVALID_KEY_TYPE

    def test_unknown_key_type(self):
        with pytest.raises(KeypairsError) as exc_info:
            keys.generate_account_keys(ZERO_ENTROPY, "rsa")
        assert exc_info.value.code == ErrorCode.INVALID_KEY_TYPE


@pytest.mark.unit
class TestNodeKeys:
    """Test network node key sets."""

    def test_from_phrase(self):
        assert keys.node_keys_from_phrase(NIQ_PHRASE) == NIQ_NODE

    def test_generate_from_zero_entropy(self):
        assert keys.generate_node_keys(ZERO_ENTROPY) == ZERO_NODE

    def test_from_seed(self):
        assert keys.node_keys_from_seed(ZERO_NODE["seed"]) == ZERO_NODE

    def test_node_keys_have_no_account_id(self):
        assert "id" not in keys.generate_node_keys()

    def test_ed25519_seed_rejected(self):
        with pytest.raises(KeypairsError) as exc_info:
            keys.node_keys_from_seed(NIQ_ED25519["seed"])
        assert exc_info.value.code == ErrorCode.INVALID_KEY_TYPE

    def test_node_public_account_id(self):
        node_public = "n9MXXueo837zYH36DvMc13BwHcqtfAWNJY5czWVbp7uYTj7x17TH"
        assert keys.node_public_account_id(node_public) == "rhcfR9Cg98qCxHpCcPBmMonbDBXo84wyTn"

    def test_node_public_account_id_matches_account_keys(self):
        assert keys.node_public_account_id(NIQ_NODE["publicKey"]) == NIQ_SECP256K1["id"]
        assert keys.node_public_account_id(ZERO_NODE["publicKey"]) == ZERO_SECP256K1["id"]


@pytest.mark.unit
class TestKeyPairFactories:
    """Test algorithm selection when building key pairs."""

    def test_key_type_sniffing(self):
        assert keys.key_type_of(bytes.fromhex(NIQ_ED25519["publicKey"])) is KeyType.ED25519
        assert keys.key_type_of(bytes.fromhex(NIQ_SECP256K1["publicKey"])) is KeyType.SECP256K1
        assert keys.key_type_of(bytes.fromhex(NIQ_SECP256K1["privateKey"])) is KeyType.SECP256K1

    def test_from_public(self):
        assert isinstance(keys.key_pair_from_public(NIQ_ED25519["publicKey"]), Ed25519KeyPair)
        assert isinstance(keys.key_pair_from_public(NIQ_SECP256K1["publicKey"]), Secp256k1KeyPair)

    def test_from_node_public(self):
        pair = keys.key_pair_from_public(NIQ_NODE["publicKey"])
        assert isinstance(pair, Secp256k1KeyPair)
        assert not pair.has_private_key()

    def test_from_private(self):
        pair = keys.key_pair_from_private(NIQ_ED25519["privateKey"])
        assert pair.public_hex() == NIQ_ED25519["publicKey"]
        pair = keys.key_pair_from_private(NIQ_SECP256K1["privateKey"])
        assert pair.public_hex() == NIQ_SECP256K1["publicKey"]

    def test_from_seed_bytes_defaults_to_secp256k1(self):
        pair = keys.key_pair_from_seed(ZERO_ENTROPY)
        assert pair.type is KeyType.SECP256K1
        assert pair.seed() == ZERO_SECP256K1["seed"]

    def test_account_index_option(self):
        first = keys.key_pair_from_seed(ZERO_ENTROPY, options={"accountIndex": 1})
        again = keys.key_pair_from_seed(ZERO_ENTROPY, options={"account_index": 1})
        default = keys.key_pair_from_seed(ZERO_ENTROPY)
        assert first.public_bytes() == again.public_bytes()
        assert first.public_bytes() != default.public_bytes()

    def test_pair_type(self):
        assert keys.pair_type(None) is Secp256k1KeyPair
        assert keys.pair_type("ED25519") is Ed25519KeyPair

    def test_key_sets_are_dicts(self):
        assert keys.account_key_set(ZERO_ENTROPY) == ZERO_SECP256K1
        assert keys.account_key_set(ZERO_ENTROPY, "ed25519") == ZERO_ED25519
        assert keys.node_key_set(ZERO_ENTROPY) == ZERO_NODE
        assert not hasattr(keys, "derive_node_keys")
