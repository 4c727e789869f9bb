"""
Unit tests for the genesis assemblers and writer.
"""

import json
import os
import stat
import tempfile
import unittest

from ethgenesis import contracts
from ethgenesis.errors import GenesisFormatError, GenesisSerializationError
from ethgenesis.genesis import (
    DEFAULT_BALANCE,
    EXTRA_DATA_LENGTH,
    IBFT_EXTRA_DATA,
    ZERO_HASH,
    Alloc,
    Genesis,
    IBFTGenesis,
    Storage,
    clique_extra_data,
    create_genesis,
    create_ibft_genesis,
    dumps_genesis,
    load_genesis,
    parse_genesis,
    write_genesis_json,
)

ADDRESS_A = "0xfe3b557e8fb62b89f4916b721be55ceb828dbd73"
ADDRESS_B = "0x627306090abab3a6e1400e9345bc60c78a8bef57"
ADDRESS_C = "0xf17f52151ebef6c7334fad080c5704d77216b732"
SYSTEM_ADDRESSES = [contracts.ACCOUNT_INGRESS_ADDRESS, contracts.NODE_INGRESS_ADDRESS]


class TestCliqueExtraData(unittest.TestCase):
    def test_no_addresses(self):
        extra_data = clique_extra_data([])
        self.assertEqual(len(extra_data), EXTRA_DATA_LENGTH)
        self.assertEqual(extra_data, "0x" + "0" * (EXTRA_DATA_LENGTH - 2))

    def test_addresses_in_order_then_padding(self):
        extra_data = clique_extra_data([ADDRESS_A, ADDRESS_B, ADDRESS_C])
        prefix = ZERO_HASH + ADDRESS_A + ADDRESS_B + ADDRESS_C
        self.assertEqual(len(extra_data), EXTRA_DATA_LENGTH)
        self.assertTrue(extra_data.startswith(prefix))
        self.assertEqual(set(extra_data[len(prefix):]), {"0"})

    def test_over_length_is_not_truncated(self):
        addresses = [ADDRESS_A, ADDRESS_B, ADDRESS_C, ADDRESS_A, ADDRESS_B]
        extra_data = clique_extra_data(addresses)
        self.assertEqual(extra_data, ZERO_HASH + "".join(addresses))
        self.assertGreater(len(extra_data), EXTRA_DATA_LENGTH)


class TestCreateGenesis(unittest.TestCase):
    def test_example_address(self):
        address = "0xaaaa000000000000000000000000000000aaaa"
        genesis = create_genesis([address])
        doc = genesis.to_dict()

        self.assertEqual(doc["alloc"], {address: {"balance": DEFAULT_BALANCE}})
        self.assertEqual(
            doc["alloc"][address]["balance"],
            "0x200000000000000000000000000000000000000000000000000000000000000",
        )
        self.assertEqual(len(doc["extraData"]), 236)
        self.assertTrue(doc["extraData"].startswith(
            "0x0000000000000000000000000000000000000000000000000000000000000000" + address))
        self.assertEqual(doc["extraData"].rstrip("0"), (ZERO_HASH + address).rstrip("0"))

    def test_every_address_funded(self):
        genesis = create_genesis([ADDRESS_A, ADDRESS_B, ADDRESS_C])
        self.assertEqual(list(genesis.alloc), [ADDRESS_A, ADDRESS_B, ADDRESS_C])
        for entry in genesis.alloc.values():
            self.assertEqual(entry, Alloc(balance=DEFAULT_BALANCE))

    def test_empty(self):
        genesis = create_genesis([])
        self.assertEqual(genesis.alloc, {})
        self.assertEqual(len(genesis.extra_data), EXTRA_DATA_LENGTH)

    def test_fixed_fields(self):
        doc = create_genesis([ADDRESS_A]).to_dict()
        self.assertEqual(doc["config"], {
            "chainId": 2021,
            "homesteadBlock": 0,
            "eip150Block": 0,
            "eip150Hash": ZERO_HASH,
            "eip155Block": 0,
            "eip158Block": 0,
            "byzantiumBlock": 0,
            "constantinopleBlock": 0,
            "petersburgBlock": 0,
            "istanbulBlock": 0,
            "clique": {"period": 0, "epoch": 30000},
        })
        self.assertEqual(doc["nonce"], "0x0")
        self.assertEqual(doc["timestamp"], "0x60edb1c7")
        self.assertEqual(doc["gasLimit"], "0x47b760")
        self.assertEqual(doc["difficulty"], "0x1")
        self.assertEqual(doc["mixHash"], ZERO_HASH)
        self.assertEqual(doc["coinbase"], "0x" + "0" * 40)
        self.assertEqual(doc["number"], "0x0")
        self.assertEqual(doc["gasUsed"], "0x0")
        self.assertEqual(doc["parentHash"], ZERO_HASH)

    def test_key_order(self):
        doc = create_genesis([ADDRESS_A]).to_dict()
        self.assertEqual(list(doc), [
            "config", "nonce", "timestamp", "extraData", "gasLimit", "difficulty",
            "mixHash", "coinbase", "alloc", "number", "gasUsed", "parentHash",
        ])
        self.assertEqual(list(doc["config"])[-1], "clique")

    def test_malformed_address_passed_through(self):
        genesis = create_genesis(["not-an-address"])
        self.assertIn("not-an-address", genesis.alloc)
        self.assertTrue(genesis.extra_data.startswith(ZERO_HASH + "not-an-address"))


class TestCreateIBFTGenesis(unittest.TestCase):
    def assert_ingress(self, entry, code):
        self.assertEqual(entry.balance, "0")
        self.assertEqual(entry.code, code)
        self.assertEqual(entry.storage.to_dict(), {
            "0x0000000000000000000000000000000000000000000000000000000000000000":
                "0x72756c6573000000000000000000000000000000000000000000000000000000",
            "0x0000000000000000000000000000000000000000000000000000000000000001":
                "0x61646d696e697374726174696f6e000000000000000000000000000000000000",
            "0x0000000000000000000000000000000000000000000000000000000000000004": "0x0f4240",
        })

    def test_empty_has_only_system_accounts(self):
        genesis = create_ibft_genesis([])
        self.assertEqual(sorted(genesis.alloc), sorted(SYSTEM_ADDRESSES))
        self.assert_ingress(genesis.alloc[contracts.ACCOUNT_INGRESS_ADDRESS], contracts.ACCOUNT_INGRESS_CODE)
        self.assert_ingress(genesis.alloc[contracts.NODE_INGRESS_ADDRESS], contracts.NODE_INGRESS_CODE)

    def test_addresses_funded_and_system_accounts_present(self):
        genesis = create_ibft_genesis([ADDRESS_A, ADDRESS_B])
        self.assertEqual(list(genesis.alloc), [ADDRESS_A, ADDRESS_B] + SYSTEM_ADDRESSES)
        self.assertEqual(genesis.alloc[ADDRESS_A], Alloc(balance=DEFAULT_BALANCE))
        self.assert_ingress(genesis.alloc[contracts.NODE_INGRESS_ADDRESS], contracts.NODE_INGRESS_CODE)

    def test_extra_data_independent_of_addresses(self):
        self.assertEqual(create_ibft_genesis([]).extra_data, IBFT_EXTRA_DATA)
        self.assertEqual(create_ibft_genesis([ADDRESS_A, ADDRESS_B]).extra_data, IBFT_EXTRA_DATA)
        self.assertTrue(IBFT_EXTRA_DATA.startswith("0xf87ea0"))
        self.assertTrue(IBFT_EXTRA_DATA.endswith("808400000000c0"))

    def test_bytecode_is_verbatim(self):
        self.assertEqual(len(contracts.ACCOUNT_INGRESS_CODE), 7620)
        self.assertEqual(len(contracts.NODE_INGRESS_CODE), 5872)
        self.assertTrue(contracts.ACCOUNT_INGRESS_CODE.startswith("0x608060405234801561001057600080fd5b50"))
        self.assertTrue(contracts.ACCOUNT_INGRESS_CODE.endswith("64736f6c63430005090032"))
        self.assertTrue(contracts.NODE_INGRESS_CODE.endswith("64736f6c63430005090032"))

    def test_system_address_overrides_caller(self):
        genesis = create_ibft_genesis([contracts.ACCOUNT_INGRESS_ADDRESS])
        self.assertEqual(len(genesis.alloc), 2)
        self.assert_ingress(genesis.alloc[contracts.ACCOUNT_INGRESS_ADDRESS], contracts.ACCOUNT_INGRESS_CODE)

    def test_fixed_fields(self):
        doc = create_ibft_genesis([ADDRESS_A]).to_dict()
        self.assertEqual(list(doc), [
            "config", "nonce", "timestamp", "gasLimit", "difficulty",
            "mixHash", "extraData", "coinbase", "alloc",
        ])
        self.assertEqual(doc["config"], {
            "chainId": 1337,
            "constantinoplefixblock": 0,
            "ibft2": {"blockperiodseconds": 1, "epochlength": 30000, "requesttimeoutseconds": 10},
        })
        self.assertEqual(doc["timestamp"], "0x58ee40ba")
        self.assertEqual(doc["gasLimit"], "0xffffffff")
        self.assertEqual(doc["mixHash"], "0x63746963616c2062797a616e74696e65206661756c7420746f6c6572616e6365")
        self.assertNotIn("parentHash", doc)


class TestAlloc(unittest.TestCase):
    def test_balance_only(self):
        self.assertEqual(Alloc(balance="0x1").to_dict(), {"balance": "0x1"})

    def test_empty_code_omitted(self):
        storage = Storage(rules="0x1", administration="0x2", version="0x3")
        self.assertEqual(list(Alloc(balance="0", storage=storage).to_dict()), ["balance", "storage"])

    def test_with_code(self):
        entry = Alloc(balance="0", code="0x6080604052")
        self.assertEqual(entry.to_dict(), {"balance": "0", "code": "0x6080604052"})
        self.assertEqual(Alloc.from_dict(entry.to_dict()), entry)


class TestDumpsGenesis(unittest.TestCase):
    def test_one_space_indent(self):
        text = dumps_genesis(create_genesis([ADDRESS_A]))
        self.assertTrue(text.startswith('{\n "config": {\n  "chainId": 2021,'))
        self.assertFalse(text.endswith("\n"))

    def test_round_trip(self):
        for genesis in (create_genesis([ADDRESS_A, ADDRESS_B]), create_ibft_genesis([ADDRESS_C])):
            data = json.loads(dumps_genesis(genesis))
            self.assertEqual(data, genesis.to_dict())
            self.assertEqual(parse_genesis(data), genesis)

    def test_unserializable_value(self):
        genesis = Genesis(extra_data=ZERO_HASH, alloc={ADDRESS_A: Alloc(balance=object())})
        with self.assertRaises(GenesisSerializationError) as ctx:
            dumps_genesis(genesis)
        self.assertIsInstance(ctx.exception.__cause__, TypeError)


class TestWriteGenesisJson(unittest.TestCase):
    def test_write_and_load(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "genesis.json")
            genesis = create_ibft_genesis([ADDRESS_A])
            genesis.write_json(path)

            with open(path, "r") as f:
                self.assertEqual(f.read(), dumps_genesis(genesis))
            loaded = load_genesis(path)
            self.assertIsInstance(loaded, IBFTGenesis)
            self.assertEqual(loaded, genesis)

    def test_file_mode(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "genesis.json")
            old_umask = os.umask(0)
            try:
                write_genesis_json(create_genesis([]), path)
            finally:
                os.umask(old_umask)
            self.assertEqual(stat.S_IMODE(os.stat(path).st_mode), 0o755)

    def test_truncates_existing_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "genesis.json")
            with open(path, "w") as f:
                f.write("x" * 100000)

            genesis = create_genesis([ADDRESS_A])
            write_genesis_json(genesis, path)

            self.assertIsInstance(load_genesis(path), Genesis)
            self.assertEqual(os.path.getsize(path), len(dumps_genesis(genesis)))

    def test_missing_directory_raises_os_error(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "missing", "genesis.json")
            with self.assertRaises(FileNotFoundError):
                write_genesis_json(create_genesis([ADDRESS_A]), path)


class TestLoadGenesis(unittest.TestCase):
    def write(self, tmpdir, content):
        path = os.path.join(tmpdir, "genesis.json")
        with open(path, "w") as f:
            f.write(content)
        return path

    def test_invalid_json(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            with self.assertRaises(GenesisFormatError):
                load_genesis(self.write(tmpdir, "{not json"))

    def test_not_an_object(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            with self.assertRaises(GenesisFormatError):
                load_genesis(self.write(tmpdir, "[]"))

    def test_missing_key(self):
        doc = create_genesis([ADDRESS_A]).to_dict()
        del doc["parentHash"]
        with tempfile.TemporaryDirectory() as tmpdir:
            with self.assertRaises(GenesisFormatError):
                load_genesis(self.write(tmpdir, json.dumps(doc)))

    def test_missing_storage_slot(self):
        doc = create_ibft_genesis([]).to_dict()
        del doc["alloc"][contracts.NODE_INGRESS_ADDRESS]["storage"][contracts.VERSION_SLOT]
        with self.assertRaises(GenesisFormatError):
            parse_genesis(doc)


if __name__ == "__main__":
    unittest.main()
