"""
Genesis documents for Clique and IBFT2 networks.

Two parallel pipelines live here. Each has an assembler that turns an ordered
list of account addresses into a genesis record, and a writer that serializes
the record to indented JSON on disk.

Usage:
    genesis = create_genesis(["0x..."])
    genesis.write_json("genesis.json")
"""

import json
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Optional, Union

from eth_utils import is_hex_address
from loguru import logger

from ethgenesis import contracts
from ethgenesis.errors import GenesisFormatError, GenesisSerializationError

ZERO_HASH = "0x" + "0" * 64
ZERO_ADDRESS = "0x" + "0" * 40

# Balance for every caller supplied account. Copied verbatim, never parsed.
DEFAULT_BALANCE = "0x200000000000000000000000000000000000000000000000000000000000000"
SYSTEM_BALANCE = "0"

# 32 byte vanity, room for a few signers, then the 65 byte seal.
EXTRA_DATA_LENGTH = 236

# Magic mix hash identifying an istanbul byzantine fault tolerance block.
IBFT_MIX_HASH = "0x63746963616c2062797a616e74696e65206661756c7420746f6c6572616e6365"

# RLP([vanity, [validators], no vote, round 0, no seals]).
IBFT_EXTRA_DATA = (
    "0xf87ea00000000000000000000000000000000000000000000000000000000000000000"
    "f854944592c8e45706cc08b8f44b11e43cba0cfc5892cb9406e23768a0f59cf365e18c2e"
    "0c89e151bcdedc7094c5327f96ee02d7bcbc1bf1236b8c15148971e1de94ab5e7f4061c6"
    "05820d3744227eed91ff8e2c8908808400000000c0"
)

GENESIS_FILE_MODE = 0o755
JSON_INDENT = 1


@dataclass(frozen=True)
class CliqueConfig:
    period: int = 0
    epoch: int = 30000

    def to_dict(self) -> Dict[str, Any]:
        return {"period": self.period, "epoch": self.epoch}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CliqueConfig":
        return cls(period=data["period"], epoch=data["epoch"])


@dataclass(frozen=True)
class GenesisConfig:
    """Chain parameters of a Clique network. Every fork is live from block 0."""

    chain_id: int = 2021
    homestead_block: int = 0
    eip150_block: int = 0
    eip150_hash: str = ZERO_HASH
    eip155_block: int = 0
    eip158_block: int = 0
    byzantium_block: int = 0
    constantinople_block: int = 0
    petersburg_block: int = 0
    istanbul_block: int = 0
    clique: CliqueConfig = field(default_factory=CliqueConfig)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "chainId": self.chain_id,
            "homesteadBlock": self.homestead_block,
            "eip150Block": self.eip150_block,
            "eip150Hash": self.eip150_hash,
            "eip155Block": self.eip155_block,
            "eip158Block": self.eip158_block,
            "byzantiumBlock": self.byzantium_block,
            "constantinopleBlock": self.constantinople_block,
            "petersburgBlock": self.petersburg_block,
            "istanbulBlock": self.istanbul_block,
            "clique": self.clique.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GenesisConfig":
        return cls(
            chain_id=data["chainId"],
            homestead_block=data["homesteadBlock"],
            eip150_block=data["eip150Block"],
            eip150_hash=data["eip150Hash"],
            eip155_block=data["eip155Block"],
            eip158_block=data["eip158Block"],
            byzantium_block=data["byzantiumBlock"],
            constantinople_block=data["constantinopleBlock"],
            petersburg_block=data["petersburgBlock"],
            istanbul_block=data["istanbulBlock"],
            clique=CliqueConfig.from_dict(data["clique"]),
        )


@dataclass(frozen=True)
class IBFT2Config:
    block_period_seconds: int = 1
    epoch_length: int = 30000
    request_timeout_seconds: int = 10

    def to_dict(self) -> Dict[str, Any]:
        return {
            "blockperiodseconds": self.block_period_seconds,
            "epochlength": self.epoch_length,
            "requesttimeoutseconds": self.request_timeout_seconds,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "IBFT2Config":
        return cls(
            block_period_seconds=data["blockperiodseconds"],
            epoch_length=data["epochlength"],
            request_timeout_seconds=data["requesttimeoutseconds"],
        )


@dataclass(frozen=True)
class IBFTGenesisConfig:
    chain_id: int = 1337
    constantinople_fix_block: int = 0
    ibft2: IBFT2Config = field(default_factory=IBFT2Config)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "chainId": self.chain_id,
            "constantinoplefixblock": self.constantinople_fix_block,
            "ibft2": self.ibft2.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "IBFTGenesisConfig":
        return cls(
            chain_id=data["chainId"],
            constantinople_fix_block=data["constantinoplefixblock"],
            ibft2=IBFT2Config.from_dict(data["ibft2"]),
        )


@dataclass(frozen=True)
class Storage:
    """The three storage slots initialised in an ingress contract."""

    rules: str
    administration: str
    version: str

    def to_dict(self) -> Dict[str, str]:
        return {
            contracts.RULES_SLOT: self.rules,
            contracts.ADMINISTRATION_SLOT: self.administration,
            contracts.VERSION_SLOT: self.version,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, str]) -> "Storage":
        return cls(
            rules=data[contracts.RULES_SLOT],
            administration=data[contracts.ADMINISTRATION_SLOT],
            version=data[contracts.VERSION_SLOT],
        )


@dataclass(frozen=True)
class Alloc:
    """A genesis account. Code and storage are left out of the JSON when empty."""

    balance: str
    code: str = ""
    storage: Optional[Storage] = None

    def to_dict(self) -> Dict[str, Any]:
        result = {"balance": self.balance}
        if self.code:
            result["code"] = self.code
        if self.storage is not None:
            result["storage"] = self.storage.to_dict()
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Alloc":
        storage = data.get("storage")
        return cls(
            balance=data["balance"],
            code=data.get("code", ""),
            storage=Storage.from_dict(storage) if storage is not None else None,
        )


def _alloc_to_dict(alloc: Dict[str, Alloc]) -> Dict[str, Any]:
    return {address: entry.to_dict() for address, entry in alloc.items()}


def _alloc_from_dict(data: Dict[str, Any]) -> Dict[str, Alloc]:
    return {address: Alloc.from_dict(entry) for address, entry in data.items()}


class _Writable:
    def write_json(self, filename: Union[str, os.PathLike]) -> None:
        """Serialize this document and write it to filename."""
        write_genesis_json(self, filename)


@dataclass(frozen=True)
class Genesis(_Writable):
    """Genesis document of a Clique network."""

    extra_data: str
    alloc: Dict[str, Alloc] = field(default_factory=dict)
    config: GenesisConfig = field(default_factory=GenesisConfig)
    nonce: str = "0x0"
    timestamp: str = "0x60edb1c7"
    gas_limit: str = "0x47b760"
    difficulty: str = "0x1"
    mix_hash: str = ZERO_HASH
    coinbase: str = ZERO_ADDRESS
    number: str = "0x0"
    gas_used: str = "0x0"
    parent_hash: str = ZERO_HASH

    def to_dict(self) -> Dict[str, Any]:
        return {
            "config": self.config.to_dict(),
            "nonce": self.nonce,
            "timestamp": self.timestamp,
            "extraData": self.extra_data,
            "gasLimit": self.gas_limit,
            "difficulty": self.difficulty,
            "mixHash": self.mix_hash,
            "coinbase": self.coinbase,
            "alloc": _alloc_to_dict(self.alloc),
            "number": self.number,
            "gasUsed": self.gas_used,
            "parentHash": self.parent_hash,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Genesis":
        return cls(
            config=GenesisConfig.from_dict(data["config"]),
            nonce=data["nonce"],
            timestamp=data["timestamp"],
            extra_data=data["extraData"],
            gas_limit=data["gasLimit"],
            difficulty=data["difficulty"],
            mix_hash=data["mixHash"],
            coinbase=data["coinbase"],
            alloc=_alloc_from_dict(data["alloc"]),
            number=data["number"],
            gas_used=data["gasUsed"],
            parent_hash=data["parentHash"],
        )


@dataclass(frozen=True)
class IBFTGenesis(_Writable):
    """Genesis document of an IBFT2 network. There is no parent hash."""

    alloc: Dict[str, Alloc] = field(default_factory=dict)
    config: IBFTGenesisConfig = field(default_factory=IBFTGenesisConfig)
    nonce: str = "0x0"
    timestamp: str = "0x58ee40ba"
    gas_limit: str = "0xffffffff"
    difficulty: str = "0x1"
    mix_hash: str = IBFT_MIX_HASH
    extra_data: str = IBFT_EXTRA_DATA
    coinbase: str = ZERO_ADDRESS

    def to_dict(self) -> Dict[str, Any]:
        return {
            "config": self.config.to_dict(),
            "nonce": self.nonce,
            "timestamp": self.timestamp,
            "gasLimit": self.gas_limit,
            "difficulty": self.difficulty,
            "mixHash": self.mix_hash,
            "extraData": self.extra_data,
            "coinbase": self.coinbase,
            "alloc": _alloc_to_dict(self.alloc),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "IBFTGenesis":
        return cls(
            config=IBFTGenesisConfig.from_dict(data["config"]),
            nonce=data["nonce"],
            timestamp=data["timestamp"],
            gas_limit=data["gasLimit"],
            difficulty=data["difficulty"],
            mix_hash=data["mixHash"],
            extra_data=data["extraData"],
            coinbase=data["coinbase"],
            alloc=_alloc_from_dict(data["alloc"]),
        )


AnyGenesis = Union[Genesis, IBFTGenesis]


def _funded_accounts(addresses: Iterable[str]) -> Dict[str, Alloc]:
    alloc = {}
    for address in addresses:
        if not is_hex_address(address):
            # Passed through as is, the caller owns the address format.
            logger.bind(address=address).warning("Address is not a 20 byte hex address")
        alloc[address] = Alloc(balance=DEFAULT_BALANCE)
    return alloc


def clique_extra_data(addresses: Iterable[str]) -> str:
    """
    Build the Clique extraData field.

    The zero vanity is followed by every address in order, then right padded
    with '0' up to EXTRA_DATA_LENGTH characters. Longer values are kept whole.
    """
    extra_data = ZERO_HASH + "".join(addresses)
    return extra_data.ljust(EXTRA_DATA_LENGTH).replace(" ", "0")


def ingress_alloc(code: str) -> Alloc:
    """Return the allocation of a pre-deployed ingress contract."""
    return Alloc(
        balance=SYSTEM_BALANCE,
        code=code,
        storage=Storage(
            rules=contracts.RULES_CONTRACT_NAME,
            administration=contracts.ADMINISTRATION_CONTRACT_NAME,
            version=contracts.CONTRACT_VERSION,
        ),
    )


def create_genesis(addresses: Iterable[str]) -> Genesis:
    """Assemble a Clique genesis that funds and seals with the given addresses."""
    addresses = list(addresses)
    genesis = Genesis(
        extra_data=clique_extra_data(addresses),
        alloc=_funded_accounts(addresses),
    )
    logger.bind(accounts=len(addresses)).debug("Assembled clique genesis")
    return genesis


def create_ibft_genesis(addresses: Iterable[str]) -> IBFTGenesis:
    """
    Assemble an IBFT2 genesis that funds the given addresses.

    The account and node ingress contracts are always deployed. The validator
    set lives in the fixed extraData and does not depend on the addresses.
    """
    addresses = list(addresses)
    alloc = _funded_accounts(addresses)

    system_accounts = {
        contracts.ACCOUNT_INGRESS_ADDRESS: contracts.ACCOUNT_INGRESS_CODE,
        contracts.NODE_INGRESS_ADDRESS: contracts.NODE_INGRESS_CODE,
    }
    for address, code in system_accounts.items():
        if address in alloc:
            logger.bind(address=address).warning("Funded account replaced by ingress contract")
        alloc[address] = ingress_alloc(code)

    genesis = IBFTGenesis(alloc=alloc)
    logger.bind(accounts=len(addresses)).debug("Assembled ibft2 genesis")
    return genesis


def dumps_genesis(genesis: AnyGenesis) -> str:
    """Serialize a genesis document to indented JSON text."""
    try:
        return json.dumps(genesis.to_dict(), indent=JSON_INDENT)
    except (TypeError, ValueError) as e:
        raise GenesisSerializationError(f"Failed to encode genesis: {e}") from e


def write_genesis_json(genesis: AnyGenesis, filename: Union[str, os.PathLike]) -> None:
    """
    Write a genesis document to filename.

    The file is created with mode 0755 or truncated when it already exists.
    OSError from the write is raised unchanged.
    """
    text = dumps_genesis(genesis)
    fd = os.open(filename, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, GENESIS_FILE_MODE)
    with os.fdopen(fd, "w", encoding="utf-8") as f:
        f.write(text)

    logger.bind(path=str(filename)).info(f"Wrote genesis with {len(genesis.alloc)} accounts")


def parse_genesis(data: Dict[str, Any]) -> AnyGenesis:
    """Parse a decoded genesis mapping into the matching record."""
    try:
        if "ibft2" in data["config"]:
            return IBFTGenesis.from_dict(data)
        return Genesis.from_dict(data)
    except (KeyError, TypeError, AttributeError) as e:
        raise GenesisFormatError(f"Unexpected genesis structure: {e!r}") from e


def load_genesis(filename: Union[str, os.PathLike]) -> AnyGenesis:
    """Read a genesis file written by write_genesis_json."""
    with open(filename, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except ValueError as e:
            raise GenesisFormatError(f"Invalid JSON in {filename}: {e}") from e

    if not isinstance(data, dict):
        raise GenesisFormatError(f"Expected a JSON object in {filename}")
    return parse_genesis(data)
