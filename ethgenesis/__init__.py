from ethgenesis.errors import GenesisError, GenesisFormatError, GenesisSerializationError
from ethgenesis.genesis import (
    Alloc,
    CliqueConfig,
    Genesis,
    GenesisConfig,
    IBFT2Config,
    IBFTGenesis,
    IBFTGenesisConfig,
    Storage,
    create_genesis,
    create_ibft_genesis,
    dumps_genesis,
    load_genesis,
    write_genesis_json,
)

__version__ = "0.1.0"

__all__ = [
    "Alloc",
    "CliqueConfig",
    "Genesis",
    "GenesisConfig",
    "GenesisError",
    "GenesisFormatError",
    "GenesisSerializationError",
    "IBFT2Config",
    "IBFTGenesis",
    "IBFTGenesisConfig",
    "Storage",
    "create_genesis",
    "create_ibft_genesis",
    "dumps_genesis",
    "load_genesis",
    "write_genesis_json",
]
