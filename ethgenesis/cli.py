"""
Generate a Clique or IBFT2 genesis file.

Usage:
    ethgenesis --consensus ibft --address 0x... --output genesis.json
    ethgenesis --config genesis.ini
"""

import argparse
import configparser
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from loguru import logger

from ethgenesis.errors import GenesisError
from ethgenesis.genesis import create_genesis, create_ibft_genesis, load_genesis

ASSEMBLERS = {
    "clique": create_genesis,
    "ibft": create_ibft_genesis,
}


@dataclass
class Config:
    consensus: str = "clique"
    output: Path = Path("genesis.json")
    addresses: List[str] = field(default_factory=list)
    pretty_logs: bool = True


def load_logger(pretty_logs: bool):
    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
        "<level>{message}</level> | "
        "<level>{extra}</level>",
        colorize=pretty_logs,
        serialize=not pretty_logs,
    )


def read_addresses_file(path: Path) -> List[str]:
    """Read one address per line, skipping blank lines and # comments."""
    addresses = []
    with open(path, "r") as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith("#"):
                addresses.append(line)
    return addresses


def load_config(config_path: Optional[Path]) -> Config:
    if config_path is None:
        return Config()
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    parser = configparser.ConfigParser()
    parser.read(config_path)
    if not parser.has_section("default"):
        return Config()

    section = parser["default"]
    addresses = section.get("addresses", "").replace(",", " ").split()
    addresses_file = section.get("addresses_file")
    if addresses_file:
        addresses += read_addresses_file(Path(addresses_file))

    return Config(
        consensus=section.get("consensus", "clique"),
        output=Path(section.get("output", "genesis.json")),
        addresses=addresses,
        pretty_logs=section.getboolean("pretty_logs", fallback=True),
    )


def apply_args(config: Config, args: argparse.Namespace) -> Config:
    """Override config values with the ones given on the command line."""
    if args.consensus:
        config.consensus = args.consensus
    if args.output:
        config.output = args.output
    if args.addresses_file:
        config.addresses += read_addresses_file(args.addresses_file)
    if args.addresses:
        config.addresses += args.addresses
    if args.json_logs:
        config.pretty_logs = False

    if config.consensus not in ASSEMBLERS:
        raise ValueError(
            f"Unsupported consensus {config.consensus!r}, expected one of: {', '.join(ASSEMBLERS)}"
        )
    return config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate the genesis file of a Clique or IBFT2 network."
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to an ini config file with a [default] section",
    )
    parser.add_argument(
        "--consensus",
        choices=sorted(ASSEMBLERS),
        help="Consensus engine of the network (default: clique)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Where to write the genesis file (default: ./genesis.json)",
    )
    parser.add_argument(
        "--address",
        dest="addresses",
        action="append",
        metavar="ADDRESS",
        help="Account to fund, can be repeated",
    )
    parser.add_argument(
        "--addresses-file",
        type=Path,
        help="File with one account address per line",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Emit logs as JSON instead of colored text",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Read the written file back and compare it with the generated genesis",
    )
    return parser


@logger.catch(default=1)
def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = apply_args(load_config(args.config), args)
    except (OSError, ValueError) as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    load_logger(config.pretty_logs)

    genesis = ASSEMBLERS[config.consensus](config.addresses)
    try:
        genesis.write_json(config.output)
        if args.check and load_genesis(config.output) != genesis:
            logger.bind(path=str(config.output)).error("Written genesis does not match")
            return 1
    except (OSError, GenesisError) as e:
        logger.bind(path=str(config.output)).error(f"Failed to write genesis: {e}")
        return 1

    logger.info(f"Generated {config.consensus} genesis at {config.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
