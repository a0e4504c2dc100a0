"""
Deployment profiles and their chain specifications.

An operator selects a profile with a single string. Built-in profiles
build their specification from fixed inputs; any other string names a
specification file.
"""

import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Union

from ..crypto.derivation import derive_account_id, derive_authority_pair
from ..errors import ChainSpecError, ConfigurationError
from ..genesis.assembler import build
from ..models.chain_spec import ChainSpecification, ChainType
from ..models.genesis import GenesisState
from ..network.bootnodes import parse_boot_nodes
from . import codec
from .staging_keys import STAGING_AUTHORITIES, STAGING_BOOT_ADDRESS, STAGING_BOOT_PEER_IDS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Dev:
    """Single-authority development chain."""


@dataclass(frozen=True)
class Local:
    """Two-authority local test network."""


@dataclass(frozen=True)
class Staging:
    """Staging network with fixed authorities and boot nodes."""


@dataclass(frozen=True)
class CustomFile:
    """Specification loaded from a file."""
    path: Path


ChainProfile = Union[Dev, Local, Staging, CustomFile]


def parse(chain: str) -> ChainProfile:
    """
    Select a profile from operator input.

    Unrecognized input is taken as a file path and only checked when
    the profile is resolved.
    """
    if chain == "dev":
        return Dev()
    if chain == "local":
        return Local()
    if chain in ("", "staging"):
        return Staging()
    return CustomFile(path=Path(chain))


@lru_cache(maxsize=None)
def dev_genesis() -> GenesisState:
    return build(
        [derive_authority_pair("//Alice")],
        [
            derive_account_id("//Alice"),
            derive_account_id("//Alice//stash"),
        ],
    )


@lru_cache(maxsize=None)
def local_genesis() -> GenesisState:
    return build(
        [
            derive_authority_pair("//Alice"),
            derive_authority_pair("//Bob"),
        ],
        [
            derive_account_id("//Alice"),
            derive_account_id("//Alice//stash"),
            derive_account_id("//Bob"),
            derive_account_id("//Bob//stash"),
        ],
    )


@lru_cache(maxsize=None)
def staging_genesis() -> GenesisState:
    return build(STAGING_AUTHORITIES, [])


def dev_chain_spec() -> ChainSpecification:
    """Development chain: //Alice is the only authority."""
    return ChainSpecification(
        name="Development",
        chain_id="dev",
        chain_type=ChainType.DEVELOPMENT,
        genesis=dev_genesis(),
    )


def local_chain_spec() -> ChainSpecification:
    """Local testnet: //Alice and //Bob share block production."""
    return ChainSpecification(
        name="Local Testnet",
        chain_id="local-testnet",
        chain_type=ChainType.LOCAL,
        genesis=local_genesis(),
    )


def staging_chain_spec() -> ChainSpecification:
    """Staging testnet with hardcoded authorities and boot nodes."""
    boot_nodes = parse_boot_nodes(
        (peer_id, STAGING_BOOT_ADDRESS) for peer_id in STAGING_BOOT_PEER_IDS
    )
    return ChainSpecification(
        name="Staging Testnet",
        chain_id="staging-testnet",
        chain_type=ChainType.LIVE,
        genesis=staging_genesis(),
        boot_nodes=boot_nodes,
    )


_BUILT_IN = {
    Dev: dev_chain_spec,
    Local: local_chain_spec,
    Staging: staging_chain_spec,
}


def resolve(profile: ChainProfile) -> ChainSpecification:
    """
    Produce the chain specification of a profile.

    Args:
        profile: Profile returned by parse()

    Returns:
        ChainSpecification: Built or loaded specification

    Raises:
        FileFormatError: If a CustomFile profile names an unreadable or
            malformed file
        ConfigurationError: If the configured runtime code is unusable
        RuntimeError: If a built-in profile fails to build
    """
    if isinstance(profile, CustomFile):
        logger.info(f"Loading chain specification from {profile.path}")
        return codec.load_file(profile.path)

    builder = _BUILT_IN.get(type(profile))
    if builder is None:
        raise TypeError(f"unknown chain profile: {profile!r}")

    try:
        spec = builder()
    except ConfigurationError:
        raise
    except ChainSpecError as exc:
        logger.critical(f"Built-in {type(profile).__name__} profile is invalid: {exc}")
        raise RuntimeError(f"built-in {type(profile).__name__} profile is invalid") from exc

    logger.info(f"Resolved {type(profile).__name__} profile: {spec.name} ({spec.chain_id})")
    return spec
