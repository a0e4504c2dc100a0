"""Data models for genesis state and chain specifications."""

from .genesis import (
    GenesisState,
    SystemConfig,
    ChangesTrieConfig,
    BalancesConfig,
    AuraConfig,
    GrandpaConfig,
)
from .chain_spec import ChainSpecification, ChainType, BootNode

__all__ = [
    "GenesisState",
    "SystemConfig",
    "ChangesTrieConfig",
    "BalancesConfig",
    "AuraConfig",
    "GrandpaConfig",
    "ChainSpecification",
    "ChainType",
    "BootNode",
]
