"""Genesis state data models."""

from typing import Annotated, Any, List, Optional, Tuple

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, PlainSerializer, model_validator
from pydantic.alias_generators import to_camel

from ..crypto.keys import AuthorityKeys
from ..crypto.ss58 import KEY_LENGTH, ss58_decode, ss58_encode
from ..errors import LengthMismatchError


def _key_from_wire(value: Any) -> Any:
    if isinstance(value, str):
        return ss58_decode(value)
    if isinstance(value, (bytes, bytearray)):
        if len(value) != KEY_LENGTH:
            raise ValueError(f"expected {KEY_LENGTH}-byte key, got {len(value)}")
        return bytes(value)
    return value


def _hex_from_wire(value: Any) -> Any:
    if isinstance(value, str):
        if not value.startswith("0x"):
            raise ValueError("hex data must be 0x-prefixed")
        return bytes.fromhex(value[2:])
    return value


# 32-byte key, SS58 text in JSON
Key = Annotated[
    bytes,
    BeforeValidator(_key_from_wire),
    PlainSerializer(lambda key: ss58_encode(key), return_type=str, when_used="json"),
]
# Arbitrary bytes, 0x-prefixed hex in JSON
HexBytes = Annotated[
    bytes,
    BeforeValidator(_hex_from_wire),
    PlainSerializer(lambda data: "0x" + data.hex(), return_type=str, when_used="json"),
]

AccountId = Key
Balance = Annotated[int, Field(ge=0, lt=1 << 128)]
EndowedAccount = Tuple[AccountId, Balance]
FinalityAuthority = Tuple[Key, Annotated[int, Field(ge=0)]]

# Genesis JSON uses camelCase keys (frameSystem, changesTrieConfig, ...)
GENESIS_CONFIG = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class ChangesTrieConfig(BaseModel):
    """Parameters for recording historical state-change proofs."""
    model_config = GENESIS_CONFIG

    digest_interval: int = Field(..., ge=0, description="Blocks between digest builds")
    digest_levels: int = Field(..., ge=0, description="Digest hierarchy depth")


class SystemConfig(BaseModel):
    """System block: ledger code and change-tracking policy."""
    model_config = GENESIS_CONFIG

    code: HexBytes = Field(..., description="Compiled ledger code")
    changes_trie_config: Optional[ChangesTrieConfig] = Field(
        None,
        description="Change tracking configuration (None disables it)"
    )

    @property
    def changes_tracking_enabled(self) -> bool:
        """Whether historical state-change proofs are recorded."""
        return self.changes_trie_config is not None


class BalancesConfig(BaseModel):
    """Balances block: initially endowed accounts."""
    model_config = GENESIS_CONFIG

    balances: Tuple[EndowedAccount, ...] = Field(default_factory=tuple)


class AuraConfig(BaseModel):
    """Block-production authority block, in round-robin order."""
    model_config = GENESIS_CONFIG

    authorities: Tuple[Key, ...] = Field(default_factory=tuple)


class GrandpaConfig(BaseModel):
    """Finality authority block of (identity, weight) pairs."""
    model_config = GENESIS_CONFIG

    authorities: Tuple[FinalityAuthority, ...] = Field(default_factory=tuple)


class GenesisState(BaseModel):
    """
    Initial ledger state at block zero.

    Each subsystem block is configured independently, but the
    block-production and finality authority sets describe the same
    validators: entry i of both belongs to validator i.
    """
    model_config = GENESIS_CONFIG

    frame_system: SystemConfig
    pallet_balances: BalancesConfig = Field(default_factory=BalancesConfig)
    pallet_aura: AuraConfig = Field(default_factory=AuraConfig)
    pallet_grandpa: GrandpaConfig = Field(default_factory=GrandpaConfig)

    @model_validator(mode="after")
    def check_authority_sets(self) -> "GenesisState":
        production = len(self.pallet_aura.authorities)
        finality = len(self.pallet_grandpa.authorities)
        if production != finality:
            raise LengthMismatchError(
                f"{production} block-production authorities but {finality} finality authorities"
            )
        return self

    def authorities(self) -> List[AuthorityKeys]:
        """Index-correlated authority pairs."""
        return [
            AuthorityKeys(block_production=production, finality=finality)
            for production, (finality, _) in zip(
                self.pallet_aura.authorities, self.pallet_grandpa.authorities
            )
        ]

    def endowed_accounts(self) -> List[bytes]:
        """Account ids funded at genesis, in order."""
        return [account for account, _ in self.pallet_balances.balances]
