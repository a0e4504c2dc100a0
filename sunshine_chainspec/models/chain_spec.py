"""Chain specification data models."""

from enum import Enum
from types import MappingProxyType
from typing import Annotated, Any, Dict, Mapping, Optional, Tuple

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    PlainSerializer,
    model_serializer,
    model_validator,
)

from ..network.addressing import parse_multiaddr, parse_peer_id
from .genesis import GenesisState

P2P_SEPARATOR = "/p2p/"


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    return value


def _thaw(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {key: _thaw(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [_thaw(item) for item in value]
    return value


# JSON object held as a read-only mapping; nested arrays become tuples
FrozenObject = Annotated[
    Dict[str, Any],
    AfterValidator(_freeze),
    PlainSerializer(_thaw, return_type=Dict[str, Any]),
]


class ChainType(str, Enum):
    """Kind of network a specification describes."""
    DEVELOPMENT = "Development"
    LOCAL = "Local"
    LIVE = "Live"


class BootNode(BaseModel):
    """
    Peer used only for initial network discovery.

    Serialized as ``<multiaddr>/p2p/<peer id>``.
    """
    model_config = ConfigDict(frozen=True)

    peer_id: str = Field(..., description="Base58 libp2p peer identifier")
    multiaddr: str = Field(..., description="Network address (multiaddress)")

    @model_validator(mode="before")
    @classmethod
    def split_address(cls, data: Any) -> Any:
        if isinstance(data, str):
            address, separator, peer_id = data.rpartition(P2P_SEPARATOR)
            if not separator:
                raise ValueError(f"boot node {data!r} has no /p2p/ peer id")
            return {"peer_id": peer_id, "multiaddr": address}
        return data

    @model_validator(mode="after")
    def check_address(self) -> "BootNode":
        parse_peer_id(self.peer_id)
        parse_multiaddr(self.multiaddr)
        return self

    @model_serializer
    def to_address(self) -> str:
        return str(self)

    def __str__(self) -> str:
        return f"{self.multiaddr}{P2P_SEPARATOR}{self.peer_id}"


class ChainSpecification(BaseModel):
    """
    Chain specification - the shareable description of a network.

    Node startup consumes this value; it is never modified once built
    or loaded.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(..., description="Human-readable network name")
    chain_id: str = Field(..., alias="id", description="Short network identifier")
    chain_type: ChainType = Field(..., alias="chainType", description="Network kind")
    genesis: GenesisState = Field(..., description="Initial ledger state")
    boot_nodes: Tuple[BootNode, ...] = Field(
        default_factory=tuple,
        alias="bootNodes",
        description="Initial peers for discovery"
    )
    telemetry_endpoints: Optional[Tuple[Tuple[str, int], ...]] = Field(
        None,
        alias="telemetryEndpoints",
        description="Telemetry (url, verbosity) pairs"
    )
    protocol_id: Optional[str] = Field(None, alias="protocolId", description="Network protocol id")
    properties: Optional[FrozenObject] = Field(None, description="Arbitrary chain properties")
    extensions: FrozenObject = Field(
        default_factory=dict,
        validate_default=True,
        description="Client extensions"
    )
