"""Boot node table parsing."""

import logging
from typing import Iterable, Tuple

from pydantic import ValidationError

from ..errors import AddressFormatError
from ..models.chain_spec import BootNode
from .addressing import parse_multiaddr, parse_peer_id

logger = logging.getLogger(__name__)


def parse_boot_nodes(entries: Iterable[Tuple[str, str]]) -> Tuple[BootNode, ...]:
    """
    Parse (peer id, multiaddress) pairs into boot node entries.

    Args:
        entries: Pairs of peer identifier and network address strings

    Returns:
        Tuple of BootNode entries, in input order

    Raises:
        AddressFormatError: If any peer id or address is malformed
    """
    boot_nodes = []
    for peer_id, address in entries:
        parse_peer_id(peer_id)
        parse_multiaddr(address)
        boot_nodes.append(BootNode(peer_id=peer_id, multiaddr=address))

    logger.debug(f"Parsed {len(boot_nodes)} boot node(s)")
    return tuple(boot_nodes)


def parse_boot_node(text: str) -> BootNode:
    """
    Parse a boot node from its ``<multiaddr>/p2p/<peer id>`` form.

    Raises:
        AddressFormatError: If the text is malformed
    """
    try:
        return BootNode.model_validate(text)
    except ValidationError as exc:
        raise AddressFormatError(f"invalid boot node {text!r}: {exc}") from exc
