"""Peer identifier and multiaddress validation."""

import ipaddress
import re
from typing import List, Tuple

import base58

from ..errors import AddressFormatError

# Multihash codes accepted in peer identifiers
_IDENTITY = 0x00
_SHA2_256 = 0x12
_MAX_INLINE_KEY_LENGTH = 42

# Protobuf encoding of an Ed25519 libp2p public key: KeyType=Ed25519, Data=<32 bytes>
_ED25519_KEY_PREFIX = bytes([0x08, 0x01, 0x12, 0x20])

_HOSTNAME = re.compile(r"^(?=.{1,253}$)([A-Za-z0-9_]([A-Za-z0-9_-]{0,61}[A-Za-z0-9])?)(\.[A-Za-z0-9_]([A-Za-z0-9_-]{0,61}[A-Za-z0-9])?)*\.?$")


def _ip4(value: str) -> None:
    ipaddress.IPv4Address(value)


def _ip6(value: str) -> None:
    ipaddress.IPv6Address(value)


def _port(value: str) -> None:
    if not value.isascii() or not value.isdigit() or int(value) > 65535:
        raise ValueError(f"invalid port {value!r}")


def _hostname(value: str) -> None:
    if not _HOSTNAME.match(value):
        raise ValueError(f"invalid hostname {value!r}")


# protocol name -> value validator (None for protocols without a value)
PROTOCOLS = {
    "ip4": _ip4,
    "ip6": _ip6,
    "dns": _hostname,
    "dns4": _hostname,
    "dns6": _hostname,
    "dnsaddr": _hostname,
    "tcp": _port,
    "udp": _port,
    "ws": None,
    "wss": None,
    "quic": None,
    "quic-v1": None,
}


def parse_peer_id(text: str) -> str:
    """
    Validate a base58 libp2p peer identifier.

    Args:
        text: Peer id such as ``12D3KooW...``

    Returns:
        The peer id, unchanged

    Raises:
        AddressFormatError: If the peer id is not a valid multihash
    """
    if not isinstance(text, str) or not text:
        raise AddressFormatError("peer id must be a non-empty string")
    try:
        raw = base58.b58decode(text)
    except ValueError as exc:
        raise AddressFormatError(f"peer id {text!r} is not valid base58") from exc

    if len(raw) < 2:
        raise AddressFormatError(f"peer id {text!r} is too short")

    code, length, digest = raw[0], raw[1], raw[2:]
    if len(digest) != length:
        raise AddressFormatError(f"peer id {text!r} has inconsistent multihash length")

    if code == _IDENTITY:
        if length > _MAX_INLINE_KEY_LENGTH:
            raise AddressFormatError(f"peer id {text!r} inlines an oversized key")
        if not (digest.startswith(_ED25519_KEY_PREFIX) and len(digest) == len(_ED25519_KEY_PREFIX) + 32):
            raise AddressFormatError(f"peer id {text!r} does not carry an Ed25519 public key")
    elif code == _SHA2_256:
        if length != 32:
            raise AddressFormatError(f"peer id {text!r} has a truncated sha2-256 digest")
    else:
        raise AddressFormatError(f"peer id {text!r} uses unsupported multihash code 0x{code:02x}")

    return text


def parse_multiaddr(text: str) -> Tuple[Tuple[str, str], ...]:
    """
    Parse a textual multiaddress into (protocol, value) components.

    Args:
        text: Multiaddress such as ``/ip4/127.0.0.1/tcp/30333``

    Returns:
        Tuple of (protocol, value) pairs; value is empty for protocols
        that take none

    Raises:
        AddressFormatError: If the address does not follow the grammar
    """
    if not isinstance(text, str) or not text.startswith("/"):
        raise AddressFormatError(f"multiaddress {text!r} must start with '/'")

    parts = text[1:].split("/")
    if parts and parts[-1] == "":
        parts.pop()
    if not parts:
        raise AddressFormatError("multiaddress has no components")

    components: List[Tuple[str, str]] = []
    index = 0
    while index < len(parts):
        protocol = parts[index]
        if protocol == "p2p":
            raise AddressFormatError(f"multiaddress {text!r} must not embed a peer id")
        if protocol not in PROTOCOLS:
            raise AddressFormatError(f"unknown protocol {protocol!r} in {text!r}")

        validate = PROTOCOLS[protocol]
        if validate is None:
            components.append((protocol, ""))
            index += 1
            continue

        if index + 1 >= len(parts):
            raise AddressFormatError(f"protocol {protocol!r} in {text!r} is missing its value")
        value = parts[index + 1]
        try:
            validate(value)
        except ValueError as exc:
            raise AddressFormatError(f"invalid {protocol} value {value!r} in {text!r}") from exc
        components.append((protocol, value))
        index += 2

    return tuple(components)
