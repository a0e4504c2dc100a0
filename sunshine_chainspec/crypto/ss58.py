"""SS58 text encoding for public keys and account identifiers."""

import hashlib
from typing import Optional, Tuple

import base58

from .. import config

_CHECKSUM_PREFIX = b"SS58PRE"
_CHECKSUM_LENGTH = 2
KEY_LENGTH = 32


def _checksum(data: bytes) -> bytes:
    return hashlib.blake2b(_CHECKSUM_PREFIX + data, digest_size=64).digest()[:_CHECKSUM_LENGTH]


def ss58_encode(key: bytes, ss58_format: Optional[int] = None) -> str:
    """
    Encode a 32-byte key as an SS58 address.

    Args:
        key: Raw 32-byte public key or account id
        ss58_format: Network prefix (defaults to configured format)

    Returns:
        Base58 SS58 address
    """
    if ss58_format is None:
        ss58_format = config.SS58_FORMAT
    if not 0 <= ss58_format < 64:
        raise ValueError(f"unsupported SS58 format: {ss58_format}")
    if len(key) != KEY_LENGTH:
        raise ValueError(f"expected {KEY_LENGTH}-byte key, got {len(key)}")

    body = bytes([ss58_format]) + bytes(key)
    return base58.b58encode(body + _checksum(body)).decode('ascii')


def ss58_decode_with_format(address: str) -> Tuple[bytes, int]:
    """
    Decode an SS58 address.

    Args:
        address: SS58 address

    Returns:
        Tuple of (raw key, network prefix)

    Raises:
        ValueError: If the address is not valid base58, has the wrong
            length, an unsupported prefix or a bad checksum
    """
    try:
        raw = base58.b58decode(address)
    except ValueError as exc:
        raise ValueError(f"invalid base58 in SS58 address {address!r}") from exc

    if len(raw) != 1 + KEY_LENGTH + _CHECKSUM_LENGTH:
        raise ValueError(f"invalid SS58 address length for {address!r}")
    if raw[0] >= 64:
        raise ValueError(f"unsupported SS58 prefix in {address!r}")

    body, checksum = raw[:-_CHECKSUM_LENGTH], raw[-_CHECKSUM_LENGTH:]
    if _checksum(body) != checksum:
        raise ValueError(f"SS58 checksum mismatch for {address!r}")
    return body[1:], body[0]


def ss58_decode(address: str) -> bytes:
    """Decode an SS58 address to its raw 32-byte key."""
    key, _ = ss58_decode_with_format(address)
    return key
