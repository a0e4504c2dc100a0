"""Minimal SCALE encoding helpers used for key derivation."""

import struct


def encode_compact(value: int) -> bytes:
    """
    Encode a non-negative integer in SCALE compact form.

    Args:
        value: Integer to encode

    Returns:
        Compact-encoded bytes
    """
    if value < 0:
        raise ValueError("compact integers must be non-negative")
    if value < 1 << 6:
        return bytes([value << 2])
    if value < 1 << 14:
        return struct.pack('<H', (value << 2) | 0b01)
    if value < 1 << 30:
        return struct.pack('<I', (value << 2) | 0b10)

    payload = value.to_bytes((value.bit_length() + 7) // 8, 'little')
    if len(payload) > 67:
        raise ValueError("integer too large for compact encoding")
    return bytes([((len(payload) - 4) << 2) | 0b11]) + payload


def encode_str(value: str) -> bytes:
    """Encode a string as compact length followed by UTF-8 bytes."""
    data = value.encode('utf-8')
    return encode_compact(len(data)) + data


def encode_u64(value: int) -> bytes:
    """Encode an unsigned 64-bit integer, little-endian."""
    return struct.pack('<Q', value)
