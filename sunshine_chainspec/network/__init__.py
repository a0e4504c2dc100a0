"""Peer addressing for network discovery."""

from .addressing import parse_peer_id, parse_multiaddr

__all__ = ["parse_peer_id", "parse_multiaddr"]
