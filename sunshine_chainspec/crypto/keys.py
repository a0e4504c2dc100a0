"""Key schemes, roles and key containers."""

import hashlib
from dataclasses import dataclass, field
from enum import Enum

from .ss58 import ss58_encode


class Scheme(str, Enum):
    """Signature scheme a key is derived for."""
    SR25519 = "sr25519"
    ED25519 = "ed25519"


class Role(str, Enum):
    """Identity class an authority key is used for."""
    BLOCK_PRODUCTION = "block-production"
    FINALITY = "finality"

    @property
    def scheme(self) -> Scheme:
        """Signature scheme keys of this role are derived under."""
        return _ROLE_SCHEMES[self]


_ROLE_SCHEMES = {
    Role.BLOCK_PRODUCTION: Scheme.SR25519,
    Role.FINALITY: Scheme.ED25519,
}

# Accounts are addressed by keys of the primary signature scheme
PRIMARY_SCHEME = Scheme.SR25519


@dataclass(frozen=True)
class KeyPair:
    """
    Signing key pair derived for a single scheme.

    The secret is kept in the encoding of its scheme's library: the
    32-byte seed for ed25519, the 64-byte expanded key for sr25519.
    """
    scheme: Scheme
    public_key: bytes
    secret_key: bytes = field(repr=False)

    @property
    def public_hex(self) -> str:
        """Get 0x-prefixed hex public key."""
        return "0x" + self.public_key.hex()

    @property
    def public_ss58(self) -> str:
        """Get SS58-encoded public key."""
        return ss58_encode(self.public_key)


@dataclass(frozen=True)
class AuthorityKeys:
    """
    Identities of one validator.

    Entries of the block-production and finality authority sets are
    associated by position, so a pair is only meaningful by index.
    """
    block_production: bytes
    finality: bytes

    def __iter__(self):
        yield self.block_production
        yield self.finality


def account_id_from_public(public_key: bytes) -> bytes:
    """
    Map a primary-scheme public key to its account identifier.

    The mapping is a blake2b-256 digest and cannot be inverted.

    Args:
        public_key: Raw 32-byte public key

    Returns:
        32-byte account id
    """
    if len(public_key) != 32:
        raise ValueError(f"expected 32-byte public key, got {len(public_key)}")
    return hashlib.blake2b(bytes(public_key), digest_size=32).digest()
