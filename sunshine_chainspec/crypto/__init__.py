"""Key derivation and encoding for chain specifications."""

from .keys import KeyPair, AuthorityKeys, Role, Scheme, PRIMARY_SCHEME, account_id_from_public
from .derivation import (
    DEV_PHRASE,
    SecretUri,
    parse_secret_uri,
    derive_keypair,
    derive_public,
    derive_account_id,
    derive_authority_pair,
)
from .ss58 import ss58_encode, ss58_decode

__all__ = [
    "KeyPair",
    "AuthorityKeys",
    "Role",
    "Scheme",
    "PRIMARY_SCHEME",
    "account_id_from_public",
    "DEV_PHRASE",
    "SecretUri",
    "parse_secret_uri",
    "derive_keypair",
    "derive_public",
    "derive_account_id",
    "derive_authority_pair",
    "ss58_encode",
    "ss58_decode",
]
