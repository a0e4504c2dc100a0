"""
Deterministic key derivation from secret URIs.

A secret URI has the form ``<phrase>?(//hard | /soft)*(///password)?``.
The phrase is either a 0x-prefixed 32-byte hex mini-secret or an English
BIP39 mnemonic with a valid checksum; an empty phrase stands for the
well-known development phrase, so ``//Alice`` names a reproducible test identity.

Keys derived from these seeds are for development and test networks
only. Production key material never passes through this module.
"""

import hashlib
import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Tuple

import nacl.exceptions
import nacl.signing
import sr25519
from mnemonic import Mnemonic

from ..errors import KeyDerivationError, SeedFormatError
from .keys import AuthorityKeys, KeyPair, PRIMARY_SCHEME, Role, Scheme, account_id_from_public
from .scale import encode_str, encode_u64

logger = logging.getLogger(__name__)

DEV_PHRASE = "bottom drive obey lake curtain smoke basket hold race lonely fit walk"

MNEMONIC_WORD_COUNTS = (12, 15, 18, 21, 24)
PBKDF2_ROUNDS = 2048
JUNCTION_ID_LENGTH = 32

_SECRET_URI = re.compile(r"^(?P<phrase>[^/]+)?(?P<path>(//?[^/]+)*)(///(?P<password>.*))?$")
_JUNCTION = re.compile(r"/(/?[^/]+)")
_WORD = re.compile(r"^[a-z]+$")
_NUMERIC = re.compile(r"^[0-9]+$")
_HEX_SEED = re.compile(r"^0x[0-9a-fA-F]{64}$")

ED25519_HDKD_TAG = "Ed25519HDKD"

_MNEMONIC = Mnemonic("english")


@dataclass(frozen=True)
class Junction:
    """One derivation step of a secret URI."""
    name: str
    hard: bool

    @property
    def chain_code(self) -> bytes:
        """32-byte chain code identifying this junction."""
        if _NUMERIC.match(self.name) and int(self.name) < 1 << 64:
            encoded = encode_u64(int(self.name))
        else:
            encoded = encode_str(self.name)
        if len(encoded) > JUNCTION_ID_LENGTH:
            return hashlib.blake2b(encoded, digest_size=JUNCTION_ID_LENGTH).digest()
        return encoded.ljust(JUNCTION_ID_LENGTH, b"\x00")


@dataclass(frozen=True)
class SecretUri:
    """Parsed secret URI."""
    phrase: str
    junctions: Tuple[Junction, ...]
    password: Optional[str] = None


def parse_secret_uri(seed: str) -> SecretUri:
    """
    Parse and validate a secret URI.

    Args:
        seed: Secret URI such as ``//Alice`` or ``0x...//stash``

    Returns:
        SecretUri: Parsed phrase, junctions and password

    Raises:
        SeedFormatError: If the seed does not follow the grammar
    """
    if not isinstance(seed, str):
        raise SeedFormatError(f"seed must be a string, got {type(seed).__name__}")

    match = _SECRET_URI.match(seed)
    if match is None:
        raise SeedFormatError(f"malformed secret URI: {seed!r}")

    phrase = match.group("phrase")
    if phrase is None:
        phrase = DEV_PHRASE
    _validate_phrase(phrase)

    junctions = tuple(
        Junction(name=step[1:], hard=True) if step.startswith("/") else Junction(name=step, hard=False)
        for step in _JUNCTION.findall(match.group("path") or "")
    )
    return SecretUri(phrase=phrase, junctions=junctions, password=match.group("password"))


def _validate_phrase(phrase: str) -> None:
    if phrase != phrase.strip():
        raise SeedFormatError("seed phrase has leading or trailing whitespace")

    if phrase.startswith("0x"):
        if not _HEX_SEED.match(phrase):
            raise SeedFormatError("hex seed must be 0x followed by 64 hex digits")
        return

    words = phrase.split(" ")
    if len(words) not in MNEMONIC_WORD_COUNTS:
        raise SeedFormatError(
            f"mnemonic must have one of {MNEMONIC_WORD_COUNTS} words, got {len(words)}"
        )
    for word in words:
        if not _WORD.match(word):
            raise SeedFormatError(f"invalid mnemonic word: {word!r}")
    if not _MNEMONIC.check(phrase):
        raise SeedFormatError("mnemonic has a word outside the wordlist or a bad checksum")


@lru_cache(maxsize=64)
def _mini_secret(phrase: str, password: Optional[str]) -> bytes:
    if phrase.startswith("0x"):
        return bytes.fromhex(phrase[2:])

    # PBKDF2 runs over the mnemonic's entropy, not over its text
    entropy = bytes(_MNEMONIC.to_entropy(phrase))
    salt = ("mnemonic" + (password or "")).encode("utf-8")
    return hashlib.pbkdf2_hmac("sha512", entropy, salt, PBKDF2_ROUNDS)[:32]


def _derive_ed25519(seed: bytes, junctions: Tuple[Junction, ...]) -> Tuple[bytes, bytes]:
    for junction in junctions:
        if not junction.hard:
            raise KeyDerivationError(
                f"soft junction /{junction.name} is not supported for ed25519 derivation"
            )
        data = encode_str(ED25519_HDKD_TAG) + seed + junction.chain_code
        seed = hashlib.blake2b(data, digest_size=32).digest()

    signing_key = nacl.signing.SigningKey(seed)
    return bytes(signing_key.verify_key), seed


def _derive_sr25519(seed: bytes, junctions: Tuple[Junction, ...]) -> Tuple[bytes, bytes]:
    public, secret = sr25519.pair_from_seed(seed)
    for junction in junctions:
        step = sr25519.hard_derive_keypair if junction.hard else sr25519.derive_keypair
        derived = step((junction.chain_code, public, secret), b"")
        # Some releases of the bindings also return the chain code first
        public, secret = derived[-2:]
    return bytes(public), bytes(secret)


_DERIVERS = {
    Scheme.SR25519: _derive_sr25519,
    Scheme.ED25519: _derive_ed25519,
}


def derive_keypair(seed: str, scheme: Scheme) -> KeyPair:
    """
    Derive a key pair for a scheme from a secret URI.

    Args:
        seed: Secret URI
        scheme: Signature scheme to derive for

    Returns:
        KeyPair: Deterministic key pair

    Raises:
        SeedFormatError: If the seed is malformed
        KeyDerivationError: If the key cannot be derived
    """
    scheme = Scheme(scheme)
    uri = parse_secret_uri(seed)
    mini_secret = _mini_secret(uri.phrase, uri.password)

    try:
        public, secret = _DERIVERS[scheme](mini_secret, uri.junctions)
    except (nacl.exceptions.CryptoError, ValueError, TypeError) as exc:
        raise KeyDerivationError(f"failed to derive {scheme.value} key: {exc}") from exc

    logger.debug(f"Derived {scheme.value} key with {len(uri.junctions)} junction(s)")
    return KeyPair(scheme=scheme, public_key=public, secret_key=secret)


def derive_public(seed: str, role: Role) -> bytes:
    """
    Derive the public identity a seed holds in a role.

    Args:
        seed: Secret URI
        role: Block-production or finality role

    Returns:
        Raw 32-byte public key
    """
    return derive_keypair(seed, Role(role).scheme).public_key


def derive_account_id(seed: str) -> bytes:
    """
    Derive the account id of a seed's primary-scheme key.

    Args:
        seed: Secret URI

    Returns:
        32-byte account id
    """
    public = derive_keypair(seed, PRIMARY_SCHEME).public_key
    return account_id_from_public(public)


def derive_authority_pair(seed: str) -> AuthorityKeys:
    """Derive both authority identities of one validator from a single seed."""
    return AuthorityKeys(
        block_production=derive_public(seed, Role.BLOCK_PRODUCTION),
        finality=derive_public(seed, Role.FINALITY),
    )
