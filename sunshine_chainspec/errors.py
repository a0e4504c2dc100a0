"""Error types raised by chain specification construction."""


class ChainSpecError(Exception):
    """Base class for all chain specification errors."""


class SeedFormatError(ChainSpecError):
    """Seed string does not follow the secret URI grammar."""


class KeyDerivationError(ChainSpecError):
    """Key material could not be derived from a well-formed seed."""


class FileFormatError(ChainSpecError):
    """Specification file is missing, unreadable or malformed."""


class AddressFormatError(ChainSpecError):
    """Peer identifier or network address is malformed."""


class LengthMismatchError(ChainSpecError):
    """Block-production and finality authority sets disagree in length."""


class ConfigurationError(ChainSpecError):
    """Operator-supplied setting (environment variable) is unusable."""
