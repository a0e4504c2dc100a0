"""Compiled ledger code embedded in the genesis system block."""

import logging
from pathlib import Path
from typing import Optional

from .. import config
from ..errors import ConfigurationError

logger = logging.getLogger(__name__)

WASM_MAGIC = b"\x00asm"
WASM_VERSION = b"\x01\x00\x00\x00"

# Smallest valid WebAssembly module, used when no runtime is configured
EMPTY_RUNTIME_CODE = WASM_MAGIC + WASM_VERSION


def load_runtime_code(path: Optional[str] = None) -> bytes:
    """
    Load the compiled runtime blob.

    Args:
        path: Path to a .wasm file (defaults to SUNSHINE_RUNTIME_WASM)

    Returns:
        Runtime code bytes

    Raises:
        ConfigurationError: If the file cannot be read or is not WebAssembly
    """
    path = path or config.RUNTIME_WASM_PATH
    if path is None:
        return EMPTY_RUNTIME_CODE

    try:
        code = Path(path).read_bytes()
    except OSError as exc:
        raise ConfigurationError(f"cannot read runtime code {path}: {exc}") from exc

    if not code.startswith(WASM_MAGIC):
        raise ConfigurationError(f"runtime code {path} is not a WebAssembly module")

    logger.info(f"Loaded runtime code from {path} ({len(code)} bytes)")
    return code
