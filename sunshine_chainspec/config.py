"""
Configuration for chain specification tooling.

Values are read once from the environment at import time.
"""

import os
from typing import Optional

# SS58 address prefix used for text forms of keys and accounts
SS58_FORMAT = int(os.getenv("SUNSHINE_SS58_FORMAT", "42"))

# Compiled runtime blob embedded in the genesis system block
RUNTIME_WASM_PATH: Optional[str] = os.getenv("SUNSHINE_RUNTIME_WASM") or None

LOG_LEVEL = os.getenv("SUNSHINE_LOG_LEVEL", "INFO").upper()
