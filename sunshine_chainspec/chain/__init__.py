"""Chain profiles and the specification file format."""

from .profiles import (
    ChainProfile,
    Dev,
    Local,
    Staging,
    CustomFile,
    parse,
    resolve,
    dev_chain_spec,
    local_chain_spec,
    staging_chain_spec,
)
from .codec import export_spec, import_spec, save_file, load_file

__all__ = [
    "ChainProfile",
    "Dev",
    "Local",
    "Staging",
    "CustomFile",
    "parse",
    "resolve",
    "dev_chain_spec",
    "local_chain_spec",
    "staging_chain_spec",
    "export_spec",
    "import_spec",
    "save_file",
    "load_file",
]
