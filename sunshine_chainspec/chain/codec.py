"""
Chain specification file format.

Specifications are exchanged as JSON. The genesis state is nested under
``genesis.runtime`` with one camelCase entry per subsystem (``frameSystem``,
``palletBalances``, ``palletAura``, ``palletGrandpa``); keys are written in
SS58 form and the ledger code as 0x-prefixed hex.
"""

import json
import logging
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from ..errors import ChainSpecError, FileFormatError
from ..models.chain_spec import ChainSpecification

logger = logging.getLogger(__name__)


def export_spec(spec: ChainSpecification) -> bytes:
    """
    Serialize a chain specification.

    Args:
        spec: Specification to export

    Returns:
        UTF-8 encoded JSON document
    """
    data = spec.model_dump(mode='json', by_alias=True, exclude={"genesis"})
    data["genesis"] = {"runtime": spec.genesis.model_dump(mode='json', by_alias=True)}
    return json.dumps(data, indent=2).encode('utf-8')


def import_spec(data: bytes) -> ChainSpecification:
    """
    Deserialize a chain specification.

    Args:
        data: Bytes produced by export_spec or an equivalent tool

    Returns:
        ChainSpecification: Loaded specification

    Raises:
        FileFormatError: If the document is truncated, corrupted or
            does not describe a consistent specification
    """
    try:
        document = json.loads(bytes(data).decode('utf-8'))
    except (UnicodeDecodeError, ValueError, TypeError, RecursionError) as exc:
        raise FileFormatError(f"specification is not valid JSON: {exc}") from exc

    if not isinstance(document, dict):
        raise FileFormatError("specification must be a JSON object")

    genesis = document.get("genesis")
    if not isinstance(genesis, dict) or not isinstance(genesis.get("runtime"), dict):
        raise FileFormatError("specification has no genesis.runtime section")

    document = dict(document, genesis=genesis["runtime"])
    try:
        return ChainSpecification.model_validate(document)
    except ValidationError as exc:
        raise FileFormatError(f"invalid specification: {exc}") from exc
    except ChainSpecError as exc:
        raise FileFormatError(f"inconsistent specification: {exc}") from exc


def save_file(spec: ChainSpecification, path: Union[str, Path]) -> Path:
    """
    Write a chain specification to a file.

    Args:
        spec: Specification to write
        path: Destination file

    Returns:
        Path written

    Raises:
        FileFormatError: If the file cannot be written
    """
    path = Path(path)
    data = export_spec(spec)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'wb') as f:
            f.write(data)
    except OSError as exc:
        raise FileFormatError(f"cannot write specification {path}: {exc}") from exc

    logger.info(f"Wrote chain specification {spec.chain_id} to {path}")
    return path


def load_file(path: Union[str, Path]) -> ChainSpecification:
    """
    Read a chain specification from a file.

    Args:
        path: Specification file

    Returns:
        ChainSpecification: Loaded specification

    Raises:
        FileFormatError: If the file is unreadable or malformed
    """
    try:
        with open(path, 'rb') as f:
            data = f.read()
    except OSError as exc:
        raise FileFormatError(f"cannot read specification {path}: {exc}") from exc

    spec = import_spec(data)
    logger.info(f"Loaded chain specification {spec.chain_id} from {path}")
    return spec
