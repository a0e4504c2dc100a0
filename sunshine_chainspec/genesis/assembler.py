"""
Genesis state assembly.

Combines authority identities and endowed accounts into one state in
which the block-production and finality subsystems agree on the
validator set.
"""

import logging
from typing import Iterable, Optional, Sequence, Tuple

from ..crypto.keys import AuthorityKeys
from ..errors import LengthMismatchError
from ..models.genesis import (
    AuraConfig,
    BalancesConfig,
    GenesisState,
    GrandpaConfig,
    SystemConfig,
)
from .runtime import load_runtime_code

logger = logging.getLogger(__name__)

# Balance given to every endowed account of a built-in network
ENDOWMENT = 1 << 60

# Every finality authority votes with the same weight
FINALITY_WEIGHT = 1


def pair_authorities(
    block_production: Sequence[bytes],
    finality: Sequence[bytes]
) -> Tuple[AuthorityKeys, ...]:
    """
    Pair separately supplied authority identities by index.

    Args:
        block_production: Block-production identities, in order
        finality: Finality identities, in the same validator order

    Returns:
        Tuple of AuthorityKeys

    Raises:
        LengthMismatchError: If the two lists differ in length
    """
    if len(block_production) != len(finality):
        raise LengthMismatchError(
            f"cannot pair {len(block_production)} block-production identities "
            f"with {len(finality)} finality identities"
        )
    return tuple(
        AuthorityKeys(block_production=production, finality=voter)
        for production, voter in zip(block_production, finality)
    )


def build(
    authorities: Iterable[Tuple[bytes, bytes]],
    endowed: Iterable[bytes],
    code: Optional[bytes] = None
) -> GenesisState:
    """
    Assemble the genesis state.

    The caller supplies authorities already index-correlated; their
    order becomes the block production order.

    Args:
        authorities: (block-production id, finality id) per validator
        endowed: Account ids to fund with ENDOWMENT
        code: Compiled ledger code (defaults to the configured runtime)

    Returns:
        GenesisState: Frozen initial state

    Raises:
        LengthMismatchError: If the assembled authority blocks disagree
    """
    authorities = [tuple(entry) for entry in authorities]
    endowed = list(endowed)
    if code is None:
        code = load_runtime_code()

    state = GenesisState(
        frame_system=SystemConfig(code=code, changes_trie_config=None),
        pallet_balances=BalancesConfig(
            balances=[(account, ENDOWMENT) for account in endowed]
        ),
        pallet_aura=AuraConfig(
            authorities=[production for production, _ in authorities]
        ),
        pallet_grandpa=GrandpaConfig(
            authorities=[(voter, FINALITY_WEIGHT) for _, voter in authorities]
        ),
    )

    logger.debug(
        f"Assembled genesis with {len(authorities)} authorities "
        f"and {len(endowed)} endowed accounts"
    )
    return state
