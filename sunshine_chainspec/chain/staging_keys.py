"""
Fixed key material of the staging network.

These keys were generated offline and are the only authority keys of
the staging network. Nothing in this table is derived from a seed, and
the seed derivation code never reads it.
"""

from typing import Tuple

from ..crypto.keys import AuthorityKeys

# Controller keys, used for block production
# 5FCsDTobbck9vtfqGnyYbqbFw5YrtWyK6FaVZ1Sq2KWCVLit
# 5EjhaW3GzQ3d8JrbWv5iZMq6RDMssPxQLJZ3qQTPSgKF8Jxb
# 5F2AHzWa1V2R2X3Pk6Sq7RG9dqH5AV1FrZ15RS5P4m6ZAYmt
CONTROLLER_KEYS = (
    bytes.fromhex("8aee2acc755ee0a3e161db53b03fd988b0c8e00d8c09dbc4edd22b4523eeb868"),
    bytes.fromhex("7636196df2d9e3d998ee88b665b1b5d6997f9d26a6bbe1e4ee594ca984ac0c0b"),
    bytes.fromhex("82c3f52d3eb6ce05233343f4a0c9096b03ba59d0826751095e3cdce00ff8cb41"),
)

# Session keys, used for finality voting
# 5DUiDNXtr9WWQ6Sg9cpd5XDfbLRMXV9RQ3SfyEMsMj4yeB4Q
# 5EX52w4Rzi66uPeXnz9kFVL7zva3bX3byM2MRs6exJTwNxXn
# 5CZp81EdMJLjCyEVccuF2DDfXfb6vUgdQTfT5fQvdP9XjyF9
SESSION_KEYS = (
    bytes.fromhex("3e8b532432f03543a7bd6ceaccc6469cdcce0d996728a2f84b9b76cec3ec66b9"),
    bytes.fromhex("6c9422aca5f4cbbc8b38bae94d01a43443a3152b1c3e87c0fbde2ad3a473de35"),
    bytes.fromhex("163334629ed454020ca7068329cf35064bab7e8cf4a60f76beff637c0817b5bd"),
)

STAGING_AUTHORITIES: Tuple[AuthorityKeys, ...] = tuple(
    AuthorityKeys(block_production=controller, finality=session)
    for controller, session in zip(CONTROLLER_KEYS, SESSION_KEYS)
)

# Peer ids of the staging boot nodes
STAGING_BOOT_PEER_IDS = (
    "12D3KooWAhftS4ujcxgJDoEaJ8hFaQTuc4Vk3jsthP2fBbh9tc8f",
    "12D3KooWK2b6aJsBMkg3JRn4PbCZBXaGcB9mA1YtqQ7ZWpqg3cmv",
    "12D3KooWRCioHfKYchRJAhd5ZEaZwVMYTNuNG7JDCHjGa3ozxS4M",
)

# TODO: replace with the public addresses of the staging boot nodes once they are published
STAGING_BOOT_ADDRESS = "/ip4/127.0.0.1"
