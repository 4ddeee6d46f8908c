"""Services behind the withdrawal endpoints.

- querier: read-only chain state queries
- tx_generator: unsigned transactions for client-side signing
- broadcast: hand-off to the external sign-and-broadcast collaborator
"""

from rewards_gateway.services.querier import LcdRewardsQuerier, RewardsQuerier
from rewards_gateway.services.tx_generator import TxGenerator

__all__ = [
    "LcdRewardsQuerier",
    "RewardsQuerier",
    "TxGenerator",
]
