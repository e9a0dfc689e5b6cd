from dataclasses import dataclass


@dataclass(frozen = True, kw_only = True)
class TransactionCost:
    hash: str | None
    timestamp: str | int | float
    cost_wei: int
    cost_eth: float
    cost_usd: float
