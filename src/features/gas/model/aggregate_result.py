from dataclasses import dataclass

from features.gas.model.transaction_cost import TransactionCost


@dataclass(frozen = True, kw_only = True)
class AggregateResult:
    total_cost_wei: str
    total_cost_eth: str
    total_cost_usd: str
    transaction_costs: tuple[TransactionCost, ...]
    skipped_count: int
    stale_price_count: int
