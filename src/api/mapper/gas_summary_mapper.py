from api.model.gas_summary_response import GasSummaryResponse, TransactionCostResponse
from features.gas.model.aggregate_result import AggregateResult
from features.gas.model.transaction_cost import TransactionCost


def domain_to_api(result: AggregateResult) -> GasSummaryResponse:
    return GasSummaryResponse(
        total_gas_cost_wei = result.total_cost_wei,
        total_gas_cost_eth = result.total_cost_eth,
        total_gas_cost_usd = result.total_cost_usd,
        transaction_costs = [transaction_cost_to_api(cost) for cost in result.transaction_costs],
        skipped_transactions = result.skipped_count,
        stale_price_substitutions = result.stale_price_count,
    )


def transaction_cost_to_api(cost: TransactionCost) -> TransactionCostResponse:
    return TransactionCostResponse(
        hash = cost.hash,
        timestamp = cost.timestamp,
        cost_eth = cost.cost_eth,
        cost_usd = cost.cost_usd,
    )
