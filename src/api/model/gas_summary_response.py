from pydantic import BaseModel, ConfigDict, Field


class TransactionCostResponse(BaseModel):
    model_config = ConfigDict(populate_by_name = True)

    hash: str | None
    timestamp: str | int | float
    cost_eth: float = Field(alias = "costETH")
    cost_usd: float = Field(alias = "costUSD")


class GasSummaryResponse(BaseModel):
    model_config = ConfigDict(populate_by_name = True)

    total_gas_cost_wei: str = Field(alias = "totalGasCostWei")
    total_gas_cost_eth: str = Field(alias = "totalGasCostETH")
    total_gas_cost_usd: str = Field(alias = "totalGasCostUSD")
    transaction_costs: list[TransactionCostResponse] = Field(alias = "transactionCosts")
    skipped_transactions: int = Field(alias = "skippedTransactions")
    stale_price_substitutions: int = Field(alias = "stalePriceSubstitutions")
