from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TransactionRecord(BaseModel):
    """
    https://docs.alchemy.com/reference/transactions-history-by-address

    Quantities and timestamps are kept as sent: a bad value makes only its own
    transaction unusable, never the whole page.
    """
    model_config = ConfigDict(extra = "allow", populate_by_name = True)

    hash: str | None = None
    gas_used: Any | None = Field(default = None, alias = "gasUsed")
    gas: Any | None = None
    effective_gas_price: Any | None = Field(default = None, alias = "effectiveGasPrice")
    gas_price: Any | None = Field(default = None, alias = "gasPrice")
    block_timestamp: Any | None = Field(default = None, alias = "blockTimestamp")


class TransactionPage(BaseModel):
    model_config = ConfigDict(extra = "allow")

    transactions: list[TransactionRecord] | None = None
    after: str | None = None
