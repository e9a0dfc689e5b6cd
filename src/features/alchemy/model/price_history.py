from pydantic import BaseModel, ConfigDict


class PricePoint(BaseModel):
    """https://docs.alchemy.com/reference/get-historical-token-prices"""
    model_config = ConfigDict(extra = "allow")

    value: str | float
    timestamp: str | None = None


class PriceHistory(BaseModel):
    model_config = ConfigDict(extra = "allow")

    symbol: str | None = None
    currency: str | None = None
    data: list[PricePoint] | None = None
