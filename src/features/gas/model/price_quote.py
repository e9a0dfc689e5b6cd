from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen = True, kw_only = True)
class PriceQuote:
    window_start: datetime
    window_end: datetime
    price_usd: float
