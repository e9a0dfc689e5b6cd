from requests import RequestException

from di.di import DI
from features.gas.model.price_quote import PriceQuote
from features.gas.wei_units import PRICE_WINDOW, format_iso_ms, moment_of
from util import log
from util.config import config
from util.error_codes import PRICE_FETCH_FAILED
from util.errors import UpstreamError


class HistoricalPriceResolver:

    __di: DI

    def __init__(self, di: DI):
        self.__di = di

    def resolve(self, timestamp_ms: int) -> PriceQuote | None:
        window_start = moment_of(timestamp_ms)
        window_end = window_start + PRICE_WINDOW
        start_time = format_iso_ms(window_start)
        end_time = format_iso_ms(window_end)
        log.t(f"Resolving {config.price_symbol}/USD price for [{start_time}, {end_time})")

        try:
            history = self.__di.alchemy_api.fetch_historical_prices(
                symbol = config.price_symbol,
                start_time = start_time,
                end_time = end_time,
                interval = config.price_interval,
            )
            if not history.data:
                log.w(f"Historical price not found for {start_time} - {end_time}")
                return None
            price_usd = float(history.data[0].value)
        except (RequestException, ValueError) as e:
            raise UpstreamError(log.e(f"Failed to fetch historical price for {start_time}: {e}"), PRICE_FETCH_FAILED) from e

        return PriceQuote(window_start = window_start, window_end = window_end, price_usd = price_usd)
