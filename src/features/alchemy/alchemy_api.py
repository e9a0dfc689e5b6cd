import requests
from requests import RequestException, Response

from features.alchemy.model.price_history import PriceHistory
from features.alchemy.model.transaction_page import TransactionPage
from util import log
from util.config import config
from util.error_codes import MISSING_API_KEY
from util.errors import ConfigurationError
from util.functions import mask_in


class AlchemyAPI:
    """https://docs.alchemy.com/reference/data-apis"""

    def fetch_transactions_page(
        self,
        address: str,
        network: str,
        limit: int,
        after: str | None = None,
    ) -> TransactionPage:
        log.t(f"Fetching transactions page for '{address}' on {network} (limit {limit}, after {after or 'none'})")
        payload: dict = {
            "addresses": [{"address": address, "networks": [network]}],
            "limit": limit,
        }
        if after:
            payload["after"] = after
        url = f"{config.alchemy_data_api_url}/{self.__api_key()}/transactions/history/by-address"
        response = self.__post_request(url, payload)
        return TransactionPage.model_validate(response)

    def fetch_historical_prices(
        self,
        symbol: str,
        start_time: str,
        end_time: str,
        interval: str,
    ) -> PriceHistory:
        log.t(f"Fetching {symbol} prices for [{start_time}, {end_time}) at {interval}")
        payload = {
            "symbol": symbol,
            "startTime": start_time,
            "endTime": end_time,
            "interval": interval,
        }
        url = f"{config.alchemy_prices_api_url}/{self.__api_key()}/tokens/historical"
        response = self.__post_request(url, payload)
        return PriceHistory.model_validate(response)

    def __api_key(self) -> str:
        api_key = config.alchemy_api_key.get_secret_value()
        if not api_key:
            raise ConfigurationError(log.e("Alchemy API key is not configured (ALCHEMY_API_KEY)"), MISSING_API_KEY)
        return api_key

    def __post_request(self, url: str, payload: dict) -> dict:
        log.t(f"  POST {mask_in(url, config.alchemy_api_key)}")
        headers = {"Accept": "application/json", "Content-Type": "application/json"}
        try:
            response = requests.post(url, json = payload, headers = headers, timeout = config.web_timeout_s)
            self.__raise_for_status(response)
        except RequestException as e:
            # requests puts the full URL into its messages, and the URL carries the API key
            masked_message = mask_in(str(e), config.alchemy_api_key)
            raise RequestException(masked_message, request = e.request, response = e.response) from None
        return response.json()

    def __raise_for_status(self, response: Response | None):
        if response is None:
            raise RequestException(log.e("No API response received"))
        if response.status_code < 200 or response.status_code > 299:
            log.e(f"  Status is not '200': HTTP_{response.status_code}!", response.text)
            response.raise_for_status()
