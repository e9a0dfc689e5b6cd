import os
from typing import Callable

from pydantic import SecretStr


class Config:

    log_level: str
    web_timeout_s: int
    network: str
    history_page_size: int
    price_symbol: str
    price_interval: str
    alchemy_data_api_url: str
    alchemy_prices_api_url: str
    version: str
    port: int

    alchemy_api_key: SecretStr

    def all_secrets(self) -> list[SecretStr]:
        return [
            self.alchemy_api_key,
        ]

    def __init__(
        self,
        def_log_level: str = "INFO",
        def_web_timeout_s: int = 10,
        def_network: str = "eth-mainnet",
        def_history_page_size: int = 50,
        def_price_symbol: str = "ETH",
        def_price_interval: str = "1h",
        def_alchemy_data_api_url: str = "https://api.g.alchemy.com/data/v1",
        def_alchemy_prices_api_url: str = "https://api.g.alchemy.com/prices/v1",
        def_version: str = "dev",
        def_port: int = 8000,

        def_alchemy_api_key: SecretStr = SecretStr(""),
    ):
        # @formatter:off
        self.log_level = self.__env("LOG_LEVEL", lambda: def_log_level).lower()
        self.web_timeout_s = int(self.__env("WEB_TIMEOUT_S", lambda: str(def_web_timeout_s)))
        self.network = self.__env("NETWORK", lambda: def_network)
        self.history_page_size = int(self.__env("HISTORY_PAGE_SIZE", lambda: str(def_history_page_size)))
        self.price_symbol = self.__env("PRICE_SYMBOL", lambda: def_price_symbol).upper()
        self.price_interval = self.__env("PRICE_INTERVAL", lambda: def_price_interval)
        self.alchemy_data_api_url = self.__env("ALCHEMY_DATA_API_URL", lambda: def_alchemy_data_api_url).rstrip("/")
        self.alchemy_prices_api_url = self.__env("ALCHEMY_PRICES_API_URL", lambda: def_alchemy_prices_api_url).rstrip("/")
        self.version = self.__env("VERSION", lambda: def_version)
        self.port = int(self.__env("PORT", lambda: str(def_port)))

        self.alchemy_api_key = self.__senv("ALCHEMY_API_KEY", lambda: def_alchemy_api_key)
        # @formatter:on

    @staticmethod
    def __env(name: str, default: Callable[[], str]) -> str:
        env_value = os.environ.get(name, "").strip()
        return env_value if env_value else default()

    @staticmethod
    def __senv(name: str, default: Callable[[], SecretStr]) -> SecretStr:
        env_value = os.environ.get(name, "").strip()
        return SecretStr(env_value) if env_value else default()


config = Config()
