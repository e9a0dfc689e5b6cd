from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from api.gas_summary_controller import GasSummaryController
    from features.alchemy.alchemy_api import AlchemyAPI
    from features.gas.gas_cost_aggregator import GasCostAggregator
    from features.gas.historical_price_resolver import HistoricalPriceResolver
    from features.gas.transaction_history_fetcher import TransactionHistoryFetcher


class DI:

    # SDKs
    _alchemy_api: "AlchemyAPI | None"
    # Features
    _transaction_history_fetcher: "TransactionHistoryFetcher | None"
    _historical_price_resolver: "HistoricalPriceResolver | None"
    _gas_cost_aggregator: "GasCostAggregator | None"
    # Controllers
    _gas_summary_controller: "GasSummaryController | None"

    def __init__(self):
        # SDKs
        self._alchemy_api = None
        # Features
        self._transaction_history_fetcher = None
        self._historical_price_resolver = None
        self._gas_cost_aggregator = None
        # Controllers
        self._gas_summary_controller = None

    # === SDKs ===

    @property
    def alchemy_api(self) -> "AlchemyAPI":
        if self._alchemy_api is None:
            from features.alchemy.alchemy_api import AlchemyAPI
            self._alchemy_api = AlchemyAPI()
        return self._alchemy_api

    # === Features ===

    @property
    def transaction_history_fetcher(self) -> "TransactionHistoryFetcher":
        if self._transaction_history_fetcher is None:
            from features.gas.transaction_history_fetcher import TransactionHistoryFetcher
            self._transaction_history_fetcher = TransactionHistoryFetcher(self)
        return self._transaction_history_fetcher

    @property
    def historical_price_resolver(self) -> "HistoricalPriceResolver":
        if self._historical_price_resolver is None:
            from features.gas.historical_price_resolver import HistoricalPriceResolver
            self._historical_price_resolver = HistoricalPriceResolver(self)
        return self._historical_price_resolver

    @property
    def gas_cost_aggregator(self) -> "GasCostAggregator":
        if self._gas_cost_aggregator is None:
            from features.gas.gas_cost_aggregator import GasCostAggregator
            self._gas_cost_aggregator = GasCostAggregator(self)
        return self._gas_cost_aggregator

    # === Controllers ===

    @property
    def gas_summary_controller(self) -> "GasSummaryController":
        if self._gas_summary_controller is None:
            from api.gas_summary_controller import GasSummaryController
            self._gas_summary_controller = GasSummaryController(self)
        return self._gas_summary_controller
