import unittest

from api.gas_summary_controller import GasSummaryController
from di.di import DI
from features.alchemy.alchemy_api import AlchemyAPI
from features.gas.gas_cost_aggregator import GasCostAggregator
from features.gas.historical_price_resolver import HistoricalPriceResolver
from features.gas.transaction_history_fetcher import TransactionHistoryFetcher


class DITest(unittest.TestCase):

    di: DI

    def setUp(self):
        self.di = DI()

    def test_nothing_is_built_upfront(self):
        self.assertIsNone(self.di._alchemy_api)
        self.assertIsNone(self.di._transaction_history_fetcher)
        self.assertIsNone(self.di._historical_price_resolver)
        self.assertIsNone(self.di._gas_cost_aggregator)
        self.assertIsNone(self.di._gas_summary_controller)

    def test_builds_dependencies_lazily(self):
        self.assertIsInstance(self.di.alchemy_api, AlchemyAPI)
        self.assertIsInstance(self.di.transaction_history_fetcher, TransactionHistoryFetcher)
        self.assertIsInstance(self.di.historical_price_resolver, HistoricalPriceResolver)
        self.assertIsInstance(self.di.gas_cost_aggregator, GasCostAggregator)
        self.assertIsInstance(self.di.gas_summary_controller, GasSummaryController)

    def test_reuses_built_dependencies(self):
        self.assertIs(self.di.alchemy_api, self.di.alchemy_api)
        self.assertIs(self.di.transaction_history_fetcher, self.di.transaction_history_fetcher)
        self.assertIs(self.di.historical_price_resolver, self.di.historical_price_resolver)
        self.assertIs(self.di.gas_cost_aggregator, self.di.gas_cost_aggregator)
        self.assertIs(self.di.gas_summary_controller, self.di.gas_summary_controller)

    def test_separate_containers_share_nothing(self):
        self.assertIsNot(DI().gas_cost_aggregator, self.di.gas_cost_aggregator)
