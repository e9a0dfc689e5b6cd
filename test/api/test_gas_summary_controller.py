import unittest
from unittest.mock import Mock

from api.gas_summary_controller import GasSummaryController
from di.di import DI
from features.gas.gas_cost_aggregator import GasCostAggregator
from features.gas.model.aggregate_result import AggregateResult
from features.gas.model.transaction_cost import TransactionCost
from util.error_codes import HISTORY_FETCH_FAILED, MISSING_ADDRESS
from util.errors import UpstreamError, ValidationError

ADDRESS = "0x00000000219ab540356cBB839Cbe05303d7705Fa"


class GasSummaryControllerTest(unittest.TestCase):

    mock_di: DI
    mock_aggregator: Mock
    controller: GasSummaryController

    def setUp(self):
        self.mock_di = Mock(spec = DI)
        self.mock_aggregator = Mock(spec = GasCostAggregator)
        # noinspection PyPropertyAccess
        self.mock_di.gas_cost_aggregator = self.mock_aggregator
        self.controller = GasSummaryController(self.mock_di)

    def test_missing_address_is_rejected(self):
        for address in [None, "", "   "]:
            with self.assertRaises(ValidationError) as context:
                self.controller.compute_gas_summary(address)
            self.assertEqual(context.exception.error_code, MISSING_ADDRESS)
            self.assertEqual(context.exception.http_status, 400)
            self.assertEqual(context.exception.to_api_dict(), {"error": "Missing address parameter"})
        self.mock_aggregator.execute.assert_not_called()

    def test_computes_summary_for_trimmed_address(self):
        self.mock_aggregator.execute.return_value = AggregateResult(
            total_cost_wei = "420000000000000",
            total_cost_eth = "0.00042",
            total_cost_usd = "0.84",
            transaction_costs = (
                TransactionCost(
                    hash = "0xa",
                    timestamp = "1700000000000",
                    cost_wei = 420000000000000,
                    cost_eth = 0.00042,
                    cost_usd = 0.84,
                ),
            ),
            skipped_count = 1,
            stale_price_count = 0,
        )

        response = self.controller.compute_gas_summary(f"  {ADDRESS} ")

        self.mock_aggregator.execute.assert_called_once_with(ADDRESS)
        self.assertEqual(response.total_gas_cost_wei, "420000000000000")
        self.assertEqual(response.total_gas_cost_eth, "0.00042")
        self.assertEqual(response.total_gas_cost_usd, "0.84")
        self.assertEqual(len(response.transaction_costs), 1)
        self.assertEqual(response.transaction_costs[0].hash, "0xa")
        self.assertEqual(response.skipped_transactions, 1)

    def test_upstream_failure_propagates(self):
        self.mock_aggregator.execute.side_effect = UpstreamError("History unavailable", HISTORY_FETCH_FAILED)

        with self.assertRaises(UpstreamError):
            self.controller.compute_gas_summary(ADDRESS)
