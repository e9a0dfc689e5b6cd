import json
import tempfile
import unittest
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock, patch

from api.model.gas_summary_response import GasSummaryResponse
from main import calculate_gas, health, read_version
from util.config import config
from util.error_codes import MISSING_ADDRESS, PRICE_FETCH_FAILED
from util.errors import UpstreamError, ValidationError

ADDRESS = "0x00000000219ab540356cBB839Cbe05303d7705Fa"


class MainTest(unittest.TestCase):

    mock_di: MagicMock
    di_patcher: Any

    def setUp(self):
        self.di_patcher = patch("main.DI")
        self.mock_di = self.di_patcher.start().return_value

    def tearDown(self):
        self.di_patcher.stop()

    def test_health(self):
        self.assertEqual(health(), {"status": "ok", "version": config.version})

    def test_calculate_gas_success(self):
        self.mock_di.gas_summary_controller.compute_gas_summary.return_value = GasSummaryResponse(
            total_gas_cost_wei = "1000000000000000000",
            total_gas_cost_eth = "1",
            total_gas_cost_usd = "10.00",
            transaction_costs = [],
            skipped_transactions = 0,
            stale_price_substitutions = 0,
        )

        response = calculate_gas(ADDRESS)

        self.mock_di.gas_summary_controller.compute_gas_summary.assert_called_once_with(ADDRESS)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            json.loads(response.body),
            {
                "totalGasCostWei": "1000000000000000000",
                "totalGasCostETH": "1",
                "totalGasCostUSD": "10.00",
                "transactionCosts": [],
                "skippedTransactions": 0,
                "stalePriceSubstitutions": 0,
            },
        )

    def test_calculate_gas_missing_address(self):
        self.mock_di.gas_summary_controller.compute_gas_summary.side_effect = ValidationError(
            "Missing address parameter", MISSING_ADDRESS,
        )

        response = calculate_gas(None)

        self.assertEqual(response.status_code, 400)
        self.assertEqual(json.loads(response.body), {"error": "Missing address parameter"})

    def test_calculate_gas_upstream_failure(self):
        self.mock_di.gas_summary_controller.compute_gas_summary.side_effect = UpstreamError(
            "Failed to fetch historical price: 503 Server Error", PRICE_FETCH_FAILED,
        )

        response = calculate_gas(ADDRESS)

        self.assertEqual(response.status_code, 500)
        self.assertEqual(json.loads(response.body), {"error": "Failed to fetch historical price: 503 Server Error"})

    def test_calculate_gas_unexpected_failure(self):
        self.mock_di.gas_summary_controller.compute_gas_summary.side_effect = RuntimeError("boom")

        response = calculate_gas(ADDRESS)

        self.assertEqual(response.status_code, 500)
        self.assertEqual(json.loads(response.body), {"error": "boom"})

    def test_read_version(self):
        with tempfile.TemporaryDirectory() as directory:
            version_file = Path(directory) / ".version"
            self.assertIsNone(read_version(version_file))

            version_file.write_text("  \n")
            self.assertIsNone(read_version(version_file))

            version_file.write_text("1.4.2\n")
            self.assertEqual(read_version(version_file), "1.4.2")
