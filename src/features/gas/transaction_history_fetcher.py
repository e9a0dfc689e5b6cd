from typing import Iterator

from requests import RequestException

from di.di import DI
from features.alchemy.model.transaction_page import TransactionRecord
from util import log
from util.config import config
from util.error_codes import HISTORY_FETCH_FAILED
from util.errors import UpstreamError

MAX_PAGE_SIZE = 50  # provider maximum


class TransactionHistoryFetcher:

    __di: DI

    def __init__(self, di: DI):
        self.__di = di

    def execute(self, address: str) -> list[TransactionRecord]:
        log.d(f"Fetching transaction history for '{address}' on {config.network}")
        try:
            transactions = [record for page in self.__pages(address) for record in page]
        except (RequestException, ValueError) as e:
            raise UpstreamError(log.e(f"Failed to fetch transaction history for '{address}': {e}"), HISTORY_FETCH_FAILED) from e
        log.i(f"Total transactions fetched for '{address}': {len(transactions)}")
        return transactions

    def __pages(self, address: str) -> Iterator[list[TransactionRecord]]:
        page_size = max(1, min(config.history_page_size, MAX_PAGE_SIZE))
        cursor: str | None = None
        page_number = 1
        while True:
            log.d(f"  Fetching page {page_number} with cursor: {cursor or 'none'}")
            page = self.__di.alchemy_api.fetch_transactions_page(
                address = address,
                network = config.network,
                limit = page_size,
                after = cursor,
            )
            if not page.transactions:
                return
            yield page.transactions
            if not page.after:
                return
            cursor = page.after
            page_number += 1
