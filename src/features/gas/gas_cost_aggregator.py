from dataclasses import dataclass, replace

from di.di import DI
from features.alchemy.model.transaction_page import TransactionRecord
from features.gas.model.aggregate_result import AggregateResult
from features.gas.model.transaction_cost import TransactionCost
from features.gas.wei_units import format_ether, parse_quantity, parse_timestamp_ms, to_ether
from util import log
from util.functions import first_present


@dataclass(frozen = True, kw_only = True)
class _Tally:
    """Running state of one aggregation, threaded through the transactions in fetch order."""
    total_wei: int = 0
    total_usd: float = 0.0
    costs: tuple[TransactionCost, ...] = ()
    skipped_count: int = 0
    stale_price_count: int = 0
    last_known_price: float | None = None

    def skip(self, record: TransactionRecord, reason: str) -> "_Tally":
        log.w(f"Transaction {record.hash} {reason}, skipping")
        return replace(self, skipped_count = self.skipped_count + 1)

    def add(self, cost: TransactionCost) -> "_Tally":
        return replace(
            self,
            total_wei = self.total_wei + cost.cost_wei,
            total_usd = self.total_usd + cost.cost_usd,
            costs = self.costs + (cost,),
        )


class GasCostAggregator:
    """
    Computes how much gas an address has paid for across its whole history.

    Transactions are processed one at a time in the order the provider returned them:
    when a historical price is missing, the price resolved for an earlier transaction
    of the same run is used instead. Transactions that can't be costed or priced are
    skipped; upstream failures abort the whole aggregation.
    """

    __di: DI

    def __init__(self, di: DI):
        self.__di = di

    def execute(self, address: str) -> AggregateResult:
        log.d(f"Calculating total gas cost for '{address}'")
        transactions = self.__di.transaction_history_fetcher.execute(address)

        tally = _Tally()
        for record in transactions:
            tally = self.__fold(tally, record)

        log.i(
            f"Gas cost for '{address}' calculated",
            f"Priced: {len(tally.costs)}",
            f"Skipped: {tally.skipped_count}",
            f"Stale prices used: {tally.stale_price_count}",
        )
        return AggregateResult(
            total_cost_wei = str(tally.total_wei),
            total_cost_eth = format_ether(tally.total_wei),
            total_cost_usd = f"{tally.total_usd:.2f}",
            transaction_costs = tally.costs,
            skipped_count = tally.skipped_count,
            stale_price_count = tally.stale_price_count,
        )

    def __fold(self, tally: _Tally, record: TransactionRecord) -> _Tally:
        gas_used_value = first_present(record.gas_used, record.gas)
        if gas_used_value is None:
            return tally.skip(record, "missing gasUsed/gas")
        gas_price_value = first_present(record.effective_gas_price, record.gas_price)
        if gas_price_value is None:
            return tally.skip(record, "missing effectiveGasPrice/gasPrice")

        try:
            cost_wei = parse_quantity(gas_used_value) * parse_quantity(gas_price_value)
            cost_eth = float(to_ether(cost_wei))
        except ValueError as e:
            return tally.skip(record, f"has an unreadable gas quantity ({e})")

        timestamp_value = first_present(record.block_timestamp)
        if timestamp_value is None:
            return tally.skip(record, "missing blockTimestamp")
        try:
            timestamp_ms = parse_timestamp_ms(timestamp_value)
        except (ValueError, OverflowError) as e:
            return tally.skip(record, f"has an unreadable blockTimestamp ({e})")

        # upstream failures propagate from here and abort the run
        quote = self.__di.historical_price_resolver.resolve(timestamp_ms)
        if quote is not None:
            price_usd = quote.price_usd
            tally = replace(tally, last_known_price = price_usd)
        elif tally.last_known_price is not None:
            log.w(f"Using last valid historical price for transaction {record.hash}")
            price_usd = tally.last_known_price
            tally = replace(tally, stale_price_count = tally.stale_price_count + 1)
        else:
            return tally.skip(record, "has no historical price and no prior price is available")

        return tally.add(
            TransactionCost(
                hash = record.hash,
                timestamp = timestamp_value,
                cost_wei = cost_wei,
                cost_eth = cost_eth,
                cost_usd = cost_eth * price_usd,
            ),
        )
