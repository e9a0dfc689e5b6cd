from datetime import datetime, timedelta, timezone
from decimal import Decimal, InvalidOperation

from web3 import Web3

EPOCH = datetime(1970, 1, 1, tzinfo = timezone.utc)
ONE_MS = timedelta(milliseconds = 1)
PRICE_WINDOW = timedelta(hours = 1)


def parse_quantity(value: str | int) -> int:
    """
    Parses an on-chain quantity the way providers send it: an integer,
    a decimal string, or a '0x'-prefixed hex string. Raises ValueError otherwise.
    """
    if isinstance(value, bool):
        raise ValueError(f"Not a quantity: {value!r}")
    if isinstance(value, int):
        quantity = value
    elif isinstance(value, str):
        raw = value.strip()
        if raw.lower().startswith("0x"):
            quantity = int(raw[2:], 16)
        else:
            quantity = int(raw, 10)
    else:
        raise ValueError(f"Not a quantity: {value!r}")
    if quantity < 0:
        raise ValueError(f"Negative quantity: {value!r}")
    return quantity


def to_ether(wei: int) -> Decimal:
    # from_wei returns a plain int zero for zero input
    return Decimal(Web3.from_wei(wei, "ether"))


def format_ether(wei: int) -> str:
    rendered = format(to_ether(wei), "f")
    if "." in rendered:
        rendered = rendered.rstrip("0").rstrip(".")
    return rendered


def parse_timestamp_ms(value: str | int | float) -> int:
    """
    Block timestamps come as milliseconds since epoch (number or numeric string),
    some provider versions send ISO-8601 instead. Raises ValueError when neither works.
    """
    if isinstance(value, bool):
        raise ValueError(f"Not a timestamp: {value!r}")
    if isinstance(value, (int, float)):
        return _within_calendar(int(value))
    if not isinstance(value, str):
        raise ValueError(f"Not a timestamp: {value!r}")
    raw = value.strip()
    try:
        return _within_calendar(int(Decimal(raw)))
    except (InvalidOperation, OverflowError):
        pass
    parsed = datetime.fromisoformat(raw.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo = timezone.utc)
    return _within_calendar((parsed - EPOCH) // ONE_MS)


def moment_of(timestamp_ms: int) -> datetime:
    return EPOCH + timestamp_ms * ONE_MS


def format_iso_ms(moment: datetime) -> str:
    return moment.isoformat(timespec = "milliseconds").replace("+00:00", "Z")


def _within_calendar(timestamp_ms: int) -> int:
    # the whole price window has to fit in the calendar too
    try:
        moment_of(timestamp_ms) + PRICE_WINDOW
    except OverflowError as e:
        raise ValueError(f"Timestamp out of range: {timestamp_ms}") from e
    return timestamp_ms
