"""Currency and timestamp formatting helpers."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

DEFAULT_TIMEZONE = "Asia/Jakarta"


def currency_to_str(x: float) -> str:
    """Format an amount with exactly two decimals."""
    return f"{x:.2f}"


def str_to_currency(x: str) -> float:
    """Parse an amount; raises ValueError on malformed input."""
    if x != x.strip() or "_" in x:
        raise ValueError(f"invalid number: {x!r}")
    return float(x)


def human_currency(prefix: str, currency: float) -> str:
    """Format as ``"<prefix> 1.234.567,89"`` with dot thousands and comma decimals."""
    text = f"{currency:.2f}"
    whole, sep, decimal = text.partition(".")
    if not sep:
        raise ValueError(f"cannot format amount: {currency!r}")
    for cut in range(len(whole) - 3, 0, -3):
        whole = f"{whole[:cut]}.{whole[cut:]}"
    return f"{prefix} {whole},{decimal}"


def _local_timezone() -> tzinfo:
    return datetime.now().astimezone().tzinfo or timezone.utc


def load_timezone(time_zone: str) -> tzinfo:
    """Return the named zone, falling back to the local zone when unknown."""
    if time_zone in ("", "UTC"):
        return timezone.utc
    if time_zone == "Local":
        return _local_timezone()
    try:
        return ZoneInfo(time_zone)
    except (ZoneInfoNotFoundError, ValueError):
        return _local_timezone()


def _rfc3339(moment: datetime) -> str:
    offset = moment.utcoffset() or timedelta(0)
    base = moment.strftime("%Y-%m-%dT%H:%M:%S")
    if offset == timedelta(0):
        return base + "Z"
    total = int(offset.total_seconds())
    sign = "+" if total >= 0 else "-"
    hours, minutes = divmod(abs(total) // 60, 60)
    return f"{base}{sign}{hours:02d}:{minutes:02d}"


def format_to_timestamp_str(epoch_time: int) -> str:
    """Render a Unix timestamp as RFC 3339 in the Jakarta time zone."""
    moment = datetime.fromtimestamp(epoch_time, tz=load_timezone(DEFAULT_TIMEZONE))
    return _rfc3339(moment)