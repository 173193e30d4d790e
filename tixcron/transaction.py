"""Periodic expiry of overdue transactions and cancellation of their bookings."""

from __future__ import annotations

import math
import os
import threading
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timedelta
from typing import Iterable, List, Optional

from tixcron.interfaces import Database, FlightProviders
from tixcron.logutil import log_error
from tixcron.models import RequestAfterBook

DEFAULT_INTERVAL = "5"
INTERVAL_ENV = "CRON_EVER_SECOND"
_CLOCK_OFFSET = timedelta(hours=7)


def _parse_interval(raw: str) -> Optional[int]:
    try:
        seconds = float(raw)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(seconds):
        return None
    return max(int(seconds), 1)


class ExpiryService:
    """Runs the expiry job on a fixed interval in a background thread."""

    def __init__(
        self,
        db: Database,
        flight_providers: FlightProviders,
        interval: Optional[str] = None,
    ):
        self.db = db
        self.flight_providers = flight_providers
        self._interval = interval
        self._lock = threading.Lock()
        self._stopping = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._executor: Optional[ThreadPoolExecutor] = None

    @property
    def running(self) -> bool:
        """Whether the periodic job is scheduled."""
        return self._thread is not None and self._thread.is_alive()

    def run_once(self) -> List:
        """Run one expiry pass; returns the open transactions that were found."""
        print(f"===== Cron Started on: {datetime.now() + _CLOCK_OFFSET} ====")

        try:
            transactions = list(self.db.get_transaction_by_code())
        except Exception as err:
            print(err)
            transactions = []

        if transactions:
            self._submit(transactions)
            try:
                self.db.update_transaction_to_expired()
            except Exception as err:
                log_error(err)
        return transactions

    def do_expired(self) -> None:
        """Schedule the expiry job every CRON_EVER_SECOND seconds (default 5)."""
        raw = self._interval
        if raw is None:
            raw = os.environ.get(INTERVAL_ENV, DEFAULT_INTERVAL)
        seconds = _parse_interval(raw)
        if seconds is None:
            log_error(ValueError(f"invalid cron interval: {raw!r}"))
            return
        with self._lock:
            if self.running:
                return
            self._stopping.clear()
            self._thread = threading.Thread(
                target=self._loop, args=(seconds,), name="expiry-cron", daemon=True
            )
            self._thread.start()

    def stop(self) -> None:
        """Stop scheduling and wait for pending cancellations to finish."""
        self._stopping.set()
        with self._lock:
            thread, self._thread = self._thread, None
            executor, self._executor = self._executor, None
        if thread is not None:
            thread.join()
        if executor is not None:
            executor.shutdown(wait=True)

    def _loop(self, seconds: int) -> None:
        while not self._stopping.wait(seconds):
            try:
                self.run_once()
            except Exception as err:
                log_error(err)

    def _submit(self, transactions: List) -> None:
        with self._lock:
            if self._executor is None:
                self._executor = ThreadPoolExecutor(
                    max_workers=1, thread_name_prefix="flight-cancel"
                )
            self._executor.submit(self._cancel_bookings, transactions)

    def _cancel_bookings(self, transactions: Iterable) -> None:
        for transaction in transactions:
            for segment in transaction.flight_transaction:
                try:
                    self.flight_providers.flight_cancel_booking(
                        RequestAfterBook(
                            pnr_id=segment.pnr_code,
                            booking_id=segment.booking_code,
                            user_id="",
                        )
                    )
                except Exception as err:
                    print(f"error: {err} ")