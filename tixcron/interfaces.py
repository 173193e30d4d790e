"""Contracts between the expiry service and its data sources."""

from typing import List, Protocol, runtime_checkable

from tixcron.models import RequestAfterBook, TbTransaction


@runtime_checkable
class FlightProviders(Protocol):
    """A remote flight provider able to cancel bookings."""

    def flight_cancel_booking(self, req: RequestAfterBook) -> RequestAfterBook:
        """Cancel the booking named by ``req`` and return the provider's answer."""


@runtime_checkable
class Database(Protocol):
    """Storage of booking transactions."""

    def update_transaction_to_expired(self) -> None:
        """Mark every overdue open transaction and its bookings as expired."""

    def get_transaction_by_code(self) -> List[TbTransaction]:
        """Return open transactions together with their flights, passengers and insurance."""


@runtime_checkable
class TransactionService(Protocol):
    """Business operations on transactions."""

    def do_expired(self) -> None:
        """Start the periodic expiry of overdue transactions."""