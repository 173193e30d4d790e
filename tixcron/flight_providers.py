"""Remote flight provider used to cancel bookings."""

from __future__ import annotations

import dataclasses
import logging
from typing import Any, Protocol

from tixcron.constants import HttpMessage, RpcCode
from tixcron.errors import ErrorStd
from tixcron.models import RequestAfterBook

logger = logging.getLogger(__name__)


class _CancelClient(Protocol):
    def flight_cancel_booking(self, request: RequestAfterBook) -> Any: ...


def provider_address(host: str, port: str) -> str:
    """The ``host:port`` address of the provider service."""
    return f"{host}:{port}"


class FlightProvider:
    """Flight provider reached through an RPC client."""

    def __init__(self, client: _CancelClient):
        self.client = client

    def flight_cancel_booking(self, req: RequestAfterBook) -> RequestAfterBook:
        """Ask the provider to cancel a booking; returns the PNR and user it reports."""
        payload = dataclasses.replace(req)
        try:
            result = self.client.flight_cancel_booking(payload)
        except Exception as err:
            logger.error("flight cancel booking failed: %s", err)
            raise ErrorStd(
                500, RpcCode.INTERNAL.value, HttpMessage.INTERNAL_SERVER_ERROR.value
            ) from err

        return RequestAfterBook(
            pnr_id=getattr(result, "pnr_id", "") or "",
            user_id=getattr(result, "user_id", "") or "",
        )