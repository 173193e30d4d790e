"""Entry-point handler that starts the expiry job."""

from __future__ import annotations

import logging

from tixcron.interfaces import TransactionService

logger = logging.getLogger(__name__)


class Cmd:
    """Command handler wrapping the transaction service."""

    def __init__(self, transaction: TransactionService):
        self.transaction = transaction

    def do_expired(self) -> None:
        """Start the expiry job; failures are logged, never raised."""
        try:
            self.transaction.do_expired()
        except Exception as err:
            logger.debug("starting expiry job failed: %s", err)