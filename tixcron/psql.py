"""Relational storage of booking transactions."""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timedelta
from typing import List, Optional

from sqlalchemy import and_, or_, select, update
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import selectinload, sessionmaker

from tixcron.constants import HttpMessage, RpcCode, TransactionStatus
from tixcron.errors import ErrorStd
from tixcron.logutil import log_error
from tixcron.models import (
    TbFlightTransaction,
    TbHotelTransaction,
    TbTransaction,
)

logger = logging.getLogger(__name__)

# Stored timestamps are seven hours ahead of the clock, plus a ten-minute margin.
_EXPIRY_OFFSET = timedelta(hours=7, minutes=10)
_OPEN_STATUSES = (TransactionStatus.INITIATED.value, TransactionStatus.BOOKED.value)


def _expiry_threshold(now: Optional[datetime]) -> datetime:
    return (now if now is not None else datetime.now()) + _EXPIRY_OFFSET


class Psql:
    """Transaction repository backed by an SQLAlchemy engine."""

    def __init__(self, engine: Engine):
        self.engine = engine
        self._sessions = sessionmaker(engine, expire_on_commit=False)

    def get_transaction_by_code(self, now: Optional[datetime] = None) -> List[TbTransaction]:
        """Open transactions with their flights, journeys, passengers and insurance loaded."""
        threshold = _expiry_threshold(now)
        stmt = (
            select(TbTransaction)
            .where(
                or_(
                    and_(
                        TbTransaction.expired_at >= threshold,
                        TbTransaction.status == TransactionStatus.BOOKED.value,
                    ),
                    TbTransaction.status == TransactionStatus.INITIATED.value,
                )
            )
            .options(
                selectinload(TbTransaction.flight_transaction).selectinload(
                    TbFlightTransaction.flight_journey
                ),
                selectinload(TbTransaction.passenger),
                selectinload(TbTransaction.insurance),
            )
        )
        try:
            with self._sessions() as session:
                return list(session.scalars(stmt).all())
        except SQLAlchemyError as err:
            log_error(err)
            raise ErrorStd(
                500, RpcCode.INTERNAL.value, HttpMessage.INTERNAL_SERVER_ERROR.value
            ) from err

    def update_transaction_to_expired(self, now: Optional[datetime] = None) -> None:
        """Mark overdue open transactions, and their flight and hotel bookings, as expired."""
        threshold = _expiry_threshold(now)
        overdue = and_(
            TbTransaction.expired_at < threshold,
            TbTransaction.status.in_(_OPEN_STATUSES),
        )

        expiring: List[uuid.UUID] = []
        try:
            with self._sessions() as session:
                expiring = list(session.scalars(select(TbTransaction.id).where(overdue)))
        except SQLAlchemyError as err:
            logger.debug("listing overdue transactions failed: %s", err)

        try:
            with self._sessions.begin() as session:
                session.execute(
                    update(TbTransaction)
                    .where(overdue)
                    .values(status=TransactionStatus.EXPIRED.value)
                    .execution_options(synchronize_session=False)
                )
        except SQLAlchemyError as err:
            logger.debug("expiring transactions failed: %s", err)
            raise ErrorStd(500, RpcCode.OK.value, str(err)) from err

        for transaction_id in expiring:
            for model in (TbFlightTransaction, TbHotelTransaction):
                try:
                    with self._sessions.begin() as session:
                        session.execute(
                            update(model)
                            .where(model.transaction_id == transaction_id)
                            .values(status=TransactionStatus.EXPIRED.value)
                            .execution_options(synchronize_session=False)
                        )
                except SQLAlchemyError as err:
                    logger.debug("expiring %s failed: %s", model.__tablename__, err)