"""Database models for booking transactions and plain request/response records."""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, List, Optional

from sqlalchemy import ForeignKey
from sqlalchemy.orm import (
    DeclarativeBase,
    Mapped,
    mapped_column,
    relationship,
    synonym,
)

_CASCADE = "all, delete-orphan"


class Base(DeclarativeBase):
    """Declarative base shared by every table model."""


class TbTransaction(Base):
    """A customer order covering flights, hotels, passengers and insurance."""

    __tablename__ = "tb_transactions"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    tenant_id: Mapped[Optional[uuid.UUID]] = mapped_column(nullable=True)
    user_id: Mapped[Optional[uuid.UUID]] = mapped_column(nullable=True)
    trx_code: Mapped[str] = mapped_column(default="")
    booking_type: Mapped[str] = mapped_column(default="")
    first_name: Mapped[str] = mapped_column(default="")
    last_name: Mapped[str] = mapped_column(default="")
    phone_number: Mapped[str] = mapped_column(default="")
    # The urgent number shares the phone_number column.
    urgent_number = synonym("phone_number")
    email: Mapped[str] = mapped_column(default="")
    provider_name: Mapped[str] = mapped_column(default="")
    payment_code: Mapped[str] = mapped_column(default="")
    payment_channel: Mapped[str] = mapped_column(default="")
    payment_type: Mapped[str] = mapped_column(default="")
    status: Mapped[str] = mapped_column(default="")
    admin_fee: Mapped[float] = mapped_column(default=0.0)
    payment_fee: Mapped[float] = mapped_column(default=0.0)
    total_order_price: Mapped[float] = mapped_column(default=0.0)
    price_tax: Mapped[float] = mapped_column(default=0.0)
    promo_code: Mapped[str] = mapped_column(default="")
    discount_total_price: Mapped[float] = mapped_column(default=0.0)
    grand_total_price: Mapped[float] = mapped_column(default=0.0)
    qr_url: Mapped[str] = mapped_column(default="")
    qr_string: Mapped[str] = mapped_column(default="")
    payment_web_redirect: Mapped[str] = mapped_column(default="")
    payment_mobile_redirect: Mapped[str] = mapped_column(default="")
    payment_provider_id: Mapped[str] = mapped_column(default="")
    payment_provider_name: Mapped[str] = mapped_column(default="")
    expired_at: Mapped[Optional[datetime]] = mapped_column(nullable=True)
    created_at: Mapped[Optional[datetime]] = mapped_column(nullable=True)
    updated_at: Mapped[Optional[datetime]] = mapped_column(nullable=True)
    booking_date: Mapped[Optional[datetime]] = mapped_column(nullable=True)
    reason: Mapped[str] = mapped_column(default="")

    ntsa: Mapped[float] = mapped_column(default=0.0)
    commission: Mapped[float] = mapped_column("commision", default=0.0)
    total_fare: Mapped[float] = mapped_column("totalfare", default=0.0)

    flight_transaction: Mapped[List["TbFlightTransaction"]] = relationship(
        back_populates="transaction", cascade=_CASCADE
    )
    hotel_transaction: Mapped[List["TbHotelTransaction"]] = relationship(
        back_populates="transaction", cascade=_CASCADE
    )
    passenger: Mapped[List["TbFlightPassengers"]] = relationship(
        back_populates="transaction", cascade=_CASCADE
    )
    insurance: Mapped[List["TbFlightInsurance"]] = relationship(
        back_populates="transaction", cascade=_CASCADE
    )


class TbHotelTransaction(Base):
    """A hotel booking that belongs to a transaction."""

    __tablename__ = "tb_hotel_transactions"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    transaction_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("tb_transactions.id", onupdate="CASCADE", ondelete="CASCADE")
    )
    search_id: Mapped[str] = mapped_column(default="")
    breakfast_status: Mapped[bool] = mapped_column(default=False)
    booking_code: Mapped[str] = mapped_column(default="")
    voucher_code: Mapped[str] = mapped_column(default="")
    hotel_id: Mapped[str] = mapped_column(default="")
    check_in_date: Mapped[Optional[datetime]] = mapped_column(nullable=True)
    check_out_date: Mapped[Optional[datetime]] = mapped_column(nullable=True)
    country_name: Mapped[str] = mapped_column(default="")
    city_name: Mapped[str] = mapped_column(default="")
    hotel_name: Mapped[str] = mapped_column(default="")
    hotel_address: Mapped[str] = mapped_column(default="")
    total_room: Mapped[int] = mapped_column(default=0)
    adult_count: Mapped[int] = mapped_column(default=0)
    child_count: Mapped[int] = mapped_column(default=0)
    total_night: Mapped[int] = mapped_column(default=0)
    status: Mapped[str] = mapped_column(default="")
    reason: Mapped[str] = mapped_column(default="")
    thumbnail_image: Mapped[str] = mapped_column(default="")
    hotel_net_agent_price: Mapped[float] = mapped_column(default=0.0)
    hotel_night_price: Mapped[float] = mapped_column(default=0.0)
    room_name: Mapped[str] = mapped_column(default="")
    extra_request: Mapped[str] = mapped_column(default="")
    nearest_destination: Mapped[str] = mapped_column(default="")
    pax_contact_name: Mapped[str] = mapped_column(default="")
    pax_contact_email: Mapped[str] = mapped_column(default="")
    pax_contact_phone: Mapped[str] = mapped_column(default="")
    updated_at: Mapped[Optional[datetime]] = mapped_column(nullable=True)
    created_at: Mapped[Optional[datetime]] = mapped_column(nullable=True)

    transaction: Mapped[TbTransaction] = relationship(back_populates="hotel_transaction")


class TbFlightTransaction(Base):
    """A flight booking segment that belongs to a transaction."""

    __tablename__ = "tb_flight_transactions"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    transaction_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("tb_transactions.id", onupdate="CASCADE", ondelete="CASCADE")
    )
    total_flight_hour: Mapped[int] = mapped_column(default=0)
    total_flight_minute: Mapped[int] = mapped_column(default=0)
    booking_date: Mapped[Optional[datetime]] = mapped_column(nullable=True)
    pnr_code: Mapped[str] = mapped_column(default="")
    booking_code: Mapped[str] = mapped_column(default="")
    insurance_number: Mapped[str] = mapped_column(default="")
    status: Mapped[str] = mapped_column(default="")
    connecting_troughfare: Mapped[bool] = mapped_column(default=False)
    flight_net_agent_price: Mapped[float] = mapped_column(default=0.0)
    flight_publish_agent_price: Mapped[float] = mapped_column(default=0.0)
    airline_code: Mapped[str] = mapped_column(default="")
    adult: Mapped[int] = mapped_column(default=0)
    child: Mapped[int] = mapped_column(default=0)
    infant: Mapped[int] = mapped_column(default=0)
    depart_airport: Mapped[str] = mapped_column(default="")
    arrival_airport: Mapped[str] = mapped_column(default="")
    is_international: Mapped[bool] = mapped_column(default=False)
    depart_datetime: Mapped[Optional[datetime]] = mapped_column(nullable=True)
    arrival_datetime: Mapped[Optional[datetime]] = mapped_column(nullable=True)
    flight_type: Mapped[str] = mapped_column(default="")
    created_at: Mapped[Optional[datetime]] = mapped_column(nullable=True)
    updated_at: Mapped[Optional[datetime]] = mapped_column(nullable=True)

    transaction: Mapped[TbTransaction] = relationship(back_populates="flight_transaction")
    flight_journey: Mapped[List["TbFlightJourneys"]] = relationship(
        back_populates="flight_transaction", cascade=_CASCADE
    )


class TbFlightAddons(Base):
    """An extra (baggage, meal, seat) bought for a passenger."""

    __tablename__ = "tb_flight_addons"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    flight_passengers_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("tb_flight_passengers.id", onupdate="CASCADE", ondelete="CASCADE")
    )
    type: Mapped[str] = mapped_column(default="")
    value: Mapped[str] = mapped_column(default="")
    net_agent_price: Mapped[float] = mapped_column(default=0.0)
    publish_price: Mapped[float] = mapped_column(default=0.0)
    total_price: Mapped[float] = mapped_column(default=0.0)

    passenger: Mapped["TbFlightPassengers"] = relationship(back_populates="add_ons")


class TbFlightInsurance(Base):
    """Travel insurance attached to a transaction."""

    __tablename__ = "tb_flight_insurances"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    transaction_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("tb_transactions.id", onupdate="CASCADE", ondelete="CASCADE")
    )
    insurance_id: Mapped[Optional[uuid.UUID]] = mapped_column(nullable=True)
    title: Mapped[str] = mapped_column(default="")
    currency: Mapped[str] = mapped_column(default="")
    net_agent_price: Mapped[float] = mapped_column(default=0.0)
    publish_price: Mapped[float] = mapped_column(default=0.0)
    total_price: Mapped[float] = mapped_column(default=0.0)

    transaction: Mapped[TbTransaction] = relationship(back_populates="insurance")


class TbFlightPassengers(Base):
    """A passenger travelling under a transaction."""

    __tablename__ = "tb_flight_passengers"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    transaction_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("tb_transactions.id", onupdate="CASCADE", ondelete="CASCADE")
    )
    passenger_no: Mapped[str] = mapped_column(default="")
    ticket_number_departure: Mapped[str] = mapped_column(default="")
    ticket_number_return: Mapped[str] = mapped_column(default="")
    title: Mapped[str] = mapped_column(default="")
    first_name: Mapped[str] = mapped_column(default="")
    last_name: Mapped[str] = mapped_column(default="")
    adult_assoc: Mapped[int] = mapped_column(default=0)
    national_id_number: Mapped[str] = mapped_column(default="")
    passport_number: Mapped[str] = mapped_column(default="")
    passport_issued_date: Mapped[Optional[datetime]] = mapped_column(nullable=True)
    passport_issued_country: Mapped[str] = mapped_column(default="")
    passport_expiration_date: Mapped[Optional[datetime]] = mapped_column(nullable=True)
    passport_nationality: Mapped[str] = mapped_column(default="")
    date_of_birth: Mapped[Optional[datetime]] = mapped_column(nullable=True)
    is_adult_assoc: Mapped[int] = mapped_column(default=0)
    phone_number: Mapped[str] = mapped_column(default="")
    email: Mapped[str] = mapped_column(default="")
    type: Mapped[str] = mapped_column(default="")

    transaction: Mapped[TbTransaction] = relationship(back_populates="passenger")
    add_ons: Mapped[List[TbFlightAddons]] = relationship(
        back_populates="passenger", cascade=_CASCADE
    )


class TbFlightJourneys(Base):
    """One leg of a flight segment."""

    __tablename__ = "tb_flight_journeys"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    flight_no: Mapped[str] = mapped_column(default="")
    meal: Mapped[bool] = mapped_column(default=False)
    duration_hour: Mapped[int] = mapped_column(default=0)
    duration_minute: Mapped[int] = mapped_column(default=0)
    flight_transaction_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("tb_flight_transactions.id", onupdate="CASCADE", ondelete="CASCADE")
    )
    departure: Mapped[str] = mapped_column(default="")
    destination: Mapped[str] = mapped_column(default="")
    stop_over: Mapped[int] = mapped_column("stopover", default=0)
    departure_datetime: Mapped[Optional[datetime]] = mapped_column(nullable=True)
    arrival_datetime: Mapped[Optional[datetime]] = mapped_column(nullable=True)
    journey_type: Mapped[str] = mapped_column(default="")
    class_code: Mapped[str] = mapped_column(default="")
    class_name: Mapped[str] = mapped_column(default="")
    iata_code: Mapped[str] = mapped_column(default="")
    change_day: Mapped[int] = mapped_column(default=0)
    free_baggage_kilo: Mapped[int] = mapped_column(default=0)

    flight_transaction: Mapped[TbFlightTransaction] = relationship(
        back_populates="flight_journey"
    )


class TbLogTransaction(Base):
    """A logged provider request and response for a transaction."""

    __tablename__ = "tb_log_transactions"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    transaction_id: Mapped[Optional[uuid.UUID]] = mapped_column(nullable=True)
    provider_name: Mapped[str] = mapped_column(default="")
    request_body: Mapped[str] = mapped_column(default="")
    response: Mapped[str] = mapped_column(default="")
    created_at: Mapped[Optional[datetime]] = mapped_column(nullable=True)
    updated_at: Mapped[Optional[datetime]] = mapped_column(nullable=True)


class TodoList(Base):
    """A to-do entry with the usual id, timestamps and soft-delete column."""

    __tablename__ = "todo_lists"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    created_at: Mapped[Optional[datetime]] = mapped_column(default=datetime.now, nullable=True)
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        default=datetime.now, onupdate=datetime.now, nullable=True
    )
    deleted_at: Mapped[Optional[datetime]] = mapped_column(nullable=True, index=True)
    title: Mapped[str] = mapped_column(default="")


@dataclass
class RequestAfterBook:
    """Identifies a booking to act on after it was made."""

    pnr_id: str = ""
    booking_id: str = ""
    user_id: str = ""


@dataclass
class ResponseJson:
    """Standard JSON reply envelope."""

    status_code: str = ""
    data: Any = None
    message: str = ""

    def to_dict(self) -> dict:
        """The envelope as a JSON-ready mapping."""
        return {
            "status_code": self.status_code,
            "data": self.data,
            "message": self.message,
        }


@dataclass
class TodoItem:
    """A to-do entry as exposed to clients."""

    id: int = 0
    title: str = ""
    created_at: datetime = field(default_factory=lambda: datetime(1, 1, 1))

    def to_dict(self) -> dict:
        """The item as a JSON-ready mapping with an ISO 8601 timestamp."""
        return {
            "id": self.id,
            "title": self.title,
            "created_at": self.created_at.isoformat(),
        }