import uuid
from datetime import datetime

import pytest
from sqlalchemy import create_engine, inspect, select, text
from sqlalchemy.orm import Session

from tixcron.models import (
    Base,
    RequestAfterBook,
    ResponseJson,
    TbFlightAddons,
    TbFlightInsurance,
    TbFlightJourneys,
    TbFlightPassengers,
    TbFlightTransaction,
    TbHotelTransaction,
    TbLogTransaction,
    TbTransaction,
    TodoItem,
    TodoList,
)


@pytest.fixture
def session():
    engine = create_engine("sqlite://")
    Base.metadata.create_all(engine)
    with Session(engine) as db:
        yield db
    engine.dispose()


def _build_transaction():
    trx = TbTransaction(trx_code="TRX-1", status="BOOKED", email="guest@example.com")
    flight = TbFlightTransaction(pnr_code="PNR1", booking_code="BK1")
    flight.flight_journey.append(TbFlightJourneys(flight_no="XX100", stop_over=1))
    trx.flight_transaction.append(flight)
    passenger = TbFlightPassengers(first_name="Ann", last_name="Doe")
    passenger.add_ons.append(TbFlightAddons(type="baggage", value="20"))
    trx.passenger.append(passenger)
    trx.insurance.append(TbFlightInsurance(title="Basic"))
    trx.hotel_transaction.append(TbHotelTransaction(hotel_name="Inn"))
    return trx


def test_transaction_stored_in_tb_transactions(session):
    session.add(_build_transaction())
    session.commit()
    rows = session.execute(text("SELECT trx_code FROM tb_transactions")).all()
    assert [row[0] for row in rows] == ["TRX-1"]


def test_commission_and_fare_column_names(session):
    session.add(_build_transaction())
    session.commit()
    fare_row = session.execute(text("SELECT commision, totalfare FROM tb_transactions")).one()
    assert tuple(fare_row) == (0.0, 0.0)
    journey_table = TbFlightJourneys.__tablename__
    stop_row = session.execute(text(f"SELECT stopover FROM {journey_table}")).one()
    assert stop_row[0] == 1


def test_full_graph_round_trip(session):
    trx = _build_transaction()
    session.add(trx)
    session.commit()
    trx_id = trx.id
    session.expunge_all()

    loaded = session.get(TbTransaction, trx_id)
    assert loaded.trx_code == "TRX-1"
    assert loaded.email == "guest@example.com"
    assert [f.pnr_code for f in loaded.flight_transaction] == ["PNR1"]
    journey = loaded.flight_transaction[0].flight_journey[0]
    assert journey.flight_no == "XX100"
    assert journey.stop_over == 1
    assert loaded.passenger[0].add_ons[0].type == "baggage"
    assert loaded.insurance[0].title == "Basic"
    assert loaded.hotel_transaction[0].hotel_name == "Inn"
    assert loaded.hotel_transaction[0].transaction_id == trx_id


def test_defaults_filled_on_insert(session):
    trx = TbTransaction()
    session.add(trx)
    session.commit()
    assert isinstance(trx.id, uuid.UUID)
    assert trx.status == ""
    assert trx.grand_total_price == 0.0
    assert trx.expired_at is None


def test_urgent_number_shares_phone_column(session):
    trx = TbTransaction(phone_number="0800")
    assert trx.urgent_number == "0800"
    trx.urgent_number = "0900"
    assert trx.phone_number == "0900"


def test_delete_cascades_to_children(session):
    trx = _build_transaction()
    session.add(trx)
    session.commit()
    session.delete(trx)
    session.commit()
    for model in (
        TbFlightTransaction,
        TbFlightJourneys,
        TbFlightPassengers,
        TbFlightAddons,
        TbFlightInsurance,
        TbHotelTransaction,
    ):
        assert session.scalars(select(model)).all() == []


def test_all_tables_created(session):
    names = set(inspect(session.get_bind()).get_table_names())
    expected = {
        m.__tablename__
        for m in (
            TbTransaction,
            TbHotelTransaction,
            TbFlightTransaction,
            TbFlightAddons,
            TbFlightInsurance,
            TbFlightPassengers,
            TbFlightJourneys,
            TbLogTransaction,
            TodoList,
        )
    }
    assert expected <= names


def test_todo_list_ids_increment(session):
    first = TodoList(title="a")
    second = TodoList(title="b")
    session.add_all([first, second])
    session.commit()
    assert second.id > first.id
    assert first.deleted_at is None
    assert isinstance(first.created_at, datetime)


def test_request_after_book_defaults():
    req = RequestAfterBook(pnr_id="P", booking_id="B")
    assert req == RequestAfterBook("P", "B", "")
    assert req.user_id == ""


def test_response_json_to_dict():
    resp = ResponseJson(status_code="00", data={"k": [1, 2]}, message="ok")
    assert resp.to_dict() == {"status_code": "00", "data": {"k": [1, 2]}, "message": "ok"}


def test_todo_item_to_dict_round_trips_time():
    stamp = datetime(2024, 5, 6, 7, 8, 9)
    result = TodoItem(id=3, title="buy", created_at=stamp).to_dict()
    assert result["id"] == 3
    assert result["title"] == "buy"
    assert datetime.fromisoformat(result["created_at"]) == stamp