# Tests/test_bookings.py
from datetime import datetime
from Models import ServiceBooking, BookingStatus

BOOKING = {
    "customer_name": "Alex",
    "customer_email": "alex@example.com",
    "customer_phone": "0612345678",
    "service_type": "Oil change",
    "vehicle_type": "Sedan",
    "preferred_date": "2024-05-10T00:00:00",
    "preferred_time": "10:00",
    "notes": None
}

def make_booking(name, preferred_date, created_at):
    return ServiceBooking(
        customer_name=name, customer_email="c@example.com", customer_phone="1",
        service_type="Inspection", preferred_date=preferred_date,
        preferred_time="09:00", created_at=created_at
    )

def test_create_booking_is_pending(client):
    response = client.post("/api/bookings", json=BOOKING)
    assert response.status_code == 201
    data = response.json()
    for field, value in BOOKING.items():
        assert data[field] == value
    assert data["status"] == "pending"
    assert data["id"] > 0

def test_create_booking_ignores_status_in_input(client):
    data = client.post("/api/bookings", json={**BOOKING, "status": "completed"}).json()
    assert data["status"] == "pending"

def test_booking_validation(client):
    assert client.post("/api/bookings", json={**BOOKING, "customer_email": "alex"}).status_code == 422
    assert client.post("/api/bookings", json={**BOOKING, "customer_phone": ""}).status_code == 422
    assert client.post("/api/bookings", json={**BOOKING, "preferred_date": "soon"}).status_code == 422

def test_list_bookings_order(client, db_session):
    db_session.add_all([
        make_booking("later date", datetime(2024, 6, 1), datetime(2024, 1, 1)),
        make_booking("same date, old request", datetime(2024, 5, 1), datetime(2024, 1, 1)),
        make_booking("same date, new request", datetime(2024, 5, 1), datetime(2024, 1, 2)),
    ])
    db_session.commit()

    names = [b["customer_name"] for b in client.get("/api/bookings").json()]
    assert names == ["same date, new request", "same date, old request", "later date"]

def test_update_booking_status(client, db_session):
    booking_id = client.post("/api/bookings", json=BOOKING).json()["id"]

    for new_status in ("confirmed", "completed", "pending", "cancelled"):
        response = client.patch(f"/api/bookings/{booking_id}/status", json={"status": new_status})
        assert response.status_code == 200
        assert response.json()["status"] == new_status

    assert db_session.get(ServiceBooking, booking_id).status == BookingStatus.CANCELLED

def test_update_booking_status_rejects_unknown_status(client):
    booking_id = client.post("/api/bookings", json=BOOKING).json()["id"]
    assert client.patch(f"/api/bookings/{booking_id}/status", json={"status": "lost"}).status_code == 422

def test_update_missing_booking(client):
    assert client.patch("/api/bookings/999/status", json={"status": "confirmed"}).status_code == 404

def test_aware_preferred_date_is_stored_as_utc(client):
    data = client.post("/api/bookings", json={**BOOKING, "preferred_date": "2024-05-10T09:30:00+01:00"}).json()
    assert data["preferred_date"] == "2024-05-10T08:30:00"

def test_booking_id_out_of_range(client):
    response = client.patch("/api/bookings/99999999999999999999/status", json={"status": "confirmed"})
    assert response.status_code == 422
