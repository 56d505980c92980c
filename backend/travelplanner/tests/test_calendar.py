"""
Tests for the calendar month grid.
"""
from datetime import date
from decimal import Decimal
import pytest
from travelplanner.schemas.trip import Trip
from travelplanner.services.calendar_service import build_month, shift_month


def trip(id, start, end):
    return Trip(id=id, name=f"Trip {id}", destination="X", start_date=start, end_date=end, budget=Decimal(0))


def test_leading_blanks_follow_first_weekday():
    # June 1st 2024 was a Saturday
    grid = build_month([], 2024, 6, today=date(2024, 6, 15))
    assert grid["day_headers"][0] == "Sun"
    blanks = [d for d in grid["days"] if d.get("other_month")]
    assert len(blanks) == 6
    assert len(grid["days"]) == 6 + 30
    assert grid["title"] == "June 2024"


def test_month_starting_on_sunday_has_no_blanks():
    # September 1st 2024 was a Sunday
    grid = build_month([], 2024, 9, today=date(2024, 1, 1))
    assert grid["days"][0]["day"] == 1


def test_today_flag_and_trip_range_is_inclusive():
    trips = [trip("a", date(2024, 6, 14), date(2024, 6, 16)), trip("b", date(2024, 5, 30), date(2024, 6, 1))]
    grid = build_month(trips, 2024, 6, today=date(2024, 6, 15))
    days = {d["day"]: d for d in grid["days"] if not d.get("other_month")}

    assert days[15]["is_today"]
    assert not days[14]["is_today"]
    assert [t["id"] for t in days[14]["trips"]] == ["a"]
    assert [t["id"] for t in days[16]["trips"]] == ["a"]
    assert days[17]["trips"] == []
    assert [t["id"] for t in days[1]["trips"]] == ["b"]


def test_navigation_wraps_year():
    assert shift_month(2024, 1, -1) == (2023, 12)
    assert shift_month(2024, 12, 1) == (2025, 1)
    grid = build_month([], 2024, 12, today=date(2024, 12, 1))
    assert grid["previous"] == "2024-11"
    assert grid["next"] == "2025-01"


def test_invalid_month():
    with pytest.raises(ValueError):
        build_month([], 2024, 13)


def test_calendar_endpoint(client, auth_headers, trip_payload):
    client.post("/api/trips", json=trip_payload, headers=auth_headers)
    response = client.get("/api/calendar", params={"year": 2030, "month": 6}, headers=auth_headers)
    assert response.status_code == 200
    days = [d for d in response.json()["days"] if d["day"]]
    covered = [d["day"] for d in days if d["trips"]]
    assert covered == [10, 11, 12, 13, 14, 15]

    response = client.get("/api/calendar", params={"year": 2030, "month": 13}, headers=auth_headers)
    assert response.status_code == 400


def test_calendar_endpoint_month_zero_is_rejected(client, auth_headers):
    response = client.get("/api/calendar", params={"year": 2030, "month": 0}, headers=auth_headers)
    assert response.status_code == 400


def test_calendar_endpoint_defaults_to_current_month(client, auth_headers):
    today = date.today()
    body = client.get("/api/calendar", headers=auth_headers).json()
    assert (body["year"], body["month"]) == (today.year, today.month)
