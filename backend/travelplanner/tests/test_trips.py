"""
Tests for trip, expense, dashboard and budget endpoints.
"""
from datetime import date, timedelta


def create_trip(client, headers, payload):
    response = client.post("/api/trips", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def test_create_and_list_trips(client, auth_headers, trip_payload):
    trip = create_trip(client, auth_headers, trip_payload)
    assert trip["name"] == "Summer in Lisbon"
    assert trip["expenses"] == []
    assert trip["duration_days"] == 6

    response = client.get("/api/trips", headers=auth_headers)
    assert response.status_code == 200
    assert [t["id"] for t in response.json()] == [trip["id"]]


def test_empty_store_without_seeding(client, auth_headers):
    response = client.get("/api/trips", headers=auth_headers)
    assert response.json() == []


def test_create_trip_sanitizes_text(client, auth_headers, trip_payload):
    trip_payload["name"] = "  <b>Road trip</b> "
    trip_payload["notes"] = "click onclick=alert(1) javascript:void"
    trip = create_trip(client, auth_headers, trip_payload)
    assert trip["name"] == "bRoad trip/b"
    assert "onclick=" not in trip["notes"]
    assert "javascript:" not in trip["notes"]


def test_create_trip_rejects_end_before_start(client, auth_headers, trip_payload):
    trip_payload["end_date"] = trip_payload["start_date"]
    response = client.post("/api/trips", json=trip_payload, headers=auth_headers)
    assert response.status_code == 422
    assert "End date must be after start date" in response.text


def test_create_trip_rejects_bad_budget(client, auth_headers, trip_payload):
    trip_payload["budget"] = "12.345"
    response = client.post("/api/trips", json=trip_payload, headers=auth_headers)
    assert response.status_code == 422
    assert "Please enter a valid budget amount" in response.text

    trip_payload["budget"] = "-5"
    response = client.post("/api/trips", json=trip_payload, headers=auth_headers)
    assert response.status_code == 422
    assert "Budget cannot be negative" in response.text


def test_create_trip_rejects_long_name(client, auth_headers, trip_payload):
    trip_payload["name"] = "x" * 101
    response = client.post("/api/trips", json=trip_payload, headers=auth_headers)
    assert response.status_code == 422


def test_get_trip_with_summary(client, auth_headers, trip_payload):
    trip = create_trip(client, auth_headers, trip_payload)
    client.post(f"/api/trips/{trip['id']}/expenses", json={"description": "Hostel", "amount": "400"}, headers=auth_headers)

    response = client.get(f"/api/trips/{trip['id']}", headers=auth_headers)
    assert response.status_code == 200
    summary = response.json()["summary"]
    assert summary["formatted_spent"] == "$400.00"
    assert summary["formatted_remaining"] == "$1100.00"


def test_get_unknown_trip(client, auth_headers):
    response = client.get("/api/trips/nope", headers=auth_headers)
    assert response.status_code == 404
    assert response.json()["detail"] == "Trip not found"


def test_update_trip_revalidates(client, auth_headers, trip_payload):
    trip = create_trip(client, auth_headers, trip_payload)

    response = client.put(f"/api/trips/{trip['id']}", json={"budget": "2000"}, headers=auth_headers)
    assert response.status_code == 200
    assert float(response.json()["budget"]) == 2000
    assert response.json()["id"] == trip["id"]

    response = client.put(f"/api/trips/{trip['id']}", json={"end_date": "2030-06-01"}, headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["detail"] == "End date must be after start date"


def test_delete_trip(client, auth_headers, trip_payload):
    trip = create_trip(client, auth_headers, trip_payload)
    response = client.delete(f"/api/trips/{trip['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert client.get("/api/trips", headers=auth_headers).json() == []

    response = client.delete(f"/api/trips/{trip['id']}", headers=auth_headers)
    assert response.status_code == 404


def test_delete_trip_leaves_references_by_default(client, auth_headers, trip_payload):
    trip = create_trip(client, auth_headers, trip_payload)
    client.post("/api/packing-lists", json={"name": "Bags", "trip_id": trip["id"]}, headers=auth_headers)
    client.post("/api/documents", json={"name": "Passport", "type": "passport", "trip_id": trip["id"]}, headers=auth_headers)

    client.delete(f"/api/trips/{trip['id']}", headers=auth_headers)

    lists = client.get("/api/packing-lists", headers=auth_headers).json()
    assert len(lists) == 1
    assert lists[0]["trip_name"] is None
    documents = client.get("/api/documents", headers=auth_headers).json()
    assert documents[0]["trip_name"] == "General"


def test_delete_trip_prunes_references(client, auth_headers, trip_payload):
    trip = create_trip(client, auth_headers, trip_payload)
    client.post("/api/packing-lists", json={"name": "Bags", "trip_id": trip["id"]}, headers=auth_headers)
    client.post("/api/packing-lists", json={"name": "Other"}, headers=auth_headers)
    client.post("/api/documents", json={"name": "Passport", "trip_id": trip["id"]}, headers=auth_headers)

    response = client.delete(f"/api/trips/{trip['id']}?prune_orphans=true", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["pruned_packing_lists"] == 1
    assert response.json()["pruned_documents"] == 1

    lists = client.get("/api/packing-lists", headers=auth_headers).json()
    assert [l["name"] for l in lists] == ["Other"]


def test_expense_add_and_remove(client, auth_headers, trip_payload):
    trip = create_trip(client, auth_headers, trip_payload)

    response = client.post(
        f"/api/trips/{trip['id']}/expenses",
        json={"description": "Tram pass", "amount": "25.50", "category": "Transportation"},
        headers=auth_headers
    )
    assert response.status_code == 201
    expense = response.json()
    assert expense["date"] == date.today().isoformat()

    response = client.delete(f"/api/trips/{trip['id']}/expenses/{expense['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert client.get(f"/api/trips/{trip['id']}", headers=auth_headers).json()["expenses"] == []

    response = client.delete(f"/api/trips/{trip['id']}/expenses/{expense['id']}", headers=auth_headers)
    assert response.status_code == 404


def test_expense_rejects_non_positive_amount(client, auth_headers, trip_payload):
    trip = create_trip(client, auth_headers, trip_payload)
    response = client.post(
        f"/api/trips/{trip['id']}/expenses",
        json={"description": "Free museum", "amount": "0"},
        headers=auth_headers
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "Please enter a valid description and amount"


def test_dashboard(client, auth_headers, trip_payload):
    create_trip(client, auth_headers, trip_payload)
    past = dict(trip_payload, name="Old trip", start_date="2020-01-01", end_date="2020-01-03", budget="500")
    create_trip(client, auth_headers, past)

    data = client.get("/api/dashboard", headers=auth_headers).json()
    assert data["upcoming_count"] == 1
    assert data["upcoming_label"] == "1 trip planned"
    assert data["formatted_total_budget"] == "$2000.00"
    assert data["recent_trips"][0]["name"] == "Old trip"


def test_trip_starting_today_is_upcoming(client, auth_headers, trip_payload):
    today = date.today()
    payload = dict(trip_payload, start_date=today.isoformat(), end_date=(today + timedelta(days=2)).isoformat())
    create_trip(client, auth_headers, payload)
    assert client.get("/api/dashboard", headers=auth_headers).json()["upcoming_count"] == 1


def test_budget_overview_and_analytics(client, auth_headers, trip_payload):
    trip = create_trip(client, auth_headers, trip_payload)
    for description, amount in [("Flight", "300"), ("Hotel", "600"), ("Food", "100")]:
        client.post(
            f"/api/trips/{trip['id']}/expenses",
            json={"description": description, "amount": amount, "date": "2030-06-11"},
            headers=auth_headers
        )

    overview = client.get("/api/budget", headers=auth_headers).json()
    assert overview["formatted_total_spent"] == "$1000.00"
    assert overview["formatted_remaining"] == "$500.00"
    assert overview["trips"][0]["formatted"] == "$1000.00 / $1500.00 ($500.00 remaining)"

    analytics = client.get("/api/budget/analytics", headers=auth_headers).json()
    assert [e["description"] for e in analytics["top_expenses"]] == ["Hotel", "Flight", "Food"]
    assert analytics["monthly_spending"] == [
        {"key": "2030-06", "month": "Jun 2030", "amount": "1000", "percentage": 100.0}
    ]
    assert analytics["trends"]["total_trips"] == 1


def test_users_cannot_see_each_others_trips(client, auth_headers, trip_payload):
    from conftest import signup_and_login

    create_trip(client, auth_headers, trip_payload)
    other = signup_and_login(client, email="other@example.com")
    assert client.get("/api/trips", headers=other).json() == []
