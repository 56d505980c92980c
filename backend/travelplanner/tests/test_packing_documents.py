"""
Tests for packing lists and travel documents.
"""
from datetime import date, timedelta
from decimal import Decimal
from travelplanner.schemas.document import TravelDocument
from travelplanner.schemas.packing import PackingListCreate
from travelplanner.schemas.trip import Trip
from travelplanner.services import document_service


def test_categories_are_split_and_deduplicated():
    data = PackingListCreate(name="Beach", categories=" Clothing, Toiletries,,clothing, Clothing ")
    assert data.categories == ["Clothing", "Toiletries", "clothing"]


def test_packing_list_flow(client, auth_headers, trip_payload):
    trip = client.post("/api/trips", json=trip_payload, headers=auth_headers).json()
    response = client.post(
        "/api/packing-lists",
        json={"name": "Lisbon bag", "trip_id": trip["id"], "categories": "Clothing, Tech"},
        headers=auth_headers
    )
    assert response.status_code == 201
    packing = response.json()
    assert packing["trip_name"] == "Summer in Lisbon"
    assert packing["categories"] == ["Clothing", "Tech"]
    assert (packing["packed_count"], packing["total_count"]) == (0, 0)

    base = f"/api/packing-lists/{packing['id']}/items"
    first = client.post(base, json={"name": "Sunscreen"}, headers=auth_headers).json()
    client.post(base, json={"name": "Charger"}, headers=auth_headers)
    assert first["packed"] is False

    toggled = client.post(f"{base}/{first['id']}/toggle", headers=auth_headers).json()
    assert toggled["packed"] is True

    listed = client.get("/api/packing-lists", headers=auth_headers).json()[0]
    assert (listed["packed_count"], listed["total_count"]) == (1, 2)

    renamed = client.put(f"{base}/{first['id']}", json={"name": "SPF 50"}, headers=auth_headers).json()
    assert renamed["name"] == "SPF 50"
    assert renamed["packed"] is True

    assert client.delete(f"{base}/{first['id']}", headers=auth_headers).status_code == 200
    assert client.delete(f"{base}/{first['id']}", headers=auth_headers).status_code == 404
    assert client.post(f"{base}/nope/toggle", headers=auth_headers).status_code == 404

    response = client.delete(f"/api/packing-lists/{packing['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert client.get("/api/packing-lists", headers=auth_headers).json() == []


def test_packing_validation(client, auth_headers):
    assert client.post("/api/packing-lists", json={"name": "  "}, headers=auth_headers).status_code == 422
    packing = client.post("/api/packing-lists", json={"name": "Bag"}, headers=auth_headers).json()
    assert packing["trip_name"] is None

    response = client.post(f"/api/packing-lists/{packing['id']}/items", json={"name": "<>"}, headers=auth_headers)
    assert response.status_code == 400
    response = client.put(f"/api/packing-lists/{packing['id']}", json={"name": ""}, headers=auth_headers)
    assert response.status_code == 400
    assert client.put("/api/packing-lists/missing", json={"name": "x"}, headers=auth_headers).status_code == 404


def test_expiry_status_boundaries():
    today = date(2030, 1, 1)

    def status(expiry):
        return document_service.expiry_status(
            TravelDocument(name="Passport", type="passport", expiry_date=expiry), today
        )

    assert status(None) == (False, False)
    assert status(today - timedelta(days=1)) == (True, False)
    assert status(today) == (False, True)
    assert status(today + timedelta(days=29)) == (False, True)
    assert status(today + timedelta(days=30)) == (False, False)


def test_document_icon_and_trip_label():
    assert document_service.document_icon("Visa") == "stamp"
    assert document_service.document_icon("boarding pass") == "file"
    trips = [Trip(id="t1", name="Rome", destination="Rome", start_date=date(2030, 1, 1),
                  end_date=date(2030, 1, 2), budget=Decimal(0))]
    assert document_service.trip_label(trips, "t1") == "Rome"
    assert document_service.trip_label(trips, "gone") == "General"
    assert document_service.trip_label(trips, None) == "General"


def test_document_flow(client, auth_headers):
    expiry = (date.today() + timedelta(days=10)).isoformat()
    response = client.post(
        "/api/documents",
        json={"name": "Passport", "type": "passport", "trip_id": "", "expiry_date": expiry},
        headers=auth_headers
    )
    assert response.status_code == 201
    document = response.json()
    assert document["trip_id"] is None
    assert document["trip_name"] == "General"
    assert document["expiring_soon"] is True
    assert document["expired"] is False
    assert document["icon"] == "passport"

    response = client.put(
        f"/api/documents/{document['id']}",
        json={"expiry_date": "2000-01-01", "notes": "renew"},
        headers=auth_headers
    )
    assert response.status_code == 200
    assert response.json()["expired"] is True
    assert response.json()["notes"] == "renew"

    assert client.put(f"/api/documents/{document['id']}", json={"name": " "}, headers=auth_headers).status_code == 400
    assert client.post("/api/documents", json={"name": ""}, headers=auth_headers).status_code == 422

    assert client.delete(f"/api/documents/{document['id']}", headers=auth_headers).status_code == 200
    assert client.delete(f"/api/documents/{document['id']}", headers=auth_headers).status_code == 404
