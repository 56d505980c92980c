"""
Tests for global search.
"""
from datetime import date, datetime
from decimal import Decimal
from travelplanner.schemas.document import TravelDocument
from travelplanner.schemas.packing import PackingList
from travelplanner.schemas.photo import Photo
from travelplanner.schemas.trip import Trip
from travelplanner.services.search_service import field_score, search_all


def make_trip(id, name, destination, notes=""):
    return Trip(id=id, name=name, destination=destination, start_date=date(2030, 1, 1),
                end_date=date(2030, 1, 2), budget=Decimal(0), notes=notes)


TRIPS = [
    make_trip("t1", "Rome weekend", "Italy"),
    make_trip("t2", "Alps", "Rome, then the mountains", notes="See Romeo and Juliet"),
    make_trip("t3", "Beach", "Miami"),
]


def test_field_score():
    assert field_score("Rome", "rome") == 10
    assert field_score("Visit Rome", "rome") == 5
    assert field_score(None, "rome") == 0
    assert field_score("Paris", "rome") == 0


def test_short_query_returns_nothing():
    results = search_all(" r ", TRIPS, [], [], [])
    assert results["total"] == 0
    assert results["trips"] == []


def test_trips_ranked_by_relevance():
    results = search_all("Rome", TRIPS, [], [], [])
    hits = results["trips"]
    assert [hit["id"] for hit in hits] == ["t2", "t1"]
    assert hits[0]["relevance"] == 15
    assert hits[0]["matches"] == ["destination", "notes"]
    assert hits[1]["relevance"] == 10
    assert results["total"] == 2


def test_other_sections_resolve_trip_names():
    packing = [PackingList(id="p1", name="Rome bag", trip_id="t1"), PackingList(id="p2", name="Rome spare", trip_id="gone")]
    documents = [TravelDocument(id="d1", name="Rome museum pass", type="ticket")]
    photos = [Photo(id="ph1", caption="", file_name="rome.jpg", size=10, trip_id="t3", date=datetime(2030, 1, 1))]

    results = search_all("rome", [], packing, documents, photos)
    # trips are not passed, so every link resolves to the fallback label
    assert {hit["trip_name"] for hit in results["packing_lists"]} == {"Unknown Trip"}
    assert results["documents"][0]["trip_name"] == "General"
    assert results["photos"][0]["title"] == "rome.jpg"
    assert results["total"] == 4

    results = search_all("rome", TRIPS, packing, documents, photos)
    assert results["packing_lists"][0]["trip_name"] == "Rome weekend"
    assert results["photos"][0]["trip_name"] == "Beach"


def test_search_endpoint(client, auth_headers, trip_payload):
    client.post("/api/trips", json=trip_payload, headers=auth_headers)
    response = client.get("/api/search", params={"q": "lisbon"}, headers=auth_headers)
    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 1
    assert body["trips"][0]["title"] == "Summer in Lisbon"

    assert client.get("/api/search", params={"q": "l"}, headers=auth_headers).json()["total"] == 0
