"""
Tests for PDF, CSV and JSON backup exports.
"""
from datetime import date, datetime
from decimal import Decimal
import csv
import io
from travelplanner.schemas.trip import Trip, Expense
from travelplanner.schemas.settings import UserSettings
from travelplanner.services import export_service


def sample_trip():
    return Trip(
        id="t1",
        name="Tokyo & Kyoto 2030",
        destination="Tokyo, Japan",
        type="Cultural",
        start_date=date(2030, 4, 1),
        end_date=date(2030, 4, 8),
        budget=Decimal("3000"),
        notes="Highlights:\n• Temples\n• Ramen – lots of it",
        expenses=[
            Expense(id="e1", description="Rail pass", amount=Decimal("280.50"), date=date(2030, 4, 1), category="Transport"),
            Expense(id="e2", description="Ryokan", amount=Decimal("420"), date=date(2030, 4, 3)),
        ]
    )


def test_filenames():
    trip = sample_trip()
    assert export_service.pdf_filename(trip) == "tokyo___kyoto_2030_itinerary.pdf"
    assert export_service.csv_filename(trip) == "tokyo___kyoto_2030_expenses.csv"
    assert export_service.backup_filename(date(2030, 1, 2)) == "travel-planner-backup-2030-01-02.json"


def test_csv_has_summary_row_then_expenses():
    rows = list(csv.reader(io.StringIO(export_service.trip_to_csv(sample_trip()))))

    assert rows[0] == export_service.CSV_HEADER
    assert rows[1][:6] == ["Tokyo & Kyoto 2030", "Tokyo, Japan", "Cultural", "2030-04-01", "2030-04-08", "3000"]
    assert rows[1][6:] == ["", "", ""]
    assert rows[2] == ["", "", "", "", "", "", "Rail pass", "280.50", "Transport"]
    assert rows[3][6:] == ["Ryokan", "420", ""]
    assert len(rows) == 4


def test_csv_quotes_commas():
    trip = sample_trip()
    trip.expenses[0].description = "Dinner, drinks"
    text = export_service.trip_to_csv(trip)
    assert '"Dinner, drinks"' in text


def test_pdf_renders_non_latin_text():
    content = export_service.trip_to_pdf(sample_trip(), "EUR", generated_on=date(2030, 1, 1))
    assert content.startswith(b"%PDF")
    assert len(content) > 500


def test_pdf_without_expenses_or_notes():
    trip = sample_trip()
    trip.expenses = []
    trip.notes = ""
    assert export_service.trip_to_pdf(trip).startswith(b"%PDF")


def test_build_backup():
    backup = export_service.build_backup([sample_trip()], UserSettings(), now=datetime(2030, 1, 1, 12))
    dumped = backup.model_dump(mode="json")
    assert dumped["settings"] == {"currency": "USD", "theme": "light"}
    assert dumped["trips"][0]["id"] == "t1"
    assert dumped["export_date"].startswith("2030-01-01T12:00")


def test_export_endpoints(client, auth_headers, trip_payload):
    trip = client.post("/api/trips", json=trip_payload, headers=auth_headers).json()
    client.post(
        f"/api/trips/{trip['id']}/expenses",
        json={"description": "Tram", "amount": "3.10", "date": "2030-06-11"},
        headers=auth_headers
    )

    response = client.get(f"/api/trips/{trip['id']}/export/pdf", headers=auth_headers)
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert "summer_in_lisbon_itinerary.pdf" in response.headers["content-disposition"]
    assert response.content.startswith(b"%PDF")

    response = client.get(f"/api/trips/{trip['id']}/export/csv", headers=auth_headers)
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert "Tram,3.10" in response.text

    response = client.get("/api/trips/missing/export/csv", headers=auth_headers)
    assert response.status_code == 404


def test_data_export_endpoint(client, auth_headers, trip_payload):
    client.post("/api/trips", json=trip_payload, headers=auth_headers)
    response = client.get("/api/data/export", headers=auth_headers)
    assert response.status_code == 200
    assert f"travel-planner-backup-{date.today().isoformat()}.json" in response.headers["content-disposition"]
    body = response.json()
    assert [t["name"] for t in body["trips"]] == ["Summer in Lisbon"]
    assert body["settings"]["currency"] == "USD"
