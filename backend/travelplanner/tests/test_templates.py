"""
Tests for trip templates and the template generator.
"""
from datetime import date, timedelta
from decimal import Decimal
from travelplanner.schemas.template import TemplateGenerateRequest
from travelplanner.services import template_service


def test_builtin_catalog():
    templates = template_service.get_builtin_templates()
    assert len(templates) == 13
    assert len({t.id for t in templates}) == 13


def test_apply_template_end_date_is_duration_days_later():
    template = template_service.find_template(template_service.get_builtin_templates(), "template_los_angeles")
    assert template.duration == 5
    today = date(2030, 3, 1)
    prefill = template_service.apply_template(template, today)
    assert prefill.start_date == today
    assert prefill.end_date == today + timedelta(days=5)
    assert prefill.notes.startswith("Hollywood, beaches, and endless sunshine\n\nHighlights:\n• Hollywood Walk of Fame")


def test_filter_templates():
    templates = template_service.get_builtin_templates()
    assert [t.id for t in template_service.filter_templates(templates, "PARIS")] == ["template_paris"]
    business = template_service.filter_templates(templates, type="Business")
    assert {t.id for t in business} == {"template_san_francisco", "template_singapore"}
    assert template_service.filter_templates(templates, "tech", "Leisure") == []
    assert len(template_service.filter_templates(templates)) == 13


def test_cost_breakdown_rounds_to_whole_units():
    costs = template_service.generate_cost_breakdown(Decimal(1234), "Leisure", 5)
    assert costs == {
        "Flight": Decimal(370),
        "Hotel": Decimal(494),
        "Food": Decimal(185),
        "Activities": Decimal(123),
        "Transportation": Decimal(62),
    }


def test_cost_breakdown_unknown_type_falls_back_to_leisure():
    assert (template_service.generate_cost_breakdown(Decimal(1000), "Cruise", 3)
            == template_service.generate_cost_breakdown(Decimal(1000), "Leisure", 3))


def test_highlights_with_interests_are_capped():
    highlights = template_service.generate_highlights("Tokyo", "Business", ["food", "Museums", "nightlife"])
    assert highlights == [
        "Business District", "Conference Centers", "Networking Venues", "Airport",
        "Local Cuisine", "Food Tours",
    ]
    # The base list is not mutated between calls
    assert template_service.generate_highlights("Tokyo", "Business", []) == [
        "Business District", "Conference Centers", "Networking Venues", "Airport",
    ]


def test_generate_description():
    assert (template_service.generate_description("Lisbon", "Romance", 4, ["wine", "fado", "tiles", "beaches"])
            == "A romantic 4-day romance escape to Lisbon, featuring wine, fado, tiles.")
    assert (template_service.generate_description("Oslo", "Unknown", 2, [])
            == "A perfect 2-day unknown getaway to Oslo.")


def test_generate_template():
    template = template_service.generate_template(TemplateGenerateRequest(
        destination="Kyoto, Japan", duration=6, budget=Decimal(3000), type="Adventure", interests="nature, hiking"
    ))
    assert template.name == "Kyoto Adventure Adventure"
    assert template.destination == "Kyoto, Japan"
    assert template.estimated_costs["Equipment"] == Decimal(600)
    assert "Natural Attractions" in template.highlights


def test_template_endpoints(client, auth_headers):
    response = client.get("/api/templates", params={"search": "beach"}, headers=auth_headers)
    assert response.status_code == 200
    assert "template_miami" in [t["id"] for t in response.json()]

    response = client.post("/api/templates/template_nyc/apply", headers=auth_headers)
    assert response.status_code == 200
    prefill = response.json()
    start = date.fromisoformat(prefill["start_date"])
    assert date.fromisoformat(prefill["end_date"]) - start == timedelta(days=3)

    response = client.post("/api/templates/missing/apply", headers=auth_headers)
    assert response.status_code == 404


def test_generate_and_save_custom_template(client, auth_headers):
    generated = client.post(
        "/api/templates/generate",
        json={"destination": "Porto, Portugal", "duration": 4, "budget": 800, "type": "Family", "interests": ["culture"]},
        headers=auth_headers
    ).json()
    assert generated["name"] == "Porto Family Adventure"

    response = client.post("/api/templates/custom", json=generated, headers=auth_headers)
    assert response.status_code == 201
    saved = response.json()
    assert saved["custom"] is True

    templates = client.get("/api/templates", headers=auth_headers).json()
    assert len(templates) == 14
    assert templates[-1]["id"] == saved["id"]

    response = client.post(f"/api/templates/{saved['id']}/apply", headers=auth_headers)
    assert response.status_code == 200
