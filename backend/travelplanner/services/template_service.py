"""
Template service: built-in presets, custom templates and the template generator.
"""
from datetime import date, timedelta
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, List, Optional
import time
from travelplanner.schemas.template import (
    TripTemplate, TemplateApplication, TemplateGenerateRequest, CustomTemplateCreate
)

MAX_HIGHLIGHTS = 6

BASE_HIGHLIGHTS = {
    "Leisure": ["City Center", "Local Markets", "Historic Sites", "Restaurants"],
    "Business": ["Business District", "Conference Centers", "Networking Venues", "Airport"],
    "Adventure": ["Hiking Trails", "Outdoor Activities", "Scenic Views", "Adventure Sports"],
    "Romance": ["Romantic Restaurants", "Scenic Spots", "Couples Activities", "Sunset Views"],
    "Family": ["Family Attractions", "Parks", "Museums", "Kid-Friendly Activities"],
}

# (interest keywords, highlights added when any keyword is requested)
INTEREST_HIGHLIGHTS = [
    (("food", "cuisine"), ["Local Cuisine", "Food Tours"]),
    (("museums", "culture"), ["Museums", "Cultural Sites"]),
    (("nature", "outdoor"), ["Natural Attractions", "Parks"]),
    (("nightlife", "entertainment"), ["Nightlife", "Entertainment"]),
]

DESCRIPTION_OPENINGS = {
    "Leisure": "A perfect {duration}-day {kind} getaway to {city}",
    "Business": "Professional {duration}-day {kind} trip to {city}",
    "Adventure": "An exciting {duration}-day {kind} experience in {city}",
    "Romance": "A romantic {duration}-day {kind} escape to {city}",
    "Family": "A fun-filled {duration}-day {kind} trip to {city}",
}

COST_ALLOCATION = {
    "Leisure": {"Flight": "0.3", "Hotel": "0.4", "Food": "0.15", "Activities": "0.1", "Transportation": "0.05"},
    "Business": {"Flight": "0.4", "Hotel": "0.35", "Conference": "0.15", "Food": "0.05", "Transportation": "0.05"},
    "Adventure": {"Flight": "0.25", "Lodging": "0.3", "Equipment": "0.2", "Activities": "0.15", "Food": "0.1"},
    "Romance": {"Flight": "0.35", "Hotel": "0.4", "Food": "0.15", "Activities": "0.05", "Transportation": "0.05"},
    "Family": {"Flight": "0.4", "Hotel": "0.3", "Food": "0.15", "Activities": "0.1", "Transportation": "0.05"},
}


def _preset(id, name, destination, type, duration, budget, description, highlights, costs):
    return TripTemplate(
        id=id,
        name=name,
        destination=destination,
        type=type,
        duration=duration,
        budget=Decimal(budget),
        description=description,
        highlights=highlights,
        estimated_costs={category: Decimal(amount) for category, amount in costs.items()}
    )


def get_builtin_templates() -> List[TripTemplate]:
    """The thirteen preset templates."""
    return [
        # Popular US destinations
        _preset("template_nyc", "New York City Weekend", "New York City, USA", "Leisure", 3, 800,
                "The city that never sleeps - perfect for a quick urban escape",
                ["Central Park", "Broadway Show", "Times Square", "Brooklyn Bridge", "Statue of Liberty"],
                {"Flight": 300, "Hotel": 200, "Food": 150, "Activities": 100, "Transportation": 50}),
        _preset("template_los_angeles", "Los Angeles Adventure", "Los Angeles, USA", "Leisure", 5, 1200,
                "Hollywood, beaches, and endless sunshine",
                ["Hollywood Walk of Fame", "Santa Monica Pier", "Griffith Observatory", "Venice Beach",
                 "Universal Studios"],
                {"Flight": 400, "Hotel": 400, "Food": 200, "Activities": 150, "Transportation": 50}),
        _preset("template_miami", "Miami Beach Paradise", "Miami, USA", "Leisure", 4, 1000,
                "Tropical vibes, art deco, and vibrant nightlife",
                ["South Beach", "Art Deco District", "Wynwood Walls", "Everglades", "Little Havana"],
                {"Flight": 350, "Hotel": 300, "Food": 200, "Activities": 100, "Transportation": 50}),
        _preset("template_las_vegas", "Las Vegas Experience", "Las Vegas, USA", "Leisure", 3, 900,
                "Entertainment capital with shows, casinos, and dining",
                ["The Strip", "Bellagio Fountains", "Fremont Street", "Shows", "Grand Canyon Day Trip"],
                {"Flight": 300, "Hotel": 200, "Food": 200, "Activities": 150, "Transportation": 50}),
        # International destinations
        _preset("template_paris", "Paris Romance", "Paris, France", "Leisure", 7, 2500,
                "The City of Light - culture, cuisine, and romance",
                ["Eiffel Tower", "Louvre Museum", "Notre Dame", "Seine River Cruise", "Montmartre"],
                {"Flight": 800, "Hotel": 700, "Food": 400, "Activities": 300, "Transportation": 100,
                 "Shopping": 200}),
        _preset("template_london", "London Royal Tour", "London, UK", "Leisure", 6, 2200,
                "Historic charm meets modern sophistication",
                ["Big Ben", "Tower of London", "British Museum", "West End Show", "Hyde Park"],
                {"Flight": 700, "Hotel": 600, "Food": 350, "Activities": 300, "Transportation": 100,
                 "Shopping": 150}),
        _preset("template_tokyo", "Tokyo Discovery", "Tokyo, Japan", "Leisure", 8, 2800,
                "Futuristic metropolis with ancient traditions",
                ["Senso-ji Temple", "Shibuya Crossing", "Tsukiji Market", "Tokyo Skytree", "Harajuku"],
                {"Flight": 1000, "Hotel": 800, "Food": 400, "Activities": 300, "Transportation": 150,
                 "Shopping": 150}),
        _preset("template_rome", "Rome Eternal City", "Rome, Italy", "Leisure", 5, 1800,
                "Ancient history and incredible Italian cuisine",
                ["Colosseum", "Vatican City", "Trevi Fountain", "Roman Forum", "Trastevere"],
                {"Flight": 600, "Hotel": 500, "Food": 300, "Activities": 200, "Transportation": 100,
                 "Shopping": 100}),
        # Beach destinations
        _preset("template_cancun", "Cancun Paradise", "Cancun, Mexico", "Leisure", 5, 1200,
                "All-inclusive beach resort with Mayan culture",
                ["Beach Resort", "Chichen Itza", "Snorkeling", "Xcaret Park", "Isla Mujeres"],
                {"Flight": 400, "Resort": 500, "Activities": 200, "Food": 100}),
        _preset("template_bali", "Bali Tropical Escape", "Bali, Indonesia", "Leisure", 8, 1500,
                "Island paradise with temples and rice terraces",
                ["Ubud Rice Terraces", "Tegallalang", "Uluwatu Temple", "Seminyak Beach", "Mount Batur"],
                {"Flight": 600, "Hotel": 400, "Food": 200, "Activities": 200, "Transportation": 100}),
        # Adventure destinations
        _preset("template_iceland", "Iceland Adventure", "Reykjavik, Iceland", "Adventure", 7, 2000,
                "Land of fire and ice with incredible natural wonders",
                ["Northern Lights", "Blue Lagoon", "Golden Circle", "Glacier Hiking", "Waterfalls"],
                {"Flight": 500, "Hotel": 600, "Food": 300, "Activities": 400, "Transportation": 200}),
        # Business destinations
        _preset("template_san_francisco", "San Francisco Tech", "San Francisco, USA", "Business", 4, 1500,
                "Tech hub with innovation and networking",
                ["Golden Gate Bridge", "Alcatraz", "Silicon Valley", "Fisherman's Wharf", "Cable Cars"],
                {"Flight": 400, "Hotel": 600, "Conference": 300, "Food": 150, "Transportation": 50}),
        _preset("template_singapore", "Singapore Business", "Singapore", "Business", 5, 1800,
                "Global business hub with multicultural charm",
                ["Marina Bay Sands", "Gardens by the Bay", "Chinatown", "Sentosa Island", "Hawker Centers"],
                {"Flight": 600, "Hotel": 500, "Food": 200, "Activities": 300, "Transportation": 100,
                 "Shopping": 200}),
    ]


def filter_templates(
    templates: List[TripTemplate],
    search: Optional[str] = None,
    type: Optional[str] = None
) -> List[TripTemplate]:
    """Case-insensitive search on name, destination and description; exact type match."""
    term = (search or "").lower()
    results = []
    for template in templates:
        matches_search = (
            term in template.name.lower()
            or term in template.destination.lower()
            or term in template.description.lower()
        )
        matches_type = not type or template.type == type
        if matches_search and matches_type:
            results.append(template)
    return results


def find_template(templates: List[TripTemplate], template_id: str) -> Optional[TripTemplate]:
    return next((t for t in templates if t.id == template_id), None)


def apply_template(template: TripTemplate, today: Optional[date] = None) -> TemplateApplication:
    """
    Build trip form values from a template.

    The trip starts today and ends exactly `duration` days later. The notes
    hold the description followed by the bulleted highlights.
    """
    start = today or date.today()
    highlights = "\n".join(f"• {highlight}" for highlight in template.highlights)
    return TemplateApplication(
        template_id=template.id,
        name=template.name,
        destination=template.destination,
        type=template.type,
        budget=template.budget,
        start_date=start,
        end_date=start + timedelta(days=template.duration),
        notes=f"{template.description}\n\nHighlights:\n{highlights}"
    )


def generate_highlights(city: str, type: str, interests: List[str]) -> List[str]:
    highlights = list(BASE_HIGHLIGHTS.get(type, BASE_HIGHLIGHTS["Leisure"]))
    requested = {interest.lower() for interest in interests}
    for keywords, additions in INTEREST_HIGHLIGHTS:
        if requested.intersection(keywords):
            highlights.extend(additions)
    return highlights[:MAX_HIGHLIGHTS]


def generate_description(city: str, type: str, duration: int, interests: List[str]) -> str:
    opening = DESCRIPTION_OPENINGS.get(type, DESCRIPTION_OPENINGS["Leisure"])
    description = opening.format(duration=duration, kind=type.lower(), city=city)
    if interests:
        description += f", featuring {', '.join(interests[:3])}"
    return description + "."


def generate_cost_breakdown(budget: Decimal, type: str, duration: int) -> Dict[str, Decimal]:
    """Split the budget by the trip type's allocation, rounded to whole units."""
    allocation = COST_ALLOCATION.get(type, COST_ALLOCATION["Leisure"])
    return {
        category: (Decimal(budget) * Decimal(share)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
        for category, share in allocation.items()
    }


def generate_template(request: TemplateGenerateRequest) -> TripTemplate:
    """Produce a template from a destination, duration, budget, type and interests."""
    city = request.destination.split(",")[0].strip()
    return TripTemplate(
        id=f"ai_template_{int(time.time() * 1000)}",
        name=f"{city} {request.type} Adventure",
        destination=request.destination,
        type=request.type,
        duration=request.duration,
        budget=request.budget,
        description=generate_description(city, request.type, request.duration, request.interests),
        highlights=generate_highlights(city, request.type, request.interests),
        estimated_costs=generate_cost_breakdown(request.budget, request.type, request.duration),
        custom=False
    )


def build_custom_template(data: CustomTemplateCreate) -> TripTemplate:
    """Turn submitted template fields into a stored custom template."""
    return TripTemplate(
        id=data.id or f"custom_template_{int(time.time() * 1000)}",
        name=data.name,
        destination=data.destination,
        type=data.type,
        duration=data.duration,
        budget=data.budget,
        description=data.description,
        highlights=data.highlights,
        estimated_costs={k: v for k, v in data.estimated_costs.items() if k and v},
        custom=True
    )
