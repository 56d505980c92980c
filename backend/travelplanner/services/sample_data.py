"""
Sample trips, packing lists and documents used to seed an empty planner.
"""
from datetime import date, datetime
from decimal import Decimal
from typing import List
from travelplanner.schemas.trip import Trip, Expense
from travelplanner.schemas.packing import PackingList, PackingItem
from travelplanner.schemas.document import TravelDocument


def _expense(id, description, amount, category, day):
    return Expense(
        id=id,
        description=description,
        amount=Decimal(amount),
        category=category,
        date=date.fromisoformat(day)
    )


def _timestamp(value: str) -> datetime:
    return datetime.fromisoformat(value)


def get_sample_trips() -> List[Trip]:
    """Three trips: Paris, New York and Miami."""
    return [
        Trip(
            id="trip_1",
            name="Summer Europe Adventure",
            destination="Paris, France",
            type="Leisure",
            start_date=date(2024, 6, 15),
            end_date=date(2024, 6, 25),
            budget=Decimal("3500.00"),
            notes="First time visiting Europe! Excited to see the Eiffel Tower and try authentic French cuisine.",
            expenses=[
                _expense("exp_1", "Flight to Paris", "850.00", "Transportation", "2024-06-15"),
                _expense("exp_2", "Hotel booking", "1200.00", "Accommodation", "2024-06-15"),
                _expense("exp_3", "Eiffel Tower tickets", "45.00", "Activities", "2024-06-16"),
                _expense("exp_4", "Louvre Museum", "25.00", "Activities", "2024-06-17"),
                _expense("exp_5", "French dinner", "85.00", "Food", "2024-06-18"),
            ],
            created_at=_timestamp("2024-05-01T10:00:00")
        ),
        Trip(
            id="trip_2",
            name="Business Conference NYC",
            destination="New York, USA",
            type="Business",
            start_date=date(2024, 7, 10),
            end_date=date(2024, 7, 12),
            budget=Decimal("2000.00"),
            notes="Tech conference at Javits Center. Need to network and attend key sessions.",
            expenses=[
                _expense("exp_6", "Conference registration", "450.00", "Business", "2024-07-10"),
                _expense("exp_7", "Hotel near Javits", "600.00", "Accommodation", "2024-07-10"),
                _expense("exp_8", "Uber rides", "120.00", "Transportation", "2024-07-11"),
            ],
            created_at=_timestamp("2024-06-15T14:30:00")
        ),
        Trip(
            id="trip_3",
            name="Beach Getaway Miami",
            destination="Miami, Florida",
            type="Leisure",
            start_date=date(2024, 8, 20),
            end_date=date(2024, 8, 25),
            budget=Decimal("1800.00"),
            notes="Relaxing beach vacation with friends. Looking forward to South Beach and Cuban food!",
            expenses=[
                _expense("exp_9", "Flight to Miami", "320.00", "Transportation", "2024-08-20"),
                _expense("exp_10", "Airbnb rental", "800.00", "Accommodation", "2024-08-20"),
                _expense("exp_11", "Beach equipment", "75.00", "Activities", "2024-08-21"),
            ],
            created_at=_timestamp("2024-07-01T09:15:00")
        ),
    ]


def _items(start: int, entries) -> List[PackingItem]:
    return [
        PackingItem(id=f"item_{start + offset}", name=name, packed=packed)
        for offset, (name, packed) in enumerate(entries)
    ]


def get_sample_packing_lists() -> List[PackingList]:
    """One packing list per sample trip."""
    return [
        PackingList(
            id="pack_1",
            name="Summer Europe Trip",
            trip_id="trip_1",
            categories=["Clothes", "Electronics", "Toiletries", "Documents"],
            items=_items(1, [
                ("Passport", True),
                ("Travel adapter", True),
                ("Summer dresses (3)", False),
                ("Comfortable walking shoes", True),
                ("Camera and charger", False),
                ("Toothbrush and toothpaste", True),
                ("Sunscreen SPF 50", False),
                ("Travel insurance documents", True),
            ]),
            created_at=_timestamp("2024-05-15T10:30:00")
        ),
        PackingList(
            id="pack_2",
            name="Business Conference Pack",
            trip_id="trip_2",
            categories=["Business Attire", "Electronics", "Documents"],
            items=_items(9, [
                ("Business suits (2)", True),
                ("Laptop and charger", True),
                ("Business cards", True),
                ("Conference badge", False),
                ("Notebook and pens", True),
                ("Dress shoes", True),
            ]),
            created_at=_timestamp("2024-06-20T16:45:00")
        ),
        PackingList(
            id="pack_3",
            name="Beach Vacation Essentials",
            trip_id="trip_3",
            categories=["Beach Gear", "Summer Clothes", "Sunscreen"],
            items=_items(15, [
                ("Swimsuits (2)", False),
                ("Beach towels", False),
                ("Sunglasses", True),
                ("Flip flops", False),
                ("Beach hat", False),
                ("Waterproof phone case", True),
            ]),
            created_at=_timestamp("2024-07-10T12:00:00")
        ),
    ]


def get_sample_documents() -> List[TravelDocument]:
    """Passports, bookings and IDs attached to the sample trips."""
    entries = [
        ("doc_1", "Passport", "Passport", "trip_1", "2029-03-15",
         "Valid for 5 more years. Make sure to check visa requirements for France.",
         "2024-05-01T08:00:00"),
        ("doc_2", "Travel Insurance Policy", "Insurance", "trip_1", "2024-07-15",
         "Covers medical emergencies and trip cancellation. Policy number: TI-2024-001234",
         "2024-05-02T10:30:00"),
        ("doc_3", "Hotel Booking Confirmation", "Accommodation", "trip_1", None,
         "Hotel Le Marais, Paris. Confirmation code: HM-2024-5678. Check-in: June 15, 2024",
         "2024-05-03T14:20:00"),
        ("doc_4", "Conference Registration", "Business", "trip_2", None,
         "TechConf 2024 at Javits Center. Badge pickup at registration desk.",
         "2024-06-01T09:15:00"),
        ("doc_5", "Driver's License", "ID", "trip_3", "2026-12-31",
         "Valid for car rental in Miami. International driving permit not required for US.",
         "2024-07-01T11:45:00"),
        ("doc_6", "Flight Booking", "Transportation", "trip_3", None,
         "American Airlines AA1234. Seat 12A. Check-in 24 hours before departure.",
         "2024-07-02T16:30:00"),
    ]
    return [
        TravelDocument(
            id=doc_id,
            name=name,
            type=doc_type,
            trip_id=trip_id,
            expiry_date=date.fromisoformat(expiry) if expiry else None,
            notes=notes,
            created_at=_timestamp(created)
        )
        for doc_id, name, doc_type, trip_id, expiry, notes, created in entries
    ]
