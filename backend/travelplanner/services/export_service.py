"""
Export service: trip itinerary PDF, expense CSV and full JSON backups.
"""
from datetime import date, datetime
from typing import List, Optional
import csv
import io
import logging
from fpdf import FPDF
from travelplanner.core.utils import format_currency, format_date, slugify_filename
from travelplanner.schemas.trip import Trip
from travelplanner.schemas.settings import UserSettings, DataBackup
from travelplanner.services.aggregation import trip_spent

logger = logging.getLogger(__name__)

CSV_HEADER = [
    "Trip Name", "Destination", "Type", "Start Date", "End Date",
    "Budget", "Description", "Amount", "Category",
]

BRAND_COLOR = (102, 126, 234)
NOTES_WIDTH = 170

# Core PDF fonts only cover latin-1
_PDF_REPLACEMENTS = {"€": "EUR ", "•": "-", "–": "-", "—": "-", "’": "'", "“": '"', "”": '"'}


def _pdf_text(text: str) -> str:
    for char, replacement in _PDF_REPLACEMENTS.items():
        text = text.replace(char, replacement)
    return text.encode("latin-1", "replace").decode("latin-1")


def pdf_filename(trip: Trip) -> str:
    return f"{slugify_filename(trip.name)}_itinerary.pdf"


def csv_filename(trip: Trip) -> str:
    return f"{slugify_filename(trip.name)}_expenses.csv"


def backup_filename(today: Optional[date] = None) -> str:
    return f"travel-planner-backup-{(today or date.today()).isoformat()}.json"


def trip_to_csv(trip: Trip) -> str:
    """One summary row for the trip followed by one row per expense."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    writer.writerow([
        trip.name, trip.destination, trip.type,
        trip.start_date.isoformat(), trip.end_date.isoformat(),
        trip.budget, "", "", "",
    ])
    for expense in trip.expenses:
        writer.writerow(["", "", "", "", "", "", expense.description, expense.amount, expense.category or ""])
    return buffer.getvalue()


class ItineraryPDF(FPDF):
    """A4 itinerary with a page counter and generation date in the footer."""

    def __init__(self, generated_on: date):
        super().__init__(orientation="P", unit="mm", format="A4")
        self.generated_on = generated_on
        self.set_auto_page_break(auto=True, margin=20)

    def footer(self):
        self.set_y(-15)
        self.set_font("Helvetica", size=8)
        self.set_text_color(150, 150, 150)
        self.cell(0, 10, f"Page {self.page_no()} of {{nb}}", align="L")
        self.set_x(-80)
        self.cell(0, 10, f"Generated on {format_date(self.generated_on)}", align="L")


def trip_to_pdf(trip: Trip, currency: str = "USD", generated_on: Optional[date] = None) -> bytes:
    """Render the trip itinerary and return the PDF bytes."""
    pdf = ItineraryPDF(generated_on or date.today())
    pdf.add_page()

    def line(text: str, height: float = 8):
        pdf.cell(0, height, _pdf_text(text), new_x="LMARGIN", new_y="NEXT")

    def money(amount) -> str:
        return format_currency(amount, currency)

    # Title block
    pdf.set_font("Helvetica", size=20)
    pdf.set_text_color(*BRAND_COLOR)
    line("Bradley's Travel Planner", 10)
    pdf.set_font("Helvetica", size=16)
    line("Trip Itinerary", 10)
    pdf.set_font("Helvetica", size=10)
    pdf.set_text_color(100, 100, 100)
    line("A product of Bradley Virtual Solutions, LLC", 10)
    pdf.ln(8)

    # Trip details
    pdf.set_text_color(0, 0, 0)
    pdf.set_font("Helvetica", "B", 12)
    line("Trip Details:", 10)
    pdf.set_font("Helvetica", size=12)
    line(f"Trip Name: {trip.name}")
    line(f"Destination: {trip.destination}")
    line(f"Type: {trip.type}")
    line(f"Dates: {format_date(trip.start_date)} - {format_date(trip.end_date)}")
    line(f"Budget: {money(trip.budget)}")
    pdf.ln(7)

    if trip.expenses:
        pdf.set_font("Helvetica", "B", 12)
        line("Expenses:", 10)
        pdf.set_font("Helvetica", size=12)
        for expense in trip.expenses:
            pdf.set_x(pdf.l_margin + 5)
            line(f"• {expense.description}: {money(expense.amount)}", 6)
        pdf.ln(10)

        spent = trip_spent(trip)
        pdf.set_font("Helvetica", "B", 12)
        line(f"Total Spent: {money(spent)}")
        line(f"Remaining: {money(trip.budget - spent)}")
        pdf.ln(7)

    if trip.notes:
        pdf.set_font("Helvetica", "B", 12)
        line("Notes:", 10)
        pdf.set_font("Helvetica", size=12)
        pdf.multi_cell(NOTES_WIDTH, 6, _pdf_text(trip.notes))

    logger.info(f"Generated PDF itinerary for trip {trip.id}")
    return bytes(pdf.output())


def build_backup(trips: List[Trip], user_settings: UserSettings, now: Optional[datetime] = None) -> DataBackup:
    return DataBackup(trips=trips, settings=user_settings, export_date=now or datetime.utcnow())
