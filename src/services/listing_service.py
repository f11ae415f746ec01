"""Listing of registrants whose forms have been uploaded."""
from typing import Any, Dict, List

from src.models.registrant import Registrant
from src.utils.date_utils import format_display_date

EMPTY_STATE_MESSAGE = "No completed registrations yet. Be the first to register!"
VERIFIED_STATUS = "Verified"

LISTING_COLUMNS = ("#", "Name", "Age", "Country", "Date", "Status")

# Presentation-only rows shown ahead of live results; never persisted.
SHOWCASE_REGISTRANTS = [
    Registrant(id="showcase-1", first_name="Amara", last_name="Okafor", age=34, country="Nigeria",
               address="12 Marina Rd", phone="+234 800 000 0001", created_at="2025-01-18T09:12:00Z",
               form_uploaded=True, gender="Female", amount_paid=250.0),
    Registrant(id="showcase-2", first_name="Lucas", middle_name="Henrique", last_name="Silva", age=41,
               country="Brazil", address="88 Rua Augusta", phone="+55 11 0000 0002",
               created_at="2025-01-16T14:40:00Z", form_uploaded=True, gender="Male", amount_paid=180.0),
    Registrant(id="showcase-3", first_name="Fatima", last_name="Rahman", age=29, country="Bangladesh",
               address="5 Lake Circus", phone="+880 1700 000003", created_at="2025-01-15T07:05:00Z",
               form_uploaded=True, gender="Female", amount_paid=120.0),
    Registrant(id="showcase-4", first_name="Daniel", last_name="Mensah", age=52, country="Ghana",
               address="3 Ring Road East", phone="+233 20 000 0004", created_at="2025-01-13T18:22:00Z",
               form_uploaded=True, gender="Male", amount_paid=300.0),
    Registrant(id="showcase-5", first_name="Sofia", middle_name="Isabel", last_name="Martinez", age=37,
               country="Mexico", address="41 Avenida Juarez", phone="+52 55 0000 0005",
               created_at="2025-01-11T11:48:00Z", form_uploaded=True, gender="Female", amount_paid=200.0),
    Registrant(id="showcase-6", first_name="Arjun", last_name="Patel", age=45, country="India",
               address="17 MG Road", phone="+91 98000 00006", created_at="2025-01-09T16:30:00Z",
               form_uploaded=True, gender="Male", amount_paid=150.0),
    Registrant(id="showcase-7", first_name="Grace", last_name="Wanjiru", age=31, country="Kenya",
               address="9 Moi Avenue", phone="+254 700 000007", created_at="2025-01-06T08:15:00Z",
               form_uploaded=True, gender="Female", amount_paid=220.0),
    Registrant(id="showcase-8", first_name="Ahmed", last_name="Hassan", age=39, country="Egypt",
               address="22 Tahrir St", phone="+20 10 0000 0008", created_at="2025-01-03T13:55:00Z",
               form_uploaded=True, gender="Male", amount_paid=175.0),
]


def get_registered_people(repository, include_showcase: bool = False) -> List[Registrant]:
    """
    Registrants with uploaded forms, newest first.

    Args:
        repository: RegistrantRepository to read from
        include_showcase: Put SHOWCASE_REGISTRANTS ahead of the live results

    Returns:
        List of registrants to display
    """
    registrants = [r for r in repository.list_uploaded() if r.form_uploaded]
    if include_showcase:
        return list(SHOWCASE_REGISTRANTS) + registrants
    return registrants


def build_listing_rows(registrants: List[Registrant]) -> List[Dict[str, Any]]:
    """Table rows with a 1-based display index and a static status badge."""
    return [
        {
            "#": index,
            "Name": registrant.full_name,
            "Age": registrant.age,
            "Country": registrant.country,
            "Date": format_display_date(registrant.created_at),
            "Status": VERIFIED_STATUS,
        }
        for index, registrant in enumerate(registrants, start=1)
    ]


def summary_line(count: int) -> str:
    """Heading text such as '3 registered people with completed forms.'"""
    noun = "person" if count == 1 else "people"
    return f"{count} registered {noun} with completed forms."
