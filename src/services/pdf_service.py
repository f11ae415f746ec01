"""One-page registration form PDF rendered with reportlab."""
import io
import re
from typing import List, Optional, Tuple

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas

from src.models.registrant import Registrant
from src.utils.date_utils import format_display_date

HEADER_COLOR = colors.Color(26 / 255, 42 / 255, 68 / 255)
TEXT_COLOR = colors.Color(40 / 255, 40 / 255, 40 / 255)
FOOTER_COLOR = colors.Color(120 / 255, 120 / 255, 120 / 255)

DEFAULT_FOUNDATION_NAME = "HopeRise Foundation"
FOOTER_NOTE = "Please upload this form to complete your registration."

PAGE_WIDTH, PAGE_HEIGHT = A4

# Layout in millimetres from the top-left corner
HEADER_HEIGHT = 45
TITLE_Y = 20
SUBTITLE_Y = 32
FIRST_ROW_Y = 60
ROW_PITCH = 10
LABEL_X = 20
VALUE_X = 75
FOOTER_Y = 270


def _y(top_mm: float) -> float:
    """Convert a distance from the top edge (mm) to reportlab's y (points)."""
    return PAGE_HEIGHT - top_mm * mm


def _filename_part(value: str) -> str:
    return re.sub(r"[^\w-]+", "_", value.strip()).strip("_") or "Registrant"


def registration_fields(registrant: Registrant) -> List[Tuple[str, str]]:
    """Label/value rows printed on the form."""
    fields = [
        ("Registration ID", registrant.id),
        ("First Name", registrant.first_name),
        ("Middle Name", registrant.middle_name or "N/A"),
        ("Last Name", registrant.last_name),
        ("Age", str(registrant.age)),
        ("Country", registrant.country),
        ("Address", registrant.address),
        ("Phone Number", registrant.phone),
    ]
    if registrant.gender:
        fields.append(("Gender", registrant.gender))
    fields.append(("Date of Registration", format_display_date(registrant.created_at)))
    return fields


def registration_pdf_filename(registrant: Registrant) -> str:
    first = _filename_part(registrant.first_name)
    last = _filename_part(registrant.last_name)
    return f"HopeRise_Registration_{first}_{last}.pdf"


def build_registration_pdf(registrant: Registrant, foundation_name: str = DEFAULT_FOUNDATION_NAME) -> bytes:
    """Render the registration form and return the PDF bytes."""
    buffer = io.BytesIO()
    pdf = canvas.Canvas(buffer, pagesize=A4)
    pdf.setTitle(f"{foundation_name} Registration Form")
    pdf.setAuthor(foundation_name)

    # Header band
    pdf.setFillColor(HEADER_COLOR)
    pdf.rect(0, _y(HEADER_HEIGHT), PAGE_WIDTH, HEADER_HEIGHT * mm, stroke=0, fill=1)
    pdf.setFillColor(colors.white)
    pdf.setFont("Helvetica-Bold", 22)
    pdf.drawCentredString(PAGE_WIDTH / 2, _y(TITLE_Y), foundation_name)
    pdf.setFont("Helvetica", 12)
    pdf.drawCentredString(PAGE_WIDTH / 2, _y(SUBTITLE_Y), "Registration Form")

    # Field rows
    pdf.setFillColor(TEXT_COLOR)
    y = FIRST_ROW_Y
    for label, value in registration_fields(registrant):
        pdf.setFont("Helvetica-Bold", 11)
        pdf.drawString(LABEL_X * mm, _y(y), f"{label}:")
        pdf.setFont("Helvetica", 11)
        pdf.drawString(VALUE_X * mm, _y(y), value)
        y += ROW_PITCH

    # Footer
    pdf.setFont("Helvetica", 9)
    pdf.setFillColor(FOOTER_COLOR)
    pdf.drawCentredString(PAGE_WIDTH / 2, _y(FOOTER_Y), FOOTER_NOTE)

    pdf.showPage()
    pdf.save()
    return buffer.getvalue()


def export_registration_pdf(
    registrant: Optional[Registrant],
    foundation_name: str = DEFAULT_FOUNDATION_NAME,
) -> Optional[Tuple[str, bytes]]:
    """
    Build the downloadable form for the current registrant.

    Returns:
        (file name, PDF bytes), or None when no registrant is selected
    """
    if registrant is None:
        return None
    return registration_pdf_filename(registrant), build_registration_pdf(registrant, foundation_name)
