"""Data validation utilities."""
from typing import Any, Dict, Iterable, List, Optional, Tuple

# Wire names of the registration payload, in form order
REQUIRED_REGISTRATION_FIELDS = (
    "firstName",
    "lastName",
    "email",
    "age",
    "country",
    "address",
    "phone",
)

PDF_MIME_TYPE = "application/pdf"

MISSING_FIELDS_MESSAGE = "Please fill in all required fields."
INVALID_AGE_MESSAGE = "Please enter a valid age."
NOT_PDF_MESSAGE = "Please upload a PDF file."

MAX_AGE = 150


def is_blank(value: Any) -> bool:
    """Return True for None, empty strings and whitespace-only strings."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def missing_required_fields(
    data: Dict[str, Any],
    required: Iterable[str] = REQUIRED_REGISTRATION_FIELDS,
) -> List[str]:
    """
    List required fields that are absent or blank.

    Args:
        data: Submitted field values keyed by wire name
        required: Field names that must be present

    Returns:
        Names of missing fields in the order given by `required`
    """
    return [name for name in required if is_blank(data.get(name))]


def parse_age(value: Any) -> Optional[int]:
    """
    Parse an age entered in a form.

    Returns:
        The age as int, or None if it is not a whole number in 1..150
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        age = value
    else:
        try:
            age = int(str(value).strip())
        except (TypeError, ValueError):
            return None
    if age < 1 or age > MAX_AGE:
        return None
    return age


def validate_registration_form(form: Dict[str, Any]) -> Tuple[bool, str]:
    """
    Validate a registration form before anything is sent.

    Args:
        form: Field values keyed by wire name (firstName, lastName, ...)

    Returns:
        Tuple of (is_valid: bool, error_message: str)
        - (True, "") if valid
        - (False, MISSING_FIELDS_MESSAGE) if any required field is empty
        - (False, INVALID_AGE_MESSAGE) if age is not a whole number in 1..150
    """
    if missing_required_fields(form):
        return False, MISSING_FIELDS_MESSAGE

    if parse_age(form.get("age")) is None:
        return False, INVALID_AGE_MESSAGE

    return True, ""


def validate_pdf_upload(file_name: Optional[str], mime_type: Optional[str]) -> Tuple[bool, str]:
    """
    Validate that an uploaded file is a PDF.

    The declared MIME type decides the format; the extension is not inspected.

    Returns:
        Tuple of (is_valid: bool, error_message: str)
    """
    if not file_name or mime_type != PDF_MIME_TYPE:
        return False, NOT_PDF_MESSAGE
    return True, ""


def normalize_text(value: Any) -> Optional[str]:
    """Trim a text value; blank values become None."""
    if is_blank(value):
        return None
    return str(value).strip()
