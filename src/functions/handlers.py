"""
Backend function logic, independent of the HTTP layer.

Each handler returns `(status_code, body)`; `src.functions.app` turns that
into a JSON response and `InProcessFunctions` calls the handlers directly.
"""
import logging
from typing import Any, Dict, Optional, Tuple

from pydantic import ValidationError

from src.functions.schemas import RegistrationInput
from src.services.mailer import Mailer
from src.utils.exceptions import DuplicateEmailError, MailDeliveryError, StorageError
from src.utils.validation import PDF_MIME_TYPE, is_blank, missing_required_fields

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_ERROR = "All required fields must be filled"
DUPLICATE_EMAIL_ERROR = "This email has already been registered"
SAVE_FAILED_ERROR = "Failed to save registration"

MISSING_UPLOAD_ERROR = "A PDF file and registrant name are required"
NOT_PDF_ERROR = "Only PDF files are accepted"
SEND_FAILED_ERROR = "Failed to send registration email"

FunctionResult = Tuple[int, Dict[str, Any]]


def register_registrant(payload: Any, repository) -> FunctionResult:
    """
    Validate a registration payload and insert it.

    Returns:
        - (200, {"success": True, "registration": row})
        - (400, {"error": REQUIRED_FIELDS_ERROR}) on missing or invalid fields
        - (409, {"error": DUPLICATE_EMAIL_ERROR}) if the email exists
        - (500, {"error": SAVE_FAILED_ERROR}) on any storage failure
    """
    if not isinstance(payload, dict) or missing_required_fields(payload):
        return 400, {"error": REQUIRED_FIELDS_ERROR}

    try:
        registration = RegistrationInput.model_validate(payload)
    except ValidationError as e:
        logger.info("Rejected registration payload: %s", e.errors(include_url=False))
        return 400, {"error": REQUIRED_FIELDS_ERROR}

    try:
        registrant = repository.create(registration.to_record())
    except DuplicateEmailError:
        return 409, {"error": DUPLICATE_EMAIL_ERROR}
    except StorageError:
        logger.exception("DB error while saving registration")
        return 500, {"error": SAVE_FAILED_ERROR}
    except Exception:
        logger.exception("Unexpected error while saving registration")
        return 500, {"error": SAVE_FAILED_ERROR}

    logger.info(
        "Registration notification: %s %s from %s has registered.",
        registrant.first_name,
        registrant.last_name,
        registrant.country,
    )
    return 200, {"success": True, "registration": registrant.to_row()}


def relay_registration_form(
    registrant_name: Optional[str],
    file_name: Optional[str],
    content_type: Optional[str],
    data: Optional[bytes],
    mailer: Mailer,
    registrant_id: Optional[str] = None,
) -> FunctionResult:
    """
    Forward an uploaded registration PDF by email.

    Returns:
        - (200, {"success": True})
        - (400, {"error": ...}) if the file or name is missing, or not a PDF
        - (502, {"error": SEND_FAILED_ERROR}) if delivery fails
    """
    if is_blank(registrant_name) or not file_name or not data:
        return 400, {"error": MISSING_UPLOAD_ERROR}

    if content_type != PDF_MIME_TYPE:
        return 400, {"error": NOT_PDF_ERROR}

    name = registrant_name.strip()
    lines = [f"{name} has uploaded their registration form.", ""]
    if registrant_id:
        lines.append(f"Registration ID: {registrant_id}")
    lines.append(f"Attached file: {file_name}")

    try:
        mailer.send(
            subject=f"Registration form uploaded: {name}",
            body_text="\n".join(lines),
            attachments=[(file_name, PDF_MIME_TYPE, data)],
        )
    except MailDeliveryError:
        logger.exception("Email relay failed for %s", name)
        return 502, {"error": SEND_FAILED_ERROR}

    logger.info("Registration form for %s forwarded by email", name)
    return 200, {"success": True}
