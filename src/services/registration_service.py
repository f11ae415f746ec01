"""Registration service for submitting the foundation registration form."""
import logging
from typing import Any, Dict, Optional, Tuple

from src.models.registrant import Registrant
from src.utils.exceptions import FunctionInvocationError
from src.utils.validation import normalize_text, parse_age, validate_registration_form

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Registration successful! A notification has been sent."
FAILURE_MESSAGE = "Registration failed. Please try again."


def build_registration_payload(form: Dict[str, Any]) -> Dict[str, Any]:
    """
    Turn raw form values into the `register` request body.

    Strings are trimmed, optional blanks become None and age is parsed to int.
    """
    payload = {
        "firstName": str(form.get("firstName", "")).strip(),
        "middleName": normalize_text(form.get("middleName")),
        "lastName": str(form.get("lastName", "")).strip(),
        "email": str(form.get("email", "")).strip(),
        "age": parse_age(form.get("age")),
        "country": str(form.get("country", "")).strip(),
        "address": str(form.get("address", "")).strip(),
        "phone": str(form.get("phone", "")).strip(),
    }
    gender = normalize_text(form.get("gender"))
    if gender:
        payload["gender"] = gender
    return payload


def submit_registration(form: Dict[str, Any], functions) -> Tuple[bool, str, Optional[Registrant]]:
    """
    Submit a registration form.

    Args:
        form: Field values keyed by wire name (firstName, lastName, ...)
        functions: FunctionsClient or InProcessFunctions

    Returns:
        Tuple of (success: bool, message: str, registrant)
        - (True, SUCCESS_MESSAGE, Registrant) on success
        - (False, validation message, None) if a required field is empty;
          nothing is sent in that case
        - (False, FAILURE_MESSAGE, None) on any backend error
    """
    is_valid, error_msg = validate_registration_form(form)
    if not is_valid:
        return False, error_msg, None

    payload = build_registration_payload(form)

    try:
        registrant = functions.register(payload)
    except FunctionInvocationError as e:
        logger.error(f"Registration rejected by backend: {e}")
        return False, FAILURE_MESSAGE, None
    except Exception as e:
        logger.exception(f"Unexpected error during registration: {e}")
        return False, FAILURE_MESSAGE, None

    return True, SUCCESS_MESSAGE, registrant
