"""Upload service: relay the signed registration PDF and mark it uploaded."""
import logging
from typing import Optional, Tuple

from src.utils.exceptions import (
    FunctionInvocationError,
    RegistrantNotFoundError,
    StorageError,
)
from src.utils.validation import validate_pdf_upload

logger = logging.getLogger(__name__)

NO_FILE_MESSAGE = "Please select a PDF file to upload."
NOT_FOUND_MESSAGE = "We couldn't find that registration."
FAILURE_MESSAGE = "Upload failed. Please try again."
SUCCESS_MESSAGE = "Form uploaded successfully!"


def upload_registration_form(
    registrant_id: Optional[str],
    file_name: Optional[str],
    mime_type: Optional[str],
    data: Optional[bytes],
    repository,
    functions=None,
) -> Tuple[bool, str]:
    """
    Upload a registrant's PDF and set their uploaded flag.

    Args:
        registrant_id: Registrant to mark
        file_name: Name of the uploaded file
        mime_type: Declared MIME type of the upload
        data: File content
        repository: RegistrantRepository holding the record
        functions: Functions client used to relay the file by email; when
            None the flag is set without relaying (local variant)

    Returns:
        Tuple of (success: bool, message: str)

    Behavior:
        - Non-PDF uploads are rejected with no state change
        - The flag is only set after the email relay succeeds
        - A relay or flag failure is reported as a failed upload
    """
    if not registrant_id or not file_name or not data:
        return False, NO_FILE_MESSAGE

    is_valid, error_msg = validate_pdf_upload(file_name, mime_type)
    if not is_valid:
        return False, error_msg

    try:
        registrant = repository.get(registrant_id)
    except StorageError as e:
        logger.error(f"Failed to load registrant {registrant_id}: {e}")
        return False, FAILURE_MESSAGE

    if registrant is None:
        return False, NOT_FOUND_MESSAGE

    if functions is not None:
        try:
            functions.send_registration_email(
                registrant.full_name,
                file_name,
                data,
                registrant_id=registrant.id,
            )
        except FunctionInvocationError as e:
            logger.error(f"Email relay failed for {registrant_id}: {e}")
            return False, FAILURE_MESSAGE

    try:
        repository.mark_uploaded(registrant_id)
    except (RegistrantNotFoundError, StorageError) as e:
        logger.error(f"Failed to mark {registrant_id} as uploaded: {e}")
        return False, FAILURE_MESSAGE

    return True, SUCCESS_MESSAGE
