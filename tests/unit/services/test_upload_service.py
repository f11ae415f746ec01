"""Unit tests for upload_service."""
import pytest
from unittest.mock import MagicMock

from src.services.registrant_repository import LocalRegistrantRepository
from src.services.upload_service import (
    FAILURE_MESSAGE,
    NO_FILE_MESSAGE,
    NOT_FOUND_MESSAGE,
    SUCCESS_MESSAGE,
    upload_registration_form,
)
from src.utils.exceptions import FunctionInvocationError
from src.utils.validation import NOT_PDF_MESSAGE

PDF_BYTES = b"%PDF-1.4\n%fake\n"


@pytest.fixture
def repository(tmp_path):
    return LocalRegistrantRepository(str(tmp_path / "registrants.json"))


@pytest.fixture
def registrant(repository):
    return repository.create({
        "first_name": "Jane",
        "middle_name": "Ann",
        "last_name": "Doe",
        "email": "jane@example.com",
        "age": 30,
        "country": "Kenya",
        "address": "1 Main St",
        "phone": "555-0100",
    })


class TestUploadRegistrationForm:
    """Tests for upload_registration_form."""

    def test_local_upload_sets_flag(self, repository, registrant):
        success, message = upload_registration_form(
            registrant.id, "form.pdf", "application/pdf", PDF_BYTES, repository
        )

        assert success is True
        assert message == SUCCESS_MESSAGE
        assert repository.get(registrant.id).form_uploaded is True

    def test_relay_called_before_flag(self, repository, registrant):
        functions = MagicMock()

        success, _ = upload_registration_form(
            registrant.id, "form.pdf", "application/pdf", PDF_BYTES, repository, functions
        )

        assert success is True
        functions.send_registration_email.assert_called_once_with(
            "Jane Ann Doe", "form.pdf", PDF_BYTES, registrant_id=registrant.id
        )
        assert repository.get(registrant.id).form_uploaded is True

    def test_non_pdf_rejected_without_state_change(self, repository, registrant):
        functions = MagicMock()

        success, message = upload_registration_form(
            registrant.id, "photo.png", "image/png", b"\x89PNG", repository, functions
        )

        assert success is False
        assert message == NOT_PDF_MESSAGE
        functions.send_registration_email.assert_not_called()
        assert repository.get(registrant.id).form_uploaded is False

    def test_relay_failure_leaves_flag_unset(self, repository, registrant):
        functions = MagicMock()
        functions.send_registration_email.side_effect = FunctionInvocationError(502, "Failed to send registration email")

        success, message = upload_registration_form(
            registrant.id, "form.pdf", "application/pdf", PDF_BYTES, repository, functions
        )

        assert success is False
        assert message == FAILURE_MESSAGE
        assert repository.get(registrant.id).form_uploaded is False

    def test_no_file_selected(self, repository, registrant):
        success, message = upload_registration_form(registrant.id, None, None, None, repository)

        assert success is False
        assert message == NO_FILE_MESSAGE

    def test_unknown_registrant(self, repository):
        success, message = upload_registration_form(
            "missing", "form.pdf", "application/pdf", PDF_BYTES, repository
        )

        assert success is False
        assert message == NOT_FOUND_MESSAGE

    def test_second_upload_is_idempotent(self, repository, registrant):
        for _ in range(2):
            success, _ = upload_registration_form(
                registrant.id, "form.pdf", "application/pdf", PDF_BYTES, repository
            )
            assert success is True

        assert repository.get(registrant.id).form_uploaded is True
        assert len(repository.list_all()) == 1
