"""Unit tests for the functions clients."""
import json

import httpx
import pytest
from unittest.mock import MagicMock

from src.services.functions_client import FunctionsClient, InProcessFunctions
from src.services.registrant_repository import LocalRegistrantRepository
from src.utils.exceptions import FunctionInvocationError, MailDeliveryError

REGISTRATION_ROW = {
    "id": "7b0f7e5e-0000-4000-8000-000000000001",
    "first_name": "Jane",
    "middle_name": None,
    "last_name": "Doe",
    "email": "jane@example.com",
    "age": 30,
    "country": "Kenya",
    "address": "1 Main St",
    "phone": "555-0100",
    "form_uploaded": False,
    "created_at": "2025-01-01T00:00:00+00:00",
}

PAYLOAD = {
    "firstName": "Jane",
    "middleName": None,
    "lastName": "Doe",
    "email": "jane@example.com",
    "age": 30,
    "country": "Kenya",
    "address": "1 Main St",
    "phone": "555-0100",
}


def client_for(handler, api_key="anon-key"):
    http = httpx.Client(transport=httpx.MockTransport(handler))
    return FunctionsClient("https://example.supabase.co/functions/v1/", api_key=api_key, http_client=http)


class TestFunctionsClientRegister:
    """Tests for FunctionsClient.register."""

    def test_posts_json_to_register(self):
        seen = {}

        def handler(request):
            seen["url"] = str(request.url)
            seen["auth"] = request.headers.get("authorization")
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={"success": True, "registration": REGISTRATION_ROW})

        registrant = client_for(handler).register(PAYLOAD)

        assert seen["url"] == "https://example.supabase.co/functions/v1/register"
        assert seen["auth"] == "Bearer anon-key"
        assert seen["body"]["firstName"] == "Jane"
        assert registrant.id == REGISTRATION_ROW["id"]
        assert registrant.form_uploaded is False

    def test_error_status_raises(self):
        def handler(request):
            return httpx.Response(409, json={"error": "This email has already been registered"})

        with pytest.raises(FunctionInvocationError) as exc_info:
            client_for(handler).register(PAYLOAD)

        assert exc_info.value.status_code == 409
        assert "already been registered" in str(exc_info.value)

    def test_network_error_raises(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(FunctionInvocationError) as exc_info:
            client_for(handler).register(PAYLOAD)

        assert exc_info.value.status_code == 0

    def test_missing_registration_in_body(self):
        def handler(request):
            return httpx.Response(200, json={"success": True})

        with pytest.raises(FunctionInvocationError):
            client_for(handler).register(PAYLOAD)

    def test_no_auth_header_without_key(self):
        seen = {}

        def handler(request):
            seen["auth"] = request.headers.get("authorization")
            return httpx.Response(200, json={"success": True, "registration": REGISTRATION_ROW})

        client_for(handler, api_key=None).register(PAYLOAD)

        assert seen["auth"] is None


class TestFunctionsClientSendEmail:
    """Tests for FunctionsClient.send_registration_email."""

    def test_posts_multipart(self):
        seen = {}

        def handler(request):
            seen["url"] = str(request.url)
            seen["content_type"] = request.headers["content-type"]
            seen["body"] = request.read()
            return httpx.Response(200, json={"success": True})

        client_for(handler).send_registration_email("Jane Doe", "form.pdf", b"%PDF-1.4", registrant_id="r-1")

        assert seen["url"].endswith("/send-registration-email")
        assert seen["content_type"].startswith("multipart/form-data")
        assert b'name="registrantName"' in seen["body"]
        assert b"Jane Doe" in seen["body"]
        assert b'filename="form.pdf"' in seen["body"]
        assert b"%PDF-1.4" in seen["body"]

    def test_relay_failure_raises(self):
        def handler(request):
            return httpx.Response(502, json={"error": "Failed to send registration email"})

        with pytest.raises(FunctionInvocationError) as exc_info:
            client_for(handler).send_registration_email("Jane Doe", "form.pdf", b"%PDF-1.4")

        assert exc_info.value.status_code == 502


class TestInProcessFunctions:
    """Tests for InProcessFunctions."""

    @pytest.fixture
    def repository(self, tmp_path):
        return LocalRegistrantRepository(str(tmp_path / "registrants.json"))

    def test_register_creates_record(self, repository):
        functions = InProcessFunctions(repository, MagicMock())

        registrant = functions.register(PAYLOAD)

        assert repository.get(registrant.id).email == "jane@example.com"

    def test_register_duplicate_raises_conflict(self, repository):
        functions = InProcessFunctions(repository, MagicMock())
        functions.register(PAYLOAD)

        with pytest.raises(FunctionInvocationError) as exc_info:
            functions.register(PAYLOAD)

        assert exc_info.value.status_code == 409

    def test_send_email_uses_mailer(self, repository):
        mailer = MagicMock()
        functions = InProcessFunctions(repository, mailer)

        functions.send_registration_email("Jane Doe", "form.pdf", b"%PDF-1.4")

        mailer.send.assert_called_once()

    def test_send_email_failure_raises(self, repository):
        mailer = MagicMock()
        mailer.send.side_effect = MailDeliveryError("smtp down")
        functions = InProcessFunctions(repository, mailer)

        with pytest.raises(FunctionInvocationError) as exc_info:
            functions.send_registration_email("Jane Doe", "form.pdf", b"%PDF-1.4")

        assert exc_info.value.status_code == 502
