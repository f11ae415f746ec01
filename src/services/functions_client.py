"""Clients for the backend functions: hosted over HTTP, or run in-process."""
import logging
from typing import Any, Dict, Optional

import httpx

from src.functions.handlers import register_registrant, relay_registration_form
from src.models.registrant import Registrant
from src.services.mailer import Mailer
from src.utils.exceptions import FunctionInvocationError
from src.utils.validation import PDF_MIME_TYPE

logger = logging.getLogger(__name__)

REGISTER_FUNCTION = "register"
SEND_EMAIL_FUNCTION = "send-registration-email"


def _registrant_from_body(body: Dict[str, Any]) -> Registrant:
    if body.get("error"):
        raise FunctionInvocationError(200, body["error"])
    row = body.get("registration")
    if not isinstance(row, dict):
        raise FunctionInvocationError(200, "Response did not include a registration")
    return Registrant.from_row(row)


class FunctionsClient:
    """Invoke the hosted functions at `<base_url>/<function name>`."""

    def __init__(
        self,
        base_url: str,
        api_key: Optional[str] = None,
        http_client: Optional[httpx.Client] = None,
        timeout: float = 30.0,
    ):
        self.base_url = base_url.rstrip("/")
        headers = {}
        if api_key:
            headers["Authorization"] = f"Bearer {api_key}"
            headers["apikey"] = api_key
        self.headers = headers
        self.http = http_client or httpx.Client(timeout=timeout)

    def _url(self, function_name: str) -> str:
        return f"{self.base_url}/{function_name}"

    def _post(self, function_name: str, **kwargs) -> Dict[str, Any]:
        try:
            response = self.http.post(self._url(function_name), headers=self.headers, **kwargs)
        except httpx.HTTPError as e:
            raise FunctionInvocationError(0, f"{function_name} unreachable: {e}") from e

        try:
            body = response.json()
        except ValueError:
            body = {}

        if not response.is_success:
            message = body.get("error") if isinstance(body, dict) else None
            raise FunctionInvocationError(response.status_code, message or response.reason_phrase)
        return body if isinstance(body, dict) else {}

    def register(self, payload: Dict[str, Any]) -> Registrant:
        """Submit a registration and return the created record."""
        return _registrant_from_body(self._post(REGISTER_FUNCTION, json=payload))

    def send_registration_email(
        self,
        registrant_name: str,
        file_name: str,
        data: bytes,
        registrant_id: Optional[str] = None,
    ) -> None:
        """Relay an uploaded PDF by email; raises FunctionInvocationError on non-2xx."""
        form = {"registrantName": registrant_name}
        if registrant_id:
            form["registrantId"] = registrant_id
        self._post(
            SEND_EMAIL_FUNCTION,
            data=form,
            files={"file": (file_name, data, PDF_MIME_TYPE)},
        )


class InProcessFunctions:
    """Run the function handlers directly against a local store."""

    def __init__(self, repository, mailer: Mailer):
        self.repository = repository
        self.mailer = mailer

    def register(self, payload: Dict[str, Any]) -> Registrant:
        status_code, body = register_registrant(payload, self.repository)
        if status_code >= 300:
            raise FunctionInvocationError(status_code, body.get("error", ""))
        return _registrant_from_body(body)

    def send_registration_email(
        self,
        registrant_name: str,
        file_name: str,
        data: bytes,
        registrant_id: Optional[str] = None,
    ) -> None:
        status_code, body = relay_registration_form(
            registrant_name, file_name, PDF_MIME_TYPE, data, self.mailer, registrant_id
        )
        if status_code >= 300:
            raise FunctionInvocationError(status_code, body.get("error", ""))
