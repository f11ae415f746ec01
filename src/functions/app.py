"""HTTP surface of the backend functions `register` and `send-registration-email`."""
import json
import logging
from typing import Optional

from fastapi import FastAPI, File, Form, Request, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.config import Settings, get_settings
from src.functions.handlers import register_registrant, relay_registration_form
from src.services.mailer import Mailer
from src.services.registrant_repository import get_repository
from src.utils.exceptions import StorageError
from src.utils.logging_utils import configure_logging

logger = logging.getLogger(__name__)

CORS_ALLOW_HEADERS = [
    "authorization",
    "x-client-info",
    "apikey",
    "content-type",
]


def create_app(repository=None, mailer: Optional[Mailer] = None, settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="HopeRise Registration Functions", version="1.0.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["POST", "OPTIONS"],
        allow_headers=CORS_ALLOW_HEADERS,
    )

    app.state.repository = repository
    app.state.mailer = mailer or Mailer.from_settings(settings)

    def _repository():
        if app.state.repository is None:
            app.state.repository = get_repository(settings)
        return app.state.repository

    @app.post("/register")
    async def register(request: Request):
        try:
            payload = await request.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            payload = None

        try:
            repository = _repository()
        except StorageError:
            logger.exception("Registrant store unavailable")
            return JSONResponse({"error": "Failed to save registration"}, status_code=500)

        status_code, body = register_registrant(payload, repository)
        return JSONResponse(body, status_code=status_code)

    @app.post("/send-registration-email")
    async def send_registration_email(
        file: Optional[UploadFile] = File(None),
        registrantName: Optional[str] = Form(None),
        registrantId: Optional[str] = Form(None),
    ):
        data = await file.read() if file is not None else None
        status_code, body = relay_registration_form(
            registrant_name=registrantName,
            file_name=file.filename if file is not None else None,
            content_type=file.content_type if file is not None else None,
            data=data,
            mailer=app.state.mailer,
            registrant_id=registrantId,
        )
        return JSONResponse(body, status_code=status_code)

    return app
