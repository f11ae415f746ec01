"""Process-wide wiring of the configured data source."""
from functools import lru_cache

from src.config import get_settings
from src.services.functions_client import FunctionsClient, InProcessFunctions
from src.services.mailer import Mailer
from src.services.registrant_repository import RegistrantRepository, get_repository


@lru_cache(maxsize=1)
def get_registrant_repository() -> RegistrantRepository:
    return get_repository(get_settings())


@lru_cache(maxsize=1)
def get_functions():
    """
    Return the functions client for the configured data source.

    The hosted variant calls the deployed functions over HTTP; the local
    variant runs the same handlers in-process against the JSON store.
    """
    settings = get_settings()
    base_url = settings.resolved_functions_url
    if settings.uses_hosted_backend and base_url:
        return FunctionsClient(base_url, api_key=settings.supabase_anon_key)
    return InProcessFunctions(get_registrant_repository(), Mailer.from_settings(settings))


def uses_email_relay() -> bool:
    """True when uploads are relayed by email before the flag is set."""
    return get_settings().uses_hosted_backend
