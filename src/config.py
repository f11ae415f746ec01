"""Application settings loaded from the environment and `.env`."""
from functools import lru_cache
from typing import Literal, Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Central configuration for the Streamlit site and the backend functions."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Branding
    foundation_name: str = "HopeRise Foundation"

    # Observability
    log_level: str = "INFO"

    # Data source
    data_source: Literal["local", "supabase"] = "local"
    local_store_path: str = "data/registrants.json"
    show_showcase_registrants: bool = False

    # Supabase
    supabase_url: Optional[str] = None
    supabase_service_role_key: Optional[str] = None
    supabase_anon_key: Optional[str] = None
    functions_url: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("FUNCTIONS_URL", "SUPABASE_FUNCTIONS_URL"),
    )

    # Email relay
    email_enabled: bool = False
    email_from_name: str = "HopeRise Foundation"
    email_from_addr: str = "registrations@hoperise.org"
    email_to_addr: str = "forms@hoperise.org"
    smtp_host: str = "localhost"
    smtp_port: int = 587
    smtp_user: Optional[str] = None
    smtp_pass: Optional[str] = None
    smtp_ssl: bool = False
    smtp_starttls: bool = True

    @property
    def resolved_functions_url(self) -> Optional[str]:
        """Return the base URL of the hosted functions, if any."""
        if self.functions_url:
            return self.functions_url.rstrip("/")
        if self.supabase_url:
            return f"{self.supabase_url.rstrip('/')}/functions/v1"
        return None

    @property
    def uses_hosted_backend(self) -> bool:
        """Return True when registrations live in the Supabase table."""
        return self.data_source == "supabase"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
