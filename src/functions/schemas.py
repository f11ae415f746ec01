"""Request payloads accepted by the backend functions."""
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.utils.validation import MAX_AGE, normalize_text


class RegistrationInput(BaseModel):
    """Body of `POST /register`, camelCase on the wire."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    first_name: str = Field(alias="firstName", min_length=1)
    middle_name: Optional[str] = Field(default=None, alias="middleName")
    last_name: str = Field(alias="lastName", min_length=1)
    email: str = Field(min_length=1)
    age: int = Field(gt=0, le=MAX_AGE)
    country: str = Field(min_length=1)
    address: str = Field(min_length=1)
    phone: str = Field(min_length=1)
    gender: Optional[str] = None

    @field_validator("middle_name", "gender", mode="before")
    @classmethod
    def blank_to_none(cls, value: Any) -> Optional[str]:
        return normalize_text(value)

    @field_validator("age", mode="before")
    @classmethod
    def strip_age(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    def to_record(self) -> Dict[str, Any]:
        """Column values for a new `registrations` row."""
        record = self.model_dump(by_alias=False)
        if record["gender"] is None:
            record.pop("gender")
        return record
