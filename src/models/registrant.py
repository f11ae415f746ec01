"""Registrant data model for foundation registration."""
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

from src.utils.date_utils import parse_timestamp


@dataclass
class Registrant:
    """One person's registration record plus its uploaded status."""

    id: str
    first_name: str
    last_name: str
    age: int
    country: str
    address: str
    phone: str
    created_at: str  # ISO 8601 format
    middle_name: Optional[str] = None
    email: Optional[str] = None
    form_uploaded: bool = False
    gender: Optional[str] = None
    amount_paid: Optional[float] = None

    def __post_init__(self):
        """Validate registrant data."""
        if not self.id or not str(self.id).strip():
            raise ValueError("Registrant ID cannot be empty")

        for label, value in (
            ("First name", self.first_name),
            ("Last name", self.last_name),
            ("Country", self.country),
            ("Address", self.address),
            ("Phone", self.phone),
        ):
            if not value or not str(value).strip():
                raise ValueError(f"{label} cannot be empty")

        if isinstance(self.age, bool) or not isinstance(self.age, int) or self.age <= 0:
            raise ValueError(f"Age must be a positive integer, got: {self.age!r}")

        try:
            parse_timestamp(self.created_at)
        except ValueError as e:
            raise ValueError(f"Invalid timestamp format: {self.created_at}") from e

        if self.middle_name is not None and not self.middle_name.strip():
            self.middle_name = None

    @property
    def full_name(self) -> str:
        """First, optional middle and last name joined by spaces."""
        parts = [self.first_name, self.middle_name, self.last_name]
        return " ".join(part for part in parts if part)

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "Registrant":
        """Build a registrant from a `registrations` row, ignoring unknown columns."""
        known = {f.name for f in fields(cls)}
        data = {key: value for key, value in row.items() if key in known}
        if "age" in data and data["age"] is not None:
            data["age"] = int(data["age"])
        data["id"] = str(data.get("id", ""))
        data["form_uploaded"] = bool(data.get("form_uploaded", False))
        return cls(**data)

    def to_row(self) -> Dict[str, Any]:
        """Serialize to the snake_case column set of the `registrations` table."""
        return {f.name: getattr(self, f.name) for f in fields(self)}
