"""Column layout of the hosted `registrations` table."""
import re
from typing import Any, Optional

# Bump together with a new file under migrations/
SCHEMA_VERSION = 2

REGISTRATIONS_TABLE = "registrations"

REQUIRED_COLUMNS = (
    "id",
    "first_name",
    "last_name",
    "age",
    "country",
    "address",
    "phone",
    "form_uploaded",
    "created_at",
)

# Columns added after v1; older deployments may not have them
OPTIONAL_COLUMNS = ("middle_name", "email", "gender", "amount_paid")

UNIQUE_VIOLATION = "23505"
UNDEFINED_COLUMN = "42703"
POSTGREST_MISSING_COLUMN = "PGRST204"

_COLUMN_PATTERNS = (
    re.compile(r"Could not find the '(?P<column>\w+)' column"),
    re.compile(r'column "?(?P<column>\w+)"? of relation "?\w+"? does not exist'),
    re.compile(r'column "?(?:\w+\.)?(?P<column>\w+)"? does not exist'),
)


def error_code(error: Any) -> Optional[str]:
    """Return the PostgREST/PostgreSQL error code carried by `error`."""
    code = getattr(error, "code", None)
    return str(code) if code else None


def error_message(error: Any) -> str:
    """Return the human-readable message carried by `error`."""
    message = getattr(error, "message", None)
    return str(message) if message else str(error)


def is_unique_violation(error: Any) -> bool:
    """True when `error` reports a duplicate key."""
    if error_code(error) == UNIQUE_VIOLATION:
        return True
    return "duplicate key" in error_message(error).lower()


def missing_column(error: Any) -> Optional[str]:
    """
    Name of the column a schema-mismatch error complains about.

    Returns:
        The column name, or None if `error` is not a missing-column error
    """
    if error_code(error) not in (POSTGREST_MISSING_COLUMN, UNDEFINED_COLUMN, None):
        return None

    message = error_message(error)
    for pattern in _COLUMN_PATTERNS:
        match = pattern.search(message)
        if match:
            return match.group("column")
    return None
