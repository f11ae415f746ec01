"""Tests for Registrant model."""
import pytest
from src.models.registrant import Registrant


def make_registrant(**overrides):
    data = {
        "id": "reg-001",
        "first_name": "Jane",
        "last_name": "Doe",
        "age": 30,
        "country": "Kenya",
        "address": "1 Main St",
        "phone": "555-0100",
        "created_at": "2025-01-01T00:00:00Z",
    }
    data.update(overrides)
    return Registrant(**data)


class TestRegistrantValidation:
    """Tests for registrant data validation."""

    def test_create_valid_registrant(self):
        """Valid registrant should be created with the uploaded flag off."""
        registrant = make_registrant()
        assert registrant.first_name == "Jane"
        assert registrant.form_uploaded is False
        assert registrant.middle_name is None

    def test_empty_first_name_raises_error(self):
        """Empty first name should raise ValueError."""
        with pytest.raises(ValueError, match="First name cannot be empty"):
            make_registrant(first_name="")

    def test_whitespace_only_country_raises_error(self):
        """Whitespace-only country should raise ValueError."""
        with pytest.raises(ValueError, match="Country cannot be empty"):
            make_registrant(country="   ")

    def test_empty_id_raises_error(self):
        """Registrant must carry an identifier."""
        with pytest.raises(ValueError, match="Registrant ID cannot be empty"):
            make_registrant(id="")

    @pytest.mark.parametrize("age", [0, -3, "30", True])
    def test_age_must_be_positive_integer(self, age):
        """Age must be a positive int."""
        with pytest.raises(ValueError, match="Age must be a positive integer"):
            make_registrant(age=age)

    def test_invalid_timestamp_format_raises_error(self):
        """Invalid ISO 8601 timestamp should raise ValueError."""
        with pytest.raises(ValueError, match="Invalid timestamp format"):
            make_registrant(created_at="01/01/2025 00:00")

    def test_timestamp_with_offset_accepted(self):
        """Timestamps with an explicit offset are accepted."""
        registrant = make_registrant(created_at="2025-01-01T08:00:00+08:00")
        assert registrant.created_at == "2025-01-01T08:00:00+08:00"

    def test_timestamp_with_trimmed_fraction_accepted(self):
        """Hosted rows may carry fewer than six fractional digits."""
        registrant = make_registrant(created_at="2025-01-01T12:34:56.12+00:00")
        assert registrant.created_at == "2025-01-01T12:34:56.12+00:00"

    def test_blank_middle_name_becomes_none(self):
        """A blank middle name is stored as None."""
        registrant = make_registrant(middle_name="  ")
        assert registrant.middle_name is None


class TestRegistrantNames:
    """Tests for full_name."""

    def test_full_name_without_middle_name(self):
        assert make_registrant().full_name == "Jane Doe"

    def test_full_name_with_middle_name(self):
        assert make_registrant(middle_name="Ann").full_name == "Jane Ann Doe"


class TestRegistrantRows:
    """Tests for row mapping."""

    def test_from_row_ignores_unknown_columns(self):
        """Columns the model doesn't know are dropped."""
        row = make_registrant().to_row()
        row["updated_at"] = "2025-01-02T00:00:00Z"

        registrant = Registrant.from_row(row)

        assert registrant.id == "reg-001"
        assert not hasattr(registrant, "updated_at")

    def test_from_row_coerces_age_and_flag(self):
        """Numeric strings and missing flags are normalized."""
        row = make_registrant().to_row()
        row["age"] = "42"
        row.pop("form_uploaded")

        registrant = Registrant.from_row(row)

        assert registrant.age == 42
        assert registrant.form_uploaded is False

    def test_to_row_uses_table_columns(self):
        """to_row exposes the snake_case column names."""
        row = make_registrant(form_uploaded=True).to_row()

        assert row["first_name"] == "Jane"
        assert row["form_uploaded"] is True
        assert set(row) >= {"id", "last_name", "age", "country", "address", "phone", "created_at"}
