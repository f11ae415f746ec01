"""Registrant stores: a local JSON blob and the hosted Supabase table."""
import logging
import uuid
from typing import Any, Dict, List, Optional, Protocol

import httpx
from postgrest.exceptions import APIError

from src.models.registrant import Registrant
from src.services import schema
from src.services.storage_service import get_item, lock_file, set_item
from src.utils.date_utils import sort_key_newest_first, utc_now_iso
from src.utils.exceptions import DuplicateEmailError, RegistrantNotFoundError, StorageError

logger = logging.getLogger(__name__)

STORAGE_KEY = "foundation_registrants"


class RegistrantRepository(Protocol):
    """Capabilities the views and functions need from a registrant store."""

    def create(self, data: Dict[str, Any]) -> Registrant:
        ...

    def get(self, registrant_id: str) -> Optional[Registrant]:
        ...

    def list_uploaded(self) -> List[Registrant]:
        ...

    def mark_uploaded(self, registrant_id: str) -> Registrant:
        ...


def _new_record(data: Dict[str, Any]) -> Dict[str, Any]:
    """Add the fields assigned at creation to submitted column values."""
    record = {key: value for key, value in data.items() if key not in ("id", "created_at", "form_uploaded")}
    record["id"] = str(uuid.uuid4())
    record["created_at"] = utc_now_iso()
    record["form_uploaded"] = False
    return record


def _newest_first(registrants: List[Registrant]) -> List[Registrant]:
    return sorted(registrants, key=lambda r: sort_key_newest_first(r.created_at))


class LocalRegistrantRepository:
    """
    Registrants kept as one serialized list under a named key in a JSON file.

    Every mutation is a read-modify-write cycle under a file lock; there is
    no synchronization with any other store.
    """

    def __init__(self, file_path: str, key: str = STORAGE_KEY):
        self.file_path = file_path
        self.key = key

    def _read(self) -> List[Dict[str, Any]]:
        try:
            return get_item(self.file_path, self.key)
        except (OSError, ValueError) as e:
            raise StorageError(f"Cannot read {self.file_path}: {e}") from e

    def _write(self, items: List[Dict[str, Any]]) -> None:
        try:
            set_item(self.file_path, self.key, items)
        except OSError as e:
            raise StorageError(f"Cannot write {self.file_path}: {e}") from e

    def create(self, data: Dict[str, Any]) -> Registrant:
        record = _new_record(data)
        registrant = Registrant.from_row(record)

        try:
            with lock_file(self.file_path):
                items = self._read()
                email = (registrant.email or "").lower()
                if email and any((item.get("email") or "").lower() == email for item in items):
                    raise DuplicateEmailError(f"Email already registered: {registrant.email}")
                items.append(registrant.to_row())
                self._write(items)
        except TimeoutError as e:
            raise StorageError(str(e)) from e

        return registrant

    def get(self, registrant_id: str) -> Optional[Registrant]:
        for item in self._read():
            if str(item.get("id")) == str(registrant_id):
                return Registrant.from_row(item)
        return None

    def list_all(self) -> List[Registrant]:
        return [Registrant.from_row(item) for item in self._read()]

    def list_uploaded(self) -> List[Registrant]:
        return _newest_first([r for r in self.list_all() if r.form_uploaded])

    def mark_uploaded(self, registrant_id: str) -> Registrant:
        try:
            with lock_file(self.file_path):
                items = self._read()
                for item in items:
                    if str(item.get("id")) == str(registrant_id):
                        item["form_uploaded"] = True
                        self._write(items)
                        return Registrant.from_row(item)
        except TimeoutError as e:
            raise StorageError(str(e)) from e

        raise RegistrantNotFoundError(f"Registrant not found: {registrant_id}")


class SupabaseRegistrantRepository:
    """
    Registrants stored in the hosted `registrations` table.

    PostgREST errors and transport failures both surface as StorageError.
    """

    def __init__(self, client: Any, table: str = schema.REGISTRATIONS_TABLE):
        self.client = client
        self.table = table

    def _insert(self, record: Dict[str, Any]) -> List[Dict[str, Any]]:
        return self.client.table(self.table).insert(record).execute().data

    def create(self, data: Dict[str, Any]) -> Registrant:
        record = _new_record(data)

        try:
            try:
                rows = self._insert(record)
            except APIError as e:
                column = schema.missing_column(e)
                if column not in schema.OPTIONAL_COLUMNS or column not in record:
                    raise
                logger.warning("Column %s missing from %s, retrying insert without it", column, self.table)
                rows = self._insert({key: value for key, value in record.items() if key != column})
        except APIError as e:
            if schema.is_unique_violation(e):
                raise DuplicateEmailError(schema.error_message(e)) from e
            raise StorageError(schema.error_message(e)) from e
        except httpx.HTTPError as e:
            raise StorageError(f"{self.table} unreachable: {e}") from e

        if not rows:
            raise StorageError(f"Insert into {self.table} returned no row")
        return Registrant.from_row(rows[0])

    def get(self, registrant_id: str) -> Optional[Registrant]:
        try:
            rows = (
                self.client.table(self.table)
                .select("*")
                .eq("id", registrant_id)
                .limit(1)
                .execute()
                .data
            )
        except (APIError, httpx.HTTPError) as e:
            raise StorageError(schema.error_message(e)) from e
        return Registrant.from_row(rows[0]) if rows else None

    def list_uploaded(self) -> List[Registrant]:
        try:
            rows = (
                self.client.table(self.table)
                .select("*")
                .eq("form_uploaded", True)
                .order("created_at", desc=True)
                .execute()
                .data
            )
        except (APIError, httpx.HTTPError) as e:
            raise StorageError(schema.error_message(e)) from e
        return [Registrant.from_row(row) for row in rows or []]

    def mark_uploaded(self, registrant_id: str) -> Registrant:
        try:
            rows = (
                self.client.table(self.table)
                .update({"form_uploaded": True})
                .eq("id", registrant_id)
                .execute()
                .data
            )
        except (APIError, httpx.HTTPError) as e:
            raise StorageError(schema.error_message(e)) from e

        if not rows:
            raise RegistrantNotFoundError(f"Registrant not found: {registrant_id}")
        return Registrant.from_row(rows[0])


def get_repository(settings) -> RegistrantRepository:
    """Build the registrant store selected by `settings.data_source`."""
    if settings.uses_hosted_backend:
        if not settings.supabase_url or not settings.supabase_service_role_key:
            raise StorageError("SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set for the supabase data source")
        from supabase import create_client

        client = create_client(settings.supabase_url, settings.supabase_service_role_key)
        return SupabaseRegistrantRepository(client)

    return LocalRegistrantRepository(settings.local_store_path)
