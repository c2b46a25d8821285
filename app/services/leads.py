# app/services/leads.py
from __future__ import annotations

from typing import Any, Dict, Mapping

from app.errors import ValidationError
from app.storage import (
    StorageConfig,
    append_row,
    read_collection,
    utc_now_iso,
    write_collection,
)

REQUIRED_FIELDS = ("fullName", "email", "mobile")
OPTIONAL_FIELDS = ("college", "city", "state")


def _clean(value: Any) -> str:
    return (value or "").strip() if isinstance(value, str) else ""


def submit_lead(storage: StorageConfig, fields: Mapping[str, Any]) -> Dict[str, str]:
    """
    Valida y guarda un lead en users.json y users.csv.
    Lanza ValidationError si falta fullName, email o mobile (no se guarda nada).
    """
    if any(not _clean(fields.get(k)) for k in REQUIRED_FIELDS):
        raise ValidationError("Please fill required fields.")

    record = {k: _clean(fields.get(k)) for k in REQUIRED_FIELDS + OPTIONAL_FIELDS}
    record["createdAt"] = utc_now_iso()

    records = read_collection(storage.users_json)
    records.append(record)
    write_collection(storage.users_json, records)
    # si algo falla aquí el JSON ya quedó escrito y el CSV no
    append_row(storage.users_csv, record)
    return record
