"""
Almacenamiento en archivos planos.
Expone:
  - StorageConfig: rutas de users.json / users.csv / events.json
  - read_collection / write_collection: arreglo JSON completo (lee todo, escribe todo)
  - append_row: agrega una fila al CSV de leads
  - ensure_data_files: crea carpeta y archivos semilla si no existen

No hay locks: dos escrituras simultáneas se pisan y gana la última.
"""
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List

log = logging.getLogger(__name__)

CSV_COLUMNS = ("fullName", "email", "mobile", "college", "city", "state", "createdAt")

DEFAULT_EVENT = {
    "title": "Emergency Management In Ayurveda",
    "description": (
        "Join us for an exclusive offline seminar in Bhopal designed for Ayurveda "
        "students and practitioners. Learn how to effectively bridge classical "
        "Ayurvedic wisdom with modern medical tools and diagnostic techniques."
    ),
    "date": "9th November 2025",
    "venue": "Vigyan Bhawan, MPCST",
    "speaker": "Dr. Anuj Jain",
}


@dataclass(frozen=True)
class StorageConfig:
    data_dir: str
    users_json: str
    users_csv: str
    events_json: str

    @classmethod
    def from_dir(cls, data_dir: str) -> "StorageConfig":
        data_dir = os.path.abspath(data_dir)
        return cls(
            data_dir=data_dir,
            users_json=os.path.join(data_dir, "users.json"),
            users_csv=os.path.join(data_dir, "users.csv"),
            events_json=os.path.join(data_dir, "events.json"),
        )


def utc_now_iso() -> str:
    """ISO-8601 en UTC con milisegundos y sufijo Z."""
    now = datetime.now(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


def new_record_id() -> str:
    # epoch en milisegundos, como string
    return str(int(datetime.now(timezone.utc).timestamp() * 1000))


def read_collection(path: str) -> List[Dict[str, Any]]:
    """
    Lee el archivo completo como un arreglo JSON.
    Si no existe, está vacío o está corrupto devuelve [] (nunca lanza).
    El caso corrupto se deja en el log para no confundirlo con una colección vacía.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = f.read()
    except FileNotFoundError:
        return []
    except OSError as e:
        log.warning("No se pudo leer %s: %s", path, e)
        return []

    if not raw.strip():
        return []

    try:
        data = json.loads(raw)
    except ValueError as e:
        log.warning("Colección corrupta en %s, se trata como vacía: %s", path, e)
        return []

    if not isinstance(data, list):
        log.warning("Colección corrupta en %s: se esperaba un arreglo JSON", path)
        return []

    records = [r for r in data if isinstance(r, dict)]
    if len(records) != len(data):
        log.warning("Se ignoran %d elementos no-objeto en %s", len(data) - len(records), path)
    return records


def write_collection(path: str, records: List[Dict[str, Any]]) -> None:
    # Reescribe el archivo entero (no hay diff ni patch)
    with open(path, "w", encoding="utf-8") as f:
        f.write(json.dumps(records, indent=2, ensure_ascii=False))


def _csv_quote(value: Any) -> str:
    text = "" if value is None else str(value)
    return '"' + text.replace('"', '""') + '"'


def format_csv_row(record: Dict[str, Any]) -> str:
    return ",".join(_csv_quote(record.get(col)) for col in CSV_COLUMNS)


def append_row(path: str, record: Dict[str, Any]) -> None:
    with open(path, "a", encoding="utf-8", newline="") as f:
        f.write(format_csv_row(record) + "\n")


def ensure_data_files(storage: StorageConfig) -> None:
    os.makedirs(storage.data_dir, exist_ok=True)

    if not os.path.exists(storage.users_json):
        write_collection(storage.users_json, [])

    if not os.path.exists(storage.users_csv):
        with open(storage.users_csv, "w", encoding="utf-8", newline="") as f:
            f.write(",".join(CSV_COLUMNS) + "\n")

    if not os.path.exists(storage.events_json):
        seed = {"id": new_record_id(), **DEFAULT_EVENT, "createdAt": utc_now_iso()}
        write_collection(storage.events_json, [seed])
        log.info("events.json creado con el evento por defecto")
