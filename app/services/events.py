# app/services/events.py
from __future__ import annotations

from typing import Any, Dict, List, Mapping

from app.errors import NotFoundError, ValidationError
from app.storage import (
    StorageConfig,
    new_record_id,
    read_collection,
    utc_now_iso,
    write_collection,
)


def list_events(storage: StorageConfig) -> List[Dict[str, Any]]:
    # Orden de almacenamiento (= orden de creación)
    return read_collection(storage.events_json)


def add_event(storage: StorageConfig, fields: Mapping[str, Any]) -> Dict[str, Any]:
    title = fields.get("title")
    date = fields.get("date")
    venue = fields.get("venue")
    if not title or not date or not venue:
        raise ValidationError("Title, date, and venue are required")

    event = {
        "id": new_record_id(),
        "title": title,
        "description": fields.get("description") or "",
        "date": date,
        "venue": venue,
        "speaker": fields.get("speaker") or "",
        "createdAt": utc_now_iso(),
    }
    events = read_collection(storage.events_json)
    events.append(event)
    write_collection(storage.events_json, events)
    return event


def update_event(storage: StorageConfig, event_id: str, fields: Mapping[str, Any]) -> Dict[str, Any]:
    """
    title/date/venue solo cambian si llega un valor no vacío.
    description/speaker cambian si la clave viene en el body (aunque sea "").
    """
    events = read_collection(storage.events_json)
    for index, current in enumerate(events):
        if current.get("id") == event_id:
            break
    else:
        raise NotFoundError("Event not found")

    updated = dict(current)
    for key in ("title", "date", "venue"):
        if fields.get(key):
            updated[key] = fields[key]
    for key in ("description", "speaker"):
        if key in fields and fields[key] is not None:
            updated[key] = fields[key]
    updated["updatedAt"] = utc_now_iso()

    events[index] = updated
    write_collection(storage.events_json, events)
    return updated


def delete_event(storage: StorageConfig, event_id: str) -> None:
    events = read_collection(storage.events_json)
    remaining = [e for e in events if e.get("id") != event_id]
    if len(remaining) == len(events):
        raise NotFoundError("Event not found")
    write_collection(storage.events_json, remaining)
