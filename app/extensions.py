# app/extensions.py
from __future__ import annotations

from flask import current_app

from app.storage import StorageConfig
from app.utils_auth import CredentialVerifier

# Claves en app.extensions (las registra create_app)
STORAGE_KEY = "storage"
CREDENTIALS_KEY = "credentials"


def get_storage() -> StorageConfig:
    return current_app.extensions[STORAGE_KEY]


def get_credentials() -> CredentialVerifier:
    return current_app.extensions[CREDENTIALS_KEY]
