# app/utils_auth.py
from __future__ import annotations

from functools import wraps
from typing import Protocol

from flask import redirect, session, url_for

EBOOK_FLAG = "canViewEbook"
ADMIN_FLAG = "isAdmin"


class SessionContext:
    """
    Banderas de la sesión del navegador (cookie firmada de Flask):
      - can_view_ebook: el visitante ya dejó sus datos
      - is_admin: login de admin correcto
    Son independientes entre sí.
    """

    def __init__(self, store=None):
        self._store = session if store is None else store

    @property
    def can_view_ebook(self) -> bool:
        return bool(self._store.get(EBOOK_FLAG))

    def grant_ebook(self) -> None:
        self._store[EBOOK_FLAG] = True

    @property
    def is_admin(self) -> bool:
        return bool(self._store.get(ADMIN_FLAG))

    def grant_admin(self) -> None:
        self._store[ADMIN_FLAG] = True

    def revoke_admin(self) -> None:
        self._store.pop(ADMIN_FLAG, None)


class CredentialVerifier(Protocol):
    def verify(self, username: str, password: str) -> bool: ...


class StaticCredentialVerifier:
    """Compara contra usuario/clave configurados (texto plano)."""

    def __init__(self, username: str, password: str):
        self.username = username
        self.password = password

    def verify(self, username: str, password: str) -> bool:
        return username == self.username and password == self.password


def require_admin(view):
    @wraps(view)
    def wrapped(*args, **kwargs):
        if not SessionContext().is_admin:
            return redirect(url_for("admin.login_page"))
        return view(*args, **kwargs)

    return wrapped


def require_ebook_access(view):
    @wraps(view)
    def wrapped(*args, **kwargs):
        if not SessionContext().can_view_ebook:
            return redirect(url_for("pages.ebook_access"))
        return view(*args, **kwargs)

    return wrapped
