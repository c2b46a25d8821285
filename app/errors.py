# app/errors.py
from __future__ import annotations


class AppError(Exception):
    """Error base de la app: lleva el status HTTP con el que se responde."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    status_code = 400


class AuthError(AppError):
    status_code = 401


class NotFoundError(AppError):
    status_code = 404
