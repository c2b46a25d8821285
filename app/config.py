# app/config.py
import os
from pathlib import Path

from dotenv import load_dotenv

# .env local (no pisa variables que ya vengan del entorno)
load_dotenv()

BASE_DIR = Path(__file__).resolve().parent.parent


class Config:
    # ==========================
    #  SECRET / SESSION
    # ==========================
    SECRET_KEY = os.getenv("SESSION_SECRET") or os.getenv("SECRET_KEY", "change-me")
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = "Lax"

    # ==========================
    #  ADMIN (credenciales estáticas)
    # ==========================
    # Ojo: si no se configuran quedan los valores por defecto
    ADMIN_USER = os.getenv("ADMIN_USER", "admin")
    ADMIN_PASS = os.getenv("ADMIN_PASS", "password")

    # ==========================
    #  DATOS (JSON / CSV)
    # ==========================
    DATA_DIR = os.getenv("DATA_DIR") or str(BASE_DIR / "data")

    # ==========================
    #  SERVIDOR / LOGS
    # ==========================
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "3000"))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
