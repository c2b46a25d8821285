# app/routes/admin.py
from __future__ import annotations

from flask import (
    Blueprint,
    current_app,
    jsonify,
    redirect,
    render_template,
    request,
    send_file,
    url_for,
)

from app.errors import AppError, AuthError
from app.extensions import get_credentials, get_storage
from app.services.events import add_event, delete_event, list_events, update_event
from app.storage import read_collection
from app.utils_auth import SessionContext, require_admin

bp = Blueprint("admin", __name__, url_prefix="/admin")


def _payload():
    # El panel manda JSON (fetch) pero también aceptamos form-urlencoded
    data = request.get_json(silent=True)
    if isinstance(data, dict) and data:
        return data
    return request.form


def _json_error(e: AppError):
    return jsonify({"error": e.message}), e.status_code


# ---- LOGIN / LOGOUT ----

@bp.get("/login")
def login_page():
    return render_template("admin_login.html", title="Admin Login", error=None)


@bp.post("/login")
def login():
    data = _payload()
    username = data.get("username") or ""
    password = data.get("password") or ""

    if not get_credentials().verify(username, password):
        current_app.logger.warning("Login admin fallido (usuario=%r)", username)
        err = AuthError("Invalid credentials")
        return (
            render_template("admin_login.html", title="Admin Login", error=err.message),
            err.status_code,
        )

    SessionContext().grant_admin()
    current_app.logger.info("Login admin OK (usuario=%r)", username)
    return redirect(url_for("admin.dashboard"))


@bp.get("/logout")
def logout():
    SessionContext().revoke_admin()
    return redirect(url_for("admin.login_page"))


# ---- DASHBOARD ----

@bp.get("")
@require_admin
def dashboard():
    storage = get_storage()
    users = read_collection(storage.users_json)
    events = list_events(storage)
    return render_template("admin_dashboard.html", title="Admin Dashboard", users=users, events=events)


# ---- DESCARGAS (archivos crudos) ----

@bp.get("/download-csv")
@require_admin
def download_csv():
    return send_file(
        get_storage().users_csv,
        mimetype="text/csv",
        as_attachment=True,
        download_name="users.csv",
    )


@bp.get("/download-json")
@require_admin
def download_json():
    return send_file(
        get_storage().users_json,
        mimetype="application/json",
        as_attachment=True,
        download_name="users.json",
    )


# ---- EVENTOS (API JSON para el panel) ----

@bp.post("/events/add")
@require_admin
def events_add():
    try:
        event = add_event(get_storage(), _payload())
    except AppError as e:
        return _json_error(e)
    current_app.logger.info("Evento creado: %s", event["id"])
    return jsonify({"success": True, "event": event})


@bp.post("/events/update/<event_id>")
@require_admin
def events_update(event_id: str):
    try:
        event = update_event(get_storage(), event_id, _payload())
    except AppError as e:
        return _json_error(e)
    current_app.logger.info("Evento actualizado: %s", event_id)
    return jsonify({"success": True, "event": event})


@bp.post("/events/delete/<event_id>")
@require_admin
def events_delete(event_id: str):
    try:
        delete_event(get_storage(), event_id)
    except AppError as e:
        return _json_error(e)
    current_app.logger.info("Evento eliminado: %s", event_id)
    return jsonify({"success": True})
