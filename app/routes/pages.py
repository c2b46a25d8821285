# app/routes/pages.py
from __future__ import annotations

from flask import Blueprint, current_app, redirect, render_template, request, url_for

from app.errors import ValidationError
from app.extensions import get_storage
from app.services.events import list_events
from app.services.leads import submit_lead
from app.utils_auth import SessionContext, require_ebook_access

bp = Blueprint("pages", __name__)

SITE_TITLE = "Shree Vishwa Asha Ayurvedic Panchakarma Centre"


# ------------------------------
# HOME + EVENTOS
# ------------------------------

@bp.get("/")
def index():
    events = list_events(get_storage())
    return render_template("index.html", title=SITE_TITLE, events=events)


# ------------------------------
# EBOOK (formulario + visor protegido)
# ------------------------------

@bp.get("/ebook-access")
def ebook_access():
    return render_template("ebook_access.html", title="Access eBook", error=None, form={})


@bp.post("/ebook-access")
def ebook_access_submit():
    form = request.form
    try:
        record = submit_lead(get_storage(), form)
    except ValidationError as e:
        return (
            render_template("ebook_access.html", title="Access eBook", error=e.message, form=form),
            e.status_code,
        )

    current_app.logger.info("Lead capturado: %s", record["email"])
    SessionContext().grant_ebook()
    return redirect(url_for("pages.ebook"))


@bp.get("/ebook")
@require_ebook_access
def ebook():
    return render_template("ebook.html", title="eBook")
