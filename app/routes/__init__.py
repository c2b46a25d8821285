# app/routes/__init__.py
from __future__ import annotations


def register_routes(app):
    # Importa y registra blueprints aquí para evitar imports circulares
    from app.routes.pages import bp as pages_bp
    app.register_blueprint(pages_bp)

    from app.routes.admin import bp as admin_bp
    app.register_blueprint(admin_bp)
