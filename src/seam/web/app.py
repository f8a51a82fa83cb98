from __future__ import annotations

from flask import Flask

from seam.workspace import Workspace


def create_app(workspace: Workspace, config: dict | None = None) -> Flask:
    """Create and configure the Flask app."""
    app = Flask(__name__)
    app.config.update(config or {})

    app.extensions["workspace"] = workspace

    from seam.web.routes.api import api_bp

    app.register_blueprint(api_bp, url_prefix="/api")

    return app
