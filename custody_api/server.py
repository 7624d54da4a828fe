# Recidiviz - a data platform for criminal justice reform
# Copyright (C) 2026 Recidiviz, Inc.
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
# =============================================================================
"""Backend entry point for the custody records API server.

Run with gunicorn using the application factory:

    gunicorn -c gunicorn.conf.py "custody_api.server:create_app()"
"""
import logging
import os
from typing import Callable, Optional

from flask import Flask, Response, g, jsonify

from custody_api import server_config
from custody_api.api_routes import create_api_blueprint
from custody_api.error_handlers import register_error_handlers
from custody_api.persistence.database.sqlalchemy_flask_utils import (
    setup_scoped_sessions,
)
from custody_api.utils.auth.jwt_auth import JwtConfig, build_jwt_authorization_decorator
from custody_api.utils.environment import in_development
from custody_api.utils.types import TokenClaims


def on_successful_authorization(jwt_claims: TokenClaims) -> None:
    g.jwt_claims = jwt_claims


def build_requires_authorization() -> Callable:
    authorization_config = JwtConfig(
        verification_key=server_config.jwt_public_key(),
        algorithms=server_config.jwt_algorithms(),
        audience=server_config.jwt_audience(),
        issuer=server_config.jwt_issuer(),
    )
    return build_jwt_authorization_decorator(
        authorization_config, on_successful_authorization
    )


def create_app(
    database_url: Optional[str] = None,
    authorization_decorator: Optional[Callable] = None,
) -> Flask:
    """Builds the Flask app. Configuration not passed in is read from the environment."""
    app = Flask(__name__)
    register_error_handlers(app)

    if database_url is None:
        database_url = server_config.database_url()
    setup_scoped_sessions(app, database_url)

    if authorization_decorator is None:
        authorization_decorator = build_requires_authorization()

    app.register_blueprint(create_api_blueprint(authorization_decorator))

    @app.get("/health")
    def health() -> Response:
        return jsonify({"status": "UP"})

    # Security headers
    @app.after_request
    def set_headers(response: Response) -> Response:
        if not in_development():
            response.headers[
                "Strict-Transport-Security"
            ] = "max-age=63072000"  # max age of 2 years
        response.headers["Content-Security-Policy"] = "frame-ancestors 'none'"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["X-Custody-Api-Current-Version"] = os.getenv(
            "CURRENT_GIT_SHA", ""
        )
        return response

    logging.info("Custody records API initialized")
    return app
