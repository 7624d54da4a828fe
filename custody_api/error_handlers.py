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
""" Contains error handlers to our Flask app"""
from http import HTTPStatus

from flask import Flask, Response, jsonify
from marshmallow import ValidationError

from custody_api.utils.flask_exception import FlaskException


def handle_flask_exception(ex: FlaskException) -> Response:
    response = jsonify(
        {
            "code": ex.code,
            "description": ex.description,
        }
    )
    response.status_code = ex.status_code
    return response


def handle_validation_error(ex: ValidationError) -> Response:
    return handle_flask_exception(
        FlaskException(
            code="bad_request",
            description=ex.messages,
            status_code=HTTPStatus.BAD_REQUEST,
        )
    )


def register_error_handlers(app: Flask) -> None:
    """Registers error handlers"""
    app.errorhandler(ValidationError)(handle_validation_error)
    app.errorhandler(FlaskException)(handle_flask_exception)
