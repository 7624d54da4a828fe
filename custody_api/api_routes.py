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
"""Implements API routes for the custody records API."""
from typing import Callable, Optional

from flask import Blueprint, Response, g, jsonify

from custody_api.api_schemas import (
    MovementsQuerySchema,
    PageRequestSchema,
    requires_query_schema,
)
from custody_api.exceptions import CustodyApiNotFoundError
from custody_api.persistence.database.sqlalchemy_flask_utils import current_session
from custody_api.serialization import page_to_json, to_json
from custody_api.service.charges_service import ChargesService
from custody_api.service.movements_service import MovementsService
from custody_api.service.offender_service import OffenderService
from custody_api.utils.types import T


def found_or_404(value: Optional[T], description: str) -> T:
    if value is None:
        raise CustodyApiNotFoundError(description)
    return value


def create_api_blueprint(authorization_decorator: Callable) -> Blueprint:
    """Creates Blueprint object that is parameterized with a requires_authorization decorator."""

    api = Blueprint("api", __name__)

    @api.before_request
    @authorization_decorator
    def authorize_request() -> None:
        """By virtue of the decorator, this enforces authorization for all API routes."""

    @api.get("/movements")
    @requires_query_schema(MovementsQuerySchema)
    def _get_movements() -> Response:
        query_data = g.query_data
        movements = MovementsService.for_session(current_session).get_movements(
            query_data["page_request"],
            from_datetime=query_data["from_datetime"],
            to_datetime=query_data["to_datetime"],
            booking_id=query_data["booking_id"],
        )
        return jsonify(page_to_json(movements))

    @api.get("/movements/bookingId/<int(signed=True):booking_id>/sequence/<int:sequence>")
    def _get_movement(booking_id: int, sequence: int) -> Response:
        movement = MovementsService.for_session(
            current_session
        ).movement_for_booking_id_and_sequence(booking_id, sequence)
        return jsonify(
            to_json(
                found_or_404(
                    movement,
                    f"No movement with sequence {sequence} on booking {booking_id}",
                )
            )
        )

    @api.get("/offenders/offenderId/<int(signed=True):offender_id>/movements")
    def _get_offender_movements(offender_id: int) -> Response:
        movements = MovementsService.for_session(
            current_session
        ).get_offender_movements(offender_id)
        return jsonify(
            to_json(found_or_404(movements, f"No offender with id {offender_id}"))
        )

    @api.get(
        "/offenders/offenderId/<int(signed=True):offender_id>/bookings/<int(signed=True):booking_id>/movements"
    )
    def _get_offender_booking_movements(offender_id: int, booking_id: int) -> Response:
        movements = MovementsService.for_session(
            current_session
        ).movements_for_offender_id_and_booking_id(offender_id, booking_id)
        return jsonify(
            to_json(
                found_or_404(
                    movements,
                    f"No booking {booking_id} for offender with id {offender_id}",
                )
            )
        )

    @api.get("/charges")
    @requires_query_schema(PageRequestSchema)
    def _get_charges() -> Response:
        charges = ChargesService.for_session(current_session).get_charges(
            g.query_data["page_request"]
        )
        return jsonify(page_to_json(charges))

    @api.get("/offenders/offenderId/<int(signed=True):offender_id>/charges")
    def _get_offender_charges(offender_id: int) -> Response:
        charges = ChargesService.for_session(current_session).charges_for_offender_id(
            offender_id
        )
        return jsonify(
            to_json(found_or_404(charges, f"No offender with id {offender_id}"))
        )

    @api.get(
        "/offenders/offenderId/<int(signed=True):offender_id>/bookings/<int(signed=True):booking_id>/charges"
    )
    def _get_offender_booking_charges(offender_id: int, booking_id: int) -> Response:
        charges = ChargesService.for_session(
            current_session
        ).charges_for_offender_id_and_booking_id(offender_id, booking_id)
        return jsonify(
            to_json(
                found_or_404(
                    charges,
                    f"No booking {booking_id} for offender with id {offender_id}",
                )
            )
        )

    @api.get("/offenders")
    @requires_query_schema(PageRequestSchema)
    def _get_offenders() -> Response:
        offenders = OffenderService.for_session(current_session).get_offenders(
            g.query_data["page_request"]
        )
        return jsonify(page_to_json(offenders))

    @api.get("/offenders/offenderId/<int(signed=True):offender_id>")
    def _get_offender(offender_id: int) -> Response:
        offender = OffenderService.for_session(
            current_session
        ).get_offender_by_offender_id(offender_id)
        return jsonify(
            to_json(found_or_404(offender, f"No offender with id {offender_id}"))
        )

    @api.get("/offenders/nomsId/<noms_id>")
    def _get_offender_by_noms_id(noms_id: str) -> Response:
        offender = OffenderService.for_session(current_session).get_offender_by_noms_id(
            noms_id
        )
        return jsonify(
            to_json(found_or_404(offender, f"No offender with NOMS id {noms_id}"))
        )

    return api
