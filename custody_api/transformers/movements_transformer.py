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
"""Converts an OffenderExternalMovement row to an ExternalMovement API object."""
from custody_api.models import ExternalMovement
from custody_api.persistence.database.schema import OffenderExternalMovement
from custody_api.transformers.types_transformer import date_of, yn_to_boolean


class MovementsTransformer:
    def movement_of(self, movement: OffenderExternalMovement) -> ExternalMovement:
        return ExternalMovement(
            booking_id=movement.offender_book_id,
            sequence_number=movement.movement_seq,
            movement_date=date_of(movement.movement_date),
            movement_time=movement.movement_time,
            movement_type_code=movement.movement_type,
            movement_direction_code=movement.movement_direction,
            movement_reason_code=movement.movement_reason_code,
            from_agency_location_id=movement.from_agy_loc_id,
            to_agency_location_id=movement.to_agy_loc_id,
            active_flag=yn_to_boolean(movement.active_flag),
            comment_text=movement.comment_text,
            created_date_time=movement.create_datetime,
        )
