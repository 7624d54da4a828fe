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
"""Converts an OffenderBooking row to a Booking API object."""
from typing import Optional

from custody_api.models import Booking, ExternalMovement
from custody_api.persistence.database.schema import (
    OffenderBooking,
    OffenderExternalMovement,
)
from custody_api.service.orderings import MOVEMENTS_BY_RECENCY, Ordering
from custody_api.transformers.movements_transformer import MovementsTransformer
from custody_api.transformers.reference_data_transformer import (
    agency_internal_location_of,
    agency_location_of,
)
from custody_api.transformers.types_transformer import (
    date_of,
    local_date_time_of,
    yn_to_boolean,
)


class BookingTransformer:
    """Converts bookings, embedding the most recent movement on each."""

    def __init__(
        self,
        movements_transformer: MovementsTransformer,
        movement_ordering: Ordering[OffenderExternalMovement] = MOVEMENTS_BY_RECENCY,
    ) -> None:
        self.movements_transformer = movements_transformer
        self.movement_ordering = movement_ordering

    def booking_of(self, booking: OffenderBooking) -> Booking:
        return Booking(
            booking_id=booking.offender_book_id,
            booking_sequence=booking.booking_seq,
            start_date=date_of(booking.booking_begin_date),
            end_date=date_of(booking.booking_end_date),
            active_flag=yn_to_boolean(booking.active_flag),
            offender_id=booking.offender_id,
            root_offender_id=booking.root_offender_id,
            booking_no=booking.booking_no,
            booking_status=booking.booking_status,
            status_reason=booking.status_reason,
            in_out_status=booking.in_out_status,
            agency_location=agency_location_of(booking.agency_location),
            living_unit=agency_internal_location_of(booking.living_unit),
            case_date_time=local_date_time_of(booking.case_date, booking.case_time),
            last_movement=self.last_movement_of(booking),
        )

    def last_movement_of(self, booking: OffenderBooking) -> Optional[ExternalMovement]:
        last_movement = self.movement_ordering.first(
            booking.offender_external_movements
        )
        if last_movement is None:
            return None
        return self.movements_transformer.movement_of(last_movement)
