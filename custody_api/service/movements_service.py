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
"""Serves external movements, either as a filtered page across all offenders
or as the complete ordered list for one offender."""
import datetime
import logging
from itertools import chain
from typing import Iterable, List, Optional

from sqlalchemy.orm import Session

from custody_api.models import ExternalMovement
from custody_api.persistence.database.schema import OffenderExternalMovement
from custody_api.persistence.filters import MovementsFilter
from custody_api.persistence.pagination import Page, PageRequest
from custody_api.persistence.querier import (
    BookingQuerier,
    ExternalMovementQuerier,
    OffenderQuerier,
)
from custody_api.service.orderings import MOVEMENTS_BY_RECENCY, Ordering
from custody_api.transformers.movements_transformer import MovementsTransformer


class MovementsService:
    """Fetches, orders and converts external movements."""

    def __init__(
        self,
        session: Session,
        movements_transformer: MovementsTransformer,
        movement_ordering: Ordering[OffenderExternalMovement] = MOVEMENTS_BY_RECENCY,
    ) -> None:
        self.session = session
        self.movements_transformer = movements_transformer
        self.movement_ordering = movement_ordering

    @classmethod
    def for_session(cls, session: Session) -> "MovementsService":
        return cls(session, MovementsTransformer())

    def get_movements(
        self,
        page_request: PageRequest,
        from_datetime: Optional[datetime.datetime] = None,
        to_datetime: Optional[datetime.datetime] = None,
        booking_id: Optional[int] = None,
    ) -> Page[ExternalMovement]:
        movements_filter = MovementsFilter(
            from_datetime=from_datetime, to_datetime=to_datetime, booking_id=booking_id
        )
        logging.debug(
            "Fetching movements page [%s] with filter [%s]", page_request, movements_filter
        )
        movements = ExternalMovementQuerier.fetch_movements_page(
            self.session, movements_filter, page_request
        )
        return movements.with_content(self._ordered_movements_of(movements.content))

    def get_offender_movements(
        self, offender_id: int
    ) -> Optional[List[ExternalMovement]]:
        """Returns all movements across all of the offender's bookings, or None
        if there is no such offender."""
        if OffenderQuerier.fetch_offender(self.session, offender_id) is None:
            return None

        bookings = BookingQuerier.fetch_bookings_for_offender(
            self.session, offender_id, with_movements=True
        )
        return self._ordered_movements_of(
            chain.from_iterable(
                booking.offender_external_movements for booking in bookings
            )
        )

    def movements_for_offender_id_and_booking_id(
        self, offender_id: int, booking_id: int
    ) -> Optional[List[ExternalMovement]]:
        """Returns the movements on one of the offender's bookings, or None if
        there is no such offender or the booking is not one of theirs."""
        if OffenderQuerier.fetch_offender(self.session, offender_id) is None:
            return None

        bookings = BookingQuerier.fetch_bookings_for_offender(
            self.session, offender_id, with_movements=True
        )
        booking = next(
            (b for b in bookings if b.offender_book_id == booking_id), None
        )
        if booking is None:
            return None
        return self._ordered_movements_of(booking.offender_external_movements)

    def movement_for_booking_id_and_sequence(
        self, booking_id: int, sequence_number: int
    ) -> Optional[ExternalMovement]:
        movement = ExternalMovementQuerier.fetch_movement(
            self.session, booking_id, sequence_number
        )
        if movement is None:
            return None
        return self.movements_transformer.movement_of(movement)

    def _ordered_movements_of(
        self, movements: Iterable[OffenderExternalMovement]
    ) -> List[ExternalMovement]:
        return [
            self.movements_transformer.movement_of(movement)
            for movement in self.movement_ordering.sort(movements)
        ]
