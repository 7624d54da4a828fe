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
"""Serves charges, ordered by offence rank."""
import logging
from itertools import chain
from typing import Iterable, List, Optional

from sqlalchemy.orm import Session

from custody_api.models import Charge
from custody_api.persistence.database.schema import OffenderCharge
from custody_api.persistence.pagination import Page, PageRequest
from custody_api.persistence.querier import (
    BookingQuerier,
    OffenderChargeQuerier,
    OffenderQuerier,
)
from custody_api.service.orderings import CHARGES_BY_OFFENCE_RANK, Ordering
from custody_api.transformers.charges_transformer import ChargesTransformer


class ChargesService:
    """Fetches, converts and orders charges. The same offence rank ordering
    applies to pages, to one offender's charges and to one booking's charges."""

    def __init__(
        self,
        session: Session,
        charges_transformer: ChargesTransformer,
        charge_ordering: Ordering[Charge] = CHARGES_BY_OFFENCE_RANK,
    ) -> None:
        self.session = session
        self.charges_transformer = charges_transformer
        self.charge_ordering = charge_ordering

    @classmethod
    def for_session(cls, session: Session) -> "ChargesService":
        return cls(session, ChargesTransformer())

    def get_charges(self, page_request: PageRequest) -> Page[Charge]:
        logging.debug("Fetching charges page [%s]", page_request)
        charges = OffenderChargeQuerier.fetch_charges_page(self.session, page_request)
        return charges.with_content(self._ranked_charges_of(charges.content))

    def charges_for_offender_id(self, offender_id: int) -> Optional[List[Charge]]:
        """Returns the charges across all of the offender's bookings, or None if
        there is no such offender."""
        if OffenderQuerier.fetch_offender(self.session, offender_id) is None:
            return None

        bookings = BookingQuerier.fetch_bookings_for_offender(
            self.session, offender_id, with_charges=True
        )
        return self._ranked_charges_of(
            chain.from_iterable(booking.offender_charges for booking in bookings)
        )

    def charges_for_offender_id_and_booking_id(
        self, offender_id: int, booking_id: int
    ) -> Optional[List[Charge]]:
        """Returns the charges on one of the offender's bookings, or None if
        there is no such offender or the booking is not one of theirs."""
        if OffenderQuerier.fetch_offender(self.session, offender_id) is None:
            return None

        bookings = BookingQuerier.fetch_bookings_for_offender(
            self.session, offender_id, with_charges=True
        )
        booking = next(
            (b for b in bookings if b.offender_book_id == booking_id), None
        )
        if booking is None:
            return None
        return self._ranked_charges_of(booking.offender_charges)

    def _ranked_charges_of(self, charges: Iterable[OffenderCharge]) -> List[Charge]:
        return self.charge_ordering.sort(
            self.charges_transformer.charge_of(charge) for charge in charges
        )
