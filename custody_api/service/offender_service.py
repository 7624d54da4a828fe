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
"""Serves full offender records."""
import logging
from typing import Optional

from sqlalchemy.orm import Session

from custody_api.models import Offender
from custody_api.persistence.pagination import Page, PageRequest
from custody_api.persistence.querier import OffenderQuerier
from custody_api.service.reference_code_lookup import ReferenceCodeLookup
from custody_api.transformers.booking_transformer import BookingTransformer
from custody_api.transformers.movements_transformer import MovementsTransformer
from custody_api.transformers.offender_transformer import OffenderTransformer


class OffenderService:
    def __init__(self, session: Session, offender_transformer: OffenderTransformer) -> None:
        self.session = session
        self.offender_transformer = offender_transformer

    @classmethod
    def for_session(cls, session: Session) -> "OffenderService":
        return cls(
            session,
            OffenderTransformer(
                ReferenceCodeLookup(session),
                BookingTransformer(MovementsTransformer()),
            ),
        )

    def get_offenders(self, page_request: PageRequest) -> Page[Offender]:
        logging.debug("Fetching offenders page [%s]", page_request)
        offenders = OffenderQuerier.fetch_offender_records_page(
            self.session, page_request
        )
        return offenders.map(self.offender_transformer.offender_of)

    def get_offender_by_offender_id(self, offender_id: int) -> Optional[Offender]:
        offender = OffenderQuerier.fetch_offender_record(self.session, offender_id)
        if offender is None:
            return None
        return self.offender_transformer.offender_of(offender)

    def get_offender_by_noms_id(self, noms_id: str) -> Optional[Offender]:
        offender = OffenderQuerier.fetch_offender_record_by_noms_id(
            self.session, noms_id
        )
        if offender is None:
            return None
        return self.offender_transformer.offender_of(offender)
