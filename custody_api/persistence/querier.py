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
"""Implements the Querier abstractions responsible for fetching custody records.

Related collections are never reached through implicit lazy loads by callers:
each fetch states which parts of the entity graph it loads.
"""
from typing import List, Optional, Tuple

from sqlalchemy.orm import Session, joinedload, selectinload
from sqlalchemy.orm.interfaces import LoaderOption

from custody_api.common.constants.reference_domain import ReferenceDomain
from custody_api.persistence.database.schema import (
    Offender,
    OffenderBooking,
    OffenderCharge,
    OffenderExternalMovement,
    ReferenceCode,
)
from custody_api.persistence.filters import MovementsFilter
from custody_api.persistence.pagination import Page, PageRequest, paginate


def _offender_record_options() -> Tuple[LoaderOption, ...]:
    """Loader options for everything needed to present a full offender record."""
    return (
        selectinload(Offender.offender_identifiers),
        selectinload(Offender.offender_aliases).selectinload(
            Offender.offender_identifiers
        ),
        selectinload(Offender.offender_bookings).selectinload(
            OffenderBooking.offender_external_movements
        ),
        selectinload(Offender.offender_bookings).joinedload(
            OffenderBooking.agency_location
        ),
        selectinload(Offender.offender_bookings).joinedload(
            OffenderBooking.living_unit
        ),
    )


class OffenderQuerier:
    """Fetches offenders, optionally with their full record graph."""

    @staticmethod
    def fetch_offender(session: Session, offender_id: int) -> Optional[Offender]:
        return session.get(Offender, offender_id)

    @staticmethod
    def fetch_offender_record(
        session: Session, offender_id: int
    ) -> Optional[Offender]:
        return (
            session.query(Offender)
            .options(*_offender_record_options())
            .filter(Offender.offender_id == offender_id)
            .one_or_none()
        )

    @staticmethod
    def fetch_offender_record_by_noms_id(
        session: Session, noms_id: str
    ) -> Optional[Offender]:
        """Alias rows share the display id of the offender they belong to, so
        only root records are considered."""
        return (
            session.query(Offender)
            .options(*_offender_record_options())
            .filter(
                Offender.offender_id_display == noms_id,
                Offender.alias_offender_id.is_(None),
            )
            .order_by(Offender.offender_id)
            .first()
        )

    @staticmethod
    def fetch_offender_records_page(
        session: Session, page_request: PageRequest
    ) -> Page[Offender]:
        query = (
            session.query(Offender)
            .options(*_offender_record_options())
            .filter(Offender.alias_offender_id.is_(None))
            .order_by(Offender.offender_id)
        )
        return paginate(query, page_request)


class BookingQuerier:
    """Fetches the bookings belonging to one offender."""

    @staticmethod
    def fetch_bookings_for_offender(
        session: Session,
        offender_id: int,
        *,
        with_movements: bool = False,
        with_charges: bool = False,
    ) -> List[OffenderBooking]:
        query = session.query(OffenderBooking).filter(
            OffenderBooking.offender_id == offender_id
        )
        if with_movements:
            query = query.options(
                selectinload(OffenderBooking.offender_external_movements)
            )
        if with_charges:
            query = query.options(selectinload(OffenderBooking.offender_charges))
        return query.order_by(OffenderBooking.offender_book_id).all()


class ExternalMovementQuerier:
    """Fetches external movements, either a filtered page or one by key."""

    @staticmethod
    def fetch_movements_page(
        session: Session, movements_filter: MovementsFilter, page_request: PageRequest
    ) -> Page[OffenderExternalMovement]:
        query = (
            session.query(OffenderExternalMovement)
            .filter(*movements_filter.criteria())
            .order_by(
                OffenderExternalMovement.offender_book_id,
                OffenderExternalMovement.movement_seq,
            )
        )
        return paginate(query, page_request)

    @staticmethod
    def fetch_movement(
        session: Session, booking_id: int, movement_seq: int
    ) -> Optional[OffenderExternalMovement]:
        return session.get(OffenderExternalMovement, (booking_id, movement_seq))


class OffenderChargeQuerier:
    @staticmethod
    def fetch_charges_page(
        session: Session, page_request: PageRequest
    ) -> Page[OffenderCharge]:
        query = session.query(OffenderCharge).order_by(
            OffenderCharge.offender_charge_id
        )
        return paginate(query, page_request)


class ReferenceCodeQuerier:
    @staticmethod
    def fetch_reference_code(
        session: Session, domain: ReferenceDomain, code: str
    ) -> Optional[ReferenceCode]:
        return (
            session.query(ReferenceCode)
            .filter(ReferenceCode.domain == domain.value, ReferenceCode.code == code)
            .one_or_none()
        )
