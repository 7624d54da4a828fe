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
"""Converts an Offender row and its loaded bookings, identifiers and aliases
to an Offender API object."""
from typing import Iterable, List, Optional

from custody_api import models
from custody_api.common.constants.reference_domain import ReferenceDomain
from custody_api.persistence.database import schema
from custody_api.service.orderings import BOOKINGS_BY_SEQUENCE, Ordering
from custody_api.service.reference_code_lookup import ReferenceCodeLookup
from custody_api.transformers.booking_transformer import BookingTransformer
from custody_api.transformers.types_transformer import date_of


def combined_middle_names_of(
    second_name: Optional[str], third_name: Optional[str]
) -> str:
    """Joins the names that are present with a single space. Returns an empty
    string if neither is present."""
    return " ".join(name for name in (second_name, third_name) if name is not None)


def identifiers_of(
    offender_identifiers: Optional[Iterable[schema.OffenderIdentifier]],
) -> List[models.Identifier]:
    """Converts identifiers, most recently added (highest sequence) first."""
    if not offender_identifiers:
        return []
    return [
        models.Identifier(
            identifier=identifier.identifier,
            identifier_type=identifier.identifier_type,
            sequence_number=identifier.offender_id_seq,
            created_date_time=identifier.create_datetime,
        )
        for identifier in sorted(
            offender_identifiers,
            key=lambda identifier: identifier.offender_id_seq,
            reverse=True,
        )
    ]


class OffenderTransformer:
    """Converts offenders. Each coded field triggers its own reference lookup."""

    def __init__(
        self,
        reference_code_lookup: ReferenceCodeLookup,
        booking_transformer: BookingTransformer,
        booking_ordering: Ordering[schema.OffenderBooking] = BOOKINGS_BY_SEQUENCE,
    ) -> None:
        self.reference_code_lookup = reference_code_lookup
        self.booking_transformer = booking_transformer
        self.booking_ordering = booking_ordering

    def offender_of(self, offender: schema.Offender) -> models.Offender:
        return models.Offender(
            offender_id=offender.offender_id,
            noms_id=offender.offender_id_display,
            first_name=offender.first_name,
            middle_names=combined_middle_names_of(
                offender.middle_name, offender.middle_name_2
            ),
            surname=offender.last_name,
            date_of_birth=date_of(offender.birth_date),
            gender=self.gender_of(offender),
            ethnicity=self.ethnicity_of(offender),
            identifiers=identifiers_of(offender.offender_identifiers),
            aliases=self.aliases_of(offender.offender_aliases),
            bookings=self.bookings_of(offender.offender_bookings),
        )

    def alias_of(self, offender: schema.Offender) -> models.OffenderAlias:
        return models.OffenderAlias(
            offender_id=offender.offender_id,
            noms_id=offender.offender_id_display,
            first_name=offender.first_name,
            middle_names=combined_middle_names_of(
                offender.middle_name, offender.middle_name_2
            ),
            surname=offender.last_name,
            date_of_birth=date_of(offender.birth_date),
            gender=self.gender_of(offender),
            ethnicity=self.ethnicity_of(offender),
            identifiers=identifiers_of(offender.offender_identifiers),
        )

    def aliases_of(
        self, aliases: Optional[Iterable[schema.Offender]]
    ) -> List[models.OffenderAlias]:
        if not aliases:
            return []
        return [self.alias_of(alias) for alias in aliases]

    def bookings_of(
        self, bookings: Optional[Iterable[schema.OffenderBooking]]
    ) -> List[models.Booking]:
        if not bookings:
            return []
        return [
            self.booking_transformer.booking_of(booking)
            for booking in self.booking_ordering.sort(bookings)
        ]

    def gender_of(self, offender: schema.Offender) -> Optional[models.KeyValue]:
        return self.reference_code_lookup.key_value_of(
            offender.sex_code, ReferenceDomain.SEX
        )

    def ethnicity_of(self, offender: schema.Offender) -> Optional[models.KeyValue]:
        return self.reference_code_lookup.key_value_of(
            offender.race_code, ReferenceDomain.ETHNICITY
        )
