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
"""API objects returned by the custody records services.

Note: These classes are shaped for API consumers and are kept separate from
the SQLAlchemy ORM objects in persistence/database/schema.py. Fields that may
be absent in the source records are Optional and are None when absent.
"""
import datetime
from typing import List, Optional

import attr


@attr.s(frozen=True)
class KeyValue:
    code: str = attr.ib()
    description: str = attr.ib()


@attr.s(frozen=True)
class AgencyLocation:
    agency_location_id: str = attr.ib()
    description: Optional[str] = attr.ib(default=None)
    agency_location_type: Optional[str] = attr.ib(default=None)
    active_flag: bool = attr.ib(default=False)


@attr.s(frozen=True)
class AgencyInternalLocation:
    internal_location_id: int = attr.ib()
    agency_location_id: Optional[str] = attr.ib(default=None)
    internal_location_code: Optional[str] = attr.ib(default=None)
    description: Optional[str] = attr.ib(default=None)
    internal_location_type: Optional[str] = attr.ib(default=None)
    active_flag: bool = attr.ib(default=False)


@attr.s(frozen=True)
class Identifier:
    identifier: str = attr.ib()
    identifier_type: str = attr.ib()
    sequence_number: int = attr.ib()
    created_date_time: Optional[datetime.datetime] = attr.ib(default=None)


@attr.s(frozen=True)
class ExternalMovement:
    booking_id: int = attr.ib()
    sequence_number: int = attr.ib()
    movement_date: datetime.date = attr.ib()
    movement_time: Optional[datetime.datetime] = attr.ib(default=None)
    movement_type_code: Optional[str] = attr.ib(default=None)
    movement_direction_code: Optional[str] = attr.ib(default=None)
    movement_reason_code: Optional[str] = attr.ib(default=None)
    from_agency_location_id: Optional[str] = attr.ib(default=None)
    to_agency_location_id: Optional[str] = attr.ib(default=None)
    active_flag: bool = attr.ib(default=False)
    comment_text: Optional[str] = attr.ib(default=None)
    created_date_time: Optional[datetime.datetime] = attr.ib(default=None)


@attr.s(frozen=True)
class Charge:
    charge_id: int = attr.ib()
    booking_id: int = attr.ib()
    most_serious_charge: bool = attr.ib()
    offence_severity_ranking: Optional[int] = attr.ib(default=None)
    offence_code: Optional[str] = attr.ib(default=None)
    statute_code: Optional[str] = attr.ib(default=None)
    charge_status: Optional[str] = attr.ib(default=None)
    offence_date: Optional[datetime.date] = attr.ib(default=None)
    plea_code: Optional[str] = attr.ib(default=None)
    number_of_offences: Optional[int] = attr.ib(default=None)
    created_date_time: Optional[datetime.datetime] = attr.ib(default=None)


@attr.s(frozen=True)
class Booking:
    """A period of custody, including the most recent movement recorded on it."""

    booking_id: int = attr.ib()
    booking_sequence: int = attr.ib()
    start_date: datetime.date = attr.ib()
    active_flag: bool = attr.ib()
    offender_id: int = attr.ib()
    root_offender_id: Optional[int] = attr.ib(default=None)
    booking_no: Optional[str] = attr.ib(default=None)
    end_date: Optional[datetime.date] = attr.ib(default=None)
    booking_status: Optional[str] = attr.ib(default=None)
    status_reason: Optional[str] = attr.ib(default=None)
    in_out_status: Optional[str] = attr.ib(default=None)
    agency_location: Optional[AgencyLocation] = attr.ib(default=None)
    living_unit: Optional[AgencyInternalLocation] = attr.ib(default=None)
    case_date_time: Optional[datetime.datetime] = attr.ib(default=None)
    last_movement: Optional[ExternalMovement] = attr.ib(default=None)


@attr.s(frozen=True)
class OffenderAlias:
    offender_id: int = attr.ib()
    noms_id: Optional[str] = attr.ib(default=None)
    first_name: Optional[str] = attr.ib(default=None)
    middle_names: str = attr.ib(default="")
    surname: Optional[str] = attr.ib(default=None)
    date_of_birth: Optional[datetime.date] = attr.ib(default=None)
    gender: Optional[KeyValue] = attr.ib(default=None)
    ethnicity: Optional[KeyValue] = attr.ib(default=None)
    identifiers: List[Identifier] = attr.ib(factory=list)


@attr.s(frozen=True)
class Offender:
    """A person, with their bookings, identifiers and aliases."""

    offender_id: int = attr.ib()
    noms_id: Optional[str] = attr.ib(default=None)
    first_name: Optional[str] = attr.ib(default=None)
    middle_names: str = attr.ib(default="")
    surname: Optional[str] = attr.ib(default=None)
    date_of_birth: Optional[datetime.date] = attr.ib(default=None)
    gender: Optional[KeyValue] = attr.ib(default=None)
    ethnicity: Optional[KeyValue] = attr.ib(default=None)
    identifiers: List[Identifier] = attr.ib(factory=list)
    aliases: List[OffenderAlias] = attr.ib(factory=list)
    bookings: List[Booking] = attr.ib(factory=list)
