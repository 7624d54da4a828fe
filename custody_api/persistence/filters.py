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
"""Criteria records used to scope queries against the custody database."""
import datetime
from typing import List, Optional

import attr
from sqlalchemy.sql.elements import ColumnElement

from custody_api.persistence.database.schema import OffenderExternalMovement


@attr.s(frozen=True)
class MovementsFilter:
    """Optional bounds on movement time and an optional booking to restrict a
    movements query to. Both bounds are inclusive."""

    from_datetime: Optional[datetime.datetime] = attr.ib(default=None)
    to_datetime: Optional[datetime.datetime] = attr.ib(default=None)
    booking_id: Optional[int] = attr.ib(default=None)

    def criteria(self) -> List[ColumnElement]:
        clauses: List[ColumnElement] = []
        if self.from_datetime is not None:
            clauses.append(OffenderExternalMovement.movement_time >= self.from_datetime)
        if self.to_datetime is not None:
            clauses.append(OffenderExternalMovement.movement_time <= self.to_datetime)
        if self.booking_id is not None:
            clauses.append(OffenderExternalMovement.offender_book_id == self.booking_id)
        return clauses
