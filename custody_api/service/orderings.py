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
"""Business orderings of movements, bookings and charges.

Each ordering is a stateless Ordering wrapping a three-way compare function,
so it can be passed to the transformers and services that need it and
swapped out in tests. Missing optional sort components never raise: they
order as the least significant possible value.
"""
import datetime
import functools
from typing import Any, Callable, Generic, Iterable, List, Optional, Tuple

import attr

from custody_api.models import Charge
from custody_api.persistence.database.schema import (
    OffenderBooking,
    OffenderExternalMovement,
)
from custody_api.utils.types import T


def _compare(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


@attr.s(frozen=True)
class Ordering(Generic[T]):
    """A total order over T, expressed as a three-way compare function that
    returns a negative number when its first argument sorts first."""

    name: str = attr.ib()
    compare: Callable[[T, T], int] = attr.ib()

    def sort(self, items: Iterable[T]) -> List[T]:
        return sorted(items, key=functools.cmp_to_key(self.compare))

    def first(self, items: Iterable[T]) -> Optional[T]:
        """Returns the element that sorts before all others, or None if there
        are no elements."""
        return min(items, key=functools.cmp_to_key(self.compare), default=None)


def _movement_recency_key(
    movement: OffenderExternalMovement,
) -> Tuple[datetime.date, datetime.datetime, int]:
    return (
        movement.movement_date or datetime.date.min,
        movement.movement_time or datetime.datetime.min,
        movement.movement_seq,
    )


def compare_movements_by_recency(
    a: OffenderExternalMovement, b: OffenderExternalMovement
) -> int:
    """Latest movement date first, then latest movement time, then highest
    movement sequence."""
    return _compare(_movement_recency_key(b), _movement_recency_key(a))


def compare_bookings_by_sequence(a: OffenderBooking, b: OffenderBooking) -> int:
    """Booking sequence ascending, then latest booking begin date first."""
    return _compare(a.booking_seq, b.booking_seq) or _compare(
        b.booking_begin_date or datetime.datetime.min,
        a.booking_begin_date or datetime.datetime.min,
    )


def _severity_key(charge: Charge) -> Tuple[bool, int]:
    # Charges without a ranking sort after any ranked charge
    ranking = charge.offence_severity_ranking
    return ranking is not None, ranking if ranking is not None else 0


def compare_charges_by_offence_rank(a: Charge, b: Charge) -> int:
    """Most serious charge first, then highest severity ranking, then highest
    charge id."""
    return (
        _compare(b.most_serious_charge, a.most_serious_charge)
        or _compare(_severity_key(b), _severity_key(a))
        or _compare(b.charge_id, a.charge_id)
    )


MOVEMENTS_BY_RECENCY: Ordering[OffenderExternalMovement] = Ordering(
    name="movements_by_recency", compare=compare_movements_by_recency
)
BOOKINGS_BY_SEQUENCE: Ordering[OffenderBooking] = Ordering(
    name="bookings_by_sequence", compare=compare_bookings_by_sequence
)
CHARGES_BY_OFFENCE_RANK: Ordering[Charge] = Ordering(
    name="charges_by_offence_rank", compare=compare_charges_by_offence_rank
)
