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
"""Tests for the movement, booking and charge orderings."""
import datetime
import itertools
from typing import Optional
from unittest import TestCase

from custody_api.models import Charge
from custody_api.service.orderings import (
    BOOKINGS_BY_SEQUENCE,
    CHARGES_BY_OFFENCE_RANK,
    MOVEMENTS_BY_RECENCY,
)
from custody_api.tests.custody_test_helpers import (
    generate_fake_booking,
    generate_fake_movement,
)


def _charge(
    charge_id: int, most_serious: bool, ranking: Optional[int] = None
) -> Charge:
    return Charge(
        charge_id=charge_id,
        booking_id=1,
        most_serious_charge=most_serious,
        offence_severity_ranking=ranking,
    )


class TestMovementsByRecency(TestCase):
    """Tests for MOVEMENTS_BY_RECENCY."""

    def test_latest_date_first(self) -> None:
        older = generate_fake_movement(1, 2, movement_date=datetime.date(2017, 1, 1))
        newer = generate_fake_movement(1, 1, movement_date=datetime.date(2017, 3, 1))

        self.assertEqual([newer, older], MOVEMENTS_BY_RECENCY.sort([older, newer]))

    def test_same_date_latest_time_first(self) -> None:
        morning = generate_fake_movement(
            1,
            2,
            movement_date=datetime.date(2017, 1, 1),
            movement_time=datetime.datetime(2017, 1, 1, 9, 0),
        )
        evening = generate_fake_movement(
            1,
            1,
            movement_date=datetime.date(2017, 1, 1),
            movement_time=datetime.datetime(2017, 1, 1, 18, 0),
        )

        self.assertEqual([evening, morning], MOVEMENTS_BY_RECENCY.sort([morning, evening]))

    def test_same_date_and_time_highest_sequence_first(self) -> None:
        movements = [
            generate_fake_movement(1, seq, movement_date=datetime.date(2017, 1, 1))
            for seq in (1, 3, 2)
        ]

        self.assertEqual(
            [3, 2, 1],
            [m.movement_seq for m in MOVEMENTS_BY_RECENCY.sort(movements)],
        )

    def test_missing_time_sorts_after_any_time_on_the_same_date(self) -> None:
        timed = generate_fake_movement(1, 1, movement_date=datetime.date(2017, 1, 1))
        untimed = generate_fake_movement(1, 2, movement_date=datetime.date(2017, 1, 1))
        untimed.movement_time = None

        self.assertEqual([timed, untimed], MOVEMENTS_BY_RECENCY.sort([untimed, timed]))

    def test_first_of_empty_is_none(self) -> None:
        self.assertIsNone(MOVEMENTS_BY_RECENCY.first([]))

    def test_ordering_is_total_and_consistent(self) -> None:
        movements = [
            generate_fake_movement(
                booking_id,
                seq,
                movement_date=movement_date,
                movement_time=datetime.datetime.combine(movement_date, movement_time),
            )
            for booking_id, (seq, movement_date, movement_time) in enumerate(
                itertools.product(
                    (1, 2),
                    (datetime.date(2017, 1, 1), datetime.date(2017, 1, 2)),
                    (datetime.time(9, 0), datetime.time(17, 0)),
                )
            )
        ]
        compare = MOVEMENTS_BY_RECENCY.compare

        for a, b in itertools.product(movements, repeat=2):
            self.assertEqual(compare(a, b), -compare(b, a))
        for a, b, c in itertools.product(movements, repeat=3):
            if compare(a, b) <= 0 and compare(b, c) <= 0:
                self.assertLessEqual(compare(a, c), 0)


class TestBookingsBySequence(TestCase):
    """Tests for BOOKINGS_BY_SEQUENCE."""

    def test_sequence_ascending(self) -> None:
        bookings = [
            generate_fake_booking(10, 1, booking_seq=2),
            generate_fake_booking(11, 1, booking_seq=1),
            generate_fake_booking(12, 1, booking_seq=3),
        ]

        self.assertEqual(
            [11, 10, 12],
            [b.offender_book_id for b in BOOKINGS_BY_SEQUENCE.sort(bookings)],
        )

    def test_same_sequence_latest_begin_date_first(self) -> None:
        earlier = generate_fake_booking(
            10, 1, booking_seq=1, begin_date=datetime.datetime(2016, 1, 1)
        )
        later = generate_fake_booking(
            11, 1, booking_seq=1, begin_date=datetime.datetime(2018, 1, 1)
        )

        self.assertEqual([later, earlier], BOOKINGS_BY_SEQUENCE.sort([earlier, later]))


class TestChargesByOffenceRank(TestCase):
    """Tests for CHARGES_BY_OFFENCE_RANK."""

    def test_most_serious_first(self) -> None:
        minor = _charge(1, most_serious=False, ranking=900)
        serious = _charge(2, most_serious=True, ranking=1)

        self.assertEqual([serious, minor], CHARGES_BY_OFFENCE_RANK.sort([minor, serious]))

    def test_highest_severity_then_highest_id(self) -> None:
        charges = [
            _charge(1, most_serious=False, ranking=10),
            _charge(2, most_serious=False, ranking=50),
            _charge(3, most_serious=False, ranking=10),
        ]

        self.assertEqual(
            [2, 3, 1],
            [c.charge_id for c in CHARGES_BY_OFFENCE_RANK.sort(charges)],
        )

    def test_missing_severity_sorts_after_ranked_charges(self) -> None:
        unranked = _charge(5, most_serious=False)
        ranked = _charge(1, most_serious=False, ranking=1)

        self.assertEqual([ranked, unranked], CHARGES_BY_OFFENCE_RANK.sort([unranked, ranked]))

    def test_ordering_is_total_and_consistent(self) -> None:
        charges = [
            _charge(charge_id, most_serious, ranking)
            for charge_id, (most_serious, ranking) in enumerate(
                itertools.product((True, False), (None, 1, 5)), start=1
            )
        ]
        compare = CHARGES_BY_OFFENCE_RANK.compare

        for a, b in itertools.product(charges, repeat=2):
            self.assertEqual(compare(a, b), -compare(b, a))
            if a is not b:
                self.assertNotEqual(0, compare(a, b))
        for a, b, c in itertools.product(charges, repeat=3):
            if compare(a, b) < 0 and compare(b, c) < 0:
                self.assertLess(compare(a, c), 0)

    def test_sort_is_independent_of_input_order(self) -> None:
        charges = [
            _charge(1, most_serious=False, ranking=3),
            _charge(2, most_serious=True, ranking=None),
            _charge(3, most_serious=False, ranking=None),
            _charge(4, most_serious=True, ranking=7),
        ]
        expected = [4, 2, 1, 3]

        for permutation in itertools.permutations(charges):
            self.assertEqual(
                expected,
                [c.charge_id for c in CHARGES_BY_OFFENCE_RANK.sort(permutation)],
            )
