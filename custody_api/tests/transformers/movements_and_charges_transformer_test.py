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
"""Tests for the movement and charge transformers."""
import datetime
from unittest import TestCase

from custody_api.models import Charge, ExternalMovement
from custody_api.tests.custody_test_helpers import (
    generate_fake_charge,
    generate_fake_movement,
)
from custody_api.transformers.charges_transformer import ChargesTransformer
from custody_api.transformers.movements_transformer import MovementsTransformer


class TestMovementsTransformer(TestCase):
    def test_movement_of(self) -> None:
        movement = generate_fake_movement(
            -1,
            2,
            movement_date=datetime.date(2017, 4, 1),
            movement_time=datetime.datetime(2017, 4, 1, 11, 0),
        )
        movement.to_agy_loc_id = "LEI"
        movement.active_flag = "N"

        self.assertEqual(
            ExternalMovement(
                booking_id=-1,
                sequence_number=2,
                movement_date=datetime.date(2017, 4, 1),
                movement_time=datetime.datetime(2017, 4, 1, 11, 0),
                movement_type_code="ADM",
                movement_direction_code="IN",
                to_agency_location_id="LEI",
                active_flag=False,
            ),
            MovementsTransformer().movement_of(movement),
        )


class TestChargesTransformer(TestCase):
    def test_charge_of(self) -> None:
        charge = generate_fake_charge(
            7, -1, most_serious_flag="Y", offence_severity_ranking=500
        )

        self.assertEqual(
            Charge(
                charge_id=7,
                booking_id=-1,
                most_serious_charge=True,
                offence_severity_ranking=500,
                offence_code="TH68010",
                statute_code="TH68",
                charge_status="A",
                number_of_offences=1,
            ),
            ChargesTransformer().charge_of(charge),
        )
