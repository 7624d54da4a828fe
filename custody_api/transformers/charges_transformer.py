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
"""Converts an OffenderCharge row to a Charge API object."""
from custody_api.models import Charge
from custody_api.persistence.database.schema import OffenderCharge
from custody_api.transformers.types_transformer import yn_to_boolean


class ChargesTransformer:
    def charge_of(self, charge: OffenderCharge) -> Charge:
        return Charge(
            charge_id=charge.offender_charge_id,
            booking_id=charge.offender_book_id,
            most_serious_charge=yn_to_boolean(charge.most_serious_flag),
            offence_severity_ranking=charge.offence_severity_ranking,
            offence_code=charge.offence_code,
            statute_code=charge.statute_code,
            charge_status=charge.charge_status,
            offence_date=charge.offence_date,
            plea_code=charge.plea_code,
            number_of_offences=charge.no_of_offences,
            created_date_time=charge.create_datetime,
        )
