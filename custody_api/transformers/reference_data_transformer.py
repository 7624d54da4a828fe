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
"""Converts agency and internal location rows to API objects."""
from typing import Optional

from custody_api import models
from custody_api.persistence.database import schema
from custody_api.transformers.types_transformer import yn_to_boolean


def agency_location_of(
    location: Optional[schema.AgencyLocation],
) -> Optional[models.AgencyLocation]:
    if location is None:
        return None
    return models.AgencyLocation(
        agency_location_id=location.agy_loc_id,
        description=location.description,
        agency_location_type=location.agency_location_type,
        active_flag=yn_to_boolean(location.active_flag),
    )


def agency_internal_location_of(
    location: Optional[schema.AgencyInternalLocation],
) -> Optional[models.AgencyInternalLocation]:
    if location is None:
        return None
    return models.AgencyInternalLocation(
        internal_location_id=location.internal_location_id,
        agency_location_id=location.agy_loc_id,
        internal_location_code=location.internal_location_code,
        description=location.description,
        internal_location_type=location.internal_location_type,
        active_flag=yn_to_boolean(location.active_flag),
    )
