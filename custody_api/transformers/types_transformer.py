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
"""Converts stored column representations into API field types."""
import datetime
from typing import Optional

from custody_api.common.str_field_utils import YES, normalize_flag


def yn_to_boolean(flag: Optional[str]) -> bool:
    """Returns True only for a 'Y' flag; 'N', unset and unrecognized flags are
    all False."""
    return normalize_flag(flag) == YES


def date_of(timestamp: Optional[datetime.datetime]) -> Optional[datetime.date]:
    """Returns the date portion of a stored timestamp."""
    if timestamp is None:
        return None
    if isinstance(timestamp, datetime.datetime):
        return timestamp.date()
    return timestamp


def local_date_time_of(
    date_part: Optional[datetime.date], time_part: Optional[datetime.datetime]
) -> Optional[datetime.datetime]:
    """Combines a date column with the time portion of a separate time column.
    If either half is missing there is no meaningful combined value."""
    if date_part is None or time_part is None:
        return None
    if isinstance(date_part, datetime.datetime):
        date_part = date_part.date()
    time_of_day = (
        time_part.time() if isinstance(time_part, datetime.datetime) else time_part
    )
    return datetime.datetime.combine(date_part, time_of_day)
