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
"""
Common utils for processing str fields stored in the custody database.
"""
from typing import Optional

YES = "Y"


def snake_to_camel(s: str) -> str:
    """Converts a snake case string (e.g. "middle_names") to a camel case string
    (e.g. "middleNames")."""
    parts = iter(s.split("_"))
    return next(parts) + "".join(i.title() for i in parts)


def normalize_flag(flag: Optional[str]) -> Optional[str]:
    """Strips whitespace from a single-character flag column and upper-cases it,
    returning None for empty values."""
    if flag is None:
        return None
    stripped = flag.strip().upper()
    return stripped or None
