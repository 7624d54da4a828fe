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
"""Resolves coded values against the REFERENCE_CODES table."""
import logging
from typing import Optional

from sqlalchemy.orm import Session

from custody_api.common.constants.reference_domain import ReferenceDomain
from custody_api.models import KeyValue
from custody_api.persistence.querier import ReferenceCodeQuerier


class ReferenceCodeLookup:
    """Looks up the description of a code within a domain. Every call queries
    the database; results are not cached."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def key_value_of(
        self, code: Optional[str], domain: ReferenceDomain
    ) -> Optional[KeyValue]:
        """Returns the (code, description) pair for |code| in |domain|, or None
        if the code is unset or has no matching reference row."""
        if code is None:
            return None

        reference_code = ReferenceCodeQuerier.fetch_reference_code(
            self.session, domain, code
        )
        if reference_code is None:
            logging.info("No reference code found for [%s] in domain [%s]", code, domain.value)
            return None

        return KeyValue(code=reference_code.code, description=reference_code.description)
