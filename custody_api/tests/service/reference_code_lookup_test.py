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
"""Implements tests for the ReferenceCodeLookup."""
from unittest import TestCase

import pytest
from mock import MagicMock, patch

from custody_api.common.constants.reference_domain import ReferenceDomain
from custody_api.models import KeyValue
from custody_api.persistence.database.session_factory import SessionFactory
from custody_api.service.reference_code_lookup import ReferenceCodeLookup
from custody_api.tests.custody_test_helpers import generate_fake_reference_code
from custody_api.tests.utils import fakes


@pytest.mark.uses_db
class TestReferenceCodeLookup(TestCase):
    """Implements tests for the ReferenceCodeLookup."""

    def setUp(self) -> None:
        self.addCleanup(fakes.teardown_in_memory_sqlite_databases)
        self.db_url = fakes.use_in_memory_sqlite_database()
        with SessionFactory.using_database(self.db_url) as session:
            session.add_all(
                [
                    generate_fake_reference_code("ETHNICITY", "W1", "White British"),
                    generate_fake_reference_code("SEX", "F", "Female"),
                ]
            )

    def test_key_value_of(self) -> None:
        with SessionFactory.using_database(self.db_url, autocommit=False) as session:
            lookup = ReferenceCodeLookup(session)
            self.assertEqual(
                KeyValue(code="W1", description="White British"),
                lookup.key_value_of("W1", ReferenceDomain.ETHNICITY),
            )
            self.assertEqual(
                KeyValue(code="F", description="Female"),
                lookup.key_value_of("F", ReferenceDomain.SEX),
            )

    def test_code_in_other_domain_is_absent(self) -> None:
        with SessionFactory.using_database(self.db_url, autocommit=False) as session:
            self.assertIsNone(
                ReferenceCodeLookup(session).key_value_of("W1", ReferenceDomain.SEX)
            )

    @patch(
        "custody_api.service.reference_code_lookup.ReferenceCodeQuerier.fetch_reference_code"
    )
    def test_unset_code_does_not_query(self, mock_fetch: MagicMock) -> None:
        lookup = ReferenceCodeLookup(MagicMock())

        self.assertIsNone(lookup.key_value_of(None, ReferenceDomain.ETHNICITY))
        mock_fetch.assert_not_called()
