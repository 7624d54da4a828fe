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
"""Tests for PageRequest and Page."""
from unittest import TestCase

from custody_api.persistence.pagination import MAX_PAGE_SIZE, Page, PageRequest


class TestPageRequest(TestCase):
    def test_defaults(self) -> None:
        page_request = PageRequest()
        self.assertEqual(0, page_request.page)
        self.assertEqual(20, page_request.size)
        self.assertEqual(0, page_request.offset)

    def test_offset(self) -> None:
        self.assertEqual(30, PageRequest(page=3, size=10).offset)

    def test_invalid(self) -> None:
        with self.assertRaises(ValueError):
            PageRequest(page=-1)
        with self.assertRaises(ValueError):
            PageRequest(size=0)
        with self.assertRaises(ValueError):
            PageRequest(size=MAX_PAGE_SIZE + 1)


class TestPage(TestCase):
    """Tests for Page."""

    def test_total_pages(self) -> None:
        self.assertEqual(0, Page([], PageRequest(size=10), 0).total_pages)
        self.assertEqual(1, Page([1], PageRequest(size=10), 10).total_pages)
        self.assertEqual(2, Page([1], PageRequest(size=10), 11).total_pages)

    def test_map_keeps_request_and_total(self) -> None:
        page = Page([1, 2], PageRequest(page=1, size=2), 4)

        mapped = page.map(str)

        self.assertEqual(["1", "2"], mapped.content)
        self.assertEqual(page.page_request, mapped.page_request)
        self.assertEqual(4, mapped.total_elements)
