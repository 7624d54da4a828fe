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
"""Implements tests for the query parameter schemas."""
import datetime
from typing import Any, Callable, Dict, List, Optional, Type
from unittest import TestCase

from marshmallow import Schema, ValidationError

from custody_api.api_schemas import (
    MovementsQuerySchema,
    PageRequestSchema,
    load_query_schema,
)
from custody_api.persistence.pagination import PageRequest


class SchemaTestCase(TestCase):
    schema: Type[Schema]


def valid_schema_test(data: Dict[Any, Any]) -> Callable:
    def inner(self: SchemaTestCase) -> None:
        schema = self.schema()
        self.assertIsNotNone(schema.load(data), schema.validate(data))

    return inner


def invalid_schema_test(
    data: Dict[Any, Any], invalid_keys: Optional[List[str]] = None
) -> Callable:
    invalid_keys = [] if invalid_keys is None else invalid_keys

    def inner(self: SchemaTestCase) -> None:
        schema = self.schema()
        with self.assertRaises(ValidationError) as exception_context:
            schema.load(data)

        if invalid_keys:
            for key in invalid_keys:
                # Catch keys in tests that have not been updated when fields are renamed
                self.assertIn(key, schema.fields.keys())
                self.assertIn(
                    schema.fields[key].data_key, exception_context.exception.messages
                )

    return inner


class TestPageRequestSchema(SchemaTestCase):
    """Tests for PageRequestSchema"""

    schema = PageRequestSchema

    test_no_params = valid_schema_test({})
    test_valid = valid_schema_test({"page": "2", "size": "50"})
    test_negative_page = invalid_schema_test({"page": "-1"}, invalid_keys=["page"])
    test_zero_size = invalid_schema_test({"size": "0"}, invalid_keys=["size"])
    test_oversized = invalid_schema_test({"size": "1001"}, invalid_keys=["size"])
    test_not_a_number = invalid_schema_test({"page": "one"}, invalid_keys=["page"])

    def test_defaults(self) -> None:
        self.assertEqual(
            {"page_request": PageRequest(page=0, size=20)}, PageRequestSchema().load({})
        )


class TestMovementsQuerySchema(SchemaTestCase):
    """Tests for MovementsQuerySchema"""

    schema = MovementsQuerySchema

    test_no_params = valid_schema_test({})
    test_valid = valid_schema_test(
        {
            "from": "2017-01-01T00:00:00",
            "to": "2017-02-01T12:30:00",
            "bookingId": "-1",
            "page": "1",
        }
    )
    test_bad_from = invalid_schema_test({"from": "yesterday"}, invalid_keys=["from_datetime"])
    test_bad_booking_id = invalid_schema_test(
        {"bookingId": "abc"}, invalid_keys=["booking_id"]
    )
    test_from_later_than_to = invalid_schema_test(
        {"from": "2017-03-01T00:00:00", "to": "2017-01-01T00:00:00"},
        invalid_keys=["from_datetime"],
    )
    test_from_equal_to_to = valid_schema_test(
        {"from": "2017-01-01T00:00:00", "to": "2017-01-01T00:00:00"}
    )

    def test_load(self) -> None:
        self.assertEqual(
            {
                "from_datetime": datetime.datetime(2017, 1, 1),
                "to_datetime": None,
                "booking_id": -1,
                "page_request": PageRequest(page=1, size=5),
            },
            MovementsQuerySchema().load(
                {"from": "2017-01-01T00:00:00", "bookingId": "-1", "page": "1", "size": "5"}
            ),
        )


class TestLoadQuerySchema(TestCase):
    def test_unknown_params_are_ignored(self) -> None:
        self.assertEqual(
            {"page_request": PageRequest()},
            load_query_schema(PageRequestSchema, {"cacheBuster": "123"}),
        )
