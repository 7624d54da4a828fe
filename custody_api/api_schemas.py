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
""" Contains Marshmallow schemas for the query parameters of our API routes """
from functools import wraps
from typing import Any, Callable, Dict, List, Type

from flask import g, request
from marshmallow import (
    EXCLUDE,
    Schema,
    ValidationError,
    fields,
    post_load,
    validate,
    validates_schema,
)
from marshmallow.fields import Field

from custody_api.common.str_field_utils import snake_to_camel
from custody_api.persistence.pagination import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    PageRequest,
)


class CamelCaseSchema(Schema):
    """
    Schema that uses camel-case for its external representation
    and snake-case for its internal representation.
    """

    def on_bind_field(self, field_name: str, field_obj: Field) -> None:
        field_obj.data_key = snake_to_camel(field_obj.data_key or field_name)


class PageRequestSchema(CamelCaseSchema):
    page = fields.Integer(load_default=0, validate=validate.Range(min=0))
    size = fields.Integer(
        load_default=DEFAULT_PAGE_SIZE, validate=validate.Range(min=1, max=MAX_PAGE_SIZE)
    )

    @post_load
    def make_page_request(self, data: Dict[str, Any], **_kwargs: Any) -> Dict[str, Any]:
        page_request = PageRequest(page=data.pop("page"), size=data.pop("size"))
        return {**data, "page_request": page_request}


class MovementsQuerySchema(PageRequestSchema):
    from_datetime = fields.NaiveDateTime(data_key="from", load_default=None)
    to_datetime = fields.NaiveDateTime(data_key="to", load_default=None)
    booking_id = fields.Integer(load_default=None)

    @validates_schema
    def validate_time_range(self, data: Dict[str, Any], **_kwargs: Any) -> None:
        from_datetime = data.get("from_datetime")
        to_datetime = data.get("to_datetime")
        if from_datetime and to_datetime and from_datetime > to_datetime:
            raise ValidationError("Must not be later than to.", field_name="from")


def load_query_schema(query_schema: Type[Schema], source_data: Dict[str, Any]) -> Dict:
    # Unrecognized parameters (e.g. cache busters) are ignored rather than rejected
    return query_schema(unknown=EXCLUDE).load(source_data)


def requires_query_schema(query_schema: Type[Schema]) -> Callable:
    def inner(route: Callable) -> Callable:
        @wraps(route)
        def decorated(*args: List[Any], **kwargs: Dict[str, Any]) -> Any:
            g.query_data = load_query_schema(query_schema, request.args.to_dict())

            return route(*args, **kwargs)

        return decorated

    return inner
