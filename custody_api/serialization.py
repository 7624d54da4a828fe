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
"""Converts API objects into JSON-ready dictionaries with camel-case keys."""
import datetime
from typing import Any, Dict

import cattrs
from flask import request, url_for

from custody_api.common.str_field_utils import snake_to_camel
from custody_api.persistence.pagination import Page

# Dates are pre-emptively converted to ISO strings. If we don't do this, flask's
# jsonify renders them as RFC 822 datetimes with a GMT timezone.
_converter = cattrs.Converter()
_converter.register_unstructure_hook(datetime.datetime, datetime.datetime.isoformat)
_converter.register_unstructure_hook(datetime.date, datetime.date.isoformat)
_converter.register_unstructure_hook(datetime.time, datetime.time.isoformat)


def _camelize_keys(value: Any) -> Any:
    if isinstance(value, dict):
        return {snake_to_camel(k): _camelize_keys(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_camelize_keys(v) for v in value]
    return value


def to_json(api_object: Any) -> Any:
    """Unstructures an API object (or a list of them) into plain JSON types."""
    return _camelize_keys(_converter.unstructure(api_object))


def page_links(page: Page) -> Dict[str, Dict[str, str]]:
    """Builds navigation links for |page| against the current request's
    endpoint. Every other query argument of the request (filters included) is
    carried over, with the page number replaced and the page size pinned.

    "first" and "prev" are only present when there is an earlier page, "next"
    and "last" only when there is a later one.
    """
    query_args = {
        **request.args.to_dict(),
        "size": page.page_request.size,
    }
    view_args = request.view_args or {}

    def href(page_number: int) -> Dict[str, str]:
        return {
            "href": url_for(
                request.endpoint, **view_args, **{**query_args, "page": page_number}
            )
        }

    number = page.page_request.page
    links: Dict[str, Dict[str, str]] = {}
    if number > 0:
        links["first"] = href(0)
        links["prev"] = href(max(min(number, page.total_pages) - 1, 0))
    links["self"] = href(number)
    if number + 1 < page.total_pages:
        links["next"] = href(number + 1)
        links["last"] = href(page.total_pages - 1)
    return links


def page_to_json(page: Page) -> Dict[str, Any]:
    """Renders a page along with its navigation links. Must be called while
    handling the request that produced the page."""
    return {
        "content": to_json(page.content),
        "page": {
            "size": page.page_request.size,
            "number": page.page_request.page,
            "totalElements": page.total_elements,
            "totalPages": page.total_pages,
        },
        "_links": page_links(page),
    }
