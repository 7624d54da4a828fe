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
"""Page request and page envelope used by the paginated queries."""
import math
from typing import Callable, Generic, List, TypeVar

import attr
from sqlalchemy.orm import Query

from custody_api.utils.types import T

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 1000

U = TypeVar("U")


def _validate_page_number(_instance: "PageRequest", _attribute: attr.Attribute, value: int) -> None:
    if value < 0:
        raise ValueError(f"Page number must not be negative, found [{value}]")


def _validate_page_size(_instance: "PageRequest", _attribute: attr.Attribute, value: int) -> None:
    if not 1 <= value <= MAX_PAGE_SIZE:
        raise ValueError(
            f"Page size must be between 1 and {MAX_PAGE_SIZE}, found [{value}]"
        )


@attr.s(frozen=True)
class PageRequest:
    """A zero-based page number and a page size."""

    page: int = attr.ib(default=0, validator=_validate_page_number)
    size: int = attr.ib(default=DEFAULT_PAGE_SIZE, validator=_validate_page_size)

    @property
    def offset(self) -> int:
        return self.page * self.size


@attr.s(frozen=True)
class Page(Generic[T]):
    """One page of results, along with the request that produced it and the
    total number of elements across all pages."""

    content: List[T] = attr.ib()
    page_request: PageRequest = attr.ib()
    total_elements: int = attr.ib()

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_elements / self.page_request.size)

    def map(self, fn: Callable[[T], U]) -> "Page[U]":
        return self.with_content([fn(item) for item in self.content])

    def with_content(self, content: List[U]) -> "Page[U]":
        """Returns a page with the same request and total element count but
        different content."""
        return Page(
            content=content,
            page_request=self.page_request,
            total_elements=self.total_elements,
        )


def paginate(query: Query, page_request: PageRequest) -> Page:
    """Runs |query| for a single page of rows. The total element count ignores
    the page bounds."""
    total_elements = query.order_by(None).count()
    content = query.offset(page_request.offset).limit(page_request.size).all()
    return Page(
        content=content, page_request=page_request, total_elements=total_elements
    )
