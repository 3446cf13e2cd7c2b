"""Paging request and result models shared by repositories and services."""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import Any, Generic, Literal, TypeVar

from pydantic import BaseModel, Field, computed_field

T = TypeVar("T")
U = TypeVar("U")


class PageRequest(BaseModel):
    """A request for one page of a sorted result set.

    Pages are zero-based. ``sort`` names a column of the queried table;
    when it is omitted results are ordered by id.
    """

    page: int = Field(default=0, ge=0, description="Zero-based page number")
    size: int = Field(default=12, ge=1, description="Number of elements per page")
    sort: str | None = Field(default=None, description="Column to order by")
    direction: Literal["asc", "desc"] = Field(default="asc", description="Sort direction")

    @classmethod
    def of(cls, page: int, size: int, sort: str | None = None, direction: str = "asc") -> PageRequest:
        return cls(page=page, size=size, sort=sort, direction=direction)

    @property
    def offset(self) -> int:
        return self.page * self.size


class Page(BaseModel, Generic[T]):
    """One page of results together with the metadata of the whole set."""

    content: list[T] = Field(default_factory=list)
    number: int = Field(default=0, description="Zero-based page number")
    size: int = Field(default=0, description="Requested page size")
    total_elements: int = Field(default=0, description="Elements across all pages")

    @computed_field
    @property
    def total_pages(self) -> int:
        if self.size == 0:
            return 1
        return math.ceil(self.total_elements / self.size)

    @computed_field
    @property
    def number_of_elements(self) -> int:
        return len(self.content)

    @computed_field
    @property
    def first(self) -> bool:
        return self.number == 0

    @computed_field
    @property
    def last(self) -> bool:
        return self.number + 1 >= self.total_pages

    @classmethod
    def of(cls, content: list[Any], page_request: PageRequest | None = None, total: int | None = None) -> Page:
        """Build a page; without a request the content is a single page of everything."""
        if page_request is None:
            return cls(content=content, number=0, size=len(content), total_elements=len(content))
        return cls(
            content=content,
            number=page_request.page,
            size=page_request.size,
            total_elements=len(content) if total is None else total,
        )

    def map(self, converter: Callable[[T], U]) -> Page[U]:
        """Return a page with converted content and identical metadata."""
        return Page(
            content=[converter(item) for item in self.content],
            number=self.number,
            size=self.size,
            total_elements=self.total_elements,
        )
