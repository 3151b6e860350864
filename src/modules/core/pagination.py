"""Zero-based page windows over Django querysets.

``paginate`` wraps ``django.core.paginator.Paginator`` with a zero-based
index.  An out-of-range page does not raise: the caller gets an empty
window with correct totals.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Generic, List, TypeVar

from django.core.paginator import EmptyPage, Paginator
from django.db import models

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """One window of an ordered result set."""

    items: List[T] = field(default_factory=list)
    number: int = 0
    size: int = 0
    total_elements: int = 0

    @property
    def total_pages(self) -> int:
        if self.size <= 0:
            return 0
        return math.ceil(self.total_elements / self.size)


def paginate(queryset: models.QuerySet, page: int, size: int) -> Page:
    """Return window ``page`` (zero-based) of ``size`` rows from ``queryset``.

    The queryset must already be ordered.
    """
    if page < 0:
        raise ValueError("Page index must not be negative.")
    if size < 1:
        raise ValueError("Page size must be at least one.")

    paginator = Paginator(queryset, size)
    try:
        items = list(paginator.page(page + 1).object_list)
    except EmptyPage:
        items = []
    return Page(items=items, number=page, size=size, total_elements=paginator.count)
