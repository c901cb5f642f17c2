"""
Page/limit windowing shared by every listing endpoint.

Pages are 1-based. The window for page p of size n is [(p-1)*n, p*n).
Pagination metadata:
    current - the requested page
    total   - number of pages, ceil(items / limit)
    count   - items on this page
    <total_key> - number of items overall (totalApplications, totalContacts, ...)
"""

import math
from typing import List, Sequence, Tuple, TypeVar

T = TypeVar("T")

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100


def page_offset(page: int, limit: int) -> int:
    return (page - 1) * limit


def page_count(total: int, limit: int) -> int:
    return math.ceil(total / limit) if limit > 0 else 0


def build_pagination(page: int, limit: int, count: int, total: int, total_key: str) -> dict:
    return {
        "current": page,
        "total": page_count(total, limit),
        "count": count,
        total_key: total,
    }


def empty_pagination(total_key: str) -> dict:
    """Metadata for a listing that has nothing to page through."""
    return {"current": 1, "total": 0, "count": 0, total_key: 0}


def paginate(items: Sequence[T], page: int, limit: int, total_key: str) -> Tuple[List[T], dict]:
    """Window an in-memory sequence and build its metadata."""
    start = page_offset(page, limit)
    window = list(items[start:start + limit])
    return window, build_pagination(page, limit, len(window), len(items), total_key)
