"""Pagination engine - fixed-size page slicing"""

import math
from typing import List

from coconut_ledger.domain.models import Page, Record


def total_pages_for(count: int, page_size: int) -> int:
    """Number of pages for count items; never below 1 so 'page 1 of 1' always renders"""
    return max(1, math.ceil(count / page_size))


def paginate(records: List[Record], page_size: int, page_number: int) -> Page:
    """
    Slice one page out of an already filtered and sorted sequence.

    The page number is not clamped here: out-of-range pages come back empty.
    Use clamp_page() on the caller side first.
    """
    if page_size <= 0:
        raise ValueError(f"page_size must be positive, got {page_size}")

    total_pages = total_pages_for(len(records), page_size)
    if page_number < 1:
        items: List[Record] = []
    else:
        start = (page_number - 1) * page_size
        items = list(records[start:start + page_size])

    return Page(
        items=items,
        page_number=page_number,
        total_pages=total_pages,
        total_items=len(records),
    )


def clamp_page(page_number: int, total_pages: int) -> int:
    """Clamp a requested page into [1, total_pages]"""
    return min(max(page_number, 1), max(total_pages, 1))
