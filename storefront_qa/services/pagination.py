# Overview: Multi-page listing retrieval driven by the X-Total-Count header.

"""
Pagination fan-out.

PROTOCOL:
1. Page 0 is requested first and its X-Total-Count header read
2. The page count is computed with the endpoint's own convention
3. Remaining pages are requested concurrently on a thread pool
4. Items are concatenated in page order, without de-duplication

CONVENTIONS (kept per endpoint, never unified):
- "ceil":  pages 0 .. ceil(total / size) - 1
- "floor": pages 0 .. total // size (one trailing page that may be empty)

Any failing page aborts the whole retrieval; the first error raised is
propagated and no partial list is returned.
"""
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable, Dict, List, TypeVar

import httpx

from ..client import total_count


logger = logging.getLogger(__name__)

T = TypeVar("T")

CEIL = "ceil"
FLOOR = "floor"


def page_numbers(total: int, page_size: int, convention: str = CEIL) -> range:
    """All page indexes to request for `total` rows, page 0 included."""
    if page_size <= 0:
        raise ValueError("page_size must be positive")
    if convention == CEIL:
        return range(0, (total + page_size - 1) // page_size)
    if convention == FLOOR:
        return range(0, total // page_size + 1)
    raise ValueError(f"Unknown pagination convention: {convention}")


def fetch_all_pages(
    fetch_page: Callable[[int], httpx.Response],
    parse_page: Callable[[httpx.Response], List[T]],
    page_size: int,
    convention: str = CEIL,
    max_workers: int = 8,
) -> List[T]:
    """
    Fetch every page of a listing and return the merged items.

    `fetch_page(page)` issues one request and must raise on failure;
    `parse_page(response)` turns one response into its item list.
    """
    first = fetch_page(0)
    total = total_count(first)
    pages = page_numbers(total, page_size, convention)
    remaining = [page for page in pages if page != 0]

    logger.debug("Listing reports %s rows; fetching %s more page(s)", total, len(remaining))

    results: Dict[int, List[T]] = {0: parse_page(first)}
    if remaining:
        with ThreadPoolExecutor(max_workers=max(1, min(max_workers, len(remaining)))) as executor:
            futures = {executor.submit(fetch_page, page): page for page in remaining}
            for future in as_completed(futures):
                # result() re-raises the page's exception; the executor then
                # waits for in-flight pages before the error leaves this block.
                results[futures[future]] = parse_page(future.result())

    items: List[T] = []
    for page in sorted(results):
        items.extend(results[page])
    return items
