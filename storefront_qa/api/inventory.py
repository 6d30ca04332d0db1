# Overview: Inventory ledger search endpoint.

from __future__ import annotations

import logging
from typing import List, Optional

import httpx

from ..client import APIClient, expect_status
from ..models import InventoryHistoryEntry
from ..services.pagination import FLOOR, fetch_all_pages


logger = logging.getLogger(__name__)


def get_all_inventory_history(
    client: APIClient,
    keyword: str,
    branch_ids: str = "",
    page_size: Optional[int] = None,
) -> List[InventoryHistoryEntry]:
    """
    Every ledger row matching `keyword` (usually a product name).

    This endpoint pages with the floor convention, so one trailing
    page past the last full page is always requested.
    """
    size = page_size or client.page_size
    store_id = client.store_id
    logger.info("===== STEP =====> [GetInventoryHistory] keyword=%r branchIds=%r", keyword, branch_ids)

    def fetch_page(page: int) -> httpx.Response:
        response = client.get(
            f"/itemservice/api/inventory-search/{store_id}",
            params={"search": keyword, "branchIds": branch_ids, "page": page, "size": size},
            headers={"langkey": "vi"},
        )
        return expect_status(response, 200, message=f"Can not get inventory history page {page}")

    return fetch_all_pages(
        fetch_page,
        lambda response: [InventoryHistoryEntry.from_dict(row) for row in response.json()],
        page_size=size,
        convention=FLOOR,
        max_workers=client.max_workers,
    )
