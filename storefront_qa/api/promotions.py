# Overview: Storefront promotion lookups: discount campaign, flash sale, wholesale tier.

from __future__ import annotations

import logging
from typing import Optional

from ..client import APIClient, expect_status
from ..models import CampaignInfo, FlashSaleInfo, WholesaleInfo


logger = logging.getLogger(__name__)


def get_campaign_info(client: APIClient, item_id: int, branch_id: int, customer_id: int) -> Optional[CampaignInfo]:
    """Discount campaign for the item at a branch, or None when no campaign applies."""
    logger.info("===== STEP =====> [GetCampaignInfo] itemId=%s branchId=%s customerId=%s", item_id, branch_id, customer_id)
    response = client.post(
        f"/orderservices2/api/check-product-branch-wholesale/{client.store_id}/{customer_id}",
        json={"lstProduct": [{"itemId": item_id, "branchId": branch_id}]},
        headers={"platform": "ANDROID"},
    )
    expect_status(response, 200, message=f"Can not get campaign info for item {item_id}")
    rows = response.json() or []
    return CampaignInfo.from_dict(rows[0]) if rows else None


def get_flash_sale_info(client: APIClient, item_id: int, model_id: Optional[int] = None) -> Optional[FlashSaleInfo]:
    """Flash sale covering the item (or one of its models); None when the body is empty."""
    logger.info("===== STEP =====> [GetFlashSaleInfo] itemId=%s modelId=%s", item_id, model_id)
    response = client.get(
        f"/itemservice/api/campaigns/product/{item_id}",
        params={"modelId": "" if model_id is None else model_id},
    )
    expect_status(response, 200, message=f"Can not get flash sale info for item {item_id}")
    if not response.content.strip():
        return None
    data = response.json()
    return FlashSaleInfo.from_dict(data) if data else None


def get_wholesale_info(
    client: APIClient,
    item_id: int,
    customer_id: int,
    model_id: Optional[int] = None,
) -> Optional[WholesaleInfo]:
    logger.info("===== STEP =====> [GetWholesaleInfo] itemId=%s modelId=%s customerId=%s", item_id, model_id, customer_id)
    response = client.get(
        f"/itemservice/api/item/wholesale-pricing/get-list-store-front/{client.store_id}/{item_id}/GOSELL",
        params={"userId": customer_id, "modelId": "" if model_id is None else model_id},
    )
    expect_status(response, 200, message=f"Can not get wholesale info for item {item_id}")
    rows = response.json() or []
    return WholesaleInfo.from_dict(rows[0]) if rows else None
