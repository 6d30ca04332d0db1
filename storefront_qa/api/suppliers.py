# Overview: Supplier purchase order detail endpoint.

from __future__ import annotations

import logging

from ..client import APIClient, expect_status
from ..models import PurchaseOrderInfo


logger = logging.getLogger(__name__)


def get_purchase_order_detail(client: APIClient, purchase_order_id: int) -> PurchaseOrderInfo:
    logger.info("===== STEP =====> [GetPurchaseOrderDetail] purchaseOrderId=%s", purchase_order_id)
    response = client.get(f"/itemservice/api/purchase-orders/{purchase_order_id}")
    expect_status(response, 200, message=f"Can not get purchase order detail for {purchase_order_id}")
    return PurchaseOrderInfo.from_dict(response.json())
