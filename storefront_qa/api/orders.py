# Overview: Order detail and return-order listing endpoints.

from __future__ import annotations

import logging
from typing import List, Optional

import httpx

from ..client import APIClient, expect_status
from ..models import OrderInfo, ReturnOrder
from ..services.pagination import CEIL, fetch_all_pages


logger = logging.getLogger(__name__)


def get_order_detail(client: APIClient, order_id: int) -> OrderInfo:
    logger.info("===== STEP =====> [GetOrderDetail] orderId=%s", order_id)
    response = client.get(
        f"/orderservice3/api/gs/order-details/ids/{order_id}",
        params={"getLoyaltyEarningPoint": "true"},
    )
    expect_status(response, 200, message=f"Can not get order detail for order {order_id}")
    return OrderInfo.from_dict(response.json())


def get_all_return_orders(
    client: APIClient,
    branch_ids: str = "",
    search_keyword: str = "",
    page_size: Optional[int] = None,
) -> List[ReturnOrder]:
    size = page_size or client.page_size
    store_id = client.store_id
    logger.info("===== STEP =====> [GetReturnOrderList] keyword=%r branchIds=%r", search_keyword, branch_ids)

    def fetch_page(page: int) -> httpx.Response:
        response = client.get(
            f"/orderservices2/api/return-order/{store_id}",
            params={
                "page": page,
                "size": size,
                "searchKeyword": search_keyword,
                "searchType": "ORDER_ID",
                "branchId": branch_ids,
                "restock": "",
                "status": "",
                "refundStatus": "",
                "staffName": "",
            },
        )
        return expect_status(response, 200, message=f"Can not get return order page {page}")

    return fetch_all_pages(
        fetch_page,
        lambda response: [ReturnOrder.from_dict(row) for row in response.json()],
        page_size=size,
        convention=CEIL,
        max_workers=client.max_workers,
    )
