# Overview: Seller product endpoints: detail, dashboard listing, stock alerts.

from __future__ import annotations

import logging
from typing import List, Optional

import httpx

from ..client import APIClient, expect_status
from ..models import Product, ProductListItem, StockAlert
from ..services.pagination import CEIL, fetch_all_pages


logger = logging.getLogger(__name__)


def get_product_detail(client: APIClient, product_id: int) -> Product:
    """
    Fetch one product snapshot.

    A 404 is a valid outcome (the product was deleted) and yields a
    snapshot with `deleted=True`; any other non-200 status raises.
    """
    logger.info("===== STEP =====> [GetProductInfo] productId=%s", product_id)
    response = client.get(f"/itemservice/api/beehive-items/{product_id}")
    if response.status_code == 404:
        return Product(id=product_id, deleted=True)
    expect_status(response, 200, message=f"Can not get product detail for product {product_id}")
    return Product.from_dict(response.json())


def get_all_products(
    client: APIClient,
    keyword: str = "",
    branch_id: Optional[int] = None,
    page_size: Optional[int] = None,
) -> List[ProductListItem]:
    """All dashboard list rows matching `keyword`, newest first."""
    size = page_size or client.page_size
    store_id = client.store_id
    logger.info("===== STEP =====> [GetProductList] keyword=%r branchId=%s", keyword, branch_id)

    def fetch_page(page: int) -> httpx.Response:
        response = client.get(
            f"/itemservice/api/store/dashboard/{store_id}/items-v2",
            params={
                "page": page,
                "size": size,
                "bhStatus": "",
                "itemType": "BUSINESS_PRODUCT",
                "sort": "lastModifiedDate,desc",
                "branchIds": "" if branch_id is None else branch_id,
                "searchItemName": keyword,
                "searchType": "PRODUCT_NAME",
            },
        )
        return expect_status(response, 200, message=f"Can not get product list page {page}")

    return fetch_all_pages(
        fetch_page,
        lambda response: [ProductListItem.from_dict(row) for row in response.json()],
        page_size=size,
        convention=CEIL,
        max_workers=client.max_workers,
    )


def search_product_id_by_name(client: APIClient, name: str) -> int:
    """Id of the first listed product named exactly `name`, or 0."""
    for item in get_all_products(client, keyword=name):
        if item.name == name:
            return item.id
    return 0


def get_product_stock_alerts(client: APIClient, product_id: int) -> List[StockAlert]:
    """
    Stock alert thresholds for a product.

    With variations the endpoint also returns a product-level row
    (modelId null), which is dropped.
    """
    logger.info("===== STEP =====> [GetStockAlert] productId=%s", product_id)
    response = client.get(
        f"/itemservice/api/stock-alert/storeId/{client.store_id}/itemId/{product_id}/with-models"
    )
    expect_status(response, 200, message=f"Can not get stock alerts for product {product_id}")
    alerts = [StockAlert.from_dict(row) for row in response.json() or []]
    if len(alerts) > 1:
        alerts = [alert for alert in alerts if alert.model_id is not None]
    return alerts
