# Storefront QA Test Suite - Shared Configuration and Fixtures
#
# This module provides:
# - Suite configuration (storefront_qa.Config from QA_* environment variables)
# - Seeded randomness for fixture generation
# - An in-process stub backend mounted into APIClient via httpx.WSGITransport
# - Snapshot builders for products, variations and ledger rows
# - Marker registration

import random
from typing import Any, Dict, Generator, List, Optional, Sequence

import httpx
import pytest

from storefront_qa.client import APIClient
from storefront_qa.config import Config
from storefront_qa.models import Product
from tests.stub_backend import SELLER_PASSWORD, SELLER_USERNAME, StubData, create_app


STUB_BASE_URL = "http://stub.storefront.test"


# =============================================================================
# SNAPSHOT BUILDERS
# =============================================================================

def branch_row(branch_id: int, total: int, sold: int = 0) -> Dict[str, Any]:
    return {"branchId": branch_id, "totalItem": total, "soldItem": sold, "sku": f"SKU-{branch_id}", "status": "ACTIVE"}


def variation_row(
    model_id: int,
    values: Dict[str, str],
    labels: Dict[str, str],
    org_price: int = 20000,
    new_price: int = 20000,
    branches: Optional[List[Dict[str, Any]]] = None,
    status: str = "ACTIVE",
) -> Dict[str, Any]:
    """
    Raw variation payload.

    `values` and `labels` map language -> pipe-joined text, e.g.
    {"vi": "Đỏ|L"} / {"vi": "Màu|Cỡ"}.
    """
    return {
        "id": model_id,
        "name": next(iter(values.values()), ""),
        "sku": f"SKU-M{model_id}",
        "orgPrice": org_price,
        "newPrice": new_price,
        "costPrice": 0,
        "label": next(iter(labels.values()), ""),
        "barcode": f"BC{model_id}",
        "status": status,
        "branches": branches or [],
        "languages": [
            {
                "language": language,
                "name": value,
                "label": labels.get(language, ""),
                "description": f"[{language}] description {model_id}",
                "versionName": f"[{language}] version {model_id}",
            }
            for language, value in values.items()
        ],
    }


def product_row(
    product_id: int,
    names: Optional[Dict[str, str]] = None,
    org_price: int = 20000,
    new_price: int = 20000,
    branches: Optional[List[Dict[str, Any]]] = None,
    models: Optional[List[Dict[str, Any]]] = None,
    inventory_manage_type: str = "PRODUCT",
) -> Dict[str, Any]:
    """Raw product detail payload, the shape returned by the product detail endpoint."""
    names = names or {"vi": f"Sản phẩm {product_id}", "en": f"Product {product_id}"}
    return {
        "id": product_id,
        "name": next(iter(names.values())),
        "currency": "VND",
        "orgPrice": org_price,
        "newPrice": new_price,
        "costPrice": 0,
        "hasModel": bool(models),
        "models": models or [],
        "branches": branches or [],
        "languages": [
            {"language": language, "name": name, "description": f"[{language}] product description"}
            for language, name in names.items()
        ],
        "inventoryManageType": inventory_manage_type,
        "bhStatus": "ACTIVE",
        "onWeb": True,
        "onApp": True,
        "inStore": True,
        "inGosocial": True,
    }


def two_by_two_product(product_id: int = 501, branch_id: int = 11) -> Product:
    """Product with groups Color|Size and 4 variations, all stocked at `branch_id`."""
    combos = [("Red", "S"), ("Red", "L"), ("Blue", "S"), ("Blue", "L")]
    models = [
        variation_row(
            model_id=9000 + index,
            values={"vi": f"vi_{color}|vi_{size}", "en": f"{color}|{size}"},
            labels={"vi": "Màu|Cỡ", "en": "Color|Size"},
            org_price=30000 + index * 1000,
            new_price=25000 + index * 1000,
            branches=[branch_row(branch_id, total=5 + index, sold=index)],
        )
        for index, (color, size) in enumerate(combos)
    ]
    return Product.from_dict(product_row(product_id, models=models))


def ledger_row(
    order_id: Optional[str],
    action_type: str,
    stock_change: int = -1,
    remaining_stock: int = 10,
    product_name: str = "Sản phẩm",
) -> Dict[str, Any]:
    return {
        "id": f"H-{order_id or 'none'}-{action_type}",
        "productName": product_name,
        "stockChange": stock_change,
        "remainingStock": remaining_stock,
        "inventoryType": "IN_STOCK",
        "actionType": action_type,
        "orderId": order_id,
        "operator": "seller",
        "hasConversion": False,
    }


def list_rows(count: int, start_id: int = 1) -> List[Dict[str, Any]]:
    return [{"id": start_id + i, "name": f"Product {start_id + i}", "remainingStock": i} for i in range(count)]


def ids(rows: Sequence[Any]) -> List[int]:
    return [row.id for row in rows]


# =============================================================================
# PYTEST FIXTURES
# =============================================================================

@pytest.fixture(scope="session")
def qa_config() -> Config:
    """Provide suite configuration."""
    return Config.from_env()


@pytest.fixture
def rng(qa_config: Config) -> random.Random:
    """Seeded randomness; rerun with QA_SEED=<seed> to reproduce a failure."""
    return random.Random(qa_config.seed)


@pytest.fixture
def stub_data() -> StubData:
    """Fresh in-memory backend state for each test."""
    return StubData()


@pytest.fixture
def stub_app(stub_data: StubData):
    return create_app(stub_data)


@pytest.fixture
def client(stub_app, qa_config: Config) -> Generator[APIClient, None, None]:
    """
    Provide an unauthenticated API client bound to the stub backend.
    """
    api_client = APIClient(
        STUB_BASE_URL,
        timeout=qa_config.request_timeout,
        transport=httpx.WSGITransport(app=stub_app),
        page_size=100,
        max_workers=qa_config.max_workers,
    )
    yield api_client
    api_client.close()


@pytest.fixture
def seller_client(client: APIClient) -> APIClient:
    """Provide an API client logged in as the stub seller."""
    client.login(SELLER_USERNAME, SELLER_PASSWORD)
    return client


# =============================================================================
# TEST MARKERS
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Pure logic tests, no HTTP")
    config.addinivalue_line("markers", "api: Endpoint wrapper tests against the stub backend")
    config.addinivalue_line("markers", "ui: Storefront UI end-to-end tests")
    config.addinivalue_line("markers", "stress: Load/stress tests")
    config.addinivalue_line("markers", "smoke: Quick smoke tests for critical paths")
    config.addinivalue_line("markers", "pricing: Displayed price resolution tests")
    config.addinivalue_line("markers", "inventory: Stock and reconciliation tests")
    config.addinivalue_line("markers", "variations: Variation generation and consistency tests")
    config.addinivalue_line("markers", "pagination: Multi-page listing tests")
