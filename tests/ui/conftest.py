# Storefront QA UI Tests - Playwright Configuration
#
# Provides browser fixtures and a live seller API client. UI tests only
# run against a real storefront: set QA_STOREFRONT_URL, QA_API_HOST and
# the QA_SELLER_* credentials, plus QA_UI_PRODUCT_ID for the product
# under test.

import os
from pathlib import Path
from typing import Generator

import pytest
from playwright.sync_api import Browser, BrowserContext, Page, sync_playwright

from storefront_qa.api import get_product_detail
from storefront_qa.client import APIClient
from storefront_qa.config import Config
from storefront_qa.models import Product


SLOW_MO = int(os.environ.get("QA_SLOW_MO", "0"))
UI_PRODUCT_ID = int(os.environ.get("QA_UI_PRODUCT_ID", "0"))
UI_BRANCH_ID = int(os.environ.get("QA_UI_BRANCH_ID", "0"))
UI_CUSTOMER_ID = int(os.environ.get("QA_UI_CUSTOMER_ID", "0"))

# Screenshots and traces directory
ARTIFACTS_DIR = Path(__file__).parent.parent / "artifacts"
ARTIFACTS_DIR.mkdir(exist_ok=True)


@pytest.fixture(scope="session")
def ui_config(qa_config: Config) -> Config:
    if not qa_config.storefront_url:
        pytest.skip("QA_STOREFRONT_URL not set; storefront UI tests need a live store")
    if not (qa_config.seller_username and qa_config.seller_password):
        pytest.skip("QA_SELLER_USERNAME / QA_SELLER_PASSWORD not set")
    if not UI_PRODUCT_ID:
        pytest.skip("QA_UI_PRODUCT_ID not set")
    return qa_config


@pytest.fixture(scope="session")
def ui_branch_id() -> int:
    return UI_BRANCH_ID


@pytest.fixture(scope="session")
def ui_customer_id() -> int:
    return UI_CUSTOMER_ID


@pytest.fixture(scope="session")
def live_client(ui_config: Config) -> Generator[APIClient, None, None]:
    """Seller API client against the live backend, used to derive expected values."""
    api_client = APIClient.from_config(ui_config)
    api_client.login(ui_config.seller_username, ui_config.seller_password)
    yield api_client
    api_client.close()


@pytest.fixture(scope="session")
def product_under_test(live_client: APIClient) -> Product:
    product = get_product_detail(live_client, UI_PRODUCT_ID)
    if product.deleted:
        pytest.skip(f"Product {UI_PRODUCT_ID} no longer exists")
    return product


@pytest.fixture(scope="session")
def playwright_instance(ui_config: Config):
    """Create playwright instance for the test session."""
    with sync_playwright() as p:
        yield p


@pytest.fixture(scope="session")
def browser(playwright_instance, ui_config: Config) -> Generator[Browser, None, None]:
    """Create browser for the test session."""
    browser = playwright_instance.chromium.launch(
        headless=ui_config.headless,
        slow_mo=SLOW_MO
    )
    yield browser
    browser.close()


@pytest.fixture
def context(browser: Browser, ui_config: Config) -> Generator[BrowserContext, None, None]:
    """Create browser context for each test."""
    context = browser.new_context(
        viewport={"width": 1280, "height": 720},
        locale="vi-VN" if ui_config.default_language == "vi" else "en-US",
        record_video_dir=str(ARTIFACTS_DIR / "videos") if not ui_config.headless else None
    )
    yield context
    context.close()


@pytest.fixture
def page(context: BrowserContext, request) -> Generator[Page, None, None]:
    """Create page for each test; screenshot it when the test fails."""
    page = context.new_page()
    yield page
    take_screenshot_on_failure(page, request)
    page.close()


@pytest.fixture
def product_page(page: Page, ui_config: Config, product_under_test: Product) -> Page:
    """Storefront product detail page for the product under test."""
    page.goto(f"{ui_config.storefront_url.rstrip('/')}/product/{product_under_test.id}")
    page.wait_for_selector(".loader", state="hidden", timeout=30000)
    return page


def take_screenshot_on_failure(page: Page, request):
    """Take screenshot when test fails."""
    report = getattr(request.node, "rep_call", None)
    if report is not None and report.failed:
        screenshot_path = ARTIFACTS_DIR / f"{request.node.name}.png"
        page.screenshot(path=str(screenshot_path))
        print(f"Screenshot saved: {screenshot_path}")


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Hook to capture test results for screenshot on failure."""
    outcome = yield
    rep = outcome.get_result()
    setattr(item, f"rep_{rep.when}", rep)
