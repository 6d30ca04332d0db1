# storefront_qa/config.py
from __future__ import annotations

import os
import time
from dataclasses import dataclass, field


def _env_bool(name: str, default: str) -> bool:
    return os.environ.get(name, default).lower() == "true"


@dataclass
class Config:
    """Suite configuration with environment variable overrides."""

    # Base URLs
    api_host: str = "http://127.0.0.1:8080"
    storefront_url: str = ""

    # Seller account used for fixture setup and verification
    seller_username: str = ""
    seller_password: str = ""

    default_language: str = "vi"

    # Listing endpoints return at most this many rows per page
    page_size: int = 100

    # Timeouts
    request_timeout: float = 30.0

    # Fan-out for multi-page listings
    max_workers: int = 8

    # Currency rounding slack when comparing displayed prices
    price_tolerance: int = 1

    # UI tests
    headless: bool = True

    # Random seed for fixture generation
    seed: int = field(default_factory=lambda: int(time.time()))

    @classmethod
    def from_env(cls) -> "Config":
        return cls(
            api_host=os.environ.get("QA_API_HOST", "http://127.0.0.1:8080"),
            storefront_url=os.environ.get("QA_STOREFRONT_URL", ""),
            seller_username=os.environ.get("QA_SELLER_USERNAME", ""),
            seller_password=os.environ.get("QA_SELLER_PASSWORD", ""),
            default_language=os.environ.get("QA_DEFAULT_LANGUAGE", "vi"),
            page_size=int(os.environ.get("QA_PAGE_SIZE", "100")),
            request_timeout=float(os.environ.get("QA_REQUEST_TIMEOUT", "30")),
            max_workers=int(os.environ.get("QA_MAX_WORKERS", "8")),
            price_tolerance=int(os.environ.get("QA_PRICE_TOLERANCE", "1")),
            headless=_env_bool("QA_HEADLESS", "true"),
            seed=int(os.environ.get("QA_SEED", str(int(time.time())))),
        )
