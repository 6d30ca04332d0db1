# Overview: UI-vs-API comparisons that raise VerificationFailure with localizing context.

from __future__ import annotations

import logging
import re
from typing import Optional

from ..errors import VerificationFailure
from .pricing_service import (
    SOURCE_CAMPAIGN, SOURCE_FLASH_SALE, SOURCE_WHOLESALE, PriceResolution,
)


logger = logging.getLogger(__name__)

_NON_DIGITS = re.compile(r"\D+")


def parse_price_text(text: str) -> int:
    """Strip currency symbols and separators: "1.234.000 đ" -> 1234000."""
    digits = _NON_DIGITS.sub("", text or "")
    if not digits:
        raise ValueError(f"No digits in price text {text!r}")
    return int(digits)


def _location(branch_name: str, variation_label: str, language: str = "") -> str:
    parts = []
    if branch_name:
        parts.append(f"[Branch name: {branch_name}]")
    if variation_label:
        parts.append(f"[Variation: {variation_label}]")
    if language:
        parts.append(f"[Language: {language}]")
    return " ".join(parts)


def verify_displayed_prices(
    expected: PriceResolution,
    actual_listing: Optional[int],
    actual_selling: int,
    branch_name: str = "",
    variation_label: str = "",
    tolerance: int = 1,
):
    """
    Compare storefront prices with the resolved expectation.

    RULES:
    - Listing price is only shown (and checked, exactly) when it differs from the selling price
    - Selling price must be within `tolerance` of the expected value
    """
    location = _location(branch_name, variation_label)

    if expected.listing_price != expected.selling_price:
        if actual_listing != expected.listing_price:
            raise VerificationFailure(
                scenario=f"Storefront listing price ({expected.source})",
                expected=f"{expected.listing_price:,}",
                actual=f"{actual_listing:,}" if actual_listing is not None else "not displayed",
                likely_cause="Listing price changed after fixture setup or strike-through price not rendered",
                location=location,
            )
    else:
        logger.info("%s No discount product (listing price = selling price)", location)

    if abs(actual_selling - expected.selling_price) > tolerance:
        raise VerificationFailure(
            scenario=f"Storefront selling price ({expected.source})",
            expected=f"{expected.selling_price:,} ±{tolerance}",
            actual=f"{actual_selling:,}",
            likely_cause=_likely_price_cause(expected),
            location=location,
            extra_context={"min_quantity": expected.min_quantity} if expected.min_quantity is not None else None,
        )

    logger.info("%s Checked product prices.", location)


def _likely_price_cause(expected: PriceResolution) -> str:
    if expected.source == SOURCE_FLASH_SALE:
        return "Flash sale ended, or storefront did not apply it"
    if expected.source == SOURCE_CAMPAIGN:
        return "Discount campaign not applied to this branch/customer, or discount formula changed"
    if expected.source == SOURCE_WHOLESALE:
        return "Cart quantity below the wholesale minimum, or customer segment not eligible"
    return "Selling price changed after fixture setup"


def verify_text(
    scenario: str,
    expected: str,
    actual: str,
    branch_name: str = "",
    variation_label: str = "",
    language: str = "",
):
    """Exact text comparison (names, descriptions, variation labels)."""
    if expected != actual:
        raise VerificationFailure(
            scenario=scenario,
            expected=repr(expected),
            actual=repr(actual),
            likely_cause="Translation missing for this language or stale product snapshot",
            location=_location(branch_name, variation_label, language),
        )


def verify_stock(
    expected: int,
    actual: int,
    branch_name: str = "",
    variation_label: str = "",
):
    if expected != actual:
        raise VerificationFailure(
            scenario="Displayed stock quantity",
            expected=str(expected),
            actual=str(actual),
            likely_cause="Stock changed by another order/transfer, or hide-stock setting on",
            location=_location(branch_name, variation_label),
        )
