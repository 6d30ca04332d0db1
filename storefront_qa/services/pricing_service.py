# Overview: Displayed-price resolution across flash sale, campaign, wholesale and plain prices.

"""
Price resolution.

PRECEDENCE (first match wins):
1. FLASH_SALE: flash sale present with status IN_PROGRESS -> first item's newPrice
2. CAMPAIGN: campaign present -> selling price minus its discount
3. WHOLESALE: wholesale tier present -> tier price, once quantity >= minQuantity
4. SELLING_PRICE: plain selling price

A scheduled (or otherwise not running) flash sale is inert. Missing
overlays are not errors; they fall through to the next level.

Resolution is a pure function of the PricingContext. Fetching the
overlays is done separately by build_pricing_context().
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..api.promotions import get_campaign_info, get_flash_sale_info, get_wholesale_info
from ..client import APIClient
from ..errors import InvariantViolation
from ..models import DISCOUNT_FIXED_AMOUNT, CampaignInfo, PricingContext, Product
from . import catalog_service


logger = logging.getLogger(__name__)

SOURCE_FLASH_SALE = "FLASH_SALE"
SOURCE_CAMPAIGN = "CAMPAIGN"
SOURCE_WHOLESALE = "WHOLESALE"
SOURCE_SELLING_PRICE = "SELLING_PRICE"


@dataclass(frozen=True)
class PriceResolution:
    """
    Expected storefront prices.

    `min_quantity` is set only for WHOLESALE: the cart quantity a UI must
    enter before `selling_price` is shown.
    """
    source: str
    listing_price: int
    selling_price: int
    min_quantity: Optional[int] = None


def campaign_price(campaign: CampaignInfo, selling_price: int) -> int:
    """FIXED_AMOUNT subtracts (floored at 0); any other type is a percentage, floor-divided."""
    discount = campaign.discount_value
    if campaign.discount_type == DISCOUNT_FIXED_AMOUNT:
        return max(selling_price - discount, 0)
    return selling_price * (100 - discount) // 100


def resolve_display_price(context: PricingContext) -> PriceResolution:
    """Pick exactly one pricing source for `context`."""
    flash_sale = context.flash_sale
    if flash_sale is not None and flash_sale.in_progress:
        if flash_sale.items:
            logger.info("PRICE: FLASH SALE")
            return PriceResolution(SOURCE_FLASH_SALE, context.listing_price, flash_sale.items[0].new_price)
        logger.warning("Flash sale is IN_PROGRESS but lists no items; ignoring it")

    if context.campaign is not None:
        logger.info("PRICE: DISCOUNT CAMPAIGN")
        return PriceResolution(
            SOURCE_CAMPAIGN,
            context.listing_price,
            campaign_price(context.campaign, context.selling_price),
        )

    if context.wholesale is not None:
        logger.info("PRICE: WHOLESALE PRODUCT")
        return PriceResolution(
            SOURCE_WHOLESALE,
            context.listing_price,
            int(context.wholesale.price),
            min_quantity=context.wholesale.min_quantity,
        )

    logger.info("PRICE: SELLING PRICE")
    return PriceResolution(SOURCE_SELLING_PRICE, context.listing_price, context.selling_price)


def build_pricing_context(
    client: APIClient,
    product: Product,
    variation_index: int,
    branch_id: int,
    customer_id: int,
) -> PricingContext:
    """Fetch all three overlays for one (product, variation, branch, customer)."""
    model_id = None
    if product.has_model:
        model_id = catalog_service.variation_model_id(product, variation_index)
        if model_id == -1:
            raise InvariantViolation(
                f"Product {product.id} has no variation at index {variation_index} "
                f"({len(product.models)} variation(s))"
            )

    return PricingContext(
        listing_price=catalog_service.listing_price(product, variation_index),
        selling_price=catalog_service.selling_price(product, variation_index),
        flash_sale=get_flash_sale_info(client, product.id, model_id),
        campaign=get_campaign_info(client, product.id, branch_id, customer_id),
        wholesale=get_wholesale_info(client, product.id, customer_id, model_id),
    )
