from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, List, Optional

from .coerce import to_decimal, to_int, to_text


FLASH_SALE_IN_PROGRESS = "IN_PROGRESS"
FLASH_SALE_SCHEDULED = "SCHEDULED"

DISCOUNT_FIXED_AMOUNT = "FIXED_AMOUNT"
DISCOUNT_PERCENTAGE = "PERCENTAGE"


@dataclass
class CampaignDiscount:
    type: str
    wholesale_value: int = 0
    min_quantity: int = 0
    minimum_condition_type: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CampaignDiscount":
        return cls(
            type=to_text(data.get("type")),
            wholesale_value=to_int(data.get("wholesaleValue")),
            min_quantity=to_int(data.get("minQuantity")),
            minimum_condition_type=to_text(data.get("minimumConditionType")),
        )


@dataclass
class CampaignInfo:
    """Discount campaign applying to an item at a branch for a customer."""
    product_id: int
    branch_id: int
    wholesales: List[CampaignDiscount] = field(default_factory=list)
    wholesale_ids: List[int] = field(default_factory=list)

    @property
    def discount_type(self) -> str:
        return self.wholesales[0].type if self.wholesales else ""

    @property
    def discount_value(self) -> int:
        return self.wholesales[0].wholesale_value if self.wholesales else 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CampaignInfo":
        return cls(
            product_id=to_int(data.get("productId")),
            branch_id=to_int(data.get("branchId")),
            wholesales=[CampaignDiscount.from_dict(w) for w in data.get("wholesales") or []],
            wholesale_ids=[to_int(i) for i in data.get("lstWholesaleIds") or []],
        )


@dataclass
class FlashSaleItem:
    item_model_id: str = ""
    new_price: int = 0
    sale_stock: int = 0
    purchase_limit_stock: int = 0
    sold_stock: int = 0
    transaction_stock: int = 0
    item_id: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FlashSaleItem":
        return cls(
            item_model_id=to_text(data.get("itemModelId")),
            new_price=to_int(data.get("newPrice")),
            sale_stock=to_int(data.get("saleStock")),
            purchase_limit_stock=to_int(data.get("purchaseLimitStock")),
            sold_stock=to_int(data.get("soldStock")),
            transaction_stock=to_int(data.get("transactionStock")),
            item_id=to_int(data.get("litemId", data.get("itemId"))),
        )


@dataclass
class FlashSaleInfo:
    status: str
    items: List[FlashSaleItem] = field(default_factory=list)

    @property
    def in_progress(self) -> bool:
        return self.status == FLASH_SALE_IN_PROGRESS

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FlashSaleInfo":
        return cls(
            status=to_text(data.get("status")),
            items=[FlashSaleItem.from_dict(i) for i in data.get("items") or []],
        )


@dataclass
class WholesaleInfo:
    """Wholesale tier: `price` applies once the cart quantity reaches `min_quantity`."""
    id: int
    price: Decimal = Decimal(0)
    min_quantity: int = 0
    item_id: int = 0
    item_model_ids: str = ""
    segment_ids: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WholesaleInfo":
        # The storefront API spells the field "minQuatity".
        min_quantity = data.get("minQuatity", data.get("minQuantity"))
        return cls(
            id=to_int(data.get("id")),
            price=to_decimal(data.get("price")),
            min_quantity=to_int(min_quantity),
            item_id=to_int(data.get("itemId")),
            item_model_ids=to_text(data.get("itemModelIds")),
            segment_ids=to_text(data.get("segmentIds")),
        )


@dataclass
class PricingContext:
    """
    Resolution-time composite for one (product, variation, branch, customer).

    Any overlay may be None; absence just means "fall through".
    """
    listing_price: int
    selling_price: int
    flash_sale: Optional[FlashSaleInfo] = None
    campaign: Optional[CampaignInfo] = None
    wholesale: Optional[WholesaleInfo] = None
