from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .coerce import to_bool, to_int, to_optional_int, to_text


@dataclass
class ModelSummary:
    model_id: int
    model_name: str = ""
    stock_alert_number: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ModelSummary":
        return cls(
            model_id=to_int(data.get("modelId")),
            model_name=to_text(data.get("modelName")),
            stock_alert_number=to_optional_int(data.get("stockAlertNumber")),
        )


@dataclass
class ProductListItem:
    """Row of the dashboard product list."""
    id: int
    name: str = ""
    remaining_stock: int = 0
    status: str = ""
    sale_channels: List[str] = field(default_factory=list)
    variation_number: int = 0
    model_infos: List[ModelSummary] = field(default_factory=list)
    org_price: Optional[int] = None
    new_price: Optional[int] = None
    cost_price: Optional[int] = None
    currency: str = ""
    has_conversion: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ProductListItem":
        return cls(
            id=to_int(data.get("id")),
            name=to_text(data.get("name")),
            remaining_stock=to_int(data.get("remainingStock")),
            status=to_text(data.get("bhStatus")),
            sale_channels=list(data.get("saleChannels") or []),
            variation_number=to_int(data.get("variationNumber")),
            model_infos=[ModelSummary.from_dict(m) for m in data.get("modelInfos") or []],
            org_price=to_optional_int(data.get("orgPrice")),
            new_price=to_optional_int(data.get("newPrice")),
            cost_price=to_optional_int(data.get("costPrice")),
            currency=to_text(data.get("currency")),
            has_conversion=to_bool(data.get("hasConversion")),
        )


@dataclass
class StockAlert:
    item_id: int
    model_id: Optional[int] = None
    alert_number: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StockAlert":
        return cls(
            item_id=to_int(data.get("itemId")),
            model_id=to_optional_int(data.get("modelId")),
            alert_number=to_int(data.get("alertNumber")),
        )
