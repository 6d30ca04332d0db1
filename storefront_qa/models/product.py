from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .coerce import to_bool, to_int, to_text


INVENTORY_MANAGE_PRODUCT = "PRODUCT"
INVENTORY_MANAGE_IMEI = "IMEI_SERIAL_NUMBER"

STATUS_ACTIVE = "ACTIVE"
STATUS_INACTIVE = "INACTIVE"


@dataclass
class BranchStock:
    """
    Stock held at one branch, for a product (no variations) or a variation.

    remaining = total_item - sold_item, and must never be negative.
    """
    branch_id: int
    total_item: int = 0
    sold_item: int = 0
    sku: str = ""
    status: str = STATUS_ACTIVE

    @property
    def remaining(self) -> int:
        return self.total_item - self.sold_item

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BranchStock":
        return cls(
            branch_id=to_int(data.get("branchId")),
            total_item=to_int(data.get("totalItem")),
            sold_item=to_int(data.get("soldItem")),
            sku=to_text(data.get("sku")),
            status=to_text(data.get("status"), STATUS_ACTIVE),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "branchId": self.branch_id,
            "totalItem": self.total_item,
            "soldItem": self.sold_item,
            "sku": self.sku,
            "status": self.status,
        }


@dataclass
class MainLanguage:
    """Product-level localized text for one language."""
    language: str
    name: str = ""
    description: str = ""
    seo_title: str = ""
    seo_description: str = ""
    seo_keywords: str = ""
    seo_url: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MainLanguage":
        return cls(
            language=to_text(data.get("language")),
            name=to_text(data.get("name")),
            description=to_text(data.get("description")),
            seo_title=to_text(data.get("seoTitle")),
            seo_description=to_text(data.get("seoDescription")),
            seo_keywords=to_text(data.get("seoKeywords")),
            seo_url=to_text(data.get("seoUrl")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "language": self.language,
            "name": self.name,
            "description": self.description,
            "seoTitle": self.seo_title,
            "seoDescription": self.seo_description,
            "seoKeywords": self.seo_keywords,
            "seoUrl": self.seo_url,
        }


@dataclass
class VersionLanguage:
    """
    Variation-level localized text for one language.

    `label` holds the pipe-joined group names ("Color|Size"),
    `name` the pipe-joined values ("Red|L").
    """
    language: str
    name: str = ""
    label: str = ""
    description: str = ""
    version_name: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "VersionLanguage":
        return cls(
            language=to_text(data.get("language")),
            name=to_text(data.get("name")),
            label=to_text(data.get("label")),
            description=to_text(data.get("description")),
            version_name=to_text(data.get("versionName")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "language": self.language,
            "name": self.name,
            "label": self.label,
            "description": self.description,
            "versionName": self.version_name,
        }


@dataclass
class ItemAttribute:
    attribute_name: str
    attribute_value: str
    is_display: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ItemAttribute":
        return cls(
            attribute_name=to_text(data.get("attributeName")),
            attribute_value=to_text(data.get("attributeValue")),
            is_display=to_bool(data.get("isDisplay")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "attributeName": self.attribute_name,
            "attributeValue": self.attribute_value,
            "isDisplay": self.is_display,
        }


@dataclass
class ShippingInfo:
    weight: int = 0
    width: int = 0
    height: int = 0
    length: int = 0

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "ShippingInfo":
        data = data or {}
        return cls(
            weight=to_int(data.get("weight")),
            width=to_int(data.get("width")),
            height=to_int(data.get("height")),
            length=to_int(data.get("length")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "weight": self.weight,
            "width": self.width,
            "height": self.height,
            "length": self.length,
        }


def _languages_by_code(rows, factory) -> Dict[str, Any]:
    # First entry wins when the API repeats a language code.
    languages: Dict[str, Any] = {}
    for row in rows or []:
        entry = factory.from_dict(row)
        languages.setdefault(entry.language, entry)
    return languages


@dataclass
class Variation:
    """One concrete combination of a product's variation-group values (a "model")."""
    id: int
    name: str = ""
    sku: str = ""
    org_price: int = 0
    new_price: int = 0
    cost_price: int = 0
    label: str = ""
    org_name: str = ""
    description: str = ""
    barcode: str = ""
    version_name: str = ""
    use_product_description: bool = False
    reuse_attributes: bool = False
    status: str = STATUS_ACTIVE
    branches: List[BranchStock] = field(default_factory=list)
    languages: Dict[str, VersionLanguage] = field(default_factory=dict)
    model_attributes: List[ItemAttribute] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Variation":
        return cls(
            id=to_int(data.get("id")),
            name=to_text(data.get("name")),
            sku=to_text(data.get("sku")),
            org_price=to_int(data.get("orgPrice")),
            new_price=to_int(data.get("newPrice")),
            cost_price=to_int(data.get("costPrice")),
            label=to_text(data.get("label")),
            org_name=to_text(data.get("orgName")),
            description=to_text(data.get("description")),
            barcode=to_text(data.get("barcode")),
            version_name=to_text(data.get("versionName")),
            use_product_description=to_bool(data.get("useProductDescription")),
            reuse_attributes=to_bool(data.get("reuseAttributes")),
            status=to_text(data.get("status"), STATUS_ACTIVE),
            branches=[BranchStock.from_dict(b) for b in data.get("branches") or []],
            languages=_languages_by_code(data.get("languages"), VersionLanguage),
            model_attributes=[ItemAttribute.from_dict(a) for a in data.get("modelAttributes") or []],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "sku": self.sku,
            "orgPrice": self.org_price,
            "newPrice": self.new_price,
            "costPrice": self.cost_price,
            "label": self.label,
            "orgName": self.org_name,
            "description": self.description,
            "barcode": self.barcode,
            "versionName": self.version_name,
            "useProductDescription": self.use_product_description,
            "reuseAttributes": self.reuse_attributes,
            "status": self.status,
            "branches": [b.to_dict() for b in self.branches],
            "languages": [lang.to_dict() for lang in self.languages.values()],
            "modelAttributes": [a.to_dict() for a in self.model_attributes],
        }


@dataclass
class Product:
    """
    Product snapshot as returned by the product detail endpoint.

    STOCK PLACEMENT:
    - has_model=False: per-branch stock lives in `branches`
    - has_model=True: per-branch stock lives on each Variation, `branches` is unused
    """
    id: int
    name: str = ""
    currency: str = ""
    description: str = ""
    org_price: int = 0
    discount: int = 0
    new_price: int = 0
    cost_price: int = 0
    shipping_info: ShippingInfo = field(default_factory=ShippingInfo)
    deleted: bool = False
    models: List[Variation] = field(default_factory=list)
    has_model: bool = False
    show_out_of_stock: bool = False
    seo_title: str = ""
    seo_description: str = ""
    seo_keywords: str = ""
    seo_url: str = ""
    barcode: str = ""
    branches: List[BranchStock] = field(default_factory=list)
    languages: Dict[str, MainLanguage] = field(default_factory=dict)
    item_attributes: List[ItemAttribute] = field(default_factory=list)
    tax_id: int = 0
    tax_name: str = ""
    on_app: bool = False
    on_web: bool = False
    in_store: bool = False
    in_gosocial: bool = False
    enabled_listing: bool = False
    is_hide_stock: bool = False
    inventory_manage_type: str = INVENTORY_MANAGE_PRODUCT
    status: str = STATUS_ACTIVE
    lot_available: bool = False
    expired_quality: bool = False
    priority: int = 0

    @property
    def managed_by_imei(self) -> bool:
        return self.inventory_manage_type == INVENTORY_MANAGE_IMEI

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Product":
        return cls(
            id=to_int(data.get("id")),
            name=to_text(data.get("name")),
            currency=to_text(data.get("currency")),
            description=to_text(data.get("description")),
            org_price=to_int(data.get("orgPrice")),
            discount=to_int(data.get("discount")),
            new_price=to_int(data.get("newPrice")),
            cost_price=to_int(data.get("costPrice")),
            shipping_info=ShippingInfo.from_dict(data.get("shippingInfo")),
            deleted=to_bool(data.get("deleted")),
            models=[Variation.from_dict(m) for m in data.get("models") or []],
            has_model=to_bool(data.get("hasModel")),
            show_out_of_stock=to_bool(data.get("showOutOfStock")),
            seo_title=to_text(data.get("seoTitle")),
            seo_description=to_text(data.get("seoDescription")),
            seo_keywords=to_text(data.get("seoKeywords")),
            seo_url=to_text(data.get("seoUrl")),
            barcode=to_text(data.get("barcode")),
            branches=[BranchStock.from_dict(b) for b in data.get("branches") or []],
            languages=_languages_by_code(data.get("languages"), MainLanguage),
            item_attributes=[ItemAttribute.from_dict(a) for a in data.get("itemAttributes") or []],
            tax_id=to_int(data.get("taxId")),
            tax_name=to_text(data.get("taxName")),
            on_app=to_bool(data.get("onApp")),
            on_web=to_bool(data.get("onWeb")),
            in_store=to_bool(data.get("inStore")),
            in_gosocial=to_bool(data.get("inGosocial")),
            enabled_listing=to_bool(data.get("enabledListing")),
            is_hide_stock=to_bool(data.get("isHideStock")),
            inventory_manage_type=to_text(data.get("inventoryManageType"), INVENTORY_MANAGE_PRODUCT),
            status=to_text(data.get("bhStatus"), STATUS_ACTIVE),
            lot_available=to_bool(data.get("lotAvailable")),
            expired_quality=to_bool(data.get("expiredQuality")),
            priority=to_int(data.get("priority")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "currency": self.currency,
            "description": self.description,
            "orgPrice": self.org_price,
            "discount": self.discount,
            "newPrice": self.new_price,
            "costPrice": self.cost_price,
            "shippingInfo": self.shipping_info.to_dict(),
            "deleted": self.deleted,
            "models": [m.to_dict() for m in self.models],
            "hasModel": self.has_model,
            "showOutOfStock": self.show_out_of_stock,
            "seoTitle": self.seo_title,
            "seoDescription": self.seo_description,
            "seoKeywords": self.seo_keywords,
            "seoUrl": self.seo_url,
            "barcode": self.barcode,
            "branches": [b.to_dict() for b in self.branches],
            "languages": [lang.to_dict() for lang in self.languages.values()],
            "itemAttributes": [a.to_dict() for a in self.item_attributes],
            "taxId": self.tax_id,
            "taxName": self.tax_name,
            "onApp": self.on_app,
            "onWeb": self.on_web,
            "inStore": self.in_store,
            "inGosocial": self.in_gosocial,
            "enabledListing": self.enabled_listing,
            "isHideStock": self.is_hide_stock,
            "inventoryManageType": self.inventory_manage_type,
            "bhStatus": self.status,
            "lotAvailable": self.lot_available,
            "expiredQuality": self.expired_quality,
            "priority": self.priority,
        }
