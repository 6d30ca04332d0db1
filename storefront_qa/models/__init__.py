from .product import (
    BranchStock, MainLanguage, VersionLanguage, ItemAttribute, ShippingInfo, Variation, Product,
    INVENTORY_MANAGE_PRODUCT, INVENTORY_MANAGE_IMEI, STATUS_ACTIVE, STATUS_INACTIVE,
)
from .promotions import (
    CampaignDiscount, CampaignInfo, FlashSaleItem, FlashSaleInfo, WholesaleInfo, PricingContext,
    FLASH_SALE_IN_PROGRESS, DISCOUNT_FIXED_AMOUNT, DISCOUNT_PERCENTAGE,
)
from .inventory import InventoryHistoryEntry, TransferInfo, PurchaseOrderInfo, OrderInfo, ReturnOrder
from .listing import ModelSummary, ProductListItem, StockAlert

__all__ = [
    'BranchStock', 'MainLanguage', 'VersionLanguage', 'ItemAttribute', 'ShippingInfo',
    'Variation', 'Product',
    'INVENTORY_MANAGE_PRODUCT', 'INVENTORY_MANAGE_IMEI', 'STATUS_ACTIVE', 'STATUS_INACTIVE',
    'CampaignDiscount', 'CampaignInfo', 'FlashSaleItem', 'FlashSaleInfo', 'WholesaleInfo', 'PricingContext',
    'FLASH_SALE_IN_PROGRESS', 'DISCOUNT_FIXED_AMOUNT', 'DISCOUNT_PERCENTAGE',
    'InventoryHistoryEntry', 'TransferInfo', 'PurchaseOrderInfo', 'OrderInfo', 'ReturnOrder',
    'ModelSummary', 'ProductListItem', 'StockAlert',
]
