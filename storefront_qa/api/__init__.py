from .products import get_product_detail, get_all_products, search_product_id_by_name, get_product_stock_alerts
from .inventory import get_all_inventory_history
from .orders import get_order_detail, get_all_return_orders
from .transfers import get_transfer_detail, get_partner_transfer_detail
from .suppliers import get_purchase_order_detail
from .promotions import get_campaign_info, get_flash_sale_info, get_wholesale_info

__all__ = [
    'get_product_detail', 'get_all_products', 'search_product_id_by_name', 'get_product_stock_alerts',
    'get_all_inventory_history',
    'get_order_detail', 'get_all_return_orders',
    'get_transfer_detail', 'get_partner_transfer_detail',
    'get_purchase_order_detail',
    'get_campaign_info', 'get_flash_sale_info', 'get_wholesale_info',
]
