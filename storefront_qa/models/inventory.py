from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .coerce import to_bool, to_int, to_optional_text, to_text


# Inventory ledger action types
ACTION_FROM_LOCK = "FROM_LOCK"
ACTION_FROM_EDIT_ORDER = "FROM_EDIT_ORDER"
ACTION_FROM_SOLD = "FROM_SOLD"
ACTION_FROM_TRANSFER_AFFILIATE_OUT = "FROM_TRANSFER_AFFILIATE_OUT"

# Order id prefixes in the inventory ledger
TRANSFER_PREFIX = "CH"
PURCHASE_ORDER_PREFIX = "PO"

# Transfer statuses
TRANSFER_STATUS_RECEIVED = "RECEIVED"
TRANSFER_STATUS_CANCELLED = "CANCELLED"

# Purchase order statuses
PURCHASE_ORDER_STATUS_COMPLETED = "COMPLETED"
PURCHASE_ORDER_STATUS_CANCELLED = "CANCELLED"

# Order statuses that end an order's life
ORDER_FINAL_STATUSES = frozenset({"DELIVERED", "CANCELLED", "REJECTED", "FAILED"})

RETURN_ORDER_IN_PROGRESS = "IN_PROGRESS"


@dataclass(frozen=True)
class InventoryHistoryEntry:
    """Read-only row of the inventory ledger."""
    id: str = ""
    product_name: str = ""
    stock_change: int = 0
    remaining_stock: int = 0
    inventory_type: str = ""
    action_type: str = ""
    order_id: Optional[str] = None
    operator: str = ""
    has_conversion: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "InventoryHistoryEntry":
        return cls(
            id=to_text(data.get("id")),
            product_name=to_text(data.get("productName")),
            stock_change=to_int(data.get("stockChange")),
            remaining_stock=to_int(data.get("remainingStock")),
            inventory_type=to_text(data.get("inventoryType")),
            action_type=to_text(data.get("actionType")),
            order_id=to_optional_text(data.get("orderId")),
            operator=to_text(data.get("operator")),
            has_conversion=to_bool(data.get("hasConversion")),
        )


@dataclass
class TransferInfo:
    """Transfer or partner (affiliate) transfer detail."""
    id: int
    status: str
    origin_branch_id: int = 0
    destination_branch_id: int = 0
    transfer_type: str = ""
    note: str = ""

    @property
    def complete(self) -> bool:
        return self.status in (TRANSFER_STATUS_RECEIVED, TRANSFER_STATUS_CANCELLED)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TransferInfo":
        return cls(
            id=to_int(data.get("id")),
            status=to_text(data.get("status")),
            origin_branch_id=to_int(data.get("originBranchId")),
            destination_branch_id=to_int(data.get("destinationBranchId")),
            transfer_type=to_text(data.get("transferType")),
            note=to_text(data.get("note")),
        )


@dataclass
class PurchaseOrderInfo:
    id: int
    status: str
    purchase_id: str = ""
    branch_id: int = 0

    @property
    def complete(self) -> bool:
        return self.status in (PURCHASE_ORDER_STATUS_COMPLETED, PURCHASE_ORDER_STATUS_CANCELLED)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PurchaseOrderInfo":
        return cls(
            id=to_int(data.get("id")),
            status=to_text(data.get("status")),
            purchase_id=to_text(data.get("purchaseId")),
            branch_id=to_int(data.get("branchId")),
        )


@dataclass
class OrderInfo:
    order_id: str
    status: str
    channel: str = ""
    total_price: int = 0

    @property
    def complete(self) -> bool:
        return self.status in ORDER_FINAL_STATUSES

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "OrderInfo":
        # Order detail nests the header fields under "orderInfo".
        info = data.get("orderInfo") or {}
        return cls(
            order_id=to_text(info.get("orderId")),
            status=to_text(info.get("status")),
            channel=to_text(info.get("channel")),
            total_price=to_int(info.get("totalPrice")),
        )


@dataclass
class ReturnOrder:
    id: str
    status: str
    return_order_id: str = ""
    bc_order_id: int = 0
    refund_status: str = ""
    return_branch_id: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ReturnOrder":
        return cls(
            id=to_text(data.get("id")),
            status=to_text(data.get("status")),
            return_order_id=to_text(data.get("returnOrderId")),
            bc_order_id=to_int(data.get("bcOrderId")),
            refund_status=to_text(data.get("refundStatus")),
            return_branch_id=to_text(data.get("returnBranchId")),
        )
