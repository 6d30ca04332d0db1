# Overview: Decides whether a product's stock is free of in-flight orders, transfers and purchase orders.

"""
Stock & lot/IMEI reconciliation.

CLASSIFICATION (per inventory ledger entry, in this order):
1. orderId contains "CH" -> transfer (partner transfer when actionType is
   FROM_TRANSFER_AFFILIATE_OUT); incomplete unless RECEIVED or CANCELLED
2. orderId contains "PO" -> purchase order; incomplete unless COMPLETED or CANCELLED
3. otherwise by actionType:
   - FROM_LOCK: always incomplete
   - FROM_EDIT_ORDER: incomplete unless the order is DELIVERED/CANCELLED/REJECTED/FAILED
   - FROM_SOLD: incomplete if any return order for it is IN_PROGRESS
   - anything else: complete

CHECKS:
- can_delete_product: only transfer ("CH") entries can block deletion
- can_manage_by_lot_date: every entry with an orderId must be complete

Any detail fetch failure propagates; there is no best-effort mode.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List

from ..api.inventory import get_all_inventory_history
from ..api.orders import get_all_return_orders, get_order_detail
from ..api.suppliers import get_purchase_order_detail
from ..api.transfers import get_partner_transfer_detail, get_transfer_detail
from ..client import APIClient
from ..models import InventoryHistoryEntry, OrderInfo, PurchaseOrderInfo, ReturnOrder, TransferInfo
from ..models.inventory import (
    ACTION_FROM_EDIT_ORDER,
    ACTION_FROM_LOCK,
    ACTION_FROM_SOLD,
    ACTION_FROM_TRANSFER_AFFILIATE_OUT,
    PURCHASE_ORDER_PREFIX,
    RETURN_ORDER_IN_PROGRESS,
    TRANSFER_PREFIX,
)


logger = logging.getLogger(__name__)


@dataclass
class ReconciliationFetchers:
    """Remote lookups used during classification; swap any of them in tests."""
    inventory_history: Callable[[str], List[InventoryHistoryEntry]]
    transfer_detail: Callable[[int], TransferInfo]
    partner_transfer_detail: Callable[[int], TransferInfo]
    purchase_order_detail: Callable[[int], PurchaseOrderInfo]
    order_detail: Callable[[int], OrderInfo]
    return_orders: Callable[[str], List[ReturnOrder]]

    @classmethod
    def from_client(cls, client: APIClient) -> "ReconciliationFetchers":
        return cls(
            inventory_history=lambda keyword: get_all_inventory_history(client, keyword, ""),
            transfer_detail=lambda transfer_id: get_transfer_detail(client, transfer_id),
            partner_transfer_detail=lambda transfer_id: get_partner_transfer_detail(client, transfer_id),
            purchase_order_detail=lambda po_id: get_purchase_order_detail(client, po_id),
            order_detail=lambda order_id: get_order_detail(client, order_id),
            return_orders=lambda order_id: get_all_return_orders(client, "", order_id),
        )


def strip_prefix(order_id: str, prefix: str) -> int:
    """Numeric id behind a prefixed ledger reference: "CH1023" -> 1023."""
    return int(order_id.replace(prefix, ""))


def is_transfer(entry: InventoryHistoryEntry) -> bool:
    return entry.order_id is not None and TRANSFER_PREFIX in entry.order_id


def is_purchase_order(entry: InventoryHistoryEntry) -> bool:
    return entry.order_id is not None and PURCHASE_ORDER_PREFIX in entry.order_id


class InventoryReconciler:
    """Classifies ledger entries and answers the delete / lot-date questions for a product."""

    def __init__(self, fetchers: ReconciliationFetchers):
        self.fetchers = fetchers

    @classmethod
    def from_client(cls, client: APIClient) -> "InventoryReconciler":
        return cls(ReconciliationFetchers.from_client(client))

    def history(self, product_id: int) -> List[InventoryHistoryEntry]:
        return self.fetchers.inventory_history(str(product_id))

    def transfer_incomplete(self, entry: InventoryHistoryEntry) -> bool:
        transfer_id = strip_prefix(entry.order_id, TRANSFER_PREFIX)
        if entry.action_type == ACTION_FROM_TRANSFER_AFFILIATE_OUT:
            transfer = self.fetchers.partner_transfer_detail(transfer_id)
        else:
            transfer = self.fetchers.transfer_detail(transfer_id)
        return not transfer.complete

    def purchase_order_incomplete(self, entry: InventoryHistoryEntry) -> bool:
        purchase_order = self.fetchers.purchase_order_detail(strip_prefix(entry.order_id, PURCHASE_ORDER_PREFIX))
        return not purchase_order.complete

    def order_incomplete(self, entry: InventoryHistoryEntry) -> bool:
        return not self.fetchers.order_detail(int(entry.order_id)).complete

    def return_order_incomplete(self, entry: InventoryHistoryEntry) -> bool:
        return any(
            return_order.status == RETURN_ORDER_IN_PROGRESS
            for return_order in self.fetchers.return_orders(entry.order_id)
        )

    def is_complete(self, entry: InventoryHistoryEntry) -> bool:
        """Apply the classification rules to one entry with a non-null orderId."""
        if is_transfer(entry):
            return not self.transfer_incomplete(entry)
        if is_purchase_order(entry):
            return not self.purchase_order_incomplete(entry)

        if entry.action_type == ACTION_FROM_LOCK:
            return False
        if entry.action_type == ACTION_FROM_EDIT_ORDER:
            return not self.order_incomplete(entry)
        if entry.action_type == ACTION_FROM_SOLD:
            return not self.return_order_incomplete(entry)
        return True

    def can_delete_product(self, product_id: int) -> bool:
        """True iff no transfer entry for the product is still open."""
        entries = self.history(product_id)
        logger.info("===== STEP =====> [CheckCanBeDeleted] productId=%s", product_id)
        return not any(self.transfer_incomplete(entry) for entry in entries if is_transfer(entry))

    def can_manage_by_lot_date(self, product_id: int) -> bool:
        """True iff every entry referencing an order/transfer/purchase order is complete."""
        entries = self.history(product_id)
        logger.info("===== STEP =====> [CheckCanBeManagedByLotDate] productId=%s", product_id)
        return all(self.is_complete(entry) for entry in entries if entry.order_id is not None)


def can_delete_product(client: APIClient, product_id: int) -> bool:
    return InventoryReconciler.from_client(client).can_delete_product(product_id)


def can_manage_by_lot_date(client: APIClient, product_id: int) -> bool:
    return InventoryReconciler.from_client(client).can_manage_by_lot_date(product_id)
