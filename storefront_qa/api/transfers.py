# Overview: Branch transfer and partner (affiliate) transfer detail endpoints.

from __future__ import annotations

import logging

from ..client import APIClient, expect_status
from ..models import TransferInfo


logger = logging.getLogger(__name__)


def _transfer_detail(client: APIClient, transfer_id: int) -> TransferInfo:
    response = client.get(f"/itemservice/api/transfers/detail/{client.store_id}/{transfer_id}")
    expect_status(response, 200, message=f"Can not get transfer detail for transfer {transfer_id}")
    return TransferInfo.from_dict(response.json())


def get_transfer_detail(client: APIClient, transfer_id: int) -> TransferInfo:
    logger.info("===== STEP =====> [GetTransferDetail] transferId=%s", transfer_id)
    return _transfer_detail(client, transfer_id)


def get_partner_transfer_detail(client: APIClient, transfer_id: int) -> TransferInfo:
    logger.info("===== STEP =====> [GetPartnerTransferDetail] transferId=%s", transfer_id)
    return _transfer_detail(client, transfer_id)
