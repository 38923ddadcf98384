"""
Schemas para notificaciones (webhooks) entrantes de Binance Pay.
"""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import Field

from bpay.schemas.common import BaseSchema
from bpay.schemas.order import TerminalType
from bpay.schemas.payout import BatchStatus
from bpay.schemas.refund import RefundResult


class BizType(str, Enum):
    """Familia de la notificación (discriminador)."""

    PAY = "PAY"
    PAY_REFUND = "PAY_REFUND"
    PAYOUT = "PAYOUT"


class PayStatus(str, Enum):
    PAY_SUCCESS = "PAY_SUCCESS"
    PAY_CLOSED = "PAY_CLOSED"


class RefundBizStatus(str, Enum):
    REFUND_SUCCESS = "REFUND_SUCCESS"
    REFUND_REJECTED = "REFUND_REJECTED"


# Los payouts notifican con el vocabulario de estado del lote
PayoutBizStatus = BatchStatus


class NotificationEnvelope(BaseSchema):
    """
    Envelope externo del webhook.

    `data` es un documento JSON serializado como string; se vuelve a
    parsear una vez que bizType indica su forma.
    """

    biz_type: str
    biz_id: int
    biz_status: str
    data: str


# ============================================
# Detalle por familia
# ============================================

class OrderDetail(BaseSchema):
    merchant_trade_no: str
    product_type: str
    product_name: str
    trade_type: TerminalType
    total_fee: float
    currency: str
    open_user_id: str | None = None
    transact_time: int | None = None
    transaction_id: str | None = None


class RefundDetail(BaseSchema):
    merchant_trade_no: str
    product_type: str
    product_name: str
    trade_type: str
    total_fee: float
    currency: str
    open_user_id: str | None = None
    transact_time: int | None = None
    refund_info: RefundResult


class PayoutDetail(BaseSchema):
    request_id: str
    batch_status: BatchStatus
    merchant_id: int
    currency: str
    total_amount: float
    total_number: int


# ============================================
# Notificaciones tipadas (unión etiquetada)
# ============================================

class OrderNotification(BaseSchema):
    biz_type: Literal[BizType.PAY] = BizType.PAY
    biz_id: int
    biz_status: PayStatus
    detail: OrderDetail


class RefundNotification(BaseSchema):
    biz_type: Literal[BizType.PAY_REFUND] = BizType.PAY_REFUND
    biz_id: int
    biz_status: RefundBizStatus
    detail: RefundDetail


class PayoutNotification(BaseSchema):
    biz_type: Literal[BizType.PAYOUT] = BizType.PAYOUT
    biz_id: int
    biz_status: PayoutBizStatus
    detail: PayoutDetail


Notification = Annotated[
    Union[OrderNotification, RefundNotification, PayoutNotification],
    Field(discriminator="biz_type"),
]
