"""
Schemas para reembolsos.

Los montos de las respuestas llegan como string ("0.01000000") y
se conservan así.
"""

from enum import Enum

from bpay.api import Endpoint, SignedRequest
from bpay.schemas.common import Amount, BaseSchema


class DuplicateRequest(str, Enum):
    YES = "Y"
    NO = "N"


class RefundStatus(str, Enum):
    REFUND_SUCCESS = "REFUND_SUCCESS"
    REFUND_FAIL = "REFUND_FAIL"
    REFUND_PENDING = "REFUND_PENDING"


class RefundResult(BaseSchema):
    """Respuesta de un reembolso (también viaja en la notificación)."""

    refund_request_id: str
    prepay_id: str
    order_amount: str
    refunded_amount: str
    refund_amount: str
    remaining_attempts: int
    payer_open_id: str
    duplicate_request: DuplicateRequest


class RefundOrderRequest(SignedRequest):
    """Request para reembolsar (total o parcialmente) una orden pagada."""

    endpoint = Endpoint.REFUND_ORDER
    response_model = RefundResult

    refund_request_id: str
    prepay_id: str
    refund_amount: Amount
    refund_reason: str | None = None


class QueryRefundResult(BaseSchema):
    refund_request_id: str
    prepay_id: str
    order_amount: str
    refunded_amount: str
    refund_amount: str
    remaining_attempts: int
    payer_open_id: str
    refund_status: RefundStatus


class QueryRefundRequest(SignedRequest):
    endpoint = Endpoint.QUERY_REFUND
    response_model = QueryRefundResult

    refund_request_id: str
