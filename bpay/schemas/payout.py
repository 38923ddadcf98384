"""
Schemas para pagos masivos (batch payout).
"""

from enum import Enum

from pydantic import Field

from bpay.api import Endpoint, SignedRequest
from bpay.schemas.common import Amount, BaseSchema
from bpay.schemas.wallet import WalletType


# El método de transferencia usa el mismo vocabulario que las billeteras
TransferMethod = WalletType


class BizScene(str, Enum):
    DIRECT_TRANSFER = "DIRECT_TRANSFER"
    CRYPTO_REWARDS = "CRYPTO_REWARDS"
    SETTLEMENT = "SETTLEMENT"
    REIMBURSEMENT = "REIMBURSEMENT"
    MERCHANT_PAYMENT = "MERCHANT_PAYMENT"
    OTHERS = "OTHERS"


class ReceiveType(str, Enum):
    PAY_ID = "PAY_ID"
    BINANCE_ID = "BINANCE_ID"
    EMAIL = "EMAIL"


class PayoutStatus(str, Enum):
    """Estado de la solicitud de payout recién aceptada."""

    ACCEPTED = "ACCEPTED"


class BatchStatus(str, Enum):
    """Estado de un lote de payout (también usado en notificaciones)."""

    ACCEPTED = "ACCEPTED"
    PROCESSING = "PROCESSING"
    SUCCESS = "SUCCESS"
    PART_SUCCESS = "PART_SUCCESS"
    FAILED = "FAILED"
    CANCELED = "CANCELED"


class DetailStatus(str, Enum):
    """Filtro de detalle para la consulta de payout."""

    ALL = "ALL"
    PROCESSING = "PROCESSING"
    SUCCESS = "SUCCESS"
    FAIL = "FAIL"


class TransferDetailStatus(str, Enum):
    SUCCESS = "SUCCESS"
    FAIL = "FAIL"
    PROCESSING = "PROCESSING"
    AWAITING_RECEIPT = "AWAITING_RECEIPT"
    REFUNDED = "REFUNDED"


# ============================================
# Creación
# ============================================

class TransferDetail(BaseSchema):
    merchant_send_id: str
    receive_type: ReceiveType
    receiver: str
    transfer_amount: Amount
    transfer_method: TransferMethod
    remark: str | None = None


class PayoutResult(BaseSchema):
    request_id: str
    status: PayoutStatus


class PayoutRequest(SignedRequest):
    """Request para iniciar un payout a varios receptores."""

    endpoint = Endpoint.BATCH_PAYOUT
    response_model = PayoutResult

    request_id: str
    biz_scene: BizScene | None = None
    batch_name: str
    currency: str
    total_amount: Amount
    total_number: int
    transfer_detail_list: list[TransferDetail] = Field(default_factory=list)


# ============================================
# Consulta
# ============================================

class TransferDetailResult(BaseSchema):
    order_id: int
    merchant_send_id: str
    payer_id: int
    amount: str
    receive_type: ReceiveType
    receiver: str
    payee_id: int
    transfer_method: TransferMethod
    status: TransferDetailStatus
    remark: str | None = None


class PayoutQueryResult(BaseSchema):
    request_id: str
    batch_status: BatchStatus
    merchant_id: int
    currency: str
    total_amount: float
    total_number: int
    transfer_detail_list: list[TransferDetailResult] = Field(default_factory=list)


class PayoutQueryRequest(SignedRequest):
    endpoint = Endpoint.PAYOUT_QUERY
    response_model = PayoutQueryResult

    request_id: str
    detail_status: DetailStatus | None = None
