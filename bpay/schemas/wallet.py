"""
Schemas de billetera: consulta de balance y transferencias internas.

El monto de las transferencias se documenta como decimal pero se
observa como string en el wire; se mantiene como string.
"""

from enum import Enum

from bpay.api import Endpoint, SignedRequest
from bpay.schemas.common import BaseSchema


class WalletType(str, Enum):
    FUNDING_WALLET = "FUNDING_WALLET"
    SPOT_WALLET = "SPOT_WALLET"


class TransferType(str, Enum):
    TO_MAIN = "TO_MAIN"
    TO_PAY = "TO_PAY"


class TransferStatus(str, Enum):
    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"
    PROCESS = "PROCESS"


# ============================================
# Balance
# ============================================

class WalletBalanceResult(BaseSchema):
    balance: float
    asset: str
    fiat: str
    available_fiat_valuation: float
    available_btc_valuation: float


class WalletBalanceRequest(SignedRequest):
    """Consulta el balance de un activo en una billetera."""

    endpoint = Endpoint.BALANCE_QUERY
    response_model = WalletBalanceResult

    wallet: WalletType
    currency: str


# ============================================
# Transferencias
# ============================================

class TransferFundResult(BaseSchema):
    tran_id: str
    status: TransferStatus
    currency: str
    amount: str
    transfer_type: TransferType


class TransferFundRequest(SignedRequest):
    """Transfiere fondos entre la billetera de pagos y la principal."""

    endpoint = Endpoint.TRANSFER_FUND
    response_model = TransferFundResult

    request_id: str
    currency: str
    amount: str
    transfer_type: TransferType


class QueryTransferResult(BaseSchema):
    tran_id: str
    status: TransferStatus


class QueryTransferRequest(SignedRequest):
    endpoint = Endpoint.QUERY_TRANSFER
    response_model = QueryTransferResult

    tran_id: str
