"""
Cliente de la API de Binance Pay.

Re-exporta las piezas más usadas para que los integradores puedan
hacer ``from bpay import ...`` sin recorrer el paquete.
"""

from bpay.api import Endpoint, SignedRequest
from bpay.client import BinancePayClient
from bpay.config import Settings, get_settings
from bpay.schemas.certificate import CertificateRequest, CertificateResult
from bpay.schemas.notification import (
    BizType,
    Notification,
    OrderNotification,
    PayoutNotification,
    RefundNotification,
)
from bpay.schemas.order import (
    CloseOrderRequest,
    CloseOrderResult,
    CreateOrderRequest,
    QueryOrderRequest,
)
from bpay.schemas.payout import PayoutQueryRequest, PayoutRequest
from bpay.schemas.refund import QueryRefundRequest, RefundOrderRequest
from bpay.schemas.sub_merchant import CreateSubMerchantRequest
from bpay.schemas.wallet import (
    QueryTransferRequest,
    TransferFundRequest,
    WalletBalanceRequest,
)
from bpay.utils.exceptions import (
    BinancePayError,
    CertificateMismatch,
    CertificateNotFound,
    InternalServerError,
    MalformedPayload,
    MissingHeader,
    RemoteError,
    ServerFault,
    ServiceUnavailable,
    SignatureInvalid,
    TransportError,
    Unauthorized,
    UnexpectedStatus,
    UnknownNotificationType,
    WebhookVerificationError,
)
from bpay.webhooks import Verifier, decode_notification

__all__ = [
    # Cliente
    "BinancePayClient",
    "Endpoint",
    "SignedRequest",
    "Settings",
    "get_settings",
    # Requests
    "CertificateRequest",
    "CertificateResult",
    "CloseOrderRequest",
    "CloseOrderResult",
    "CreateOrderRequest",
    "CreateSubMerchantRequest",
    "PayoutQueryRequest",
    "PayoutRequest",
    "QueryOrderRequest",
    "QueryRefundRequest",
    "QueryTransferRequest",
    "RefundOrderRequest",
    "TransferFundRequest",
    "WalletBalanceRequest",
    # Webhooks
    "BizType",
    "Notification",
    "OrderNotification",
    "PayoutNotification",
    "RefundNotification",
    "Verifier",
    "decode_notification",
    # Errores
    "BinancePayError",
    "CertificateMismatch",
    "CertificateNotFound",
    "InternalServerError",
    "MalformedPayload",
    "MissingHeader",
    "RemoteError",
    "ServerFault",
    "ServiceUnavailable",
    "SignatureInvalid",
    "TransportError",
    "Unauthorized",
    "UnexpectedStatus",
    "UnknownNotificationType",
    "WebhookVerificationError",
]
