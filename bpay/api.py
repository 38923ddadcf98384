"""
Tabla de endpoints y contrato de las operaciones firmadas.

Cada request tipado declara su endpoint y su response_model; el
cliente usa ese contrato para serializar, firmar, enviar y decodificar.
"""

from __future__ import annotations

from enum import Enum
from functools import lru_cache
from typing import TYPE_CHECKING, Any, ClassVar

from pydantic import TypeAdapter

from bpay.schemas.common import BaseSchema

if TYPE_CHECKING:
    from bpay.client import BinancePayClient


class Endpoint(str, Enum):
    """Rutas de la API de Binance Pay."""

    CREATE_ORDER = "/binancepay/openapi/v2/order"
    QUERY_ORDER = "/binancepay/openapi/order/query"
    CLOSE_ORDER = "/binancepay/openapi/order/close"
    REFUND_ORDER = "/binancepay/openapi/order/refund"
    QUERY_REFUND = "/binancepay/openapi/order/refund/query"
    QUERY_CERTIFICATE = "/binancepay/openapi/certificates"
    BALANCE_QUERY = "/binancepay/openapi/balance"
    TRANSFER_FUND = "/binancepay/openapi/wallet/transfer"
    QUERY_TRANSFER = "/binancepay/openapi/wallet/transfer/query"
    BATCH_PAYOUT = "/binancepay/openapi/payout/transfer"
    PAYOUT_QUERY = "/binancepay/openapi/payout/query"
    CREATE_SUB_MERCHANT = "/binancepay/openapi/submerchant/add"

    @property
    def path(self) -> str:
        return self.value


@lru_cache(maxsize=None)
def _adapter(response_model: Any) -> TypeAdapter:
    return TypeAdapter(response_model)


class SignedRequest(BaseSchema):
    """
    Interfaz de una operación firmada de la API.

    Las subclases definen:
    - endpoint: ruta de la operación
    - response_model: tipo al que se decodifica `data`
    """

    endpoint: ClassVar[Endpoint]
    response_model: ClassVar[Any]

    def to_body(self) -> str:
        """Body JSON canónico (camelCase, sin campos opcionales vacíos)."""
        return self.model_dump_json(by_alias=True, exclude_none=True)

    @classmethod
    def parse_response(cls, data: Any) -> Any:
        """
        Decodifica `data` del envelope al response_model.

        Raises:
            pydantic.ValidationError: Si la forma no coincide
        """
        return _adapter(cls.response_model).validate_python(data)

    async def send(self, client: BinancePayClient) -> Any:
        """Ejecuta la operación con el cliente dado."""
        return await client.execute(self)
