"""
Cliente HTTP para Binance Pay.

Firma cada petición con HMAC-SHA512, la envía por POST y decodifica
el envelope de respuesta al tipo declarado por el request.
"""

import json
from typing import Any

import httpx
import structlog
from pydantic import ValidationError

from bpay.api import Endpoint, SignedRequest
from bpay.config import DEFAULT_HOST, Settings, get_settings
from bpay.schemas.common import APIResponse, ErrorResponse
from bpay.utils.exceptions import (
    InternalServerError,
    MalformedPayload,
    RemoteError,
    ServiceUnavailable,
    TransportError,
    Unauthorized,
    UnexpectedStatus,
)
from bpay.utils.hmac_utils import SignedContent


logger = structlog.get_logger(__name__)

# Timeout del cliente HTTP por defecto (inyectable vía http_client)
DEFAULT_TIMEOUT_SECONDS = 10

HEADER_TIMESTAMP = "BinancePay-Timestamp"
HEADER_NONCE = "BinancePay-Nonce"
HEADER_CERTIFICATE_SN = "BinancePay-Certificate-SN"
HEADER_SIGNATURE = "BinancePay-Signature"


class BinancePayClient:
    """
    Cliente de la API de Binance Pay.

    Las credenciales se cargan una vez y no cambian. Cada llamada es
    independiente: timestamp y nonce se generan por petición, así que
    el cliente se puede usar concurrentemente.
    """

    def __init__(
        self,
        api_key: str = "",
        secret_key: str = "",
        host: str = DEFAULT_HOST,
        http_client: httpx.AsyncClient | None = None,
    ):
        """
        Inicializa el cliente.

        Args:
            api_key: API key (identifica al llamador en cada petición)
            secret_key: Clave secreta (solo se usa como clave HMAC)
            host: URL base de la API
            http_client: Cliente httpx a reutilizar (opcional)
        """
        self._api_key = api_key
        self._secret_key = secret_key
        self._host = host.rstrip("/")
        self._http = http_client or httpx.AsyncClient(
            timeout=DEFAULT_TIMEOUT_SECONDS,
            # Sin expiración de conexiones ociosas en el pool
            limits=httpx.Limits(keepalive_expiry=None),
        )

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "BinancePayClient":
        """Crea un cliente a partir de la configuración."""
        settings = settings or get_settings()
        return cls(
            api_key=settings.BINANCE_PAY_API_KEY,
            secret_key=settings.BINANCE_PAY_API_SECRET,
            host=settings.BINANCE_PAY_HOST,
        )

    @classmethod
    def from_env(cls) -> "BinancePayClient":
        """Crea un cliente leyendo las variables BINANCE_PAY_* del entorno."""
        return cls.from_settings(Settings())

    @property
    def host(self) -> str:
        return self._host

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "BinancePayClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    def build_headers(self, content: SignedContent, signature: str) -> dict[str, str]:
        """
        Cabeceras de una petición firmada.

        BinancePay-Certificate-SN lleva la API key del llamador, no un
        serial de certificado.
        """
        return {
            "Content-Type": "application/json",
            HEADER_TIMESTAMP: str(content.timestamp),
            HEADER_NONCE: content.nonce,
            HEADER_CERTIFICATE_SN: self._api_key,
            HEADER_SIGNATURE: signature,
        }

    async def post_signed(self, endpoint: Endpoint, body: str | None = None) -> str:
        """
        Firma y envía un body ya serializado.

        Returns:
            Cuerpo de la respuesta HTTP 200 como texto
        """
        content = SignedContent(body=body or "")
        headers = self.build_headers(content, content.sign(self._secret_key))
        url = f"{self._host}{endpoint.path}"

        logger.debug("Sending signed request", endpoint=endpoint.path)

        try:
            response = await self._http.post(url, content=content.body, headers=headers)
        except httpx.HTTPError as e:
            logger.error("Binance Pay request failed", endpoint=endpoint.path, error=str(e))
            raise TransportError(str(e)) from e

        return self._handle_response(endpoint, response)

    async def execute(self, request: SignedRequest) -> Any:
        """
        Ejecuta una operación tipada.

        Returns:
            Instancia del response_model del request

        Raises:
            BinancePayError: según el status HTTP o el envelope recibido
        """
        text = await self.post_signed(request.endpoint, request.to_body())

        try:
            envelope = APIResponse.model_validate(json.loads(text))
        except (ValueError, ValidationError) as e:
            raise MalformedPayload(str(e)) from e

        if envelope.status == "FAIL":
            raise RemoteError(envelope.code, envelope.error_message or "")

        try:
            return request.parse_response(envelope.unwrapped_data())
        except ValidationError as e:
            raise MalformedPayload(str(e)) from e

    def _handle_response(self, endpoint: Endpoint, response: httpx.Response) -> str:
        """Mapea el status HTTP a resultado o excepción."""
        status_code = response.status_code

        logger.info(
            "Binance Pay response",
            endpoint=endpoint.path,
            status_code=status_code,
        )

        if status_code == 200:
            return response.text
        if status_code == 500:
            raise InternalServerError()
        if status_code == 503:
            raise ServiceUnavailable()
        if status_code == 401:
            raise Unauthorized()
        if status_code == 400:
            try:
                error = ErrorResponse.model_validate(json.loads(response.text))
            except (ValueError, ValidationError) as e:
                raise MalformedPayload(str(e)) from e

            logger.warning(
                "Binance Pay rejected request",
                endpoint=endpoint.path,
                code=error.code,
                error_message=error.error_message,
            )
            raise RemoteError(error.code, error.error_message or "")

        raise UnexpectedStatus(status_code)
