"""
Schemas para la consulta del certificado de firma de webhooks.
"""

from typing import Any

from bpay.api import Endpoint, SignedRequest
from bpay.schemas.common import BaseSchema
from bpay.utils.exceptions import CertificateNotFound


class CertificateResult(BaseSchema):
    """Certificado público con el que Binance firma las notificaciones."""

    cert_serial: str  # hash md5 de la clave pública
    cert_public: str  # clave pública en formato PEM


class CertificateRequest(SignedRequest):
    """
    Consulta de certificados (body vacío).

    El endpoint devuelve una lista; se usa el último elemento. Una lista
    vacía es un error recuperable (CertificateNotFound).
    """

    endpoint = Endpoint.QUERY_CERTIFICATE
    response_model = list[CertificateResult]

    @classmethod
    def parse_response(cls, data: Any) -> CertificateResult:
        certificates = super().parse_response(data)
        if not certificates:
            raise CertificateNotFound()
        return certificates[-1]
