"""
Verificación de la firma de los webhooks de Binance Pay.

Binance firma "timestamp\\nnonce\\nbody\\n" con RSA (PKCS#1 v1.5,
SHA-256) usando la clave del certificado que indica
BinancePay-Certificate-SN.

Uso:
    verifier = await Verifier.from_api(client)
    verifier.verify(request.headers, raw_body)
"""

from __future__ import annotations

import base64
import binascii
from collections.abc import Mapping
from typing import TYPE_CHECKING

import structlog
from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm

from bpay.client import (
    HEADER_CERTIFICATE_SN,
    HEADER_NONCE,
    HEADER_SIGNATURE,
    HEADER_TIMESTAMP,
)
from bpay.schemas.certificate import CertificateRequest, CertificateResult
from bpay.utils.exceptions import CertificateMismatch, MissingHeader, SignatureInvalid
from bpay.utils.hmac_utils import build_signature_payload
from bpay.utils.rsa_utils import public_numbers_from_pem, verify_pkcs1_sha256

if TYPE_CHECKING:
    from bpay.client import BinancePayClient


logger = structlog.get_logger(__name__)


class Verifier:
    """
    Verifica webhooks con un certificado obtenido previamente.

    El certificado no se refresca: si Binance lo rota hay que construir
    un Verifier nuevo (por ejemplo con `from_api`).
    """

    def __init__(self, cert_public: str, cert_serial: str):
        self._cert_public = cert_public
        self._cert_serial = cert_serial

    @classmethod
    def from_certificate(cls, certificate: CertificateResult) -> Verifier:
        return cls(certificate.cert_public, certificate.cert_serial)

    @classmethod
    async def from_api(cls, client: BinancePayClient) -> Verifier:
        """Consulta el certificado vigente y construye el verifier."""
        certificate = await client.execute(CertificateRequest())
        logger.info("Webhook certificate loaded", cert_serial=certificate.cert_serial)
        return cls.from_certificate(certificate)

    @property
    def cert_serial(self) -> str:
        return self._cert_serial

    @property
    def cert_public(self) -> str:
        return self._cert_public

    def verify(self, headers: Mapping[str, str], body: str | bytes) -> None:
        """
        Verifica la firma de un webhook.

        Args:
            headers: Cabeceras de la petición (nombres sin distinción de mayúsculas)
            body: Cuerpo crudo tal como llegó

        Raises:
            MissingHeader: Si falta alguna de las cuatro cabeceras
            CertificateMismatch: Si el serial no es el del certificado almacenado
            SignatureInvalid: Si la firma no es válida
        """
        lowered = {key.lower(): value for key, value in headers.items()}

        def header(name: str) -> str:
            value = lowered.get(name.lower())
            if value is None:
                raise MissingHeader(name)
            return value

        timestamp = header(HEADER_TIMESTAMP)
        nonce = header(HEADER_NONCE)
        serial = header(HEADER_CERTIFICATE_SN)
        signature = header(HEADER_SIGNATURE)

        if serial != self._cert_serial:
            logger.warning(
                "Webhook certificate serial mismatch",
                received=serial,
                expected=self._cert_serial,
            )
            raise CertificateMismatch(serial)

        try:
            if isinstance(body, bytes):
                body = body.decode("utf-8")
            payload = build_signature_payload(timestamp, nonce, body)
            raw_signature = base64.b64decode(signature, validate=True)
            numbers = public_numbers_from_pem(self._cert_public)
            verify_pkcs1_sha256(numbers, payload.encode("utf-8"), raw_signature)
        except (InvalidSignature, UnsupportedAlgorithm, ValueError, binascii.Error):
            # Mismo error para cualquier paso: no se filtra cuál falló
            logger.warning("Webhook signature verification failed")
            raise SignatureInvalid() from None

        logger.debug("Webhook signature verified", cert_serial=serial)
