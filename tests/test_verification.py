"""
Tests para la verificación de firmas de webhooks.
"""

import json

import httpx
import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from bpay.utils.exceptions import (
    CertificateMismatch,
    CertificateNotFound,
    MissingHeader,
    SignatureInvalid,
)
from bpay.webhooks.verification import Verifier


BODY = (
    '{"env":{"terminalType":"WEB"},"merchantTradeNo":"9825382937292","orderAmount":25.0,'
    '"currency":"USDT","goods":{"goodsType":"02","goodsCategory":"D000",'
    '"referenceGoodsId":"7876763A3B","goodsName":"Ice Cream","goodsDetail":"Greentea ice cream cone"}}'
)


class TestVerifier:
    """Tests para Verifier.verify."""

    def test_valid_signature_accepted(self, verifier, sign_webhook):
        headers = sign_webhook(BODY)

        assert verifier.verify(headers, BODY) is None

    def test_bytes_body_accepted(self, verifier, sign_webhook):
        headers = sign_webhook(BODY)

        verifier.verify(headers, BODY.encode("utf-8"))

    def test_header_names_are_case_insensitive(self, verifier, sign_webhook):
        headers = {key.lower(): value for key, value in sign_webhook(BODY).items()}

        verifier.verify(headers, BODY)

    def test_malformed_body_rejected(self, verifier, sign_webhook):
        headers = sign_webhook(BODY)

        with pytest.raises(SignatureInvalid, match="Signature verification failed"):
            verifier.verify(headers, "malformed_body")

    def test_one_byte_flipped_body_rejected(self, verifier, sign_webhook):
        headers = sign_webhook(BODY)
        flipped = BODY.replace("Ice Cream", "Ice Creap")

        with pytest.raises(SignatureInvalid):
            verifier.verify(headers, flipped)

    def test_whitespace_change_rejected(self, verifier, sign_webhook):
        """La reconstrucción debe coincidir byte a byte."""
        headers = sign_webhook(BODY)

        with pytest.raises(SignatureInvalid):
            verifier.verify(headers, BODY + " ")

    def test_tampered_timestamp_rejected(self, verifier, sign_webhook):
        headers = sign_webhook(BODY)
        headers["BinancePay-Timestamp"] = "1646584911980"

        with pytest.raises(SignatureInvalid):
            verifier.verify(headers, BODY)

    def test_serial_mismatch_rejected(self, verifier, sign_webhook):
        headers = sign_webhook(BODY)
        headers["BinancePay-Certificate-SN"] = "0" * 32

        with pytest.raises(CertificateMismatch) as exc_info:
            verifier.verify(headers, BODY)

        assert exc_info.value.code == "CERTIFICATE_MISMATCH"

    def test_serial_mismatch_checked_before_crypto(self, sign_webhook):
        """Con serial distinto no se intenta la verificación (ni con clave inválida)."""
        broken = Verifier(cert_public="not a certificate", cert_serial="another-serial")

        with pytest.raises(CertificateMismatch):
            broken.verify(sign_webhook(BODY), BODY)

    @pytest.mark.parametrize(
        "header",
        [
            "BinancePay-Timestamp",
            "BinancePay-Nonce",
            "BinancePay-Certificate-SN",
            "BinancePay-Signature",
        ],
    )
    def test_missing_header(self, verifier, sign_webhook, header):
        headers = sign_webhook(BODY)
        del headers[header]

        with pytest.raises(MissingHeader) as exc_info:
            verifier.verify(headers, BODY)

        assert exc_info.value.header == header

    def test_signature_not_base64(self, verifier, sign_webhook):
        headers = sign_webhook(BODY)
        headers["BinancePay-Signature"] = "@@not-base64@@"

        with pytest.raises(SignatureInvalid) as exc_info:
            verifier.verify(headers, BODY)

        # Mismo mensaje sin importar qué paso falló
        assert exc_info.value.message == "Signature verification failed"

    def test_broken_certificate_is_opaque(self, sign_webhook, cert_serial):
        broken = Verifier(cert_public="-----BEGIN PUBLIC KEY-----\nAAAA\n-----END PUBLIC KEY-----",
                          cert_serial=cert_serial)

        with pytest.raises(SignatureInvalid) as exc_info:
            broken.verify(sign_webhook(BODY), BODY)

        assert exc_info.value.message == "Signature verification failed"
        assert exc_info.value.__cause__ is None

    def test_key_outside_allowed_size_rejected(self, sign_webhook, cert_serial):
        small_key = rsa.generate_private_key(public_exponent=65537, key_size=1024)
        small_pem = small_key.public_key().public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        ).decode("ascii")

        with pytest.raises(SignatureInvalid):
            Verifier(small_pem, cert_serial).verify(sign_webhook(BODY), BODY)


class TestVerifierFromApi:
    """Tests para construir el Verifier desde la consulta de certificados."""

    @pytest.mark.asyncio
    async def test_from_api(self, make_client, cert_public, cert_serial):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/binancepay/openapi/certificates"
            return httpx.Response(200, json={
                "status": "SUCCESS",
                "code": "000000",
                "data": [{"certSerial": cert_serial, "certPublic": cert_public}],
            })

        async with make_client(handler) as client:
            verifier = await Verifier.from_api(client)

        assert verifier.cert_serial == cert_serial
        assert verifier.cert_public == cert_public

    @pytest.mark.asyncio
    async def test_from_api_empty_list(self, make_client):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, content=json.dumps({
                "status": "SUCCESS",
                "code": "000000",
                "data": [],
            }))

        async with make_client(handler) as client:
            with pytest.raises(CertificateNotFound):
                await Verifier.from_api(client)
