"""
Configuración de tests y fixtures compartidos.
"""

import base64
import hashlib
import json
from typing import AsyncGenerator, Callable

import httpx
import pytest
import pytest_asyncio
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa
from httpx import ASGITransport, AsyncClient

from bpay.client import BinancePayClient
from bpay.config import Settings
from bpay.main import create_app
from bpay.utils.hmac_utils import build_signature_payload
from bpay.webhooks.verification import Verifier


TEST_API_KEY = "test-api-key"
TEST_SECRET_KEY = "test-secret-key"
TEST_HOST = "https://bpay.test"


@pytest.fixture(scope="session")
def rsa_private_key() -> rsa.RSAPrivateKey:
    """Clave privada que simula la de Binance (2048 bits)."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def cert_public(rsa_private_key) -> str:
    """Clave pública en PEM, como la devuelve la consulta de certificados."""
    return rsa_private_key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    ).decode("ascii")


@pytest.fixture(scope="session")
def cert_serial(cert_public: str) -> str:
    return hashlib.md5(cert_public.encode("ascii")).hexdigest()


@pytest.fixture
def verifier(cert_public: str, cert_serial: str) -> Verifier:
    return Verifier(cert_public=cert_public, cert_serial=cert_serial)


@pytest.fixture
def sign_webhook(rsa_private_key, cert_serial) -> Callable[..., dict[str, str]]:
    """Devuelve una función que firma un body como lo haría Binance."""

    def _sign(
        body: str,
        timestamp: str = "1646584911979",
        nonce: str = "NldzYKVJuiwjCHQGlaZfwnbGaFLPimYH",
    ) -> dict[str, str]:
        payload = build_signature_payload(timestamp, nonce, body)
        signature = rsa_private_key.sign(
            payload.encode("utf-8"),
            padding.PKCS1v15(),
            hashes.SHA256(),
        )
        return {
            "BinancePay-Timestamp": timestamp,
            "BinancePay-Nonce": nonce,
            "BinancePay-Certificate-SN": cert_serial,
            "BinancePay-Signature": base64.b64encode(signature).decode("ascii"),
        }

    return _sign


@pytest.fixture
def make_client() -> Callable[[Callable[[httpx.Request], httpx.Response]], BinancePayClient]:
    """Crea un cliente cuyo transporte responde con el handler dado."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> BinancePayClient:
        return BinancePayClient(
            api_key=TEST_API_KEY,
            secret_key=TEST_SECRET_KEY,
            host=TEST_HOST,
            http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
        )

    return _make


@pytest.fixture
def order_detail() -> dict:
    return {
        "merchantTradeNo": "9825382937292",
        "totalFee": 0.88000000,
        "transactTime": 1619508939664,
        "currency": "USDT",
        "openUserId": "1211HS10K81f4273ac031",
        "productType": "Food",
        "productName": "Ice Cream",
        "tradeType": "WEB",
        "transactionId": "M_R_282737362839373",
    }


@pytest.fixture
def order_notification_body(order_detail) -> str:
    """Webhook PAY / PAY_SUCCESS con `data` como JSON serializado."""
    return json.dumps({
        "bizType": "PAY",
        "data": json.dumps(order_detail, separators=(",", ":")),
        "bizId": 29383937493038367292,
        "bizStatus": "PAY_SUCCESS",
    })


@pytest.fixture
def refund_notification_body() -> str:
    detail = {
        "merchantTradeNo": "6177e6ae81ce6f001b4a6233",
        "totalFee": 0.01,
        "transactTime": 1635248421335,
        "refundInfo": {
            "orderAmount": "0.01000000",
            "duplicateRequest": "N",
            "payerOpenId": "9aa0a8bb21cf5fbf049aad7db35dc3d3",
            "prepayId": "123289163323899904",
            "refundRequestId": "68711039982968853",
            "refundedAmount": "0.01000000",
            "remainingAttempts": 9,
            "refundAmount": "0.01000000",
        },
        "currency": "BUSD",
        "commission": 0,
        "openUserId": "b5ec36baaa5ab9a5cfb1c29c2057bd81",
        "productType": "LIVE_STREAM",
        "productName": "LIVE_STREAM",
        "tradeType": "APP",
    }
    return json.dumps({
        "bizType": "PAY_REFUND",
        "data": json.dumps(detail),
        "bizId": 123289163323899904,
        "bizStatus": "REFUND_SUCCESS",
    })


@pytest.fixture
def payout_notification_body() -> str:
    detail = {
        "requestId": "gg8127129",
        "batchStatus": "SUCCESS",
        "merchantId": 100100006288,
        "currency": "BUSD",
        "totalAmount": 2.00000000,
        "totalNumber": 2,
    }
    return json.dumps({
        "bizType": "PAYOUT",
        "data": json.dumps(detail),
        "bizId": 287654321,
        "bizStatus": "SUCCESS",
    })


@pytest.fixture
def test_settings() -> Settings:
    return Settings(ENVIRONMENT="development", WEBHOOK_PATH="/binance-pay")


@pytest.fixture
def receiver_app(verifier, test_settings):
    """Receptor con el verifier de test inyectado (no consulta certificados)."""
    return create_app(verifier=verifier, settings=test_settings)


@pytest_asyncio.fixture(scope="function")
async def app_client(receiver_app) -> AsyncGenerator[AsyncClient, None]:
    """Cliente HTTP para tests del receptor de webhooks."""
    transport = ASGITransport(app=receiver_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
