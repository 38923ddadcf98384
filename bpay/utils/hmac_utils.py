"""
Utilidades para firmas HMAC-SHA512.
Usadas para firmar las peticiones salientes a Binance Pay.
"""

import hashlib
import hmac
import secrets
import string
import time
from dataclasses import dataclass, field

import structlog


logger = structlog.get_logger(__name__)

NONCE_LENGTH = 32
NONCE_ALPHABET = string.ascii_uppercase + string.ascii_lowercase


def create_nonce(length: int = NONCE_LENGTH) -> str:
    """Genera un nonce aleatorio con las 52 letras ASCII."""
    return "".join(secrets.choice(NONCE_ALPHABET) for _ in range(length))


def current_timestamp() -> int:
    """Timestamp actual en milisegundos desde epoch."""
    return time.time_ns() // 1_000_000


def build_signature_payload(timestamp: int | str, nonce: str, body: str | None = None) -> str:
    """
    Construye el payload canónico: "timestamp\\nnonce\\nbody\\n".

    No se escapa nada. El body debe ser el JSON ya serializado, tal
    cual viaja en la petición (cadena vacía si no hay body).
    """
    return f"{timestamp}\n{nonce}\n{body or ''}\n"


def generate_signature(payload: str, secret: str) -> str:
    """
    Genera la firma HMAC-SHA512 de un payload canónico.

    Args:
        payload: Payload canónico
        secret: Clave secreta de la API

    Returns:
        Firma en hexadecimal mayúsculas
    """
    return hmac.new(
        secret.encode("utf-8"),
        payload.encode("utf-8"),
        hashlib.sha512,
    ).hexdigest().upper()


def verify_signature(payload: str, signature: str, secret: str) -> bool:
    """Verifica una firma HMAC-SHA512 en tiempo constante."""
    expected = generate_signature(payload, secret)
    match = hmac.compare_digest(expected, signature.upper())

    logger.debug(
        "HMAC signature verification",
        payload_length=len(payload),
        match=match,
    )

    return match


@dataclass(frozen=True)
class SignedContent:
    """
    Contenido firmado de una petición saliente.

    timestamp y nonce se generan por petición; viajan como cabeceras
    para que el remoto reconstruya el mismo payload canónico.
    """

    body: str = ""
    timestamp: int = field(default_factory=current_timestamp)
    nonce: str = field(default_factory=create_nonce)

    @property
    def payload(self) -> str:
        return build_signature_payload(self.timestamp, self.nonce, self.body)

    def sign(self, secret: str) -> str:
        return generate_signature(self.payload, secret)
