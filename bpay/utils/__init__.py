"""
Utilidades del cliente Binance Pay.
"""

from bpay.utils.hmac_utils import (
    SignedContent,
    build_signature_payload,
    create_nonce,
    current_timestamp,
    generate_signature,
    verify_signature,
)
from bpay.utils.rsa_utils import (
    public_numbers_from_pem,
    strip_pem_armor,
    verify_pkcs1_sha256,
)

__all__ = [
    # HMAC
    "SignedContent",
    "build_signature_payload",
    "create_nonce",
    "current_timestamp",
    "generate_signature",
    "verify_signature",
    # RSA
    "public_numbers_from_pem",
    "strip_pem_armor",
    "verify_pkcs1_sha256",
]
