"""
Helpers para webhooks: verificación de firma y decodificación.
"""

from bpay.webhooks.notification import decode_notification
from bpay.webhooks.verification import Verifier

__all__ = [
    "Verifier",
    "decode_notification",
]
