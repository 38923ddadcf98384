"""
Servicios del receptor de notificaciones.
"""

from bpay.services.webhook_service import WebhookService

__all__ = [
    "WebhookService",
]
