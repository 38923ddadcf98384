"""
Servicio para procesar webhooks entrantes de Binance Pay.
Verifica la firma, decodifica la notificación y la despacha a los
handlers registrados para su bizType.
"""

import inspect
from collections.abc import Callable, Mapping
from typing import Any

import structlog

from bpay.schemas.notification import BizType, Notification
from bpay.webhooks.notification import decode_notification
from bpay.webhooks.verification import Verifier


logger = structlog.get_logger(__name__)

NotificationHandler = Callable[[Notification], Any]


class WebhookService:
    """
    Servicio de webhooks.

    - Verifica la firma RSA con el certificado del Verifier
    - Decodifica la notificación (dos pasos)
    - Llama a los handlers registrados para el bizType
    """

    def __init__(self, verifier: Verifier):
        self.verifier = verifier
        self._handlers: dict[BizType, list[NotificationHandler]] = {}

    def register(self, biz_type: BizType, handler: NotificationHandler) -> None:
        """Registra un handler (sync o async) para una familia de notificaciones."""
        self._handlers.setdefault(biz_type, []).append(handler)

    def on(self, biz_type: BizType) -> Callable[[NotificationHandler], NotificationHandler]:
        """Decorador equivalente a register()."""
        def decorator(handler: NotificationHandler) -> NotificationHandler:
            self.register(biz_type, handler)
            return handler
        return decorator

    async def process(self, headers: Mapping[str, str], body: bytes) -> Notification:
        """
        Procesa un webhook.

        1. Verifica la firma sobre el cuerpo crudo
        2. Decodifica la notificación
        3. Despacha a los handlers registrados

        Raises:
            WebhookVerificationError: Si la firma no es válida
            MalformedPayload / UnknownNotificationType: Si el cuerpo no se puede decodificar
        """
        self.verifier.verify(headers, body)
        notification = decode_notification(body)

        handlers = self._handlers.get(notification.biz_type, [])
        for handler in handlers:
            result = handler(notification)
            if inspect.isawaitable(result):
                await result

        logger.info(
            "Webhook processed",
            biz_type=notification.biz_type.value,
            biz_id=notification.biz_id,
            handlers=len(handlers),
        )

        return notification
