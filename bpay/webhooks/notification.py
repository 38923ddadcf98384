"""
Decodificación de notificaciones de Binance Pay.

El webhook anida un JSON como string dentro del envelope, así que el
parseo se hace en dos pasos: primero el envelope y, según bizType, el
campo `data` al registro de esa familia.
"""

import json
from typing import Any

import structlog
from pydantic import ValidationError

from bpay.schemas.notification import (
    BizType,
    Notification,
    NotificationEnvelope,
    OrderNotification,
    PayoutNotification,
    RefundNotification,
)
from bpay.utils.exceptions import MalformedPayload, UnknownNotificationType


logger = structlog.get_logger(__name__)


NOTIFICATION_TYPES: dict[BizType, type] = {
    BizType.PAY: OrderNotification,
    BizType.PAY_REFUND: RefundNotification,
    BizType.PAYOUT: PayoutNotification,
}


def _load_json(raw: str | bytes, layer: str) -> Any:
    try:
        return json.loads(raw)
    except ValueError as e:
        raise MalformedPayload(f"invalid JSON in {layer}: {e}") from e


def parse_envelope(body: str | bytes) -> NotificationEnvelope:
    """Primer paso: envelope {bizType, bizId, bizStatus, data}."""
    try:
        return NotificationEnvelope.model_validate(_load_json(body, "envelope"))
    except ValidationError as e:
        raise MalformedPayload(str(e)) from e


def decode_envelope(envelope: NotificationEnvelope) -> Notification:
    """
    Segundo paso: interpreta `data` y `bizStatus` según bizType.

    Raises:
        UnknownNotificationType: Si bizType no es PAY, PAY_REFUND ni PAYOUT
        MalformedPayload: Si `data` o `bizStatus` no encajan con la familia
    """
    try:
        biz_type = BizType(envelope.biz_type)
    except ValueError:
        logger.warning("Unknown notification type", biz_type=envelope.biz_type)
        raise UnknownNotificationType(envelope.biz_type) from None

    notification_class = NOTIFICATION_TYPES[biz_type]

    try:
        notification = notification_class(
            biz_id=envelope.biz_id,
            biz_status=envelope.biz_status,
            detail=_load_json(envelope.data, "data"),
        )
    except ValidationError as e:
        raise MalformedPayload(str(e)) from e

    logger.info(
        "Notification decoded",
        biz_type=biz_type.value,
        biz_id=envelope.biz_id,
        biz_status=envelope.biz_status,
    )

    return notification


def decode_notification(body: str | bytes) -> Notification:
    """Decodifica el cuerpo crudo de un webhook a una notificación tipada."""
    return decode_envelope(parse_envelope(body))
