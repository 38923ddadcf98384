"""
Endpoint para webhooks entrantes de Binance Pay.
"""

import structlog
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from bpay.services import WebhookService
from bpay.utils.exceptions import (
    MalformedPayload,
    UnknownNotificationType,
    WebhookVerificationError,
)


logger = structlog.get_logger(__name__)

router = APIRouter()


def get_webhook_service(request: Request) -> WebhookService:
    """Dependency para obtener el WebhookService de la aplicación."""
    return request.app.state.webhook_service


def _fail(message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"returnCode": "FAIL", "returnMessage": message},
    )


@router.post(
    "",
    status_code=status.HTTP_200_OK,
    summary="Webhook de Binance Pay",
    description="""
    Endpoint para recibir notificaciones de Binance Pay.

    - Valida la firma RSA sobre el cuerpo crudo y las cabeceras `BinancePay-*`
    - Decodifica la notificación según `bizType`
    - Despacha a los handlers registrados

    Binance espera `{"returnCode": "SUCCESS", "returnMessage": null}`.
    """,
)
async def binance_pay_webhook(
    request: Request,
    service: WebhookService = Depends(get_webhook_service),
):
    """Procesa un webhook de Binance Pay."""
    # Leer body crudo para validar firma
    payload = await request.body()

    try:
        notification = await service.process(request.headers, payload)
    except WebhookVerificationError as e:
        logger.error("Binance Pay webhook verification failed", error=e.message, code=e.code)
        return _fail("Webhook verification failed")
    except (MalformedPayload, UnknownNotificationType) as e:
        logger.error("Binance Pay webhook could not be decoded", error=e.message, code=e.code)
        return _fail("Could not parse the body")

    logger.info(
        "Binance Pay webhook accepted",
        biz_type=notification.biz_type.value,
        biz_id=notification.biz_id,
    )

    return {"returnCode": "SUCCESS", "returnMessage": None}
