"""
Receptor de notificaciones de Binance Pay.
FastAPI application entry point.
"""

import uuid
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request

from bpay.client import BinancePayClient
from bpay.config import Settings, get_settings
from bpay.logging_config import configure_logging
from bpay.routes import webhooks_router
from bpay.services import WebhookService
from bpay.webhooks.verification import Verifier


logger = structlog.get_logger(__name__)


def create_app(
    verifier: Verifier | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """
    Crea la aplicación del receptor.

    Si no se inyecta un Verifier, se consulta el certificado al arrancar
    usando las credenciales de settings.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Gestión del ciclo de vida de la aplicación."""
        logger.info(
            "Starting notification receiver",
            app_name=settings.APP_NAME,
            version=settings.APP_VERSION,
            environment=settings.ENVIRONMENT,
        )

        if app.state.webhook_service is None:
            async with BinancePayClient.from_settings(settings) as client:
                app.state.webhook_service = WebhookService(await Verifier.from_api(client))

        yield

        logger.info("Shutting down notification receiver")

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Receptor de webhooks de Binance Pay con verificación de firma",
        lifespan=lifespan,
    )
    app.state.webhook_service = WebhookService(verifier) if verifier else None

    @app.middleware("http")
    async def add_request_id(request: Request, call_next):
        """Añade request_id a cada petición para trazabilidad."""
        request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)

        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response

    @app.get("/health", tags=["Health"])
    async def health_check():
        """Health check endpoint."""
        service = app.state.webhook_service
        return {
            "status": "healthy",
            "environment": settings.ENVIRONMENT,
            "cert_serial": service.verifier.cert_serial if service else None,
        }

    app.include_router(webhooks_router, prefix=settings.WEBHOOK_PATH, tags=["Webhooks"])

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("bpay.main:create_app", factory=True, host="0.0.0.0", port=8001)
