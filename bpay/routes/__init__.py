"""
Routers de la API.
"""

from bpay.routes.webhooks import router as webhooks_router

__all__ = [
    "webhooks_router",
]
