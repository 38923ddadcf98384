"""
Configuración del cliente Binance Pay.
Carga variables de entorno y define settings globales.
"""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_HOST = "https://bpay.binanceapi.com"


class Settings(BaseSettings):
    """Configuración principal del cliente y del receptor de webhooks."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Aplicación (receptor de notificaciones)
    APP_NAME: str = "Binance Pay Notification Receiver"
    APP_VERSION: str = "0.4.0"
    ENVIRONMENT: Literal["development", "staging", "production"] = "development"
    LOG_LEVEL: str = "INFO"

    # Credenciales: vacías por defecto (el remoto rechazará la llamada)
    BINANCE_PAY_API_KEY: str = ""
    BINANCE_PAY_API_SECRET: str = ""
    BINANCE_PAY_HOST: str = DEFAULT_HOST

    # Ruta donde se montan los webhooks entrantes
    WEBHOOK_PATH: str = "/binance-pay"


@lru_cache()
def get_settings() -> Settings:
    """Retorna instancia cacheada de settings."""
    return Settings()
