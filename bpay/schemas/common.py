"""
Schemas comunes y base para reutilización.
"""

from decimal import Decimal
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel


# Montos que viajan como número JSON (no como string)
Amount = Annotated[
    Decimal,
    PlainSerializer(float, return_type=float, when_used="json"),
]


class BaseSchema(BaseModel):
    """
    Schema base: nombres camelCase en el wire, snake_case en Python.

    Los strings no se normalizan: lo que se firma y lo que se recibe
    viaja tal cual.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class APIResponse(BaseSchema):
    """
    Envelope de todas las respuestas de Binance Pay.

    Solo `data` interesa a la capa tipada; el resto se usa para
    mapear errores.
    """

    model_config = ConfigDict(coerce_numbers_to_str=True)

    status: str
    code: str
    data: Any = None
    error_message: str | None = None

    def unwrapped_data(self) -> Any:
        """Desenvuelve un nivel si `data` es a su vez {"data": ...}."""
        if isinstance(self.data, dict) and set(self.data) == {"data"}:
            return self.data["data"]
        return self.data


class ErrorResponse(BaseSchema):
    """Cuerpo de un HTTP 400: {status, code, errorMessage}."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    status: str
    code: str
    error_message: str | None = None
