"""
Schemas para creación, consulta y cierre de órdenes.
"""

from enum import Enum
from typing import Any

from pydantic import Field, StrictBool, TypeAdapter, model_validator

from bpay.api import Endpoint, SignedRequest
from bpay.schemas.common import Amount, BaseSchema
from bpay.utils.hmac_utils import create_nonce


class TerminalType(str, Enum):
    """Terminal desde donde se origina la orden."""

    APP = "APP"
    WEB = "WEB"
    WAP = "WAP"
    MINI_PROGRAM = "MINI_PROGRAM"
    OTHERS = "OTHERS"


class GoodsType(str, Enum):
    TANGIBLE_GOODS = "01"
    VIRTUAL_GOODS = "02"


class GoodsCategory(str, Enum):
    """Categorías de producto según Binance Pay."""

    ELECTRONICS = "0000"
    BOOKS_MUSIC_MOVIES = "1000"
    HOME_GARDEN_TOOLS = "2000"
    CLOTHES_SHOES_BAGS = "3000"
    TOYS_KIDS_BABY = "4000"
    AUTOMOTIVE_ACCESSORIES = "5000"
    GAME_RECHARGE = "6000"
    ENTERTAINMENT_COLLECTION = "7000"
    JEWELRY = "8000"
    DOMESTIC_SERVICE = "9000"
    BEAUTY_CARE = "A000"
    PHARMACY = "B000"
    SPORTS_OUTDOORS = "C000"
    FOOD_GROCERY_HEALTH = "D000"
    PET_SUPPLIES = "E000"
    INDUSTRY_SCIENCE = "F000"
    OTHERS = "Z000"


class OrderStatus(str, Enum):
    """Estados de una orden consultada."""

    INITIAL = "INITIAL"
    PENDING = "PENDING"
    PAID = "PAID"
    CANCELED = "CANCELED"
    ERROR = "ERROR"
    REFUNDING = "REFUNDING"
    REFUNDED = "REFUNDED"
    EXPIRED = "EXPIRED"


class CloseOrderResult(str, Enum):
    """Resultado del cierre: el remoto responde true/false."""

    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"

    @classmethod
    def from_bool(cls, closed: bool) -> "CloseOrderResult":
        return cls.SUCCESS if closed else cls.FAILURE


# ============================================
# Creación
# ============================================

class Env(BaseSchema):
    terminal_type: TerminalType = TerminalType.WEB


class Goods(BaseSchema):
    goods_type: GoodsType
    goods_category: GoodsCategory
    reference_goods_id: str
    goods_name: str
    goods_detail: str | None = None


class CreateOrderResult(BaseSchema):
    """Respuesta de creación de orden."""

    prepay_id: str
    terminal_type: TerminalType
    expire_time: int
    qrcode_link: str
    qr_content: str
    checkout_url: str
    deeplink: str
    universal_url: str


class CreateOrderRequest(SignedRequest):
    """Request para crear una orden de pago."""

    endpoint = Endpoint.CREATE_ORDER
    response_model = CreateOrderResult

    env: Env = Field(default_factory=Env)
    merchant_trade_no: str = Field(default_factory=lambda: create_nonce(10))
    order_amount: Amount
    currency: str
    goods: Goods


# ============================================
# Consulta y cierre
# ============================================

class OrderReference(SignedRequest):
    """Una orden se identifica por prepayId o por merchantTradeNo."""

    prepay_id: str | None = None
    merchant_trade_no: str | None = None

    @model_validator(mode="after")
    def require_reference(self):
        if self.prepay_id is None and self.merchant_trade_no is None:
            raise ValueError("prepay_id or merchant_trade_no is required")
        return self


class QueryOrderResult(BaseSchema):
    """Estado actual de una orden."""

    merchant_id: int
    prepay_id: str
    transaction_id: str | None = None
    merchant_trade_no: str
    status: OrderStatus
    currency: str
    order_amount: str
    open_user_id: str | None = None
    transact_time: int | None = None
    create_time: int


class QueryOrderRequest(OrderReference):
    endpoint = Endpoint.QUERY_ORDER
    response_model = QueryOrderResult


_closed_adapter = TypeAdapter(StrictBool)


class CloseOrderRequest(OrderReference):
    endpoint = Endpoint.CLOSE_ORDER
    response_model = CloseOrderResult

    @classmethod
    def parse_response(cls, data: Any) -> CloseOrderResult:
        return CloseOrderResult.from_bool(_closed_adapter.validate_python(data))
