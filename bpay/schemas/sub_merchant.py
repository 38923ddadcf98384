"""
Schemas para alta de sub-merchants.
"""

from enum import IntEnum

from bpay.api import Endpoint, SignedRequest
from bpay.schemas.common import BaseSchema


class MerchantType(IntEnum):
    PERSONAL = 1
    SOLO_PROPRIETOR = 2
    PARTNERSHIP = 3
    PRIVATE_COMPANY = 4
    OTHERS = 5


class CreateSubMerchantResult(BaseSchema):
    sub_merchant_id: int


class CreateSubMerchantRequest(SignedRequest):
    """Request para registrar un sub-merchant bajo el merchant actual."""

    endpoint = Endpoint.CREATE_SUB_MERCHANT
    response_model = CreateSubMerchantResult

    merchant_name: str
    merchant_type: MerchantType
    merchant_mcc: str
    country: str
    brand_logo: str | None = None
    address: str | None = None
    company_name: str | None = None
    registration_number: str | None = None
    registration_country: str | None = None
    registration_address: str | None = None
    incorporation_date: int | None = None
    store_type: int | None = None
    site_type: int | None = None
    site_url: str | None = None
    site_name: str | None = None
    certificate_type: int | None = None
    certificate_country: str | None = None
    certificate_number: str | None = None
    certificate_valid_date: int | None = None
    contract_time_isv: int | None = None
