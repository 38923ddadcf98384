"""
Tests para la decodificación de notificaciones.
"""

import json

import pytest

from bpay.schemas.notification import (
    BizType,
    OrderNotification,
    PayoutNotification,
    PayStatus,
    RefundBizStatus,
    RefundNotification,
)
from bpay.schemas.order import TerminalType
from bpay.schemas.payout import BatchStatus
from bpay.schemas.refund import DuplicateRequest
from bpay.utils.exceptions import MalformedPayload, UnknownNotificationType
from bpay.webhooks.notification import decode_notification, parse_envelope


class TestDecodeNotification:
    """Tests del decodificado en dos pasos."""

    def test_order_notification(self, order_notification_body):
        notification = decode_notification(order_notification_body)

        assert isinstance(notification, OrderNotification)
        assert notification.biz_type is BizType.PAY
        assert notification.biz_id == 29383937493038367292
        assert notification.biz_status is PayStatus.PAY_SUCCESS
        assert notification.detail.merchant_trade_no == "9825382937292"
        assert notification.detail.trade_type is TerminalType.WEB
        assert notification.detail.total_fee == 0.88

    def test_bytes_body(self, order_notification_body):
        notification = decode_notification(order_notification_body.encode("utf-8"))

        assert isinstance(notification, OrderNotification)

    def test_refund_notification(self, refund_notification_body):
        notification = decode_notification(refund_notification_body)

        assert isinstance(notification, RefundNotification)
        assert notification.biz_status is RefundBizStatus.REFUND_SUCCESS
        refund = notification.detail.refund_info
        assert refund.order_amount == "0.01000000"
        assert refund.remaining_attempts == 9
        assert refund.duplicate_request is DuplicateRequest.NO

    def test_payout_notification(self, payout_notification_body):
        notification = decode_notification(payout_notification_body)

        assert isinstance(notification, PayoutNotification)
        assert notification.biz_status is BatchStatus.SUCCESS
        assert notification.detail.request_id == "gg8127129"
        assert notification.detail.total_number == 2

    def test_pay_closed(self, order_detail):
        body = json.dumps({
            "bizType": "PAY",
            "data": json.dumps(order_detail),
            "bizId": 1,
            "bizStatus": "PAY_CLOSED",
        })

        assert decode_notification(body).biz_status is PayStatus.PAY_CLOSED

    def test_envelope_keeps_data_as_string(self, order_notification_body):
        envelope = parse_envelope(order_notification_body)

        assert envelope.biz_type == "PAY"
        assert isinstance(envelope.data, str)


class TestDecodeErrors:
    """Errores de decodificación."""

    def test_unknown_biz_type(self, order_detail):
        body = json.dumps({
            "bizType": "PAY_V2",
            "data": json.dumps(order_detail),
            "bizId": 1,
            "bizStatus": "PAY_SUCCESS",
        })

        with pytest.raises(UnknownNotificationType) as exc_info:
            decode_notification(body)

        assert exc_info.value.biz_type == "PAY_V2"

    def test_invalid_outer_json(self):
        with pytest.raises(MalformedPayload):
            decode_notification("malformed_body")

    def test_missing_envelope_field(self, order_detail):
        body = json.dumps({"bizType": "PAY", "data": json.dumps(order_detail)})

        with pytest.raises(MalformedPayload):
            decode_notification(body)

    def test_invalid_inner_json(self):
        body = json.dumps({
            "bizType": "PAY",
            "data": "{not json",
            "bizId": 1,
            "bizStatus": "PAY_SUCCESS",
        })

        with pytest.raises(MalformedPayload):
            decode_notification(body)

    def test_data_shape_does_not_match_family(self, payout_notification_body):
        envelope = json.loads(payout_notification_body)
        envelope["bizType"] = "PAY"
        envelope["bizStatus"] = "PAY_SUCCESS"

        with pytest.raises(MalformedPayload):
            decode_notification(json.dumps(envelope))

    def test_status_from_another_family(self, order_detail):
        body = json.dumps({
            "bizType": "PAY",
            "data": json.dumps(order_detail),
            "bizId": 1,
            "bizStatus": "REFUND_SUCCESS",
        })

        with pytest.raises(MalformedPayload):
            decode_notification(body)
