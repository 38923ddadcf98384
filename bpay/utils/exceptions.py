"""
Excepciones del cliente Binance Pay.

Todas heredan de BinancePayError y se propagan al llamador;
ninguna operación se reintenta automáticamente.
"""


class BinancePayError(Exception):
    """Error base del cliente."""

    def __init__(self, message: str, code: str = "BINANCE_PAY_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class TransportError(BinancePayError):
    """Fallo de red o de la capa HTTP."""

    def __init__(self, message: str):
        super().__init__(
            message=f"Transport error: {message}",
            code="TRANSPORT_ERROR",
        )


class RemoteError(BinancePayError):
    """Error estructurado devuelto por Binance Pay (HTTP 400)."""

    def __init__(self, code: str, message: str):
        super().__init__(message=message, code=code)

    def __str__(self) -> str:
        return f"code: {self.code}, error_message: {self.message}"


class ServerFault(BinancePayError):
    """El servidor remoto falló (5xx). No se reintenta."""

    def __init__(self, status_code: int, message: str, code: str = "SERVER_FAULT"):
        super().__init__(message=message, code=code)
        self.status_code = status_code


class InternalServerError(ServerFault):
    def __init__(self):
        super().__init__(500, "internal server error", code="INTERNAL_SERVER_ERROR")


class ServiceUnavailable(ServerFault):
    def __init__(self):
        super().__init__(503, "service unavailable", code="SERVICE_UNAVAILABLE")


class Unauthorized(BinancePayError):
    """Credenciales rechazadas (HTTP 401)."""

    def __init__(self):
        super().__init__(message="Unauthorized", code="UNAUTHORIZED")


class UnexpectedStatus(BinancePayError):
    """Cualquier otro status HTTP distinto de 200."""

    def __init__(self, status_code: int):
        super().__init__(
            message=f"Received response: {status_code}",
            code="UNEXPECTED_STATUS",
        )
        self.status_code = status_code


class MalformedPayload(BinancePayError):
    """JSON inválido o con forma inesperada en cualquier capa del envelope."""

    def __init__(self, message: str):
        super().__init__(
            message=f"Malformed payload: {message}",
            code="MALFORMED_PAYLOAD",
        )


class CertificateNotFound(BinancePayError):
    """La consulta de certificados devolvió una lista vacía."""

    def __init__(self):
        super().__init__(
            message="Couldn't find the certificate inside the response array",
            code="CERTIFICATE_NOT_FOUND",
        )


class WebhookVerificationError(BinancePayError):
    """Error base de verificación de webhooks."""


class MissingHeader(WebhookVerificationError):
    """Falta una cabecera de firma obligatoria."""

    def __init__(self, header: str):
        super().__init__(
            message=f"Could not find {header} in headers",
            code="MISSING_HEADER",
        )
        self.header = header


class CertificateMismatch(WebhookVerificationError):
    """El serial de la cabecera no coincide con el certificado almacenado."""

    def __init__(self, received: str):
        super().__init__(
            message="Certificate serial does not match the stored certificate",
            code="CERTIFICATE_MISMATCH",
        )
        self.received = received


class SignatureInvalid(WebhookVerificationError):
    """
    La verificación criptográfica falló.

    El mensaje es siempre el mismo: no revela qué paso falló.
    """

    def __init__(self):
        super().__init__(
            message="Signature verification failed",
            code="SIGNATURE_INVALID",
        )


class UnknownNotificationType(BinancePayError):
    """bizType no reconocido en una notificación."""

    def __init__(self, biz_type: str):
        super().__init__(
            message=f"Unknown notification type: {biz_type}",
            code="UNKNOWN_NOTIFICATION_TYPE",
        )
        self.biz_type = biz_type
