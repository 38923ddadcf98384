"""
Schemas de requests, respuestas y notificaciones de Binance Pay.

Los módulos se importan directamente (bpay.schemas.order, ...); los
más usados se re-exportan desde el paquete bpay.
"""
