from .handler import PaymentHandler
from .payment_request import PaymentRequest, to_minor_units

__all__ = ["PaymentHandler", "PaymentRequest", "to_minor_units"]
