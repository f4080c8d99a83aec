"""Client integration layer for the Transfers24 payment gateway."""

from .credentials import Credentials, CredentialsMode
from .decoder import DecodedOutcome, ResponseDecoder
from .exceptions import GatewayError, MissingCredentials, NoEnvironmentSelected, Transfers24Error
from .responses import GatewayReply, InvalidResponse, Register, Response, TestConnection, Verify
from .services import PaymentHandler, PaymentRequest

__all__ = [
    "Credentials",
    "CredentialsMode",
    "DecodedOutcome",
    "GatewayError",
    "GatewayReply",
    "InvalidResponse",
    "MissingCredentials",
    "NoEnvironmentSelected",
    "PaymentHandler",
    "PaymentRequest",
    "Register",
    "Response",
    "ResponseDecoder",
    "TestConnection",
    "Transfers24Error",
    "Verify",
]
