from .http import GatewayReply
from .outcomes import InvalidResponse, Register, Response, TestConnection, Verify

__all__ = [
    "GatewayReply",
    "InvalidResponse",
    "Register",
    "Response",
    "TestConnection",
    "Verify",
]
