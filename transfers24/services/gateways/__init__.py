from .gateway import BaseGateway, get_gateway
from .stub import StubGateway
from .transfers24 import Transfers24Gateway

__all__ = [
    "BaseGateway",
    "get_gateway",
    "StubGateway",
    "Transfers24Gateway",
]
