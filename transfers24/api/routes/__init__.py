from . import payments

__all__ = ["payments"]
