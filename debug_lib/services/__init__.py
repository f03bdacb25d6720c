"""Services package: the container shared with request handlers."""
from .container import ServiceContainer

__all__ = [
    "ServiceContainer",
]
