from .service_config import ServiceConfig

__all__ = [
    "ServiceConfig",
]
