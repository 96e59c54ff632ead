from .base_service import BaseService
from .cmd_service import CmdService

__all__ = [
    "BaseService",
    "CmdService",
]
