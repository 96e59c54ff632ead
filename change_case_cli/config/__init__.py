from .config_parser import ChangeCaseConfigParser

__all__ = [
    "ChangeCaseConfigParser",
]
