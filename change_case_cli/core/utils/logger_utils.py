import sys

from loguru import logger

LOG_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan> - {message}"


def init_logger(level: str = "WARNING"):
    # stdout is reserved for the converted value
    logger.remove()
    logger.add(sys.stderr, level=level.upper(), format=LOG_FORMAT)
