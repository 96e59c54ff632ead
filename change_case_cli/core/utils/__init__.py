from .case_convert import split_words
from .logger_utils import init_logger
from .pydantic_config_parser import PydanticConfigParser

__all__ = [
    "split_words",
    "init_logger",
    "PydanticConfigParser",
]
