from ..core.utils import PydanticConfigParser


class ChangeCaseConfigParser(PydanticConfigParser):
    default_config: str = "default"
