from typing import Sequence

from loguru import logger

from .schema import ServiceConfig
from .service import CmdService
from .utils import PydanticConfigParser, init_logger


class Application:
    def __init__(
        self,
        *args,
        service_config: ServiceConfig = None,
        parser: type[PydanticConfigParser] = PydanticConfigParser,
        config_path: str = None,
        **kwargs,
    ):
        """
        Initialize application with configuration.

        Args:
            *args: `key=value` overrides passed to parser. Examples:
                - "case=snakeCase"
                - "log_level=DEBUG"
                - "example_value=hello world"
            service_config: Pre-configured ServiceConfig object, skips parsing.
            parser: Configuration parser class.
            config_path: Comma separated YAML config names or paths.
            **kwargs: Same as args, as keyword arguments.
        """
        init_logger()
        self.parser = parser(ServiceConfig)
        self.service_config: ServiceConfig = service_config
        if self.service_config is None:
            input_args = list(args)
            if kwargs:
                input_args.extend([f"{k}={v}" for k, v in kwargs.items()])
            self.service_config = self.parser.parse_args(*input_args, config=config_path or "")

        init_logger(self.service_config.log_level)
        logger.debug(f"service_config={self.service_config.model_dump()}")

    def usage(self) -> str:
        return CmdService(self.service_config).usage()

    def run_service(self, case: str | None = None, values: Sequence[str] = ()) -> int:
        return CmdService(self.service_config).run(case=case, values=values)
