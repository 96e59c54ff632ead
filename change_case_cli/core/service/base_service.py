from abc import ABC, abstractmethod

from ..schema import ServiceConfig


class BaseService(ABC):

    def __init__(self, service_config: ServiceConfig):
        self.service_config: ServiceConfig = service_config

    @abstractmethod
    def run(self, *args, **kwargs) -> int:
        """Run the service and return a process exit code."""
