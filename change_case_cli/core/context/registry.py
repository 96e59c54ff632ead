from types import MappingProxyType
from typing import Callable, Mapping


class Registry(dict):
    """Name -> object table filled through the `register` decorator."""

    def register(self, name: str = ""):
        def decorator(obj):
            key = str(name or obj.__name__)
            if key in self:
                raise KeyError(f"{key} already registered")
            self[key] = obj
            return obj

        return decorator

    def freeze(self) -> Mapping[str, Callable]:
        return MappingProxyType(dict(self))
