import copy
import inspect
import json
from pathlib import Path
from typing import Any, Type, TypeVar

import yaml
from loguru import logger
from pydantic import BaseModel

T = TypeVar("T", bound=BaseModel)


class PydanticConfigParser:
    """Builds a pydantic config from model defaults, YAML files and `key=value` overrides.

    Later sources win. YAML names are looked up next to the parser subclass
    first, so packaged configs can be referenced by bare name.
    """

    default_config: str = ""

    def __init__(self, config_class: Type[T]):
        self.config_class = config_class
        self.config_dict: dict = {}

    def _deep_merge(self, base_dict: dict, update_dict: dict) -> dict:
        result = copy.deepcopy(base_dict)

        for key, value in update_dict.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = copy.deepcopy(value)

        return result

    @staticmethod
    def _convert_value(value_str: str) -> Any:
        value_str = value_str.strip()
        lower_str = value_str.lower()

        if lower_str in ("true", "false"):
            return lower_str == "true"

        if lower_str in ("none", "null"):
            return None

        try:
            return json.loads(value_str)
        except (json.JSONDecodeError, ValueError):
            return value_str

    @staticmethod
    def load_from_yaml(yaml_path: str | Path) -> dict:
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Configuration file does not exist: {yaml_path}")

        with yaml_path.open(encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    def resolve_config_path(self, config_name: str) -> Path:
        if not config_name.endswith((".yaml", ".yml")):
            config_name += ".yaml"

        config_path = Path(inspect.getfile(self.__class__)).parent / config_name
        if config_path.exists():
            return config_path

        logger.debug(f"config={config_path} not found, try {config_name}")
        config_path = Path(config_name)
        if not config_path.exists():
            raise FileNotFoundError(f"config={config_path} not found")
        return config_path

    def merge_configs(self, *config_dicts: dict) -> dict:
        result = {}
        for config_dict in config_dicts:
            result = self._deep_merge(result, config_dict)
        return result

    def parse_dot_notation(self, dot_list: list[str]) -> dict:
        config_dict = {}

        for item in dot_list:
            if "=" not in item:
                raise ValueError(f"expected key=value, got `{item}`")

            key_path, value_str = item.split("=", 1)
            keys = key_path.strip().lstrip("-").split(".")
            current_dict = config_dict
            for key in keys[:-1]:
                current_dict = current_dict.setdefault(key, {})
            current_dict[keys[-1]] = self._convert_value(value_str)

        return config_dict

    def parse_args(self, *args: str, config: str = "") -> T:
        """Parse `key=value` overrides on top of the YAML config(s).

        `config` (or a `config=<a,b>` item in `args`) lists YAML files to load,
        comma separated; it falls back to `default_config`, and no YAML
        is loaded when both are empty.
        """
        configs_to_merge = [self.config_class().model_dump()]

        overrides = []
        for arg in args:
            key = arg.split("=", 1)[0].lstrip("-")
            if key in ("c", "config"):
                config = arg.split("=", 1)[-1]
            else:
                overrides.append(arg)

        config = config or self.default_config
        for single_config in [c.strip() for c in config.split(",") if c.strip()]:
            config_path = self.resolve_config_path(single_config)
            logger.debug(f"load config={config_path}")
            configs_to_merge.append(self.load_from_yaml(config_path))

        if overrides:
            configs_to_merge.append(self.parse_dot_notation(overrides))

        self.config_dict = self.merge_configs(*configs_to_merge)
        return self.config_class.model_validate(self.config_dict)
