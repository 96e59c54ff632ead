import sys
from typing import Sequence

from loguru import logger

from .base_service import BaseService
from ..case_functions import case_functions, case_types
from ..converter import to_case
from ..exceptions import ChangeCaseError


class CmdService(BaseService):
    """Command-line shell around `to_case`: one case, one value, one line of output."""

    def usage(self) -> str:
        app_name = self.service_config.app_name
        example_value = self.service_config.example_value
        examples = "\n  ".join(
            f'change-case -c {name} "{example_value}" # {fn(example_value)}' for name, fn in case_functions.items()
        )

        return f"""{app_name}: Convert strings between various cases.

Usage:

  change-case --case <CASE> <STRING>
  python -m change_case_cli --case <CASE> <STRING>

Options:

  -c, --case <CASE>          The target case.
  --config <NAME|PATH>       YAML config, comma separated (default: default).
  -o, --option <KEY=VALUE>   Override a config value, may be repeated.
  -h, --help                 Show this message.

Arguments:

  CASE: The target case. Can be one of:
        {", ".join(sorted(case_types))}

Examples:

  {examples}
"""

    def run(self, case: str | None = None, values: Sequence[str] = ()) -> int:
        case = case or self.service_config.case
        if not case or len(values) != 1:
            logger.debug(f"invalid arguments: case={case!r} values={list(values)!r}")
            print("Invalid arguments!\n", file=sys.stderr)
            print(self.usage())
            return 1

        try:
            result = to_case(case, values[0])
        except ChangeCaseError as e:
            logger.debug(f"{type(e).__name__}: {e.message} details={e.details}")
            print(e.message, file=sys.stderr)
            return 1

        logger.debug(f"case={case} value={values[0]!r} result={result!r}")
        print(result)
        return 0
