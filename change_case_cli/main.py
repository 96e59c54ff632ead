import argparse
import sys
from typing import Sequence

from pydantic import ValidationError

from .config import ChangeCaseConfigParser
from .core.application import Application
from .core.schema import ServiceConfig


class ChangeCaseApp(Application):
    def __init__(self, *args, service_config: ServiceConfig = None, config_path: str = None, **kwargs):
        super().__init__(
            *args,
            service_config=service_config,
            parser=ChangeCaseConfigParser,
            config_path=config_path,
            **kwargs,
        )


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="change-case", add_help=False, exit_on_error=False)
    parser.add_argument("-h", "--help", action="store_true")
    parser.add_argument("-c", "--case")
    parser.add_argument("--config", default="")
    parser.add_argument("-o", "--option", action="append", default=[])
    parser.add_argument("values", nargs="*")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)

    try:
        args, unknown = build_arg_parser().parse_known_args(argv)
    except argparse.ArgumentError:
        args, unknown = None, argv

    try:
        app = ChangeCaseApp(*(args.option if args else []), config_path=args.config if args else None)
    except (FileNotFoundError, ValueError, ValidationError) as e:
        if args is not None and args.help:
            # help falls back to the built-in defaults
            print(ChangeCaseApp(service_config=ServiceConfig()).usage())
            return 0
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    if args is not None and args.help:
        print(app.usage())
        return 0

    if args is None or unknown:
        print("Invalid arguments!\n", file=sys.stderr)
        print(app.usage())
        return 1

    return app.run_service(case=args.case, values=args.values)


if __name__ == "__main__":
    sys.exit(main())
