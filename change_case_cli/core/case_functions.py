"""Registry of the supported case transforms.

Each transform is registered under its `CaseType` value. The resulting table is
frozen on import and checked against `CaseType`, so a missing or extra
transform fails at import time instead of at conversion time.

Example:
    >>> from change_case_cli import case_functions
    >>> case_functions["camelCase"]("test string")
    'testString'
"""

from typing import Callable, FrozenSet, Mapping

from .context import Registry
from .enumeration import CaseType
from .utils import case_convert

_registry = Registry()

_registry.register(CaseType.CAMEL.value)(case_convert.camel_case)
_registry.register(CaseType.CAPITAL.value)(case_convert.capital_case)
_registry.register(CaseType.CONSTANT.value)(case_convert.constant_case)
_registry.register(CaseType.DOT.value)(case_convert.dot_case)
_registry.register(CaseType.KEBAB.value)(case_convert.kebab_case)
_registry.register(CaseType.NO.value)(case_convert.no_case)
_registry.register(CaseType.PASCAL.value)(case_convert.pascal_case)
_registry.register(CaseType.PASCAL_SNAKE.value)(case_convert.pascal_snake_case)
_registry.register(CaseType.PATH.value)(case_convert.path_case)
_registry.register(CaseType.SENTENCE.value)(case_convert.sentence_case)
_registry.register(CaseType.SNAKE.value)(case_convert.snake_case)
_registry.register(CaseType.TRAIN.value)(case_convert.train_case)


def _build_case_functions(registry: Registry) -> Mapping[str, Callable[[str], str]]:
    expected = {case_type.value for case_type in CaseType}
    missing = expected - set(registry)
    extra = set(registry) - expected
    if missing or extra:
        raise RuntimeError(f"case registry out of sync: missing={sorted(missing)} extra={sorted(extra)}")
    return registry.freeze()


case_functions: Mapping[str, Callable[[str], str]] = _build_case_functions(_registry)

case_types: FrozenSet[str] = frozenset(case_functions)
