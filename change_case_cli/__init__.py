"""Convert strings between camelCase, snake_case, kebab-case and the other supported cases.

    >>> from change_case_cli import to_case
    >>> to_case("snakeCase", "test string")
    'test_string'
"""

from .core import (
    CaseType,
    ChangeCaseError,
    EmptyValue,
    InvalidCaseIdentifier,
    assert_case_type,
    assert_value,
    case_functions,
    case_types,
    is_case_type,
    is_value,
    to_case,
)

__version__ = "0.1.0"

__all__ = [
    "CaseType",
    "ChangeCaseError",
    "EmptyValue",
    "InvalidCaseIdentifier",
    "assert_case_type",
    "assert_value",
    "case_functions",
    "case_types",
    "is_case_type",
    "is_value",
    "to_case",
]
