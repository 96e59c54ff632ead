from typing import Any

from .case_functions import case_functions, case_types
from .enumeration import CaseType
from .exceptions import EmptyValue, InvalidCaseIdentifier


def _normalize(case_type: Any) -> Any:
    if isinstance(case_type, CaseType):
        return case_type.value
    return case_type


def is_case_type(case_type: Any) -> bool:
    case_type = _normalize(case_type)
    return isinstance(case_type, str) and case_type in case_types


def assert_case_type(case_type: Any) -> str:
    """
    Check that `case_type` names one of the supported cases.

    Args:
        case_type: Case identifier such as "camelCase", or a `CaseType` member.

    Returns:
        The identifier as a plain string.

    Raises:
        InvalidCaseIdentifier: If the identifier is missing or unknown.
    """
    if not is_case_type(case_type):
        raise InvalidCaseIdentifier(details={"case_type": case_type})
    return _normalize(case_type)


def is_value(value: Any) -> bool:
    # whitespace-only strings are accepted, only emptiness is rejected
    return isinstance(value, str) and value != ""


def assert_value(value: Any) -> str:
    if not is_value(value):
        raise EmptyValue()
    return value


def to_case(case_type: CaseType | str, value: str) -> str:
    """
    Convert `value` to the case named by `case_type`.

    The identifier is validated before the value, so an unknown case is
    reported even when the value is empty as well.

    Args:
        case_type: One of the keys of `case_functions`.
        value: Non-empty string to convert.

    Returns:
        The converted string.

    Raises:
        InvalidCaseIdentifier: If the case type is not supported.
        EmptyValue: If the value is empty.

    Examples:
        >>> to_case("camelCase", "test string")
        'testString'
    """
    case_type = assert_case_type(case_type)
    value = assert_value(value)
    return case_functions[case_type](value)
