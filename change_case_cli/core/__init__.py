from .case_functions import case_functions, case_types
from .converter import assert_case_type, assert_value, is_case_type, is_value, to_case
from .enumeration import CaseType
from .exceptions import ChangeCaseError, EmptyValue, InvalidCaseIdentifier

__all__ = [
    "case_functions",
    "case_types",
    "assert_case_type",
    "assert_value",
    "is_case_type",
    "is_value",
    "to_case",
    "CaseType",
    "ChangeCaseError",
    "EmptyValue",
    "InvalidCaseIdentifier",
]
