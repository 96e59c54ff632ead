"""Enumeration module for change-case-cli."""

from .case_type import CaseType

__all__ = [
    "CaseType",
]
