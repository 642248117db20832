"""
Application Error Kinds

Every Error returned by a use case carries one of these kinds; the API
layer maps the kind to an HTTP status in a single table.
"""

from enum import Enum
from typing import Any, Optional

from libs.result import Error


class ErrorKind(str, Enum):
    validation = "validation"
    unauthenticated = "unauthenticated"
    forbidden = "forbidden"
    not_found = "not_found"
    conflict = "conflict"
    internal = "internal"


def validation_error(code: str, message: str, details: Optional[Any] = None) -> Error:
    return Error(code, message, details, kind=ErrorKind.validation.value)


def unauthenticated_error(code: str, message: str) -> Error:
    return Error(code, message, kind=ErrorKind.unauthenticated.value)


def forbidden_error(code: str, message: str) -> Error:
    return Error(code, message, kind=ErrorKind.forbidden.value)


def not_found_error(code: str, message: str) -> Error:
    return Error(code, message, kind=ErrorKind.not_found.value)


def conflict_error(code: str, message: str) -> Error:
    return Error(code, message, kind=ErrorKind.conflict.value)


def internal_error(code: str, message: str) -> Error:
    return Error(code, message, kind=ErrorKind.internal.value)
