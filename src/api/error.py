from typing import NoReturn

from fastapi import status
from libs.result import Error
from src.app.errors import ErrorKind


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


STATUS_BY_KIND = {
    ErrorKind.validation: status.HTTP_400_BAD_REQUEST,
    ErrorKind.unauthenticated: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.forbidden: status.HTTP_403_FORBIDDEN,
    ErrorKind.not_found: status.HTTP_404_NOT_FOUND,
    ErrorKind.conflict: status.HTTP_409_CONFLICT,
}


def raise_for_error(error: Error) -> NoReturn:
    """Raise the HTTP-facing exception matching the error's kind"""
    try:
        kind = ErrorKind(error.kind)
    except ValueError:
        kind = ErrorKind.internal

    status_code = STATUS_BY_KIND.get(kind)
    if status_code is None:
        raise ServerError(error)
    raise ClientError(error, status_code=status_code)
