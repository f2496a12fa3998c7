"""Structured application errors with codes, details, log messages and stacks."""

from __future__ import annotations

import traceback
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Iterable

CODE_INTERNAL = "common.internal"
CODE_NOT_FOUND = "common.not_found"
CODE_UNAUTHORIZED = "common.unauthorized"
CODE_INVALID_PARAMETER = "common.invalid_parameter"
CODE_TIMEOUT = "common.timeout"
CODE_ALREADY_EXISTS = "common.already_exist"
CODE_FORBIDDEN = "common.forbidden"
CODE_UNIMPLEMENTED = "common.unimplemented"

_STACK_DEPTH = 32


class StatusCode(IntEnum):
    """Canonical RPC status codes."""

    OK = 0
    CANCELED = 1
    UNKNOWN = 2
    INVALID_ARGUMENT = 3
    DEADLINE_EXCEEDED = 4
    NOT_FOUND = 5
    ALREADY_EXISTS = 6
    PERMISSION_DENIED = 7
    RESOURCE_EXHAUSTED = 8
    FAILED_PRECONDITION = 9
    ABORTED = 10
    OUT_OF_RANGE = 11
    UNIMPLEMENTED = 12
    INTERNAL = 13
    UNAVAILABLE = 14
    DATA_LOSS = 15
    UNAUTHENTICATED = 16

    def __str__(self) -> str:
        return "".join(part.capitalize() for part in self.name.split("_")).replace(
            "Canceled", "Canceled"
        )


DEFAULT_CODE_MAP: dict[StatusCode, str] = {
    StatusCode.CANCELED: CODE_TIMEOUT,
    StatusCode.UNKNOWN: CODE_INTERNAL,
    StatusCode.INVALID_ARGUMENT: CODE_INVALID_PARAMETER,
    StatusCode.DEADLINE_EXCEEDED: CODE_TIMEOUT,
    StatusCode.NOT_FOUND: CODE_NOT_FOUND,
    StatusCode.ALREADY_EXISTS: CODE_ALREADY_EXISTS,
    StatusCode.PERMISSION_DENIED: CODE_FORBIDDEN,
    StatusCode.RESOURCE_EXHAUSTED: CODE_INTERNAL,
    StatusCode.FAILED_PRECONDITION: CODE_INTERNAL,
    StatusCode.ABORTED: CODE_INTERNAL,
    StatusCode.OUT_OF_RANGE: CODE_INTERNAL,
    StatusCode.UNIMPLEMENTED: CODE_UNIMPLEMENTED,
    StatusCode.INTERNAL: CODE_INTERNAL,
    StatusCode.UNAVAILABLE: CODE_INTERNAL,
    StatusCode.DATA_LOSS: CODE_INTERNAL,
    StatusCode.UNAUTHENTICATED: CODE_UNAUTHORIZED,
}


@dataclass
class Details:
    """Additional information about an error, typically per input field."""

    field: str
    message: str

    def as_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message}


class Error(Exception):
    """Application error.

    ``code`` identifies the error, ``message`` is user facing and ``details``
    carries extra information. The log message may hold information not meant
    for end users and is only exposed through :meth:`log_error`.
    """

    def __init__(
        self,
        code: str,
        message: str,
        details: Iterable[Details] | None = None,
        *,
        log_message: str = "",
        cause: BaseException | None = None,
        stack: tuple[traceback.FrameSummary, ...] = (),
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: list[Details] = list(details) if details is not None else []
        self._log_message = log_message
        self.cause = cause
        self.__cause__ = cause
        self._stack = stack

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"Error(code={self.code!r}, message={self.message!r})"

    def log_error(self) -> str:
        """Return the log message, followed by the cause chain's messages."""
        if self.cause is None:
            return self._log_message
        if isinstance(self.cause, Error):
            return f"{self._log_message}: {self.cause.log_error()}"
        return f"{self._log_message}: {self.cause}"

    def print_stack_trace(self) -> str:
        """Render the stack captured at creation, innermost frame first."""
        return "".join(
            f"{frame.name}\n\t{frame.filename}:{frame.lineno}\n" for frame in self._stack
        )

    def add_details(self, *details: Details) -> None:
        self.details.extend(details)

    def as_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "details": [d.as_dict() for d in self.details],
        }


def _callers() -> tuple[traceback.FrameSummary, ...]:
    # Drop this helper and the constructor function that called it.
    frames = traceback.extract_stack()[:-2]
    return tuple(reversed(frames[-_STACK_DEPTH:]))


def _format(message: str, args: tuple[Any, ...]) -> str:
    return message % args if args else message


def _default_log(code: str, message: str) -> str:
    return f"[{code}] {message}"


def new(code: str, message: str) -> Error:
    """Create an error whose log message is built from code and message."""
    return Error(code, message, log_message=_default_log(code, message), stack=_callers())


def newf(code: str, message: str, *args: Any) -> Error:
    """Like :func:`new`, with ``%``-style formatting of the message."""
    msg = _format(message, args)
    return Error(code, msg, log_message=_default_log(code, msg), stack=_callers())


def new_with_log(code: str, message: str, log_message: str) -> Error:
    """Create an error with an explicit log message."""
    return Error(code, message, log_message=log_message, stack=_callers())


def newf_with_log(code: str, message: str, log_message: str, *args: Any) -> Error:
    """Like :func:`new_with_log`, with ``%``-style formatting of the message."""
    msg = _format(message, args)
    return Error(code, msg, log_message=log_message, stack=_callers())


def wrap(cause: BaseException, code: str, message: str) -> Error:
    """Create an error that wraps ``cause``."""
    return Error(
        code, message, log_message=_default_log(code, message), cause=cause, stack=_callers()
    )


def wrapf(cause: BaseException, code: str, message: str, *args: Any) -> Error:
    """Like :func:`wrap`, with ``%``-style formatting of the message."""
    msg = _format(message, args)
    return Error(code, msg, log_message=_default_log(code, msg), cause=cause, stack=_callers())


def wrap_with_log(cause: BaseException, code: str, message: str, log_message: str) -> Error:
    """Create an error that wraps ``cause`` with an explicit log message."""
    return Error(code, message, log_message=log_message, cause=cause, stack=_callers())


def wrapf_with_log(
    cause: BaseException, code: str, message: str, log_message: str, *args: Any
) -> Error:
    """Like :func:`wrap_with_log`, with ``%``-style formatting of the message."""
    msg = _format(message, args)
    return Error(code, msg, log_message=log_message, cause=cause, stack=_callers())


def parse(err: BaseException | None) -> Error | None:
    """Return ``err`` if it is an :class:`Error`, otherwise ``None``."""
    return err if isinstance(err, Error) else None


def parse_and_wrap(err: BaseException, msg: str) -> Error:
    """Return ``err`` if it is an :class:`Error`, else wrap it as an internal error."""
    if isinstance(err, Error):
        return err
    return Error(
        CODE_INTERNAL,
        msg,
        log_message=_default_log(CODE_INTERNAL, msg),
        cause=err,
        stack=_callers(),
    )


def err_internal(msg: str) -> Error:
    return Error(CODE_INTERNAL, msg)


def err_not_found(msg: str) -> Error:
    return Error(CODE_NOT_FOUND, msg)


def err_unauthorized(msg: str) -> Error:
    return Error(CODE_UNAUTHORIZED, msg)


def err_invalid_parameter(msg: str) -> Error:
    return Error(CODE_INVALID_PARAMETER, msg)