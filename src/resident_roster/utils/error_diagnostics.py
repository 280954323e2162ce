"""Structured diagnostics for arbitrary error values.

Normalizes exceptions, error payload dictionaries and plain values into a
single ErrorDiagnostics record that can be shown to an operator or logged.
"""

import json
import traceback
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class ErrorDiagnostics:
    """Normalized error information.

    Attributes:
        message: Human-readable error message
        stack: Formatted traceback, if available
        cause: Message of the underlying cause, if any
        error_type: Exception class name or payload type
        agent_error: Remote reject code and message, if the error carries them
        raw: Raw representation of the original error value
    """

    message: str
    stack: Optional[str] = None
    cause: Optional[str] = None
    error_type: Optional[str] = None
    agent_error: Optional[str] = None
    raw: Optional[str] = None


def normalize_error(error: Any) -> ErrorDiagnostics:
    """Extract structured diagnostics from an unknown error value.

    Args:
        error: Exception instance, error payload mapping, or any other value

    Returns:
        ErrorDiagnostics describing the error

    Example:
        >>> try:
        ...     raise ValueError("bad room") from KeyError("room")
        ... except ValueError as e:
        ...     diagnostics = normalize_error(e)
        >>> diagnostics.error_type, diagnostics.cause
        ('ValueError', "'room'")
    """
    if _is_empty(error):
        return ErrorDiagnostics(message="Unknown error occurred", raw=str(error))

    if isinstance(error, BaseException):
        return _from_exception(error)

    if isinstance(error, Mapping):
        return _from_mapping(error)

    return ErrorDiagnostics(message=str(error), raw=str(error))


def _from_exception(error: BaseException) -> ErrorDiagnostics:
    diagnostics = ErrorDiagnostics(
        message=str(error),
        error_type=type(error).__name__,
    )

    if error.__traceback__ is not None:
        diagnostics.stack = "".join(
            traceback.format_exception(type(error), error, error.__traceback__)
        ).rstrip()

    if error.__cause__ is not None:
        diagnostics.cause = str(error.__cause__)

    reject_code = getattr(error, "reject_code", None)
    reject_message = getattr(error, "reject_message", None)
    if reject_code is not None:
        diagnostics.agent_error = f"Reject code: {reject_code}"
    if not _is_empty(reject_message):
        if diagnostics.agent_error:
            diagnostics.agent_error = (
                f"{diagnostics.agent_error}, Message: {reject_message}"
            )
        else:
            diagnostics.agent_error = f"Reject message: {reject_message}"

    return diagnostics


def _is_empty(value: Any) -> bool:
    """True for None, False, zero, empty text and empty mappings.

    Other values are never tested for truthiness, since objects such as
    DataFrames refuse to be coerced to bool.
    """
    if value is None:
        return True
    if isinstance(value, (str, bytes, int, float)):
        return not value
    if isinstance(value, Mapping):
        return len(value) == 0
    return False


def _first_present(error: Mapping, *keys: str) -> Any:
    for key in keys:
        value = error.get(key)
        if not _is_empty(value):
            return value
    return None


def _from_mapping(error: Mapping) -> ErrorDiagnostics:
    message = _first_present(error, "message", "error")
    diagnostics = ErrorDiagnostics(
        message="Unknown error" if message is None else str(message),
        error_type=_first_present(error, "name", "type"),
    )

    stack = _first_present(error, "stack")
    if stack is not None:
        diagnostics.stack = str(stack)

    cause = _first_present(error, "cause")
    if cause is not None:
        diagnostics.cause = str(cause)

    reject_code = error.get("reject_code")
    reject_message = _first_present(error, "reject_message")
    if reject_code is not None or reject_message is not None:
        parts = []
        if reject_code is not None:
            parts.append(f"Code: {reject_code}")
        if reject_message is not None:
            parts.append(f"Message: {reject_message}")
        diagnostics.agent_error = ", ".join(parts)

    try:
        diagnostics.raw = json.dumps(error, indent=2, default=str)
    except (TypeError, ValueError):
        # Non-string keys, circular references
        diagnostics.raw = repr(error)
    return diagnostics
