from typing import Any

from loggers import get_logger
from src.core.errors.exceptions import (
    CoreException,
    DemoNotFoundException,
    DirectInstantiationException,
    InvalidArgumentException,
)

error_logger = get_logger("patterns.error", plain_format=True)

ERROR_TYPES: dict[type[CoreException], str] = {
    InvalidArgumentException: "Invalid argument",
    DirectInstantiationException: "Direct instantiation",
    DemoNotFoundException: "Demo not found",
}


def format_log_message(
    error_type: str,
    message: str | None,
    additional_info: dict[str, Any] | None = None,
) -> str:
    """
    Format error message for logging

    Args:
        error_type: Type of error
        message: Error message
        additional_info: Additional context information

    Returns:
        Formatted log message
    """
    # Normalize message text and length
    raw_msg = message or "No additional details available"
    msg = " ".join(raw_msg.split())
    if len(msg) > 500:
        msg = msg[:497] + "..."

    et = (error_type or "").strip()
    err = (et[:1].upper() + et[1:]) if et else "Error"

    log_msg = f"[{err}] {msg}"

    if additional_info:
        additional_str = ", ".join(
            f"{k}={additional_info[k]!r}" for k in sorted(additional_info)
        )
        log_msg = f"{log_msg} | Additional info: {additional_str}"

    return log_msg


def error_type_for(exc: CoreException) -> str:
    for exc_type in type(exc).__mro__:
        if exc_type in ERROR_TYPES:
            return ERROR_TYPES[exc_type]
    return "Core error"


def handle_core_exception(exc: CoreException) -> int:
    """Log a CoreException and return the exit code for it."""
    log_msg = format_log_message(error_type_for(exc), exc.message, exc.additional_info)
    error_logger.error(log_msg)
    return 1
