import logging
import json
from typing import Any, Dict, Optional

PACKAGE_LOGGER = "ruckus_smartzone_api"

# Keys that must never reach a log record verbatim.
_REDACTED_KEYS = {"password", "serviceTicket"}


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger with the appropriate name.

    Args:
        name: Optional specific logger name. If not provided, uses the package logger.

    Returns:
        A logger instance for the specified name
    """
    if name is None:
        return logging.getLogger(PACKAGE_LOGGER)
    elif name.startswith(PACKAGE_LOGGER):
        return logging.getLogger(name)
    else:
        return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")


def redact(data: Dict[str, Any]) -> Dict[str, Any]:
    """Return a shallow copy of ``data`` with credentials and tickets masked."""
    return {k: ("***" if k in _REDACTED_KEYS and v else v) for k, v in data.items()}


def log_extra_fields(
    logger: logging.Logger,
    obj_name: str,
    obj_id: str,
    extra_fields: Dict[str, Any],
    max_length: int = 300,
):
    """
    Log extra fields found in an object using the provided logger.

    Args:
        logger: Logger to use
        obj_name: Name of the object type (e.g., 'AP', 'Zone').
        obj_id: Identifier for the specific object (e.g., MAC address, zone id).
        extra_fields: Dictionary of extra fields.
        max_length: Maximum length for field values in the log. Default is 300.
    """
    if not logger.isEnabledFor(logging.DEBUG):
        return

    if not extra_fields:
        logger.debug(f"No extra fields for {obj_name} {obj_id}")
        return

    truncated_fields = {}
    for key, value in extra_fields.items():
        if isinstance(value, (dict, list)):
            try:
                value_str = json.dumps(value)
                if len(value_str) > max_length:
                    value_str = value_str[:max_length] + "... [truncated]"
                truncated_fields[key] = value_str
            except (TypeError, ValueError):
                truncated_fields[key] = f"<complex structure: {type(value).__name__}>"
        elif isinstance(value, str) and len(value) > max_length:
            truncated_fields[key] = value[:max_length] + "... [truncated]"
        else:
            truncated_fields[key] = value

    logger.debug(
        f"Extra fields for {obj_name} {obj_id}: {json.dumps(truncated_fields, indent=2)}"
    )


def log_api_response(
    logger: logging.Logger,
    url: str,
    response_data: Any,
    status_code: int,
    truncate: bool = True,
    max_length: int = 500,
):
    """
    Log API response data using the provided logger.

    Args:
        logger: Logger to use
        url: The API URL that was called, without its query string.
        response_data: The decoded JSON body.
        status_code: HTTP status code.
        truncate: Whether to truncate large response values. Default is True.
        max_length: Maximum length for response in the log if truncated. Default is 500.
    """
    if not logger.isEnabledFor(logging.DEBUG):
        return

    if isinstance(response_data, dict):
        response_data = redact(response_data)

    try:
        response_str = json.dumps(response_data)
        if truncate and len(response_str) > max_length:
            response_str = response_str[:max_length] + "... [truncated]"

        logger.debug(
            f"API Response from {url} (Status: {status_code}):\n{response_str}"
        )
    except (TypeError, ValueError) as e:
        logger.debug(
            f"API Response from {url} (Status: {status_code}) - Error serializing: {e}"
        )
