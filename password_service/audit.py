"""
Audit Logging Utilities
Structured audit records for password checks, written to the application log
"""
from typing import Dict, Any, Optional
from starlette.requests import Request
import logging

logger = logging.getLogger(__name__)

SENSITIVE_KEYS = (
    'password', 'old_password', 'token', 'secret', 'key',
    'credential', 'authorization', 'email', 'first_name',
    'last_name', 'user_name', 'user_info',
)


def redact_sensitive_data(data: Any) -> Any:
    """
    Redact passwords and identity fields before they reach a log

    Args:
        data: Value that may contain sensitive fields

    Returns:
        Copy with sensitive values replaced by "[REDACTED]"
    """
    if isinstance(data, dict):
        return {
            key: "[REDACTED]" if any(sensitive in str(key).lower() for sensitive in SENSITIVE_KEYS)
            else redact_sensitive_data(value)
            for key, value in data.items()
        }
    if isinstance(data, list):
        return [redact_sensitive_data(item) for item in data]
    return data


def log_audit_event(
    action: str,
    success: bool = True,
    details: Optional[Dict[str, Any]] = None,
    request: Optional[Request] = None
) -> Dict[str, Any]:
    """
    Write an audit record to the application log

    Args:
        action: Action being performed (e.g. "password_validate")
        success: Whether the action succeeded
        details: Extra fields; redacted before logging
        request: Request to take the client address and user agent from

    Returns:
        The record that was logged
    """
    client_ip = "unknown"
    user_agent = "unknown"
    if request is not None:
        if request.client:
            client_ip = request.client.host
        user_agent = request.headers.get("user-agent", "unknown")

    record = {
        "action": action,
        "success": success,
        "client_ip": client_ip,
        "user_agent": user_agent,
        "details": redact_sensitive_data(details or {}),
    }

    message = f"AUDIT: {action} from {client_ip} - {'SUCCESS' if success else 'FAILED'}"
    if success:
        logger.info(message, extra={"audit": record})
    else:
        logger.warning(message, extra={"audit": record})

    return record
