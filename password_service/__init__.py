"""
HTTP service support package initialization
"""
from .audit import redact_sensitive_data, log_audit_event
from .middleware import (
    SecurityHeadersMiddleware,
    RequestSizeLimitMiddleware,
    SecureErrorHandlingMiddleware,
    AuditLoggingMiddleware
)

__all__ = [
    'redact_sensitive_data',
    'log_audit_event',
    'SecurityHeadersMiddleware',
    'RequestSizeLimitMiddleware',
    'SecureErrorHandlingMiddleware',
    'AuditLoggingMiddleware'
]
