"""Logging middleware with sensitive data redaction."""

import re

# Sensitive parameters to redact from URLs
SENSITIVE_PARAMS = [
    "api_key",
    "token",
    "password",
    "secret",
    "access_token",
    "authorization",
]

# user:password@ in Elasticsearch URLs
_USERINFO_PATTERN = re.compile(r"(https?://)[^/@\s]+@")


def redact_sensitive_data(url: str) -> str:
    """Redact credentials and sensitive query parameters from URL."""
    redacted = _USERINFO_PATTERN.sub(r"\1***REDACTED***@", url)
    for param in SENSITIVE_PARAMS:
        pattern = rf"{param}=([^&\s\"]+)"
        redacted = re.sub(pattern, f"{param}=***REDACTED***", redacted)
    return redacted
