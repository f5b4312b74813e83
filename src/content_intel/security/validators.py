"""
Input Validators - checks on caller input at the pipeline boundary.

Caller-input errors are the only failures the pipeline reports outward.
The facade turns ValidationError into a {success: False, message} result
before any provider is contacted.
"""

import ipaddress
import logging
from urllib.parse import urlparse

logger = logging.getLogger(__name__)

ALLOWED_URL_SCHEMES = {"http", "https"}
BLOCKED_HOSTNAMES = {"metadata.google.internal"}


class ValidationError(ValueError):
    """Raised when input validation fails. Contains a user-friendly message."""

    pass


def validate_not_empty(value: str | None, field_name: str = "input") -> str:
    """Validate that a string is not empty or whitespace-only."""
    if not value or not value.strip():
        raise ValidationError(f"{field_name} cannot be empty")
    return value.strip()


def validate_length(
    value: str | None,
    field_name: str = "input",
    min_length: int = 0,
    max_length: int = 100_000,
) -> str:
    """Validate string length is within bounds. None counts as empty."""
    value = value or ""
    if len(value) < min_length:
        raise ValidationError(f"{field_name} must be at least {min_length} characters")
    if len(value) > max_length:
        raise ValidationError(f"{field_name} must be at most {max_length} characters")
    return value


def validate_positive_number(value: float | int, field_name: str = "number") -> float:
    """Validate that a number is positive."""
    if value <= 0:
        raise ValidationError(f"{field_name} must be positive (got {value})")
    return float(value)


def _is_private_ip(hostname: str) -> bool:
    """Check if a hostname is a private/loopback IP literal."""
    try:
        addr = ipaddress.ip_address(hostname)
        return addr.is_private or addr.is_loopback
    except ValueError:
        return False


def _is_link_local(hostname: str) -> bool:
    try:
        return ipaddress.ip_address(hostname).is_link_local
    except ValueError:
        return False


def validate_url(url: str, field_name: str = "url", allow_private: bool = False) -> str:
    """
    Validate a backend base URL.

    Blocks non-http(s) schemes, missing hostnames and cloud metadata
    endpoints (link-local 169.254.x). Loopback and private addresses are
    rejected unless allow_private is set; the local Ollama backend needs it.

    Raises:
        ValidationError: If the URL is unsafe.
    """
    if not url or not url.strip():
        raise ValidationError(f"{field_name} cannot be empty")

    parsed = urlparse(url.strip())

    if parsed.scheme not in ALLOWED_URL_SCHEMES:
        raise ValidationError(
            f"{field_name} must use http or https (got '{parsed.scheme}')"
        )

    hostname = parsed.hostname
    if not hostname:
        raise ValidationError(f"{field_name} must include a hostname")

    hostname_lower = hostname.lower()
    if hostname_lower in BLOCKED_HOSTNAMES or _is_link_local(hostname_lower):
        raise ValidationError(f"{field_name} cannot point to {hostname_lower}")

    if not allow_private:
        if hostname_lower == "localhost":
            raise ValidationError(f"{field_name} cannot point to localhost")
        if _is_private_ip(hostname_lower):
            raise ValidationError(
                f"{field_name} cannot point to private/internal addresses"
            )

    logger.debug(f"[Validators] URL validated: {parsed.scheme}://{hostname}")
    return url.strip().rstrip("/")
