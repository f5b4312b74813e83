"""Security utilities -- prompt injection defense and caller-input validation."""
from .prompt_guard import (
    build_user_prompt,
    detect_injection_attempt,
    sanitize_for_prompt,
    wrap_user_content,
)
from .validators import (
    ValidationError,
    validate_length,
    validate_not_empty,
    validate_positive_number,
    validate_url,
)
