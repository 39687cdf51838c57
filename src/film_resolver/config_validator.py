"""
Configuration validation utilities.

Reads environment variables and rejects missing or placeholder values
with messages that say how to fix them.
"""
import os
import warnings
from typing import Optional
from .exceptions import ConfigurationError


def get_required_env(key: str, description: str = None) -> str:
    """
    Get required environment variable with validation.

    :param key: Environment variable name
    :param description: Human-readable description for error messages
    :return: Environment variable value
    :raises: ConfigurationError if not set or a placeholder
    """
    value = os.getenv(key)

    if not value:
        desc = description or key
        raise ConfigurationError(
            f"{key} is required but not set.\n"
            f"Please set it using one of these methods:\n"
            f"  1. Environment variable: export {key}='your-value'\n"
            f"  2. .env file: Create .env in project root with {key}=your-value\n\n"
            f"Description: {desc}"
        )

    if _is_placeholder(value):
        raise ConfigurationError(
            f"{key} appears to be a placeholder value.\n"
            f"Please set a real value. Current value: {_mask_secret(value)}"
        )

    return value


def get_optional_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """
    Get optional environment variable.

    :param key: Environment variable name
    :param default: Default value if not set
    :return: Environment variable value or default
    """
    value = os.getenv(key, default)

    if value and _is_placeholder(value):
        # Warn but don't fail for optional configs
        warnings.warn(
            f"{key} appears to be a placeholder. Using default or None.",
            UserWarning
        )
        return default

    return value


def get_float_env(key: str, default: float, minimum: float = 0.0) -> float:
    """
    Get optional numeric environment variable.

    :param key: Environment variable name
    :param default: Value used when the variable is not set
    :param minimum: Exclusive lower bound
    :return: Parsed value
    :raises: ConfigurationError if the value is not a number above minimum
    """
    raw = get_optional_env(key)
    if raw is None or raw.strip() == "":
        return default

    try:
        value = float(raw)
    except ValueError:
        raise ConfigurationError(f"{key} must be a number, got '{raw}'.")

    if value <= minimum:
        raise ConfigurationError(f"{key} must be greater than {minimum}, got {value}.")
    return value


def validate_api_key(key: str, key_name: str, min_length: int = 20) -> str:
    """
    Validate API key format.

    :param key: API key to validate
    :param key_name: Name of the key (for error messages)
    :param min_length: Minimum expected length
    :return: Validated key
    :raises: ConfigurationError if invalid
    """
    if not key:
        raise ConfigurationError(f"{key_name} is required.")

    if _is_placeholder(key):
        raise ConfigurationError(
            f"{key_name} appears to be a placeholder. "
            f"Please set a real API key."
        )

    if len(key) < min_length:
        raise ConfigurationError(
            f"{key_name} appears to be invalid (too short: {len(key)} chars). "
            f"Expected at least {min_length} characters."
        )

    return key


def _is_placeholder(value: str) -> bool:
    """Check if value is a placeholder."""
    if not value:
        return False

    placeholder_patterns = [
        "your_",
        "your-",
        "placeholder",
        "xxx",
        "replace",
        "changeme",
    ]

    value_lower = value.lower()
    return any(pattern in value_lower for pattern in placeholder_patterns)


def _mask_secret(secret: str, show_chars: int = 4) -> str:
    """
    Mask secret for safe display in error messages.

    :param secret: Secret to mask
    :param show_chars: Number of characters to show at start/end
    :return: Masked secret
    """
    if not secret or len(secret) <= show_chars * 2:
        return "***"

    return f"{secret[:show_chars]}...{secret[-show_chars:]}"
