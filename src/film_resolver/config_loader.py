"""
Configuration loader with validation.
"""
import logging
from dotenv import load_dotenv
from .config import DEFAULT_BASE_URL, ResolverConfig
from .config_validator import get_float_env, get_optional_env, get_required_env, validate_api_key
from .exceptions import ConfigurationError


_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def load_config_from_env(dotenv: bool = True) -> ResolverConfig:
    """
    Load configuration from environment variables with validation.

    Usage:
        config = load_config_from_env()
        resolver = create_film_resolver(config)

    :param dotenv: Whether to read a .env file first (local development)
    :return: Validated ResolverConfig instance
    :raises: ConfigurationError if required configs are missing or invalid
    """
    if dotenv:
        load_dotenv()

    api_key = validate_api_key(
        get_required_env("KINOPOISK_API_KEY", "Kinopoisk Unofficial API key"),
        "KINOPOISK_API_KEY",
        min_length=8,
    )

    log_level = (get_optional_env("LOG_LEVEL", default="INFO") or "INFO").upper()
    if log_level not in _LOG_LEVELS:
        raise ConfigurationError(
            f"LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}, got '{log_level}'."
        )

    base_url = get_optional_env("KINOPOISK_BASE_URL", default=DEFAULT_BASE_URL) or DEFAULT_BASE_URL
    if not base_url.startswith(("http://", "https://")):
        raise ConfigurationError(f"KINOPOISK_BASE_URL must be an http(s) URL, got '{base_url}'.")

    return ResolverConfig(
        api_key=api_key,
        base_url=base_url.rstrip("/"),
        timeout_s=get_float_env("KINOPOISK_TIMEOUT_S", default=10.0),
        log_level=log_level,
    )


def configure_logging(config: ResolverConfig) -> None:
    """Set up root logging at the configured level."""
    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler()]
    )
