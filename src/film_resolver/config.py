from dataclasses import dataclass


DEFAULT_BASE_URL = "https://kinopoiskapiunofficial.tech"


@dataclass
class ResolverConfig:
    # Catalog API
    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout_s: float = 10.0

    # Logging
    log_level: str = "INFO"
