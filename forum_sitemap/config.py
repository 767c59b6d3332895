"""
Configuration management for the sitemap crawler.
Centralizes all configuration handling logic.
"""
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from .interfaces import ConfigurationProvider
from .logging import LOG_LEVELS
from .pagination import DEFAULT_MAX_PAGES

# Auto-load .env file if available
load_dotenv()

DEFAULT_ROOT_URL = "https://crunchy.rocks/"
DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = "forum-sitemap/1.0"


@dataclass
class CrawlerConfiguration:
    """Configuration for one crawl run"""
    root_url: str = DEFAULT_ROOT_URL
    timeout: float = DEFAULT_TIMEOUT
    max_pages: int = DEFAULT_MAX_PAGES
    user_agent: str = DEFAULT_USER_AGENT
    log_level: str = "INFO"
    output_path: Optional[str] = None

    @classmethod
    def from_provider(cls, provider: ConfigurationProvider) -> "CrawlerConfiguration":
        """Create configuration from a configuration provider"""
        return cls(
            root_url=provider.get("SITEMAP_ROOT_URL", DEFAULT_ROOT_URL),
            timeout=float(provider.get("SITEMAP_TIMEOUT", DEFAULT_TIMEOUT)),
            max_pages=int(provider.get("SITEMAP_MAX_PAGES", DEFAULT_MAX_PAGES)),
            user_agent=provider.get("SITEMAP_USER_AGENT", DEFAULT_USER_AGENT),
            log_level=provider.get("SITEMAP_LOG_LEVEL", "INFO"),
            output_path=provider.get("SITEMAP_OUTPUT") or None,
        )

    @classmethod
    def from_env(cls) -> "CrawlerConfiguration":
        """Create configuration from environment variables"""
        return cls.from_provider(EnvironmentConfigProvider())

    def validate(self) -> bool:
        """Validate that the configuration can drive a crawl"""
        return (
            self.root_url.startswith(("http://", "https://"))
            and self.timeout > 0
            and self.max_pages > 0
            and self.log_level.upper() in LOG_LEVELS
        )


class EnvironmentConfigProvider:
    """Configuration provider that reads from environment variables"""

    def __init__(self, prefix: str = ""):
        self.prefix = prefix

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value from environment"""
        env_key = f"{self.prefix}{key}" if self.prefix else key
        return os.getenv(env_key, default)

    def validate(self) -> bool:
        """Basic validation - always returns True for env provider"""
        return True


class DictConfigProvider:
    """Configuration provider that reads from a dictionary"""

    def __init__(self, config_dict: Dict[str, Any]):
        self.config = config_dict

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value from dictionary"""
        return self.config.get(key, default)

    def validate(self) -> bool:
        """Validate that configuration dictionary is not empty"""
        return bool(self.config)


class ConfigurationManager:
    """Centralized configuration manager"""

    def __init__(self, provider: ConfigurationProvider):
        self.provider = provider

    def get_crawler_config(self, **overrides) -> CrawlerConfiguration:
        """Get crawler configuration, applying non-None overrides"""
        config = CrawlerConfiguration.from_provider(self.provider)
        for key, value in overrides.items():
            if not hasattr(config, key):
                raise ValueError(f"Unknown configuration key: {key}")
            if value is not None:
                setattr(config, key, value)
        return config

    def validate_all(self) -> bool:
        """Validate all configurations"""
        return self.provider.validate() and self.get_crawler_config().validate()
