"""
Abstract interfaces and data structures for the sitemap crawler.
Collaborators depend on these protocols rather than on concrete classes.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import List, Protocol

from bs4 import BeautifulSoup

HOURLY = "hourly"
DAILY = "daily"
MONTHLY = "monthly"

CHANGE_FREQUENCIES = (HOURLY, DAILY, MONTHLY)


@dataclass(frozen=True)
class UrlEntry:
    """One sitemap-worthy destination with its freshness and priority hints"""
    loc: str
    lastmod: datetime
    changefreq: str
    priority: float

    def __post_init__(self):
        if not self.loc:
            raise ValueError("UrlEntry.loc must not be empty")
        if self.changefreq not in CHANGE_FREQUENCIES:
            raise ValueError(f"Unknown change frequency: {self.changefreq}")
        if not 0.0 <= self.priority <= 1.0:
            raise ValueError(f"Priority out of range [0, 1]: {self.priority}")

    def __str__(self) -> str:
        return (
            f"loc: {self.loc}\n"
            f"lastmod: {self.lastmod}\n"
            f"changefreq: {self.changefreq}\n"
            f"prio: {self.priority:f}\n"
        )


@dataclass(frozen=True)
class ListingCategory:
    """A crawlable site section and the crawl hints assigned to its items"""
    path: str
    selector: str
    changefreq: str
    priority: float


class PageFetcher(ABC):
    """Abstract base class for fetching a parsed page"""

    @abstractmethod
    def fetch(self, url: str) -> BeautifulSoup:
        """Fetch the page at url and return its parsed document"""
        pass


class SitemapTransformer(ABC):
    """Abstract base class for rendering entries into an output document"""

    @abstractmethod
    def transform(self, entries: List[UrlEntry]) -> str:
        """Transform url entries to the output format"""
        pass


class ConfigurationProvider(Protocol):
    """Protocol for configuration providers"""

    def get(self, key: str, default=None):
        """Get configuration value"""
        ...

    def validate(self) -> bool:
        """Validate configuration completeness"""
        ...


class Logger(Protocol):
    """Protocol for logging operations"""

    def info(self, message: str) -> None:
        """Log info message"""
        ...

    def warning(self, message: str) -> None:
        """Log warning message"""
        ...

    def error(self, message: str) -> None:
        """Log error message"""
        ...

    def debug(self, message: str) -> None:
        """Log debug message"""
        ...
