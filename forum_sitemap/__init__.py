"""
Forum sitemap generator.
Crawls a forum's listing pages and renders the discovered URLs as a sitemap.
"""

# Core interfaces
from .interfaces import (
    CHANGE_FREQUENCIES,
    DAILY,
    HOURLY,
    MONTHLY,
    ListingCategory,
    Logger,
    PageFetcher,
    UrlEntry,
)

# Errors
from .errors import (
    CrawlError,
    FetchError,
    PaginationLimitError,
    ParseError,
    StructuralError,
)

# Crawling and rendering
from .extractors import RecordExtractor
from .pagination import PaginationDriver
from .crawler import DEFAULT_CATEGORIES, CrawlOrchestrator
from .sitemap import SitemapSerializer, generate_sitemap
from .fetchers import HTTPPageFetcher, StaticPageFetcher

# Configuration and wiring
from .config import ConfigurationManager, CrawlerConfiguration
from .container import get_container, get_service_builder
from .logging import LoggerFactory

__all__ = [
    # Interfaces
    'CHANGE_FREQUENCIES',
    'DAILY',
    'HOURLY',
    'MONTHLY',
    'ListingCategory',
    'Logger',
    'PageFetcher',
    'UrlEntry',

    # Errors
    'CrawlError',
    'FetchError',
    'PaginationLimitError',
    'ParseError',
    'StructuralError',

    # Crawling and rendering
    'RecordExtractor',
    'PaginationDriver',
    'DEFAULT_CATEGORIES',
    'CrawlOrchestrator',
    'SitemapSerializer',
    'generate_sitemap',
    'HTTPPageFetcher',
    'StaticPageFetcher',

    # Configuration and wiring
    'ConfigurationManager',
    'CrawlerConfiguration',
    'get_container',
    'get_service_builder',
    'LoggerFactory',
]
