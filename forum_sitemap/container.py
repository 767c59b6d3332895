"""
Dependency injection container.
Wires configuration, logging, fetching, crawling and rendering together.
"""
from typing import Optional, Sequence

from .config import ConfigurationManager, CrawlerConfiguration, EnvironmentConfigProvider
from .crawler import DEFAULT_CATEGORIES, CrawlOrchestrator
from .extractors import RecordExtractor
from .fetchers import HTTPPageFetcher
from .interfaces import ListingCategory, Logger, PageFetcher
from .logging import LoggerFactory
from .pagination import PaginationDriver
from .sitemap import SitemapSerializer
from .storage import LocalFileStorage


class DIContainer:
    """Dependency injection container for managing crawler dependencies"""

    def __init__(self, config_manager: Optional[ConfigurationManager] = None):
        self.config_manager = config_manager or ConfigurationManager(EnvironmentConfigProvider())

    def get_config(self, **overrides) -> CrawlerConfiguration:
        return self.config_manager.get_crawler_config(**overrides)

    def get_logger(self, logger_type: str = "console", level: str = "INFO") -> Logger:
        return LoggerFactory.create(logger_type, "forum_sitemap", level)

    def get_page_fetcher(self, config: CrawlerConfiguration,
                         logger: Optional[Logger] = None) -> HTTPPageFetcher:
        return HTTPPageFetcher(
            logger=logger,
            timeout=config.timeout,
            user_agent=config.user_agent,
        )

    def get_orchestrator(self, config: CrawlerConfiguration, fetcher: PageFetcher,
                         logger: Optional[Logger] = None,
                         categories: Sequence[ListingCategory] = DEFAULT_CATEGORIES) -> CrawlOrchestrator:
        extractor = RecordExtractor(logger)
        driver = PaginationDriver(fetcher, extractor, logger, max_pages=config.max_pages)
        return CrawlOrchestrator(
            config.root_url,
            fetcher,
            categories=categories,
            driver=driver,
            extractor=extractor,
            logger=logger,
        )

    def get_serializer(self, logger: Optional[Logger] = None) -> SitemapSerializer:
        return SitemapSerializer(logger)

    def get_local_storage(self, base_path: str = ".",
                          logger: Optional[Logger] = None) -> LocalFileStorage:
        return LocalFileStorage(base_path, logger)


class ServiceBuilder:
    """Builds the service combination for one sitemap run"""

    def __init__(self, container: DIContainer, logger_type: str = "console"):
        self.container = container
        self.logger_type = logger_type

    def build_sitemap_workflow(self, fetcher: Optional[PageFetcher] = None,
                               categories: Sequence[ListingCategory] = DEFAULT_CATEGORIES,
                               **overrides):
        """Build config, logger, fetcher, orchestrator and serializer for a run"""
        config = self.container.get_config(**overrides)
        if not config.validate():
            raise ValueError(f"Invalid crawler configuration: {config}")

        logger = self.container.get_logger(self.logger_type, config.log_level)
        fetcher = fetcher or self.container.get_page_fetcher(config, logger)

        return {
            'config': config,
            'logger': logger,
            'fetcher': fetcher,
            'orchestrator': self.container.get_orchestrator(config, fetcher, logger, categories),
            'serializer': self.container.get_serializer(logger),
        }


_container = DIContainer()


def get_container() -> DIContainer:
    """Get the global container instance"""
    return _container


def get_service_builder(logger_type: str = "console") -> ServiceBuilder:
    """Get a service builder instance"""
    return ServiceBuilder(get_container(), logger_type)
