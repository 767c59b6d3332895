"""
Whole-site crawl: the home entry followed by every listing category.
"""
from typing import List, Optional, Sequence

from .extractors import RecordExtractor
from .interfaces import DAILY, HOURLY, MONTHLY, ListingCategory, Logger, PageFetcher, UrlEntry
from .logging import log_info
from .pagination import PaginationDriver
from .utils import URLProcessor

HOME_SELECTOR = "article.thread-item"
HOME_PRIORITY = 1.0

DEFAULT_CATEGORIES = (
    ListingCategory("threads", "article.thread-item", DAILY, 0.6),
    ListingCategory("tags", "article.tag-item", DAILY, 0.5),
    ListingCategory("stiki", "article.thread-item", MONTHLY, 0.7),
)


class CrawlOrchestrator:
    """Produces the ordered url entries for a whole forum site"""

    def __init__(self, root_url: str, fetcher: PageFetcher,
                 categories: Sequence[ListingCategory] = DEFAULT_CATEGORIES,
                 driver: Optional[PaginationDriver] = None,
                 extractor: Optional[RecordExtractor] = None,
                 logger: Optional[Logger] = None,
                 home_selector: str = HOME_SELECTOR):
        self.root_url = root_url
        self.fetcher = fetcher
        self.categories = list(categories)
        self.extractor = extractor or RecordExtractor(logger)
        self.driver = driver or PaginationDriver(fetcher, self.extractor, logger)
        self.logger = logger
        self.home_selector = home_selector

    def crawl(self) -> List[UrlEntry]:
        """Crawl home then each category in declared order"""
        entries = [self.crawl_home()]

        for category in self.categories:
            entries.extend(self.crawl_category(category))

        log_info(self.logger, f"Collected {len(entries)} entries in total")
        return entries

    def crawl_home(self) -> UrlEntry:
        """Root URL entry, dated by the most recently updated item on the home page"""
        log_info(self.logger, f"Crawling {self.root_url}...")
        page = self.fetcher.fetch(self.root_url)
        lastmod = self.extractor.latest_update(page, self.home_selector)
        return UrlEntry(
            loc=self.root_url,
            lastmod=lastmod,
            changefreq=HOURLY,
            priority=HOME_PRIORITY,
        )

    def crawl_category(self, category: ListingCategory) -> List[UrlEntry]:
        base_url = URLProcessor.join_path(self.root_url, category.path)
        log_info(self.logger, f"Crawling {base_url}...")
        entries = self.driver.crawl(
            base_url, category.selector, category.changefreq, category.priority
        )
        log_info(self.logger, f"found {len(entries)} entries in {category.path}")
        return entries
