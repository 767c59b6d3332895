"""
Pagination-aware traversal of one listing category.
"""
from typing import List, Optional

from bs4 import BeautifulSoup

from .errors import PaginationLimitError
from .extractors import RecordExtractor
from .interfaces import Logger, PageFetcher, UrlEntry
from .logging import log_info
from .utils import URLProcessor

PAGINATION_SELECTOR = "div.pages"
MORE_ATTRIBUTE = "data-more"
MORE_VALUE = "yes"
DEFAULT_MAX_PAGES = 10_000


class PaginationDriver:
    """Walks base, base/page/2, base/page/3, ... until a page reports no more pages"""

    def __init__(self, fetcher: PageFetcher,
                 extractor: Optional[RecordExtractor] = None,
                 logger: Optional[Logger] = None,
                 max_pages: int = DEFAULT_MAX_PAGES):
        if max_pages < 1:
            raise ValueError("max_pages must be at least 1")
        self.fetcher = fetcher
        self.extractor = extractor or RecordExtractor(logger)
        self.logger = logger
        self.max_pages = max_pages

    def crawl(self, base_url: str, selector: str,
              changefreq: str, priority: float) -> List[UrlEntry]:
        """Collect the entries of every page of the listing at base_url"""
        entries: List[UrlEntry] = []
        page_number = 1
        page = self.fetcher.fetch(base_url)

        while True:
            page_entries = self.extractor.extract(page, selector, changefreq, priority)
            entries.extend(page_entries)
            log_info(self.logger, f"--> page {page_number}: found {len(page_entries)} entries")

            if not self.has_more_pages(page):
                break
            if page_number >= self.max_pages:
                raise PaginationLimitError(base_url, self.max_pages)

            page_number += 1
            next_url = URLProcessor.page_url(base_url, page_number)
            log_info(self.logger, f"--> Crawling {next_url} ...")
            page = self.fetcher.fetch(next_url)

        return entries

    @staticmethod
    def has_more_pages(page: BeautifulSoup) -> bool:
        """True only when the first pagination indicator says exactly 'yes'"""
        indicator = page.select_one(PAGINATION_SELECTOR)
        if indicator is None:
            return False
        return indicator.get(MORE_ATTRIBUTE) == MORE_VALUE
