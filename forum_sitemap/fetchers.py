"""
Page fetcher implementations.
Implements the PageFetcher interface over HTTP and over in-memory HTML.
"""
from typing import Dict, List, Optional

import httpx
from bs4 import BeautifulSoup

from .errors import FetchError
from .interfaces import Logger, PageFetcher
from .logging import log_debug, log_error
from .utils import ValidationUtils

HTML_PARSER = "html.parser"


class HTTPPageFetcher(PageFetcher):
    """Fetches pages over HTTP and parses them with BeautifulSoup"""

    def __init__(self, logger: Optional[Logger] = None, timeout: float = 30,
                 user_agent: Optional[str] = None,
                 client: Optional[httpx.Client] = None):
        self.logger = logger
        self.timeout = timeout
        self.validator = ValidationUtils()
        self.fetched_urls: List[str] = []

        headers = {"User-Agent": user_agent} if user_agent else None
        self.client = client or httpx.Client(
            timeout=timeout, headers=headers, follow_redirects=True
        )

    def fetch(self, url: str) -> BeautifulSoup:
        """Fetch url and return the parsed document"""
        if not self.validator.is_valid_url(url):
            raise FetchError(url, "invalid URL")

        self.fetched_urls.append(url)
        log_debug(self.logger, f"Fetching page: {url}")

        try:
            response = self.client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            log_error(self.logger, f"HTTP {e.response.status_code} for {url}")
            raise FetchError(url, f"HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            log_error(self.logger, f"Error fetching {url}: {e}")
            raise FetchError(url, str(e)) from e

        return BeautifulSoup(response.text, HTML_PARSER)

    def close(self) -> None:
        self.client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


class StaticPageFetcher(PageFetcher):
    """Serves pages from an in-memory mapping of URL to HTML"""

    def __init__(self, pages: Dict[str, str], logger: Optional[Logger] = None):
        self.pages = dict(pages)
        self.logger = logger
        self.fetched_urls: List[str] = []

    def fetch(self, url: str) -> BeautifulSoup:
        self.fetched_urls.append(url)
        if url not in self.pages:
            log_error(self.logger, f"No page registered for {url}")
            raise FetchError(url, "not found")
        return BeautifulSoup(self.pages[url], HTML_PARSER)
