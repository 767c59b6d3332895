"""
Crawl error hierarchy.
Every error is fatal for the crawl run and propagates to the caller.
"""


class CrawlError(Exception):
    """Base class for fatal crawl errors"""


class FetchError(CrawlError):
    """A page could not be retrieved or parsed into a document"""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to fetch {url}: {reason}")


class ParseError(CrawlError):
    """Timestamp text does not match the expected pattern"""

    def __init__(self, text: str, pattern: str):
        self.text = text
        self.pattern = pattern
        super().__init__(f"Cannot parse date {text!r} with pattern {pattern!r}")


class StructuralError(CrawlError):
    """Required markup is missing from a page"""


class PaginationLimitError(CrawlError):
    """A listing kept reporting more pages beyond the configured cap"""

    def __init__(self, base_url: str, max_pages: int):
        self.base_url = base_url
        self.max_pages = max_pages
        super().__init__(
            f"Pagination did not terminate for {base_url} after {max_pages} pages"
        )
