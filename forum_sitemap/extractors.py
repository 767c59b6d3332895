"""
Record extraction from parsed listing pages.
"""
from datetime import datetime
from typing import List, Optional

from bs4 import BeautifulSoup, NavigableString, Tag

from .errors import StructuralError
from .interfaces import Logger, UrlEntry
from .logging import log_info
from .utils import DateFormatter

ANCHOR_SELECTOR = "a"
DATE_SELECTOR = "span.date"


class RecordExtractor:
    """Extracts url entries from the item elements of a listing page.

    Malformed items are fatal: a missing anchor, a missing date element or
    an unparseable date aborts the whole extraction instead of being skipped.
    """

    def __init__(self, logger: Optional[Logger] = None):
        self.logger = logger
        self.date_formatter = DateFormatter()

    def extract(self, page: BeautifulSoup, selector: str,
                changefreq: str, priority: float) -> List[UrlEntry]:
        """Produce one UrlEntry per element matching selector, in page order"""
        entries = []
        for item in page.select(selector):
            entries.append(UrlEntry(
                loc=self._read_href(item),
                lastmod=self._read_date(item),
                changefreq=changefreq,
                priority=priority,
            ))
        return entries

    def latest_update(self, page: BeautifulSoup, selector: str) -> datetime:
        """Date of the first item on the page, taken as the most recent update"""
        items = page.select(selector)
        log_info(self.logger, f"Found {len(items)} items matching {selector!r}")
        if not items:
            raise StructuralError(f"No element matches {selector!r}")
        return self._read_date(items[0])

    def _read_href(self, item: Tag) -> str:
        anchor = item.select_one(ANCHOR_SELECTOR)
        if anchor is None:
            raise StructuralError(f"Item has no anchor: {self._describe(item)}")
        href = anchor.get("href")
        if not href:
            raise StructuralError(f"Anchor has no href: {self._describe(item)}")
        return href

    def _read_date(self, item: Tag) -> datetime:
        date_element = item.select_one(DATE_SELECTOR)
        if date_element is None:
            raise StructuralError(f"Item has no date element: {self._describe(item)}")

        # only the directly contained text, not nested markup
        first_child = next(iter(date_element.children), None)
        if not isinstance(first_child, NavigableString) or not first_child.strip():
            raise StructuralError(f"Date element has no text: {self._describe(item)}")

        return self.date_formatter.parse_forum_date(str(first_child))

    @staticmethod
    def _describe(item: Tag) -> str:
        text = str(item)
        return text if len(text) <= 120 else text[:120] + "..."
