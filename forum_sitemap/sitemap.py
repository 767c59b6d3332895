"""
Sitemap XML rendering.
Implements SitemapTransformer for the sitemaps.org 0.9 vocabulary.
"""
import xml.etree.ElementTree as ET
from typing import List, Optional

from .interfaces import Logger, SitemapTransformer, UrlEntry
from .logging import log_info
from .utils import DateFormatter

SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'
INDENT = "    "


class SitemapSerializer(SitemapTransformer):
    """Transforms url entries into a sitemap document, one <url> per entry"""

    def __init__(self, logger: Optional[Logger] = None):
        self.logger = logger
        self.date_formatter = DateFormatter()

    def transform(self, entries: List[UrlEntry]) -> str:
        """Transform url entries to sitemap XML"""
        log_info(self.logger, f"Transforming {len(entries)} entries to sitemap XML")

        urlset = ET.Element("urlset", xmlns=SITEMAP_NAMESPACE)
        for entry in entries:
            self._add_url(urlset, entry)

        if entries:
            ET.indent(urlset, space=INDENT)
        else:
            urlset.text = "\n"

        xml_str = ET.tostring(urlset, encoding="unicode", method="xml")
        return f"{XML_DECLARATION}\n{xml_str}\n"

    serialize = transform

    def _add_url(self, urlset: ET.Element, entry: UrlEntry) -> None:
        url = ET.SubElement(urlset, "url")
        ET.SubElement(url, "loc").text = entry.loc
        ET.SubElement(url, "lastmod").text = self.date_formatter.format_w3c_date(entry.lastmod)
        ET.SubElement(url, "changefreq").text = entry.changefreq
        ET.SubElement(url, "priority").text = f"{entry.priority:.2f}"


def generate_sitemap(entries: List[UrlEntry]) -> str:
    """Render entries as a sitemap document"""
    return SitemapSerializer().transform(entries)
