#!/usr/bin/env python3
"""
Record extractor unit tests

Covers href/date extraction, date parsing and the fail-fast policy for
malformed items.
"""

import sys
import unittest
from datetime import datetime, timezone
from pathlib import Path

from bs4 import BeautifulSoup

sys.path.append(str(Path(__file__).parent.parent))
sys.path.append(str(Path(__file__).parent))

from forum_sitemap.errors import ParseError, StructuralError
from forum_sitemap.extractors import RecordExtractor
from forum_sitemap.interfaces import DAILY
from forum_sitemap.utils import DateFormatter
from fixtures import item, page

SELECTOR = "article.thread-item"


def soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


class TestRecordExtraction(unittest.TestCase):

    def setUp(self):
        self.extractor = RecordExtractor()

    def test_extracts_items_in_page_order(self):
        html = page(
            item("/t/1", "14/03/2024 09:00"),
            item("/t/2", "01/02/2023 23:59"),
        )
        entries = self.extractor.extract(soup(html), SELECTOR, DAILY, 0.6)

        self.assertEqual([e.loc for e in entries], ["/t/1", "/t/2"])
        self.assertEqual(entries[0].lastmod, datetime(2024, 3, 14, 9, 0, tzinfo=timezone.utc))
        self.assertEqual(entries[1].lastmod, datetime(2023, 2, 1, 23, 59, tzinfo=timezone.utc))
        for entry in entries:
            self.assertEqual(entry.changefreq, DAILY)
            self.assertEqual(entry.priority, 0.6)

    def test_page_without_items_yields_nothing(self):
        entries = self.extractor.extract(soup(page()), SELECTOR, DAILY, 0.6)
        self.assertEqual(entries, [])

    def test_only_matching_items_are_extracted(self):
        html = page(item("/t/1"), item("/tags/python", css_class="tag-item"))
        entries = self.extractor.extract(soup(html), "article.tag-item", DAILY, 0.5)
        self.assertEqual([e.loc for e in entries], ["/tags/python"])

    def test_first_anchor_wins(self):
        html = (
            '<article class="thread-item"><a href="/t/9">a</a><a href="/u/2">b</a>'
            '<span class="date">14/03/2024 09:00</span></article>'
        )
        entries = self.extractor.extract(soup(html), SELECTOR, DAILY, 0.6)
        self.assertEqual(entries[0].loc, "/t/9")

    def test_date_uses_directly_contained_text(self):
        html = (
            '<article class="thread-item"><a href="/t/1">a</a>'
            '<span class="date"> 14/03/2024 09:00 <em>edited</em></span></article>'
        )
        entries = self.extractor.extract(soup(html), SELECTOR, DAILY, 0.6)
        self.assertEqual(entries[0].lastmod, datetime(2024, 3, 14, 9, 0, tzinfo=timezone.utc))

    def test_missing_date_element_fails(self):
        html = page(item("/t/1"), item("/t/2", date=None))
        with self.assertRaises(StructuralError):
            self.extractor.extract(soup(html), SELECTOR, DAILY, 0.6)

    def test_missing_anchor_fails(self):
        html = page(item(href=None))
        with self.assertRaises(StructuralError):
            self.extractor.extract(soup(html), SELECTOR, DAILY, 0.6)

    def test_date_element_without_text_fails(self):
        html = '<article class="thread-item"><a href="/t/1">a</a><span class="date"><b>x</b></span></article>'
        with self.assertRaises(StructuralError):
            self.extractor.extract(soup(html), SELECTOR, DAILY, 0.6)

    def test_malformed_date_fails(self):
        html = page(item("/t/1", "2024-03-14 09:00"))
        with self.assertRaises(ParseError):
            self.extractor.extract(soup(html), SELECTOR, DAILY, 0.6)

    def test_latest_update_reads_first_item(self):
        html = page(item("/t/1", "15/03/2024 10:30"), item("/t/2", "14/03/2024 09:00"))
        latest = self.extractor.latest_update(soup(html), SELECTOR)
        self.assertEqual(latest, datetime(2024, 3, 15, 10, 30, tzinfo=timezone.utc))

    def test_latest_update_without_items_fails(self):
        with self.assertRaises(StructuralError):
            self.extractor.latest_update(soup(page()), SELECTOR)


class TestDateFormatter(unittest.TestCase):

    def test_parse_rejects_unpadded_fields(self):
        for text in ("1/3/2024 9:00", "14/3/2024 09:00", "14/03/2024 9:5", "4/03/2024 09:00"):
            with self.subTest(text=text):
                with self.assertRaises(ParseError):
                    DateFormatter.parse_forum_date(text)

    def test_parse_rejects_trailing_text(self):
        with self.assertRaises(ParseError):
            DateFormatter.parse_forum_date("14/03/2024 09:00:30")

    def test_parse_forum_date_is_day_first(self):
        parsed = DateFormatter.parse_forum_date("02/01/2006 15:04")
        self.assertEqual(parsed, datetime(2006, 1, 2, 15, 4, tzinfo=timezone.utc))

    def test_parse_rejects_invalid_day(self):
        with self.assertRaises(ParseError):
            DateFormatter.parse_forum_date("32/01/2024 10:00")

    def test_format_w3c_date(self):
        dt = datetime(2024, 3, 15, 10, 30, tzinfo=timezone.utc)
        self.assertEqual(DateFormatter.format_w3c_date(dt), "2024-03-15T10:30:00+00:00")

    def test_format_naive_date_as_utc(self):
        self.assertEqual(
            DateFormatter.format_w3c_date(datetime(2024, 3, 15, 10, 30)),
            "2024-03-15T10:30:00+00:00",
        )


if __name__ == '__main__':
    unittest.main()
