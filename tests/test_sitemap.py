#!/usr/bin/env python3
"""
Sitemap serializer unit tests

Covers document structure, field formatting, ordering and XML validity.
"""

import sys
import unittest
import xml.etree.ElementTree as ET
from datetime import datetime, timedelta, timezone
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

from forum_sitemap.interfaces import DAILY, HOURLY, MONTHLY, UrlEntry
from forum_sitemap.sitemap import SITEMAP_NAMESPACE, SitemapSerializer, generate_sitemap

NS = {"sm": SITEMAP_NAMESPACE}


class TestSitemapSerializer(unittest.TestCase):

    def setUp(self):
        self.entries = [
            UrlEntry("https://crunchy.rocks/", datetime(2024, 3, 15, 10, 30, tzinfo=timezone.utc), HOURLY, 1.0),
            UrlEntry("/t/1", datetime(2024, 3, 14, 9, 0, tzinfo=timezone.utc), DAILY, 0.6),
            UrlEntry("/t/1", datetime(2024, 3, 14, 9, 0, tzinfo=timezone.utc), DAILY, 0.6),
            UrlEntry("/s/1", datetime(2024, 1, 1, 0, 0, tzinfo=timezone.utc), MONTHLY, 0.7),
        ]
        self.xml = SitemapSerializer().transform(self.entries)

    def test_document_header_and_footer(self):
        self.assertTrue(self.xml.startswith('<?xml version="1.0" encoding="UTF-8"?>\n'))
        self.assertIn(f'<urlset xmlns="{SITEMAP_NAMESPACE}">', self.xml)
        self.assertTrue(self.xml.rstrip().endswith("</urlset>"))
        self.assertNotIn("</xml>", self.xml)

    def test_one_url_block_per_entry(self):
        self.assertEqual(self.xml.count("<url>"), len(self.entries))
        self.assertEqual(self.xml.count("</url>"), len(self.entries))

    def test_fields_and_order(self):
        root = ET.fromstring(self.xml.encode("utf-8"))
        urls = root.findall("sm:url", NS)

        self.assertEqual([u.findtext("sm:loc", namespaces=NS) for u in urls],
                         [e.loc for e in self.entries])
        self.assertEqual([u.findtext("sm:priority", namespaces=NS) for u in urls],
                         ["1.00", "0.60", "0.60", "0.70"])
        self.assertEqual([u.findtext("sm:changefreq", namespaces=NS) for u in urls],
                         ["hourly", "daily", "daily", "monthly"])
        self.assertEqual(urls[3].findtext("sm:lastmod", namespaces=NS), "2024-01-01T00:00:00+00:00")

    def test_lastmod_keeps_offset(self):
        tz = timezone(timedelta(hours=2))
        xml = generate_sitemap([UrlEntry("/x", datetime(2024, 5, 1, 8, 0, tzinfo=tz), DAILY, 0.5)])
        self.assertIn("<lastmod>2024-05-01T08:00:00+02:00</lastmod>", xml)

    def test_reserved_characters_are_escaped(self):
        entry = UrlEntry("/search?q=a&page=2", datetime(2024, 1, 1, tzinfo=timezone.utc), DAILY, 0.5)
        xml = generate_sitemap([entry])

        self.assertIn("<loc>/search?q=a&amp;page=2</loc>", xml)
        root = ET.fromstring(xml.encode("utf-8"))
        self.assertEqual(root.findtext("sm:url/sm:loc", namespaces=NS), entry.loc)

    def test_empty_collection(self):
        xml = generate_sitemap([])
        self.assertIn("</urlset>", xml)
        self.assertNotIn("<url>", xml)
        root = ET.fromstring(xml.encode("utf-8"))
        self.assertEqual(len(root), 0)


class TestUrlEntry(unittest.TestCase):

    def test_rejects_priority_out_of_range(self):
        with self.assertRaises(ValueError):
            UrlEntry("/x", datetime(2024, 1, 1), DAILY, 1.5)

    def test_rejects_unknown_frequency(self):
        with self.assertRaises(ValueError):
            UrlEntry("/x", datetime(2024, 1, 1), "weekly", 0.5)

    def test_rejects_empty_location(self):
        with self.assertRaises(ValueError):
            UrlEntry("", datetime(2024, 1, 1), DAILY, 0.5)

    def test_debug_rendering(self):
        entry = UrlEntry("/t/1", datetime(2024, 3, 14, 9, 0), DAILY, 0.6)
        self.assertEqual(
            str(entry),
            "loc: /t/1\nlastmod: 2024-03-14 09:00:00\nchangefreq: daily\nprio: 0.600000\n",
        )


if __name__ == '__main__':
    unittest.main()
