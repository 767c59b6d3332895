"""
Small helpers for dates, URLs and validation.
Each class has a single, well-defined responsibility.
"""
import re
from datetime import datetime, timezone

from .errors import ParseError

FORUM_DATE_PATTERN = "%d/%m/%Y %H:%M"
FORUM_DATE_SHAPE = re.compile(r"\d{2}/\d{2}/\d{4} \d{2}:\d{2}", re.ASCII)


class DateFormatter:
    """Handles date parsing and formatting operations"""

    @staticmethod
    def parse_forum_date(text: str) -> datetime:
        """Parse a 'DD/MM/YYYY HH:MM' forum timestamp as UTC"""
        # strptime also accepts single digit fields, the forum pads every field
        if not isinstance(text, str) or not FORUM_DATE_SHAPE.fullmatch(text.strip()):
            raise ParseError(text, FORUM_DATE_PATTERN)
        try:
            parsed = datetime.strptime(text.strip(), FORUM_DATE_PATTERN)
        except ValueError as e:
            raise ParseError(text, FORUM_DATE_PATTERN) from e
        return parsed.replace(tzinfo=timezone.utc)

    @staticmethod
    def format_w3c_date(dt: datetime) -> str:
        """Format datetime for sitemap lastmod (ISO 8601 with explicit offset)"""
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return dt.isoformat(timespec="seconds")


class URLProcessor:
    """Handles URL-related processing operations"""

    @staticmethod
    def join_path(root_url: str, path: str) -> str:
        """Append a category path to the site root"""
        if not root_url.endswith("/"):
            root_url += "/"
        return root_url + path.lstrip("/")

    @staticmethod
    def page_url(base_url: str, page: int) -> str:
        """URL of the given listing page; page 1 is the base URL itself"""
        if page <= 1:
            return base_url
        return f"{base_url.rstrip('/')}/page/{page}"


class ValidationUtils:
    """Utility functions for validation"""

    @staticmethod
    def is_valid_url(url: str) -> bool:
        """Check if URL is valid"""
        return bool(url and url.startswith(('http://', 'https://')))
