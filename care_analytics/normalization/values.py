import re
import json
from datetime import datetime
from typing import Any, Optional, Tuple


class ValueParser:
    """Best-effort coercion of raw cell values. Never raises on bad input."""

    NULL_VARIANTS = {"", "null", "undefined"}

    LEADING_NUMBER = re.compile(r'^[+-]?(\d+(\.\d*)?|\.\d+)')
    FIRST_INTEGER = re.compile(r'(\d+)')
    CALLBACK_SEPARATOR = re.compile(r'\s+and\s+', re.IGNORECASE)

    DATE_FORMATS = [
        "%Y-%m-%d",
        "%Y/%m/%d",
        "%m/%d/%Y",
        "%m-%d-%Y",
        "%m/%d/%y",
        "%Y.%m.%d",
        "%b-%d-%Y",
        "%B-%d-%Y",
        "%b %d, %Y",
        "%B %d, %Y",
        "%Y-%m-%dT%H:%M:%S",
        "%Y-%m-%dT%H:%M:%SZ",
        "%Y-%m-%dT%H:%M:%S.%fZ",
        "%Y-%m-%dT%H:%M:%S%z",
        "%Y-%m-%dT%H:%M:%S.%f%z",
    ]

    @classmethod
    def to_text(cls, value: Any) -> Optional[str]:
        """Render a scalar as trimmed text; booleans become "Yes"/"No", blanks become None."""
        if value is None:
            return None

        if isinstance(value, bool):
            return "Yes" if value else "No"

        if isinstance(value, float):
            if value != value:
                return None
            if value.is_integer():
                return str(int(value))
            return str(value)

        text = str(value).strip()
        if text.lower() in cls.NULL_VARIANTS:
            return None
        return text

    @classmethod
    def to_literal_text(cls, value: Any) -> Optional[str]:
        """Like to_text, but booleans keep their "true"/"false" spelling."""
        if isinstance(value, bool):
            return "true" if value else "false"
        return cls.to_text(value)

    @classmethod
    def to_text_list(cls, value: Any) -> Tuple[str, ...]:
        """
        Parse a sequence field from a native list or a JSON-encoded string.

        Anything that is not (or does not decode to) a list yields an empty tuple.
        """
        if isinstance(value, str):
            if not value.strip():
                return ()
            try:
                value = json.loads(value)
            except (ValueError, TypeError):
                return ()

        if not isinstance(value, (list, tuple)):
            return ()

        items = (cls.to_text(item) for item in value)
        return tuple(item for item in items if item is not None)

    @classmethod
    def parse_number(cls, value: Optional[str]) -> Optional[float]:
        """Read the leading decimal number of a string ("4.5", "3 out of 5"), or None."""
        if value is None:
            return None
        match = cls.LEADING_NUMBER.match(value.strip())
        if not match:
            return None
        return float(match.group(0))

    @classmethod
    def parse_first_integer(cls, value: Optional[str]) -> Optional[int]:
        """Return the first run of digits in free text ("about 30 hrs" -> 30), or None."""
        if not value:
            return None
        match = cls.FIRST_INTEGER.search(value)
        if not match:
            return None
        return int(match.group(1))

    @classmethod
    def parse_date_key(cls, value: Optional[str]) -> Optional[str]:
        """
        Convert a free-text timestamp into an ISO "YYYY-MM-DD" key.

        The date-only prefix (text before the first space, trailing "," or
        "." dropped, as in "1/15/2025, 10:30:00 AM") is tried first, then the
        whole value ("January 15, 2025").

        Returns:
            The ISO date string, or None when the value cannot be parsed
        """
        if not value or not value.strip():
            return None

        text = value.strip()
        date_part = text.split(" ")[0].rstrip(",.;")
        parsed = cls._parse_date(date_part) or cls._parse_date(text)
        if parsed is None:
            return None
        return parsed.strftime("%Y-%m-%d")

    @classmethod
    def split_callback_dates(cls, value: Optional[str]) -> Tuple[str, ...]:
        """Split "Monday and Tuesday 3pm" into ("Monday", "Tuesday 3pm")."""
        if not value:
            return ()
        parts = (part.strip() for part in cls.CALLBACK_SEPARATOR.split(value))
        return tuple(part for part in parts if part)

    @classmethod
    def _parse_date(cls, value: str) -> Optional[datetime]:
        for fmt in cls.DATE_FORMATS:
            try:
                return datetime.strptime(value, fmt)
            except ValueError:
                continue
        return None
