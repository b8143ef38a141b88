from __future__ import annotations

import re
from typing import Final

EMAIL_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@.]+$")
URL_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^(?:[a-z][a-z0-9+.-]*://|www\.)[^\s/?#]+\S*$", re.IGNORECASE
)
TAG_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[#@]\w+$")


class Validator:
    """Classifies whole tokens as emails, URLs or tags (hashtags and mentions)."""

    __slots__ = ()

    def is_email_like(self, token: str) -> bool:
        return EMAIL_PATTERN.match(token) is not None

    def is_url_like(self, token: str) -> bool:
        return URL_PATTERN.match(token) is not None

    def is_tag_like(self, token: str) -> bool:
        return TAG_PATTERN.match(token) is not None
