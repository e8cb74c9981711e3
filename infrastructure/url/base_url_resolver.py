# infrastructure/url/base_url_resolver.py
from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import urlsplit

from domain.exceptions import ValidationError


@dataclass(frozen=True)
class BaseUrlResolver:
    """Resolves relative request targets ("/status") against WEBPOST_BASE_URL."""
    base_url: str

    def resolve_url(self, url: str) -> str:
        if urlsplit(url).scheme in ("http", "https"):
            return url
        if not self.base_url:
            raise ValidationError(f"Relative URL without a base URL: {url}")
        return self.base_url.rstrip("/") + "/" + url.lstrip("/")
