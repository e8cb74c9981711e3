# tests/infrastructure/test_base_url_resolver.py
import pytest
from domain.exceptions import ValidationError
from infrastructure.url.base_url_resolver import BaseUrlResolver


class TestBaseUrlResolver:
    def test_absolute_url_is_kept(self):
        resolver = BaseUrlResolver("https://example.com")
        assert resolver.resolve_url("http://other.test/a") == "http://other.test/a"

    def test_relative_url_is_joined(self):
        resolver = BaseUrlResolver("https://example.com/api/")
        assert resolver.resolve_url("/status") == "https://example.com/api/status"

    def test_absolute_url_without_base(self):
        assert BaseUrlResolver("").resolve_url("https://example.com") == "https://example.com"

    def test_relative_url_without_base(self):
        with pytest.raises(ValidationError):
            BaseUrlResolver("").resolve_url("/status")
