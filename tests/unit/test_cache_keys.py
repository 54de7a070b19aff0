"""Tests for cache key builders."""

import pytest

from app.infrastructure.cache import app_versions_key, is_cacheable


def test_app_versions_key() -> None:
    assert app_versions_key("c1", "alice", "wordcount") == "appversions:c1:alice:wordcount"


def test_separator_in_component_rejected() -> None:
    with pytest.raises(ValueError, match="app_id"):
        app_versions_key("c1", "alice", "word:count")


def test_is_cacheable() -> None:
    assert is_cacheable("c1", "alice")
    assert not is_cacheable("c1", "a:b")
