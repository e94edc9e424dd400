"""The pytest configuration for ENSIP frontmatter testing."""

import copy

import pytest
import yaml

from ensip_frontmatter.config import reset_settings
from ensip_frontmatter.models import SourcePoint
from ensip_frontmatter.models import SourceSpan
from ensip_frontmatter.models import UnparsedFrontmatter

VALID_FRONTMATTER = {
    "description": "Defines the metadata every ENSIP document carries.",
    "contributors": ["nick.eth", "lucemans"],
    "ensip": {"status": "draft", "created": "2023-01-01"},
}


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Keep settings from leaking between tests."""
    for key in ("ENSIP_FRONTMATTER_LOG_LEVEL", "ENSIP_FRONTMATTER_LOG_FILE", "ENSIP_FRONTMATTER_STRUCTURED_LOGGING"):
        monkeypatch.delenv(key, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def valid_data():
    """A fresh copy of metadata satisfying every schema constraint."""
    return copy.deepcopy(VALID_FRONTMATTER)


@pytest.fixture
def make_block():
    """Factory for UnparsedFrontmatter nodes with a configurable span."""

    def _make_block(value, start=(1, 1), end=(5, 4)):
        return UnparsedFrontmatter(
            value=value,
            position=SourceSpan(
                start=SourcePoint(line=start[0], column=start[1]),
                end=SourcePoint(line=end[0], column=end[1]),
            ),
        )

    return _make_block


@pytest.fixture
def block_from(make_block):
    """Factory building a block from a metadata dict."""

    def _block_from(data, **kwargs):
        return make_block(yaml.safe_dump(data, sort_keys=False).rstrip("\n"), **kwargs)

    return _block_from
