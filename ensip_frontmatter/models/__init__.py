"""Data models for ENSIP frontmatter validation."""

from .frontmatter import EnsipMetadata
from .frontmatter import EnsipStatus
from .frontmatter import Frontmatter
from .frontmatter import SourcePoint
from .frontmatter import SourceSpan
from .frontmatter import UnparsedFrontmatter
from .frontmatter import YamlValue

__all__ = [
    "EnsipMetadata",
    "EnsipStatus",
    "Frontmatter",
    "SourcePoint",
    "SourceSpan",
    "UnparsedFrontmatter",
    "YamlValue",
]
