"""Pydantic models for ENSIP frontmatter.

This module defines:
- UnparsedFrontmatter: the raw YAML block as found in a document, with its span
- Frontmatter: the schema every ENSIP document's metadata must satisfy
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated
from typing import Literal
from typing import Union

from pydantic import BaseModel
from pydantic import Field
from pydantic import StringConstraints

from ..utils.patterns import CREATED_DATE_PATTERN
from ..utils.patterns import ENS_NAME_PATTERN
from ..utils.patterns import GITHUB_USERNAME_MAX_LENGTH
from ..utils.patterns import GITHUB_USERNAME_PATTERN

__all__ = [
    "SourcePoint",
    "SourceSpan",
    "UnparsedFrontmatter",
    "YamlValue",
    "EnsipStatus",
    "EnsipMetadata",
    "Frontmatter",
]

# Deserialized YAML before any schema check. Nothing typed this way is trusted.
YamlScalar = Union[str, int, float, bool, None]
YamlValue = Union[YamlScalar, list["YamlValue"], dict[str, "YamlValue"]]


class SourcePoint(BaseModel):
    """A 1-based line/column position in a document."""

    line: int
    column: int

    model_config = {"frozen": True}


class SourceSpan(BaseModel):
    start: SourcePoint
    end: SourcePoint

    model_config = {"frozen": True}


class UnparsedFrontmatter(BaseModel):
    """The raw frontmatter node handed over by the document extractor."""

    type: Literal["yaml"] = "yaml"
    value: str
    position: SourceSpan

    model_config = {"frozen": True}


# --- Schema ---

EnsName = Annotated[str, StringConstraints(pattern=ENS_NAME_PATTERN)]
GithubUsername = Annotated[
    str,
    StringConstraints(pattern=GITHUB_USERNAME_PATTERN, max_length=GITHUB_USERNAME_MAX_LENGTH),
]
Contributor = Union[EnsName, GithubUsername]


class EnsipStatus(str, Enum):
    """Lifecycle state of an ENSIP."""

    DRAFT = "draft"
    OBSOLETE = "obsolete"
    FINAL = "final"


class EnsipMetadata(BaseModel):
    status: EnsipStatus
    created: Annotated[str, StringConstraints(pattern=CREATED_DATE_PATTERN)]

    model_config = {"frozen": True}


class Frontmatter(BaseModel):
    """Schema for ENSIP document frontmatter."""

    description: str = Field(min_length=5, max_length=160)
    contributors: list[Contributor] = Field(min_length=1, max_length=10)
    ensip: EnsipMetadata

    model_config = {"frozen": True}
