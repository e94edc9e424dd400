"""Unit tests for the frontmatter exception hierarchy."""

from __future__ import annotations

import pytest
import yaml
from pydantic import ValidationError as PydanticValidationError

from ensip_frontmatter.exceptions import FrontmatterError
from ensip_frontmatter.exceptions import MissingFrontmatterError
from ensip_frontmatter.exceptions import TracedError
from ensip_frontmatter.models import Frontmatter


def _yaml_error() -> yaml.YAMLError:
    try:
        yaml.safe_load("a: b: c")
    except yaml.YAMLError as e:
        return e
    raise AssertionError("expected a YAML error")


def _schema_error() -> PydanticValidationError:
    try:
        Frontmatter.model_validate({"description": "ok"})
    except PydanticValidationError as e:
        return e
    raise AssertionError("expected a validation error")


class TestFrontmatterError:
    """Tests for the base FrontmatterError class."""

    def test_basic_initialization(self):
        """Test basic exception creation."""
        error = FrontmatterError("Something went wrong")

        assert str(error) == "Something went wrong"
        assert error.error_code == "UNKNOWN_ERROR"
        assert error.details == {}
        assert error.user_message == "Something went wrong"

    def test_to_dict_preserves_subclass_name(self):
        """Test that to_dict reports the concrete error type."""
        result = MissingFrontmatterError().to_dict()

        assert result["error_type"] == "MissingFrontmatterError"
        assert result["error_code"] == "FRONTMATTER_MISSING"


class TestMissingFrontmatterError:
    """Tests for MissingFrontmatterError."""

    def test_default_message(self):
        error = MissingFrontmatterError(document_path="ensips/1.md")

        assert str(error) == "No frontmatter found"
        assert error.details == {"document_path": "ensips/1.md"}


class TestTracedError:
    """Tests for TracedError."""

    def test_parse_error(self):
        """Test wrapping a YAML error."""
        cause = _yaml_error()
        error = TracedError(cause, "ensips/1.md", line=2, column=6, end_column=6)

        assert error.error_code == "FRONTMATTER_PARSE_ERROR"
        assert error.cause is cause
        assert error.issues == []
        assert error.location == "ensips/1.md:2:6"
        assert str(error).startswith("ensips/1.md:2:6: Invalid YAML in frontmatter")

    def test_schema_error(self):
        """Test wrapping a Pydantic validation error."""
        error = TracedError(_schema_error(), "ensips/1.md", line=1, column=1, end_column=4)

        assert error.error_code == "FRONTMATTER_SCHEMA_ERROR"
        assert {issue["loc"] for issue in error.issues} == {"description", "contributors", "ensip"}
        assert error.details["end_column"] == 4
        assert error.details["issues"] == error.issues

    def test_other_cause(self):
        """Test an unclassified cause keeps a generic code."""
        error = TracedError(ValueError("x"), "ensips/1.md", line=1, column=1, end_column=1)

        assert error.error_code == "FRONTMATTER_ERROR"


class TestExceptionInheritance:
    """Tests for the hierarchy."""

    @pytest.mark.parametrize("error", [MissingFrontmatterError(), TracedError(ValueError("x"), "p", 1, 1, 1)])
    def test_subclasses_of_base(self, error):
        assert isinstance(error, FrontmatterError)
        assert isinstance(error, Exception)
