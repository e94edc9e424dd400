"""Frontmatter validation for ENSIP documents.

``validate_frontmatter`` parses the raw YAML block and checks it against the
``Frontmatter`` schema. Parse and schema failures are re-raised as
``TracedError`` positioned within the original document rather than within
the isolated block.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any
from typing import Callable

import yaml  # type: ignore[import-untyped]
from pydantic import ValidationError as PydanticValidationError

from .exceptions import MissingFrontmatterError
from .exceptions import TracedError
from .logger_config import log_validation_call
from .models.frontmatter import Frontmatter
from .models.frontmatter import UnparsedFrontmatter
from .models.frontmatter import YamlValue
from .utils.frontmatter import build_document_tree

__all__ = [
    "ValidationResult",
    "validate_frontmatter",
    "check_frontmatter",
    "extract_frontmatter",
    "validate_document",
]


_BOOL_TAG = "tag:yaml.org,2002:bool"
_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"
# YAML 1.2 core schema booleans; ``yes``/``no``/``on``/``off`` stay strings
_CORE_BOOL = re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$")


class FrontmatterLoader(yaml.SafeLoader):
    """Safe loader close to the YAML 1.2 core schema.

    Dates stay as the literal text the author wrote, only ``true``/``false``
    spellings are booleans, and duplicate mapping keys are an error.
    """

    def construct_mapping(self, node, deep=False):
        if isinstance(node, yaml.MappingNode):
            self.flatten_mapping(node)
            seen = set()
            for key_node, _ in node.value:
                key = self.construct_object(key_node, deep=deep)
                try:
                    duplicate = key in seen
                except TypeError:
                    # Unhashable keys are reported by the base constructor
                    continue
                if duplicate:
                    raise yaml.constructor.ConstructorError(
                        "while constructing a mapping",
                        node.start_mark,
                        f"found duplicate key {key!r}",
                        key_node.start_mark,
                    )
                seen.add(key)
        return super().construct_mapping(node, deep=deep)


FrontmatterLoader.yaml_implicit_resolvers = {
    first_char: [
        (tag, _CORE_BOOL if tag == _BOOL_TAG else regexp)
        for tag, regexp in resolvers
        if tag != _TIMESTAMP_TAG and not (tag == _BOOL_TAG and first_char not in "tTfF")
    ]
    for first_char, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a frontmatter check: exactly one of the fields is set."""

    frontmatter: Frontmatter | None = None
    error: TracedError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_yaml(value: str) -> YamlValue:
    """Deserialize the raw block. Raises yaml.YAMLError on malformed input."""
    return yaml.load(value, Loader=FrontmatterLoader)


def _relative_position(error: yaml.YAMLError) -> tuple[int, int]:
    """1-based line/column of a YAML error within the block, (0, 0) if unknown."""
    mark = getattr(error, "problem_mark", None) or getattr(error, "context_mark", None)
    if mark is None:
        return 0, 0
    return mark.line + 1, mark.column + 1


def _trace(error: Exception, frontmatter: UnparsedFrontmatter, document_path: str) -> TracedError:
    start = frontmatter.position.start
    end = frontmatter.position.end

    if isinstance(error, yaml.YAMLError):
        rel_line, rel_column = _relative_position(error)
        # The end column intentionally repeats the start column; there is no
        # reliable end position for a YAML problem mark.
        return TracedError(
            error,
            document_path,
            line=start.line + rel_line,
            column=start.column + rel_column,
            end_column=start.column + rel_column,
        )

    return TracedError(
        error,
        document_path,
        line=start.line,
        column=start.column,
        end_column=end.column,
    )


@log_validation_call
def validate_frontmatter(frontmatter: UnparsedFrontmatter, document_path: str) -> Frontmatter:
    """Parse and validate a raw frontmatter block.

    Args:
        frontmatter: The raw YAML block and its span in the document
        document_path: Path of the document, used only for error attribution

    Returns:
        The validated Frontmatter

    Raises:
        TracedError: If the block is not valid YAML or does not match the schema
    """
    try:
        parsed = parse_yaml(frontmatter.value)
        return Frontmatter.model_validate(parsed)
    except (yaml.YAMLError, PydanticValidationError) as e:
        raise _trace(e, frontmatter, document_path) from e


def check_frontmatter(frontmatter: UnparsedFrontmatter, document_path: str) -> ValidationResult:
    """Like ``validate_frontmatter`` but returns parse and schema failures.

    Exceptions other than TracedError still propagate.
    """
    try:
        return ValidationResult(frontmatter=validate_frontmatter(frontmatter, document_path))
    except TracedError as e:
        return ValidationResult(error=e)


def _children(tree: Any) -> list:
    if isinstance(tree, dict):
        return tree.get("children") or []
    return getattr(tree, "children", None) or []


def _as_unparsed(node: Any) -> UnparsedFrontmatter | None:
    """Return the node as an UnparsedFrontmatter if it is a non-empty yaml node."""
    if node is None:
        return None
    if isinstance(node, UnparsedFrontmatter):
        return node if node.value else None
    if isinstance(node, dict):
        if node.get("type") != "yaml" or not node.get("value"):
            return None
        return UnparsedFrontmatter.model_validate(node)
    return None


def extract_frontmatter(
    document_path: str, callback: Callable[[Frontmatter], None]
) -> Callable[[Any], None]:
    """Build a tree plugin that validates the document's frontmatter node.

    The returned callable takes a document tree, removes its first child and,
    if that child is a non-empty yaml node, delivers the validated
    Frontmatter to ``callback``.

    Raises:
        MissingFrontmatterError: If the first child is absent, not yaml, or empty
        TracedError: If the frontmatter fails to parse or validate
    """

    def plugin(tree: Any) -> None:
        children = _children(tree)
        first = children.pop(0) if children else None

        frontmatter = _as_unparsed(first)
        if frontmatter is None:
            raise MissingFrontmatterError(document_path=document_path)

        callback(validate_frontmatter(frontmatter, document_path))

    return plugin


def validate_document(content: str, document_path: str) -> Frontmatter:
    """Validate the frontmatter of a Markdown document given as text."""
    found: list[Frontmatter] = []
    extract_frontmatter(document_path, found.append)(build_document_tree(content))
    return found[0]
