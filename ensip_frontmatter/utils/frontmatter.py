"""YAML frontmatter block extraction for ENSIP Markdown documents.

Frontmatter format:
---
description: Short summary of the proposal
contributors:
  - nick.eth
ensip:
  status: draft
  created: 2023-01-01
---

# ENSIP content here...

Only the block's text and its span are extracted here. Parsing and schema
checks happen in ``ensip_frontmatter.validator``.
"""

import re
from typing import Any

from ..models.frontmatter import SourcePoint
from ..models.frontmatter import SourceSpan
from ..models.frontmatter import UnparsedFrontmatter

# Opening fence on the first line, body, closing fence on a line of its own
FRONTMATTER_PATTERN = re.compile(
    r"\A(?P<open>---)[ \t]*\r?\n(?P<value>.*?)(?:\r?\n)?^(?P<close>---)[ \t]*$(?:\r?\n)?",
    re.DOTALL | re.MULTILINE,
)


def find_frontmatter_block(content: str) -> UnparsedFrontmatter | None:
    """Locate the frontmatter block at the start of ``content``.

    Args:
        content: Full Markdown document text

    Returns:
        The raw block with a 1-based span covering both fences, or None if the
        document does not start with a fenced block
    """
    if not content or not content.startswith("---"):
        return None

    match = FRONTMATTER_PATTERN.match(content)
    if not match:
        return None

    close_start = match.start("close")
    end_line = content.count("\n", 0, close_start) + 1
    line_start = content.rfind("\n", 0, close_start) + 1
    end_column = match.end("close") - line_start + 1

    return UnparsedFrontmatter(
        value=match.group("value"),
        position=SourceSpan(
            start=SourcePoint(line=1, column=1),
            end=SourcePoint(line=end_line, column=end_column),
        ),
    )


def get_content_without_frontmatter(content: str) -> str:
    """Get content with the frontmatter block stripped."""
    if not content or not content.startswith("---"):
        return content
    match = FRONTMATTER_PATTERN.match(content)
    if not match:
        return content
    return content[match.end() :]


def build_document_tree(content: str) -> dict[str, Any]:
    """Build a minimal document tree for the frontmatter extraction plugin.

    The yaml node, if any, is always the first child; the remaining body is
    kept as a single opaque ``markdown`` node.
    """
    children: list[dict[str, Any]] = []

    block = find_frontmatter_block(content)
    if block is not None:
        children.append(block.model_dump())

    body = get_content_without_frontmatter(content)
    if body.strip():
        children.append({"type": "markdown", "value": body})

    return {"type": "root", "children": children}
