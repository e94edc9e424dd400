"""ENSIP frontmatter validation.

Validates the YAML metadata block at the top of an ENSIP Markdown document
and reports failures positioned within the original document.
"""

from .exceptions import FrontmatterError
from .exceptions import MissingFrontmatterError
from .exceptions import TracedError
from .models import Frontmatter
from .models import UnparsedFrontmatter
from .validator import ValidationResult
from .validator import check_frontmatter
from .validator import extract_frontmatter
from .validator import validate_document
from .validator import validate_frontmatter

__version__ = "0.1.0"

__all__ = [
    "Frontmatter",
    "FrontmatterError",
    "MissingFrontmatterError",
    "TracedError",
    "UnparsedFrontmatter",
    "ValidationResult",
    "check_frontmatter",
    "extract_frontmatter",
    "validate_document",
    "validate_frontmatter",
]
