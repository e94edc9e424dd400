"""Identifier and date patterns used by the frontmatter schema.

These are plain module constants; the schema compiles them into its
constrained string types at import time.
"""

# ENS name, e.g. ``nick.eth`` or ``sub.domain.eth``. Labels are normalized
# lowercase.
ENS_NAME_PATTERN = r"^(?:[a-z0-9_-]+\.)+[a-z0-9-]+$"

# GitHub username: alphanumerics separated by single hyphens, no leading or
# trailing hyphen. Length (max 39) is enforced separately.
GITHUB_USERNAME_PATTERN = r"^[A-Za-z0-9](?:-?[A-Za-z0-9])*$"
GITHUB_USERNAME_MAX_LENGTH = 39

# Calendar date in fixed ``YYYY-MM-DD`` form with ASCII digits. Only the shape
# is checked.
CREATED_DATE_PATTERN = r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$"
