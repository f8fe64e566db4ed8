"""
Shared validation functions for bookmark schemas.

Messages are phrased for display next to the offending form field, so they are
returned to clients verbatim (see schemas.errors.field_errors).
"""
from typing import Literal, get_args

Category = Literal["AI", "Dev", "Learning", "Tools"]

# Ordered as shown in the category selector
BOOKMARK_CATEGORIES: tuple[str, ...] = get_args(Category)

# Filter sentinel that matches every category
CATEGORY_ALL = "All"
CategoryFilter = Literal["All", "AI", "Dev", "Learning", "Tools"]
CATEGORY_FILTERS: tuple[str, ...] = get_args(CategoryFilter)

URL_SCHEMES = ("http://", "https://")


def validate_title(title: str) -> str:
    """
    Validate that a bookmark title is present.

    Args:
        title: The raw title value.

    Returns:
        The title unchanged.

    Raises:
        ValueError: If the title is empty or whitespace only.
    """
    if not title.strip():
        raise ValueError("Title is required")
    return title


def validate_url(url: str) -> str:
    """
    Validate that a bookmark URL is present and uses an http(s) scheme.

    The scheme check runs on the raw value, so leading whitespace fails it.

    Raises:
        ValueError: If the URL is empty or does not start with http:// or https://.
    """
    if not url.strip():
        raise ValueError("URL is required")
    if not url.startswith(URL_SCHEMES):
        raise ValueError("URL must start with http:// or https://")
    return url


def validate_category(category: str) -> str:
    """Validate that a category is one of the fixed bookmark categories."""
    if not category:
        raise ValueError("Category is required")
    if category not in BOOKMARK_CATEGORIES:
        raise ValueError(f"Category must be one of: {', '.join(BOOKMARK_CATEGORIES)}")
    return category
