"""Pydantic schemas for bookmarks."""
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from schemas.errors import field_errors
from schemas.validators import (
    BOOKMARK_CATEGORIES,
    CATEGORY_FILTERS,
    validate_category,
    validate_title,
    validate_url,
)


class Bookmark(BaseModel):
    """
    A stored bookmark record.

    Records are immutable; updates produce a new instance via `model_copy`.

    Note: `category` is a plain string here. Category membership is enforced
    when bookmarks are created or edited, not when a persisted list is loaded,
    so records written by older versions still load.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    url: str
    category: str


class BookmarkCreate(BaseModel):
    """Schema for creating a new bookmark. All fields are required."""

    # Missing fields default to "" so they report the same message as blank input
    title: str = Field(default="", validate_default=True)
    url: str = Field(default="", validate_default=True)
    category: str = Field(default="", validate_default=True)

    @field_validator("title", "url", "category", mode="before")
    @classmethod
    def null_as_blank(cls, v: object) -> object:
        """Treat an explicit null like a blank field."""
        return "" if v is None else v

    @field_validator("title")
    @classmethod
    def check_title(cls, v: str) -> str:
        """Validate title presence."""
        return validate_title(v)

    @field_validator("url")
    @classmethod
    def check_url(cls, v: str) -> str:
        """Validate URL presence and scheme."""
        return validate_url(v)

    @field_validator("category")
    @classmethod
    def check_category(cls, v: str) -> str:
        """Validate category membership."""
        return validate_category(v)


class BookmarkUpdate(BaseModel):
    """Schema for updating an existing bookmark. Only supplied fields are validated."""

    title: str | None = None
    url: str | None = None
    category: str | None = None

    @field_validator("title")
    @classmethod
    def check_title(cls, v: str | None) -> str | None:
        """Validate title presence if provided."""
        if v is None:
            return None
        return validate_title(v)

    @field_validator("url")
    @classmethod
    def check_url(cls, v: str | None) -> str | None:
        """Validate URL presence and scheme if provided."""
        if v is None:
            return None
        return validate_url(v)

    @field_validator("category")
    @classmethod
    def check_category(cls, v: str | None) -> str | None:
        """Validate category membership if provided."""
        if v is None:
            return None
        return validate_category(v)


class BookmarkListResponse(BaseModel):
    """Filtered bookmark listing."""

    items: list[Bookmark]
    total: int


class CategoriesResponse(BaseModel):
    """Category values for the filter selector and the bookmark form."""

    filters: list[str] = Field(default_factory=lambda: list(CATEGORY_FILTERS))
    categories: list[str] = Field(default_factory=lambda: list(BOOKMARK_CATEGORIES))


def validate_bookmark_form(title: str, url: str, category: str) -> dict[str, str]:
    """
    Validate submitted form values.

    Args:
        title: Title field value.
        url: URL field value.
        category: Category field value.

    Returns:
        Mapping of field name to error message. Empty when the form is valid.
    """
    try:
        BookmarkCreate(title=title, url=url, category=category)
    except ValidationError as e:
        return field_errors(e.errors())
    return {}
