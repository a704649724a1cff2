from __future__ import annotations

from pydantic import BaseModel, Field

from middleware.errors import InvalidSlugError


def validate_slug(slug: str | None) -> str:
    """Return the slug unchanged if it can be used as a document key."""
    if slug is None or not str(slug).strip():
        raise InvalidSlugError("Post slug must not be empty")
    if "/" in slug or "\\" in slug:
        raise InvalidSlugError(
            "Post slug must not contain path separators",
            details={"slug": slug},
        )
    if slug in (".", ".."):
        raise InvalidSlugError("Post slug must not be '.' or '..'", details={"slug": slug})
    return slug


class CounterRecord(BaseModel):
    """
    View counter for a single post.

    - slug: document key in the ``posts`` collection (stored as ``_id``)
    - views: number of recorded views, never negative
    """
    slug: str = Field(..., min_length=1)
    views: int = Field(0, ge=0)

    def to_mongo(self) -> dict:
        return {"views": self.views}

    @classmethod
    def from_mongo(cls, slug: str, doc: dict | None) -> "CounterRecord | None":
        """Deserialize from MongoDB; malformed counters read as 0."""
        if doc is None:
            return None
        return cls(slug=slug, views=coerce_views(doc.get("views")))


def coerce_views(value) -> int:
    """Stored ``views`` as an int; integral doubles (``5.0``) are kept."""
    if isinstance(value, bool):
        return 0
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if not isinstance(value, int) or value < 0:
        return 0
    return value
