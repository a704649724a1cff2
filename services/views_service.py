"""Per-post view counter.

``increment`` follows the read-then-merge-write flow by default: two
overlapping calls for the same slug can read the same base value and both
write ``base + 1``, losing one view. Constructing the service with
``atomic=True`` switches to the store's server-side increment instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from domain.models.counter import CounterRecord, coerce_views, validate_slug
from middleware.errors import CounterTypeError
from repositories.document_store import DocumentStore

VIEWS_FIELD = "views"


@dataclass(frozen=True)
class IncrementResult:
    applied: bool
    views: Optional[int] = None


class ViewCounterService:
    def __init__(
        self,
        store: DocumentStore,
        *,
        development: bool = False,
        atomic: bool = False,
    ) -> None:
        self.store = store
        self.development = development
        self.atomic = atomic

    def increment(self, slug: str) -> IncrementResult:
        """Record one view for ``slug``; a no-op in development mode."""
        validate_slug(slug)
        if self.development:
            return IncrementResult(applied=False)

        if self.atomic:
            try:
                views = self.store.increment(slug, VIEWS_FIELD, 1)
            except CounterTypeError:
                # Non-numeric counter counts as 0, same as the read-then-write path.
                self.store.set_merge(slug, {VIEWS_FIELD: 1})
                return IncrementResult(applied=True, views=1)
            return IncrementResult(applied=True, views=coerce_views(views))

        record = CounterRecord.from_mongo(slug, self.store.get(slug))
        if record is None:
            record = CounterRecord(slug=slug, views=1)
        else:
            record = CounterRecord(slug=slug, views=record.views + 1)
        self.store.set_merge(slug, record.to_mongo())
        return IncrementResult(applied=True, views=record.views)

    def read(self, slug: str) -> int:
        """Current view count, 0 when the post has never been counted."""
        validate_slug(slug)
        record = CounterRecord.from_mongo(slug, self.store.get(slug))
        return record.views if record else 0
