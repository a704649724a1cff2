from __future__ import annotations

from typing import Any, Dict, Optional

from pymongo import ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import OperationFailure, PyMongoError

from config.database import mongodb
from middleware.errors import CounterTypeError, StoreAccessError

# MongoDB server error code for $inc on a non-numeric field
TYPE_MISMATCH = 14


class PostViewsRepository:
    """MongoDB-backed document store for per-post view counters.

    Documents are keyed by slug (``_id``); every driver failure is re-raised
    as ``StoreAccessError`` with the driver's message.
    """

    def __init__(self, collection_name: str = "posts") -> None:
        self.collection_name = collection_name
        self._collection: Optional[Collection] = None

    @property
    def collection(self) -> Collection:
        if self._collection is None:
            self._collection = mongodb.collection(self.collection_name)
        return self._collection

    def get(self, key: str) -> Optional[Dict[str, Any]]:
        """Fetch the document for ``key`` without its ``_id``."""
        try:
            return self.collection.find_one({"_id": key}, {"_id": False})
        except PyMongoError as exc:
            raise StoreAccessError(str(exc)) from exc

    def set_merge(self, key: str, fields: Dict[str, Any]) -> None:
        """Update only ``fields``; other fields of the document are preserved."""
        try:
            self.collection.update_one({"_id": key}, {"$set": fields}, upsert=True)
        except PyMongoError as exc:
            raise StoreAccessError(str(exc)) from exc

    def increment(self, key: str, field: str, amount: int = 1) -> int:
        """Server-side ``$inc``; creates the document when missing."""
        try:
            doc = self.collection.find_one_and_update(
                {"_id": key},
                {"$inc": {field: amount}},
                upsert=True,
                return_document=ReturnDocument.AFTER,
            )
        except OperationFailure as exc:
            if exc.code == TYPE_MISMATCH:
                raise CounterTypeError(str(exc)) from exc
            raise StoreAccessError(str(exc)) from exc
        except PyMongoError as exc:
            raise StoreAccessError(str(exc)) from exc
        return doc[field]

    def ping(self) -> None:
        try:
            mongodb.ping()
        except PyMongoError as exc:
            raise StoreAccessError(str(exc)) from exc
