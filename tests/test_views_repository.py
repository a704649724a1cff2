import pytest
from pymongo.errors import OperationFailure, ServerSelectionTimeoutError

import repositories.views_repository as views_repo_module
from middleware.errors import CounterTypeError, StoreAccessError


class DummyCollection:
    def __init__(self, docs):
        self.docs = docs
        self.fail_with = None

    def _maybe_fail(self):
        if self.fail_with:
            raise self.fail_with

    def find_one(self, query, projection=None):
        self._maybe_fail()
        doc = self.docs.get(query["_id"])
        if doc is None:
            return None
        if projection and projection.get("_id") is False:
            return dict(doc)
        return {"_id": query["_id"], **doc}

    def update_one(self, query, update, upsert=False):
        self._maybe_fail()
        key = query["_id"]
        if key not in self.docs and not upsert:
            raise AssertionError("upsert expected")
        self.docs.setdefault(key, {}).update(update["$set"])

    def find_one_and_update(self, query, update, upsert=False, return_document=None):
        self._maybe_fail()
        assert upsert
        doc = self.docs.setdefault(query["_id"], {})
        for field, amount in update["$inc"].items():
            doc[field] = doc.get(field, 0) + amount
        return {"_id": query["_id"], **doc}


class DummyMongo:
    def __init__(self, collection):
        self._collection = collection
        self.names = []
        self.ping_error = None

    def collection(self, name):
        self.names.append(name)
        return self._collection

    def ping(self):
        if self.ping_error:
            raise self.ping_error


@pytest.fixture
def collection(monkeypatch):
    coll = DummyCollection({"old-post": {"views": 10, "title": "Old"}})
    monkeypatch.setattr(views_repo_module, "mongodb", DummyMongo(coll))
    return coll


def test_get_and_set_merge(collection):
    repo = views_repo_module.PostViewsRepository()

    assert repo.get("old-post") == {"views": 10, "title": "Old"}
    assert repo.get("missing") is None

    repo.set_merge("old-post", {"views": 11})
    repo.set_merge("new-post", {"views": 1})
    assert collection.docs["old-post"] == {"views": 11, "title": "Old"}
    assert collection.docs["new-post"] == {"views": 1}


def test_increment_returns_new_value(collection):
    repo = views_repo_module.PostViewsRepository()
    assert repo.increment("old-post", "views") == 11
    assert repo.increment("fresh", "views") == 1


def test_uses_configured_collection_name(collection):
    repo = views_repo_module.PostViewsRepository("page_views")
    repo.get("x")
    assert views_repo_module.mongodb.names == ["page_views"]


@pytest.mark.parametrize(
    "error",
    [OperationFailure("quota exceeded"), ServerSelectionTimeoutError("no servers")],
)
def test_driver_errors_become_store_access_errors(collection, error):
    collection.fail_with = error
    repo = views_repo_module.PostViewsRepository()

    for call in (
        lambda: repo.get("old-post"),
        lambda: repo.set_merge("old-post", {"views": 1}),
        lambda: repo.increment("old-post", "views"),
    ):
        with pytest.raises(StoreAccessError) as exc:
            call()
        assert str(error) in exc.value.message


def test_ping_failure(collection):
    views_repo_module.mongodb.ping_error = ServerSelectionTimeoutError("timed out")
    with pytest.raises(StoreAccessError):
        views_repo_module.PostViewsRepository().ping()


def test_increment_type_mismatch_is_reported_separately(collection):
    collection.fail_with = OperationFailure(
        "Cannot apply $inc to a value of non-numeric type", code=14
    )
    repo = views_repo_module.PostViewsRepository()

    with pytest.raises(CounterTypeError):
        repo.increment("old-post", "views")


def test_other_operation_failures_stay_generic(collection):
    collection.fail_with = OperationFailure("quota exceeded", code=12501)
    with pytest.raises(StoreAccessError) as exc:
        views_repo_module.PostViewsRepository().increment("old-post", "views")
    assert not isinstance(exc.value, CounterTypeError)
