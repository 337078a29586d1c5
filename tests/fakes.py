from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Optional

from bson import ObjectId


@dataclass
class InsertOneResult:
    inserted_id: ObjectId


@dataclass
class InsertManyResult:
    inserted_ids: list[ObjectId]


@dataclass
class UpdateResult:
    matched_count: int
    modified_count: int


def _matches(doc: dict, query: dict) -> bool:
    return all(key in doc and doc[key] == value for key, value in query.items())


def _project(doc: dict, projection: Optional[dict]) -> dict:
    doc = copy.deepcopy(doc)
    if not projection:
        return doc
    included = [k for k, v in projection.items() if v and k != "_id"]
    out = {k: doc[k] for k in included if k in doc} if included else {
        k: v for k, v in doc.items() if projection.get(k, 1)
    }
    if projection.get("_id", 1) and "_id" in doc:
        out = {"_id": doc["_id"], **out}
    else:
        out.pop("_id", None)
    return out


class InMemoryCollection:
    """Just enough of pymongo.collection.Collection for the services under test."""

    def __init__(self, database: "InMemoryDatabase", name: str):
        self.database = database
        self.name = name
        self.docs: list[dict] = []

    def _check(self):
        if self.database.fail_with is not None:
            raise self.database.fail_with

    def insert_one(self, doc: dict) -> InsertOneResult:
        self._check()
        doc.setdefault("_id", ObjectId())
        self.docs.append(copy.deepcopy(doc))
        return InsertOneResult(doc["_id"])

    def insert_many(self, docs: list[dict]) -> InsertManyResult:
        return InsertManyResult([self.insert_one(d).inserted_id for d in docs])

    def find(self, query: Optional[dict] = None, projection: Optional[dict] = None):
        self._check()
        return iter([_project(d, projection) for d in self.docs if _matches(d, query or {})])

    def find_one(self, query: Optional[dict] = None, projection: Optional[dict] = None):
        return next(self.find(query, projection), None)

    def update_one(self, query: dict, update: dict) -> UpdateResult:
        self._check()
        for doc in self.docs:
            if _matches(doc, query):
                doc.update(copy.deepcopy(update.get("$set", {})))
                return UpdateResult(1, 1)
        return UpdateResult(0, 0)


@dataclass
class InMemoryDatabase:
    collections: dict[str, InMemoryCollection] = field(default_factory=dict)
    fail_with: Optional[Exception] = None

    def __getitem__(self, name: str) -> InMemoryCollection:
        if name not in self.collections:
            self.collections[name] = InMemoryCollection(self, name)
        return self.collections[name]

    def docs(self, name: str) -> list[dict[str, Any]]:
        return self[name].docs
