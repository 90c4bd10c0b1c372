"""Stand-ins for the Motor objects the Mongo repository talks to."""

from types import SimpleNamespace

import bson
from bson import ObjectId


class FakeCursor:
    def __init__(self, documents, error=None):
        self.documents = documents
        self.error = error

    async def to_list(self, length=None):
        if self.error:
            raise self.error
        return [dict(d) for d in self.documents]


class FakeAdmin:
    def __init__(self, error=None):
        self.error = error
        self.commands = []

    async def command(self, name):
        self.commands.append(name)
        if self.error:
            raise self.error
        return {"ok": 1.0}


class FakeCollection:
    """Minimal async collection: find().to_list(), insert_one()."""

    def __init__(self, error=None, name="users"):
        self.name = name
        self.documents = []
        self.error = error
        self.admin = FakeAdmin(error)
        self.database = SimpleNamespace(client=SimpleNamespace(admin=self.admin))

    def find(self, query):
        assert query == {}
        return FakeCursor(self.documents, self.error)

    async def insert_one(self, document):
        if self.error:
            raise self.error
        document.setdefault("_id", ObjectId())
        self.documents.append(dict(document))
        return SimpleNamespace(inserted_id=document["_id"])


class EncodingCollection(FakeCollection):
    """Encodes documents to BSON on insert, as the driver does."""

    async def insert_one(self, document):
        bson.encode(document)
        return await super().insert_one(document)


class FakeMongoConnection:
    """Replaces usersvc.db.mongo.MongoConnection in bootstrap tests."""

    instances = []

    def __init__(self, url, default_db_name, users_collection="users", server_selection_timeout_ms=5000,
                 reachable=True, error=None):
        self.url = url
        self.default_db_name = default_db_name
        self.collection = FakeCollection(error=error, name=users_collection)
        self.reachable = reachable
        self.closed = False
        FakeMongoConnection.instances.append(self)

    def users_collection(self):
        return self.collection

    async def connect(self):
        return self.reachable

    def close(self):
        self.closed = True
