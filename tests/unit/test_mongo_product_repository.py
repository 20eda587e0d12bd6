"""
Unit tests for the MongoDB product repository (collection mocked, no server).
"""
from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId
from catalog_api.domain.exceptions import InvalidIdError
from catalog_api.domain.models.product import Product
from catalog_api.domain.models.product_query import ProductQuery
from catalog_api.infrastructure.db.mongo_product_repository import (
    MongoProductRepository,
    build_product_filter,
    build_sort,
    to_object_id,
)

OWNER = "64b000000000000000000001"


def product_document(**overrides):
    document = {
        "_id": ObjectId(),
        "owner_id": OWNER,
        "title": "Desk Lamp",
        "image": "https://example.com/lamp.png",
        "description": "Adjustable LED desk lamp",
        "price": 24.5,
        "created_at": datetime(2025, 1, 1, 12, 0, 0),
        "updated_at": datetime(2025, 1, 2, 12, 0, 0),
    }
    document.update(overrides)
    return document


class AsyncCursor:
    """Minimal stand-in for a Motor cursor: chainable and async-iterable."""

    def __init__(self, documents):
        self.documents = documents
        self.sort = MagicMock(return_value=self)
        self.skip = MagicMock(return_value=self)
        self.limit = MagicMock(return_value=self)

    def __aiter__(self):
        self._iterator = iter(self.documents)
        return self

    async def __anext__(self):
        try:
            return next(self._iterator)
        except StopIteration:
            raise StopAsyncIteration


@pytest.fixture
def collection():
    return MagicMock(
        find_one=AsyncMock(),
        insert_one=AsyncMock(),
        count_documents=AsyncMock(),
        find_one_and_update=AsyncMock(),
        find_one_and_delete=AsyncMock(),
    )


class TestHelpers:
    def test_to_object_id_rejects_malformed(self):
        with pytest.raises(InvalidIdError):
            to_object_id("xyz")

    def test_filter_empty_without_keyword_or_owner(self):
        assert build_product_filter(ProductQuery()) == {}

    def test_filter_escapes_keyword(self):
        mongo_filter = build_product_filter(ProductQuery(keyword="a.b*", owner_id=OWNER))
        assert mongo_filter["owner_id"] == OWNER
        pattern = {"$regex": r"a\.b\*", "$options": "i"}
        assert mongo_filter["$or"] == [{"title": pattern}, {"description": pattern}]

    def test_sort_appends_id_tie_breaker(self):
        assert build_sort(ProductQuery(sort=[("price", 1)])) == [("price", 1), ("_id", 1)]
        assert build_sort(ProductQuery()) == [("created_at", -1), ("_id", -1)]


class TestMongoProductRepository:
    @pytest.mark.asyncio
    async def test_find_by_id_maps_document(self, collection):
        document = product_document()
        collection.find_one.return_value = document

        product = await MongoProductRepository(collection).find_by_id(str(document["_id"]))

        assert product.id == str(document["_id"])
        assert product.owner_id == OWNER
        assert product.created_at.tzinfo is not None

    @pytest.mark.asyncio
    async def test_find_by_id_malformed_never_queries(self, collection):
        with pytest.raises(InvalidIdError):
            await MongoProductRepository(collection).find_by_id("nope")
        collection.find_one.assert_not_called()

    @pytest.mark.asyncio
    async def test_search_counts_then_pages(self, collection):
        documents = [product_document(title="Lamp A"), product_document(title="Lamp B")]
        cursor = AsyncCursor(documents)
        collection.count_documents.return_value = 12
        collection.find.return_value = cursor
        query = ProductQuery(page=2, limit=5, keyword="lamp")

        total, products = await MongoProductRepository(collection).search(query)

        assert total == 12
        assert [p.title for p in products] == ["Lamp A", "Lamp B"]
        collection.count_documents.assert_awaited_once_with(build_product_filter(query))
        cursor.sort.assert_called_once_with([("created_at", -1), ("_id", -1)])
        cursor.skip.assert_called_once_with(5)
        cursor.limit.assert_called_once_with(5)

    @pytest.mark.asyncio
    async def test_create_sets_timestamps(self, collection):
        inserted_id = ObjectId()
        collection.insert_one.return_value = MagicMock(inserted_id=inserted_id)
        product = Product(
            id=None,
            owner_id=OWNER,
            title="Desk Lamp",
            image="https://example.com/lamp.png",
            description="Adjustable LED desk lamp",
            price=24.5,
        )

        saved = await MongoProductRepository(collection).create(product)

        stored = collection.insert_one.call_args[0][0]
        assert stored["owner_id"] == OWNER
        assert stored["created_at"] == stored["updated_at"]
        assert saved.id == str(inserted_id)

    @pytest.mark.asyncio
    async def test_update_never_sets_owner_or_created_at(self, collection):
        document = product_document(title="Floor Lamp")
        collection.find_one_and_update.return_value = document
        product = Product(
            id=str(document["_id"]),
            owner_id=OWNER,
            title="Floor Lamp",
            image="https://example.com/lamp.png",
            description="Adjustable LED desk lamp",
            price=30,
        )

        updated = await MongoProductRepository(collection).update(product)

        changes = collection.find_one_and_update.call_args[0][1]["$set"]
        assert "owner_id" not in changes
        assert "created_at" not in changes
        assert "updated_at" in changes
        assert updated.title == "Floor Lamp"

    @pytest.mark.asyncio
    async def test_delete_missing_returns_none(self, collection):
        collection.find_one_and_delete.return_value = None
        assert await MongoProductRepository(collection).delete(str(ObjectId())) is None

    @pytest.mark.asyncio
    async def test_driver_failure_wrapped(self, collection):
        collection.find_one.side_effect = Exception("connection reset")
        with pytest.raises(RuntimeError):
            await MongoProductRepository(collection).find_by_id(str(ObjectId()))
