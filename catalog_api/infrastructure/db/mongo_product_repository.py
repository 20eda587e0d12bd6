# Standard library imports
import re
from typing import Optional, List, Dict, Any, Tuple

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ReturnDocument

# Local application imports
from ...domain.repositories.product_repository import ProductRepository
from ...domain.models.product import Product
from ...domain.models.product_query import ProductQuery
from ...domain.constants import ProductFields
from ...domain.exceptions import InvalidIdError
from ...utils.datetime_utils import utc_now, ensure_utc
from .mongo_connection import get_product_collection


def to_object_id(product_id: str) -> ObjectId:
    """
    Convert a product ID string to ObjectId

    Raises:
        InvalidIdError: If the string is not a 24-char hex ObjectId
    """
    try:
        return ObjectId(product_id)
    except (InvalidId, TypeError):
        raise InvalidIdError()


def build_product_filter(query: ProductQuery) -> Dict[str, Any]:
    """
    Translate a ProductQuery into a MongoDB filter document.

    The keyword is escaped and matched case-insensitively as a substring of
    title OR description.
    """
    mongo_filter: Dict[str, Any] = {}
    if query.owner_id:
        mongo_filter[ProductFields.OWNER_ID] = query.owner_id
    if query.keyword:
        pattern = {"$regex": re.escape(query.keyword), "$options": "i"}
        mongo_filter["$or"] = [
            {ProductFields.TITLE: pattern},
            {ProductFields.DESCRIPTION: pattern},
        ]
    return mongo_filter


def build_sort(query: ProductQuery) -> List[Tuple[str, int]]:
    """Sort order with _id appended as a tie-breaker so pages do not overlap"""
    sort = list(query.sort)
    if all(field_name != ProductFields.MONGO_ID for field_name, _ in sort):
        sort.append((ProductFields.MONGO_ID, sort[-1][1] if sort else -1))
    return sort


class MongoProductRepository(ProductRepository):
    """MongoDB implementation of ProductRepository"""

    def __init__(self, product_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.product_collection = (
            product_collection if product_collection is not None else get_product_collection()
        )

    async def find_by_id(self, product_id: str) -> Optional[Product]:
        """
        Find product by ID

        Args:
            product_id: The product ID to find

        Returns:
            Product domain model if found, None otherwise

        Raises:
            InvalidIdError: If product_id is malformed
        """
        object_id = to_object_id(product_id)

        try:
            document = await self.product_collection.find_one({ProductFields.MONGO_ID: object_id})
        except Exception as e:
            raise RuntimeError(f"Error finding product by ID: {str(e)}")

        if document is None:
            return None
        return self._document_to_product(document)

    async def search(self, query: ProductQuery) -> Tuple[int, List[Product]]:
        """
        Count and fetch one page of products matching the query

        Args:
            query: Normalized listing query

        Returns:
            Tuple of (total matching documents, products on the requested page)
        """
        mongo_filter = build_product_filter(query)

        try:
            total = await self.product_collection.count_documents(mongo_filter)
            cursor = (
                self.product_collection.find(mongo_filter)
                .sort(build_sort(query))
                .skip(query.skip)
                .limit(query.limit)
            )
            products: List[Product] = []
            async for document in cursor:
                products.append(self._document_to_product(document))
        except Exception as e:
            raise RuntimeError(f"Error listing products: {str(e)}")

        return total, products

    async def create(self, product: Product) -> Product:
        """
        Insert a new product

        Args:
            product: Product domain model (id and timestamps are assigned here)

        Returns:
            Saved Product domain model with ID and timestamps set
        """
        if not product:
            raise ValueError("Product cannot be None")

        now = utc_now()
        product_dict = self._product_to_dict(product)
        product_dict[ProductFields.OWNER_ID] = product.owner_id
        product_dict[ProductFields.CREATED_AT] = now
        product_dict[ProductFields.UPDATED_AT] = now

        try:
            result = await self.product_collection.insert_one(product_dict)
        except Exception as e:
            raise RuntimeError(f"Error creating product: {str(e)}")

        product_dict[ProductFields.MONGO_ID] = result.inserted_id
        return self._document_to_product(product_dict)

    async def update(self, product: Product) -> Optional[Product]:
        """
        Overwrite the mutable fields of an existing product

        owner_id and created_at are never part of the $set document.

        Args:
            product: Product domain model carrying the new field values

        Returns:
            Updated Product, or None if the document no longer exists
        """
        object_id = to_object_id(product.id or "")
        changes = self._product_to_dict(product)
        changes[ProductFields.UPDATED_AT] = utc_now()

        try:
            document = await self.product_collection.find_one_and_update(
                {ProductFields.MONGO_ID: object_id},
                {"$set": changes},
                return_document=ReturnDocument.AFTER,
            )
        except Exception as e:
            raise RuntimeError(f"Error updating product: {str(e)}")

        if document is None:
            return None
        return self._document_to_product(document)

    async def delete(self, product_id: str) -> Optional[Product]:
        """
        Delete a product

        Args:
            product_id: ID of the product to delete

        Returns:
            The deleted Product as it was stored, or None if it did not exist
        """
        object_id = to_object_id(product_id)

        try:
            document = await self.product_collection.find_one_and_delete(
                {ProductFields.MONGO_ID: object_id}
            )
        except Exception as e:
            raise RuntimeError(f"Error deleting product: {str(e)}")

        if document is None:
            return None
        return self._document_to_product(document)

    def _document_to_product(self, document: Dict[str, Any]) -> Product:
        """
        Convert MongoDB document to Product domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            Product domain model
        """
        if not document or ProductFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        return Product(
            id=str(document[ProductFields.MONGO_ID]),
            owner_id=str(document.get(ProductFields.OWNER_ID, "")),
            title=document.get(ProductFields.TITLE, ""),
            image=document.get(ProductFields.IMAGE, ""),
            description=document.get(ProductFields.DESCRIPTION, ""),
            price=document.get(ProductFields.PRICE, 0),
            created_at=ensure_utc(document.get(ProductFields.CREATED_AT)),
            updated_at=ensure_utc(document.get(ProductFields.UPDATED_AT)),
        )

    def _product_to_dict(self, product: Product) -> Dict[str, Any]:
        """
        Convert the mutable fields of a Product to a MongoDB document fragment

        Args:
            product: Product domain model

        Returns:
            Dictionary with title, image, description and price
        """
        return {
            ProductFields.TITLE: product.title,
            ProductFields.IMAGE: product.image,
            ProductFields.DESCRIPTION: product.description,
            ProductFields.PRICE: product.price,
        }
