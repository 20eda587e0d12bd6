"""
In-memory repository implementations used by tests in place of MongoDB.

They follow the same contracts as the Mongo repositories: ObjectId-style
IDs, InvalidIdError for malformed product IDs, DuplicateEmailError on a
second registration, and keyword/owner filtering with multi-key sorting.
"""
from dataclasses import replace
from datetime import timedelta
from typing import Dict, List, Optional, Tuple

from bson import ObjectId

from catalog_api.domain.exceptions import DuplicateEmailError, InvalidIdError
from catalog_api.domain.models.product import Product
from catalog_api.domain.models.product_query import ProductQuery
from catalog_api.domain.models.user import User
from catalog_api.domain.repositories.product_repository import ProductRepository
from catalog_api.domain.repositories.user_repository import UserRepository
from catalog_api.utils.datetime_utils import utc_now


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self.users: Dict[str, User] = {}

    async def find_by_email(self, email: str) -> Optional[User]:
        for user in self.users.values():
            if user.email == email:
                return user
        return None

    async def find_by_id(self, user_id: str) -> Optional[User]:
        return self.users.get(user_id)

    async def save(self, user: User) -> User:
        if await self.find_by_email(user.email) is not None:
            raise DuplicateEmailError()
        saved = replace(user, id=str(ObjectId()))
        self.users[saved.id] = saved
        return saved


class InMemoryProductRepository(ProductRepository):
    def __init__(self) -> None:
        self.products: Dict[str, Product] = {}
        self._clock = utc_now()

    def _check_id(self, product_id: str) -> None:
        if not ObjectId.is_valid(product_id):
            raise InvalidIdError()

    def _tick(self):
        # Strictly increasing timestamps so "newest first" is deterministic
        self._clock = self._clock + timedelta(milliseconds=1)
        return self._clock

    async def find_by_id(self, product_id: str) -> Optional[Product]:
        self._check_id(product_id)
        return self.products.get(product_id)

    async def search(self, query: ProductQuery) -> Tuple[int, List[Product]]:
        matches = list(self.products.values())
        if query.owner_id:
            matches = [p for p in matches if p.owner_id == query.owner_id]
        if query.keyword:
            needle = query.keyword.lower()
            matches = [
                p for p in matches
                if needle in p.title.lower() or needle in p.description.lower()
            ]

        # Apply keys last to first so the first key dominates; _id breaks ties
        last_direction = query.sort[-1][1] if query.sort else -1
        matches.sort(key=lambda p: p.id, reverse=last_direction < 0)
        for field_name, direction in reversed(query.sort):
            matches.sort(key=lambda p: getattr(p, field_name), reverse=direction < 0)

        return len(matches), matches[query.skip:query.skip + query.limit]

    async def create(self, product: Product) -> Product:
        now = self._tick()
        saved = replace(product, id=str(ObjectId()), created_at=now, updated_at=now)
        self.products[saved.id] = saved
        return saved

    async def update(self, product: Product) -> Optional[Product]:
        self._check_id(product.id or "")
        existing = self.products.get(product.id)
        if existing is None:
            return None
        updated = replace(
            existing,
            title=product.title,
            image=product.image,
            description=product.description,
            price=product.price,
            updated_at=self._tick(),
        )
        self.products[updated.id] = updated
        return updated

    async def delete(self, product_id: str) -> Optional[Product]:
        self._check_id(product_id)
        return self.products.pop(product_id, None)
