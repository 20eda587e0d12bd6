from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from ..models.product import Product
from ..models.product_query import ProductQuery


class ProductRepository(ABC):
    """Repository interface - defines contract for product data access"""
    
    @abstractmethod
    async def find_by_id(self, product_id: str) -> Optional[Product]:
        """
        Find product by ID.
        
        Raises InvalidIdError if product_id is not a valid identifier.
        """
        pass
    
    @abstractmethod
    async def search(self, query: ProductQuery) -> Tuple[int, List[Product]]:
        """Return (total matching count, one page of products) for the query"""
        pass
    
    @abstractmethod
    async def create(self, product: Product) -> Product:
        """Insert a new product and return it with ID and timestamps set"""
        pass
    
    @abstractmethod
    async def update(self, product: Product) -> Optional[Product]:
        """Replace mutable fields of an existing product; None if it vanished"""
        pass
    
    @abstractmethod
    async def delete(self, product_id: str) -> Optional[Product]:
        """Delete a product and return its last state; None if it vanished"""
        pass
