# Local application imports
from ....domain.repositories.product_repository import ProductRepository
from ....domain.models.product import Product
from ....domain.exceptions import NotFoundError


class GetProductUseCase:
    """Use case for getting a product by ID"""
    
    def __init__(self, product_repository: ProductRepository) -> None:
        self.product_repository = product_repository
    
    async def execute(self, product_id: str) -> Product:
        """
        Get a product by ID (public read)
        
        Returns the domain model so callers can check ownership.
        
        Raises:
            InvalidIdError: If product_id is malformed
            NotFoundError: If no product has this ID
        """
        product = await self.product_repository.find_by_id(product_id)
        if product is None:
            raise NotFoundError()
        return product
