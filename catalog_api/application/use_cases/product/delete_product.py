# Standard library imports
import logging

# Local application imports
from ....domain.repositories.product_repository import ProductRepository
from ....domain.exceptions import NotFoundError
from ...dto.product_dto import ProductResponse
from .ownership import load_owned_product

logger = logging.getLogger(__name__)


class DeleteProductUseCase:
    """Use case for deleting a product (owner only)"""
    
    def __init__(self, product_repository: ProductRepository) -> None:
        self.product_repository = product_repository
    
    async def execute(self, product_id: str, user_id: str) -> ProductResponse:
        """
        Delete a product and return its last state
        
        Raises:
            InvalidIdError, NotFoundError, ForbiddenError
        """
        await load_owned_product(self.product_repository, product_id, user_id)
        
        deleted = await self.product_repository.delete(product_id)
        if deleted is None:
            raise NotFoundError()
        
        logger.info(f"User {user_id} deleted product {product_id}")
        return ProductResponse.from_domain(deleted)
