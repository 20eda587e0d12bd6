# Standard library imports
import logging

# Local application imports
from ....domain.repositories.product_repository import ProductRepository
from ....domain.models.product import Product
from ....domain.exceptions import NotFoundError
from ...dto.product_dto import ProductUpdateRequest, ProductResponse
from .ownership import load_owned_product

logger = logging.getLogger(__name__)


class UpdateProductUseCase:
    """Use case for updating a product (owner only)"""
    
    def __init__(self, product_repository: ProductRepository) -> None:
        self.product_repository = product_repository
    
    async def execute(
        self,
        product_id: str,
        request: ProductUpdateRequest,
        user_id: str,
    ) -> ProductResponse:
        """
        Replace the mutable fields of a product
        
        Args:
            product_id: ID of the product
            request: Validated new field values
            user_id: ID of the authenticated caller
            
        Returns:
            ProductResponse with the updated product
            
        Raises:
            InvalidIdError, NotFoundError, ForbiddenError
        """
        existing = await load_owned_product(self.product_repository, product_id, user_id)
        
        changed = Product(
            id=existing.id,
            owner_id=existing.owner_id,
            title=request.title,
            image=str(request.image),
            description=request.description,
            price=request.price,
            created_at=existing.created_at,
            updated_at=existing.updated_at,
        )
        
        updated = await self.product_repository.update(changed)
        if updated is None:
            # Deleted between the ownership check and the write
            raise NotFoundError()
        
        logger.info(f"User {user_id} updated product {product_id}")
        return ProductResponse.from_domain(updated)
