# Standard library imports
import logging

# Local application imports
from ....domain.repositories.product_repository import ProductRepository
from ....domain.models.product import Product
from ...dto.product_dto import ProductCreateRequest, ProductResponse

logger = logging.getLogger(__name__)


class CreateProductUseCase:
    """Use case for creating a new product"""
    
    def __init__(self, product_repository: ProductRepository) -> None:
        self.product_repository = product_repository
    
    async def execute(self, request: ProductCreateRequest, owner_id: str) -> ProductResponse:
        """
        Create a new product owned by the caller
        
        Args:
            request: Validated product fields
            owner_id: ID of the authenticated user; never taken from the payload
            
        Returns:
            ProductResponse with the stored product
        """
        new_product = Product(
            id=None,
            owner_id=owner_id,
            title=request.title,
            image=str(request.image),
            description=request.description,
            price=request.price,
        )
        
        saved_product = await self.product_repository.create(new_product)
        logger.info(f"User {owner_id} created product {saved_product.id}")
        
        return ProductResponse.from_domain(saved_product)
