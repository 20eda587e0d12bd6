# Standard library imports
import logging

# Local application imports
from ....domain.repositories.product_repository import ProductRepository
from ....domain.models.product import Product
from ....domain.exceptions import NotFoundError, ForbiddenError

logger = logging.getLogger(__name__)


async def load_owned_product(
    product_repository: ProductRepository,
    product_id: str,
    user_id: str,
) -> Product:
    """
    Fetch a product and check that user_id owns it

    Raises:
        InvalidIdError: If product_id is malformed
        NotFoundError: If the product does not exist
        ForbiddenError: If the product belongs to someone else
    """
    product = await product_repository.find_by_id(product_id)
    if product is None:
        raise NotFoundError()
    if not product.is_owned_by(user_id):
        logger.warning(f"User {user_id} denied access to product {product_id} owned by {product.owner_id}")
        raise ForbiddenError()
    return product
