from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.repositories.product_repository import ProductRepository
from ...application.use_cases.product.create_product import CreateProductUseCase
from ...application.use_cases.product.list_products import ListProductsUseCase, ListMyProductsUseCase
from ...application.use_cases.product.get_product import GetProductUseCase
from ...application.use_cases.product.update_product import UpdateProductUseCase
from ...application.use_cases.product.delete_product import DeleteProductUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ProductProvider:
    """Product use case provider - registers all product-related use cases"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all product use cases.
        Use cases are created on-demand via factories.
        """
        settings = get_settings()
        
        container.register_factory(
            CreateProductUseCase,
            lambda: CreateProductUseCase(
                product_repository=container.get(ProductRepository)
            )
        )
        
        container.register_factory(
            ListProductsUseCase,
            lambda: ListProductsUseCase(
                product_repository=container.get(ProductRepository),
                default_limit=settings.default_page_size,
                max_limit=settings.max_page_size,
            )
        )
        
        container.register_factory(
            ListMyProductsUseCase,
            lambda: ListMyProductsUseCase(
                product_repository=container.get(ProductRepository),
                default_limit=settings.default_page_size,
                max_limit=settings.max_page_size,
            )
        )
        
        container.register_factory(
            GetProductUseCase,
            lambda: GetProductUseCase(
                product_repository=container.get(ProductRepository)
            )
        )
        
        container.register_factory(
            UpdateProductUseCase,
            lambda: UpdateProductUseCase(
                product_repository=container.get(ProductRepository)
            )
        )
        
        container.register_factory(
            DeleteProductUseCase,
            lambda: DeleteProductUseCase(
                product_repository=container.get(ProductRepository)
            )
        )
