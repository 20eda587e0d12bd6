from .create_product import CreateProductUseCase
from .list_products import ListProductsUseCase, ListMyProductsUseCase
from .get_product import GetProductUseCase
from .update_product import UpdateProductUseCase
from .delete_product import DeleteProductUseCase

__all__ = [
    "CreateProductUseCase",
    "ListProductsUseCase",
    "ListMyProductsUseCase",
    "GetProductUseCase",
    "UpdateProductUseCase",
    "DeleteProductUseCase",
]
