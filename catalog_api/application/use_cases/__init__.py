from .auth import (
    RegisterUserUseCase,
    LoginUserUseCase,
    GetCurrentUserUseCase,
)
from .product import (
    CreateProductUseCase,
    ListProductsUseCase,
    ListMyProductsUseCase,
    GetProductUseCase,
    UpdateProductUseCase,
    DeleteProductUseCase,
)

__all__ = [
    "RegisterUserUseCase",
    "LoginUserUseCase",
    "GetCurrentUserUseCase",
    "CreateProductUseCase",
    "ListProductsUseCase",
    "ListMyProductsUseCase",
    "GetProductUseCase",
    "UpdateProductUseCase",
    "DeleteProductUseCase",
]
