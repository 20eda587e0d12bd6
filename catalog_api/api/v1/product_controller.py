# Standard library imports
from typing import Optional

# External package imports
from fastapi import APIRouter, Depends, Query, status

# Local application imports
from ...application.dto.product_dto import (
    ProductCreateRequest,
    ProductUpdateRequest,
    ProductResponse,
    ProductListResponse,
    ProductMessageResponse,
    ProductDetailResponse,
)
from ...application.dto.user_dto import UserResponse
from ...application.use_cases.product.create_product import CreateProductUseCase
from ...application.use_cases.product.list_products import ListProductsUseCase, ListMyProductsUseCase
from ...application.use_cases.product.get_product import GetProductUseCase
from ...application.use_cases.product.update_product import UpdateProductUseCase
from ...application.use_cases.product.delete_product import DeleteProductUseCase
from ...domain.exceptions import CatalogError
from ...di.container import get_container
from .dependencies import get_current_user, get_optional_user
from .errors import to_http_exception


router = APIRouter(tags=["products"])


PAGE_QUERY = Query(None, description="1-based page number")
LIMIT_QUERY = Query(None, description="Page size")
SORT_QUERY = Query(None, description="Comma-separated fields, '-' prefix for descending")
KEYWORD_QUERY = Query(None, description="Case-insensitive match on title or description")


@router.get("", response_model=ProductListResponse)
async def list_products(
    page: Optional[int] = PAGE_QUERY,
    limit: Optional[int] = LIMIT_QUERY,
    sort: Optional[str] = SORT_QUERY,
    keyword: Optional[str] = KEYWORD_QUERY,
) -> ProductListResponse:
    """
    List all products with search, sort and pagination
    
    Returns:
        ProductListResponse with products and pagination info
    """
    container = get_container()
    list_products_use_case = container.get(ListProductsUseCase)
    
    return await list_products_use_case.execute(
        page=page,
        limit=limit,
        sort=sort,
        keyword=keyword,
    )


@router.post("", response_model=ProductMessageResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
    request: ProductCreateRequest,
    current_user: UserResponse = Depends(get_current_user),
) -> ProductMessageResponse:
    """
    Create a new product owned by the current user
    
    Args:
        request: Product creation request
        current_user: Current authenticated user (from dependency)
        
    Returns:
        ProductMessageResponse with the created product
    """
    container = get_container()
    create_product_use_case = container.get(CreateProductUseCase)
    
    product = await create_product_use_case.execute(
        request=request,
        owner_id=current_user.id,
    )
    return ProductMessageResponse(message="Product created successfully", product=product)


@router.get("/my", response_model=ProductListResponse)
async def list_my_products(
    page: Optional[int] = PAGE_QUERY,
    limit: Optional[int] = LIMIT_QUERY,
    sort: Optional[str] = SORT_QUERY,
    keyword: Optional[str] = KEYWORD_QUERY,
    current_user: UserResponse = Depends(get_current_user),
) -> ProductListResponse:
    """
    List the current user's products with search, sort and pagination
    
    Args:
        current_user: Current authenticated user (from dependency)
        
    Returns:
        ProductListResponse with products and pagination info
    """
    container = get_container()
    list_my_products_use_case = container.get(ListMyProductsUseCase)
    
    return await list_my_products_use_case.execute(
        owner_id=current_user.id,
        page=page,
        limit=limit,
        sort=sort,
        keyword=keyword,
    )


@router.get("/{product_id}", response_model=ProductDetailResponse)
async def get_product(
    product_id: str,
    current_user: Optional[UserResponse] = Depends(get_optional_user),
) -> ProductDetailResponse:
    """
    Get a product by ID (public)
    
    Args:
        product_id: ID of the product
        current_user: Caller, if a valid token was sent
        
    Returns:
        ProductDetailResponse; is_owner tells a signed-in caller whether they own it
    """
    container = get_container()
    get_product_use_case = container.get(GetProductUseCase)
    
    try:
        product = await get_product_use_case.execute(product_id)
    except CatalogError as exception:
        raise to_http_exception(exception)
    
    return ProductDetailResponse(
        message="Product retrieved successfully",
        product=ProductResponse.from_domain(product),
        is_owner=product.is_owned_by(current_user.id if current_user else None),
    )


@router.put("/{product_id}", response_model=ProductMessageResponse)
async def update_product(
    product_id: str,
    request: ProductUpdateRequest,
    current_user: UserResponse = Depends(get_current_user),
) -> ProductMessageResponse:
    """
    Update a product (owner only)
    
    Args:
        product_id: ID of the product
        request: New field values
        current_user: Current authenticated user (from dependency)
        
    Returns:
        ProductMessageResponse with the updated product
    """
    container = get_container()
    update_product_use_case = container.get(UpdateProductUseCase)
    
    try:
        product = await update_product_use_case.execute(
            product_id=product_id,
            request=request,
            user_id=current_user.id,
        )
    except CatalogError as exception:
        raise to_http_exception(exception)
    
    return ProductMessageResponse(message="Product updated successfully", product=product)


@router.delete("/{product_id}", response_model=ProductMessageResponse)
async def delete_product(
    product_id: str,
    current_user: UserResponse = Depends(get_current_user),
) -> ProductMessageResponse:
    """
    Delete a product (owner only)
    
    Args:
        product_id: ID of the product
        current_user: Current authenticated user (from dependency)
        
    Returns:
        ProductMessageResponse with the deleted product's last state
    """
    container = get_container()
    delete_product_use_case = container.get(DeleteProductUseCase)
    
    try:
        product = await delete_product_use_case.execute(
            product_id=product_id,
            user_id=current_user.id,
        )
    except CatalogError as exception:
        raise to_http_exception(exception)
    
    return ProductMessageResponse(message="Product deleted successfully", product=product)
