# Standard library imports
from datetime import datetime
from typing import Any, List, Optional

# External package imports
from pydantic import BaseModel, Field, HttpUrl, field_validator

# Local application imports
from ...domain.models.product import (
    Product,
    TITLE_MIN_LENGTH,
    TITLE_MAX_LENGTH,
    DESCRIPTION_MIN_LENGTH,
    DESCRIPTION_MAX_LENGTH,
)
from ...domain.models.product_query import PageInfo


class ProductCreateRequest(BaseModel):
    """
    DTO for product creation request.
    
    The owner is never part of the payload; unknown keys such as
    ``owner_id`` or ``user`` are dropped by pydantic.
    """
    title: str = Field(min_length=TITLE_MIN_LENGTH, max_length=TITLE_MAX_LENGTH)
    image: HttpUrl
    description: str = Field(min_length=DESCRIPTION_MIN_LENGTH, max_length=DESCRIPTION_MAX_LENGTH)
    price: float = Field(ge=0, allow_inf_nan=False)

    @field_validator("title", "description", "image", mode="before")
    @classmethod
    def strip_text(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value


class ProductUpdateRequest(ProductCreateRequest):
    """DTO for product update request (same constraints as creation)"""
    pass


class ProductResponse(BaseModel):
    """DTO for product response"""
    id: str
    title: str
    image: str
    description: str
    price: float
    owner_id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, product: Product) -> "ProductResponse":
        return cls(
            id=product.id or "",
            title=product.title,
            image=product.image,
            description=product.description,
            price=product.price,
            owner_id=product.owner_id,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )


class PageInfoResponse(BaseModel):
    """DTO for pagination metadata"""
    current_page: int
    total_pages: int
    total_items: int
    limit: int
    has_next_page: bool
    has_prev_page: bool

    @classmethod
    def from_domain(cls, page_info: PageInfo) -> "PageInfoResponse":
        return cls(
            current_page=page_info.current_page,
            total_pages=page_info.total_pages,
            total_items=page_info.total_items,
            limit=page_info.limit,
            has_next_page=page_info.has_next_page,
            has_prev_page=page_info.has_prev_page,
        )


class ProductListResponse(BaseModel):
    """DTO for paginated product listings"""
    message: str = "Products retrieved successfully"
    products: List[ProductResponse] = Field(default_factory=list)
    pagination: PageInfoResponse


class ProductMessageResponse(BaseModel):
    """DTO for single-product responses (create, update, delete)"""
    message: str
    product: ProductResponse


class ProductDetailResponse(ProductMessageResponse):
    """DTO for GET /products/{id}; is_owner is False for anonymous callers"""
    is_owner: bool = False
