# Standard library imports
from typing import Optional

# Local application imports
from ....domain.repositories.product_repository import ProductRepository
from ....domain.models.product_query import ProductQuery, PageInfo
from ...dto.product_dto import ProductListResponse, ProductResponse, PageInfoResponse


class ListProductsUseCase:
    """Use case for searching, sorting and paginating all products"""
    
    def __init__(
        self,
        product_repository: ProductRepository,
        default_limit: int = 10,
        max_limit: int = 100,
    ) -> None:
        self.product_repository = product_repository
        self.default_limit = default_limit
        self.max_limit = max_limit
    
    def build_query(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        sort: Optional[str] = None,
        keyword: Optional[str] = None,
        owner_id: Optional[str] = None,
    ) -> ProductQuery:
        return ProductQuery.from_params(
            page=page,
            limit=limit,
            sort=sort,
            keyword=keyword,
            owner_id=owner_id,
            default_limit=self.default_limit,
            max_limit=self.max_limit,
        )
    
    async def run(self, query: ProductQuery) -> ProductListResponse:
        total, products = await self.product_repository.search(query)
        page_info = PageInfo.build(query.page, query.limit, total)
        return ProductListResponse(
            products=[ProductResponse.from_domain(p) for p in products],
            pagination=PageInfoResponse.from_domain(page_info),
        )
    
    async def execute(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        sort: Optional[str] = None,
        keyword: Optional[str] = None,
    ) -> ProductListResponse:
        """
        List products matching the filters
        
        Args:
            page: 1-based page number (values below 1 mean 1)
            limit: Page size (clamped to [1, max_limit])
            sort: Comma-separated sort fields, "-" prefix for descending
            keyword: Case-insensitive substring matched against title or description
            
        Returns:
            ProductListResponse with one page of products and pagination info
        """
        return await self.run(self.build_query(page, limit, sort, keyword))


class ListMyProductsUseCase(ListProductsUseCase):
    """Same as ListProductsUseCase, pre-scoped to the caller's products"""
    
    async def execute(
        self,
        owner_id: str,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        sort: Optional[str] = None,
        keyword: Optional[str] = None,
    ) -> ProductListResponse:
        if not owner_id:
            raise ValueError("Owner ID is required")
        return await self.run(self.build_query(page, limit, sort, keyword, owner_id=owner_id))
