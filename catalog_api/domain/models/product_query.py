"""
Product listing query and pagination metadata.

ProductQuery normalizes raw query-string values (page, limit, sort, keyword)
into a clamped, validated form that repositories translate into database
queries. PageInfo is computed from the query and the total match count.
"""

# Standard library imports
import math
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

# Local application imports
from ..constants import ProductFields


ASCENDING = 1
DESCENDING = -1

# Keeps (page - 1) * limit inside a BSON 64-bit integer
MAX_PAGE = 1_000_000_000

SortSpec = List[Tuple[str, int]]

DEFAULT_SORT: SortSpec = [(ProductFields.CREATED_AT, DESCENDING)]


def parse_sort(sort: Optional[str]) -> SortSpec:
    """
    Parse a comma-separated sort expression such as ``"price,-createdAt"``.
    
    A leading "-" means descending. Unknown fields are ignored and a field
    mentioned twice keeps its first direction. An empty result falls back to
    newest first.
    
    Args:
        sort: Raw sort expression from the query string
        
    Returns:
        List of (stored field name, direction) pairs
    """
    if not sort:
        return list(DEFAULT_SORT)
    
    order: SortSpec = []
    seen = set()
    for raw in sort.split(","):
        token = raw.strip()
        if not token:
            continue
        direction = ASCENDING
        if token.startswith("-"):
            direction = DESCENDING
            token = token[1:].strip()
        elif token.startswith("+"):
            token = token[1:].strip()
        field_name = ProductFields.SORTABLE.get(token)
        if field_name is None or field_name in seen:
            continue
        seen.add(field_name)
        order.append((field_name, direction))
    
    return order or list(DEFAULT_SORT)


def _clamp(value: Optional[int], default: int, low: int, high: Optional[int] = None) -> int:
    if value is None:
        return default
    value = max(low, int(value))
    if high is not None:
        value = min(high, value)
    return value


@dataclass
class ProductQuery:
    """Normalized filters for listing products"""
    page: int = 1
    limit: int = 10
    sort: SortSpec = field(default_factory=lambda: list(DEFAULT_SORT))
    keyword: Optional[str] = None
    owner_id: Optional[str] = None
    
    @classmethod
    def from_params(
        cls,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        sort: Optional[str] = None,
        keyword: Optional[str] = None,
        owner_id: Optional[str] = None,
        default_limit: int = 10,
        max_limit: int = 100,
    ) -> "ProductQuery":
        """
        Build a query from raw request parameters.
        
        page is clamped to [1, MAX_PAGE]; limit is clamped to [1, max_limit] and
        defaults to default_limit. A blank keyword means no text filter.
        """
        normalized_keyword = keyword.strip() if keyword else None
        return cls(
            page=_clamp(page, 1, 1, MAX_PAGE),
            limit=_clamp(limit, default_limit, 1, max_limit),
            sort=parse_sort(sort),
            keyword=normalized_keyword or None,
            owner_id=owner_id,
        )
    
    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit


@dataclass(frozen=True)
class PageInfo:
    """Offset pagination metadata"""
    current_page: int
    total_pages: int
    total_items: int
    limit: int
    has_next_page: bool
    has_prev_page: bool
    
    @classmethod
    def build(cls, page: int, limit: int, total_items: int) -> "PageInfo":
        total_pages = math.ceil(total_items / limit) if limit > 0 else 0
        return cls(
            current_page=page,
            total_pages=total_pages,
            total_items=total_items,
            limit=limit,
            has_next_page=page < total_pages,
            has_prev_page=page > 1,
        )
