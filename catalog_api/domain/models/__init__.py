from .user import User
from .product import Product
from .product_query import ProductQuery, PageInfo, parse_sort

__all__ = ["User", "Product", "ProductQuery", "PageInfo", "parse_sort"]
