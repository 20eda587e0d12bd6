# Standard library imports
import logging
from typing import Any, Dict, List, Optional

# External package imports
import httpx

# Local application imports
from ..application.dto.auth_dto import AuthResponse
from ..application.dto.user_dto import UserResponse, CurrentUserResponse
from ..application.dto.product_dto import (
    ProductResponse,
    ProductListResponse,
    ProductMessageResponse,
    ProductDetailResponse,
)
from .session import ClientSession

logger = logging.getLogger(__name__)


class CatalogApiError(Exception):
    """Raised for any non-2xx response from the API"""

    def __init__(
        self,
        status_code: int,
        message: str,
        errors: Optional[List[Dict[str, Any]]] = None,
    ) -> None:
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message
        self.errors = errors or []


class CatalogApiClient:
    """
    Async client for the Product Catalog API.

    The bearer token comes from the ClientSession passed in; a 401 on a request
    that carried a token expires the session.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8000/api/v1",
        session: Optional[ClientSession] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: float = 30.0,
    ) -> None:
        """
        Initialize the client.

        Args:
            base_url: API root, including the /api/v1 prefix
            session: Session to read the token from and update; a new one if None
            http_client: Pre-configured AsyncClient (its base_url is used as-is)
            timeout: Request timeout in seconds for the client created here
        """
        self.session = session or ClientSession()
        self._owns_http_client = http_client is None
        self._http_client = http_client or httpx.AsyncClient(base_url=base_url, timeout=timeout)

    async def __aenter__(self) -> "CatalogApiClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_http_client:
            await self._http_client.aclose()

    # ------------------------------------------------------------------
    # Authentication
    # ------------------------------------------------------------------

    async def register(self, name: str, email: str, password: str) -> UserResponse:
        body = await self._request(
            "POST", "/auth/register",
            json={"name": name, "email": email, "password": password},
            authenticated=False,
        )
        auth = AuthResponse.model_validate(body)
        self.session.start(auth.token, auth.user)
        return auth.user

    async def login(self, email: str, password: str) -> UserResponse:
        body = await self._request(
            "POST", "/auth/login",
            json={"email": email, "password": password},
            authenticated=False,
        )
        auth = AuthResponse.model_validate(body)
        self.session.start(auth.token, auth.user)
        return auth.user

    def logout(self) -> None:
        self.session.end()

    async def me(self) -> UserResponse:
        body = await self._request("GET", "/auth/me")
        user = CurrentUserResponse.model_validate(body).user
        self.session.update_user(user)
        return user

    # ------------------------------------------------------------------
    # Products
    # ------------------------------------------------------------------

    async def list_products(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        sort: Optional[str] = None,
        keyword: Optional[str] = None,
    ) -> ProductListResponse:
        body = await self._request(
            "GET", "/products",
            params=self._listing_params(page, limit, sort, keyword),
        )
        return ProductListResponse.model_validate(body)

    async def list_my_products(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        sort: Optional[str] = None,
        keyword: Optional[str] = None,
    ) -> ProductListResponse:
        body = await self._request(
            "GET", "/products/my",
            params=self._listing_params(page, limit, sort, keyword),
        )
        return ProductListResponse.model_validate(body)

    async def get_product(self, product_id: str) -> ProductDetailResponse:
        body = await self._request("GET", f"/products/{product_id}")
        return ProductDetailResponse.model_validate(body)

    async def create_product(self, fields: Dict[str, Any]) -> ProductResponse:
        body = await self._request("POST", "/products", json=fields)
        return ProductMessageResponse.model_validate(body).product

    async def update_product(self, product_id: str, fields: Dict[str, Any]) -> ProductResponse:
        body = await self._request("PUT", f"/products/{product_id}", json=fields)
        return ProductMessageResponse.model_validate(body).product

    async def delete_product(self, product_id: str) -> ProductResponse:
        body = await self._request("DELETE", f"/products/{product_id}")
        return ProductMessageResponse.model_validate(body).product

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @staticmethod
    def _listing_params(
        page: Optional[int],
        limit: Optional[int],
        sort: Optional[str],
        keyword: Optional[str],
    ) -> Dict[str, Any]:
        params = {"page": page, "limit": limit, "sort": sort, "keyword": keyword}
        return {key: value for key, value in params.items() if value is not None}

    async def _request(
        self,
        method: str,
        path: str,
        json: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
        authenticated: bool = True,
    ) -> Dict[str, Any]:
        # register and login never carry the current token
        headers = {}
        if authenticated and self.session.token:
            headers["Authorization"] = f"Bearer {self.session.token}"

        response = await self._http_client.request(
            method,
            path.lstrip("/"),
            json=json,
            params=params,
            headers=headers,
        )

        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}

        if response.status_code == 401 and "Authorization" in headers:
            logger.info(f"{method} {path} rejected the session token; expiring session")
            self.session.expire()

        if response.is_error:
            raise CatalogApiError(
                status_code=response.status_code,
                message=body.get("message") or response.reason_phrase,
                errors=body.get("errors"),
            )
        return body
