"""
HTTP client for the hero slides admin resource.
"""

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import urlparse

import httpx
import pydantic

from heroslides.config import get_settings
from heroslides.schemas.hero_slide import HeroSlideOut
from heroslides.admin.errors import ServerError, error_from_response, error_from_transport

logger = logging.getLogger(__name__)

HERO_SLIDES_PATH = "/api/admin/hero-slides"


class AdminApiClient:
    """
    Thin wrapper around an httpx client for the admin endpoints.

    Every failure is raised as an ApiError subclass; callers never see raw
    httpx exceptions.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        email: Optional[str] = None,
        password: Optional[str] = None,
        timeout: Optional[float] = None,
        http: Optional[httpx.Client] = None,
    ):
        """
        Args:
            base_url: API root. Defaults to API_BASE_URL.
            email: Admin email for basic auth. Defaults to ADMIN_EMAIL.
            password: Admin password. Defaults to ADMIN_PASSWORD.
            timeout: Request timeout in seconds. Defaults to REQUEST_TIMEOUT.
            http: Pre-built client (e.g. FastAPI's TestClient). Its base URL is used as-is.
        """
        settings = get_settings()
        email = email or settings.ADMIN_EMAIL
        password = password or settings.ADMIN_PASSWORD
        self._auth = httpx.BasicAuth(email, password) if email and password else None
        if http is not None:
            self._http = http
            self._owns_http = False
        else:
            self._http = httpx.Client(
                base_url=base_url or settings.API_BASE_URL,
                timeout=timeout if timeout is not None else settings.REQUEST_TIMEOUT,
            )
            self._owns_http = True

    @property
    def base_url(self) -> str:
        return str(self._http.base_url)

    def _request(self, method: str, path: str, json: Any = None) -> httpx.Response:
        try:
            response = self._http.request(method, path, json=json, auth=self._auth)
        except httpx.RequestError as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            raise error_from_transport(exc) from exc
        if response.is_error:
            error = error_from_response(response)
            logger.warning("%s %s -> %s: %s", method, path, response.status_code, error.message)
            raise error
        return response

    @staticmethod
    def _parse(response: httpx.Response, many: bool = False):
        try:
            body = response.json()
            if many:
                return [HeroSlideOut.model_validate(item) for item in body]
            return HeroSlideOut.model_validate(body)
        except (ValueError, TypeError, pydantic.ValidationError) as exc:
            logger.error("Malformed slide data from %s: %s", response.request.url, exc)
            raise ServerError("The server returned malformed slide data.", response.status_code) from exc

    def list_slides(self) -> List[HeroSlideOut]:
        return self._parse(self._request("GET", HERO_SLIDES_PATH), many=True)

    def create_slide(self, data: Dict[str, Any]) -> HeroSlideOut:
        return self._parse(self._request("POST", HERO_SLIDES_PATH, json=data))

    def update_slide(self, id: int, data: Dict[str, Any]) -> HeroSlideOut:
        return self._parse(self._request("PUT", f"{HERO_SLIDES_PATH}/{id}", json=data))

    def delete_slide(self, id: int) -> None:
        self._request("DELETE", f"{HERO_SLIDES_PATH}/{id}")

    def image_available(self, url: str) -> bool:
        """Check whether an image URL loads. Relative paths resolve against the API root."""
        if not url:
            return False
        parsed = urlparse(url)
        if parsed.scheme and parsed.scheme not in ("http", "https"):
            return False
        try:
            response = self._http.request("HEAD", url, follow_redirects=True)
        except httpx.HTTPError as exc:
            logger.debug("Image probe for %s failed: %s", url, exc)
            return False
        return response.is_success

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "AdminApiClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"AdminApiClient({self.base_url})"
