# Overview: HTTP client wrapper with seller authentication for the storefront REST API.

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from .config import Config
from .errors import QAError, UpstreamError


logger = logging.getLogger(__name__)

LOGIN_PATH = "/api/authenticate/store/email/gosell"


@dataclass
class SellerSession:
    """Credentials returned by the seller login flow."""
    access_token: str
    refresh_token: str = ""
    store_id: int = 0
    store_name: str = ""
    lang_key: str = "vi"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SellerSession":
        store = data.get("store") or {}
        return cls(
            access_token=data.get("accessToken") or "",
            refresh_token=data.get("refreshToken") or "",
            store_id=int(store.get("id") or 0),
            store_name=store.get("name") or "",
            lang_key=data.get("langKey") or "vi",
        )


class APIClient:
    """
    HTTP client wrapper with authentication and convenience methods.

    `transport` lets tests mount an in-process WSGI app instead of a
    live backend.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
        page_size: int = 100,
        max_workers: int = 8,
    ):
        self.base_url = base_url.rstrip("/")
        self.client = httpx.Client(base_url=self.base_url, timeout=timeout, transport=transport)
        self.page_size = page_size
        self.max_workers = max_workers
        self.session: Optional[SellerSession] = None

    @classmethod
    def from_config(cls, config: Config, transport: Optional[httpx.BaseTransport] = None) -> "APIClient":
        return cls(
            config.api_host,
            timeout=config.request_timeout,
            transport=transport,
            page_size=config.page_size,
            max_workers=config.max_workers,
        )

    @property
    def store_id(self) -> int:
        if self.session is None:
            raise QAError("Not logged in: call login() before store-scoped requests")
        return self.session.store_id

    def _headers(self, extra: Optional[Dict] = None) -> Dict:
        """Build request headers with optional auth."""
        headers = {"Content-Type": "application/json"}
        if self.session and self.session.access_token:
            headers["Authorization"] = f"Bearer {self.session.access_token}"
        if extra:
            headers.update(extra)
        return headers

    def request(
        self,
        method: str,
        path: str,
        params: Optional[Dict] = None,
        json: Any = None,
        headers: Optional[Dict] = None,
    ) -> httpx.Response:
        try:
            return self.client.request(
                method,
                path,
                params=params,
                json=json,
                headers=self._headers(headers),
            )
        except httpx.HTTPError as exc:
            raise UpstreamError(f"Transport error: {exc}", method=method, url=f"{self.base_url}{path}") from exc

    def get(self, path: str, params: Optional[Dict] = None, headers: Optional[Dict] = None) -> httpx.Response:
        return self.request("GET", path, params=params, headers=headers)

    def post(self, path: str, json: Any = None, headers: Optional[Dict] = None) -> httpx.Response:
        return self.request("POST", path, json=json, headers=headers)

    def put(self, path: str, json: Any = None, headers: Optional[Dict] = None) -> httpx.Response:
        return self.request("PUT", path, json=json, headers=headers)

    def delete(self, path: str, headers: Optional[Dict] = None) -> httpx.Response:
        return self.request("DELETE", path, headers=headers)

    def login(self, username: str, password: str) -> SellerSession:
        """Authenticate and store the seller session."""
        logger.info("===== STEP =====> [Login] username=%s", username)
        response = self.post(LOGIN_PATH, json={"username": username, "password": password})
        expect_status(response, 200, message="Seller login failed")
        self.session = SellerSession.from_dict(response.json())
        return self.session

    def logout(self):
        self.session = None

    def close(self):
        """Close the HTTP client."""
        self.client.close()

    def __enter__(self) -> "APIClient":
        return self

    def __exit__(self, *exc_info):
        self.close()


def expect_status(response: httpx.Response, *statuses: int, message: str = "Unexpected response status") -> httpx.Response:
    """Return `response` unchanged if its status is one of `statuses`, else raise UpstreamError."""
    if response.status_code not in statuses:
        raise UpstreamError(
            message,
            response=response,
            method=response.request.method,
            url=str(response.request.url),
        )
    return response


def total_count(response: httpx.Response) -> int:
    """Read the X-Total-Count header; absent means no rows."""
    return int(response.headers.get("X-Total-Count", "0"))
