"""
Base HTTP Client for Checkout API Calls

Base class for clients that call storefront API routes over HTTP.
"""

import httpx
import logging
from typing import Optional, Dict, Any
from abc import ABC

logger = logging.getLogger(__name__)


class BaseServiceClient(ABC):
    """
    HTTP client base class

    Handles:
    1. Base URL normalization
    2. Default JSON headers
    3. HTTP client ownership (created here or injected by the caller)
    4. Timeout control

    Example:
        class ShippingClient(BaseServiceClient):
            service_name = "shipping_service"

            async def calculate_shipping(self, address):
                response = await self.post("/api/cart/shipping", json=...)
                return response.json()
    """

    # Subclasses must define this
    service_name: str = None  # e.g. "shipping_service"

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        http_client: Optional[httpx.AsyncClient] = None,
        cookies: Optional[Dict[str, str]] = None,
    ):
        """
        Initialize the client

        Args:
            base_url: API base URL
            timeout: Per-request timeout in seconds
            http_client: Pre-built client (not closed by this object)
            cookies: Cookies sent with every request
        """
        if not self.service_name:
            raise ValueError(f"{self.__class__.__name__} must define 'service_name'")

        self.base_url = base_url.rstrip('/')
        self.timeout = timeout

        if http_client is not None:
            self.client = http_client
            self._owns_client = False
        else:
            self.client = httpx.AsyncClient(
                timeout=timeout,
                headers=self._build_default_headers(),
                cookies=cookies,
            )
            self._owns_client = True

        logger.debug(f"Initialized {self.service_name} client: {self.base_url}")

    def _build_default_headers(self) -> Dict[str, str]:
        """Default request headers"""
        return {
            "Content-Type": "application/json",
            "User-Agent": f"art-framer-checkout/{self.service_name}",
        }

    async def close(self):
        """Close the HTTP client if this object created it"""
        if self._owns_client:
            await self.client.aclose()
            logger.debug(f"Closed {self.service_name} client")

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def post(
        self,
        path: str,
        json: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> httpx.Response:
        """POST request"""
        url = f"{self.base_url}{path}"
        merged = self._build_default_headers()
        if headers:
            merged.update(headers)
        response = await self.client.post(url, json=json, headers=merged, timeout=self.timeout)
        return response


__all__ = ["BaseServiceClient"]
