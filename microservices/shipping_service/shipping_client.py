"""
Shipping Rate Client

Client for the storefront shipping quote route (POST /api/cart/shipping).

Flow:
    1. Local quality gate on the address (no network)
    2. Up to 3 sequential attempts; transport errors and 5xx are retried
       with exponential backoff, any other non-2xx status ends the lookup
    3. Tolerant parsing of the 2xx body into a ShippingQuote

Every failure resolves to None.
"""

import asyncio
import inspect
import logging
from typing import Any, Dict, Mapping, Optional, Union

import httpx
from pydantic import ValidationError
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from core.config.shipping_config import ShippingConfig
from core.logger import LoggingEventLogger
from core.service_client_base import BaseServiceClient

from .models import ShippingAddress, ShippingQuote
from .protocols import AuthTokenProvider, EventLogger, ShippingRequestError

logger = logging.getLogger(__name__)

# Initial attempt + 2 retries
MAX_ATTEMPTS = 3

MIN_POSTAL_CODE_LENGTH = 3
MIN_CITY_LENGTH = 2
MIN_STATE_LENGTH = 2


def check_address_quality(address: ShippingAddress) -> Optional[str]:
    """
    Cheap plausibility check run before any network call.

    Returns:
        None when the address is usable, otherwise the rejection reason
    """
    country = address.country.strip()
    city = address.city.strip()
    zip_code = address.zip.strip()
    state = address.state.strip()

    if not country or not city or not zip_code:
        return "missing_required_fields"
    if len(zip_code) < MIN_POSTAL_CODE_LENGTH:
        return "postal_code_too_short"
    if len(city) < MIN_CITY_LENGTH or len(state) < MIN_STATE_LENGTH:
        return "low_quality_address"
    return None


def _is_retryable(error: BaseException) -> bool:
    return isinstance(error, ShippingRequestError) and error.retryable


class ShippingClient(BaseServiceClient):
    """Client for the shipping quote route"""

    service_name = "shipping_service"

    def __init__(
        self,
        base_url: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        get_auth_token: Optional[AuthTokenProvider] = None,
        event_logger: Optional[EventLogger] = None,
        cookies: Optional[Dict[str, str]] = None,
        request_timeout: Optional[float] = None,
        auth_timeout: Optional[float] = None,
        retry_base_delay: Optional[float] = None,
        retry_max_delay: Optional[float] = None,
        config: Optional[ShippingConfig] = None,
    ):
        """
        Initialize the shipping client

        Args:
            base_url: Storefront base URL (defaults to SHIPPING_API_BASE_URL)
            http_client: Pre-built httpx.AsyncClient (caller keeps ownership)
            get_auth_token: Sync or async callable returning a bearer token or None
            event_logger: Structured logger; defaults to the stdlib logger of this module
            cookies: Session cookies sent with each request
            request_timeout: Per-attempt timeout in seconds
            auth_timeout: Timeout for the auth token lookup in seconds
            retry_base_delay: First backoff delay in seconds (0 disables waiting)
            retry_max_delay: Upper bound for a single backoff delay
            config: Shipping configuration (loaded from env if omitted)
        """
        config = config or ShippingConfig.from_env()

        super().__init__(
            base_url=base_url or config.api_base_url,
            timeout=config.request_timeout if request_timeout is None else request_timeout,
            http_client=http_client,
            cookies=cookies,
        )

        self.endpoint_path = config.endpoint_path
        self.get_auth_token = get_auth_token
        self.events = event_logger or LoggingEventLogger(logger)
        self.auth_timeout = config.auth_timeout if auth_timeout is None else auth_timeout
        self.retry_base_delay = config.retry_base_delay if retry_base_delay is None else retry_base_delay
        self.retry_max_delay = config.retry_max_delay if retry_max_delay is None else retry_max_delay

    async def calculate_shipping(
        self, address: Union[ShippingAddress, Mapping[str, Any]]
    ) -> Optional[ShippingQuote]:
        """
        Get a shipping quote for an address

        Args:
            address: Customer shipping address

        Returns:
            ShippingQuote, or None when the address is rejected or the lookup fails
        """
        try:
            if not isinstance(address, ShippingAddress):
                address = ShippingAddress.model_validate(address)
        except ValidationError as e:
            self.events.log("warning", "shipping.address_invalid", error=str(e))
            return None

        reason = check_address_quality(address)
        if reason:
            self.events.log("warning", "shipping.address_rejected", reason=reason)
            return None

        payload = address.to_destination_payload()

        try:
            response = await self._post_with_retry(payload)
            return self._process_response(response)
        except ShippingRequestError as e:
            self.events.log(
                "error",
                "shipping.request_failed",
                error=e.message,
                status_code=e.status_code,
                retryable=e.retryable,
            )
            return None
        except Exception as e:
            self.events.log("error", "shipping.unexpected_error", error=repr(e))
            return None

    async def _post_with_retry(self, payload: Dict[str, str]) -> httpx.Response:
        retrying = AsyncRetrying(
            stop=stop_after_attempt(MAX_ATTEMPTS),
            wait=wait_exponential(multiplier=self.retry_base_delay, max=self.retry_max_delay),
            retry=retry_if_exception(_is_retryable),
            before_sleep=self._log_retry,
            reraise=True,
        )

        async for attempt in retrying:
            with attempt:
                response = await self._attempt(payload, attempt.retry_state.attempt_number)
        return response

    async def _attempt(self, payload: Dict[str, str], attempt_number: int) -> httpx.Response:
        headers: Dict[str, str] = {}
        token = await self._resolve_auth_token()
        if token:
            headers["Authorization"] = f"Bearer {token}"

        self.events.log(
            "debug",
            "shipping.request",
            attempt=attempt_number,
            country=payload["countryCode"],
            authenticated=bool(token),
        )

        try:
            response = await self.post(self.endpoint_path, json=payload, headers=headers)
        except (httpx.HTTPError, OSError) as e:
            raise ShippingRequestError(
                f"Network error: {e!r}", retryable=True, details={"attempt": attempt_number}
            ) from e

        status = response.status_code
        if 200 <= status < 300:
            return response
        if status >= 500:
            raise ShippingRequestError(
                f"Server error {status}", status_code=status, retryable=True,
                details={"attempt": attempt_number},
            )
        raise ShippingRequestError(
            f"Request rejected with status {status}", status_code=status, retryable=False,
            details={"attempt": attempt_number},
        )

    async def _resolve_auth_token(self) -> Optional[str]:
        if self.get_auth_token is None:
            return None
        try:
            token = self.get_auth_token()
            if inspect.isawaitable(token):
                token = await asyncio.wait_for(token, timeout=self.auth_timeout)
        except Exception as e:
            self.events.log("warning", "shipping.auth_unavailable", error=repr(e))
            return None
        return token or None

    def _process_response(self, response: httpx.Response) -> Optional[ShippingQuote]:
        try:
            data = response.json()
        except ValueError as e:
            self.events.log("error", "shipping.response_malformed", error=repr(e))
            return None

        if not isinstance(data, dict):
            self.events.log("error", "shipping.response_invalid", body_type=type(data).__name__)
            return None

        quote = ShippingQuote.from_payload(data)
        self.events.log(
            "info",
            "shipping.quote_received",
            cost=str(quote.cost),
            currency=quote.currency,
            estimated_days=quote.estimated_days,
            is_estimated=quote.is_estimated,
        )
        return quote

    def _log_retry(self, retry_state: RetryCallState) -> None:
        error = retry_state.outcome.exception() if retry_state.outcome else None
        self.events.log(
            "warning",
            "shipping.retry",
            attempt=retry_state.attempt_number,
            max_attempts=MAX_ATTEMPTS,
            status_code=getattr(error, "status_code", None),
            delay=retry_state.next_action.sleep if retry_state.next_action else None,
        )


async def calculate_shipping(
    address: Union[ShippingAddress, Mapping[str, Any]], **client_kwargs: Any
) -> Optional[ShippingQuote]:
    """
    One-shot shipping quote lookup.

    Opens a ShippingClient with ``client_kwargs``, queries it once and closes it.
    """
    async with ShippingClient(**client_kwargs) as client:
        return await client.calculate_shipping(address)


__all__ = [
    "ShippingClient",
    "calculate_shipping",
    "check_address_quality",
    "MAX_ATTEMPTS",
]
