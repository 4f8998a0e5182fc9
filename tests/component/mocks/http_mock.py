"""
HTTP Client Mock for Component Testing

Mocks httpx.AsyncClient for testing calls to storefront API routes.
Responses can be queued per call to script retry sequences.
"""
import fnmatch
import json
from collections import deque
from typing import Any, Deque, Dict, List, Optional, Union

_UNSET = object()


class MockHttpResponse:
    """Mock HTTP response"""

    def __init__(
        self,
        status_code: int = 200,
        json_data: Any = _UNSET,
        text: str = "",
        headers: Optional[Dict[str, str]] = None
    ):
        self.status_code = status_code
        self._json_data = json_data
        if json_data is not _UNSET and not text:
            text = json.dumps(json_data)
        self.text = text
        self.headers = headers or {}
        self.content = text.encode()

    def json(self) -> Any:
        if self._json_data is _UNSET:
            # Raises json.JSONDecodeError (a ValueError) for malformed bodies
            return json.loads(self.text)
        return self._json_data


QueuedItem = Union[MockHttpResponse, BaseException]


class MockHttpClient:
    """Mock for httpx.AsyncClient"""

    def __init__(self):
        self.requests: List[Dict[str, Any]] = []
        self._queue: Deque[QueuedItem] = deque()
        self._default_response = MockHttpResponse(200, {})
        self._should_raise: Optional[BaseException] = None
        self.closed = False

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        pass

    async def aclose(self):
        self.closed = True

    async def post(self, url: str, **kwargs) -> MockHttpResponse:
        """Mock POST request"""
        return await self._make_request("POST", url, **kwargs)

    async def _make_request(self, method: str, url: str, **kwargs) -> MockHttpResponse:
        """Internal request handler"""
        self.requests.append({
            "method": method,
            "url": url,
            **kwargs
        })

        if self._queue:
            item = self._queue.popleft()
            if isinstance(item, BaseException):
                raise item
            return item

        if self._should_raise:
            raise self._should_raise

        return self._default_response

    # Test helper methods

    def queue_response(
        self,
        status_code: int = 200,
        json_data: Any = _UNSET,
        text: str = ""
    ):
        """Queue a response for the next unanswered call"""
        self._queue.append(MockHttpResponse(status_code, json_data, text))

    def queue_error(self, error: BaseException):
        """Queue an exception for the next unanswered call"""
        self._queue.append(error)

    def set_default_response(
        self,
        status_code: int = 200,
        json_data: Any = _UNSET,
        text: str = ""
    ):
        """Set default response for unmatched requests"""
        self._default_response = MockHttpResponse(status_code, json_data, text)

    def set_error(self, error: BaseException):
        """Raise this error on every request once the queue is empty"""
        self._should_raise = error

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def get_last_request(self) -> Optional[Dict[str, Any]]:
        """Get the last recorded request"""
        return self.requests[-1] if self.requests else None

    def assert_request_made(self, method: str, url_pattern: str):
        """Assert that a request was made"""
        for req in self.requests:
            if req["method"] == method and fnmatch.fnmatch(req["url"], url_pattern):
                return req
        raise AssertionError(
            f"No {method} request matching '{url_pattern}' was made. Requests: {self.requests}"
        )

    def assert_no_requests(self):
        """Assert that no requests were made"""
        assert len(self.requests) == 0, f"Expected no requests, but got: {self.requests}"
