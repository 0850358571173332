"""
Core HTTP client for the IGDB API.

Handles authentication, the GET request/response cycle, and error handling.
"""

import json
import logging
import os
import urllib.error
import urllib.request
from typing import Any

logger = logging.getLogger(__name__)

# Configuration
DEFAULT_BASE_URL = "https://api-2445582011268.apicast.io/"
DEFAULT_TIMEOUT = 60

API_KEY_HEADER = "user-key"


class IGDBError(Exception):
    """Base error class for IGDB client errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for JSON output."""
        result: dict[str, Any] = {"error": self.message}
        if self.details:
            result["details"] = self.details
        return result


class ValidationError(IGDBError):
    """Validation error for local input issues, raised before any request."""


class NegativeIDError(ValidationError):
    """An entity ID below zero was given."""

    def __init__(self, entity_id: int):
        super().__init__("igdb: negative ID", {"id": entity_id})


class EmptyIDsError(ValidationError):
    """An empty list of entity IDs was given."""

    def __init__(self) -> None:
        super().__init__("igdb: empty list of IDs")


class OutOfRangeError(ValidationError):
    """An option value is outside its allowed range."""

    def __init__(self, option: str, value: int):
        super().__init__(f"igdb: {option} value out of range", {option: value})


class APIError(IGDBError):
    """API error with status code and message."""

    def __init__(self, message: str, status: int = 0, details: dict | None = None):
        super().__init__(message, details)
        self.status = status

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for JSON output."""
        result = super().to_dict()
        if self.status:
            result["status"] = self.status
        return result


class InvalidJSONError(APIError):
    """The response body was empty or not valid JSON."""


class NoResultsError(IGDBError):
    """The response was valid but contained no results."""

    def __init__(self, message: str = "igdb: no results"):
        super().__init__(message)


class APIClient:
    """
    Low-level HTTP client for the IGDB API.

    Handles:
    - Authentication via API key header
    - GET requests with an optional per-call timeout
    - Error classification and JSON decoding
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        """
        Initialize the API client.

        Args:
            api_key: IGDB API key (or IGDB_API_KEY env var)
            base_url: API root URL (or IGDB_BASE_URL env var)
            timeout: Default request timeout in seconds

        """
        self.api_key = api_key or os.environ.get("IGDB_API_KEY")
        root = base_url or os.environ.get("IGDB_BASE_URL", DEFAULT_BASE_URL)
        self.root_url = root.rstrip("/") + "/"
        self.timeout = timeout

    def _ensure_api_key(self) -> str:
        """Ensure API key is configured."""
        if not self.api_key:
            raise APIError("IGDB_API_KEY environment variable not set")
        return self.api_key

    def _read(self, url: str, timeout: float | None = None) -> bytes:
        """
        Send a GET request and return the raw response body.

        Raises:
            APIError: On connection failures, timeouts and non-2xx statuses

        """
        headers = {
            API_KEY_HEADER: self._ensure_api_key(),
            "Accept": "application/json",
        }
        request_timeout = self.timeout if timeout is None else timeout
        logger.debug("GET %s", url)

        try:
            req = urllib.request.Request(url, headers=headers, method="GET")
            with urllib.request.urlopen(req, timeout=request_timeout) as response:
                return response.read()

        except urllib.error.HTTPError as e:
            logger.warning("GET %s failed with status %s", url, e.code)
            try:
                error_data = json.loads(e.read().decode("utf-8"))
            except (json.JSONDecodeError, UnicodeDecodeError):
                raise APIError(str(e), status=e.code)
            # Handle {"message": "..."}, {"error": "..."} and {"error": {"message": "..."}}
            message = str(e)
            if isinstance(error_data, dict):
                error_field = error_data.get("error", error_data.get("message"))
                if isinstance(error_field, str):
                    message = error_field
                elif isinstance(error_field, dict):
                    message = error_field.get("message", message)
            else:
                error_data = {"body": error_data}
            raise APIError(message, status=e.code, details=error_data)

        except urllib.error.URLError as e:
            raise APIError(f"Connection error: {e.reason}")

        except TimeoutError:
            raise APIError(f"Request timed out after {request_timeout} seconds")

    def get(self, url: str, timeout: float | None = None) -> Any:
        """
        Make a GET request and decode the JSON body.

        Args:
            url: Fully built request URL
            timeout: Request timeout override

        Returns:
            The decoded JSON value

        Raises:
            APIError: On HTTP or connection errors
            InvalidJSONError: If the body is empty or not valid JSON

        """
        body = self._read(url, timeout)
        try:
            text = body.decode("utf-8")
            if not text.strip():
                raise InvalidJSONError("igdb: empty response body")
            return json.loads(text)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise InvalidJSONError(f"igdb: invalid JSON response: {e}")

    def get_list(self, url: str, timeout: float | None = None) -> list[Any]:
        """Make a GET request whose body must be a JSON array."""
        data = self.get(url, timeout)
        if not isinstance(data, list):
            raise InvalidJSONError(f"igdb: expected a JSON array, got {type(data).__name__}")
        logger.debug("GET %s returned %d items", url, len(data))
        return data
