"""
Core HTTP session for the EdgeGrid APIs.

Handles configuration, request signing hooks, transport and error decoding.
"""

import http.client
import json
import logging
import os
import urllib.error
import urllib.parse
import urllib.request
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from dotenv import dotenv_values

# Configuration
DEFAULT_TIMEOUT = 60
DEFAULT_USER_AGENT = "edgegrid-client/0.1.0"

logger = logging.getLogger(__name__)


class EdgeGridError(Exception):
    """Base error class for client errors."""

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


@dataclass
class ErrorItem:
    """A single field-level problem reported inside an API error body."""

    type: str = ""
    title: str = ""
    detail: str = ""
    field: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ErrorItem":
        """Create from API response dict."""
        return cls(
            type=data.get("type", ""),
            title=data.get("title", ""),
            detail=data.get("detail", ""),
            field=data.get("field", ""),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for JSON output."""
        return {"type": self.type, "title": self.title, "detail": self.detail, "field": self.field}


class APIError(EdgeGridError):
    """
    Structured error decoded from a non-success API response.

    Two errors compare equal when type, title, detail and status code match.
    Sub-errors are compared only when both sides carry them.
    """

    def __init__(
        self,
        type: str = "",
        title: str = "",
        detail: str = "",
        status_code: int = 0,
        instance: str = "",
        errors: list[ErrorItem] | None = None,
    ):
        super().__init__(f"API error: {status_code} {title}: {detail}")
        self.type = type
        self.title = title
        self.detail = detail
        self.status_code = status_code
        self.instance = instance
        self.errors = list(errors or [])

    @classmethod
    def from_response(cls, response: "Response") -> "APIError":
        """Decode an error body; the status code always comes from the HTTP status line."""
        try:
            data = json.loads(response.body.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError):
            return cls(
                title="Failed to unmarshal error body",
                detail=response.body.decode("utf-8", errors="replace"),
                status_code=response.status,
            )
        if not isinstance(data, dict):
            return cls(
                title="Failed to unmarshal error body",
                detail=response.text,
                status_code=response.status,
            )

        return cls(
            type=data.get("type", ""),
            title=data.get("title", ""),
            detail=data.get("detail", ""),
            status_code=response.status,
            instance=data.get("instance", ""),
            errors=[ErrorItem.from_dict(item) for item in data.get("errors") or []],
        )

    def _key(self) -> tuple[str, str, str, int]:
        return (self.type, self.title, self.detail, self.status_code)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, APIError):
            return NotImplemented
        if self._key() != other._key():
            return False
        if self.errors and other.errors:
            return self.errors == other.errors
        return True

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"APIError(type={self.type!r}, title={self.title!r}, "
            f"detail={self.detail!r}, status_code={self.status_code!r})"
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for JSON output."""
        result: dict[str, Any] = {
            "type": self.type,
            "title": self.title,
            "detail": self.detail,
            "status": self.status_code,
        }
        if self.instance:
            result["instance"] = self.instance
        if self.errors:
            result["errors"] = [item.to_dict() for item in self.errors]
        return result


class StructValidationError(EdgeGridError):
    """Validation error for a request missing required fields (never sent)."""

    def __init__(self, fields: list[str]):
        self.fields = list(fields)
        problems = "; ".join(f"{name}: cannot be blank" for name in self.fields)
        super().__init__(f"struct validation: {problems}", details={"fields": self.fields})


class NotFoundError(EdgeGridError):
    """A lookup answered with 404; the message names the requested path."""

    def __init__(self, url: str):
        super().__init__(f"resource not found, {url}")
        self.url = url


class TransportError(EdgeGridError):
    """Network, timeout or signing failure before a response was received."""


@dataclass(frozen=True)
class ClientConfig:
    """
    Immutable client configuration.

    Args:
        base_url: API host base URL, e.g. https://akab-xxxx.luna.akamaiapis.net
        timeout: Request timeout in seconds
        signer: Callable that signs the outgoing urllib Request in place
        account_switch_key: Appended as the accountSwitchKey query parameter
        user_agent: User-Agent header value
        headers: Default headers sent with every request
        logger: Logger used by the session and operations

    """

    base_url: str
    timeout: float = DEFAULT_TIMEOUT
    signer: Callable[[urllib.request.Request], None] | None = None
    account_switch_key: str | None = None
    user_agent: str = DEFAULT_USER_AGENT
    headers: Mapping[str, str] = field(default_factory=dict, hash=False)
    logger: logging.Logger | None = None

    def __post_init__(self) -> None:
        if not self.base_url:
            raise EdgeGridError("base_url is required")
        parts = urllib.parse.urlsplit(self.base_url)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise EdgeGridError(f"base_url must be an http(s) URL: {self.base_url!r}")
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    @classmethod
    def from_env(
        cls,
        env_file: str | os.PathLike | None = None,
        signer: Callable[[urllib.request.Request], None] | None = None,
    ) -> "ClientConfig":
        """
        Build a configuration from environment variables.

        Reads EDGEGRID_BASE_URL, EDGEGRID_TIMEOUT and EDGEGRID_ACCOUNT_SWITCH_KEY.
        Values from env_file (a .env file) are used where the process
        environment does not set them.

        Raises:
            EdgeGridError: If no base URL is configured

        """
        values: dict[str, str | None] = {}
        if env_file is not None:
            values.update(dotenv_values(env_file))
        values.update({k: v for k, v in os.environ.items() if k.startswith("EDGEGRID_")})

        base_url = values.get("EDGEGRID_BASE_URL")
        if not base_url:
            raise EdgeGridError("EDGEGRID_BASE_URL environment variable not set")

        timeout_value = values.get("EDGEGRID_TIMEOUT")
        try:
            timeout = float(timeout_value) if timeout_value else DEFAULT_TIMEOUT
        except ValueError:
            raise EdgeGridError(f"Invalid EDGEGRID_TIMEOUT: {timeout_value!r}")

        return cls(
            base_url=base_url,
            timeout=timeout,
            signer=signer,
            account_switch_key=values.get("EDGEGRID_ACCOUNT_SWITCH_KEY") or None,
        )


@dataclass(frozen=True)
class RequestOptions:
    """Per-call overrides; never shared between calls."""

    headers: Mapping[str, str] = field(default_factory=dict, hash=False)
    timeout: float | None = None
    logger: logging.Logger | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))


@dataclass
class Response:
    """Raw HTTP response returned by the session for any status code."""

    status: int
    body: bytes = b""
    headers: dict[str, str] = field(default_factory=dict)
    url: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")

    def json(self) -> Any:
        """Decode the body as JSON."""
        if not self.body:
            return None
        return json.loads(self.body.decode("utf-8"))


def build_query(params: Mapping[str, Any]) -> str:
    """
    Encode query parameters in the given order.

    None values are omitted, booleans render as true/false.
    """
    pairs = []
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        pairs.append((key, value))
    return urllib.parse.urlencode(pairs)


def path_segment(value: Any) -> str:
    """Quote a path parameter so it stays a single path segment."""
    return urllib.parse.quote(str(value), safe="")


class Session:
    """
    Low-level HTTP session shared by all operation classes.

    Handles:
    - Default and per-call headers
    - Request signing via the configured signer
    - Transport and timeouts
    - Returning a Response for every HTTP status
    """

    def __init__(self, config: ClientConfig):
        self.config = config

    def log(self, options: RequestOptions | None = None) -> logging.Logger:
        """Get the logger for a call."""
        if options is not None and options.logger is not None:
            return options.logger
        return self.config.logger or logger

    def _build_url(self, path: str) -> str:
        """Build full URL from path, adding the account switch key if configured."""
        url = path if path.startswith("http") else f"{self.config.base_url}{path}"
        if self.config.account_switch_key:
            separator = "&" if "?" in url else "?"
            url = f"{url}{separator}{build_query({'accountSwitchKey': self.config.account_switch_key})}"
        return url

    def exec(
        self,
        method: str,
        path: str,
        body: Any = None,
        options: RequestOptions | None = None,
    ) -> Response:
        """
        Sign and send a single request.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            path: API path including any query string
            body: JSON-serialisable request body for POST/PUT
            options: Per-call header and timeout overrides

        Returns:
            Response for any HTTP status code

        Raises:
            TransportError: On connection, timeout or signing failure

        """
        options = options or RequestOptions()
        log = self.log(options)

        url = self._build_url(path)
        headers = {
            "Accept": "application/json",
            "User-Agent": self.config.user_agent,
            **self.config.headers,
        }
        data = None
        if body is not None:
            data = json.dumps(body).encode("utf-8")
            headers["Content-Type"] = "application/json"
        headers.update(options.headers)

        request_timeout = options.timeout or self.config.timeout
        req = urllib.request.Request(url, data=data, headers=headers, method=method)

        if self.config.signer is not None:
            try:
                self.config.signer(req)
            except Exception as e:
                raise TransportError(f"Request signing failed: {e}") from e

        log.debug("%s %s", method, url)
        try:
            with urllib.request.urlopen(req, timeout=request_timeout) as response:
                result = Response(
                    status=response.status,
                    body=response.read(),
                    headers=dict(response.headers.items()),
                    url=url,
                )

        except urllib.error.HTTPError as e:
            try:
                error_body = e.read() if e.fp else b""
            except (http.client.HTTPException, ConnectionError) as read_error:
                log.warning("%s %s failed: %s", method, url, read_error)
                raise TransportError(f"Connection error: {read_error}") from read_error
            result = Response(
                status=e.code,
                body=error_body,
                headers=dict(e.headers.items()) if e.headers else {},
                url=url,
            )

        except urllib.error.URLError as e:
            log.warning("%s %s failed: %s", method, url, e.reason)
            raise TransportError(f"Connection error: {e.reason}") from e

        except TimeoutError as e:
            log.warning("%s %s timed out", method, url)
            raise TransportError(f"Request timed out after {request_timeout} seconds") from e

        except (http.client.HTTPException, ConnectionError) as e:
            log.warning("%s %s failed: %s", method, url, e)
            raise TransportError(f"Connection error: {e}") from e

        log.debug("%s %s -> %d", method, url, result.status)
        return result

    def error(self, response: Response) -> APIError:
        """Decode a non-success response into an APIError."""
        return APIError.from_response(response)
