"""Error taxonomy for the admin client.

Every failure the admin screen can hit is one of these. Each class carries a
notification title and a message fit to show to the person using the screen.
"""

from typing import Optional

import httpx


class ApiError(Exception):
    """Base class; also used for unexpected status codes."""

    title = "Request failed"

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    @property
    def user_message(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status_code={self.status_code!r}, message={self.message!r})"


class NetworkError(ApiError):
    title = "Connection problem"


class AuthorizationError(ApiError):
    title = "Not authorized"


class ValidationError(ApiError):
    title = "Invalid data"

    def __init__(self, message: str, status_code: Optional[int] = None, fields: Optional[dict] = None):
        super().__init__(message, status_code)
        self.fields = fields or {}


class NotFoundError(ApiError):
    title = "Slide not found"


class ServerError(ApiError):
    title = "Server error"


def _detail(response: httpx.Response) -> Optional[str]:
    try:
        body = response.json()
    except ValueError:
        return response.text or None
    detail = body.get("detail") if isinstance(body, dict) else None
    if isinstance(detail, list):
        # FastAPI request validation: [{"loc": [...], "msg": "..."}]
        parts = []
        for item in detail:
            loc = [str(p) for p in item.get("loc", []) if p != "body"]
            msg = item.get("msg", "invalid value")
            parts.append(f"{'.'.join(loc)}: {msg}" if loc else msg)
        return "; ".join(parts) or None
    return str(detail) if detail else None


def _validation_fields(response: httpx.Response) -> dict:
    try:
        detail = response.json().get("detail")
    except (ValueError, AttributeError):
        return {}
    fields = {}
    if isinstance(detail, list):
        for item in detail:
            loc = [str(p) for p in item.get("loc", []) if p != "body"]
            if loc:
                fields[loc[-1]] = item.get("msg", "invalid value")
    return fields


def error_from_response(response: httpx.Response) -> ApiError:
    """Map a non-2xx response onto the error taxonomy."""
    status = response.status_code
    detail = _detail(response)
    if status in (401, 403):
        message = "You do not have permission to manage slides. Check the admin credentials."
        if status == 403 and detail:
            message = f"{detail}."
        return AuthorizationError(message, status)
    if status in (400, 422):
        return ValidationError(detail or "The server rejected the slide data.", status, _validation_fields(response))
    if status == 404:
        return NotFoundError("The slide no longer exists. It may have been deleted by someone else.", status)
    if status >= 500:
        return ServerError("The server failed to process the request. Try again later.", status)
    return ApiError(detail or f"Unexpected response ({status}).", status)


def error_from_transport(exc: httpx.RequestError) -> ApiError:
    if isinstance(exc, httpx.TimeoutException):
        return NetworkError("The server took too long to respond. Check your connection and try again.")
    if isinstance(exc, httpx.TransportError):
        return NetworkError("Could not reach the server. Check your connection and try again.")
    # DecodingError, TooManyRedirects: the server answered but the response is unusable
    return ServerError("The server sent a response that could not be read. Try again later.")
