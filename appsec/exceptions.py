"""
Custom exceptions for the appsec SDK.

Three families are never conflated:

- ``ValidationError``: a request is missing required fields (raised locally,
  before anything is sent).
- ``TransportError``: the request could not be sent, or a success body could
  not be decoded.
- ``APIError``: the API answered with a status outside the operation's success
  set. Akamai returns RFC 7807 problem details::

    {"type": "...", "title": "...", "detail": "...", "instance": "...", "status": 404, "errors": [...]}
"""

from typing import Any, Dict, Iterable, List, Optional

import httpx


class AppSecError(Exception):
    """Base exception for all appsec SDK errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r})"


class ConfigError(AppSecError):
    """Client credentials or host could not be loaded."""

    def __init__(self, message: str, reason: str = ""):
        self.reason = reason
        super().__init__(message)


class ValidationError(AppSecError):
    """A request is missing required fields or carries a malformed one."""

    def __init__(self, operation: str, fields: Iterable[str], problem: str = "cannot be blank"):
        self.operation = operation
        self.fields: List[str] = list(fields)
        details = "; ".join(f"{name}: {problem}" for name in self.fields)
        super().__init__(f"{operation}: struct validation: {details}")


class TransportError(AppSecError):
    """The request failed before a usable response was obtained."""

    def __init__(self, message: str, operation: str = ""):
        self.operation = operation
        super().__init__(message)


class APIError(AppSecError):
    """The API returned a non-success status code."""

    def __init__(
        self,
        message: str,
        status_code: int = None,
        response: httpx.Response = None,
        operation: str = "",
        type: str = "",
        title: str = "",
        detail: str = "",
        instance: str = "",
        errors: Optional[List[Dict[str, Any]]] = None,
    ):
        self.status_code = status_code
        self.response = response
        self.operation = operation
        self.type = type
        self.title = title
        self.detail = detail
        self.instance = instance
        self.errors = errors or []
        super().__init__(message)

    def __repr__(self) -> str:
        parts = [f"message={self.message!r}"]
        if self.status_code:
            parts.append(f"status_code={self.status_code}")
        if self.title:
            parts.append(f"title={self.title!r}")
        if self.instance:
            parts.append(f"instance={self.instance!r}")
        return f"{self.__class__.__name__}({', '.join(parts)})"


class AuthenticationError(APIError):
    """Request signature or credentials were rejected."""
    pass


class PermissionDeniedError(APIError):
    """Valid credentials but no access to the configuration."""
    pass


class NotFoundError(APIError):
    """Requested configuration, version or resource does not exist."""
    pass


class RateLimitError(APIError):
    """Rate limit exceeded. Check retry_after for backoff duration."""

    def __init__(self, message: str, retry_after: float = None, **kwargs):
        self.retry_after = retry_after
        super().__init__(message, **kwargs)


class ServerError(APIError):
    """API returned a 5xx error."""
    pass


def _parse_problem(response: httpx.Response) -> Dict[str, Any]:
    """Parse an RFC 7807 problem body, falling back to the raw text."""
    try:
        body = response.json()
    except ValueError:
        return {"detail": response.text}
    if not isinstance(body, dict):
        return {"detail": response.text}
    errors = body.get("errors")
    return {
        "type": body.get("type", "") or "",
        "title": body.get("title", "") or "",
        "detail": body.get("detail", "") or "",
        "instance": body.get("instance", "") or "",
        "errors": errors if isinstance(errors, list) else [],
    }


def raise_for_status(operation: str, response: httpx.Response, success=(200,)) -> None:
    """
    Raise the matching APIError when ``response`` is outside ``success``.

    The exception carries the status code, the operation name and the
    problem-details fields (type, title, detail, instance, errors).
    """
    status = response.status_code
    if status in success:
        return

    problem = _parse_problem(response)
    summary = problem.get("title") or problem.get("detail") or response.reason_phrase
    if problem.get("title") and problem.get("detail"):
        summary = f"{problem['title']}: {problem['detail']}"

    kwargs = dict(problem, status_code=status, response=response, operation=operation)

    if status == 401:
        raise AuthenticationError(f"{operation}: authentication failed: {summary}", **kwargs)
    elif status == 403:
        raise PermissionDeniedError(f"{operation}: permission denied: {summary}", **kwargs)
    elif status == 404:
        raise NotFoundError(f"{operation}: resource not found: {summary}", **kwargs)
    elif status == 429:
        retry_after_raw = response.headers.get("retry-after")
        try:
            retry_after = float(retry_after_raw) if retry_after_raw else None
        except ValueError:
            retry_after = None
        raise RateLimitError(
            f"{operation}: rate limit exceeded: {summary}",
            retry_after=retry_after,
            **kwargs,
        )
    elif status >= 500:
        raise ServerError(f"{operation}: API error ({status}): {summary}", **kwargs)
    raise APIError(f"{operation}: unexpected status ({status}): {summary}", **kwargs)
