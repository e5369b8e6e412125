"""
Operation descriptors.

Every endpoint is one ``Operation``: a path template, an HTTP method, the
status codes that count as success, the model the body decodes into and an
optional client-side filter. Requests are dataclasses that know which of
their fields are required and what body, if any, they send.
"""

import dataclasses
import json
from string import Formatter
from typing import Any, Callable, ClassVar, Dict, Optional, Tuple, Type, Union
from urllib.parse import quote

import httpx

from .exceptions import TransportError, ValidationError, raise_for_status
from .types import AppSecModel

API_ROOT = "/appsec/v1"

JSONPayload = Union[str, bytes, Dict[str, Any], None]


def encode_payload(payload: JSONPayload) -> Optional[bytes]:
    """Raw JSON is sent untouched; a dict is serialized."""
    if payload is None:
        return None
    if isinstance(payload, bytes):
        return payload
    if isinstance(payload, str):
        return payload.encode("utf-8")
    return json.dumps(payload).encode("utf-8")


@dataclasses.dataclass
class AppSecRequest:
    """Base for request parameters; subclasses list their required fields."""

    required: ClassVar[Tuple[str, ...]] = ()

    def validate(self, operation: str = "") -> None:
        """Raise ValidationError naming every required field left blank."""
        missing = [name for name in self.required if not getattr(self, name)]
        if missing:
            raise ValidationError(operation or type(self).__name__.replace("Request", ""), missing)

    def query(self) -> Dict[str, str]:
        return {}

    def body(self) -> Optional[bytes]:
        return None


@dataclasses.dataclass(frozen=True)
class Operation:
    name: str
    method: str
    path: str
    response: Optional[Type[AppSecModel]] = None
    success: Tuple[int, ...] = (200,)
    flags: Tuple[Tuple[str, str], ...] = ()
    post_filter: Optional[Callable[[Any, Any], Any]] = None

    def url(self, request: AppSecRequest) -> str:
        names = [field for _, field, _, _ in Formatter().parse(self.path) if field]
        values = {name: quote(str(getattr(request, name)), safe="") for name in names}
        return API_ROOT + self.path.format(**values)

    def prepare(self, request: AppSecRequest) -> Dict[str, Any]:
        """Validate ``request`` and return keyword arguments for ``httpx.Client.request``."""
        request.validate(self.name)
        params = dict(self.flags)
        params.update(request.query())
        content = request.body()
        headers = {"Content-Type": "application/json"} if content is not None else {}
        return {
            "method": self.method,
            "url": self.url(request),
            "params": params,
            "content": content,
            "headers": headers,
        }

    def transport_error(self, exc: Exception) -> TransportError:
        return TransportError(f"{self.name} request failed: {exc}", operation=self.name)

    def parse(self, request: AppSecRequest, response: httpx.Response):
        """Check the status, decode the body and apply the post-filter."""
        raise_for_status(self.name, response, self.success)
        if self.response is None:
            return None
        try:
            data = response.json() if response.content else None
            result = self.response.model_validate(data if data is not None else {})
        # json and pydantic decode errors are both ValueErrors
        except ValueError as exc:
            raise TransportError(
                f"{self.name}: could not decode response: {exc}", operation=self.name
            ) from exc
        if self.post_filter is not None:
            result = self.post_filter(request, result)
        return result
