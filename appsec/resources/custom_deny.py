"""Resource for custom deny actions."""

from dataclasses import dataclass
from typing import Optional

from .._operation import AppSecRequest, JSONPayload, Operation, encode_payload
from ..filters import keep_matching
from ..types import CustomDeny, CustomDenyList

CUSTOM_DENY_PATH = "/configs/{config_id}/versions/{version}/custom-deny"


@dataclass
class GetCustomDenyListRequest(AppSecRequest):
    config_id: int = 0
    version: int = 0
    id: Optional[str] = None

    required = ("config_id", "version")


@dataclass
class GetCustomDenyRequest(AppSecRequest):
    config_id: int = 0
    version: int = 0
    id: str = ""

    required = ("config_id", "version", "id")


@dataclass
class CreateCustomDenyRequest(AppSecRequest):
    config_id: int = 0
    version: int = 0
    json_payload: JSONPayload = None

    required = ("config_id", "version")

    def body(self):
        return encode_payload(self.json_payload)


@dataclass
class UpdateCustomDenyRequest(AppSecRequest):
    config_id: int = 0
    version: int = 0
    id: str = ""
    json_payload: JSONPayload = None

    required = ("config_id", "version", "id")

    def body(self):
        return encode_payload(self.json_payload)


@dataclass
class RemoveCustomDenyRequest(AppSecRequest):
    config_id: int = 0
    version: int = 0
    id: str = ""

    required = ("config_id", "version", "id")


def _filter_custom_deny(request: GetCustomDenyListRequest, result: CustomDenyList) -> CustomDenyList:
    wanted = str(request.id) if request.id else None
    result.custom_deny_list = keep_matching(result.custom_deny_list, "id", wanted)
    return result


GET_CUSTOM_DENY_LIST = Operation(
    name="GetCustomDenyList",
    method="GET",
    path=CUSTOM_DENY_PATH,
    response=CustomDenyList,
    post_filter=_filter_custom_deny,
)

GET_CUSTOM_DENY = Operation(
    name="GetCustomDeny",
    method="GET",
    path=CUSTOM_DENY_PATH + "/{id}",
    response=CustomDeny,
)

CREATE_CUSTOM_DENY = Operation(
    name="CreateCustomDeny",
    method="POST",
    path=CUSTOM_DENY_PATH,
    response=CustomDeny,
    success=(200, 201),
)

UPDATE_CUSTOM_DENY = Operation(
    name="UpdateCustomDeny",
    method="PUT",
    path=CUSTOM_DENY_PATH + "/{id}",
    response=CustomDeny,
    success=(200, 201),
)

REMOVE_CUSTOM_DENY = Operation(
    name="RemoveCustomDeny",
    method="DELETE",
    path=CUSTOM_DENY_PATH + "/{id}",
    success=(200, 204),
)


class CustomDenyResource:
    """Custom deny actions for a configuration version.

    Usage::

        deny = client.custom_deny.create(
            config_id=1,
            version=2,
            json_payload='{"name": "maintenance", "parameters": [{"name": "response_status_code", "value": "403"}]}',
        )
        client.custom_deny.remove(config_id=1, version=2, id=deny.id)
    """

    def __init__(self, client):
        self._client = client

    def list(self, config_id: int, version: int, id: Optional[str] = None) -> CustomDenyList:
        """List custom deny actions, optionally only the one with ``id``."""
        request = GetCustomDenyListRequest(config_id, version, id)
        return self._client._call(GET_CUSTOM_DENY_LIST, request)

    def get(self, config_id: int, version: int, id: str) -> CustomDeny:
        request = GetCustomDenyRequest(config_id, version, id)
        return self._client._call(GET_CUSTOM_DENY, request)

    def create(self, config_id: int, version: int, json_payload: JSONPayload) -> CustomDeny:
        """Create a custom deny action; ``json_payload`` is sent as given."""
        request = CreateCustomDenyRequest(config_id, version, json_payload)
        return self._client._call(CREATE_CUSTOM_DENY, request)

    def update(self, config_id: int, version: int, id: str, json_payload: JSONPayload) -> CustomDeny:
        """Replace a custom deny action; ``json_payload`` is sent as given."""
        request = UpdateCustomDenyRequest(config_id, version, id, json_payload)
        return self._client._call(UPDATE_CUSTOM_DENY, request)

    def remove(self, config_id: int, version: int, id: str) -> None:
        request = RemoveCustomDenyRequest(config_id, version, id)
        self._client._call(REMOVE_CUSTOM_DENY, request)


class AsyncCustomDenyResource:
    """Async variant of CustomDenyResource."""

    def __init__(self, client):
        self._client = client

    async def list(self, config_id: int, version: int, id: Optional[str] = None) -> CustomDenyList:
        request = GetCustomDenyListRequest(config_id, version, id)
        return await self._client._call(GET_CUSTOM_DENY_LIST, request)

    async def get(self, config_id: int, version: int, id: str) -> CustomDeny:
        request = GetCustomDenyRequest(config_id, version, id)
        return await self._client._call(GET_CUSTOM_DENY, request)

    async def create(self, config_id: int, version: int, json_payload: JSONPayload) -> CustomDeny:
        request = CreateCustomDenyRequest(config_id, version, json_payload)
        return await self._client._call(CREATE_CUSTOM_DENY, request)

    async def update(self, config_id: int, version: int, id: str, json_payload: JSONPayload) -> CustomDeny:
        request = UpdateCustomDenyRequest(config_id, version, id, json_payload)
        return await self._client._call(UPDATE_CUSTOM_DENY, request)

    async def remove(self, config_id: int, version: int, id: str) -> None:
        request = RemoveCustomDenyRequest(config_id, version, id)
        await self._client._call(REMOVE_CUSTOM_DENY, request)
