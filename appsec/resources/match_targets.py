"""Resource for website and API match targets."""

from dataclasses import dataclass

from .._operation import AppSecRequest, JSONPayload, Operation, encode_payload
from ..filters import keep_matching
from ..types import MatchTarget, MatchTargetList

TARGETS_PATH = "/configs/{config_id}/versions/{config_version}/match-targets"


@dataclass
class GetMatchTargetsRequest(AppSecRequest):
    config_id: int = 0
    config_version: int = 0
    # not an API filter; applied to the fetched lists
    target_id: int = 0

    required = ("config_id", "config_version")


@dataclass
class GetMatchTargetRequest(AppSecRequest):
    config_id: int = 0
    config_version: int = 0
    target_id: int = 0

    required = ("config_id", "config_version", "target_id")


@dataclass
class CreateMatchTargetRequest(AppSecRequest):
    config_id: int = 0
    config_version: int = 0
    json_payload: JSONPayload = None

    required = ("config_id", "config_version")

    def body(self):
        return encode_payload(self.json_payload)


@dataclass
class UpdateMatchTargetRequest(AppSecRequest):
    config_id: int = 0
    config_version: int = 0
    target_id: int = 0
    json_payload: JSONPayload = None

    required = ("config_id", "config_version", "target_id")

    def body(self):
        return encode_payload(self.json_payload)


@dataclass
class RemoveMatchTargetRequest(AppSecRequest):
    config_id: int = 0
    config_version: int = 0
    target_id: int = 0

    required = ("config_id", "config_version", "target_id")


def _filter_targets(request: GetMatchTargetsRequest, result: MatchTargetList) -> MatchTargetList:
    targets = result.match_targets
    targets.website_targets = keep_matching(targets.website_targets, "target_id", request.target_id)
    targets.api_targets = keep_matching(targets.api_targets, "target_id", request.target_id)
    return result


GET_MATCH_TARGETS = Operation(
    name="GetMatchTargets",
    method="GET",
    path=TARGETS_PATH,
    response=MatchTargetList,
    post_filter=_filter_targets,
)

GET_MATCH_TARGET = Operation(
    name="GetMatchTarget",
    method="GET",
    path=TARGETS_PATH + "/{target_id}",
    response=MatchTarget,
    flags=(("includeChildObjectName", "true"),),
)

CREATE_MATCH_TARGET = Operation(
    name="CreateMatchTarget",
    method="POST",
    path=TARGETS_PATH,
    response=MatchTarget,
    success=(200, 201),
)

UPDATE_MATCH_TARGET = Operation(
    name="UpdateMatchTarget",
    method="PUT",
    path=TARGETS_PATH + "/{target_id}",
    response=MatchTarget,
    success=(200, 201),
)

REMOVE_MATCH_TARGET = Operation(
    name="RemoveMatchTarget",
    method="DELETE",
    path=TARGETS_PATH + "/{target_id}",
    success=(200, 204),
)


class MatchTargetsResource:
    """Match targets decide which security policy handles a request."""

    def __init__(self, client):
        self._client = client

    def list(self, config_id: int, config_version: int, target_id: int = 0) -> MatchTargetList:
        """List website and API match targets, optionally only ``target_id``."""
        request = GetMatchTargetsRequest(config_id, config_version, target_id)
        return self._client._call(GET_MATCH_TARGETS, request)

    def get(self, config_id: int, config_version: int, target_id: int) -> MatchTarget:
        """Get one match target, with child object names resolved."""
        request = GetMatchTargetRequest(config_id, config_version, target_id)
        return self._client._call(GET_MATCH_TARGET, request)

    def create(self, config_id: int, config_version: int, json_payload: JSONPayload) -> MatchTarget:
        """
        Create a match target.

        Args:
            json_payload: The match target JSON, sent unchanged when given as str or bytes.
        """
        request = CreateMatchTargetRequest(config_id, config_version, json_payload)
        return self._client._call(CREATE_MATCH_TARGET, request)

    def update(self, config_id: int, config_version: int, target_id: int, json_payload: JSONPayload) -> MatchTarget:
        """Replace a match target with ``json_payload``."""
        request = UpdateMatchTargetRequest(config_id, config_version, target_id, json_payload)
        return self._client._call(UPDATE_MATCH_TARGET, request)

    def remove(self, config_id: int, config_version: int, target_id: int) -> None:
        """Delete a match target."""
        request = RemoveMatchTargetRequest(config_id, config_version, target_id)
        self._client._call(REMOVE_MATCH_TARGET, request)


class AsyncMatchTargetsResource:
    """Async variant of MatchTargetsResource."""

    def __init__(self, client):
        self._client = client

    async def list(self, config_id: int, config_version: int, target_id: int = 0) -> MatchTargetList:
        request = GetMatchTargetsRequest(config_id, config_version, target_id)
        return await self._client._call(GET_MATCH_TARGETS, request)

    async def get(self, config_id: int, config_version: int, target_id: int) -> MatchTarget:
        request = GetMatchTargetRequest(config_id, config_version, target_id)
        return await self._client._call(GET_MATCH_TARGET, request)

    async def create(self, config_id: int, config_version: int, json_payload: JSONPayload) -> MatchTarget:
        request = CreateMatchTargetRequest(config_id, config_version, json_payload)
        return await self._client._call(CREATE_MATCH_TARGET, request)

    async def update(self, config_id: int, config_version: int, target_id: int, json_payload: JSONPayload) -> MatchTarget:
        request = UpdateMatchTargetRequest(config_id, config_version, target_id, json_payload)
        return await self._client._call(UPDATE_MATCH_TARGET, request)

    async def remove(self, config_id: int, config_version: int, target_id: int) -> None:
        request = RemoveMatchTargetRequest(config_id, config_version, target_id)
        await self._client._call(REMOVE_MATCH_TARGET, request)
