"""Resource for reputation profiles."""

from dataclasses import dataclass

from .._operation import AppSecRequest, JSONPayload, Operation, encode_payload
from ..filters import keep_matching
from ..types import ReputationProfile, ReputationProfileList

PROFILES_PATH = "/configs/{config_id}/versions/{config_version}/reputation-profiles"


@dataclass
class GetReputationProfilesRequest(AppSecRequest):
    config_id: int = 0
    config_version: int = 0
    reputation_profile_id: int = 0

    required = ("config_id", "config_version")


@dataclass
class GetReputationProfileRequest(AppSecRequest):
    config_id: int = 0
    config_version: int = 0
    reputation_profile_id: int = 0

    required = ("config_id", "config_version", "reputation_profile_id")


@dataclass
class CreateReputationProfileRequest(AppSecRequest):
    config_id: int = 0
    config_version: int = 0
    json_payload: JSONPayload = None

    required = ("config_id", "config_version")

    def body(self):
        return encode_payload(self.json_payload)


@dataclass
class UpdateReputationProfileRequest(AppSecRequest):
    config_id: int = 0
    config_version: int = 0
    reputation_profile_id: int = 0
    json_payload: JSONPayload = None

    required = ("config_id", "config_version", "reputation_profile_id")

    def body(self):
        return encode_payload(self.json_payload)


@dataclass
class RemoveReputationProfileRequest(AppSecRequest):
    config_id: int = 0
    config_version: int = 0
    reputation_profile_id: int = 0

    required = ("config_id", "config_version", "reputation_profile_id")


def _filter_profiles(request: GetReputationProfilesRequest, result: ReputationProfileList) -> ReputationProfileList:
    result.reputation_profiles = keep_matching(result.reputation_profiles, "id", request.reputation_profile_id)
    return result


GET_REPUTATION_PROFILES = Operation(
    name="GetReputationProfiles",
    method="GET",
    path=PROFILES_PATH,
    response=ReputationProfileList,
    post_filter=_filter_profiles,
)

GET_REPUTATION_PROFILE = Operation(
    name="GetReputationProfile",
    method="GET",
    path=PROFILES_PATH + "/{reputation_profile_id}",
    response=ReputationProfile,
)

CREATE_REPUTATION_PROFILE = Operation(
    name="CreateReputationProfile",
    method="POST",
    path=PROFILES_PATH,
    response=ReputationProfile,
    success=(200, 201),
)

UPDATE_REPUTATION_PROFILE = Operation(
    name="UpdateReputationProfile",
    method="PUT",
    path=PROFILES_PATH + "/{reputation_profile_id}",
    response=ReputationProfile,
    success=(200, 201),
)

REMOVE_REPUTATION_PROFILE = Operation(
    name="RemoveReputationProfile",
    method="DELETE",
    path=PROFILES_PATH + "/{reputation_profile_id}",
    success=(200, 204),
)


class ReputationProfilesResource:
    """Management of reputation profiles for a configuration version."""

    def __init__(self, client):
        self._client = client

    def list(self, config_id: int, config_version: int, reputation_profile_id: int = 0) -> ReputationProfileList:
        """List reputation profiles, optionally only ``reputation_profile_id``."""
        request = GetReputationProfilesRequest(config_id, config_version, reputation_profile_id)
        return self._client._call(GET_REPUTATION_PROFILES, request)

    def get(self, config_id: int, config_version: int, reputation_profile_id: int) -> ReputationProfile:
        request = GetReputationProfileRequest(config_id, config_version, reputation_profile_id)
        return self._client._call(GET_REPUTATION_PROFILE, request)

    def create(self, config_id: int, config_version: int, json_payload: JSONPayload) -> ReputationProfile:
        """Create a reputation profile from raw JSON (str, bytes or dict)."""
        request = CreateReputationProfileRequest(config_id, config_version, json_payload)
        return self._client._call(CREATE_REPUTATION_PROFILE, request)

    def update(
        self,
        config_id: int,
        config_version: int,
        reputation_profile_id: int,
        json_payload: JSONPayload,
    ) -> ReputationProfile:
        request = UpdateReputationProfileRequest(config_id, config_version, reputation_profile_id, json_payload)
        return self._client._call(UPDATE_REPUTATION_PROFILE, request)

    def remove(self, config_id: int, config_version: int, reputation_profile_id: int) -> None:
        """Delete a reputation profile."""
        request = RemoveReputationProfileRequest(config_id, config_version, reputation_profile_id)
        self._client._call(REMOVE_REPUTATION_PROFILE, request)


class AsyncReputationProfilesResource:
    """Async variant of ReputationProfilesResource."""

    def __init__(self, client):
        self._client = client

    async def list(self, config_id: int, config_version: int, reputation_profile_id: int = 0) -> ReputationProfileList:
        request = GetReputationProfilesRequest(config_id, config_version, reputation_profile_id)
        return await self._client._call(GET_REPUTATION_PROFILES, request)

    async def get(self, config_id: int, config_version: int, reputation_profile_id: int) -> ReputationProfile:
        request = GetReputationProfileRequest(config_id, config_version, reputation_profile_id)
        return await self._client._call(GET_REPUTATION_PROFILE, request)

    async def create(self, config_id: int, config_version: int, json_payload: JSONPayload) -> ReputationProfile:
        request = CreateReputationProfileRequest(config_id, config_version, json_payload)
        return await self._client._call(CREATE_REPUTATION_PROFILE, request)

    async def update(
        self,
        config_id: int,
        config_version: int,
        reputation_profile_id: int,
        json_payload: JSONPayload,
    ) -> ReputationProfile:
        request = UpdateReputationProfileRequest(config_id, config_version, reputation_profile_id, json_payload)
        return await self._client._call(UPDATE_REPUTATION_PROFILE, request)

    async def remove(self, config_id: int, config_version: int, reputation_profile_id: int) -> None:
        request = RemoveReputationProfileRequest(config_id, config_version, reputation_profile_id)
        await self._client._call(REMOVE_REPUTATION_PROFILE, request)
