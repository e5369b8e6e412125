"""Resource for reputation analysis settings of a security policy."""

import json
from dataclasses import dataclass

from .._operation import AppSecRequest, Operation
from ..types import ReputationAnalysis

ANALYSIS_PATH = "/configs/{config_id}/versions/{version}/security-policies/{policy_id}/reputation-analysis"


@dataclass
class GetReputationAnalysisRequest(AppSecRequest):
    config_id: int = 0
    version: int = 0
    policy_id: str = ""

    required = ("config_id", "version", "policy_id")


@dataclass
class UpdateReputationAnalysisRequest(AppSecRequest):
    config_id: int = 0
    version: int = 0
    policy_id: str = ""
    forward_to_http_header: bool = False
    forward_shared_ip_to_http_header_and_siem: bool = False

    required = ("config_id", "version", "policy_id")

    def body(self) -> bytes:
        payload = {
            "forwardToHTTPHeader": self.forward_to_http_header,
            "forwardSharedIPToHTTPHeaderAndSIEM": self.forward_shared_ip_to_http_header_and_siem,
        }
        return json.dumps(payload).encode("utf-8")


@dataclass
class RemoveReputationAnalysisRequest(UpdateReputationAnalysisRequest):
    """Resets both forwarding settings; the flags are always sent as false."""

    def body(self) -> bytes:
        payload = {"forwardToHTTPHeader": False, "forwardSharedIPToHTTPHeaderAndSIEM": False}
        return json.dumps(payload).encode("utf-8")


GET_REPUTATION_ANALYSIS = Operation(
    name="GetReputationAnalysis",
    method="GET",
    path=ANALYSIS_PATH,
    response=ReputationAnalysis,
)

UPDATE_REPUTATION_ANALYSIS = Operation(
    name="UpdateReputationAnalysis",
    method="PUT",
    path=ANALYSIS_PATH,
    response=ReputationAnalysis,
    success=(200, 201),
)

# the API has no DELETE here; removal is a PUT that clears both settings
REMOVE_REPUTATION_ANALYSIS = Operation(
    name="RemoveReputationAnalysis",
    method="PUT",
    path=ANALYSIS_PATH,
    response=ReputationAnalysis,
    success=(200, 201),
)


class ReputationAnalysisResource:
    """Whether reputation scores are forwarded in HTTP headers and to SIEM."""

    def __init__(self, client):
        self._client = client

    def get(self, config_id: int, version: int, policy_id: str) -> ReputationAnalysis:
        request = GetReputationAnalysisRequest(config_id, version, policy_id)
        return self._client._call(GET_REPUTATION_ANALYSIS, request)

    def update(
        self,
        config_id: int,
        version: int,
        policy_id: str,
        forward_to_http_header: bool = False,
        forward_shared_ip_to_http_header_and_siem: bool = False,
    ) -> ReputationAnalysis:
        """
        Change the reputation analysis settings.

        Args:
            forward_to_http_header: Add the client's reputation score to an HTTP header sent to origin
            forward_shared_ip_to_http_header_and_siem: Flag shared IPs in that header and in SIEM events
        """
        request = UpdateReputationAnalysisRequest(
            config_id, version, policy_id, forward_to_http_header, forward_shared_ip_to_http_header_and_siem
        )
        return self._client._call(UPDATE_REPUTATION_ANALYSIS, request)

    def remove(self, config_id: int, version: int, policy_id: str) -> ReputationAnalysis:
        """Turn both forwarding settings off."""
        request = RemoveReputationAnalysisRequest(config_id, version, policy_id)
        return self._client._call(REMOVE_REPUTATION_ANALYSIS, request)


class AsyncReputationAnalysisResource:
    """Async variant of ReputationAnalysisResource."""

    def __init__(self, client):
        self._client = client

    async def get(self, config_id: int, version: int, policy_id: str) -> ReputationAnalysis:
        request = GetReputationAnalysisRequest(config_id, version, policy_id)
        return await self._client._call(GET_REPUTATION_ANALYSIS, request)

    async def update(
        self,
        config_id: int,
        version: int,
        policy_id: str,
        forward_to_http_header: bool = False,
        forward_shared_ip_to_http_header_and_siem: bool = False,
    ) -> ReputationAnalysis:
        request = UpdateReputationAnalysisRequest(
            config_id, version, policy_id, forward_to_http_header, forward_shared_ip_to_http_header_and_siem
        )
        return await self._client._call(UPDATE_REPUTATION_ANALYSIS, request)

    async def remove(self, config_id: int, version: int, policy_id: str) -> ReputationAnalysis:
        request = RemoveReputationAnalysisRequest(config_id, version, policy_id)
        return await self._client._call(REMOVE_REPUTATION_ANALYSIS, request)
