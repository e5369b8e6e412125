"""Resource for hostname coverage overlap between configurations."""

from dataclasses import dataclass
from typing import Dict

from .._operation import AppSecRequest, Operation
from ..types import HostnameCoverageOverlapping


@dataclass
class GetHostnameCoverageOverlappingRequest(AppSecRequest):
    config_id: int = 0
    version: int = 0
    hostname: str = ""

    required = ("config_id", "version")

    def query(self) -> Dict[str, str]:
        return {"hostname": self.hostname} if self.hostname else {}


GET_HOSTNAME_COVERAGE_OVERLAPPING = Operation(
    name="GetHostnameCoverageOverlapping",
    method="GET",
    path="/configs/{config_id}/versions/{version}/hostname-coverage/overlapping",
    response=HostnameCoverageOverlapping,
)


class HostnameCoverageResource:
    def __init__(self, client):
        self._client = client

    def overlapping(self, config_id: int, version: int, hostname: str = "") -> HostnameCoverageOverlapping:
        """List other configuration versions that also cover ``hostname``."""
        request = GetHostnameCoverageOverlappingRequest(config_id, version, hostname)
        return self._client._call(GET_HOSTNAME_COVERAGE_OVERLAPPING, request)


class AsyncHostnameCoverageResource:
    def __init__(self, client):
        self._client = client

    async def overlapping(self, config_id: int, version: int, hostname: str = "") -> HostnameCoverageOverlapping:
        request = GetHostnameCoverageOverlappingRequest(config_id, version, hostname)
        return await self._client._call(GET_HOSTNAME_COVERAGE_OVERLAPPING, request)
