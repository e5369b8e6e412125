"""Resource for configuration versions and configuration clones."""

import json
from dataclasses import dataclass, field
from typing import List

from .._operation import AppSecRequest, Operation
from ..types import ConfigurationCloneResult, ConfigurationVersion


@dataclass
class GetConfigurationCloneRequest(AppSecRequest):
    config_id: int = 0
    version: int = 0

    required = ("config_id", "version")


@dataclass
class CreateConfigurationCloneRequest(AppSecRequest):
    name: str = ""
    description: str = ""
    contract_id: str = ""
    group_id: int = 0
    hostnames: List[str] = field(default_factory=list)
    create_from_config_id: int = 0
    create_from_version: int = 0

    required = ("create_from_config_id",)

    def body(self) -> bytes:
        payload = {
            "name": self.name,
            "description": self.description,
            "contractId": self.contract_id,
            "groupId": self.group_id,
            "hostnames": self.hostnames,
            "createFrom": {
                "configId": self.create_from_config_id,
                "version": self.create_from_version,
            },
        }
        return json.dumps(payload).encode("utf-8")


GET_CONFIGURATION_CLONE = Operation(
    name="GetConfigurationClone",
    method="GET",
    path="/configs/{config_id}/versions/{version}",
    response=ConfigurationVersion,
)

CREATE_CONFIGURATION_CLONE = Operation(
    name="CreateConfigurationClone",
    method="POST",
    path="/configs/",
    response=ConfigurationCloneResult,
    success=(200, 201),
)


class ConfigurationCloneResource:
    """Read configuration versions and clone them into new configurations."""

    def __init__(self, client):
        self._client = client

    def get(self, config_id: int, version: int) -> ConfigurationVersion:
        """Get a configuration version with its staging and production status."""
        request = GetConfigurationCloneRequest(config_id, version)
        return self._client._call(GET_CONFIGURATION_CLONE, request)

    def create(
        self,
        name: str,
        create_from_config_id: int,
        create_from_version: int,
        contract_id: str = "",
        group_id: int = 0,
        hostnames: List[str] = None,
        description: str = "",
    ) -> ConfigurationCloneResult:
        """
        Create a new configuration from an existing configuration version.

        Args:
            name: Name of the new configuration
            create_from_config_id: Configuration to copy
            create_from_version: Version of that configuration to copy
            contract_id: Contract the new configuration belongs to
            group_id: Group the new configuration belongs to
            hostnames: Hostnames protected by the new configuration
            description: Optional human-readable description
        """
        request = CreateConfigurationCloneRequest(
            name=name,
            description=description,
            contract_id=contract_id,
            group_id=group_id,
            hostnames=list(hostnames or []),
            create_from_config_id=create_from_config_id,
            create_from_version=create_from_version,
        )
        return self._client._call(CREATE_CONFIGURATION_CLONE, request)


class AsyncConfigurationCloneResource:
    """Async variant of ConfigurationCloneResource."""

    def __init__(self, client):
        self._client = client

    async def get(self, config_id: int, version: int) -> ConfigurationVersion:
        request = GetConfigurationCloneRequest(config_id, version)
        return await self._client._call(GET_CONFIGURATION_CLONE, request)

    async def create(
        self,
        name: str,
        create_from_config_id: int,
        create_from_version: int,
        contract_id: str = "",
        group_id: int = 0,
        hostnames: List[str] = None,
        description: str = "",
    ) -> ConfigurationCloneResult:
        request = CreateConfigurationCloneRequest(
            name=name,
            description=description,
            contract_id=contract_id,
            group_id=group_id,
            hostnames=list(hostnames or []),
            create_from_config_id=create_from_config_id,
            create_from_version=create_from_version,
        )
        return await self._client._call(CREATE_CONFIGURATION_CLONE, request)
