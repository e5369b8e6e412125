"""Resource for attack group actions, conditions and exceptions."""

import json
from dataclasses import dataclass
from typing import Optional

from .._operation import AppSecRequest, JSONPayload, Operation, encode_payload
from ..exceptions import ValidationError
from ..filters import keep_matching
from ..types import AttackGroup, AttackGroupList

POLICY_PATH = "/configs/{config_id}/versions/{version}/security-policies/{policy_id}"


@dataclass
class GetAttackGroupsRequest(AppSecRequest):
    config_id: int = 0
    version: int = 0
    policy_id: str = ""
    # not an API filter; applied to the fetched list
    group: Optional[str] = None

    required = ("config_id", "version", "policy_id")


@dataclass
class GetAttackGroupRequest(AppSecRequest):
    config_id: int = 0
    version: int = 0
    policy_id: str = ""
    group: str = ""

    required = ("config_id", "version", "policy_id")


@dataclass
class UpdateAttackGroupRequest(AppSecRequest):
    config_id: int = 0
    version: int = 0
    policy_id: str = ""
    group: str = ""
    action: str = ""
    condition_exception: JSONPayload = None

    required = ("config_id", "version", "policy_id")

    def validate(self, operation: str = "") -> None:
        super().validate(operation)
        try:
            self._condition_exception()
        except ValueError:
            raise ValidationError(
                operation or "UpdateAttackGroup", ["condition_exception"], "must be valid JSON"
            ) from None

    def _condition_exception(self):
        raw = encode_payload(self.condition_exception)
        return json.loads(raw) if raw else None

    def body(self) -> bytes:
        payload = {"action": self.action}
        condition_exception = self._condition_exception()
        if condition_exception is not None:
            payload["conditionException"] = condition_exception
        return json.dumps(payload).encode("utf-8")


def _filter_groups(request: GetAttackGroupsRequest, result: AttackGroupList) -> AttackGroupList:
    result.attack_groups = keep_matching(result.attack_groups, "group", request.group)
    return result


GET_ATTACK_GROUPS = Operation(
    name="GetAttackGroups",
    method="GET",
    path=POLICY_PATH + "/attack-groups",
    response=AttackGroupList,
    flags=(("includeConditionException", "true"),),
    post_filter=_filter_groups,
)

GET_ATTACK_GROUP = Operation(
    name="GetAttackGroup",
    method="GET",
    path=POLICY_PATH + "/attack-groups/{group}",
    response=AttackGroup,
    flags=(("includeConditionException", "true"),),
)

UPDATE_ATTACK_GROUP = Operation(
    name="UpdateAttackGroup",
    method="PUT",
    path=POLICY_PATH + "/attack-groups/{group}/action-condition-exception",
    response=AttackGroup,
    success=(200, 201),
)


class AttackGroupsResource:
    """Attack group actions for a security policy.

    Usage::

        groups = client.attack_groups.list(config_id=1, version=2, policy_id="pol1")
        client.attack_groups.update(
            config_id=1, version=2, policy_id="pol1", group="XSS", action="deny",
        )
    """

    def __init__(self, client):
        self._client = client

    def list(self, config_id: int, version: int, policy_id: str, group: Optional[str] = None) -> AttackGroupList:
        """List attack group actions, optionally only the one named ``group``."""
        request = GetAttackGroupsRequest(config_id, version, policy_id, group)
        return self._client._call(GET_ATTACK_GROUPS, request)

    def get(self, config_id: int, version: int, policy_id: str, group: str) -> AttackGroup:
        """Get the action and condition/exception of one attack group."""
        request = GetAttackGroupRequest(config_id, version, policy_id, group)
        return self._client._call(GET_ATTACK_GROUP, request)

    def update(
        self,
        config_id: int,
        version: int,
        policy_id: str,
        group: str,
        action: str,
        condition_exception: JSONPayload = None,
    ) -> AttackGroup:
        """
        Set the action taken when the attack group's rules trigger.

        Args:
            action: "alert", "deny", "none" or a custom deny id such as "deny_custom_622918"
            condition_exception: Optional condition/exception JSON (str, bytes or dict)
        """
        request = UpdateAttackGroupRequest(config_id, version, policy_id, group, action, condition_exception)
        return self._client._call(UPDATE_ATTACK_GROUP, request)


class AsyncAttackGroupsResource:
    """Async attack group actions for a security policy."""

    def __init__(self, client):
        self._client = client

    async def list(self, config_id: int, version: int, policy_id: str, group: Optional[str] = None) -> AttackGroupList:
        request = GetAttackGroupsRequest(config_id, version, policy_id, group)
        return await self._client._call(GET_ATTACK_GROUPS, request)

    async def get(self, config_id: int, version: int, policy_id: str, group: str) -> AttackGroup:
        request = GetAttackGroupRequest(config_id, version, policy_id, group)
        return await self._client._call(GET_ATTACK_GROUP, request)

    async def update(
        self,
        config_id: int,
        version: int,
        policy_id: str,
        group: str,
        action: str,
        condition_exception: JSONPayload = None,
    ) -> AttackGroup:
        request = UpdateAttackGroupRequest(config_id, version, policy_id, group, action, condition_exception)
        return await self._client._call(UPDATE_ATTACK_GROUP, request)
