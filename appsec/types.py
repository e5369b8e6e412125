"""Pydantic models for appsec API responses."""

from typing import Any, List, Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from .flexible import FlexibleStr, FlexibleStrList


class AppSecModel(BaseModel):
    """Base model: camelCase on the wire, snake_case in Python, dict-style access."""
    model_config = ConfigDict(extra="allow", populate_by_name=True, alias_generator=to_camel)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # the API sends null for empty collections; let field defaults apply
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data

    def __getitem__(self, item):
        return getattr(self, item)

    def __contains__(self, item):
        return item in self.model_dump()


# ── Attack groups ──────────────────────────────────────────────


class AttackGroupCondition(AppSecModel):
    """A single condition that must hold for an advanced exception to apply."""
    type: Optional[str] = None
    extensions: List[str] = []
    filenames: List[str] = []
    hosts: List[str] = []
    ips: List[str] = []
    methods: List[str] = []
    paths: List[str] = []
    header: Optional[str] = None
    case_sensitive: bool = False
    name: Optional[str] = None
    name_case: bool = False
    positive_match: bool = False
    value: Optional[str] = None
    wildcard: bool = False
    value_case: bool = False
    value_wildcard: bool = False
    use_headers: bool = False


class AttackGroupAdvancedCriteria(AppSecModel):
    """Hostname and path criteria limiting the scope of an exception."""
    hostnames: List[str] = []
    names: List[str] = []
    paths: List[str] = []
    values: List[str] = []


class AttackGroupNamesValues(AppSecModel):
    names: List[str] = []
    values: List[str] = []


class AttackGroupNameValueException(AppSecModel):
    """Excepted name-value pairs in headers, cookies or parameters."""
    criteria: List[AttackGroupAdvancedCriteria] = []
    names_values: List[AttackGroupNamesValues] = []
    selector: Optional[str] = None
    value_wildcard: bool = False
    wildcard: bool = False


class AttackGroupNamesException(AppSecModel):
    """Excepted header, cookie, parameter, XML or JSON names."""
    criteria: List[AttackGroupAdvancedCriteria] = []
    names: List[str] = []
    selector: Optional[str] = None
    wildcard: bool = False


class AttackGroupValuesException(AppSecModel):
    """Excepted values in headers, cookies or query parameters."""
    criteria: List[AttackGroupAdvancedCriteria] = []
    value_wildcard: bool = False
    values: List[str] = []


class AttackGroupAdvancedExceptions(AppSecModel):
    condition_operator: Optional[str] = None
    conditions: List[AttackGroupCondition] = []
    header_cookie_or_param_values: List[AttackGroupValuesException] = []
    specific_header_cookie_or_param_name_value: List[AttackGroupNameValueException] = []
    specific_header_cookie_param_xml_or_json_names: List[AttackGroupNamesException] = []


class AttackGroupException(AppSecModel):
    specific_header_cookie_param_xml_or_json_names: List[AttackGroupNamesException] = []


class AttackGroupConditionException(AppSecModel):
    """Conditions and exceptions attached to an attack group action."""
    advanced_exceptions: Optional[AttackGroupAdvancedExceptions] = None
    exception: Optional[AttackGroupException] = None


class AttackGroup(AppSecModel):
    """Action (and optional condition/exception) for one attack group."""
    action: Optional[str] = None
    condition_exception: Optional[AttackGroupConditionException] = None

    def is_empty_condition_exception(self) -> bool:
        return self.condition_exception is None

    def __repr__(self) -> str:
        return f"AttackGroup(action={self.action!r})"


class AttackGroupAction(AttackGroup):
    """An attack group entry in a list response."""
    group: Optional[str] = None

    def __repr__(self) -> str:
        return f"AttackGroupAction(group={self.group!r}, action={self.action!r})"


class AttackGroupList(AppSecModel):
    attack_groups: List[AttackGroupAction] = Field(default_factory=list, alias="attackGroupActions")


# ── Match targets ──────────────────────────────────────────────


class MatchTargetApi(AppSecModel):
    id: Optional[int] = None
    name: Optional[str] = None


class BypassNetworkList(AppSecModel):
    """A network list whose clients bypass the match target."""
    id: Optional[str] = None
    name: Optional[str] = None


class SecurityPolicyRef(AppSecModel):
    policy_id: Optional[str] = None


class MatchTarget(AppSecModel):
    """A website or API match target; ``type`` tells the two apart."""
    type: Optional[str] = None
    target_id: Optional[int] = None
    config_id: Optional[int] = None
    config_version: Optional[int] = None
    sequence: Optional[int] = None
    apis: List[MatchTargetApi] = []
    default_file: Optional[str] = None
    hostnames: List[str] = []
    file_paths: List[str] = []
    file_extensions: List[str] = []
    is_negative_file_extension_match: bool = False
    # returned as a bool or an object depending on the target
    is_negative_path_match: Any = None
    security_policy: Optional[SecurityPolicyRef] = None
    bypass_network_lists: List[BypassNetworkList] = []

    @property
    def is_api_target(self) -> bool:
        return self.type == "api"

    def __repr__(self) -> str:
        return f"MatchTarget(target_id={self.target_id!r}, type={self.type!r})"


class MatchTargetGroups(AppSecModel):
    api_targets: List[MatchTarget] = []
    website_targets: List[MatchTarget] = []


class MatchTargetList(AppSecModel):
    match_targets: MatchTargetGroups = Field(default_factory=MatchTargetGroups)


# ── Reputation profiles ────────────────────────────────────────


class AtomicCondition(AppSecModel):
    """One clause of a reputation profile condition."""
    class_name: Optional[str] = None
    index: Optional[int] = None
    # boolean on most classes, occasionally a string
    check_ips: Any = None
    positive_match: Any = None
    name: FlexibleStrList = []
    name_case: bool = False
    name_wildcard: Any = None
    value: List[str] = []
    value_case: bool = False
    value_wildcard: Any = None
    host: List[str] = []


class ReputationProfileCondition(AppSecModel):
    atomic_conditions: List[AtomicCondition] = []
    positive_match: Any = None


class ReputationProfile(AppSecModel):
    """A reputation scoring rule."""
    id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    context: Optional[str] = None
    context_readable: Optional[str] = None
    enabled: Optional[bool] = None
    shared_ip_handling: Optional[str] = None
    threshold: Optional[float] = None
    condition: Optional[ReputationProfileCondition] = None

    def __repr__(self) -> str:
        return f"ReputationProfile(id={self.id!r}, name={self.name!r})"


class ReputationProfileList(AppSecModel):
    reputation_profiles: List[ReputationProfile] = []


# ── Custom deny ────────────────────────────────────────────────


class CustomDenyParameter(AppSecModel):
    display_name: Optional[str] = None
    name: Optional[str] = None
    value: Optional[str] = None


class CustomDeny(AppSecModel):
    """A custom deny action. The API sends its id as a string or a number."""
    id: FlexibleStr = ""
    name: Optional[str] = None
    description: Optional[str] = None
    parameters: List[CustomDenyParameter] = []

    def __repr__(self) -> str:
        return f"CustomDeny(id={self.id!r}, name={self.name!r})"


class CustomDenyList(AppSecModel):
    custom_deny_list: List[CustomDeny] = []


# ── Configuration versions ─────────────────────────────────────


class VersionStatus(AppSecModel):
    status: Optional[str] = None
    time: Optional[datetime] = None


class ConfigurationVersion(AppSecModel):
    """A configuration version and its activation status."""
    config_id: Optional[int] = None
    config_name: Optional[str] = None
    version: Optional[int] = None
    version_notes: Optional[str] = None
    create_date: Optional[datetime] = None
    created_by: Optional[str] = None
    based_on: Optional[int] = None
    production: Optional[VersionStatus] = None
    staging: Optional[VersionStatus] = None

    def __repr__(self) -> str:
        return f"ConfigurationVersion(config_id={self.config_id!r}, version={self.version!r})"


class ConfigurationCloneResult(AppSecModel):
    """Response from cloning a configuration."""
    config_id: Optional[int] = None
    version: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None


# ── Settings records ───────────────────────────────────────────


class VersionNotes(AppSecModel):
    notes: str = ""


class ReputationAnalysis(AppSecModel):
    """Reputation analysis forwarding settings for a security policy."""
    forward_to_http_header: bool = Field(False, alias="forwardToHTTPHeader")
    forward_shared_ip_to_http_header_and_siem: bool = Field(
        False, alias="forwardSharedIPToHTTPHeaderAndSIEM"
    )


class HostnameOverlap(AppSecModel):
    """Another configuration version covering the same hostname."""
    config_id: Optional[int] = None
    config_name: Optional[str] = None
    config_version: Optional[int] = None
    contract_id: Optional[str] = None
    contract_name: Optional[str] = None
    version_tags: List[str] = []


class HostnameCoverageOverlapping(AppSecModel):
    overlapping_list: List[HostnameOverlap] = Field(default_factory=list, alias="overLappingList")
