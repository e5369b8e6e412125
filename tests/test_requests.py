"""
Request validation, URL building, flexible decoding and list filtering.
None of these tests touch the network.
"""

import pytest

from appsec import decode_flexible, keep_matching
from appsec.exceptions import ValidationError
from appsec.flexible import as_str, as_str_list
from appsec.resources.attack_groups import (
    GET_ATTACK_GROUP,
    GetAttackGroupRequest,
    GetAttackGroupsRequest,
    UpdateAttackGroupRequest,
)
from appsec.resources.configuration_clone import (
    CreateConfigurationCloneRequest,
    GetConfigurationCloneRequest,
)
from appsec.resources.custom_deny import (
    CreateCustomDenyRequest,
    GetCustomDenyListRequest,
    GetCustomDenyRequest,
    RemoveCustomDenyRequest,
    UpdateCustomDenyRequest,
)
from appsec.resources.hostname_coverage import (
    GET_HOSTNAME_COVERAGE_OVERLAPPING,
    GetHostnameCoverageOverlappingRequest,
)
from appsec.resources.match_targets import (
    CreateMatchTargetRequest,
    GetMatchTargetRequest,
    GetMatchTargetsRequest,
    RemoveMatchTargetRequest,
    UpdateMatchTargetRequest,
)
from appsec.resources.reputation_analysis import (
    GetReputationAnalysisRequest,
    RemoveReputationAnalysisRequest,
    UpdateReputationAnalysisRequest,
)
from appsec.resources.reputation_profiles import (
    CreateReputationProfileRequest,
    GetReputationProfileRequest,
    GetReputationProfilesRequest,
    RemoveReputationProfileRequest,
    UpdateReputationProfileRequest,
)
from appsec.resources.version_notes import GetVersionNotesRequest, UpdateVersionNotesRequest
from appsec.types import CustomDeny


# request class -> (complete instance, its required fields)
REQUESTS = [
    (GetAttackGroupsRequest(1, 2, "pol1"), ["config_id", "version", "policy_id"]),
    (GetAttackGroupRequest(1, 2, "pol1", "XSS"), ["config_id", "version", "policy_id"]),
    (UpdateAttackGroupRequest(1, 2, "pol1", "XSS", "deny"), ["config_id", "version", "policy_id"]),
    (GetMatchTargetsRequest(1, 2), ["config_id", "config_version"]),
    (GetMatchTargetRequest(1, 2, 3), ["config_id", "config_version", "target_id"]),
    (CreateMatchTargetRequest(1, 2, "{}"), ["config_id", "config_version"]),
    (UpdateMatchTargetRequest(1, 2, 3, "{}"), ["config_id", "config_version", "target_id"]),
    (RemoveMatchTargetRequest(1, 2, 3), ["config_id", "config_version", "target_id"]),
    (GetReputationProfilesRequest(1, 2), ["config_id", "config_version"]),
    (GetReputationProfileRequest(1, 2, 3), ["config_id", "config_version", "reputation_profile_id"]),
    (CreateReputationProfileRequest(1, 2, "{}"), ["config_id", "config_version"]),
    (UpdateReputationProfileRequest(1, 2, 3, "{}"), ["config_id", "config_version", "reputation_profile_id"]),
    (RemoveReputationProfileRequest(1, 2, 3), ["config_id", "config_version", "reputation_profile_id"]),
    (GetCustomDenyListRequest(1, 2), ["config_id", "version"]),
    (GetCustomDenyRequest(1, 2, "d1"), ["config_id", "version", "id"]),
    (CreateCustomDenyRequest(1, 2, "{}"), ["config_id", "version"]),
    (UpdateCustomDenyRequest(1, 2, "d1", "{}"), ["config_id", "version", "id"]),
    (RemoveCustomDenyRequest(1, 2, "d1"), ["config_id", "version", "id"]),
    (GetConfigurationCloneRequest(1, 2), ["config_id", "version"]),
    (CreateConfigurationCloneRequest(name="copy", create_from_config_id=1), ["create_from_config_id"]),
    (GetVersionNotesRequest(1, 2), ["config_id", "version"]),
    (UpdateVersionNotesRequest(1, 2, "n"), ["config_id", "version"]),
    (GetReputationAnalysisRequest(1, 2, "pol1"), ["config_id", "version", "policy_id"]),
    (UpdateReputationAnalysisRequest(1, 2, "pol1", True), ["config_id", "version", "policy_id"]),
    (RemoveReputationAnalysisRequest(1, 2, "pol1"), ["config_id", "version", "policy_id"]),
    (GetHostnameCoverageOverlappingRequest(1, 2), ["config_id", "version"]),
]


class TestValidation:
    @pytest.mark.parametrize("request_obj,required", REQUESTS, ids=lambda v: type(v).__name__)
    def test_complete_request_validates(self, request_obj, required):
        request_obj.validate()

    @pytest.mark.parametrize("request_obj,required", REQUESTS, ids=lambda v: type(v).__name__)
    def test_each_missing_field_is_named(self, request_obj, required):
        for name in required:
            blank = type(request_obj)(**{**request_obj.__dict__, name: type(getattr(request_obj, name))()})
            with pytest.raises(ValidationError) as exc_info:
                blank.validate()
            assert exc_info.value.fields == [name]
            assert f"{name}: cannot be blank" in str(exc_info.value)

    def test_default_operation_name(self):
        """Without an operation name the request class name is used."""
        with pytest.raises(ValidationError) as exc_info:
            GetVersionNotesRequest().validate()
        assert str(exc_info.value).startswith("GetVersionNotes: struct validation:")

    def test_all_missing_fields_reported(self):
        with pytest.raises(ValidationError) as exc_info:
            GetReputationAnalysisRequest().validate("GetReputationAnalysis")
        assert exc_info.value.fields == ["config_id", "version", "policy_id"]


class TestUrls:
    def test_path_parameters_are_escaped(self):
        request = GetAttackGroupRequest(1, 2, "pol 1", "XSS/2")
        url = GET_ATTACK_GROUP.url(request)
        assert url == "/appsec/v1/configs/1/versions/2/security-policies/pol%201/attack-groups/XSS%2F2"

    def test_prepare_merges_flags_and_query(self):
        request = GetHostnameCoverageOverlappingRequest(1, 2, "www.example.com")
        options = GET_HOSTNAME_COVERAGE_OVERLAPPING.prepare(request)
        assert options["method"] == "GET"
        assert options["params"] == {"hostname": "www.example.com"}
        assert options["content"] is None
        assert options["headers"] == {}

    def test_prepare_validates(self):
        with pytest.raises(ValidationError) as exc_info:
            GET_ATTACK_GROUP.prepare(GetAttackGroupRequest(1, 2))
        assert str(exc_info.value).startswith("GetAttackGroup:")


class TestFlexibleDecoding:
    def test_string(self):
        assert decode_flexible("7") == "7"

    def test_integer(self):
        assert decode_flexible(7) == "7"

    def test_integral_float(self):
        assert decode_flexible(7.0) == "7"
        assert decode_flexible(7.5) == "7.5"

    def test_array(self):
        assert decode_flexible(["a", "b"]) == ["a", "b"]
        assert decode_flexible(["a", 1]) == ["a", "1"]

    @pytest.mark.parametrize("value", [None, {"a": 1}, True])
    def test_other_kinds_yield_none(self, value):
        assert decode_flexible(value) is None

    def test_as_str_zero_value(self):
        assert as_str(None) == ""
        assert as_str({"id": 1}) == ""

    def test_as_str_list(self):
        assert as_str_list("a") == ["a"]
        assert as_str_list(None) == []
        assert as_str_list({"x": 1}) == []

    def test_model_field(self):
        assert CustomDeny.model_validate({"id": 42}).id == "42"
        assert CustomDeny.model_validate({"id": "deny_custom_42"}).id == "deny_custom_42"
        assert CustomDeny.model_validate({"id": None}).id == ""
        assert CustomDeny.model_validate({}).id == ""


class TestKeepMatching:
    ITEMS = [CustomDeny(id="a", name="1"), CustomDeny(id="b", name="2"), CustomDeny(id="a", name="3")]

    def test_matches_in_order(self):
        assert [i.name for i in keep_matching(self.ITEMS, "id", "a")] == ["1", "3"]

    def test_absent_value_gives_empty_list(self):
        assert keep_matching(self.ITEMS, "id", "zzz") == []

    @pytest.mark.parametrize("wanted", [None, "", 0])
    def test_no_filter_returns_everything(self, wanted):
        assert keep_matching(self.ITEMS, "id", wanted) == self.ITEMS
