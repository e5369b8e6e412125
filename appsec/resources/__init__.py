from .attack_groups import AttackGroupsResource, AsyncAttackGroupsResource
from .match_targets import MatchTargetsResource, AsyncMatchTargetsResource
from .reputation_profiles import ReputationProfilesResource, AsyncReputationProfilesResource
from .custom_deny import CustomDenyResource, AsyncCustomDenyResource
from .configuration_clone import ConfigurationCloneResource, AsyncConfigurationCloneResource
from .version_notes import VersionNotesResource, AsyncVersionNotesResource
from .reputation_analysis import ReputationAnalysisResource, AsyncReputationAnalysisResource
from .hostname_coverage import HostnameCoverageResource, AsyncHostnameCoverageResource

__all__ = [
    "AttackGroupsResource",
    "AsyncAttackGroupsResource",
    "MatchTargetsResource",
    "AsyncMatchTargetsResource",
    "ReputationProfilesResource",
    "AsyncReputationProfilesResource",
    "CustomDenyResource",
    "AsyncCustomDenyResource",
    "ConfigurationCloneResource",
    "AsyncConfigurationCloneResource",
    "VersionNotesResource",
    "AsyncVersionNotesResource",
    "ReputationAnalysisResource",
    "AsyncReputationAnalysisResource",
    "HostnameCoverageResource",
    "AsyncHostnameCoverageResource",
]
