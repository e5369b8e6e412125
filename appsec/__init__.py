"""
appsec: Python client for the Akamai Application Security API.

Usage:

    from appsec import AppSecClient, Config

    config = Config.from_edgerc(section="default")
    client = AppSecClient.from_config(config, auth=signer)

    groups = client.attack_groups.list(config_id=1, version=2, policy_id="pol1")
    client.version_notes.update(config_id=1, version=2, notes="tighten SQLi")

``signer`` is any ``httpx.Auth`` that applies EdgeGrid signatures.
"""

from .client import AppSecClient, AsyncAppSecClient
from .config import Config
from .filters import keep_matching
from .flexible import decode_flexible
from .types import (
    AttackGroup,
    AttackGroupAction,
    AttackGroupList,
    MatchTarget,
    MatchTargetList,
    ReputationProfile,
    ReputationProfileList,
    CustomDeny,
    CustomDenyList,
    ConfigurationVersion,
    ConfigurationCloneResult,
    VersionNotes,
    ReputationAnalysis,
    HostnameCoverageOverlapping,
)
from .exceptions import (
    AppSecError,
    ConfigError,
    ValidationError,
    TransportError,
    APIError,
    AuthenticationError,
    PermissionDeniedError,
    NotFoundError,
    RateLimitError,
    ServerError,
)

# Short alias
Client = AppSecClient

from ._version import __version__

__all__ = [
    # Clients
    "AppSecClient",
    "AsyncAppSecClient",
    "Client",
    "Config",
    # Helpers
    "decode_flexible",
    "keep_matching",
    # Types
    "AttackGroup",
    "AttackGroupAction",
    "AttackGroupList",
    "MatchTarget",
    "MatchTargetList",
    "ReputationProfile",
    "ReputationProfileList",
    "CustomDeny",
    "CustomDenyList",
    "ConfigurationVersion",
    "ConfigurationCloneResult",
    "VersionNotes",
    "ReputationAnalysis",
    "HostnameCoverageOverlapping",
    # Exceptions
    "AppSecError",
    "ConfigError",
    "ValidationError",
    "TransportError",
    "APIError",
    "AuthenticationError",
    "PermissionDeniedError",
    "NotFoundError",
    "RateLimitError",
    "ServerError",
    # Metadata
    "__version__",
]
