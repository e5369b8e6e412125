from __future__ import annotations
import httpx
import anyio.lowlevel
from functools import cached_property
from typing import Optional, TYPE_CHECKING
import os
import time
from ._logging import log_operation, log_request, log_response
from ._operation import AppSecRequest, Operation
from .config import Config
from .exceptions import ConfigError
from ._version import __version__

if TYPE_CHECKING:
    from .resources.attack_groups import AttackGroupsResource, AsyncAttackGroupsResource
    from .resources.match_targets import MatchTargetsResource, AsyncMatchTargetsResource
    from .resources.reputation_profiles import ReputationProfilesResource, AsyncReputationProfilesResource
    from .resources.custom_deny import CustomDenyResource, AsyncCustomDenyResource
    from .resources.configuration_clone import ConfigurationCloneResource, AsyncConfigurationCloneResource
    from .resources.version_notes import VersionNotesResource, AsyncVersionNotesResource
    from .resources.reputation_analysis import ReputationAnalysisResource, AsyncReputationAnalysisResource
    from .resources.hostname_coverage import HostnameCoverageResource, AsyncHostnameCoverageResource


def _resolve(host: Optional[str], account_switch_key: Optional[str]):
    host = host or os.environ.get("AKAMAI_HOST")
    if not host:
        raise ConfigError("No API host provided. Pass host= or set AKAMAI_HOST env var.")
    config = Config(host=host)
    config.check_host()
    account_switch_key = account_switch_key or os.environ.get("AKAMAI_ACCOUNT_KEY")
    return config.base_url, account_switch_key


def _client_options(account_switch_key: Optional[str], kwargs: dict) -> dict:
    headers = {"Accept": "application/json", "User-Agent": f"appsec-python/{__version__}"}
    headers.update(kwargs.pop("headers", None) or {})
    params = dict(kwargs.pop("params", None) or {})
    if account_switch_key:
        params["accountSwitchKey"] = account_switch_key
    return {"headers": headers, "params": params}


class AppSecClient:
    """
    Application Security API client.

    Request signing is delegated to an ``httpx.Auth`` (for example an EdgeGrid
    signer); every resource hangs off the client:

        client = AppSecClient(host="akab-xxxx.luna.akamaiapis.net", auth=signer)
        groups = client.attack_groups.list(config_id=1, version=2, policy_id="pol1")

    Or, from an ``.edgerc`` file:

        client = AppSecClient.from_config(Config.from_edgerc(section="default"), auth=signer)
    """

    def __init__(
        self,
        host: Optional[str] = None,
        auth: Optional[httpx.Auth] = None,
        account_switch_key: Optional[str] = None,
        timeout: float = 30.0,
        **kwargs,
    ):
        """
        Args:
            host: API hostname, e.g. 'akab-xxxx.luna.akamaiapis.net'. Defaults to AKAMAI_HOST env var.
            auth: httpx.Auth that signs each request.
            account_switch_key: Optional account to act on (sent as accountSwitchKey). Defaults to AKAMAI_ACCOUNT_KEY.
            timeout: Request timeout in seconds (default: 30)
            **kwargs: Additional arguments passed to httpx.Client (e.g. transport=)
        """
        self.base_url, self.account_switch_key = _resolve(host, account_switch_key)

        _timings: dict = {}

        def _log_req(request: httpx.Request):
            _timings[id(request)] = time.perf_counter()
            log_request(request.method, str(request.url))

        def _log_res(response: httpx.Response):
            start = _timings.pop(id(response.request), time.perf_counter())
            elapsed = (time.perf_counter() - start) * 1000
            log_response(response.status_code, str(response.url), elapsed)

        options = _client_options(self.account_switch_key, kwargs)
        self._http = httpx.Client(
            base_url=self.base_url,
            auth=auth,
            timeout=timeout,
            event_hooks={"request": [_log_req], "response": [_log_res]},
            **options,
            **kwargs,
        )

    @classmethod
    def from_config(cls, config: Config, auth: Optional[httpx.Auth] = None, **kwargs) -> "AppSecClient":
        """Create a client for the host (and account) named in ``config``."""
        kwargs.setdefault("account_switch_key", config.account_key)
        return cls(host=config.base_url, auth=auth, **kwargs)

    def __repr__(self) -> str:
        return f"AppSecClient(base_url={self.base_url!r})"

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def close(self):
        """Close the underlying HTTP connection pool."""
        self._http.close()

    # ── Execution ──────────────────────────────────────────────

    def _call(self, operation: Operation, request: AppSecRequest):
        """Validate, send and decode one operation."""
        options = operation.prepare(request)
        log_operation(operation.name)
        try:
            response = self._http.request(**options)
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            raise operation.transport_error(exc) from exc
        return operation.parse(request, response)

    def request(self, method: str, url: str, **kwargs) -> httpx.Response:
        """Send a raw request for endpoints without a resource wrapper."""
        return self._http.request(method, url, **kwargs)

    # ── Resource Properties (cached) ───────────────────────────

    @cached_property
    def attack_groups(self) -> "AttackGroupsResource":
        from .resources.attack_groups import AttackGroupsResource
        return AttackGroupsResource(self)

    @cached_property
    def match_targets(self) -> "MatchTargetsResource":
        from .resources.match_targets import MatchTargetsResource
        return MatchTargetsResource(self)

    @cached_property
    def reputation_profiles(self) -> "ReputationProfilesResource":
        from .resources.reputation_profiles import ReputationProfilesResource
        return ReputationProfilesResource(self)

    @cached_property
    def custom_deny(self) -> "CustomDenyResource":
        from .resources.custom_deny import CustomDenyResource
        return CustomDenyResource(self)

    @cached_property
    def configuration_clone(self) -> "ConfigurationCloneResource":
        from .resources.configuration_clone import ConfigurationCloneResource
        return ConfigurationCloneResource(self)

    @cached_property
    def version_notes(self) -> "VersionNotesResource":
        from .resources.version_notes import VersionNotesResource
        return VersionNotesResource(self)

    @cached_property
    def reputation_analysis(self) -> "ReputationAnalysisResource":
        from .resources.reputation_analysis import ReputationAnalysisResource
        return ReputationAnalysisResource(self)

    @cached_property
    def hostname_coverage(self) -> "HostnameCoverageResource":
        """Hostnames shared with other configuration versions."""
        from .resources.hostname_coverage import HostnameCoverageResource
        return HostnameCoverageResource(self)


class AsyncAppSecClient:
    """
    Async Application Security API client.

        async with AsyncAppSecClient(host="akab-xxxx.luna.akamaiapis.net", auth=signer) as client:
            group = await client.attack_groups.get(config_id=1, version=2, policy_id="pol1", group="XSS")

    Cancellation follows anyio/asyncio semantics: a call made from an
    already-cancelled scope never reaches the network.
    """

    def __init__(
        self,
        host: Optional[str] = None,
        auth: Optional[httpx.Auth] = None,
        account_switch_key: Optional[str] = None,
        timeout: float = 30.0,
        **kwargs,
    ):
        self.base_url, self.account_switch_key = _resolve(host, account_switch_key)

        _timings: dict = {}

        async def _alog_req(request: httpx.Request):
            _timings[id(request)] = time.perf_counter()
            log_request(request.method, str(request.url))

        async def _alog_res(response: httpx.Response):
            start = _timings.pop(id(response.request), time.perf_counter())
            elapsed = (time.perf_counter() - start) * 1000
            log_response(response.status_code, str(response.url), elapsed)

        options = _client_options(self.account_switch_key, kwargs)
        self._http = httpx.AsyncClient(
            base_url=self.base_url,
            auth=auth,
            timeout=timeout,
            event_hooks={"request": [_alog_req], "response": [_alog_res]},
            **options,
            **kwargs,
        )

    @classmethod
    def from_config(cls, config: Config, auth: Optional[httpx.Auth] = None, **kwargs) -> "AsyncAppSecClient":
        kwargs.setdefault("account_switch_key", config.account_key)
        return cls(host=config.base_url, auth=auth, **kwargs)

    def __repr__(self) -> str:
        return f"AsyncAppSecClient(base_url={self.base_url!r})"

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self):
        """Close the underlying HTTP connection pool."""
        await self._http.aclose()

    # ── Execution ──────────────────────────────────────────────

    async def _call(self, operation: Operation, request: AppSecRequest):
        options = operation.prepare(request)
        log_operation(operation.name)
        await anyio.lowlevel.checkpoint_if_cancelled()
        try:
            response = await self._http.request(**options)
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            raise operation.transport_error(exc) from exc
        return operation.parse(request, response)

    async def request(self, method: str, url: str, **kwargs) -> httpx.Response:
        """Send a raw request for endpoints without a resource wrapper."""
        return await self._http.request(method, url, **kwargs)

    # ── Resource Properties (cached) ───────────────────────────

    @cached_property
    def attack_groups(self) -> "AsyncAttackGroupsResource":
        from .resources.attack_groups import AsyncAttackGroupsResource
        return AsyncAttackGroupsResource(self)

    @cached_property
    def match_targets(self) -> "AsyncMatchTargetsResource":
        from .resources.match_targets import AsyncMatchTargetsResource
        return AsyncMatchTargetsResource(self)

    @cached_property
    def reputation_profiles(self) -> "AsyncReputationProfilesResource":
        from .resources.reputation_profiles import AsyncReputationProfilesResource
        return AsyncReputationProfilesResource(self)

    @cached_property
    def custom_deny(self) -> "AsyncCustomDenyResource":
        from .resources.custom_deny import AsyncCustomDenyResource
        return AsyncCustomDenyResource(self)

    @cached_property
    def configuration_clone(self) -> "AsyncConfigurationCloneResource":
        from .resources.configuration_clone import AsyncConfigurationCloneResource
        return AsyncConfigurationCloneResource(self)

    @cached_property
    def version_notes(self) -> "AsyncVersionNotesResource":
        from .resources.version_notes import AsyncVersionNotesResource
        return AsyncVersionNotesResource(self)

    @cached_property
    def reputation_analysis(self) -> "AsyncReputationAnalysisResource":
        from .resources.reputation_analysis import AsyncReputationAnalysisResource
        return AsyncReputationAnalysisResource(self)

    @cached_property
    def hostname_coverage(self) -> "AsyncHostnameCoverageResource":
        from .resources.hostname_coverage import AsyncHostnameCoverageResource
        return AsyncHostnameCoverageResource(self)
