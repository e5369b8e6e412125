import json

import anyio
import httpx
import pytest

from appsec import AsyncAppSecClient
from appsec.exceptions import APIError, NotFoundError, TransportError, ValidationError
from appsec.types import AttackGroup, CustomDenyList, ReputationAnalysis

HOST = "akab-test.luna.akamaiapis.net"
ROOT = "/appsec/v1/configs/1/versions/2"


def make_async(handler, **kwargs) -> AsyncAppSecClient:
    return AsyncAppSecClient(host=HOST, transport=httpx.MockTransport(handler), **kwargs)


@pytest.mark.anyio
class TestAsyncClient:
    async def test_async_init(self):
        """Basic async client initialization."""
        async with AsyncAppSecClient(host=HOST, account_switch_key="1-ABCDE") as client:
            assert client.base_url == f"https://{HOST}"
            assert isinstance(client._http, httpx.AsyncClient)
            assert client._http.params["accountSwitchKey"] == "1-ABCDE"
        assert client._http.is_closed

    async def test_async_get_attack_group(self):
        async def handler(request):
            assert request.method == "GET"
            assert request.url.path == f"{ROOT}/security-policies/pol1/attack-groups/XSS"
            assert request.url.params["includeConditionException"] == "true"
            return httpx.Response(200, json={"action": "deny"})

        async with make_async(handler) as client:
            group = await client.attack_groups.get(config_id=1, version=2, policy_id="pol1", group="XSS")
            assert isinstance(group, AttackGroup)
            assert group.action == "deny"

    async def test_async_not_found(self):
        async def handler(request):
            return httpx.Response(404, json={"title": "Not Found", "status": 404})

        async with make_async(handler) as client:
            with pytest.raises(NotFoundError) as exc_info:
                await client.attack_groups.get(1, 2, "pol1", "XSS")
            assert exc_info.value.status_code == 404

    async def test_async_update_custom_deny_body(self):
        """The raw payload is forwarded byte-for-byte, even on a 500."""
        payload = '{"name": "maintenance", "parameters": []}'
        seen = []

        async def handler(request):
            seen.append(request.content)
            return httpx.Response(500, json={"title": "Internal Server Error"})

        async with make_async(handler) as client:
            with pytest.raises(APIError) as exc_info:
                await client.custom_deny.update(1, 2, "deny_custom_1", payload)
            assert exc_info.value.status_code == 500
        assert seen == [payload.encode("utf-8")]

    async def test_async_list_filter(self):
        async def handler(request):
            return httpx.Response(200, json={"customDenyList": [{"id": 1}, {"id": "2"}, {"id": 3}]})

        async with make_async(handler) as client:
            result = await client.custom_deny.list(1, 2, id="2")
            assert isinstance(result, CustomDenyList)
            assert [d.id for d in result.custom_deny_list] == ["2"]

    async def test_async_remove_reputation_analysis(self):
        async def handler(request):
            assert request.method == "PUT"
            assert json.loads(request.content) == {
                "forwardToHTTPHeader": False,
                "forwardSharedIPToHTTPHeaderAndSIEM": False,
            }
            return httpx.Response(200, json={})

        async with make_async(handler) as client:
            result = await client.reputation_analysis.remove(1, 2, "pol1")
            assert isinstance(result, ReputationAnalysis)
            assert result.forward_to_http_header is False

    async def test_async_validation_error(self):
        calls = []

        async def handler(request):
            calls.append(request)
            return httpx.Response(200, json={})

        async with make_async(handler) as client:
            with pytest.raises(ValidationError) as exc_info:
                await client.match_targets.get(1, 2, 0)
            assert exc_info.value.fields == ["target_id"]
        assert calls == []

    async def test_async_transport_error(self):
        async def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        async with make_async(handler) as client:
            with pytest.raises(TransportError) as exc_info:
                await client.version_notes.get(1, 2)
            assert exc_info.value.operation == "GetVersionNotes"

    async def test_cancelled_scope_never_sends(self):
        """A call from an already-cancelled scope aborts before the request."""
        calls = []

        async def handler(request):
            calls.append(request)
            return httpx.Response(200, json={"action": "deny"})

        async with make_async(handler) as client:
            with anyio.CancelScope() as scope:
                scope.cancel()
                await client.attack_groups.get(1, 2, "pol1", "XSS")
            assert scope.cancelled_caught
        assert calls == []

    async def test_async_hostname_coverage(self):
        async def handler(request):
            assert request.url.params["hostname"] == "www.example.com"
            return httpx.Response(200, json={"overLappingList": [{"configId": 3}]})

        async with make_async(handler) as client:
            result = await client.hostname_coverage.overlapping(1, 2, "www.example.com")
            assert result.overlapping_list[0].config_id == 3
