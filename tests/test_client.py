"""Tests for the HTTP introspection client."""

import asyncio
import json

import httpx
import pytest

from gql_introspect.core.client import INTROSPECTION_QUERY, IntrospectionClient
from gql_introspect.core.errors import GraphQLError, IntrospectionError

URL = "https://api.example.com/graphql"


def make_transport(handler, seen: list | None = None) -> httpx.MockTransport:
    def record(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        return handler(request)

    return httpx.MockTransport(record)


def run(coro):
    return asyncio.run(coro)


async def introspect_with(transport, headers=None):
    async with IntrospectionClient(URL, headers, transport=transport) as client:
        return await client.introspect()


class TestIntrospectionClient:
    """Tests for IntrospectionClient."""

    def test_introspect(self, shop_payload):
        transport = make_transport(lambda request: httpx.Response(200, json=shop_payload))
        schema = run(introspect_with(transport))
        assert [f.name for f in schema.get_mutations()] == ["archiveProduct"]

    def test_request_body(self, scenario_payload):
        seen = []
        transport = make_transport(lambda request: httpx.Response(200, json=scenario_payload), seen)
        run(introspect_with(transport))

        request = seen[0]
        assert request.method == "POST"
        assert str(request.url) == URL
        body = json.loads(request.content)
        assert body["operationName"] == "IntrospectionQuery"
        assert body["query"] == INTROSPECTION_QUERY
        assert request.headers["Content-Type"] == "application/json"

    def test_custom_headers(self, scenario_payload):
        seen = []
        transport = make_transport(lambda request: httpx.Response(200, json=scenario_payload), seen)
        run(introspect_with(transport, headers={"Authorization": "Bearer abc"}))
        assert seen[0].headers["Authorization"] == "Bearer abc"

    def test_http_error_status(self):
        transport = make_transport(lambda request: httpx.Response(503, text="unavailable"))
        with pytest.raises(httpx.HTTPStatusError):
            run(introspect_with(transport))

    def test_non_json_body(self):
        transport = make_transport(lambda request: httpx.Response(200, text="<html></html>"))
        with pytest.raises(IntrospectionError, match="not valid JSON"):
            run(introspect_with(transport))

    def test_graphql_errors(self):
        payload = {"data": None, "errors": [{"message": "Introspection is disabled"}]}
        transport = make_transport(lambda request: httpx.Response(200, json=payload))
        with pytest.raises(GraphQLError, match="Introspection is disabled"):
            run(introspect_with(transport))

    def test_fetch_returns_raw_payload(self, scenario_payload):
        transport = make_transport(lambda request: httpx.Response(200, json=scenario_payload))

        async def fetch():
            async with IntrospectionClient(URL, transport=transport) as client:
                return await client.fetch()

        assert run(fetch()) == scenario_payload

    def test_close_is_idempotent(self):
        async def scenario():
            client = IntrospectionClient(URL, transport=make_transport(lambda r: httpx.Response(200)))
            await client._get_client()
            await client.close()
            await client.close()
            return client._client

        assert run(scenario()) is None

    def test_query_covers_deep_type_refs(self):
        assert "ofType" in INTROSPECTION_QUERY
        assert "includeDeprecated: true" in INTROSPECTION_QUERY
