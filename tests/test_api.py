"""
HTTP-level tests for the FastAPI application.
"""

import pytest
from httpx import ASGITransport, AsyncClient

from postgraph import __version__
from postgraph.api.app import create_app
from postgraph.middleware import operation_name_from_payload


@pytest.fixture
def app():
    return create_app()


@pytest.mark.integration
@pytest.mark.asyncio
async def test_health_reports_store_counts(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/health")

    assert response.status_code == 200
    assert response.headers["X-Request-ID"]
    assert response.json() == {
        "status": "healthy",
        "version": __version__,
        "users": 0,
        "posts": 0,
    }


@pytest.mark.integration
@pytest.mark.asyncio
async def test_graphql_round_trip_over_http(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        created = await client.post(
            "/graphql",
            json={
                "query": "mutation CreateUser { createUser(name: \"Ada\", age: 36) { id } }",
                "operationName": "CreateUser",
            },
        )
        assert created.status_code == 200
        user_id = created.json()["data"]["createUser"]["id"]

        for i in range(3):
            response = await client.post(
                "/graphql",
                json={
                    "query": (
                        "mutation($u: ID!, $t: String!) { createPost(userId: $u, title: $t, "
                        'content: "c", createdAt: "2024-01-01") { id } }'
                    ),
                    "variables": {"u": user_id, "t": f"post {i}"},
                },
            )
            assert response.status_code == 200
            assert "errors" not in response.json()

        page = await client.post(
            "/graphql",
            json={
                "query": (
                    "query($u: ID!) { getUserPosts(userId: $u, pageNumber: 2, pageSize: 2) "
                    "{ edges { node { title } } pageInfo { hasNextPage hasPreviousPage } } }"
                ),
                "variables": {"u": user_id},
            },
        )
        health = await client.get("/health")

    connection = page.json()["data"]["getUserPosts"]
    assert [e["node"]["title"] for e in connection["edges"]] == ["post 2"]
    assert connection["pageInfo"] == {"hasNextPage": False, "hasPreviousPage": True}
    assert health.json()["posts"] == 3


@pytest.mark.unit
@pytest.mark.parametrize(
    ("operation_name", "query", "expected"),
    [
        ("Named", "query Other { getUsers { id } }", "Named"),
        (None, "query GetUsers { getUsers { id } }", "GetUsers"),
        (None, "mutation CreateUser { createUser(name: \"a\", age: 1) { id } }", "mutation:CreateUser"),
        (None, "{ getUsers { id } }", "unnamed_operation"),
        (None, "query IntrospectionQuery { __schema { types { name } } }", "__introspection"),
        (None, None, None),
    ],
)
def test_operation_name_from_payload(operation_name, query, expected):
    assert operation_name_from_payload(operation_name, query) == expected
