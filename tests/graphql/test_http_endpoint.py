"""
Integration tests for the GraphQL HTTP endpoint and health check
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from bookshelf.api.app import create_app


@pytest_asyncio.fixture
async def client():
    app = create_app()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.mark.integration
class TestGraphQLEndpoint:
    @pytest.mark.asyncio
    async def test_post_query(self, client):
        response = await client.post("/graphql", json={"query": "{ book(id: 1) { name } }"})

        assert response.status_code == 200
        assert response.json() == {
            "data": {"book": {"name": "Harry Potter and the Chamber of Secrets"}}
        }

    @pytest.mark.asyncio
    async def test_get_query(self, client):
        response = await client.get(
            "/graphql", params={"query": "{ authors { name } }"}
        )

        assert response.status_code == 200
        assert response.json()["data"]["authors"][0] == {"name": "J. K. Rowling"}

    @pytest.mark.asyncio
    async def test_mutation_visible_to_later_requests(self, client):
        mutation = """
            mutation AddAuthor($name: String!) {
                addAuthor(name: $name) { id name }
            }
        """
        response = await client.post(
            "/graphql",
            json={
                "query": mutation,
                "variables": {"name": "Brandon Sanderson"},
                "operationName": "AddAuthor",
            },
        )

        assert response.status_code == 200
        assert response.json()["data"]["addAuthor"] == {"id": 4, "name": "Brandon Sanderson"}

        response = await client.post("/graphql", json={"query": "{ authors { id } }"})
        assert [a["id"] for a in response.json()["data"]["authors"]] == [1, 2, 3, 4]

    @pytest.mark.asyncio
    async def test_graphiql_served_for_browser_get(self, client):
        response = await client.get("/graphql", headers={"Accept": "text/html"})

        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert "graphiql" in response.text.lower()

    @pytest.mark.asyncio
    async def test_malformed_query_returns_structured_error(self, client):
        response = await client.post("/graphql", json={"query": "{ books { name "})

        body = response.json()
        assert body["data"] is None
        assert "Syntax Error" in body["errors"][0]["message"]

    @pytest.mark.asyncio
    async def test_unknown_field_is_rejected(self, client):
        response = await client.post("/graphql", json={"query": "{ publishers { name } }"})

        body = response.json()
        assert body["data"] is None
        assert "publishers" in body["errors"][0]["message"]

    @pytest.mark.asyncio
    async def test_missing_query_is_client_error(self, client):
        response = await client.post("/graphql", json={})

        assert response.status_code == 400


@pytest.mark.integration
class TestHealth:
    @pytest.mark.asyncio
    async def test_health_reports_counts(self, client):
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json() == {
            "status": "healthy",
            "version": "0.1.0",
            "authors": 3,
            "books": 8,
        }

    @pytest.mark.asyncio
    async def test_health_tracks_mutations(self, client):
        await client.post(
            "/graphql",
            json={"query": 'mutation { addBook(name: "The Hobbit", authorId: 2) { id } }'},
        )

        response = await client.get("/health")

        assert response.json()["books"] == 9
