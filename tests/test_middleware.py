"""
Tests for request logging middleware helpers
"""

import json

import pytest
from starlette.requests import Request

from bookshelf.middleware import (
    extract_graphql_operation_name,
    operation_name_from_document,
    sanitize_query_params,
)


def make_request(method: str, path: str = "/graphql", query_string: bytes = b"", body: bytes = b""):
    async def receive():
        return {"type": "http.request", "body": body, "more_body": False}

    scope = {
        "type": "http",
        "method": method,
        "path": path,
        "query_string": query_string,
        "headers": [],
    }
    return Request(scope, receive)


class TestOperationName:
    def test_explicit_operation_name_wins(self):
        assert operation_name_from_document("GetBooks", "query Other { books { id } }") == "GetBooks"

    def test_named_query(self):
        assert operation_name_from_document(None, "query GetBooks { books { id } }") == "GetBooks"

    def test_named_mutation(self):
        document = 'mutation AddAuthor { addAuthor(name: "X") { id } }'
        assert operation_name_from_document(None, document) == "mutation:AddAuthor"

    def test_anonymous_query(self):
        assert operation_name_from_document(None, "{ books { id } }") == "unnamed_operation"

    def test_anonymous_mutation(self):
        document = 'mutation { addAuthor(name: "X") { id } }'
        assert operation_name_from_document(None, document) == "mutation:unnamed_operation"

    def test_introspection(self):
        assert operation_name_from_document(None, "{ __schema { types { name } } }") == (
            "__introspection"
        )

    def test_no_query(self):
        assert operation_name_from_document(None, None) is None
        assert operation_name_from_document("", "") is None


class TestExtractFromRequest:
    @pytest.mark.asyncio
    async def test_get_request(self):
        request = make_request("GET", query_string=b"query=query+ListAuthors+%7B+authors+%7B+id+%7D+%7D")

        assert await extract_graphql_operation_name(request) == "ListAuthors"

    @pytest.mark.asyncio
    async def test_post_request(self):
        body = json.dumps({"query": "mutation AddBook { addBook(name: \"X\", authorId: 1) { id } }"})
        request = make_request("POST", body=body.encode())

        assert await extract_graphql_operation_name(request) == "mutation:AddBook"

    @pytest.mark.asyncio
    async def test_post_invalid_json(self):
        request = make_request("POST", body=b"{not json")

        assert await extract_graphql_operation_name(request) is None

    @pytest.mark.asyncio
    async def test_other_paths_ignored(self):
        request = make_request("GET", path="/health")

        assert await extract_graphql_operation_name(request) is None


class TestSanitizeQueryParams:
    def test_sensitive_keys_redacted(self):
        params = {"api_key": "abc", "Authorization": "Bearer x", "page": "2"}

        assert sanitize_query_params(params) == {
            "api_key": "[REDACTED]",
            "Authorization": "[REDACTED]",
            "page": "2",
        }
