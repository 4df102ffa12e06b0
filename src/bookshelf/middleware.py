"""
Middleware for request context and logging
"""

import json
import re
from collections.abc import Callable
from typing import Any

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from .config import settings
from .logging import clear_request_context, get_logger, set_request_context

logger = get_logger(__name__)

_OPERATION_RE = re.compile(r"\b(query|mutation)\s+(\w+)")


def sanitize_query_params(params: dict[str, Any]) -> dict[str, Any]:
    """Remove sensitive query parameters from logging.

    Args:
        params: Dictionary of query parameters

    Returns:
        Dictionary with sensitive parameters redacted
    """
    sensitive_keys = {
        "password",
        "token",
        "api_key",
        "secret",
        "auth",
        "authorization",
        "access_token",
        "key",
        "session",
        "cookie",
        "credentials",
    }

    sanitized = {}
    for key, value in params.items():
        if any(sensitive in key.lower() for sensitive in sensitive_keys):
            sanitized[key] = "[REDACTED]"
        else:
            sanitized[key] = value

    return sanitized


def operation_name_from_document(operation_name: Any, query: Any) -> str | None:
    """Derive a loggable operation name from a GraphQL request payload.

    An explicit operationName wins. Otherwise the first named operation in
    the document is used, prefixed with ``mutation:`` for mutations.
    """
    if isinstance(operation_name, str) and operation_name:
        return operation_name

    if not isinstance(query, str) or not query:
        return None
    if "__schema" in query or "IntrospectionQuery" in query:
        return "__introspection"

    match = _OPERATION_RE.search(query)
    if match:
        kind = "mutation:" if match.group(1) == "mutation" else ""
        return f"{kind}{match.group(2)}"
    if query.lstrip().startswith("mutation"):
        return "mutation:unnamed_operation"
    return "unnamed_operation"


async def extract_graphql_operation_name(request: Request) -> str | None:
    if request.url.path != settings.graphql_path:
        return None

    if request.method == "GET":
        params = request.query_params
        return operation_name_from_document(params.get("operationName"), params.get("query"))

    if request.method == "POST":
        try:
            body = await request.body()
            if not body:
                return None
            data = json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError):
            return None
        if not isinstance(data, dict):
            return None
        return operation_name_from_document(data.get("operationName"), data.get("query"))

    return None


class LoggingContextMiddleware(BaseHTTPMiddleware):
    """Middleware to set logging context for each request."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Process request and set logging context."""

        set_request_context()

        try:
            sanitized_params = None
            if request.query_params:
                sanitized_params = sanitize_query_params(dict(request.query_params))
                # Never log raw GraphQL payloads carried in the query string
                if request.url.path == settings.graphql_path:
                    for k in ("query", "variables", "extensions"):
                        if k in sanitized_params:
                            sanitized_params[k] = "[REDACTED]"

            graphql_operation = await extract_graphql_operation_name(request)

            log_data = {
                "method": request.method,
                "path": request.url.path,
                "query_params": sanitized_params,
                "user_agent": request.headers.get("user-agent"),
                "remote_addr": request.client.host if request.client else None,
            }
            if graphql_operation:
                log_data["graphql_operation"] = graphql_operation

            logger.info("Request started", **log_data)

            response = await call_next(request)

            logger.info(
                "Request completed",
                status_code=response.status_code,
                method=request.method,
                path=request.url.path,
                graphql_operation=graphql_operation,
            )

            return response

        except Exception as e:
            logger.error(
                "Request failed",
                method=request.method,
                path=request.url.path,
                error=str(e),
            )
            raise

        finally:
            clear_request_context()
