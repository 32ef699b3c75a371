"""
Batched GraphQL-over-HTTP execution and response mapping
"""

import asyncio
from dataclasses import dataclass
from typing import Any

import strawberry
from fastapi import status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from strawberry.types import ExecutionResult

from ..logging import get_logger

logger = get_logger(__name__)


class InvalidRequestError(Exception):
    """Raised when a request body is not a valid GraphQL request or batch."""


class GraphQLRequest(BaseModel):
    """A single GraphQL operation as sent over HTTP."""

    model_config = ConfigDict(populate_by_name=True)

    query: str = Field(..., min_length=1)
    variables: dict[str, Any] | None = None
    operation_name: str | None = Field(default=None, alias="operationName")


_single_request = TypeAdapter(GraphQLRequest)
_batch_request = TypeAdapter(list[GraphQLRequest])


@dataclass
class GraphQLBatchRequest:
    """One GraphQL operation or a batch of them."""

    requests: list[GraphQLRequest]
    is_batch: bool = False

    @classmethod
    def parse(cls, payload: Any, max_operations: int) -> "GraphQLBatchRequest":
        """Parse a decoded JSON body.

        Raises:
            InvalidRequestError: If the body is not an operation object or a
                non-empty list of them no longer than ``max_operations``
        """
        if isinstance(payload, list):
            if not payload:
                raise InvalidRequestError("Batch request must contain at least one operation")
            if len(payload) > max_operations:
                raise InvalidRequestError(
                    f"Batch request contains {len(payload)} operations, "
                    f"the limit is {max_operations}"
                )
            try:
                requests = _batch_request.validate_python(payload)
            except PydanticValidationError as e:
                raise InvalidRequestError(_describe(e)) from e
            return cls(requests=requests, is_batch=True)

        if isinstance(payload, dict):
            try:
                request = _single_request.validate_python(payload)
            except PydanticValidationError as e:
                raise InvalidRequestError(_describe(e)) from e
            return cls(requests=[request])

        raise InvalidRequestError("Request body must be a JSON object or array")

    async def execute(
        self, schema: strawberry.Schema, context: dict[str, Any]
    ) -> "GraphQLBatchResponse":
        """Execute every operation concurrently, keeping request order."""
        results = await asyncio.gather(
            *(
                schema.execute(
                    request.query,
                    variable_values=request.variables,
                    context_value=context,
                    operation_name=request.operation_name,
                )
                for request in self.requests
            )
        )
        return GraphQLBatchResponse(results=list(results), is_batch=self.is_batch)


@dataclass
class GraphQLBatchResponse:
    """Execution results for a single request or a batch."""

    results: list[ExecutionResult]
    is_batch: bool = False

    def is_ok(self) -> bool:
        """True when no result in the batch carries errors."""
        return not any(result.errors for result in self.results)

    def to_payload(self) -> dict[str, Any] | list[dict[str, Any]]:
        payloads = [format_result(result) for result in self.results]
        if self.is_batch:
            return payloads
        return payloads[0]

    def into_response(self) -> JSONResponse:
        """Map the batch to an HTTP response: 400 if any errors, 200 otherwise."""
        if not self.is_ok():
            return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=self.to_payload())
        return JSONResponse(content=self.to_payload())


def format_result(result: ExecutionResult) -> dict[str, Any]:
    """Serialize one execution result in the GraphQL response format.

    When execution never started (parse or validation failure) the response
    carries only ``errors``. Those errors have no ``path``; errors raised by
    resolvers do, and keep ``"data": null`` alongside them.
    """
    payload: dict[str, Any] = {}
    if result.data is not None or not _is_request_error(result):
        payload["data"] = result.data
    if result.errors:
        payload["errors"] = [error.formatted for error in result.errors]
    return payload


def _is_request_error(result: ExecutionResult) -> bool:
    return bool(result.errors) and all(error.path is None for error in result.errors)


def error_response(message: str) -> JSONResponse:
    """Build a 400 response for a request that could not be executed at all."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"errors": [{"message": message}]},
    )


def _describe(error: PydanticValidationError) -> str:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"])
    if location:
        return f"Invalid GraphQL request: {location}: {first['msg']}"
    return f"Invalid GraphQL request: {first['msg']}"
