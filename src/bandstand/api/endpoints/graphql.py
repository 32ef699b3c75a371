"""
GraphQL execution and subscription endpoints
"""

from fastapi import APIRouter, Request, Response

from ...config import settings
from ...graphql.batch import GraphQLBatchRequest, InvalidRequestError, error_response
from ...graphql.schema import schema
from ...logging import get_logger

logger = get_logger(__name__)

router = APIRouter()


@router.post("/graphql")
async def graphql(request: Request) -> Response:
    """Execute a GraphQL request or batch against the schema."""
    try:
        payload = await request.json()
    except ValueError:
        logger.warning("GraphQL request body is not valid JSON")
        return error_response("Request body must be valid JSON")

    try:
        batch = GraphQLBatchRequest.parse(payload, max_operations=settings.max_batch_operations)
    except InvalidRequestError as e:
        logger.warning("Invalid GraphQL request", error=str(e))
        return error_response(str(e))

    context = {
        "request": request,
        "store": request.app.state.player_store,
    }
    response = await batch.execute(schema, context)

    if not response.is_ok():
        logger.info(
            "GraphQL request completed with errors",
            operations=len(batch.requests),
            batch=batch.is_batch,
        )
    return response.into_response()


@router.get("/subscriptions")
async def subscriptions() -> Response:
    """Subscriptions are not supported; the endpoint accepts and does nothing."""
    return Response(status_code=200)
