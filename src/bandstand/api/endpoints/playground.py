"""
GraphQL IDE page
"""

import json
from functools import cache
from importlib import resources
from string import Template

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from ...config import settings

router = APIRouter()

GRAPHQL_ENDPOINT = "/graphql"
SUBSCRIPTIONS_ENDPOINT = "/subscriptions"


@cache
def _load_template(ide: str) -> Template:
    source = resources.files("bandstand.static").joinpath(f"{ide}.html").read_text("utf-8")
    return Template(source)


def playground_source(
    graphql_endpoint: str,
    subscriptions_endpoint: str | None = None,
    ide: str = "playground",
) -> str:
    """Render the IDE page pointed at the given endpoints.

    Args:
        graphql_endpoint: URL the IDE sends queries to
        subscriptions_endpoint: URL for subscriptions, if any
        ide: Which IDE to render ('playground' or 'graphiql')
    """
    return _load_template(ide).substitute(
        graphql_endpoint=json.dumps(graphql_endpoint),
        subscriptions_endpoint=json.dumps(subscriptions_endpoint),
    )


@router.get("/", response_class=HTMLResponse)
async def playground() -> HTMLResponse:
    """Serve the GraphQL IDE."""
    return HTMLResponse(
        playground_source(GRAPHQL_ENDPOINT, SUBSCRIPTIONS_ENDPOINT, ide=settings.graphql_ide)
    )
