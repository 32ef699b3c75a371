"""
Root GraphQL query definitions
"""

import strawberry

from ..types.player import Player


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field(description="Add two numbers a and b")
    def add(self, a: int, b: int) -> int:
        from ..resolvers.basic import resolve_add

        return resolve_add(a, b)

    @strawberry.field(description="Get the hello message")
    def hello(self) -> str:
        from ..resolvers.basic import resolve_hello

        return resolve_hello()

    @strawberry.field(description="Get every player in the roster")
    async def players(self, info: strawberry.Info) -> list[Player]:
        from ..resolvers.player import resolve_players

        return await resolve_players(info)

    @strawberry.field(description="Get a player by ID")
    async def player(self, info: strawberry.Info, id: str) -> Player | None:
        from ..resolvers.player import resolve_player_by_id

        return await resolve_player_by_id(info, id)
