from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ...players import PlayerStore

if TYPE_CHECKING:
    from ..types.player import Player

logger = get_logger(__name__)


def get_store_from_info(info: strawberry.Info) -> PlayerStore:
    """Get the shared player store from the GraphQL context."""
    return info.context["store"]


async def resolve_players(info: strawberry.Info) -> list[Player]:
    from ..types.player import Player as PlayerType

    store = get_store_from_info(info)
    return [PlayerType.from_record(record) for record in store.list()]


async def resolve_player_by_id(info: strawberry.Info, id: str) -> Player | None:
    """
    Resolve a player by its ID.

    A missing player resolves to null rather than an error.
    """
    from ..types.player import Player as PlayerType

    record = get_store_from_info(info).get(id)
    if record is None:
        logger.info("Player not found", player_id=id)
        return None

    return PlayerType.from_record(record)
