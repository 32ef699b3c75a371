"""
Player GraphQL type definitions
"""

from enum import Enum

import strawberry

from ...players import PlayerRecord


@strawberry.enum
class Instrument(Enum):
    """Instrument enumeration."""

    GUITAR = "guitar"
    PIANO = "piano"


@strawberry.type
class Player:
    """Player type for GraphQL API."""

    id: str
    name: str
    instrument: Instrument

    @classmethod
    def from_record(cls, record: PlayerRecord) -> "Player":
        return cls(
            id=record.id,
            name=record.name,
            instrument=Instrument(record.instrument.value),
        )
