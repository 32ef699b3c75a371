"""
Static player roster shared by every request
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum

from .logging import get_logger

logger = get_logger(__name__)


class Instrument(Enum):
    """Instrument a player plays."""

    GUITAR = "guitar"
    PIANO = "piano"


@dataclass(frozen=True)
class PlayerRecord:
    """A single player in the roster."""

    id: str
    name: str
    instrument: Instrument


SEED_PLAYERS: tuple[PlayerRecord, ...] = (
    PlayerRecord(id="1000", name="Steve", instrument=Instrument.GUITAR),
    PlayerRecord(id="1001", name="Maria", instrument=Instrument.PIANO),
    PlayerRecord(id="1002", name="Jonas", instrument=Instrument.GUITAR),
    PlayerRecord(id="1003", name="Aiko", instrument=Instrument.PIANO),
    PlayerRecord(id="1004", name="Dmitri", instrument=Instrument.GUITAR),
    PlayerRecord(id="1005", name="Grace", instrument=Instrument.PIANO),
    PlayerRecord(id="1006", name="Luis", instrument=Instrument.GUITAR),
    PlayerRecord(id="1007", name="Nadia", instrument=Instrument.PIANO),
    PlayerRecord(id="1008", name="Oskar", instrument=Instrument.GUITAR),
    PlayerRecord(id="1009", name="Priya", instrument=Instrument.PIANO),
    PlayerRecord(id="1010", name="Theo", instrument=Instrument.GUITAR),
)


class PlayerStore:
    """Read-only lookup table of players keyed by id.

    Built once at application startup and never mutated afterwards, so a
    single instance is safe to share between concurrent requests.
    """

    def __init__(self, players: Iterable[PlayerRecord]):
        by_id: dict[str, PlayerRecord] = {}
        for player in players:
            if player.id in by_id:
                raise ValueError(f"Duplicate player id: {player.id}")
            by_id[player.id] = player
        self._players = by_id

    @classmethod
    def from_seed(cls) -> "PlayerStore":
        """Build the store from the fixed seed roster."""
        store = cls(SEED_PLAYERS)
        logger.debug("Player store initialized", players=len(store))
        return store

    def get(self, id: str) -> PlayerRecord | None:
        return self._players.get(id)

    def list(self) -> list[PlayerRecord]:
        return list(self._players.values())

    def __len__(self) -> int:
        return len(self._players)

    def __contains__(self, id: object) -> bool:
        return id in self._players

    def __iter__(self) -> Iterator[PlayerRecord]:
        return iter(self._players.values())
