"""All tournaments of one event round."""

from functools import cached_property

from .tournament import Tournament
from ..core.models import coerce_id


class Scoreboard:
    """Read-only view of the event-level dict built by build_scoreboard."""

    def __init__(self, data: dict):
        self._data = data

    @property
    def meta(self) -> dict:
        return self._data.get('meta') or {}

    @property
    def event_id(self):
        return self.meta.get('event_id')

    @property
    def event_name(self) -> str | None:
        return self.meta.get('event_name')

    @property
    def round_id(self):
        return self.meta.get('round_id')

    @property
    def round_name(self) -> str | None:
        return self.meta.get('round_name')

    @cached_property
    def tournaments(self) -> list[Tournament]:
        return [Tournament(t) for t in self._data.get('tournaments') or []]

    def tournament(self, tournament_id) -> Tournament | None:
        tournament_id = coerce_id(tournament_id)
        return next((t for t in self.tournaments if coerce_id(t.id) == tournament_id), None)

    def to_dict(self) -> dict:
        return self._data
