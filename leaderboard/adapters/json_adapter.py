"""Adapter for parsing the JSON scoring payload of a tournament."""

import json

from .base import BaseAdapter
from ..core.errors import ValidationError
from ..core.models import (
    Aggregate, AggregateRound, RoundMeta, RoundScores, ScoringPayload, coerce_id,
)


HOLE_ARRAYS = ('gross_scores', 'net_scores', 'to_par_gross', 'to_par_net')


class JsonAdapter(BaseAdapter):
    """Parse tournament metadata and per-player scoring from the JSON payload.

    Aggregates (players or teams) are nested under scopes; they are
    flattened into one dict keyed by aggregate id. The top-level hole
    arrays of an aggregate belong to the round the payload was fetched
    for, earlier rounds are listed under previous_rounds_scores.
    """

    source_name = 'json'

    def __init__(self, json_text: str):
        super().__init__(json_text)
        try:
            self.data = json.loads(json_text)
        except json.JSONDecodeError as e:
            raise ValidationError(f"Invalid JSON in tournament results: {e}") from e

        if not isinstance(self.data, dict):
            raise ValidationError(
                f"Invalid JSON in tournament results: expected an object, "
                f"got {type(self.data).__name__}")

    def parse(self) -> ScoringPayload:
        """Parse the JSON and return name, adjusted flag, rounds and aggregates."""
        return ScoringPayload(
            name=self.data.get('name'),
            adjusted=bool(self.data.get('adjusted') or False),
            rounds=self._parse_rounds(),
            aggregates=self._parse_aggregates(),
        )

    def _parse_rounds(self) -> list[RoundMeta]:
        return [
            RoundMeta(
                id=r.get('id'),
                name=r.get('name'),
                date=r.get('date'),
                in_progress=r.get('in_progress') or False,
            )
            for r in self.data.get('rounds') or []
        ]

    def _parse_aggregates(self) -> dict:
        aggregates = {}
        for scope in self.data.get('scopes') or []:
            for raw in scope.get('aggregates') or []:
                agg = self._parse_aggregate(raw)
                aggregates[agg.id] = agg
        return aggregates

    def _parse_aggregate(self, raw: dict) -> Aggregate:
        member_ids = self._get_field(raw, 'member_ids_str', 'member_ids', default=[])
        if isinstance(member_ids, str):
            member_ids = [m for m in member_ids.split(',') if m.strip()]
        return Aggregate(
            id=raw.get('id'),
            member_ids=list(member_ids),
            rounds={
                coerce_id(r.get('id')): AggregateRound(
                    thru=r.get('thru'),
                    score=r.get('score'),
                    total=r.get('total'),
                    status=self._scorecard_status(r),
                )
                for r in raw.get('rounds') or []
            },
            current_round_scores=self._parse_scores(raw),
            previous_rounds_scores={
                coerce_id(r.get('round_id')): self._parse_scores(r)
                for r in raw.get('previous_rounds_scores') or []
            },
        )

    @staticmethod
    def _scorecard_status(round_data: dict):
        """First scorecard status of the round; all members share one status."""
        statuses = round_data.get('scorecard_statuses') or []
        if not statuses:
            return None
        return statuses[0].get('status')

    @classmethod
    def _parse_scores(cls, raw: dict) -> RoundScores:
        arrays = {key: list(raw.get(key) or []) for key in HOLE_ARRAYS}
        return RoundScores(totals=cls._parse_totals(raw.get('totals')), **arrays)

    @staticmethod
    def _parse_totals(totals) -> dict:
        gross = (totals or {}).get('gross_scores') or {}
        return {
            'out': gross.get('out'),
            'in': gross.get('in'),
            'total': gross.get('total'),
        }

    @staticmethod
    def _get_field(obj: dict, *keys, default=None):
        """Try multiple possible field names, return the first one found."""
        for key in keys:
            if key in obj and obj[key] is not None:
                return obj[key]
        return default
