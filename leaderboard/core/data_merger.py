"""Merge the parsed HTML table with the parsed JSON scoring payload.

The HTML side is authoritative for layout (rows, cells, cut line), the
JSON side for scoring (rounds, hole-by-hole scores). Before anything is
merged, both sides must describe the same leaderboard: every HTML row
needs a JSON aggregate with the same set of member ids.
"""

import logging

from .errors import ValidationError
from .models import (
    Aggregate, AggregateRound, HtmlTable, MergedData, MergedRow, RawRow,
    RoundScores, ScoringPayload, TournamentMeta, coerce_id,
)

logger = logging.getLogger(__name__)


def merge(html_table: HtmlTable, payload: ScoringPayload, fetched_round_id) -> MergedData:
    """Validate and merge both sources into per-row records.

    Args:
        html_table: Output of HtmlAdapter.parse().
        payload: Output of JsonAdapter.parse().
        fetched_round_id: The round the JSON payload was fetched for. Its
            scores are the aggregate's top-level arrays; every other round
            comes from previous_rounds_scores.

    Returns:
        MergedData with tournament_meta and one MergedRow per HTML row.

    Raises:
        ValidationError: if a row has no aggregate or the member ids differ.
    """
    validate(html_table, payload)

    fetched_round_id = coerce_id(fetched_round_id)
    meta = TournamentMeta(
        name=payload.name,
        adjusted=payload.adjusted,
        rounds=payload.rounds,
        cut_text=html_table.cut_text,
    )
    rows = [
        _merge_row(row, payload.aggregates[row.id], payload, fetched_round_id)
        for row in html_table.rows
    ]

    logger.debug("Merged %d rows across %d rounds", len(rows), len(payload.rounds))
    return MergedData(tournament_meta=meta, rows=rows)


def validate(html_table: HtmlTable, payload: ScoringPayload) -> None:
    """Raise ValidationError unless every HTML row matches a JSON aggregate."""
    for row in html_table.rows:
        aggregate = payload.aggregates.get(row.id)
        if aggregate is None:
            raise ValidationError(
                f"HTML row {row.id} ({row.name}) has no matching JSON row data")

        html_ids = sorted(row.player_ids)
        json_ids = sorted(aggregate.member_ids)
        if html_ids != json_ids:
            raise ValidationError(
                f"Player ID mismatch for row {row.id} ({row.name}): "
                f"HTML has {html_ids}, JSON has {json_ids}")


def _merge_row(row: RawRow, aggregate: Aggregate, payload: ScoringPayload,
               fetched_round_id) -> MergedRow:
    rounds = {}
    for round_meta in payload.rounds:
        round_data = aggregate.rounds.get(round_meta.id)
        if round_data is None:
            continue

        if round_meta.id == fetched_round_id:
            scores = aggregate.current_round_scores
        else:
            scores = aggregate.previous_rounds_scores.get(round_meta.id)
        if scores is None:
            continue

        rounds[round_meta.id] = {'scorecard': _build_scorecard(round_data, scores)}

    return MergedRow(
        id=row.id,
        name=row.name,
        player_ids=row.player_ids,
        affiliation=row.affiliation,
        cut=row.cut,
        cells=row.cells,
        rounds=rounds,
    )


def _build_scorecard(round_data: AggregateRound, scores: RoundScores) -> dict:
    return {
        'thru': round_data.thru,
        'score': round_data.score,
        'status': round_data.status,
        'gross_scores': list(scores.gross_scores),
        'net_scores': list(scores.net_scores),
        'to_par_gross': list(scores.to_par_gross),
        'to_par_net': list(scores.to_par_net),
        'totals': dict(scores.totals),
    }
