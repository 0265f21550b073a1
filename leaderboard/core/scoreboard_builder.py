"""Assemble tournament and scoreboard structures from the source documents.

Pipeline per tournament:
    HTML -> HtmlAdapter --+
                          +-> merge -> decompose_columns / decompose_row -> dict
    JSON -> JsonAdapter --+

The result is plain dicts and lists, ready for json.dump or for the
entity layer (Tournament, Scoreboard).
"""

import logging

from .column_decomposer import decompose_columns
from .data_merger import merge
from .models import ScoreboardConfig, TournamentDocuments, coerce_id
from .row_decomposer import decompose_row
from ..adapters.html_adapter import HtmlAdapter
from ..adapters.json_adapter import JsonAdapter

logger = logging.getLogger(__name__)


def build_tournament(html: str, json_text: str, tournament_id, fetched_round_id) -> dict:
    """Build one tournament dict from its HTML and JSON documents.

    Args:
        html: Rendered leaderboard HTML.
        json_text: JSON scoring payload.
        tournament_id: Id recorded in the tournament meta and on each row.
        fetched_round_id: Round the documents were fetched for.

    Returns:
        {'meta': {'tournament_id', 'name', 'cut_text', 'adjusted', 'rounds'},
         'columns': {'summary': [...], 'rounds': [...]},
         'rows': [...]}

    Raises:
        ValueError: if a document is blank.
        ValidationError: if a document is malformed or the two disagree.
    """
    tournament_id = coerce_id(tournament_id)
    html_table = HtmlAdapter(html).parse()
    payload = JsonAdapter(json_text).parse()

    merged = merge(html_table, payload, fetched_round_id)
    columns = decompose_columns(html_table.columns, payload.rounds)

    rows = []
    for merged_row in merged.rows:
        row = decompose_row(merged_row, columns)
        row['tournament_id'] = tournament_id
        rows.append(row)

    meta = merged.tournament_meta
    logger.info("Built tournament %s (%s): %d columns, %d rows",
                tournament_id, meta.name, len(html_table.columns), len(rows))

    return {
        'meta': {
            'tournament_id': tournament_id,
            'name': meta.name,
            'cut_text': meta.cut_text,
            'adjusted': meta.adjusted,
            'rounds': [r.to_dict() for r in meta.rounds],
        },
        'columns': columns,
        'rows': rows,
    }


def build_scoreboard(config: ScoreboardConfig, documents: list[TournamentDocuments]) -> dict:
    """Build every tournament of one event round.

    Tournaments are independent; they are built in the order given.

    Returns:
        {'meta': {'event_id', 'event_name', 'round_id', 'round_name'},
         'tournaments': [tournament dict, ...]}
    """
    tournaments = [
        build_tournament(doc.html, doc.json, doc.tournament_id, config.round_id)
        for doc in documents
    ]
    logger.info("Built scoreboard for event %s round %s: %d tournaments",
                config.event_id, config.round_id, len(tournaments))

    return {
        'meta': {
            'event_id': config.event_id,
            'event_name': config.event_name,
            'round_id': config.round_id,
            'round_name': config.round_name,
        },
        'tournaments': tournaments,
    }
