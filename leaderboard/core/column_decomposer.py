"""Split leaderboard columns into summary columns and per-round columns.

A column belongs to a round when its data-name matches a round name
exactly, or else when its label contains a round name ("Thru R2" -> R2).
Label matching takes the first round, in round order, whose name is a
substring of the label. Everything else is a summary column.
"""

import re

from .models import RawColumn, RoundMeta


def decompose_columns(columns: list[RawColumn], rounds: list[RoundMeta]) -> dict:
    """Decompose raw header columns using the tournament's round metadata.

    Returns:
        {'summary': [column, ...],
         'rounds': [{'id', 'name', 'in_progress', 'columns': [column, ...]}, ...]}

        where each column is {'key', 'format', 'label', 'index', 'round_id',
        'round_name'} and index is the column's position in the HTML row.
        Every round is listed, in round order, even without columns.
    """
    names_to_ids = {r.name: r.id for r in rounds if r.name}
    rounds_by_id = {r.id: r for r in rounds}

    summary = []
    by_round: dict = {}

    for index, col in enumerate(columns):
        round_id = _identify_round(col, rounds, names_to_ids)
        if round_id is None:
            summary.append(_build_column(col, index, None, None))
        else:
            round_name = rounds_by_id[round_id].name
            by_round.setdefault(round_id, []).append(
                _build_column(col, index, round_id, round_name))

    return {
        'summary': summary,
        'rounds': [
            {
                'id': r.id,
                'name': r.name,
                'in_progress': r.in_progress,
                'columns': by_round.get(r.id, []),
            }
            for r in rounds
        ],
    }


def _identify_round(col: RawColumn, rounds: list[RoundMeta], names_to_ids: dict):
    if col.round_name and col.round_name in names_to_ids:
        return names_to_ids[col.round_name]

    # "R1" also matches inside "R10"; round order decides
    label = col.label or ''
    for r in rounds:
        if r.name and r.name in label:
            return r.id

    return None


def _build_column(col: RawColumn, index: int, round_id, round_name) -> dict:
    return {
        'key': column_key(col.format, round_scoped=round_id is not None),
        'format': col.format,
        'label': col.label,
        'index': index,
        'round_id': round_id,
        'round_name': round_name,
    }


def column_key(fmt: str, round_scoped: bool = False) -> str:
    """Lookup key for a column format.

    'total-to-par-gross' -> 'total_to_par_gross'
    'round-total' (round column) -> 'total', already namespaced by round id
    """
    key = (fmt or '').replace('-', '_')
    if round_scoped:
        key = re.sub(r'^round_', '', key)
    return key
