"""Map a merged row's cell values onto the decomposed column keys.

Also repairs two known defects of the upstream HTML for players who
were cut, disqualified, no-showed or returned no card:
  - an unplayed round repeats the tournament total ('162' in R3 when
    the total is '162')
  - a round total holds the status code ('CUT', 'DQ') instead of a score
Withdrawn players are left alone; Row shows their rounds its own way.
"""

import re

from .models import MergedRow

# The HTML renderer's empty-cell sentinel
EMPTY_CELL = '-'

# Eliminated codes whose rows get round totals cleaned (WD is excluded)
CLEANED_POSITIONS = {'CUT', 'MC', 'DQ', 'NS', 'NC'}

STATUS_CODE_RE = re.compile(r'^(CUT|DQ|MC|NS|NC)$', re.IGNORECASE)


def decompose_row(row: MergedRow, column_structure: dict) -> dict:
    """Decompose one merged row into summary values and per-round values.

    Args:
        row: A MergedRow from data_merger.merge().
        column_structure: Output of decompose_columns().

    Returns:
        {'id', 'name', 'player_ids', 'affiliation', 'cut',
         'summary': {key: value},
         'rounds': {round_id: {key: value, ..., 'scorecard': {...}}}}
    """
    summary = _map_cells(row.cells, column_structure.get('summary') or [])
    clean = _needs_cleaning(summary)

    rounds = {}
    for round_struct in column_structure.get('rounds') or []:
        round_id = round_struct['id']
        values = _map_cells(row.cells, round_struct.get('columns') or [])

        merged = row.rounds.get(round_id)
        if merged is not None and merged.get('scorecard') is not None:
            values['scorecard'] = merged['scorecard']

        if clean:
            _clean_round_values(values, summary)

        if any(_present(v) for v in values.values()):
            rounds[round_id] = values

    return {
        'id': row.id,
        'name': row.name,
        'player_ids': list(row.player_ids),
        'affiliation': row.affiliation,
        'cut': row.cut,
        'summary': summary,
        'rounds': rounds,
    }


def normalize_cell_value(value):
    """'-' placeholders become None; everything else passes through."""
    if value is None:
        return None
    if str(value).strip() == EMPTY_CELL:
        return None
    return value


def _map_cells(cells: list, columns: list[dict]) -> dict:
    values = {}
    for col in columns:
        if col['index'] >= len(cells):
            continue
        value = normalize_cell_value(cells[col['index']])
        if value is not None:
            values[col['key']] = value
    return values


def _needs_cleaning(summary: dict) -> bool:
    position = summary.get('position')
    if position is None:
        return False
    return str(position).strip().upper() in CLEANED_POSITIONS


def _clean_round_values(values: dict, summary: dict) -> None:
    total = values.get('total')
    if total is None:
        return

    total_gross = summary.get('total_gross')
    if total_gross is not None and str(total) == str(total_gross):
        values['total'] = None
        return

    if STATUS_CODE_RE.match(str(total).strip()):
        values['total'] = None


def _present(value) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True
