"""A tournament leaderboard: metadata, columns, rows, and sorting."""

import copy
from functools import cached_property, cmp_to_key

from .column import Column
from .row import CUT_POSITIONS, Row
from .rounds import Rounds

SORT_KEYS = ('competing', 'position', 'last_name')
DEFAULT_SORT = ('competing', 'position')
DIRECTIONS = ('asc', 'desc')


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def _leading_int(text: str) -> int:
    digits = ''
    for ch in text:
        if not ch.isdigit():
            break
        digits += ch
    return int(digits) if digits else 0


def position_sort_value(position) -> tuple:
    """Sort tier and value for a position.

    (1, n)    numeric and tied positions: '1', 'T2' -> (1, 2)
    (2, code) missed cut: 'CUT', 'MC'
    (3, text) anything else, including WD/DQ/NS/NC and blanks
    """
    if position is None or not str(position).strip():
        return (3, '')

    pos = str(position).strip().upper()
    if pos in CUT_POSITIONS:
        return (2, pos)

    if pos.startswith('T'):
        n = _leading_int(pos[1:])
        if n > 0:
            return (1, n)

    n = _leading_int(pos)
    if n > 0:
        return (1, n)

    return (3, pos)


def _sort_text(value) -> str:
    if isinstance(value, list):
        return ' '.join(str(v) for v in value)
    return '' if value is None else str(value)


def compare_strings(a, b) -> int:
    """Case-insensitive; blank values sort after everything else."""
    a_text, b_text = _sort_text(a).strip(), _sort_text(b).strip()
    if not a_text and not b_text:
        return 0
    if not a_text:
        return 1
    if not b_text:
        return -1
    return _cmp(a_text.lower(), b_text.lower())


def _compare(key: str, a: Row, b: Row) -> int:
    if key == 'position':
        return _cmp(position_sort_value(a.position), position_sort_value(b.position))
    if key == 'last_name':
        return compare_strings(a.last_name, b.last_name)
    if key == 'competing':
        # Competing rows first
        return _cmp(not a.is_competing, not b.is_competing)
    raise ValueError(f"Unknown sort key: {key}")


class Tournament:
    """Read-only view of one assembled tournament dict.

    The dict has 'meta', 'columns' and 'rows' sections; see
    scoreboard_builder.build_tournament for the layout.
    """

    def __init__(self, data: dict):
        self._data = data

    @property
    def meta(self) -> dict:
        return self._data.get('meta') or {}

    @property
    def id(self):
        return self.meta.get('tournament_id')

    @property
    def name(self) -> str | None:
        return self.meta.get('name')

    @property
    def cut_text(self) -> str | None:
        return self.meta.get('cut_text')

    @property
    def is_adjusted(self) -> bool:
        return bool(self.meta.get('adjusted'))

    @cached_property
    def rounds(self) -> Rounds:
        return Rounds(self.meta.get('rounds') or [])

    @cached_property
    def columns(self) -> list[Column]:
        """Summary columns followed by each round's columns, in round order."""
        structure = self._data.get('columns') or {}
        columns = [Column(c) for c in structure.get('summary') or []]
        for round_struct in structure.get('rounds') or []:
            columns.extend(Column(c) for c in round_struct.get('columns') or [])
        return columns

    @cached_property
    def rows(self) -> list[Row]:
        return [Row(r, self) for r in self._data.get('rows') or []]

    @property
    def has_cut_players(self) -> bool:
        return any(row.is_eliminated for row in self.rows)

    def sort(self, *keys, direction: str = 'asc') -> 'Tournament':
        """Return a new Tournament with its rows sorted; this one is unchanged.

        Args:
            *keys: Any of 'competing', 'position', 'last_name'. Later keys
                break ties of earlier ones. Defaults to competing, position.
            direction: 'asc' or 'desc', applied to every key.

        Raises:
            ValueError: on an unknown key or direction.
        """
        keys = keys or DEFAULT_SORT
        for key in keys:
            if key not in SORT_KEYS:
                raise ValueError(f"Unknown sort key: {key}")
        if direction not in DIRECTIONS:
            raise ValueError(f"Unknown sort direction: {direction}")

        sign = -1 if direction == 'desc' else 1

        def compare_rows(a: Row, b: Row) -> int:
            for key in keys:
                result = sign * _compare(key, a, b)
                if result != 0:
                    return result
            return 0

        sorted_rows = sorted(self.rows, key=cmp_to_key(compare_rows))

        data = {k: v for k, v in self._data.items() if k != 'rows'}
        data = copy.deepcopy(data)
        data['rows'] = [copy.deepcopy(row.to_dict()) for row in sorted_rows]
        return Tournament(data)

    def to_dict(self) -> dict:
        return self._data

    def __repr__(self):
        return f"Tournament(id={self.id!r}, name={self.name!r}, rows={len(self.rows)})"
