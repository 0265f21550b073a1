"""A single leaderboard value paired with its column."""

import re

from .column import Column

SCORED_RE = re.compile(r'^[+-]?\d+$')

# Position codes meaning the player is no longer competing
NON_SCORING_CODES = {'CUT', 'MC', 'WD', 'DQ', 'NS', 'NC'}


class Cell:
    """A cell value, its Column, and (where known) its score relative to par."""

    def __init__(self, value, column: Column, to_par: int | None = None):
        self.value = value
        self.column = column
        self.to_par = to_par

    @property
    def is_scored(self) -> bool:
        """Value is an integer score such as '72', '-3' or '+5'."""
        if self.value is None:
            return False
        return bool(SCORED_RE.match(str(self.value).strip()))

    @property
    def is_non_scoring(self) -> bool:
        if self.value is None:
            return False
        return str(self.value).strip().upper() in NON_SCORING_CODES

    @property
    def display_value(self):
        """Scored to-par values as 'E', '+N' or '-N'; anything else unchanged."""
        if not (self.column.is_to_par and self.is_scored):
            return self.value

        n = int(str(self.value).strip())
        if n == 0:
            return 'E'
        if n > 0:
            return f"+{n}"
        return str(n)

    @property
    def is_under_par(self) -> bool:
        return self.to_par is not None and self.to_par < 0

    @property
    def is_over_par(self) -> bool:
        return self.to_par is not None and self.to_par > 0

    @property
    def is_even_par(self) -> bool:
        return self.to_par is not None and self.to_par == 0

    @property
    def type(self) -> str:
        return self.column.type

    @property
    def is_summary(self) -> bool:
        return self.column.is_summary

    @property
    def is_round(self) -> bool:
        return self.column.is_round

    @property
    def is_position(self) -> bool:
        return self.column.is_position

    @property
    def is_player(self) -> bool:
        return self.column.is_player

    @property
    def is_to_par(self) -> bool:
        return self.column.is_to_par

    @property
    def is_strokes(self) -> bool:
        return self.column.is_strokes

    @property
    def is_thru(self) -> bool:
        return self.column.is_thru

    def to_dict(self) -> dict:
        return {'value': self.value, 'column': self.column.to_dict()}

    def __str__(self) -> str:
        return '' if self.value is None else str(self.value)

    def __repr__(self):
        return f"Cell(value={self.value!r}, column={self.column.key!r})"
