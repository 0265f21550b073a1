"""A leaderboard column: its label, format, and the round it belongs to."""

import logging
from functools import cached_property

logger = logging.getLogger(__name__)

POSITION = 'position'
PLAYER = 'player'
THRU = 'thru'
TO_PAR = 'to_par'
STROKES = 'strokes'
OTHER = 'other'

# Column format -> column type
FORMAT_TYPES = {
    'position': POSITION,
    'player': PLAYER,
    'thru': THRU,
    'to-par-gross': TO_PAR,
    'to-par-net': TO_PAR,
    'total-to-par-gross': TO_PAR,
    'total-to-par-net': TO_PAR,
    'round-total': STROKES,
    'total-gross': STROKES,
    'total-net': STROKES,
    'total': STROKES,
}


class Column:
    """Read-only view of one decomposed column dict.

    Summary columns ('Pos', 'Player', 'Total') have no round_id; round
    columns ('R1', 'Thru R2') carry the id and name of their round.
    """

    def __init__(self, data: dict):
        self._data = data

    @property
    def key(self) -> str:
        return self._data.get('key')

    @property
    def format(self) -> str:
        return self._data.get('format')

    @property
    def label(self) -> str:
        return self._data.get('label')

    @property
    def index(self) -> int:
        return self._data.get('index')

    @property
    def round_id(self):
        return self._data.get('round_id')

    @property
    def round_name(self) -> str | None:
        return self._data.get('round_name')

    @cached_property
    def type(self) -> str:
        """One of position, player, thru, to_par, strokes, other."""
        fmt = (self.format or '').strip().lower()
        if fmt in FORMAT_TYPES:
            return FORMAT_TYPES[fmt]

        if fmt:
            logger.warning("Unknown column format: %r", self.format)
        return OTHER

    @property
    def is_summary(self) -> bool:
        return self.round_id is None

    @property
    def is_round(self) -> bool:
        return self.round_id is not None

    @property
    def is_position(self) -> bool:
        return self.type == POSITION

    @property
    def is_player(self) -> bool:
        return self.type == PLAYER

    @property
    def is_thru(self) -> bool:
        return self.type == THRU

    @property
    def is_to_par(self) -> bool:
        return self.type == TO_PAR

    @property
    def is_strokes(self) -> bool:
        return self.type == STROKES

    def to_dict(self) -> dict:
        return self._data

    def __repr__(self):
        return f"Column(key={self.key!r}, label={self.label!r}, round_id={self.round_id!r})"
