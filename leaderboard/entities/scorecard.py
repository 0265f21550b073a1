"""One player's progress and hole-by-hole scores in one round.

Round progress states (mutually exclusive):
    finished     thru 'F', a completed/verified/complete status, or a blank
                 thru with a total present (older rounds never had their
                 progress filled in)
    not_started  not finished, and thru blank
    playing      neither, with thru a hole count ('9', '12')
"""

import re

FINISHED_STATUSES = {'completed', 'verified', 'complete'}

HOLE_COUNT_RE = re.compile(r'^\d+$')


def _first_present(*values):
    for value in values:
        if value is not None:
            return value
    return None


def _blank(value) -> bool:
    return value is None or not str(value).strip()


class Scorecard:
    """Wraps a row's round dict: column values plus the nested 'scorecard'.

    thru, score and status prefer the JSON scorecard and fall back to the
    values taken from the HTML round columns.
    """

    def __init__(self, data: dict):
        self._data = data or {}
        self._card = self._data.get('scorecard') or {}

    def _field(self, key):
        return _first_present(self._card.get(key), self._data.get(key))

    def _array(self, key) -> list:
        value = self._field(key)
        return value if isinstance(value, list) else []

    @property
    def thru(self):
        return self._field('thru')

    @property
    def score(self):
        return self._field('score')

    @property
    def status(self):
        return self._field('status')

    @property
    def total(self):
        return self._data.get('total')

    @property
    def gross_scores(self) -> list:
        return self._array('gross_scores')

    @property
    def net_scores(self) -> list:
        return self._array('net_scores')

    @property
    def to_par_gross(self) -> list:
        return self._array('to_par_gross')

    @property
    def to_par_net(self) -> list:
        return self._array('to_par_net')

    @property
    def totals(self) -> dict:
        return self._field('totals') or {}

    @property
    def total_to_par(self) -> int | None:
        """Sum of the played holes' to-par values, or None if none were played."""
        values = [v for v in self.to_par_gross if v is not None]
        if not values:
            return None
        return sum(values)

    @property
    def has_hole_scores(self) -> bool:
        return any(s is not None for s in self.gross_scores)

    @property
    def is_finished(self) -> bool:
        thru = '' if self.thru is None else str(self.thru).strip()
        if thru == 'F':
            return True
        if str(self.status or '').lower() in FINISHED_STATUSES:
            return True
        return thru == '' and self._has_score_data()

    @property
    def is_not_started(self) -> bool:
        if self.is_finished:
            return False
        return _blank(self.thru)

    @property
    def is_playing(self) -> bool:
        if self.is_finished or self.is_not_started:
            return False
        return bool(HOLE_COUNT_RE.match(str(self.thru).strip()))

    def get(self, key, default=None):
        """Round value by column key ('total', 'thru')."""
        return self._data.get(key, default)

    def __getitem__(self, key):
        return self._data.get(key)

    def to_dict(self) -> dict:
        return self._data

    def _has_score_data(self) -> bool:
        return not _blank(self._data.get('total'))
