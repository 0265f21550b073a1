"""One player or team on the leaderboard.

A Row wraps a decomposed row dict and answers the questions display
code asks: who is this (names, affiliations), where do they stand
(position, cut/withdrawn/...), how far along is the current round, and
what goes in each table cell.

Cell values follow a few display rules on top of the raw data:
  - withdrawn players show their score for completed rounds, 'WD' in
    the round they withdrew during, and nothing for later rounds; their
    summary strokes read 'WD' and summary to-par is blank
  - a round value that is blank for a round the player never started
    is None
"""

import re
from functools import cached_property

from .cell import Cell
from .column import Column
from .scorecard import Scorecard
from ..core.affiliation_parser import parse_affiliation
from ..core.models import coerce_id
from ..core.name_parser import parse_name

CUT_POSITIONS = ('CUT', 'MC')
WITHDREW_POSITIONS = ('WD',)
DISQUALIFIED_POSITIONS = ('DQ',)
NO_SHOW_POSITIONS = ('NS',)
NO_CARD_POSITIONS = ('NC',)
ELIMINATED_POSITIONS = (CUT_POSITIONS + WITHDREW_POSITIONS + DISQUALIFIED_POSITIONS
                        + NO_SHOW_POSITIONS + NO_CARD_POSITIONS)

WD = 'WD'
STROKES_RE = re.compile(r'^\d+$')


def _one_or_many(values: list):
    """None for no values, the value itself for one, the list for a team."""
    if not values:
        return None
    return values[0] if len(values) == 1 else values


def _blank(value) -> bool:
    return value is None or not str(value).strip()


class Row:
    """Read-only view of one decomposed row, owned by a Tournament."""

    def __init__(self, data: dict, tournament):
        self._data = data
        self.tournament = tournament

    # ─── Identity ───────────────────────────────────────────────────

    @property
    def id(self):
        return self._data.get('id')

    @property
    def name(self) -> str:
        return self._data.get('name')

    @property
    def full_name(self) -> str:
        return self.name

    @property
    def tournament_id(self):
        return self._data.get('tournament_id')

    @property
    def player_ids(self) -> list[str]:
        return self._data.get('player_ids') or []

    @property
    def affiliation(self):
        """Raw affiliation text: None, a string, or a list for teams."""
        return self._data.get('affiliation')

    @property
    def is_below_cut_line(self) -> bool:
        return bool(self._data.get('cut'))

    @cached_property
    def players(self) -> list:
        """Parsed Names, one per player, each with its parsed Affiliation."""
        parsed = parse_name(self.name)
        if parsed is None:
            return []
        names = parsed if isinstance(parsed, list) else [parsed]

        affiliations = self._parse_affiliations()
        for i, name in enumerate(names):
            name.affiliation = affiliations[i] if i < len(affiliations) else None
        return names

    @property
    def first_name(self):
        return _one_or_many([p.first_name for p in self.players])

    @property
    def last_name(self):
        return _one_or_many([p.last_name for p in self.players])

    @property
    def affiliations(self) -> list:
        return [p.affiliation for p in self.players if p.affiliation is not None]

    @property
    def affiliation_full(self):
        return _one_or_many([a.full for a in self.affiliations])

    @property
    def affiliation_city(self):
        return _one_or_many([a.city for a in self.affiliations])

    @property
    def affiliation_state(self):
        return _one_or_many([a.state for a in self.affiliations])

    def _parse_affiliations(self) -> list:
        raw = self.affiliation
        if raw is None:
            return []
        if isinstance(raw, list):
            return [parse_affiliation(a) for a in raw]
        return [parse_affiliation(raw)]

    # ─── Standing ───────────────────────────────────────────────────

    @property
    def position(self):
        """Value of the row's position cell: '1', 'T2', 'CUT', 'WD' or None."""
        cell = next((c for c in self.cells if c.column.format == 'position'), None)
        return cell.value if cell is not None else None

    def _position_in(self, codes) -> bool:
        pos = self.position
        if pos is None:
            return False
        return str(pos).strip().upper() in codes

    @property
    def is_cut(self) -> bool:
        return self._position_in(CUT_POSITIONS)

    @property
    def is_withdrawn(self) -> bool:
        return self._position_in(WITHDREW_POSITIONS)

    @property
    def is_disqualified(self) -> bool:
        return self._position_in(DISQUALIFIED_POSITIONS)

    @property
    def is_no_show(self) -> bool:
        return self._position_in(NO_SHOW_POSITIONS)

    @property
    def is_no_card(self) -> bool:
        return self._position_in(NO_CARD_POSITIONS)

    @property
    def is_eliminated(self) -> bool:
        return self._position_in(ELIMINATED_POSITIONS)

    @property
    def is_competing(self) -> bool:
        return not self.is_eliminated

    # ─── Current round progress ─────────────────────────────────────

    def _current_scorecard(self) -> Scorecard | None:
        current = self.tournament.rounds.current
        if current is None:
            return None
        return self.scorecard(current.id)

    @property
    def is_playing(self) -> bool:
        card = self._current_scorecard()
        return card is not None and card.is_playing

    @property
    def is_finished(self) -> bool:
        card = self._current_scorecard()
        return card is not None and card.is_finished

    @property
    def is_not_started(self) -> bool:
        card = self._current_scorecard()
        return card is not None and card.is_not_started

    # ─── Rounds ─────────────────────────────────────────────────────

    @property
    def summary(self) -> dict:
        return self._data.get('summary') or {}

    @cached_property
    def rounds(self) -> dict:
        """round_id -> Scorecard, for the rounds this row has data in."""
        return {
            coerce_id(round_id): Scorecard(round_data)
            for round_id, round_data in (self._data.get('rounds') or {}).items()
        }

    def scorecard(self, round_id) -> Scorecard | None:
        return self.rounds.get(coerce_id(round_id))

    @property
    def scorecards(self) -> list[Scorecard]:
        return list(self.rounds.values())

    @property
    def elimination_round_id(self):
        """Round in which an eliminated player's tournament ended, else None.

        For a withdrawal, the latest round with hole scores (the round
        they walked off in). Otherwise the latest round with progress.
        Assumes round ids grow with play order.
        """
        if not self.is_eliminated:
            return None

        if self.is_withdrawn:
            started = [rid for rid, card in self.rounds.items() if card.has_hole_scores]
            if started:
                return max(started)

        played = [rid for rid, card in self.rounds.items() if not _blank(card.thru)]
        return max(played) if played else None

    @property
    def elimination_round(self):
        round_id = self.elimination_round_id
        if round_id is None:
            return None
        return self.tournament.rounds.find(round_id)

    # ─── Cells ──────────────────────────────────────────────────────

    @cached_property
    def cells(self) -> list[Cell]:
        """One Cell per tournament column, in column order."""
        cells = []
        for column in self.tournament.columns:
            value = self._cell_value(column)
            cells.append(Cell(value, column, to_par=self._to_par(column, value)))
        return cells

    def _cell_value(self, column: Column):
        key = column.key

        if column.is_round:
            card = self.scorecard(column.round_id)
            if card is None:
                return None
            if self._withdrew_raw() and column.is_strokes:
                return self._withdrawn_round_strokes(card)

            value = card.get(key)
            if not _blank(value):
                return value
            if card.is_not_started:
                return None
            return value

        if self._withdrew_raw():
            if column.is_to_par:
                return None
            if column.is_strokes:
                return WD
        return self.summary.get(key)

    @staticmethod
    def _withdrawn_round_strokes(card: Scorecard):
        total = card.get('total')
        if not _blank(total) and STROKES_RE.match(str(total).strip()):
            return total
        if card.has_hole_scores:
            return WD
        return None

    def _withdrew_raw(self) -> bool:
        # Reads the summary directly; position itself is computed from cells
        pos = self.summary.get('position')
        return pos is not None and str(pos).strip().upper() in WITHDREW_POSITIONS

    def _to_par(self, column: Column, value) -> int | None:
        if column.is_to_par:
            return parse_to_par(value)
        if column.is_strokes and column.is_round:
            card = self.scorecard(column.round_id)
            return card.total_to_par if card is not None else None
        if column.is_strokes and column.is_summary:
            values = [c.total_to_par for c in self.scorecards if c.total_to_par is not None]
            return sum(values) if values else None
        return None

    def to_dict(self) -> dict:
        return self._data

    def __repr__(self):
        return f"Row(id={self.id!r}, name={self.name!r})"


def parse_to_par(value) -> int | None:
    """'E' -> 0, '-3' -> -3, '+5' -> 5; anything else None."""
    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    if text.upper() == 'E':
        return 0
    try:
        return int(text)
    except ValueError:
        return None
