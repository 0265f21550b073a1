"""Data models for the leaderboard reconciliation pipeline.

Each pipeline stage hands the next one typed records instead of loose
dicts. The decomposers turn the merged records into the plain nested
tournament structure the entity layer reads.
"""

from dataclasses import asdict, dataclass, field

from .errors import ValidationError


def coerce_id(value):
    """Normalize an identifier so HTML attributes and JSON numbers compare equal.

    '2185971448' -> 2185971448, 101 -> 101, 'abc' -> 'abc', None -> None
    """
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return value


@dataclass
class ScoreboardConfig:
    """Configuration for a single scoreboard build."""
    event_id: str                   # "522157"
    event_name: str | None = None   # "2026 Ohio Amateur"
    round_id: int | str | None = None   # round the JSON payloads were fetched for
    round_name: str | None = None   # "R3"

    def __post_init__(self):
        self.round_id = coerce_id(self.round_id)


@dataclass
class TournamentDocuments:
    """The two source documents fetched for one tournament."""
    tournament_id: int | str
    html: str
    json: str


# ─── HTML side ──────────────────────────────────────────────────────

@dataclass
class RawColumn:
    """One header cell of the leaderboard table."""
    format: str                     # "position", "round-total", "to-par-gross"
    label: str                      # "Pos.", "Thru R2"
    round_name: str | None = None   # from data-name, resolved to a round later


@dataclass
class RawRow:
    """One player/team row of the leaderboard table."""
    id: int | str
    name: str = ''
    player_ids: list[str] = field(default_factory=list)
    affiliation: str | list[str] | None = None
    cells: list[str] = field(default_factory=list)
    cut: bool = False

    def __post_init__(self):
        if self.id is None or str(self.id).strip() == '':
            raise ValidationError("Row missing required data-aggregate-id attribute")
        self.id = coerce_id(self.id)


@dataclass
class HtmlTable:
    columns: list[RawColumn] = field(default_factory=list)
    rows: list[RawRow] = field(default_factory=list)
    cut_text: str | None = None


# ─── JSON side ──────────────────────────────────────────────────────

@dataclass
class RoundMeta:
    """Tournament round metadata. At most one round is normally in progress."""
    id: int | str
    name: str | None = None
    date: str | None = None
    in_progress: bool = False

    def __post_init__(self):
        self.id = coerce_id(self.id)
        self.in_progress = bool(self.in_progress)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class RoundScores:
    """Hole-by-hole arrays and gross totals for one round."""
    gross_scores: list = field(default_factory=list)
    net_scores: list = field(default_factory=list)
    to_par_gross: list = field(default_factory=list)
    to_par_net: list = field(default_factory=list)
    totals: dict = field(default_factory=lambda: {'out': None, 'in': None, 'total': None})


@dataclass
class AggregateRound:
    """Progress of one player/team in one round, as the JSON payload reports it."""
    thru: str | None = None
    score: str | None = None
    total: str | None = None
    status: str | None = None


@dataclass
class Aggregate:
    """One player/team scoring record ("aggregate" in the JSON payload)."""
    id: int | str
    member_ids: list[str] = field(default_factory=list)
    rounds: dict = field(default_factory=dict)                  # round_id -> AggregateRound
    current_round_scores: RoundScores = field(default_factory=RoundScores)
    previous_rounds_scores: dict = field(default_factory=dict)  # round_id -> RoundScores

    def __post_init__(self):
        self.id = coerce_id(self.id)
        self.member_ids = [str(m).strip() for m in self.member_ids]


@dataclass
class ScoringPayload:
    name: str | None = None
    adjusted: bool = False
    rounds: list[RoundMeta] = field(default_factory=list)
    aggregates: dict = field(default_factory=dict)  # id -> Aggregate


# ─── Merged ─────────────────────────────────────────────────────────

@dataclass
class TournamentMeta:
    name: str | None = None
    adjusted: bool = False
    rounds: list[RoundMeta] = field(default_factory=list)
    cut_text: str | None = None


@dataclass
class MergedRow:
    """An HTML row joined with its JSON scorecards.

    rounds maps round_id -> {'scorecard': {...}} for the rounds the
    player has data in; rounds without data are absent.
    """
    id: int | str
    name: str
    player_ids: list[str]
    affiliation: str | list[str] | None
    cut: bool
    cells: list[str]
    rounds: dict = field(default_factory=dict)


@dataclass
class MergedData:
    tournament_meta: TournamentMeta
    rows: list[MergedRow] = field(default_factory=list)
