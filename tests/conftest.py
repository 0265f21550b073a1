"""Shared fixtures: the reference leaderboard HTML and a matching scoring payload.

The HTML lives in reference_data/leaderboard.html. The JSON payload is
built here so its hole-by-hole arrays stay consistent with the round
totals shown in the HTML.

Field (three rounds, R3 in progress and fetched):
    1001 Scottie Jones            playing R3, thru 12
    1002 Robert F. Gerwin II (a)  finished R3
    1003 Christy, Aaron           finished R3
    1004 Abel Ferrer + Kyle Tracey  team, not started R3
    --- cut line ---
    1005 Cut Player               CUT after R2
    1006 Dan Smith Jr             WD during R2, after 9 holes
    1007 Joe Doe                  DQ after R1
"""

import json
import os
import sys

import pytest

# Add project root to path
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

from leaderboard.core.scoreboard_builder import build_tournament
from leaderboard.entities.tournament import Tournament

REFERENCE_DIR = os.path.join(PROJECT_ROOT, 'tests', 'reference_data')

TOURNAMENT_ID = 4522280
FETCHED_ROUND_ID = 103

PAR = [4, 4, 3, 5, 4, 4, 3, 4, 5] * 2

ROUNDS = [
    {'id': 101, 'name': 'R1', 'date': '2026-03-15', 'in_progress': False},
    {'id': 102, 'name': 'R2', 'date': '2026-03-16', 'in_progress': False},
    {'id': 103, 'name': 'R3', 'date': '2026-03-17', 'in_progress': True},
]

# aggregate id -> (member ids, {round_id: (thru, total, status, holes played, to par)})
FIELD = {
    1001: (['5001'], {
        101: ('F', '68', 'completed', 18, -4),
        102: ('F', '69', 'completed', 18, -3),
        103: ('12', '', 'partial', 12, -2),
    }),
    1002: (['5002'], {
        101: ('F', '70', 'completed', 18, -2),
        102: ('F', '71', 'completed', 18, -1),
        103: ('F', '68', 'completed', 18, -4),
    }),
    1003: (['5003'], {
        101: ('F', '72', 'completed', 18, 0),
        102: ('F', '69', 'completed', 18, -3),
        103: ('F', '68', 'completed', 18, -4),
    }),
    1004: ('5005,5004', {
        101: ('F', '71', 'completed', 18, -1),
        102: ('F', '71', 'completed', 18, -1),
        103: ('', '', 'no_holes', 0, 0),
    }),
    1005: (['5006'], {
        101: ('F', '75', 'completed', 18, 3),
        102: ('F', '87', 'completed', 18, 15),
        103: ('', '', 'no_holes', 0, 0),
    }),
    1006: (['5007'], {
        101: ('F', '74', 'completed', 18, 2),
        102: ('9', 'WD', 'partial', 9, 3),
    }),
    1007: (['5008'], {
        101: ('F', '80', 'completed', 18, 8),
        102: ('', 'DQ', 'no_holes', 0, 0),
    }),
}


def format_to_par(n: int) -> str:
    return 'E' if n == 0 else f"{n:+d}"


def hole_scores(played: int, to_par: int) -> dict:
    """Hole arrays for a round: all over par on the first hole, par afterwards."""
    gross = list(PAR[:played])
    if gross:
        gross[0] += to_par
    padding = [None] * (18 - played)
    to_par_gross = [g - p for g, p in zip(gross, PAR)]

    return {
        'gross_scores': gross + padding,
        'net_scores': gross + padding,
        'to_par_gross': to_par_gross + padding,
        'to_par_net': to_par_gross + padding,
        'totals': {
            'gross_scores': {
                'out': sum(gross[:9]) if played >= 9 else None,
                'in': sum(gross[9:]) if played == 18 else None,
                'total': sum(gross) if played == 18 else None,
            },
        },
    }


def build_aggregate(agg_id, member_ids, rounds: dict) -> dict:
    # member_ids arrive as a list under member_ids_str, or as a comma string under member_ids
    key = 'member_ids' if isinstance(member_ids, str) else 'member_ids_str'
    entry = {'id': agg_id, key: member_ids, 'rounds': [], 'previous_rounds_scores': []}

    for round_id, (thru, total, status, played, to_par) in rounds.items():
        entry['rounds'].append({
            'id': round_id,
            'thru': thru,
            'score': format_to_par(to_par) if played else '',
            'total': total,
            'scorecard_statuses': [{'status': status}],
        })
        scores = hole_scores(played, to_par)
        if round_id == FETCHED_ROUND_ID:
            entry.update(scores)
        else:
            entry['previous_rounds_scores'].append({'round_id': round_id, **scores})

    return entry


def build_payload() -> dict:
    aggregates = [build_aggregate(agg_id, *FIELD[agg_id]) for agg_id in FIELD]
    return {
        'name': 'Overall Results',
        'adjusted': False,
        'rounds': [dict(r) for r in ROUNDS],
        # Players who made the cut and those who didn't sit in separate scopes
        'scopes': [
            {'aggregates': aggregates[:4]},
            {'aggregates': aggregates[4:]},
        ],
    }


@pytest.fixture(scope='session')
def leaderboard_html():
    with open(os.path.join(REFERENCE_DIR, 'leaderboard.html'), 'r', encoding='utf-8') as f:
        return f.read()


@pytest.fixture(scope='session')
def scoring_json():
    return json.dumps(build_payload())


@pytest.fixture(scope='module')
def tournament_data(leaderboard_html, scoring_json):
    """Build the reference tournament once per test module."""
    return build_tournament(leaderboard_html, scoring_json, TOURNAMENT_ID, FETCHED_ROUND_ID)


@pytest.fixture(scope='module')
def tournament(tournament_data):
    return Tournament(tournament_data)


@pytest.fixture
def row(tournament):
    """Look up a row of the reference tournament by id."""
    rows = {r.id: r for r in tournament.rows}
    return rows.__getitem__
