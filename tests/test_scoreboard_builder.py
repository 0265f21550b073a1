"""End-to-end tests: source documents to tournament and scoreboard structures."""

import json

import pytest

from leaderboard.core.errors import ValidationError
from leaderboard.core.models import ScoreboardConfig, TournamentDocuments
from leaderboard.core.scoreboard_builder import build_scoreboard, build_tournament
from leaderboard.entities.scoreboard import Scoreboard
from leaderboard.entities.tournament import Tournament


@pytest.fixture(scope='module')
def config():
    return ScoreboardConfig(event_id='522157', event_name='2026 Ohio Amateur',
                            round_id='103', round_name='R3')


@pytest.fixture(scope='module')
def scoreboard_data(config, leaderboard_html, scoring_json):
    documents = [TournamentDocuments(tournament_id='4522280', html=leaderboard_html, json=scoring_json)]
    return build_scoreboard(config, documents)


class TestBuildTournament:
    def test_sections(self, tournament_data):
        assert set(tournament_data) == {'meta', 'columns', 'rows'}

    def test_meta(self, tournament_data):
        meta = tournament_data['meta']
        assert meta['tournament_id'] == 4522280
        assert meta['name'] == 'Overall Results'
        assert meta['adjusted'] is False
        assert meta['cut_text'] == 'The following players did not make the cut'
        assert meta['rounds'][2] == {
            'id': 103, 'name': 'R3', 'date': '2026-03-17', 'in_progress': True,
        }

    def test_row_count(self, tournament_data):
        assert len(tournament_data['rows']) == 7

    def test_row_sections(self, tournament_data):
        row = tournament_data['rows'][0]
        assert set(row) == {
            'id', 'name', 'player_ids', 'affiliation', 'cut',
            'summary', 'rounds', 'tournament_id',
        }

    def test_string_ids_coerced(self, leaderboard_html, scoring_json):
        data = build_tournament(leaderboard_html, scoring_json, '4522280', '103')
        assert data['meta']['tournament_id'] == 4522280
        card = data['rows'][0]['rounds'][103]['scorecard']
        assert card['thru'] == '12'

    def test_mismatched_documents(self, leaderboard_html, scoring_json):
        payload = json.loads(scoring_json)
        payload['scopes'][1]['aggregates'] = []
        with pytest.raises(ValidationError, match='HTML row 1005 \\(Cut Player\\) has no matching JSON row data'):
            build_tournament(leaderboard_html, json.dumps(payload), 4522280, 103)

    def test_blank_html(self, scoring_json):
        with pytest.raises(ValueError, match='html is required'):
            build_tournament('', scoring_json, 4522280, 103)

    def test_logs_summary(self, leaderboard_html, scoring_json, caplog):
        with caplog.at_level('INFO', logger='leaderboard.core.scoreboard_builder'):
            build_tournament(leaderboard_html, scoring_json, 4522280, 103)
        assert 'Built tournament 4522280 (Overall Results): 8 columns, 7 rows' in caplog.text


class TestBuildScoreboard:
    def test_meta(self, scoreboard_data):
        assert scoreboard_data['meta'] == {
            'event_id': '522157',
            'event_name': '2026 Ohio Amateur',
            'round_id': 103,
            'round_name': 'R3',
        }

    def test_tournaments(self, scoreboard_data):
        assert len(scoreboard_data['tournaments']) == 1
        assert scoreboard_data['tournaments'][0]['meta']['tournament_id'] == 4522280

    def test_no_documents(self, config):
        assert build_scoreboard(config, [])['tournaments'] == []

    def test_multiple_tournaments_in_order(self, config, leaderboard_html, scoring_json):
        documents = [
            TournamentDocuments(tournament_id=2, html=leaderboard_html, json=scoring_json),
            TournamentDocuments(tournament_id=1, html=leaderboard_html, json=scoring_json),
        ]
        data = build_scoreboard(config, documents)
        assert [t['meta']['tournament_id'] for t in data['tournaments']] == [2, 1]


class TestScoreboardEntity:
    def test_accessors(self, scoreboard_data):
        scoreboard = Scoreboard(scoreboard_data)
        assert scoreboard.event_id == '522157'
        assert scoreboard.event_name == '2026 Ohio Amateur'
        assert scoreboard.round_id == 103
        assert scoreboard.round_name == 'R3'
        assert len(scoreboard.tournaments) == 1

    def test_tournament_lookup(self, scoreboard_data):
        scoreboard = Scoreboard(scoreboard_data)
        assert scoreboard.tournament('4522280').name == 'Overall Results'
        assert scoreboard.tournament(4522280) is scoreboard.tournaments[0]
        assert scoreboard.tournament(1) is None

    def test_json_round_trip(self, scoreboard_data):
        # Round ids become string keys in JSON; lookups still work
        data = json.loads(json.dumps(scoreboard_data))
        tournament = Scoreboard(data).tournament(4522280)
        row = next(r for r in tournament.rows if r.id == 1001)
        assert row.scorecard(103).thru == '12'
        assert row.is_playing
        assert row.elimination_round_id is None

    def test_round_trip_elimination_round(self, scoreboard_data):
        data = json.loads(json.dumps(scoreboard_data))
        tournament = Tournament(data['tournaments'][0])
        row = next(r for r in tournament.rows if r.id == 1006)
        assert row.elimination_round_id == 102
        assert row.elimination_round.name == 'R2'
