"""Tests for affiliation parsing and US state lookup."""

import pytest

from leaderboard.core.affiliation_parser import parse_affiliation
from leaderboard.core.us_states import STATES, find_state


class TestParseAffiliation:
    def test_city_and_state_code(self):
        aff = parse_affiliation('Columbus, OH')
        assert aff.city == 'Columbus'
        assert aff.state == 'OH'
        assert aff.state_name == 'Ohio'
        assert aff.full == 'Columbus, OH'
        assert aff.has_state

    def test_city_and_state_name(self):
        aff = parse_affiliation('Louisville, Kentucky')
        assert aff.city == 'Louisville'
        assert aff.state == 'KY'
        assert aff.state_name == 'Kentucky'

    def test_lowercase_state(self):
        assert parse_affiliation('Columbus, oh').state == 'OH'

    def test_club_without_state(self):
        aff = parse_affiliation('Scioto Country Club')
        assert aff.city == 'Scioto Country Club'
        assert aff.state is None
        assert aff.state_name is None
        assert not aff.has_state

    def test_unrecognized_state_kept_raw(self):
        aff = parse_affiliation('Toronto, ON')
        assert aff.city == 'Toronto'
        assert aff.state_code == 'ON'
        assert aff.state_name is None
        assert aff.has_state

    def test_extra_parts_ignored(self):
        aff = parse_affiliation('Dublin, OH, USA')
        assert aff.city == 'Dublin'
        assert aff.state == 'OH'
        assert aff.full == 'Dublin, OH, USA'

    def test_surrounding_whitespace(self):
        aff = parse_affiliation('  Tampa , FL ')
        assert aff.city == 'Tampa'
        assert aff.state == 'FL'
        assert aff.raw == 'Tampa , FL'

    @pytest.mark.parametrize('raw', [None, '', '  '])
    def test_blank_returns_none(self, raw):
        assert parse_affiliation(raw) is None

    def test_immutable(self):
        aff = parse_affiliation('Columbus, OH')
        with pytest.raises(AttributeError):
            aff.city = 'Dayton'


class TestFindState:
    def test_by_code(self):
        assert find_state('oh') == ('OH', 'Ohio')

    def test_by_name(self):
        state = find_state('new york')
        assert state.code == 'NY'
        assert state.name == 'New York'

    def test_district_of_columbia(self):
        assert find_state('District of Columbia').code == 'DC'

    @pytest.mark.parametrize('value', [None, '', 'ON', 'Ontario', 'O'])
    def test_unknown(self, value):
        assert find_state(value) is None

    def test_table_size(self):
        # 50 states plus DC
        assert len(STATES) == 51
