"""
Shared pytest fixtures for scene ranking tests.

Running tests:
    pytest tests/

The `four_team_bracket` fixture is a complete 4-team double-elimination
bracket worth [1, 1, 2, 2] points per match:

    play order 1: A vs B, B wins
    play order 2: C vs D, C wins
    play order 3: B vs D, D wins
    play order 4: C vs D, D wins (last match)

so A earns 1 point, B 2, C 2 and D 3 (2 plus 1 for winning the tournament).
"""
import pytest
import sys
import os

# Add src directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from scoring.snapshots import SnapshotStore

TEAM_A, TEAM_B, TEAM_C, TEAM_D = 101, 102, 103, 104


def _players(prefix, scenes):
    return [{'name': f'{prefix}{i + 1}', 'scene': scene} for i, scene in enumerate(scenes)]


@pytest.fixture
def make_match():
    """Build a match record the way the tournament service returns it."""
    def _make_match(id, play_order, player1_id, player2_id, winner_id=None,
                    state='complete', attachment_count=0):
        loser_id = None
        if winner_id is not None:
            loser_id = player2_id if winner_id == player1_id else player1_id
        return {'match': {
            'id': id,
            'state': state,
            'suggested_play_order': play_order,
            'player1_id': player1_id,
            'player2_id': player2_id,
            'winner_id': winner_id,
            'loser_id': loser_id,
            'attachment_count': attachment_count,
        }}
    return _make_match


@pytest.fixture
def four_team_roster():
    """Team list for the 4-team bracket, 5 players per team."""
    return [
        {'name': 'Team A', 'players': _players('a', ['Seattle', 'Seattle', 'Seattle', 'Portland', 'Portland'])},
        {'name': 'Team B', 'players': _players('b', ['Seattle', 'Seattle', 'Vancouver', 'Vancouver', 'Vancouver'])},
        {'name': 'Team C', 'players': _players('c', ['Portland'] * 5)},
        {'name': 'Team D', 'players': _players('d', ['Vancouver', 'Vancouver', 'Seattle', 'Seattle', 'Seattle'])},
    ]


@pytest.fixture
def four_team_config(four_team_roster):
    """Config file attached to the 4-team bracket."""
    return {
        'base_point_value': 0,
        'final_bracket': True,
        'max_players_to_count': 3,
        'match_values': [1, 1, 2, 2],
        'teams': four_team_roster,
    }


@pytest.fixture
def four_team_bracket(make_match):
    """Bracket record of a finished 4-team double-elimination bracket."""
    return {
        'state': 'complete',
        'tournament_type': 'double elimination',
        'participants': [
            {'participant': {'id': TEAM_A, 'name': 'Team A', 'final_rank': 4}},
            {'participant': {'id': TEAM_B, 'name': 'Team B', 'final_rank': 3}},
            {'participant': {'id': TEAM_C, 'name': 'Team C', 'final_rank': 2}},
            {'participant': {'id': TEAM_D, 'name': 'Team D', 'final_rank': 1}},
        ],
        'matches': [
            make_match(1, 1, TEAM_A, TEAM_B, winner_id=TEAM_B, attachment_count=1),
            make_match(2, 2, TEAM_C, TEAM_D, winner_id=TEAM_C),
            make_match(3, 3, TEAM_B, TEAM_D, winner_id=TEAM_D),
            make_match(4, 4, TEAM_C, TEAM_D, winner_id=TEAM_D),
        ],
    }


@pytest.fixture
def data_dir(tmp_path, four_team_bracket, four_team_config):
    """Data directory holding the saved 4-team bracket as "finals"."""
    store = SnapshotStore(str(tmp_path))
    store.save_bracket('finals', four_team_bracket, four_team_config)
    store.save_tournaments([{'slug': 'finals', 'name': 'Spring Finals'}])
    return str(tmp_path)
