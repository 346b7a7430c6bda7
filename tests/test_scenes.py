"""
Unit tests for scene totals.
"""
import pytest
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from scoring.models import Player, Scene
from scoring.scenes import aggregate_scenes, format_scene, sort_scenes


def _player(name, scene, points):
    player = Player(name, scene)
    player.points = points
    return player


class TestAggregateScenes:
    """Tests for aggregate_scenes."""

    def test_scores_are_summed(self):
        players = [_player('a', 'Seattle', 2), _player('b', 'Seattle', 3), _player('c', 'Portland', 1)]
        scenes = {s.name: s for s in aggregate_scenes(players, 3)}
        assert scenes['Seattle'] == Scene('Seattle', 5, 2, 0)
        assert scenes['Portland'] == Scene('Portland', 1, 1, 0)

    def test_only_top_scores_count(self):
        """The lowest scores beyond the cap are dropped."""
        players = [_player(str(i), 'Seattle', points) for i, points in enumerate([1, 4, 2, 5, 3])]
        [scene] = aggregate_scenes(players, 3)
        assert scene.score == 12
        assert scene.num_players == 3
        assert scene.num_dropped == 2

    def test_ties_at_the_cap(self):
        players = [_player(str(i), 'Seattle', 2) for i in range(4)]
        [scene] = aggregate_scenes(players, 3)
        assert scene.score == 6
        assert scene.num_players == 3

    @pytest.mark.parametrize('cap', [1, 2, 3, 5, 10])
    def test_num_players_never_exceeds_cap(self, cap):
        players = [_player(str(i), 'Seattle', i) for i in range(6)]
        [scene] = aggregate_scenes(players, cap)
        assert scene.num_players == min(cap, 6)
        assert scene.score == sum(sorted(range(6), reverse=True)[:cap])

    def test_scenes_in_first_seen_order(self):
        players = [_player('a', 'Portland', 1), _player('b', 'Seattle', 1), _player('c', 'Portland', 1)]
        assert [s.name for s in aggregate_scenes(players, 3)] == ['Portland', 'Seattle']

    def test_no_players(self):
        assert aggregate_scenes([], 3) == []

    def test_players_are_not_modified(self):
        players = [_player('a', 'Seattle', 1), _player('b', 'Seattle', 3)]
        aggregate_scenes(players, 1)
        assert [p.points for p in players] == [1, 3]


class TestSortScenes:
    """Tests for sort_scenes."""

    def test_highest_score_first_then_name(self):
        scenes = [Scene('Vancouver', 8, 3), Scene('Portland', 9, 3), Scene('Boise', 8, 3)]
        assert [s.name for s in sort_scenes(scenes)] == ['Portland', 'Boise', 'Vancouver']


class TestFormatScene:
    def test_format(self):
        assert format_scene(Scene('Seattle', 9, 3)) == 'Seattle earned 9 points'
