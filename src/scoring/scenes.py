"""
Scene totals.

A scene's score is the sum of its players' points, but only the highest
`max_players_to_count` scores of each scene are counted.
"""
import logging
from typing import Dict, Iterable, List

from .models import Player, Scene

logger = logging.getLogger(__name__)


def aggregate_scenes(players: Iterable[Player], max_players_to_count: int) -> List[Scene]:
    """Return one Scene per distinct scene, in the order the scenes were first seen."""
    scene_scores: Dict[str, List[float]] = {}
    for player in players:
        scene_scores.setdefault(player.scene, []).append(player.points)

    scenes = []
    for name, scores in scene_scores.items():
        # sorted() is stable, so equal scores keep the players' order
        scores = sorted(scores, reverse=True)
        counted, dropped = scores[:max_players_to_count], scores[max_players_to_count:]

        if dropped:
            logger.info("Dropping the %d lowest scores from %s: %s",
                        len(dropped), name, ', '.join(str(s) for s in dropped))

        scenes.append(Scene(name=name, score=sum(counted), num_players=len(counted), num_dropped=len(dropped)))

    return scenes


def sort_scenes(scenes: Iterable[Scene]) -> List[Scene]:
    """Sort by score, highest first, then by scene name."""
    return sorted(scenes, key=lambda s: (-s.score, s.name))


def format_scene(scene: Scene) -> str:
    return f"{scene.name} earned {scene.score} points"
