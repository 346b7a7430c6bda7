"""
A tournament made of one or more linked brackets.

A player who is in several brackets (say, a group stage and then the final
bracket) is counted once, with the highest score they earned in any of them.
"""
import logging
from collections import namedtuple
from typing import Dict, Iterable, List, Sequence, Tuple

from .bracket import Bracket
from .models import Player, Scene
from .scenes import aggregate_scenes, sort_scenes

logger = logging.getLogger(__name__)

# The already-fetched data for one bracket: its slug, the bracket record from
# the tournament service and the decoded config file attached to it.
BracketPayload = namedtuple('BracketPayload', ['slug', 'tournament', 'config'])


def best_player_scores(brackets: Iterable[Bracket]) -> List[Player]:
    """Return one player per (name, scene) holding their highest points in any bracket."""
    best: Dict[Tuple[str, str], Player] = {}
    for bracket in brackets:
        for player in bracket.all_players():
            current = best.get(player.key)
            if current is None:
                current = best[player.key] = Player(player.name, player.scene)
                current.points = player.points
            elif player.points > current.points:
                current.points = player.points
    return list(best.values())


class Tournament:
    def __init__(self):
        self.brackets: List[Bracket] = []
        self.scenes: List[Scene] = []

    def add_bracket(self, bracket: Bracket) -> None:
        self.brackets.append(bracket)

    @property
    def max_players_to_count(self) -> int:
        # Every bracket must use the same value, so the first one is used
        return self.brackets[0].config.max_players_to_count

    def calculate_points(self) -> List[Scene]:
        """Score every bracket, then total the scenes. Returns the sorted scenes."""
        if not self.brackets:
            raise ValueError("The tournament has no brackets")

        for bracket in self.brackets:
            bracket.calculate_points()
            if bracket.config.max_players_to_count != self.max_players_to_count:
                logger.warning(
                    "Bracket %s counts %d players per scene, but the first bracket counts %d; using %d",
                    bracket.slug, bracket.config.max_players_to_count,
                    self.max_players_to_count, self.max_players_to_count
                )

        players = best_player_scores(self.brackets)
        self.scenes = sort_scenes(aggregate_scenes(players, self.max_players_to_count))
        return self.scenes

    def load(self, payloads: Sequence[BracketPayload]) -> List[Scene]:
        """
        Build every bracket of a chain and rank the scenes.

        Any invalid bracket aborts the whole chain; there are no partial results.
        """
        if not payloads:
            raise ValueError("No brackets to load")

        # Loading replaces whatever chain was loaded before
        self.brackets = []
        self.scenes = []

        for payload in payloads:
            self.add_bracket(Bracket.from_payload(payload.slug, payload.tournament, payload.config))

        for line in self.scenes_summary():
            logger.info(line)

        return self.calculate_points()

    def scenes_summary(self) -> List[str]:
        """One line per scene naming the players that are in it."""
        members: Dict[str, List[str]] = {}
        for bracket in self.brackets:
            for player in bracket.all_players():
                names = members.setdefault(player.scene, [])
                if player.name not in names:
                    names.append(player.name)
        return [f"Scene {scene} has {len(names)} players: {', '.join(names)}" for scene, names in members.items()]
