from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .errors import InvalidPlayOrder
from .validation import validate_config


class Team:
    def __init__(self, id, name, final_rank=None):
        self.id = id
        self.name = name
        self.final_rank = final_rank  # Only set once the bracket is finalized
        self.points = 0

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Team":
        return cls(id=record['id'], name=record['name'], final_rank=record.get('final_rank'))

    def __repr__(self):
        return f"Team(id={self.id}, name={self.name}, points={self.points})"


class Player:
    def __init__(self, name, scene):
        self.name = name
        self.scene = scene
        self.points = 0

    @property
    def key(self) -> Tuple[str, str]:
        """Identity of the player across every bracket of a tournament."""
        return (self.name, self.scene)

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Player":
        return cls(name=record['name'], scene=record['scene'])

    def __repr__(self):
        return f"Player(name={self.name}, scene={self.scene}, points={self.points})"


@dataclass(frozen=True)
class Match:
    id: Any
    state: str
    play_order: int
    team1_id: Any
    team2_id: Any
    points: float
    winner_id: Any = None
    loser_id: Any = None

    @classmethod
    def from_record(cls, record: Dict[str, Any], match_values: Sequence[float]) -> "Match":
        """Build an elimination-stage match; its value comes from its play order."""
        play_order = record['suggested_play_order']
        if not isinstance(play_order, int) or isinstance(play_order, bool) \
                or not 1 <= play_order <= len(match_values):
            raise InvalidPlayOrder(record.get('id'), play_order, len(match_values))
        return cls(
            id=record['id'],
            state=record.get('state'),
            play_order=play_order,
            team1_id=record.get('player1_id'),
            team2_id=record.get('player2_id'),
            points=match_values[play_order - 1],
            winner_id=record.get('winner_id'),
            loser_id=record.get('loser_id'),
        )

    def has_team(self, team_id) -> bool:
        return self.team1_id == team_id or self.team2_id == team_id


@dataclass(frozen=True)
class Scene:
    name: str
    score: float
    num_players: int
    num_dropped: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'score': self.score,
            'num_players': self.num_players,
            'num_dropped': self.num_dropped,
        }


@dataclass(frozen=True)
class BracketConfig:
    base_point_value: float
    final_bracket: bool
    max_players_to_count: int
    match_values: Tuple[float, ...]
    teams: List[Dict[str, Any]] = field(default_factory=list)
    next_bracket: Optional[str] = None

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "BracketConfig":
        """Validate a decoded config file and build the config from it."""
        validate_config(raw)
        return cls(
            base_point_value=raw['base_point_value'],
            final_bracket=raw['final_bracket'],
            max_players_to_count=raw['max_players_to_count'],
            match_values=tuple(raw['match_values']),
            teams=list(raw.get('teams') or []),
            next_bracket=raw.get('next_bracket') or None,
        )
