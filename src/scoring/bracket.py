"""
One bracket of a tournament and the points its teams and players earned.

A team earns the value of the farthest match it reached in the elimination
stage, plus the config's base point value. In the final bracket of a
tournament, the team that wins the last match earns one more point.
"""
import logging
from typing import Any, Dict, List, Sequence

from .errors import TeamHasNoMatches
from .models import BracketConfig, Match, Team
from .roster import bind_roster
from .validation import check_match_value_count

logger = logging.getLogger(__name__)


def _unwrap(record: Dict[str, Any], key: str) -> Dict[str, Any]:
    # Records from the tournament service are wrapped, e.g. {"match": {...}}
    return record.get(key, record)


def elimination_stage_records(match_records: Sequence[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """
    Return the matches that are part of the elimination sequence.

    Matches in the first stage of a two-stage bracket, and a match for 3rd
    place, have no suggested play order and are left out.
    """
    records = [_unwrap(m, 'match') for m in match_records]
    return [m for m in records if m.get('suggested_play_order') is not None]


def score_team(team_id, matches: Sequence[Match], config: BracketConfig, num_matches: int, team_name=None):
    """Return the points that one team earned in a bracket."""
    team_matches = [m for m in matches if m.has_team(team_id)]
    if not team_matches:
        raise TeamHasNoMatches(team_id, team_name)

    logger.debug("Team %s was in %d matches", team_name or team_id, len(team_matches))

    highest_value = max(m.points for m in team_matches)

    # Many matches have the same value, but the one with the largest play
    # order is the farthest that the team advanced in the bracket.
    latest_match = max(
        (m for m in team_matches if m.points == highest_value),
        key=lambda m: m.play_order
    )

    points = highest_value + config.base_point_value

    if config.final_bracket and latest_match.play_order == num_matches and latest_match.winner_id == team_id:
        logger.info("%s gets 1 extra point for winning the tournament", team_name or team_id)
        points += 1

    return points


class Bracket:
    def __init__(self, slug, config: BracketConfig, matches: List[Match], teams: Dict[Any, Team],
                 players: Dict[Any, list], state=None, tournament_type=None):
        self.slug = slug
        self.config = config
        self.matches = sorted(matches, key=lambda m: m.play_order)
        self.teams = teams
        self.players = players
        self.state = state
        self.tournament_type = tournament_type

    @classmethod
    def from_payload(cls, slug, tournament: Dict[str, Any], raw_config: Dict[str, Any]) -> "Bracket":
        """
        Build a bracket from the tournament service's bracket record and the
        decoded config file attached to it.
        """
        config = BracketConfig.from_dict(raw_config)
        state = tournament.get('state')
        tournament_type = tournament.get('tournament_type')

        teams = {}
        for record in tournament.get('participants') or []:
            team = Team.from_record(_unwrap(record, 'participant'))
            teams[team.id] = team

        logger.info(
            "%d teams are in the bracket %s: %s", len(teams), slug,
            ', '.join(f'"{t.name}"' for t in sorted(teams.values(), key=lambda t: t.name))
        )

        elim_records = elimination_stage_records(tournament.get('matches') or [])
        check_match_value_count(len(config.match_values), len(elim_records), state, tournament_type)

        matches = [Match.from_record(r, config.match_values) for r in elim_records]
        for match in matches:
            logger.debug("Match with play order %s has ID %s and is worth %s points",
                         match.play_order, match.id, match.points)

        players = bind_roster(config.teams, teams)

        return cls(slug, config, matches, teams, players, state=state, tournament_type=tournament_type)

    @property
    def num_matches(self) -> int:
        return len(self.matches)

    def calculate_team_points(self) -> Dict[Any, float]:
        """Set the points of every team in the bracket and return them by team ID."""
        team_points = {}
        for team_id, team in self.teams.items():
            team.points = score_team(team_id, self.matches, self.config, self.num_matches, team.name)
            team_points[team_id] = team.points
        return team_points

    def calculate_player_points(self) -> None:
        """Give every player the points that their team earned."""
        for team_id, team in self.teams.items():
            team_players = self.players.get(team_id)
            if team_players is None:
                logger.debug("Team %s has no players in the team list", team.name)
                continue
            for player in team_players:
                logger.debug("Awarding %s points to player %s on team %s", team.points, player.name, team.name)
                player.points = team.points

    def calculate_points(self) -> None:
        self.calculate_team_points()
        self.calculate_player_points()

    def all_players(self):
        for team_players in self.players.values():
            yield from team_players

    def __repr__(self):
        return f"Bracket(slug={self.slug}, teams={len(self.teams)}, matches={len(self.matches)})"
