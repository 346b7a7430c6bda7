"""
Associates the config file's team list with the teams in a bracket.

The same master team list may be attached to every bracket of a tournament,
so teams that aren't in a bracket are skipped rather than rejected.
"""
import logging
from typing import Any, Dict, Iterable, List, Optional

from .errors import InvalidConfigValue, InvalidTeamSize
from .models import Player, Team

logger = logging.getLogger(__name__)

TEAM_SIZE = 5


def find_team(teams: Iterable[Team], name: str) -> Optional[Team]:
    """Find the bracket team with this name, ignoring case."""
    wanted = name.casefold()
    for team in teams:
        if team.name.casefold() == wanted:
            return team
    return None


def bind_roster(roster: List[Dict[str, Any]], teams: Dict[Any, Team]) -> Dict[Any, List[Player]]:
    """
    Build the player list of every roster team that is in the bracket.

    Returns a dict of team ID -> players. Raises InvalidTeamSize naming every
    bound team that doesn't have exactly 5 players.
    """
    players = {}
    invalid_teams = []

    for roster_team in roster:
        team = find_team(teams.values(), roster_team['name'])
        if team is None:
            logger.info("Skipping a team that isn't in the bracket: %s", roster_team['name'])
            continue

        if team.id in players:
            raise InvalidConfigValue('teams', roster_team['name'],
                                     f'the team list names "{team.name}" more than once')

        team_players = [Player.from_record(p) for p in roster_team.get('players') or []]
        players[team.id] = team_players

        logger.info(
            "%s (ID %s) has: %s", team.name, team.id,
            ', '.join(f"{p.name} ({p.scene})" for p in team_players)
        )

        if len(team_players) != TEAM_SIZE:
            invalid_teams.append(team.name)

    if invalid_teams:
        raise InvalidTeamSize(invalid_teams)

    return players
