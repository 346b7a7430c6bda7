"""
Checks that a bracket's config file is complete and agrees with the bracket.

Both checks are pure: they raise on bad input and return nothing otherwise.
"""
from numbers import Number
from typing import Any, Dict

from .errors import InvalidConfigValue, MatchValueCountMismatch, MissingConfigField

REQUIRED_CONFIG_FIELDS = ('base_point_value', 'final_bracket', 'max_players_to_count', 'match_values')

DOUBLE_ELIMINATION = 'double elimination'
COMPLETE = 'complete'


def _is_number(value) -> bool:
    return isinstance(value, Number) and not isinstance(value, bool)


def validate_config(raw: Dict[str, Any]) -> None:
    """Raise if a required key is missing or holds a value that can't be scored."""
    for key in REQUIRED_CONFIG_FIELDS:
        if key not in raw:
            raise MissingConfigField(key)

    base_point_value = raw['base_point_value']
    if not _is_number(base_point_value) or base_point_value < 0:
        raise InvalidConfigValue('base_point_value', base_point_value, 'must be a non-negative number')

    if not isinstance(raw['final_bracket'], bool):
        raise InvalidConfigValue('final_bracket', raw['final_bracket'], 'must be true or false')

    max_players = raw['max_players_to_count']
    if not isinstance(max_players, int) or isinstance(max_players, bool) or max_players < 1:
        raise InvalidConfigValue('max_players_to_count', max_players, 'must be a positive integer')

    match_values = raw['match_values']
    if not isinstance(match_values, list) or not all(_is_number(v) for v in match_values):
        raise InvalidConfigValue('match_values', match_values, 'must be a list of numbers')

    validate_roster(raw.get('teams') or [])


def validate_roster(roster) -> None:
    """Raise if a team or player in the team list lacks a name or a scene."""
    if not isinstance(roster, list):
        raise InvalidConfigValue('teams', roster, 'must be a list of teams')

    for i, team in enumerate(roster):
        field = f'teams[{i}]'
        if not isinstance(team, dict) or not isinstance(team.get('name'), str) or not team['name']:
            raise InvalidConfigValue(field, team, 'every team needs a "name"')

        players = team.get('players') or []
        if not isinstance(players, list):
            raise InvalidConfigValue(f'{field}.players', players, f'the players of team "{team["name"]}" must be a list')

        for j, player in enumerate(players):
            if not isinstance(player, dict):
                raise InvalidConfigValue(f'{field}.players[{j}]', player, f'a player on team "{team["name"]}" is not an object')
            for key in ('name', 'scene'):
                if not isinstance(player.get(key), str) or not player[key]:
                    raise InvalidConfigValue(
                        f'{field}.players[{j}].{key}', player.get(key),
                        f'player {j + 1} on team "{team["name"]}" needs a "{key}"'
                    )


def check_match_value_count(num_values: int, num_matches: int, state: str, tournament_type: str) -> None:
    """
    Check that there is one match value per elimination-stage match.

    A complete double-elimination bracket may have one value more than it has
    matches: its grand final was decided in one match instead of two.
    """
    if num_values == num_matches:
        return
    if state == COMPLETE and tournament_type == DOUBLE_ELIMINATION and num_values == num_matches + 1:
        return
    raise MatchValueCountMismatch(actual=num_values, expected=num_matches)
