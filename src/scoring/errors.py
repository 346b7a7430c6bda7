"""
Errors raised while loading and scoring a tournament.

Every error here means the tournament data is malformed and a human has to
fix the source configuration, so none of them is retried. The offending
identifiers are kept as attributes and repeated in the message.
"""
from typing import List, Optional


class ScoringError(Exception):
    pass


class MissingConfigField(ScoringError):
    def __init__(self, field: str):
        self.field = field
        super().__init__(f'The config file is missing "{field}"')


class InvalidConfigValue(ScoringError):
    def __init__(self, field: str, value, reason: str):
        self.field = field
        self.value = value
        super().__init__(f'The config value "{field}" is invalid ({value!r}): {reason}')


class MatchValueCountMismatch(ScoringError):
    def __init__(self, actual: int, expected: int):
        self.actual = actual
        self.expected = expected
        super().__init__(
            f"match_values in the config file is the wrong size."
            f" The size is {actual}, expected {expected}."
        )


class InvalidTeamSize(ScoringError):
    def __init__(self, team_names: List[str]):
        self.team_names = list(team_names)
        super().__init__(f"These teams don't have 5 players: {', '.join(self.team_names)}")


class TeamHasNoMatches(ScoringError):
    def __init__(self, team_id, team_name: Optional[str] = None):
        self.team_id = team_id
        self.team_name = team_name
        label = f'"{team_name}" (ID {team_id})' if team_name else f"ID {team_id}"
        super().__init__(f"Team {label} isn't in any elimination match")


class AmbiguousAttachment(ScoringError):
    def __init__(self, slug: str, count: int):
        self.slug = slug
        self.count = count
        if count == 0:
            message = f"No attachments were found in the bracket {slug}"
        else:
            message = f"Multiple matches ({count}) have an attachment in the bracket {slug}"
        super().__init__(message)


class SnapshotNotFound(ScoringError):
    def __init__(self, slug: str, path: str):
        self.slug = slug
        self.path = path
        super().__init__(f"No saved data for the bracket {slug}: {path} does not exist")


class BracketChainCycle(ScoringError):
    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(f"The bracket {slug} appears twice in the next_bracket chain")


class InvalidPlayOrder(ScoringError):
    def __init__(self, match_id, play_order, num_values: int):
        self.match_id = match_id
        self.play_order = play_order
        self.num_values = num_values
        super().__init__(
            f"Match {match_id} has play order {play_order!r}, but match_values"
            f" only has values for play orders 1 to {num_values}"
        )
