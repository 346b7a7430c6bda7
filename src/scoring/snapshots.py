"""
Saved tournament-service data, read from a local data directory.

A separate fetcher saves what the tournament service returns for each
bracket; this module only reads those files (and writes them for the
fetcher), it never talks to the network. Layout of the data directory:

    tournaments.yaml              registry of tournaments: [{slug, name}]
    <slug>_tournament.json        {"tournament": {state, tournament_type,
                                   participants: [...], matches: [...]}}
    <slug>_config_file.json       config file attached to the bracket
"""
import json
import logging
import os
from typing import Any, Dict, List

import yaml
from filelock import FileLock

from .errors import AmbiguousAttachment, BracketChainCycle, SnapshotNotFound
from .tournament import BracketPayload

logger = logging.getLogger(__name__)

LOCK_TIMEOUT = 10


def count_config_attachments(tournament: Dict[str, Any]) -> int:
    # By convention the config file is the only attachment of the first
    # match, but any match with exactly one attachment is accepted.
    count = 0
    for record in tournament.get('matches') or []:
        match = record.get('match', record)
        if match.get('attachment_count') == 1:
            count += 1
    return count


class SnapshotStore:
    def __init__(self, data_dir: str):
        self.data_dir = data_dir
        self._lock = FileLock(os.path.join(data_dir, '.lock'), timeout=LOCK_TIMEOUT)

    def tournament_path(self, slug: str) -> str:
        return os.path.join(self.data_dir, f'{slug}_tournament.json')

    def config_path(self, slug: str) -> str:
        return os.path.join(self.data_dir, f'{slug}_config_file.json')

    @property
    def registry_path(self) -> str:
        return os.path.join(self.data_dir, 'tournaments.yaml')

    def _read_json(self, slug: str, path: str):
        if not os.path.exists(path):
            raise SnapshotNotFound(slug, path)
        logger.debug("Using the saved response from %s", path)
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)

    def _write_json(self, path: str, data) -> None:
        tmp_path = f'{path}.tmp'
        with open(tmp_path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2)
        os.replace(tmp_path, path)

    def load_bracket(self, slug: str) -> BracketPayload:
        """Read the saved data for one bracket."""
        if not os.path.exists(self.tournament_path(slug)):
            raise SnapshotNotFound(slug, self.tournament_path(slug))

        with self._lock:
            response = self._read_json(slug, self.tournament_path(slug))
            tournament = response.get('tournament', response)

            attachments = count_config_attachments(tournament)
            if attachments != 1:
                raise AmbiguousAttachment(slug, attachments)

            config = self._read_json(slug, self.config_path(slug))

        return BracketPayload(slug=slug, tournament=tournament, config=config)

    def save_bracket(self, slug: str, tournament: Dict[str, Any], config: Dict[str, Any]) -> None:
        """Save one bracket's data the way the fetcher does."""
        os.makedirs(self.data_dir, exist_ok=True)
        with self._lock:
            self._write_json(self.tournament_path(slug), {'tournament': tournament})
            self._write_json(self.config_path(slug), config)

    def load_chain(self, first_slug: str) -> List[BracketPayload]:
        """Read a bracket and every bracket that follows it via `next_bracket`."""
        payloads = []
        seen = set()
        slug = first_slug

        while slug:
            if slug in seen:
                raise BracketChainCycle(slug)
            seen.add(slug)

            payload = self.load_bracket(slug)
            payloads.append(payload)
            slug = payload.config.get('next_bracket')
            if slug:
                logger.info("Bracket %s continues in bracket %s", payload.slug, slug)

        return payloads

    def load_tournaments(self) -> list:
        """Load the tournament registry from YAML."""
        if not os.path.exists(self.registry_path):
            return []
        try:
            with open(self.registry_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
            return data.get('tournaments', []) if data else []
        except (yaml.YAMLError, AttributeError) as e:
            logger.warning(f'Failed to parse {self.registry_path}: {e}')
            return []

    def save_tournaments(self, tournaments: list) -> None:
        os.makedirs(self.data_dir, exist_ok=True)
        with self._lock:
            with open(self.registry_path, 'w', encoding='utf-8') as f:
                yaml.dump({'tournaments': tournaments}, f, default_flow_style=False)
