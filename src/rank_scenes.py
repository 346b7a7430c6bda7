#!/usr/bin/env python3
"""
Scene ranking tool

Reads the saved data for a tournament's brackets, follows the
`next_bracket` chain from the given bracket, and prints how many points
each scene earned.

Usage:
    python src/rank_scenes.py <slug>
    python src/rank_scenes.py <slug> --data-dir /path/to/data --verbose

Exit codes:
    0: Success
    1: The tournament data is invalid
    2: Saved data for a bracket is missing
"""
import argparse
import logging
import os
import sys

from scoring.errors import ScoringError, SnapshotNotFound
from scoring.scenes import format_scene
from scoring.snapshots import SnapshotStore
from scoring.tournament import Tournament


def default_data_dir():
    script_dir = os.path.dirname(__file__)
    base_dir = os.path.dirname(script_dir)
    return os.environ.get('SCENE_RANKINGS_DATA_DIR', os.path.join(base_dir, 'data'))


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Rank the scenes of a tournament.')
    parser.add_argument('slug', help='Slug of the first bracket of the tournament')
    parser.add_argument('--data-dir', default=default_data_dir(),
                        help='Directory that holds the saved bracket data')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Print how the points were calculated')
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING,
                        format='%(message)s')

    store = SnapshotStore(args.data_dir)
    try:
        payloads = store.load_chain(args.slug)
        scenes = Tournament().load(payloads)
    except SnapshotNotFound as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)
    except ScoringError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if not scenes:
        print("No players were found in the team lists.")
        return

    for scene in scenes:
        print(format_scene(scene))


if __name__ == '__main__':
    main()
