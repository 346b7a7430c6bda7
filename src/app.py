"""
Flask web application for Scene Rankings.
"""
import os
from flask import Flask, render_template, jsonify, abort
from scoring.errors import ScoringError, SnapshotNotFound
from scoring.snapshots import SnapshotStore
from scoring.tournament import Tournament

app = Flask(__name__)

BASE_DIR = os.path.dirname(os.path.dirname(__file__))
DATA_DIR = os.environ.get('SCENE_RANKINGS_DATA_DIR', os.path.join(BASE_DIR, 'data'))


def get_store() -> SnapshotStore:
    """Snapshot store for the configured data directory."""
    return SnapshotStore(DATA_DIR)


def load_tournament_names() -> dict:
    """Map each registered tournament slug to its display name."""
    return {t['slug']: t.get('name', t['slug']) for t in get_store().load_tournaments() if 'slug' in t}


def rank_tournament(slug):
    """Load the bracket chain that starts at `slug` and rank its scenes."""
    payloads = get_store().load_chain(slug)
    tournament = Tournament()
    scenes = tournament.load(payloads)
    app.logger.info(f'Ranked {len(scenes)} scenes for {slug} from {len(payloads)} brackets')
    return tournament, scenes


@app.route('/')
def index():
    """List the registered tournaments."""
    tournaments = get_store().load_tournaments()
    return render_template('index.html', tournaments=tournaments)


@app.route('/tournaments/<slug>')
def tournament_page(slug):
    """Scene rankings of one tournament."""
    try:
        tournament, scenes = rank_tournament(slug)
    except SnapshotNotFound as e:
        app.logger.warning(str(e))
        abort(404)
    except ScoringError as e:
        app.logger.error(f'Failed to rank {slug}: {e}')
        return render_template('rankings.html', slug=slug, name=load_tournament_names().get(slug, slug),
                               scenes=[], brackets=[], error=str(e)), 422

    return render_template('rankings.html', slug=slug, name=load_tournament_names().get(slug, slug),
                           scenes=scenes, brackets=[b.slug for b in tournament.brackets], error=None)


@app.route('/api/tournaments/<slug>/rankings')
def api_rankings(slug):
    """Scene rankings of one tournament as JSON."""
    try:
        _tournament, scenes = rank_tournament(slug)
    except SnapshotNotFound as e:
        return jsonify({'error': str(e)}), 404
    except ScoringError as e:
        app.logger.error(f'Failed to rank {slug}: {e}')
        return jsonify({'error': str(e), 'kind': type(e).__name__}), 422

    return jsonify({'slug': slug, 'scenes': [scene.to_dict() for scene in scenes]})


if __name__ == '__main__':
    app.run(debug=True, port=5000)
