"""
Flask application factory for the interpreter service.
"""

import logging
import os

from flask import Flask, jsonify, send_from_directory
from flask_cors import CORS
from flask_socketio import SocketIO

from . import __version__, config, database
from .api import interpreter_api, register_socketio_handlers
from .translator import DEFAULT_SENTENCES, ISLInterpreter, SentenceMatcher

logger = logging.getLogger(__name__)


def _prepare_database(db_path):
    """Create tables and load the demo data when the store is empty."""
    database.init_db(db_path)

    if not database.get_supported_sentences(db_path=db_path):
        count = database.seed_supported_sentences(DEFAULT_SENTENCES, db_path=db_path)
        logger.info(f"Seeded {count} supported sentences")

    signs_json = config.PATHS['signs_json']
    if not database.get_all_signs(db_path=db_path) and os.path.exists(signs_json):
        database.import_signs_from_json(signs_json, db_path=db_path)


def create_app(db_path=None, interpreter=None, videos_dir=None):
    """
    Build the Flask app and its SocketIO server.

    Args:
        db_path: SQLite database path. If None, uses config.
        interpreter: Pre-built ISLInterpreter (tests). Built from the
            database catalog if None.
        videos_dir: Directory of locally downloaded sign videos served
            under /videos. If None, uses config.

    Returns:
        Tuple of (app, socketio)
    """
    db_path = db_path or config.PATHS['signs_db']
    videos_dir = videos_dir or config.PATHS['videos_dir']

    app = Flask(__name__)
    app.config['SECRET_KEY'] = config.SERVER_CONFIG['secret_key']
    app.config['ISL_DB_PATH'] = db_path

    CORS(app, resources={r"/*": {"origins": config.CORS_ORIGINS}})

    try:
        _prepare_database(db_path)
        logger.info("✓ Database initialized")
    except Exception as e:
        logger.error(f"✗ Database initialization failed: {e}")

    if interpreter is None:
        records = []
        try:
            records = database.get_supported_sentences(db_path=db_path)
        except Exception as e:
            logger.warning(f"Supported sentences unavailable, using built-in catalog: {e}")
        matcher = SentenceMatcher.from_records(records) if records else SentenceMatcher()
        interpreter = ISLInterpreter(db_path=db_path, matcher=matcher)

    app.config['ISL_INTERPRETER'] = interpreter

    app.register_blueprint(interpreter_api, url_prefix=config.SERVER_CONFIG['api_prefix'])

    socketio = SocketIO(app, cors_allowed_origins=config.CORS_ORIGINS)
    register_socketio_handlers(socketio, interpreter)

    # Health check
    @app.route('/health', methods=['GET'])
    def health():
        """Health check for monitoring"""
        return jsonify({
            'status': 'healthy',
            'service': 'isl-interpreter',
            'version': __version__
        })

    # Status endpoint
    @app.route('/status', methods=['GET'])
    def status():
        """Detailed status"""
        try:
            stats = database.get_sign_stats(db_path=db_path)
        except Exception as e:
            logger.error(f"Failed to read sign stats: {e}")
            stats = None

        return jsonify({
            'status': 'operational',
            'service': 'isl-interpreter',
            'signs': stats,
            'supported_sentences': len(interpreter.matcher),
            'cached_videos': len(interpreter.cache),
            'endpoints': {
                'api': config.SERVER_CONFIG['api_prefix'],
                'health': '/health'
            }
        })

    # Local sign videos (URLs written by scripts/import_wlasl.py)
    @app.route('/videos/<path:filename>', methods=['GET'])
    def sign_video(filename):
        return send_from_directory(videos_dir, filename)

    # Error handlers
    @app.errorhandler(404)
    def not_found(error):
        return jsonify({'error': 'Not found'}), 404

    @app.errorhandler(500)
    def internal_error(error):
        logger.error(f"Internal error: {error}")
        return jsonify({'error': 'Internal server error'}), 500

    return app, socketio
