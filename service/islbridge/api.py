"""
Interpreter API endpoints.

REST endpoints for sign metadata, the supported sentence catalog and
transcript interpretation, plus the WebSocket handler used for live speech.
"""

import logging

from flask import Blueprint, current_app, jsonify, request
from flask_socketio import emit

from . import database

logger = logging.getLogger(__name__)

interpreter_api = Blueprint('interpreter_api', __name__)


def _interpreter():
    return current_app.config['ISL_INTERPRETER']


def _db_path():
    return current_app.config.get('ISL_DB_PATH')


def _text_from_request():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return None, {}
    text = data.get('text')
    if not isinstance(text, str):
        return None, data
    return text, data


# ========== SIGN ENDPOINTS ==========

@interpreter_api.route('/signs', methods=['GET'])
def list_signs():
    """List all signs (word, videoUrl, durationMs, dominantHand)."""
    try:
        signs = database.get_all_signs(db_path=_db_path())
        return jsonify([
            {k: sign[k] for k in ('word', 'videoUrl', 'durationMs', 'dominantHand')}
            for sign in signs
        ])
    except Exception as e:
        logger.error(f"Failed to list signs: {e}")
        return jsonify({'success': False, 'error': str(e)}), 500


@interpreter_api.route('/signs/<word>', methods=['GET'])
def get_sign(word):
    """Lookup a single sign (case-insensitive)."""
    logger.info(f"Fetching sign for: \"{word}\"")
    try:
        sign = database.get_sign_by_word(word, db_path=_db_path())
        if not sign:
            logger.warning(f"Sign for \"{word}\" NOT FOUND.")
            return jsonify({
                'error': 'Not Found',
                'message': f"Sign for word '{word}' not found."
            }), 404

        return jsonify({k: sign[k] for k in ('word', 'videoUrl', 'durationMs', 'dominantHand')})
    except Exception as e:
        logger.error(f"Failed to fetch sign '{word}': {e}")
        return jsonify({'success': False, 'error': str(e)}), 500


@interpreter_api.route('/supported-sentences', methods=['GET'])
def list_supported_sentences():
    """List the glosses the interpreter can play and their sign words."""
    try:
        matcher = _interpreter().matcher
        return jsonify([
            {'gloss': gloss, 'words': matcher.match(gloss)}
            for gloss in matcher.supported_glosses()
        ])
    except Exception as e:
        return jsonify({'success': False, 'error': str(e)}), 500


# ========== INTERPRETER ENDPOINTS ==========

@interpreter_api.route('/gloss', methods=['POST'])
def gloss():
    """
    Convert English text to ISL gloss.

    Request body:
        {
            'text': 'What is your name',
            'debug': false
        }

    Returns:
        {
            'gloss': 'YOUR NAME WHAT',
            'stages': {...}   # only when debug is set
        }
    """
    text, data = _text_from_request()
    if text is None:
        return jsonify({'success': False, 'error': 'text required'}), 400

    try:
        converter = _interpreter().converter
        response = {'gloss': converter.convert(text)}
        if data.get('debug'):
            response['stages'] = converter.trace(text)
        return jsonify(response)
    except Exception as e:
        return jsonify({'success': False, 'error': str(e)}), 500


@interpreter_api.route('/interpret', methods=['POST'])
def interpret():
    """
    Interpret a transcript into a sign video sequence.

    Unsupported sentences are not an HTTP error: the result carries
    ``matched: false`` and an ``error`` message for the user.
    """
    text, _ = _text_from_request()
    if text is None:
        return jsonify({'success': False, 'error': 'text required'}), 400

    try:
        return jsonify(_interpreter().interpret(text))
    except Exception as e:
        logger.error(f"Interpretation failed: {e}")
        return jsonify({'success': False, 'error': str(e)}), 500


# ========== WEBSOCKET HANDLERS ==========

def register_socketio_handlers(socketio, interpreter):
    """Register live transcript handlers with a SocketIO server."""

    @socketio.on('transcript')
    def handle_transcript(data):
        text = data.get('text') if isinstance(data, dict) else None
        if not isinstance(text, str):
            emit('interpretation_error', {'error': 'text required'})
            return

        try:
            emit('interpretation', interpreter.interpret(text))
        except Exception as e:
            logger.error(f"Live interpretation failed: {e}")
            emit('interpretation_error', {'error': str(e)})

    return socketio
