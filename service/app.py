"""
ISL Interpreter Service
Serves sign metadata and turns speech transcripts into sign video sequences.
"""

import logging

from islbridge import config
from islbridge.server import create_app

# Configure logging
logging.basicConfig(
    level=config.LOGGING['level'],
    format=config.LOGGING['format'],
    datefmt=config.LOGGING['date_format']
)
logger = logging.getLogger(__name__)

app, socketio = create_app()

if __name__ == '__main__':
    port = config.SERVER_CONFIG['port']
    prefix = config.SERVER_CONFIG['api_prefix']

    logger.info("=" * 60)
    logger.info("Starting ISL Interpreter Service")
    logger.info("=" * 60)
    logger.info(f"Port: {port}")
    logger.info(f"Endpoints:")
    logger.info(f"  Health:     http://localhost:{port}/health")
    logger.info(f"  Status:     http://localhost:{port}/status")
    logger.info(f"  Signs:      http://localhost:{port}{prefix}/signs/<word>")
    logger.info(f"  Interpret:  http://localhost:{port}{prefix}/interpret")
    logger.info("=" * 60)

    socketio.run(
        app,
        host=config.SERVER_CONFIG['host'],
        port=port,
        debug=config.SERVER_CONFIG['debug'],
        allow_unsafe_werkzeug=True
    )
