"""
Shared configuration for the ISL interpreter service.

Centralised settings used by the API, the sign store and the sequencer so
that the web service and the import scripts agree on paths and timings.
"""

import os
from pathlib import Path

# Environment Detection
# Production when a deployment marker is set, local development otherwise
_is_production = (
    os.getenv('ISL_ENV') == 'production'
    or os.getenv('RAILWAY_ENVIRONMENT') is not None
)
_base_dir = Path(os.getenv('ISL_BASE_DIR', Path(__file__).parent.parent))

# Web Service Configuration
SERVER_CONFIG = {
    # Port for the Flask/SocketIO server
    'port': int(os.getenv('ISL_PORT', os.getenv('PORT', '3000'))),

    # Bind address
    'host': os.getenv('ISL_HOST', '0.0.0.0'),

    # Flask secret (sessions, socketio)
    'secret_key': os.getenv('SECRET_KEY', 'dev-secret-key'),

    # Debug mode is never enabled in production
    'debug': not _is_production and os.getenv('FLASK_ENV') != 'production',

    # URL prefix for the interpreter blueprint
    'api_prefix': '/api',
}

# CORS - the browser front-end calls us directly
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv(
        'ISL_CORS_ORIGINS',
        'http://localhost:5173,http://localhost:3000'
    ).split(',')
    if origin.strip()
]

# Sign Video Cache Configuration
CACHE_CONFIG = {
    # Maximum number of preloaded video URLs kept (LRU)
    'max_videos': int(os.getenv('ISL_CACHE_SIZE', '50')),
}

# Playback Timing Configuration (milliseconds)
TIMING_CONFIG = {
    # Used when a sign has no recorded duration
    'default_sign_duration_ms': 1500,

    # Gap between two consecutive sign videos
    'transition_ms': 300,
}

# Directory Paths
if _is_production:
    PATHS = {
        'data_dir': str(_base_dir / 'data'),
        'signs_db': os.getenv('ISL_DB_PATH', str(_base_dir / 'data' / 'isl_signs.db')),
        'signs_json': str(_base_dir / 'data' / 'signs.json'),
        'videos_dir': str(_base_dir / 'public' / 'videos'),
    }
else:
    PATHS = {
        'data_dir': str(_base_dir / 'data'),
        'signs_db': os.getenv('ISL_DB_PATH', 'isl_signs.db'),
        'signs_json': str(_base_dir / 'data' / 'signs.json'),
        'videos_dir': str(_base_dir / 'public' / 'videos'),
    }

# Base URL that locally served sign videos are published under
VIDEO_BASE_URL = os.getenv('ISL_VIDEO_BASE_URL', 'http://localhost:3000/videos')

# Logging Configuration
LOGGING = {
    'level': os.getenv('ISL_LOG_LEVEL', 'INFO'),  # DEBUG, INFO, WARNING, ERROR
    'format': '[ISL] %(asctime)s [%(levelname)s] %(name)s: %(message)s',
    'date_format': '%Y-%m-%d %H:%M:%S',
}
