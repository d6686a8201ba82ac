import sqlite3
import json
import logging

from . import config

logger = logging.getLogger(__name__)

DB_PATH = config.PATHS['signs_db']

SIGN_COLUMNS = 'id, word, video_url, duration_ms, dominant_hand'


def get_db_connection(db_path=None):
    """Get a connection to the SQLite database."""
    conn = sqlite3.connect(db_path or DB_PATH)
    conn.row_factory = sqlite3.Row
    return conn


def _sign_to_dict(row):
    """Convert a signs row to the field names the front-end uses."""
    return {
        'id': row['id'],
        'word': row['word'],
        'videoUrl': row['video_url'],
        'durationMs': row['duration_ms'],
        'dominantHand': row['dominant_hand'],
    }


def init_db(db_path=None):
    """Initialize the database with required tables."""
    conn = get_db_connection(db_path)
    cursor = conn.cursor()

    # Create signs table
    cursor.execute('''
        CREATE TABLE IF NOT EXISTS signs (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            word TEXT NOT NULL UNIQUE,
            video_url TEXT NOT NULL,
            duration_ms INTEGER,
            dominant_hand TEXT DEFAULT 'RIGHT',
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        )
    ''')

    # Create supported_sentences table
    cursor.execute('''
        CREATE TABLE IF NOT EXISTS supported_sentences (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            gloss TEXT NOT NULL UNIQUE,
            words TEXT NOT NULL,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        )
    ''')

    conn.commit()
    conn.close()
    logger.info("Database initialized successfully")


def add_sign(word, video_url, duration_ms=None, dominant_hand='RIGHT', db_path=None):
    """Add a new sign to the database. Returns None if the word exists."""
    conn = get_db_connection(db_path)
    cursor = conn.cursor()

    try:
        cursor.execute('''
            INSERT INTO signs (word, video_url, duration_ms, dominant_hand)
            VALUES (?, ?, ?, ?)
        ''', (word.upper(), video_url, duration_ms, dominant_hand))
        conn.commit()
        return cursor.lastrowid
    except sqlite3.IntegrityError:
        logger.warning(f"Sign '{word}' already exists")
        return None
    finally:
        conn.close()


def get_all_signs(db_path=None):
    """Get all signs from the database."""
    conn = get_db_connection(db_path)
    cursor = conn.cursor()
    cursor.execute(f'SELECT {SIGN_COLUMNS} FROM signs ORDER BY word')
    signs = cursor.fetchall()
    conn.close()
    return [_sign_to_dict(sign) for sign in signs]


def get_sign_by_word(word, db_path=None):
    """Get a sign by word (case-insensitive)."""
    conn = get_db_connection(db_path)
    cursor = conn.cursor()
    cursor.execute(f'SELECT {SIGN_COLUMNS} FROM signs WHERE word = ?', (word.strip().upper(),))
    sign = cursor.fetchone()
    conn.close()
    return _sign_to_dict(sign) if sign else None


def get_sign_stats(db_path=None):
    """Get summary stats about available signs."""
    conn = get_db_connection(db_path)
    cursor = conn.cursor()

    try:
        cursor.execute('SELECT COUNT(*) FROM signs')
        total = cursor.fetchone()[0]

        cursor.execute('SELECT dominant_hand, COUNT(*) FROM signs GROUP BY dominant_hand')
        by_hand = {row[0]: row[1] for row in cursor.fetchall()}

        cursor.execute('SELECT COUNT(*) FROM supported_sentences')
        sentences = cursor.fetchone()[0]

        return {
            'total_signs': total,
            'by_dominant_hand': by_hand,
            'supported_sentences': sentences
        }
    finally:
        conn.close()


def import_signs_from_json(json_path, db_path=None):
    """
    Load signs from a JSON export into the database.

    The file is a list of ``{word, videoUrl, durationMs, dominantHand}``
    objects, as written by ``scripts/import_wlasl.py``.

    Returns:
        Tuple of (imported, skipped) counts
    """
    with open(json_path, 'r', encoding='utf-8') as f:
        entries = json.load(f)

    imported = 0
    skipped = 0

    for entry in entries:
        word = entry.get('word')
        video_url = entry.get('videoUrl')
        if not word or not video_url:
            skipped += 1
            continue

        sign_id = add_sign(
            word,
            video_url,
            duration_ms=entry.get('durationMs'),
            dominant_hand=entry.get('dominantHand') or 'RIGHT',
            db_path=db_path
        )
        if sign_id is None:
            skipped += 1
        else:
            imported += 1

    logger.info(f"Loaded {imported} signs from {json_path} ({skipped} skipped)")
    return imported, skipped


# ============================================================================
# SUPPORTED SENTENCES
# ============================================================================

def add_supported_sentence(gloss, words, db_path=None):
    """Add a supported gloss sentence and the sign words it plays."""
    conn = get_db_connection(db_path)
    cursor = conn.cursor()

    gloss = ' '.join(gloss.split()).upper()
    words_json = json.dumps([w.upper() for w in words])

    try:
        cursor.execute('''
            INSERT INTO supported_sentences (gloss, words)
            VALUES (?, ?)
        ''', (gloss, words_json))
        conn.commit()
        return cursor.lastrowid
    except sqlite3.IntegrityError:
        logger.warning(f"Supported sentence '{gloss}' already exists")
        return None
    finally:
        conn.close()


def get_supported_sentences(db_path=None):
    """Get all supported sentences as ``{'gloss', 'words'}`` dicts."""
    conn = get_db_connection(db_path)
    cursor = conn.cursor()
    cursor.execute('SELECT gloss, words FROM supported_sentences ORDER BY id')
    rows = cursor.fetchall()
    conn.close()

    return [
        {'gloss': row['gloss'], 'words': json.loads(row['words'])}
        for row in rows
    ]


def seed_supported_sentences(sentences, db_path=None):
    """
    Insert a catalog of supported sentences, skipping existing ones.

    Args:
        sentences: Iterable of SupportedSentence

    Returns:
        Number of sentences inserted
    """
    inserted = 0
    for sentence in sentences:
        if add_supported_sentence(sentence.gloss, sentence.words, db_path=db_path) is not None:
            inserted += 1
    return inserted
