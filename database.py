import sqlite3
import uuid
from contextlib import closing
from datetime import datetime, timezone
from flask import current_app, g


def get_db():
    """
    Opens a new database connection if there is none yet for the
    current application context.
    """
    if 'db' not in g:
        # Increase timeout to 30s to prevent 'Database is locked' errors under load
        g.db = sqlite3.connect(current_app.config['DB_PATH'], timeout=30)
        g.db.row_factory = sqlite3.Row
        # sqlite leaves foreign keys off unless asked per connection
        g.db.execute('PRAGMA foreign_keys = ON')
    return g.db


def close_db(e=None):
    """Registered as an app-context teardown so every request releases its connection."""
    db = g.pop('db', None)
    if db is not None:
        db.close()


def init_db(path):
    """
    Initializes the database with the required schema.
    Run this once (or on app startup) to ensure tables exist.
    """
    with closing(sqlite3.connect(path)) as conn:
        c = conn.cursor()

        # 1. USERS TABLE
        c.execute('''CREATE TABLE IF NOT EXISTS users (
            id TEXT PRIMARY KEY,
            created_at TEXT NOT NULL,
            updated_at TEXT NOT NULL,
            email TEXT NOT NULL UNIQUE
        )''')

        # 2. CHIRPS TABLE
        # Chirps go away with their author.
        c.execute('''CREATE TABLE IF NOT EXISTS chirps (
            id TEXT PRIMARY KEY,
            created_at TEXT NOT NULL,
            updated_at TEXT NOT NULL,
            body TEXT NOT NULL,
            user_id TEXT NOT NULL,
            FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE
        )''')

        conn.commit()
    current_app.logger.info("Database initialized at %s", path)


def _timestamp():
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def create_user(email):
    """Inserts a user and returns it as a dict. Duplicate emails raise sqlite3.IntegrityError."""
    db = get_db()
    now = _timestamp()
    user = {"id": str(uuid.uuid4()), "created_at": now, "updated_at": now, "email": email}
    db.execute('INSERT INTO users (id, created_at, updated_at, email) VALUES (?, ?, ?, ?)',
               (user["id"], user["created_at"], user["updated_at"], user["email"]))
    db.commit()
    return user


def create_chirp(body, user_id):
    db = get_db()
    now = _timestamp()
    chirp = {"id": str(uuid.uuid4()), "created_at": now, "updated_at": now,
             "body": body, "user_id": user_id}
    db.execute('INSERT INTO chirps (id, created_at, updated_at, body, user_id) VALUES (?, ?, ?, ?, ?)',
               (chirp["id"], chirp["created_at"], chirp["updated_at"], chirp["body"], chirp["user_id"]))
    db.commit()
    return chirp


def delete_users():
    """Removes every user, and through the cascade every chirp. Returns the number of users removed."""
    db = get_db()
    with db:  # Context manager automatically handles transactions
        cur = db.execute('DELETE FROM users')
    return cur.rowcount
