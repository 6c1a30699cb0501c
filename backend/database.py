# database.py
import aiosqlite
import json
import uuid
from datetime import datetime
import pytz

DATABASE_FILE = "" # This will be loaded from config

def configure_database(db_file: str):
    """Sets the database file path from the config."""
    global DATABASE_FILE
    DATABASE_FILE = db_file

async def initialize_db():
    """Creates the discovery_runs table if it doesn't exist."""
    async with aiosqlite.connect(DATABASE_FILE) as db:
        await db.execute('''
            CREATE TABLE IF NOT EXISTS discovery_runs (
                run_id TEXT PRIMARY KEY,
                kind TEXT NOT NULL,
                page_url TEXT NOT NULL,
                result TEXT NOT NULL,
                created_at TIMESTAMP NOT NULL
            )
        ''')
        await db.commit()

def _row_to_run(row) -> dict:
    run = dict(row)
    run['result'] = json.loads(run['result'])
    return run

async def save_discovery_run(kind: str, page_url: str, result: dict) -> str:
    """Stores one discovery result and returns its run id."""
    run_id = str(uuid.uuid4())
    now = datetime.now(pytz.utc).isoformat()
    async with aiosqlite.connect(DATABASE_FILE) as db:
        await db.execute(
            "INSERT INTO discovery_runs (run_id, kind, page_url, result, created_at) VALUES (?, ?, ?, ?, ?)",
            (run_id, kind, page_url, json.dumps(result), now)
        )
        await db.commit()
    return run_id

async def get_discovery_runs(limit: int = 50):
    async with aiosqlite.connect(DATABASE_FILE) as db:
        db.row_factory = aiosqlite.Row
        # rowid breaks ties between runs stored within the same timestamp
        async with db.execute(
            "SELECT * FROM discovery_runs ORDER BY created_at DESC, rowid DESC LIMIT ?", (limit,)
        ) as cursor:
            rows = await cursor.fetchall()
            return [_row_to_run(row) for row in rows]

async def get_discovery_run(run_id: str):
    async with aiosqlite.connect(DATABASE_FILE) as db:
        db.row_factory = aiosqlite.Row
        async with db.execute("SELECT * FROM discovery_runs WHERE run_id = ?", (run_id,)) as cursor:
            row = await cursor.fetchone()
            return _row_to_run(row) if row else None

async def get_latest_run(page_url: str, kind: str):
    """Most recent run of the given kind for a page, or None."""
    async with aiosqlite.connect(DATABASE_FILE) as db:
        db.row_factory = aiosqlite.Row
        async with db.execute(
            "SELECT * FROM discovery_runs WHERE page_url = ? AND kind = ? ORDER BY created_at DESC, rowid DESC LIMIT 1",
            (page_url, kind)
        ) as cursor:
            row = await cursor.fetchone()
            return _row_to_run(row) if row else None

async def clear_discovery_runs() -> int:
    async with aiosqlite.connect(DATABASE_FILE) as db:
        cursor = await db.execute("DELETE FROM discovery_runs")
        await db.commit()
        return cursor.rowcount
