import sqlite3
import os
from typing import Optional
from menucard.core.config import settings

DATABASE_PATH = settings.DATABASE_PATH

def init_db():
    """Initialize SQLite database with extraction cache table"""
    directory = os.path.dirname(DATABASE_PATH)
    if directory:
        os.makedirs(directory, exist_ok=True)
    
    with sqlite3.connect(DATABASE_PATH) as conn:
        conn.execute("""
            CREATE TABLE IF NOT EXISTS extraction_cache (
                image_digest TEXT NOT NULL PRIMARY KEY,
                payload TEXT NOT NULL,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)
        conn.execute("CREATE INDEX IF NOT EXISTS idx_extraction_created ON extraction_cache(created_at)")
        conn.commit()

def get(image_digest: str) -> Optional[str]:
    """Get cached extraction result for an image digest"""
    with sqlite3.connect(DATABASE_PATH) as conn:
        cursor = conn.execute(
            "SELECT payload FROM extraction_cache WHERE image_digest = ?",
            (image_digest,)
        )
        result = cursor.fetchone()
        return result[0] if result else None

def set(image_digest: str, payload: str):
    """Cache extraction result for an image digest"""
    with sqlite3.connect(DATABASE_PATH) as conn:
        conn.execute(
            "INSERT OR REPLACE INTO extraction_cache (image_digest, payload, created_at) "
            "VALUES (?, ?, CURRENT_TIMESTAMP)",
            (image_digest, payload)
        )
        conn.commit()

def purge_old(ttl_hours: int):
    """Remove cache entries older than ttl_hours"""
    with sqlite3.connect(DATABASE_PATH) as conn:
        conn.execute(
            "DELETE FROM extraction_cache WHERE created_at < datetime('now', ?)",
            (f"-{int(ttl_hours)} hours",)
        )
        conn.commit()

def clear_all():
    """Clear all cache entries"""
    with sqlite3.connect(DATABASE_PATH) as conn:
        conn.execute("DELETE FROM extraction_cache")
        conn.commit()

def get_stats() -> dict:
    """Get cache statistics"""
    with sqlite3.connect(DATABASE_PATH) as conn:
        cursor = conn.execute("SELECT COUNT(*) FROM extraction_cache")
        total_entries = cursor.fetchone()[0]
        
        cursor = conn.execute(
            "SELECT COUNT(*) FROM extraction_cache WHERE created_at >= datetime('now', ?)",
            (f"-{int(settings.CACHE_TTL_HOURS)} hours",)
        )
        fresh_entries = cursor.fetchone()[0]
        
        return {
            "total_entries": total_entries,
            "fresh_entries": fresh_entries,
            "ttl_hours": settings.CACHE_TTL_HOURS,
            "database_path": DATABASE_PATH
        }
