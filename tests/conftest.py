import os
import tempfile
import pytest
import sqlite3
from menucard.cache import db as cache_db
from menucard.core import config

@pytest.fixture(autouse=True)
def setup_test_environment():
    """Setup test environment with mock settings"""
    # Store original values
    original_db_path = cache_db.DATABASE_PATH
    original_use_mock = config.settings.USE_MOCK
    
    # Create temporary database for tests
    temp_db = tempfile.NamedTemporaryFile(suffix='.sqlite', delete=False)
    temp_db_path = temp_db.name
    temp_db.close()
    
    # Override settings for tests - OCR is patched per test
    cache_db.DATABASE_PATH = temp_db_path
    config.settings.USE_MOCK = False
    
    # Initialize test database
    cache_db.init_db()
    
    yield
    
    # Restore original values
    cache_db.DATABASE_PATH = original_db_path
    config.settings.USE_MOCK = original_use_mock
    
    # Cleanup temporary database - close all connections first (Windows fix)
    try:
        conn = sqlite3.connect(temp_db_path)
        conn.close()
        
        import time
        time.sleep(0.1)
        
        if os.path.exists(temp_db_path):
            os.unlink(temp_db_path)
    except Exception:
        # If cleanup fails, it's not critical for tests
        pass
