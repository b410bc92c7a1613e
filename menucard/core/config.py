import os
from typing import List, Optional

class Settings:
    # Database
    DATABASE_PATH: str = os.getenv("DATABASE_PATH", "data/cache.sqlite")
    
    # Google Cloud Vision credentials (falls back to GOOGLE_APPLICATION_CREDENTIALS when unset)
    GOOGLE_CLOUD_PROJECT_ID: Optional[str] = os.getenv("GOOGLE_CLOUD_PROJECT_ID")
    GOOGLE_CLOUD_CLIENT_EMAIL: Optional[str] = os.getenv("GOOGLE_CLOUD_CLIENT_EMAIL")
    GOOGLE_CLOUD_PRIVATE_KEY: Optional[str] = (
        os.getenv("GOOGLE_CLOUD_PRIVATE_KEY", "").replace("\\n", "\n") or None
    )
    
    # Development
    USE_MOCK: bool = os.getenv("USE_MOCK", "0").lower() in ("1", "true", "yes")
    
    # OCR
    OCR_TIMEOUT_SECONDS: int = int(os.getenv("OCR_TIMEOUT_SECONDS", "30"))
    MAX_IMAGE_BYTES: int = int(os.getenv("MAX_IMAGE_BYTES", str(10 * 1024 * 1024)))
    
    # Cache TTL in hours
    CACHE_TTL_HOURS: int = int(os.getenv("CACHE_TTL_HOURS", "24"))

    # CORS
    CORS_ALLOW_ORIGINS: List[str] = [
        origin.strip() for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",") if origin.strip()
    ]

settings = Settings()
