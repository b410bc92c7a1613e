from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from menucard.api.routes import router
from menucard.cache import db as cache_db
from menucard.core.config import settings

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.
    Initialize resources on startup, cleanup on shutdown.
    """
    # Startup
    print("Initializing Menu Card Extractor...")
    cache_db.init_db()
    print("Database initialized successfully")
    
    yield
    
    # Shutdown
    print("Shutting down Menu Card Extractor...")

app = FastAPI(
    title="Menu Card Extractor",
    description="API for turning photographed restaurant menus into structured menu items",
    version="1.0.0",
    lifespan=lifespan
)

# The admin dashboard uploads from the browser
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_methods=["POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)

# Include API routes
app.include_router(router)

@app.get("/")
async def root():
    """Root endpoint with basic info"""
    return {
        "service": "Menu Card Extractor",
        "version": "1.0.0",
        "endpoints": {
            "extract_menu": "POST /extract-menu",
            "debug_parse": "POST /debug-parse",
            "health": "GET /health",
            "cache_stats": "GET /cache/stats"
        }
    }
