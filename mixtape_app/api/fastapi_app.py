from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mixtape_app import config
from mixtape_app.api.auth.routes import router as auth_router
from mixtape_app.api.errors import register_error_handlers
from mixtape_app.api.health import router as health_router
from mixtape_app.api.mixtapes.routes import router as mixtapes_router
from mixtape_app.api.music.routes import router as music_router
from mixtape_app.api.music.routes import spotify_router
from mixtape_app.core import configure_logging

configure_logging()

app = FastAPI(
    title="Mixtape API",
    version="0.1.0",
    description="Backend API for creating and sharing digital mixtapes.",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ALLOW_ORIGINS,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

register_error_handlers(app)

app.include_router(health_router, tags=["health"])

# Mixtape routes
app.include_router(mixtapes_router, prefix="/mixtapes", tags=["mixtapes"])

# Music search routes
app.include_router(music_router, prefix="/music", tags=["music"])
app.include_router(spotify_router, prefix="/spotify", tags=["music"])

# Auth routes
app.include_router(auth_router, prefix="/auth", tags=["auth"])
