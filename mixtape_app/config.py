from dotenv import load_dotenv
import os

load_dotenv()

# Base & storage directories
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
DATA_DIR = os.getenv("MIXTAPE_DATA_DIR", os.path.join(BASE_DIR, "data"))

# Mixtape store backend: "json" (local file), "memory" or "firestore"
MIXTAPE_STORE_BACKEND = os.getenv("MIXTAPE_STORE_BACKEND", "json")
MIXTAPE_STORE_FILE = os.getenv(
    "MIXTAPE_STORE_FILE", os.path.join(DATA_DIR, "mixtapes.json")
)
MIXTAPES_COLLECTION = "mixtapes"

# Firebase service account, base64-encoded JSON (REQUIRED for firestore/auth)
FIREBASE_SERVICE_ACCOUNT_KEY = os.getenv("FIREBASE_SERVICE_ACCOUNT_KEY", "")

# Spotify credentials (client-credentials flow)
SPOTIFY_CLIENT_ID = os.getenv("SPOTIFY_CLIENT_ID")
SPOTIFY_CLIENT_SECRET = os.getenv("SPOTIFY_CLIENT_SECRET")

# YouTube Data API / Apple Music
YOUTUBE_API_KEY = os.getenv("YOUTUBE_API_KEY")
APPLE_MUSIC_TOKEN = os.getenv("APPLE_MUSIC_TOKEN")
APPLE_MUSIC_STOREFRONT = os.getenv("APPLE_MUSIC_STOREFRONT", "us")

# API constants
SPOTIFY_TOKEN_URL = "https://accounts.spotify.com/api/token"
SPOTIFY_API_BASE = "https://api.spotify.com/v1"
YOUTUBE_API_BASE = "https://www.googleapis.com/youtube/v3"
APPLE_MUSIC_API_BASE = "https://api.music.apple.com/v1"

# Seconds subtracted from the issued token lifetime
SPOTIFY_TOKEN_SAFETY_MARGIN = int(os.getenv("SPOTIFY_TOKEN_SAFETY_MARGIN", "60"))

HTTP_TIMEOUT_SECONDS = float(os.getenv("HTTP_TIMEOUT_SECONDS", "10"))

# Max results returned per search, no pagination
SEARCH_LIMITS = {
    "spotify": 20,
    "youtube": 10,
    "applemusic": 10,
}

CORS_ALLOW_ORIGINS = ["*"]
