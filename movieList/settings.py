from pathlib import Path
import os
from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent

# Load environment variables
load_dotenv(BASE_DIR / "secret.env")

TMDB_API_KEY     = os.getenv("TMDB_API_KEY")
YOUTUBE_API_KEY  = os.getenv("YOUTUBE_API_KEY")

# API base URLs
TMDB_BASE_URL       = os.getenv("TMDB_BASE_URL", "https://api.themoviedb.org/3")
YOUTUBE_SEARCH_URL  = os.getenv("YOUTUBE_SEARCH_URL", "https://www.googleapis.com/youtube/v3/search")
TMDB_IMAGE_BASE_URL = os.getenv("TMDB_IMAGE_BASE_URL", "https://image.tmdb.org/t/p/w500")
YOUTUBE_WATCH_URL   = "https://www.youtube.com/watch?v="
YOUTUBE_EMBED_URL   = "https://www.youtube.com/embed/"

# Networking / UI timing
HTTP_TIMEOUT_SECONDS    = float(os.getenv("HTTP_TIMEOUT_SECONDS", "10"))
SEARCH_DEBOUNCE_SECONDS = float(os.getenv("SEARCH_DEBOUNCE_SECONDS", "0.5"))

# File paths
BOOKMARKS_PATH = Path(os.getenv("MOVIELIST_BOOKMARKS_PATH", BASE_DIR / "my_list.json"))
BOOKMARKS_KEY  = "ListedMovies"
LOG_PATH       = Path(os.getenv("MOVIELIST_LOG_PATH", BASE_DIR / "movielist_debug.log"))
